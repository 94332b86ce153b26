import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.optimization_result import OptimizationResult
from mh_asignacion_proyectos.domain.models.optimization_summary import (
    EmployeeUtilization,
    OptimizationSummary,
    ProjectCoverage,
    ProjectEmployeeHours,
    SkillMatch,
    SkillMatchEmployee,
)
from mh_asignacion_proyectos.domain.models.project import Project
from mh_asignacion_proyectos.domain.value_objects.proficiency_level import ProficiencyLevel

logger = logging.getLogger(__name__)


class OptimizationSummaryBuilder:
    """Transforma una solución en estadísticas de utilización, cobertura y habilidades.
    
    Es una transformación de presentación: no modifica la solución ni depende de
    estado previo, así que dos llamadas con la misma entrada dan el mismo resumen.
    """
    
    def __init__(self, employees: Iterable[Employee], projects: Iterable[Project]):
        self.employees: Dict[str, Employee] = {e.id: e for e in employees}
        self.projects: List[Project] = list(projects)
    
    def build(self,
              assignments: Sequence[Assignment],
              fitness: float,
              unassigned_projects: Optional[Sequence[str]] = None) -> OptimizationSummary:
        employee_hours: Dict[str, float] = defaultdict(float)
        project_assignments: Dict[str, List[Assignment]] = defaultdict(list)
        for assignment in assignments:
            employee_hours[assignment.employee_id] += assignment.hours
            project_assignments[assignment.project_id].append(assignment)
        
        utilization_rows = self._employee_utilization(employee_hours)
        skill_matches = self._skill_matches(project_assignments)
        total_requirements = len(skill_matches)
        matched_requirements = sum(1 for match in skill_matches if match.matched)
        
        summary = OptimizationSummary(
            fitness=fitness,
            total_assignments=len(assignments),
            employee_utilization=utilization_rows,
            project_coverage=self._project_coverage(project_assignments),
            skill_matches=skill_matches,
            unassigned_projects=list(unassigned_projects or []),
            overall_utilization=self._overall_utilization(employee_hours),
            total_overtime=sum(row.overtime for row in utilization_rows),
            skill_coverage=(100.0 * matched_requirements / total_requirements) if total_requirements else 100.0
        )
        logger.debug(f"Resumen generado: {summary.total_assignments} asignaciones, "
                     f"utilización global {summary.overall_utilization:.1f}%")
        return summary
    
    def build_from_result(self, result: OptimizationResult) -> OptimizationSummary:
        return self.build(result.solution.assignments, result.fitness, result.unassigned_projects)
    
    def _employee_utilization(self, employee_hours: Dict[str, float]) -> List[EmployeeUtilization]:
        rows = []
        for emp_id, hours in employee_hours.items():
            employee = self.employees.get(emp_id)
            capacity = employee.available_capacity if employee else 0.0
            rows.append(EmployeeUtilization(
                employee_id=emp_id,
                employee=employee.name if employee else emp_id,
                hours=hours,
                max_hours=employee.max_hours if employee else 0.0,
                utilization=(hours / capacity * 100.0) if capacity > 0 else 0.0,
                overtime=max(0.0, hours - capacity)
            ))
        return rows
    
    def _project_coverage(self, project_assignments: Dict[str, List[Assignment]]) -> List[ProjectCoverage]:
        project_names = {p.id: p.name for p in self.projects}
        rows = []
        for project_id, assigned in project_assignments.items():
            rows.append(ProjectCoverage(
                project_id=project_id,
                project=project_names.get(project_id, project_id),
                assigned_employees=len(assigned),
                total_hours=sum(a.hours for a in assigned),
                employees=[
                    ProjectEmployeeHours(
                        employee_id=a.employee_id,
                        name=self.employees[a.employee_id].name if a.employee_id in self.employees else a.employee_id,
                        hours=a.hours
                    )
                    for a in assigned
                ]
            ))
        return rows
    
    def _skill_matches(self, project_assignments: Dict[str, List[Assignment]]) -> List[SkillMatch]:
        matches = []
        for project in self.projects:
            assigned = project_assignments.get(project.id, [])
            for skill in project.required_skills:
                matched_employees: Dict[str, SkillMatchEmployee] = {}
                for assignment in assigned:
                    employee = self.employees.get(assignment.employee_id)
                    if employee is None or not employee.has_skill(skill):
                        continue
                    matched_employees.setdefault(employee.id, SkillMatchEmployee(
                        name=employee.name,
                        level=ProficiencyLevel(employee.skill_level(skill)).to_string()
                    ))
                matches.append(SkillMatch(
                    project_id=project.id,
                    project=project.name,
                    skill=skill,
                    matched=bool(matched_employees),
                    employees=list(matched_employees.values())
                ))
        return matches
    
    def _overall_utilization(self, employee_hours: Dict[str, float]) -> float:
        """Horas usadas (topadas por capacidad) sobre la capacidad total, en porcentaje."""
        total_capacity = sum(e.available_capacity for e in self.employees.values())
        if total_capacity <= 0:
            return 0.0
        total_used = sum(
            min(employee_hours.get(e.id, 0.0), e.available_capacity)
            for e in self.employees.values()
        )
        return 100.0 * total_used / total_capacity
