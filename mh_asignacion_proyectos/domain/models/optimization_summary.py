from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List


@dataclass
class EmployeeUtilization:
    employee_id: str
    employee: str
    hours: float
    max_hours: float
    utilization: float
    overtime: float
    
    @property
    def utilization_label(self) -> str:
        return f"{self.utilization:.1f}%"


@dataclass
class ProjectEmployeeHours:
    employee_id: str
    name: str
    hours: float


@dataclass
class ProjectCoverage:
    project_id: str
    project: str
    assigned_employees: int
    total_hours: float
    employees: List[ProjectEmployeeHours] = field(default_factory=list)


@dataclass
class SkillMatchEmployee:
    name: str
    level: str


@dataclass
class SkillMatch:
    project_id: str
    project: str
    skill: str
    matched: bool
    employees: List[SkillMatchEmployee] = field(default_factory=list)


@dataclass
class OptimizationSummary:
    """Estadísticas legibles de una solución: utilización, cobertura y habilidades."""
    
    fitness: float
    total_assignments: int
    employee_utilization: List[EmployeeUtilization] = field(default_factory=list)
    project_coverage: List[ProjectCoverage] = field(default_factory=list)
    skill_matches: List[SkillMatch] = field(default_factory=list)
    unassigned_projects: List[str] = field(default_factory=list)
    overall_utilization: float = 0.0
    total_overtime: float = 0.0
    skill_coverage: float = 0.0
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "fitness": self.fitness,
            "totalAssignments": self.total_assignments,
            "employeeUtilization": [
                {
                    "employeeId": row.employee_id,
                    "employee": row.employee,
                    "hours": row.hours,
                    "maxHours": row.max_hours,
                    "utilization": row.utilization_label,
                    "overtime": row.overtime
                }
                for row in self.employee_utilization
            ],
            "projectCoverage": [
                {
                    "projectId": row.project_id,
                    "project": row.project,
                    "assignedEmployees": row.assigned_employees,
                    "totalHours": row.total_hours,
                    "employees": [
                        {"employeeId": e.employee_id, "name": e.name, "hours": e.hours}
                        for e in row.employees
                    ]
                }
                for row in self.project_coverage
            ],
            "skillMatches": [
                {
                    "projectId": match.project_id,
                    "project": match.project,
                    "skill": match.skill,
                    "matched": match.matched,
                    "employees": [asdict(e) for e in match.employees]
                }
                for match in self.skill_matches
            ],
            "unassignedProjects": list(self.unassigned_projects),
            "overallUtilization": self.overall_utilization,
            "totalOvertime": self.total_overtime,
            "skillCoverage": self.skill_coverage
        }
