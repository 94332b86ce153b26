from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Union

from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.project import Project
from mh_asignacion_proyectos.domain.models.solution import Solution


@dataclass(frozen=True)
class FitnessWeights:
    """Pesos de la función objetivo aditiva (recompensas menos penalizaciones)."""
    overtime_penalty: float = 100.0
    utilization_reward: float = 50.0
    skill_reward: float = 25.0
    missing_skill_penalty: float = 200.0
    coverage_reward: float = 30.0
    distinct_employee_reward: float = 10.0


Candidate = Union[Solution, Sequence[Assignment]]


class FitnessEvaluator:
    """Evalúa soluciones candidatas contra los objetivos de capacidad, habilidades y cobertura.
    
    La evaluación es una función pura de la candidata y de los conjuntos fijos de
    empleados y proyectos: no mantiene estado ni usa aleatoriedad, por lo que puede
    invocarse desde varios hilos a la vez.
    """
    
    def __init__(self,
                 employees: Iterable[Employee],
                 projects: Iterable[Project],
                 weights: FitnessWeights = None):
        self.employees: Dict[str, Employee] = {e.id: e for e in employees}
        self.projects: List[Project] = list(projects)
        self.weights = weights or FitnessWeights()
    
    def score(self, candidate: Candidate) -> float:
        """Calcula el fitness de una candidata (puede ser negativo)."""
        assignments = candidate.assignments if isinstance(candidate, Solution) else candidate
        w = self.weights
        reward = 0.0
        penalty = 0.0
        
        employee_hours: Dict[str, float] = defaultdict(float)
        project_assignments: Dict[str, List[Assignment]] = defaultdict(list)
        for assignment in assignments:
            employee_hours[assignment.employee_id] += assignment.hours
            project_assignments[assignment.project_id].append(assignment)
        
        # Capacidad: penalización por horas extra, recompensa lineal por utilización
        for emp_id, hours in employee_hours.items():
            employee = self.employees.get(emp_id)
            if employee is None:
                continue
            capacity = employee.available_capacity
            if hours > capacity:
                penalty += (hours - capacity) * w.overtime_penalty
            elif hours > 0:
                reward += (hours / capacity) * w.utilization_reward
        
        # Habilidades y cobertura por proyecto
        for project in self.projects:
            assigned = project_assignments.get(project.id, [])
            for skill in project.required_skills:
                max_level = 0
                for assignment in assigned:
                    employee = self.employees.get(assignment.employee_id)
                    if employee is not None:
                        max_level = max(max_level, employee.skill_level(skill))
                reward += max_level * w.skill_reward
                if max_level == 0:
                    penalty += w.missing_skill_penalty
            
            if sum(a.hours for a in assigned) > 0:
                reward += w.coverage_reward
        
        distinct_employees = len({a.employee_id for a in assignments})
        reward += distinct_employees * w.distinct_employee_reward
        
        return reward - penalty
    
    def __call__(self, candidate: Candidate) -> float:
        return self.score(candidate)
