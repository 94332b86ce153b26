from dataclasses import dataclass, field
from typing import Dict, List

from mh_asignacion_proyectos.domain.models.assignment import Assignment


@dataclass
class Solution:
    """Representa una solución candidata: una secuencia ordenada de asignaciones."""
    
    assignments: List[Assignment] = field(
        default_factory=list,
        metadata={
            "description": "Lista de asignaciones empleado-proyecto que conforman la solución"
        }
    )
    fitness_score: float = field(
        default=0.0,
        metadata={
            "description": "Puntuación de aptitud de la solución (más alto es mejor)"
        }
    )
    
    def add_assignment(self, assignment: Assignment) -> None:
        """Añadir una asignación a la solución."""
        self.assignments.append(assignment)
    
    def get_employee_hours(self) -> Dict[str, float]:
        """Horas totales asignadas por empleado."""
        hours: Dict[str, float] = {}
        for a in self.assignments:
            hours[a.employee_id] = hours.get(a.employee_id, 0.0) + a.hours
        return hours
    
    def get_project_assignments(self, project_id: str) -> List[Assignment]:
        """Obtener las asignaciones de un proyecto específico."""
        return [a for a in self.assignments if a.project_id == project_id]
    
    def get_project_ids(self) -> List[str]:
        """Proyectos referenciados, en orden de primera aparición."""
        return list(dict.fromkeys(a.project_id for a in self.assignments))
    
    def clone(self) -> 'Solution':
        """Crear una copia profunda de la solución."""
        return Solution(
            assignments=[a.clone() for a in self.assignments],
            fitness_score=self.fitness_score
        )
    
    def __len__(self) -> int:
        return len(self.assignments)
