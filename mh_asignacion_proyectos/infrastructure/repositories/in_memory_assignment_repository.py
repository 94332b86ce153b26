from typing import List

from ...domain.models.assignment import Assignment
from ...domain.repositories.assignment_repository import AssignmentRepository


class InMemoryAssignmentRepository(AssignmentRepository):
    """Implementación en memoria del repositorio de asignaciones."""
    
    def __init__(self, assignments: List[Assignment] = None):
        self.assignments: List[Assignment] = [a.clone() for a in assignments or []]
    
    def get_all(self) -> List[Assignment]:
        """Obtener copias de todas las asignaciones."""
        return [a.clone() for a in self.assignments]
    
    def replace_all(self, assignments: List[Assignment]) -> None:
        self.assignments = [a.clone() for a in assignments]
    
    def get_by_project(self, project_id: str) -> List[Assignment]:
        return [a.clone() for a in self.assignments if a.project_id == project_id]
