from abc import ABC, abstractmethod
from typing import List

from mh_asignacion_proyectos.domain.models.assignment import Assignment


class AssignmentRepository(ABC):
    """Interfaz de repositorio para las asignaciones vigentes."""
    
    @abstractmethod
    def get_all(self) -> List[Assignment]:
        """Obtener todas las asignaciones."""
        pass
    
    @abstractmethod
    def replace_all(self, assignments: List[Assignment]) -> None:
        """Reemplazar las asignaciones vigentes (por ejemplo, al aplicar una solución)."""
        pass
    
    @abstractmethod
    def get_by_project(self, project_id: str) -> List[Assignment]:
        """Obtener las asignaciones de un proyecto."""
        pass
