from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from mh_asignacion_proyectos.domain.models.project import Project


class ProjectRepository(ABC):
    """Interfaz de repositorio para entidades Proyecto."""
    
    @abstractmethod
    def get_by_id(self, project_id: str) -> Optional[Project]:
        """Obtener un proyecto por su ID."""
        pass
    
    @abstractmethod
    def get_all(self) -> List[Project]:
        """Obtener todos los proyectos."""
        pass
    
    @abstractmethod
    def save(self, project: Project) -> Project:
        """Guardar un proyecto (crear o actualizar)."""
        pass
    
    @abstractmethod
    def delete(self, project_id: str) -> None:
        """Eliminar un proyecto."""
        pass
    
    @abstractmethod
    def get_projects_by_period(self, start_date: date, end_date: date) -> List[Project]:
        """Obtener los proyectos activos en algún momento del rango de fechas."""
        pass
