from datetime import date
from typing import List, Optional, Dict

from ...domain.models.project import Project
from ...domain.repositories.project_repository import ProjectRepository


class InMemoryProjectRepository(ProjectRepository):
    """Implementación en memoria del repositorio de proyectos para pruebas y desarrollo."""
    
    def __init__(self, projects: List[Project] = None):
        self.projects: Dict[str, Project] = {}
        for project in projects or []:
            self.save(project)
    
    def get_by_id(self, project_id: str) -> Optional[Project]:
        """Obtener un proyecto por su ID."""
        return self.projects.get(project_id)
    
    def get_all(self) -> List[Project]:
        """Obtener todos los proyectos."""
        return list(self.projects.values())
    
    def save(self, project: Project) -> Project:
        """Guardar un proyecto (crear o actualizar)."""
        self.projects[project.id] = project
        return project
    
    def delete(self, project_id: str) -> None:
        """Eliminar un proyecto."""
        if project_id in self.projects:
            del self.projects[project_id]
    
    def get_projects_by_period(self, start_date: date, end_date: date) -> List[Project]:
        """Proyectos cuyo intervalo [inicio, término] se cruza con el rango dado."""
        return [
            project for project in self.projects.values()
            if project.start_date <= end_date and project.end_date >= start_date
        ]
