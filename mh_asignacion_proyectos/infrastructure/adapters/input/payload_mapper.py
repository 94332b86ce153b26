"""Conversión entre las solicitudes en diccionario (claves camelCase) y el modelo de dominio."""

import re
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from mh_asignacion_proyectos.domain.exceptions import PayloadError
from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.project import Project
from mh_asignacion_proyectos.domain.value_objects.proficiency_level import ProficiencyLevel

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def camel_to_snake(name: str) -> str:
    """'populationSize' -> 'population_size'; las claves ya en snake_case no cambian."""
    return _CAMEL_BOUNDARY.sub('_', name).lower()


class PayloadMapper:
    """Traduce diccionarios de solicitud a entidades y resultados a diccionarios."""
    
    def _require(self, data: Dict[str, Any], key: str, kind: str) -> Any:
        if not isinstance(data, dict):
            raise PayloadError(f"Se esperaba un objeto para {kind}, se recibió {type(data).__name__}")
        if key not in data or data[key] is None:
            raise PayloadError(f"Falta el campo obligatorio '{key}' en {kind}: {data}")
        return data[key]
    
    def _parse_date(self, value: Any, field_name: str) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return date.fromisoformat(str(value)[:10])
        except ValueError:
            raise PayloadError(f"Fecha inválida en '{field_name}': {value!r}")
    
    def _parse_number(self, value: Any, field_name: str) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            raise PayloadError(f"Valor numérico inválido en '{field_name}': {value!r}")
    
    def employee_from_payload(self, data: Dict[str, Any]) -> Employee:
        employee_id = str(self._require(data, "id", "empleado"))
        skills_data = data.get("skills") or {}
        try:
            skills = {skill: ProficiencyLevel.coerce(level) for skill, level in skills_data.items()}
        except (AttributeError, ValueError) as e:
            raise PayloadError(f"Habilidades inválidas para el empleado {employee_id}: {e}")
        
        return Employee(
            id=employee_id,
            name=str(data.get("name") or employee_id),
            max_hours=self._parse_number(data.get("maxHours", 40), "maxHours"),
            skills=skills
        )
    
    def project_from_payload(self, data: Dict[str, Any]) -> Project:
        project_id = str(self._require(data, "id", "proyecto"))
        required_skills = data.get("requiredSkills") or []
        if not isinstance(required_skills, list):
            raise PayloadError(f"'requiredSkills' debe ser una lista en el proyecto {project_id}")
        
        return Project(
            id=project_id,
            name=str(data.get("name") or project_id),
            start_date=self._parse_date(self._require(data, "startDate", "proyecto"), "startDate"),
            end_date=self._parse_date(self._require(data, "endDate", "proyecto"), "endDate"),
            required_skills=[str(skill) for skill in required_skills]
        )
    
    def assignment_from_payload(self, data: Dict[str, Any]) -> Assignment:
        assignment = Assignment(
            employee_id=str(self._require(data, "employeeId", "asignación")),
            project_id=str(self._require(data, "projectId", "asignación")),
            hours=self._parse_number(self._require(data, "hours", "asignación"), "hours"),
            week=data.get("week")
        )
        if data.get("id"):
            assignment.id = str(data["id"])
        return assignment
    
    def employees_from_payload(self, items: Optional[List[Dict[str, Any]]]) -> List[Employee]:
        return [self.employee_from_payload(item) for item in items or []]
    
    def projects_from_payload(self, items: Optional[List[Dict[str, Any]]]) -> List[Project]:
        return [self.project_from_payload(item) for item in items or []]
    
    def assignments_from_payload(self, items: Optional[List[Dict[str, Any]]]) -> List[Assignment]:
        return [self.assignment_from_payload(item) for item in items or []]
    
    def options_from_payload(self, options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Convierte las opciones camelCase del cliente a la configuración de las estrategias."""
        if options is None:
            return {}
        if not isinstance(options, dict):
            raise PayloadError(f"'options' debe ser un objeto, se recibió {type(options).__name__}")
        return {camel_to_snake(key): value for key, value in options.items()}
    
    def employee_to_payload(self, employee: Employee) -> Dict[str, Any]:
        return {
            "id": employee.id,
            "name": employee.name,
            "maxHours": employee.max_hours,
            "skills": {skill: level.to_string() for skill, level in employee.skills.items()}
        }
    
    def project_to_payload(self, project: Project) -> Dict[str, Any]:
        return {
            "id": project.id,
            "name": project.name,
            "startDate": project.start_date.isoformat(),
            "endDate": project.end_date.isoformat(),
            "requiredSkills": list(project.required_skills)
        }
