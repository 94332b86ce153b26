from dataclasses import dataclass
from typing import List, Optional, Sequence

from mh_asignacion_proyectos.domain.exceptions import InvalidInputError
from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.project import Project


@dataclass
class ValidationResult:
    """Resultado de validar la entrada de una optimización."""
    is_valid: bool = True
    violations: int = 0
    violation_details: List[str] = None
    
    def __post_init__(self):
        if self.violation_details is None:
            self.violation_details = []
    
    def add(self, detail: str) -> None:
        self.violations += 1
        self.violation_details.append(detail)


class InputValidator:
    """Servicio para validar que la entrada sea estructuralmente correcta.
    
    Solo rechaza entradas mal formadas. Una entrada válida pero imposible de
    satisfacer (habilidades que nadie posee, capacidad insuficiente) no es un
    error: se refleja en el fitness y en los proyectos sin asignar.
    """
    
    def validate(self,
                 employees: Sequence[Employee],
                 projects: Sequence[Project],
                 assignments: Optional[Sequence[Assignment]] = None) -> ValidationResult:
        """Validar empleados, proyectos y asignaciones existentes.
        
        Args:
            employees: Empleados disponibles
            projects: Proyectos a cubrir
            assignments: Asignaciones existentes opcionales
            
        Returns:
            Objeto ValidationResult con el estado de validación y detalles
        """
        result = ValidationResult()
        
        if not employees:
            result.add("La lista de empleados está vacía")
        if not projects:
            result.add("La lista de proyectos está vacía")
        
        self._validate_employees(employees, result)
        self._validate_projects(projects, result)
        if assignments:
            self._validate_assignments(assignments, employees, projects, result)
        
        result.is_valid = (result.violations == 0)
        return result
    
    def validate_or_raise(self,
                          employees: Sequence[Employee],
                          projects: Sequence[Project],
                          assignments: Optional[Sequence[Assignment]] = None) -> None:
        """Igual que `validate`, pero lanza InvalidInputError si hay violaciones."""
        result = self.validate(employees, projects, assignments)
        if not result.is_valid:
            details = "; ".join(result.violation_details[:5])
            if len(result.violation_details) > 5:
                details += f"; ...y {len(result.violation_details) - 5} más"
            raise InvalidInputError(f"Entrada inválida ({result.violations} problemas): {details}")
    
    def _validate_employees(self, employees: Sequence[Employee], result: ValidationResult) -> None:
        seen = set()
        for employee in employees:
            if not employee.id:
                result.add(f"El empleado '{employee.name}' no tiene identificador")
            elif employee.id in seen:
                result.add(f"Identificador de empleado duplicado: {employee.id}")
            seen.add(employee.id)
            if not isinstance(employee.max_hours, (int, float)):
                result.add(f"El empleado {employee.id} tiene una capacidad no numérica: {employee.max_hours!r}")
    
    def _validate_projects(self, projects: Sequence[Project], result: ValidationResult) -> None:
        seen = set()
        for project in projects:
            if not project.id:
                result.add(f"El proyecto '{project.name}' no tiene identificador")
            elif project.id in seen:
                result.add(f"Identificador de proyecto duplicado: {project.id}")
            seen.add(project.id)
            if project.start_date is None or project.end_date is None:
                result.add(f"El proyecto {project.id} no tiene fechas de inicio y término")
            elif project.end_date < project.start_date:
                result.add(
                    f"El proyecto {project.id} termina ({project.end_date}) antes de comenzar ({project.start_date})"
                )
    
    def _validate_assignments(self,
                              assignments: Sequence[Assignment],
                              employees: Sequence[Employee],
                              projects: Sequence[Project],
                              result: ValidationResult) -> None:
        employee_ids = {e.id for e in employees}
        project_ids = {p.id for p in projects}
        for assignment in assignments:
            if assignment.employee_id not in employee_ids:
                result.add(f"La asignación {assignment.id} referencia un empleado desconocido: {assignment.employee_id}")
            if assignment.project_id not in project_ids:
                result.add(f"La asignación {assignment.id} referencia un proyecto desconocido: {assignment.project_id}")
            if assignment.hours < 0:
                result.add(f"La asignación {assignment.id} tiene horas negativas: {assignment.hours}")
