from abc import ABC, abstractmethod
from typing import List, Optional

from mh_asignacion_proyectos.domain.models.employee import Employee


class EmployeeRepository(ABC):
    """Interfaz de repositorio para entidades Empleado."""
    
    @abstractmethod
    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        """Obtener un empleado por su ID."""
        pass
    
    @abstractmethod
    def get_all(self) -> List[Employee]:
        """Obtener todos los empleados."""
        pass
    
    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        """Guardar un empleado (crear o actualizar)."""
        pass
    
    @abstractmethod
    def delete(self, employee_id: str) -> None:
        """Eliminar un empleado."""
        pass
    
    @abstractmethod
    def get_employees_with_skill(self, skill: str) -> List[Employee]:
        """Obtener los empleados que poseen una habilidad en cualquier nivel."""
        pass
