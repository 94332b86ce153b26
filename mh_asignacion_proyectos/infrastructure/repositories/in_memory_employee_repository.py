from typing import List, Optional, Dict

from ...domain.models.employee import Employee
from ...domain.repositories.employee_repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Implementación en memoria del repositorio de empleados para pruebas y desarrollo."""
    
    def __init__(self, employees: List[Employee] = None):
        self.employees: Dict[str, Employee] = {}
        for employee in employees or []:
            self.save(employee)
    
    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        """Obtener un empleado por su ID."""
        return self.employees.get(employee_id)
    
    def get_all(self) -> List[Employee]:
        """Obtener todos los empleados."""
        return list(self.employees.values())
    
    def save(self, employee: Employee) -> Employee:
        """Guardar un empleado (crear o actualizar)."""
        self.employees[employee.id] = employee
        return employee
    
    def delete(self, employee_id: str) -> None:
        """Eliminar un empleado."""
        if employee_id in self.employees:
            del self.employees[employee_id]
    
    def get_employees_with_skill(self, skill: str) -> List[Employee]:
        return [employee for employee in self.employees.values() if employee.has_skill(skill)]
