import random
from typing import Callable, List, Sequence

from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.project import Project
from mh_asignacion_proyectos.domain.models.solution import Solution

MIN_HOURS = 5
MAX_HOURS = 40
RANDOM_HOURS_SPAN = 20
HOURS_PERTURBATION = 5
MAX_ASSIGNMENTS_PER_PROJECT = 3


class SolutionGenerator:
    """Genera soluciones aleatorias y aplica los operadores de mutación compartidos.
    
    Lo usan el algoritmo genético (población inicial y mutación de hijos) y el
    recocido simulado (punto de partida y vecinos). Toda la aleatoriedad proviene
    del generador `rng` inyectado, lo que permite ejecuciones reproducibles.
    """
    
    def __init__(self,
                 employees: Sequence[Employee],
                 projects: Sequence[Project],
                 rng: random.Random = None):
        self.employees = list(employees)
        self.projects = list(projects)
        self.rng = rng or random.Random()
        self.operators: List[Callable[[Solution], bool]] = [
            self.reassign_employee,
            self.perturb_hours,
            self.remove_assignment,
            self.add_random_assignment
        ]
    
    def _random_hours(self) -> int:
        return self.rng.randrange(RANDOM_HOURS_SPAN) + MIN_HOURS
    
    def random_solution(self) -> Solution:
        """Construye una solución con 1 a 3 asignaciones aleatorias por proyecto."""
        solution = Solution()
        
        for project in self.projects:
            num_assignments = self.rng.randint(1, MAX_ASSIGNMENTS_PER_PROJECT)
            available_employees = list(self.employees)
            
            for _ in range(num_assignments):
                if not available_employees:
                    break
                # Sin reemplazo: un empleado aparece a lo sumo una vez por proyecto
                employee = available_employees.pop(self.rng.randrange(len(available_employees)))
                solution.add_assignment(Assignment(
                    employee_id=employee.id,
                    project_id=project.id,
                    hours=min(self._random_hours(), MAX_HOURS)
                ))
        
        return solution
    
    def random_assignment(self) -> Assignment:
        """Asignación nueva con proyecto y empleado aleatorios."""
        project = self.rng.choice(self.projects)
        employee = self.rng.choice(self.employees)
        return Assignment(
            employee_id=employee.id,
            project_id=project.id,
            hours=self._random_hours()
        )
    
    # Operadores de mutación: modifican la solución en el lugar y devuelven
    # True si efectivamente la cambiaron.
    
    def reassign_employee(self, solution: Solution) -> bool:
        if not solution.assignments or not self.employees:
            return False
        assignment = self.rng.choice(solution.assignments)
        assignment.employee_id = self.rng.choice(self.employees).id
        return True
    
    def perturb_hours(self, solution: Solution) -> bool:
        if not solution.assignments:
            return False
        assignment = self.rng.choice(solution.assignments)
        delta = self.rng.random() * 2 * HOURS_PERTURBATION - HOURS_PERTURBATION
        assignment.hours = min(MAX_HOURS, max(MIN_HOURS, assignment.hours + delta))
        return True
    
    def remove_assignment(self, solution: Solution) -> bool:
        if len(solution.assignments) <= 1:
            return False
        del solution.assignments[self.rng.randrange(len(solution.assignments))]
        return True
    
    def add_random_assignment(self, solution: Solution) -> bool:
        if not self.employees or not self.projects:
            return False
        solution.add_assignment(self.random_assignment())
        return True
    
    def mutate(self, solution: Solution) -> bool:
        """Aplica un operador de mutación elegido uniformemente al azar."""
        operator = self.operators[self.rng.randrange(len(self.operators))]
        return operator(solution)
    
    def neighbor(self, solution: Solution) -> Solution:
        """Copia profunda de la solución con exactamente una mutación aplicada."""
        candidate = solution.clone()
        self.mutate(candidate)
        return candidate
