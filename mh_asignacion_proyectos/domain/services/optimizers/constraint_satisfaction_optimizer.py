import logging
import random
import time
from typing import Any, Dict, List, Optional

from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.optimization_result import OptimizationResult
from mh_asignacion_proyectos.domain.models.project import Project
from mh_asignacion_proyectos.domain.models.solution import Solution
from mh_asignacion_proyectos.domain.services.fitness_evaluator import FitnessEvaluator
from mh_asignacion_proyectos.domain.services.optimizer_strategy import OptimizerStrategy
from mh_asignacion_proyectos.domain.services.run_control import RunControl

logger = logging.getLogger(__name__)


class ConstraintSatisfactionOptimizer(OptimizerStrategy):
    """Heurística de satisfacción de restricciones en dos fases.
    
    1. Construcción greedy: los proyectos se atienden por prioridad (cortos y con
       más habilidades requeridas primero) y cada uno recibe hasta `required_hours`
       horas de los empleados elegibles mejor puntuados.
    2. Mejora local: intercambio de proyectos entre pares de asignaciones mientras
       aumente la afinidad de habilidades en más de `improvement_threshold`.
    
    Es determinista; el parámetro `rng` se acepta por compatibilidad con la interfaz.
    """
    
    def get_name(self) -> str:
        return "Constraint Satisfaction Optimizer"
    
    def get_default_config(self) -> Dict[str, Any]:
        return {
            "max_iterations": 1000,
            "improvement_threshold": 0.01,   # mejora relativa mínima para aceptar un intercambio
            "required_hours": 20,            # horas objetivo por proyecto, igual para todos
            "max_hours_per_assignment": 20
        }
    
    def optimize(self,
                 employees: List[Employee],
                 projects: List[Project],
                 config: Dict[str, Any] = None,
                 assignments: Optional[List[Assignment]] = None,
                 rng: Optional[random.Random] = None,
                 run_control: Optional[RunControl] = None) -> OptimizationResult:
        """Construye una asignación greedy y la mejora con intercambios por pares."""
        self.require_input(employees, projects)
        config = self.build_config(config)
        max_iterations = int(config["max_iterations"])
        improvement_threshold = float(config["improvement_threshold"])
        required_hours = float(config["required_hours"])
        max_hours_per_assignment = float(config["max_hours_per_assignment"])
        
        logger.info(f"Iniciando heurística de restricciones con {len(employees)} empleados, "
                    f"{len(projects)} proyectos y {required_hours} horas requeridas por proyecto")
        start_time = time.time()
        
        solution, unassigned_projects = self._construct_solution(
            employees, projects, required_hours, max_hours_per_assignment
        )
        logger.info(f"Construcción greedy: {len(solution.assignments)} asignaciones, "
                    f"{len(unassigned_projects)} proyectos sin asignar")
        
        swaps, cancelled = self._local_search(
            solution, employees, projects, max_iterations, improvement_threshold, run_control
        )
        
        evaluator = FitnessEvaluator(employees, projects)
        fitness = evaluator.score(solution)
        solution.fitness_score = fitness
        if run_control is not None:
            run_control.report_progress(100.0, fitness)
        
        execution_time = time.time() - start_time
        logger.info(f"Heurística de restricciones completada. Fitness: {fitness:.4f}, "
                    f"intercambios: {swaps}, tiempo: {execution_time:.2f} segundos")
        if unassigned_projects:
            logger.warning(f"Proyectos sin asignar: {', '.join(unassigned_projects)}")
        
        return OptimizationResult(
            solution=solution,
            fitness=fitness,
            algorithm=self.get_name(),
            unassigned_projects=unassigned_projects,
            cancelled=cancelled,
            execution_time=execution_time
        )
    
    def _project_priority(self, project: Project) -> float:
        """Prioridad: proyectos más cortos y con más habilidades requeridas primero."""
        return 100.0 / (project.duration_days + 1) + 10.0 * len(project.required_skills)
    
    def _assignment_score(self, employee: Employee, project: Project) -> float:
        """Afinidad de un empleado con un proyecto según sus niveles de habilidad."""
        return sum(employee.skill_level(skill) * 10.0 for skill in project.required_skills)
    
    def _is_eligible(self, employee: Employee, project: Project, available: float) -> bool:
        if available <= 0:
            return False
        if not project.required_skills:
            return True
        return employee.has_any_skill(project.required_skills)
    
    def _construct_solution(self,
                            employees: List[Employee],
                            projects: List[Project],
                            required_hours: float,
                            max_hours_per_assignment: float):
        """Fase greedy: reparte horas por prioridad de proyecto y afinidad del empleado."""
        solution = Solution()
        unassigned = {p.id: True for p in projects}
        availability = {e.id: e.available_capacity for e in employees}
        
        sorted_projects = sorted(projects, key=self._project_priority, reverse=True)
        
        for project in sorted_projects:
            remaining_hours = required_hours
            
            eligible_employees = [
                e for e in employees
                if self._is_eligible(e, project, availability[e.id])
            ]
            eligible_employees.sort(
                key=lambda e: (self._assignment_score(e, project) + availability[e.id] / 40.0 * 5.0),
                reverse=True
            )
            
            for employee in eligible_employees:
                if remaining_hours <= 0:
                    break
                
                available = availability[employee.id]
                hours_to_assign = min(remaining_hours, available, max_hours_per_assignment)
                
                if hours_to_assign > 0:
                    solution.add_assignment(Assignment(
                        employee_id=employee.id,
                        project_id=project.id,
                        hours=hours_to_assign
                    ))
                    availability[employee.id] = available - hours_to_assign
                    remaining_hours -= hours_to_assign
            
            if remaining_hours < required_hours:
                del unassigned[project.id]
            else:
                logger.debug(f"El proyecto {project.id} no tiene empleados elegibles")
        
        return solution, list(unassigned)
    
    def _local_search(self,
                      solution: Solution,
                      employees: List[Employee],
                      projects: List[Project],
                      max_iterations: int,
                      improvement_threshold: float,
                      run_control: Optional[RunControl]):
        """Fase de mejora: intercambia proyectos entre pares de asignaciones en el lugar."""
        employee_dict = {e.id: e for e in employees}
        project_dict = {p.id: p for p in projects}
        assignments = solution.assignments
        total_swaps = 0
        
        for iteration in range(max_iterations):
            if run_control is not None and run_control.should_stop():
                logger.warning(f"Mejora local cancelada en la pasada {iteration}")
                return total_swaps, True
            
            improved = False
            
            for i in range(len(assignments)):
                for j in range(i + 1, len(assignments)):
                    assignment1 = assignments[i]
                    assignment2 = assignments[j]
                    
                    emp1 = employee_dict.get(assignment1.employee_id)
                    emp2 = employee_dict.get(assignment2.employee_id)
                    proj1 = project_dict.get(assignment1.project_id)
                    proj2 = project_dict.get(assignment2.project_id)
                    
                    if not (emp1 and emp2 and proj1 and proj2):
                        continue
                    
                    current_score = self._assignment_score(emp1, proj1) + self._assignment_score(emp2, proj2)
                    swap_score = self._assignment_score(emp1, proj2) + self._assignment_score(emp2, proj1)
                    
                    if swap_score > current_score * (1 + improvement_threshold):
                        assignment1.project_id = proj2.id
                        assignment2.project_id = proj1.id
                        improved = True
                        total_swaps += 1
            
            if not improved:
                logger.debug(f"Mejora local convergió tras {iteration + 1} pasadas")
                break
        
        return total_swaps, False
