from datetime import date
from typing import Any, Dict, List, Optional
import logging
import random
import time

from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.optimization_result import OptimizationResult
from mh_asignacion_proyectos.domain.models.optimization_summary import OptimizationSummary
from mh_asignacion_proyectos.domain.models.project import Project
from mh_asignacion_proyectos.domain.repositories.assignment_repository import AssignmentRepository
from mh_asignacion_proyectos.domain.repositories.employee_repository import EmployeeRepository
from mh_asignacion_proyectos.domain.repositories.project_repository import ProjectRepository
from mh_asignacion_proyectos.domain.services.input_validator import InputValidator
from mh_asignacion_proyectos.domain.services.optimization_summary_builder import OptimizationSummaryBuilder
from mh_asignacion_proyectos.domain.services.optimizer_strategy import OptimizerStrategy
from mh_asignacion_proyectos.domain.services.run_control import RunControl
from mh_asignacion_proyectos.domain.value_objects.algorithm_type import AlgorithmType

logger = logging.getLogger(__name__)


class AssignmentOptimizerService:
    """Servicio para optimizar asignaciones de empleados a proyectos con estrategias intercambiables.
    
    Cada ejecución recibe los datos de forma explícita (desde los repositorios o
    como parámetros) y devuelve todo el resultado como datos; la única información
    que persiste entre ejecuciones son las métricas agregadas por algoritmo.
    """
    
    def __init__(
        self,
        employee_repository: EmployeeRepository,
        project_repository: ProjectRepository,
        input_validator: InputValidator,
        assignment_repository: Optional[AssignmentRepository] = None,
        optimizer_strategy: Optional[OptimizerStrategy] = None
    ):
        self.employee_repository = employee_repository
        self.project_repository = project_repository
        self.assignment_repository = assignment_repository
        self.input_validator = input_validator
        self.optimizer_strategy = optimizer_strategy
        self.metrics = {
            "total_optimizations": 0,
            "total_execution_time": 0,
            "algorithm_metrics": {}
        }
    
    def set_optimizer_strategy(self, optimizer_strategy: OptimizerStrategy) -> None:
        """Establecer la estrategia de optimización a usar."""
        self.optimizer_strategy = optimizer_strategy
        logger.info(f"Estrategia de optimización establecida a: {optimizer_strategy.get_name()}")
    
    def set_algorithm(self, algorithm_type: AlgorithmType) -> None:
        """Configurar el algoritmo a utilizar basado en un tipo de algoritmo."""
        from mh_asignacion_proyectos.domain.services.optimizers.genetic_algorithm_optimizer import GeneticAlgorithmOptimizer
        from mh_asignacion_proyectos.domain.services.optimizers.simulated_annealing_optimizer import SimulatedAnnealingOptimizer
        from mh_asignacion_proyectos.domain.services.optimizers.constraint_satisfaction_optimizer import ConstraintSatisfactionOptimizer
        
        if algorithm_type == AlgorithmType.GENETIC:
            optimizer = GeneticAlgorithmOptimizer()
        elif algorithm_type == AlgorithmType.ANNEALING:
            optimizer = SimulatedAnnealingOptimizer()
        elif algorithm_type == AlgorithmType.CONSTRAINT:
            optimizer = ConstraintSatisfactionOptimizer()
        else:
            raise ValueError(f"Algoritmo no soportado: {algorithm_type}")
        
        self.set_optimizer_strategy(optimizer)
    
    def generate_optimal_assignments(
        self,
        config: Dict[str, Any] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        rng: Optional[random.Random] = None,
        run_control: Optional[RunControl] = None
    ) -> OptimizationResult:
        """Optimiza con los datos de los repositorios usando la estrategia seleccionada.
        
        Args:
            config: Parámetros de configuración para el algoritmo de optimización
            start_date: Inicio del período; con end_date filtra los proyectos activos
            end_date: Fin del período de planificación
            rng: Fuente aleatoria opcional para ejecuciones reproducibles
            run_control: Cancelación y notificación de progreso opcionales
            
        Returns:
            El OptimizationResult de la estrategia
        """
        employees: List[Employee] = self.employee_repository.get_all()
        if start_date and end_date:
            projects: List[Project] = self.project_repository.get_projects_by_period(start_date, end_date)
        else:
            projects: List[Project] = self.project_repository.get_all()
        assignments = self.assignment_repository.get_all() if self.assignment_repository else []
        # Solo las asignaciones de los proyectos seleccionados
        project_ids = {p.id for p in projects}
        assignments = [a for a in assignments if a.project_id in project_ids]

        return self.optimize(employees, projects, assignments, config, rng, run_control)
    
    def optimize(
        self,
        employees: List[Employee],
        projects: List[Project],
        assignments: Optional[List[Assignment]] = None,
        config: Dict[str, Any] = None,
        rng: Optional[random.Random] = None,
        run_control: Optional[RunControl] = None
    ) -> OptimizationResult:
        """Valida la entrada y ejecuta la estrategia con datos explícitos.
        
        Raises:
            ValueError: Si no se ha establecido una estrategia de optimización
            InvalidInputError: Si la entrada está mal formada (antes de iniciar la búsqueda)
        """
        if not self.optimizer_strategy:
            raise ValueError("No se ha establecido ninguna estrategia de optimización")
        
        self.input_validator.validate_or_raise(employees, projects, assignments)
        
        logger.info(f"Iniciando optimización con {len(employees)} empleados, {len(projects)} proyectos "
                    f"y {len(assignments or [])} asignaciones existentes")
        
        start_time = time.time()
        result = self.optimizer_strategy.optimize(
            employees, projects, config,
            assignments=[a.clone() for a in assignments] if assignments else None,
            rng=rng,
            run_control=run_control
        )
        execution_time = time.time() - start_time

        # Solo se contabilizan las ejecuciones que la estrategia completó
        self.metrics["total_optimizations"] += 1
        algorithm_metrics = self.metrics["algorithm_metrics"].setdefault(self.optimizer_strategy.get_name(), {
            "runs": 0,
            "total_time": 0,
            "avg_time": 0,
            "best_fitness": None
        })
        algorithm_metrics["runs"] += 1
        self.metrics["total_execution_time"] += execution_time
        algorithm_metrics["total_time"] += execution_time
        algorithm_metrics["avg_time"] = algorithm_metrics["total_time"] / algorithm_metrics["runs"]
        if algorithm_metrics["best_fitness"] is None or result.fitness > algorithm_metrics["best_fitness"]:
            algorithm_metrics["best_fitness"] = result.fitness
        
        covered_projects = len(set(result.solution.get_project_ids()) & {p.id for p in projects})
        logger.info(f"Optimización completada en {execution_time:.2f} segundos")
        logger.info(f"Fitness: {result.fitness:.2f}, Asignaciones: {len(result.solution.assignments)}")
        logger.info(f"Cobertura: {covered_projects}/{len(projects)} proyectos con horas asignadas")
        
        return result
    
    def build_summary(
        self,
        result: OptimizationResult,
        employees: Optional[List[Employee]] = None,
        projects: Optional[List[Project]] = None
    ) -> OptimizationSummary:
        """Genera el resumen de una solución con los datos dados o los de los repositorios."""
        builder = OptimizationSummaryBuilder(
            employees if employees is not None else self.employee_repository.get_all(),
            projects if projects is not None else self.project_repository.get_all()
        )
        return builder.build_from_result(result)
    
    def apply_solution(self, result: OptimizationResult) -> None:
        """Reemplaza las asignaciones vigentes por las de la solución elegida."""
        if self.assignment_repository is None:
            raise ValueError("No hay repositorio de asignaciones configurado")
        self.assignment_repository.replace_all(result.solution.assignments)
        logger.info(f"Solución aplicada: {len(result.solution.assignments)} asignaciones vigentes")
    
    def get_metrics(self) -> Dict[str, Any]:
        """Obtener métricas de rendimiento del servicio de optimización."""
        return self.metrics
