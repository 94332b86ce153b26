import logging
import math
import random
import time
from typing import Any, Dict, List, Optional

from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.optimization_result import IterationRecord, OptimizationResult
from mh_asignacion_proyectos.domain.models.project import Project
from mh_asignacion_proyectos.domain.models.solution import Solution
from mh_asignacion_proyectos.domain.services.fitness_evaluator import FitnessEvaluator
from mh_asignacion_proyectos.domain.services.optimizer_strategy import OptimizerStrategy
from mh_asignacion_proyectos.domain.services.run_control import RunControl
from mh_asignacion_proyectos.domain.services.solution_generator import SolutionGenerator

logger = logging.getLogger(__name__)

MIN_TEMPERATURE_DIVISOR = 1e-12


class SimulatedAnnealingOptimizer(OptimizerStrategy):
    """Recocido simulado: búsqueda local de una sola trayectoria con aceptación de Metropolis."""
    
    def get_name(self) -> str:
        return "Simulated Annealing Optimizer"
    
    def get_default_config(self) -> Dict[str, Any]:
        return {
            "initial_temp": 1000.0,
            "cooling_rate": 0.95,
            "min_temp": 1.0,
            "max_iterations": 1000,
            "history_interval": 10,
            "seed_with_existing": False,
            "progress_interval": 100,
            "seed": None
        }
    
    def optimize(self,
                 employees: List[Employee],
                 projects: List[Project],
                 config: Dict[str, Any] = None,
                 assignments: Optional[List[Assignment]] = None,
                 rng: Optional[random.Random] = None,
                 run_control: Optional[RunControl] = None) -> OptimizationResult:
        """Optimiza la asignación usando recocido simulado con enfriamiento geométrico."""
        self.require_input(employees, projects)
        config = self.build_config(config)
        initial_temp = float(config["initial_temp"])
        cooling_rate = float(config["cooling_rate"])
        min_temp = float(config["min_temp"])
        max_iterations = int(config["max_iterations"])
        history_interval = max(1, int(config["history_interval"]))
        progress_interval = max(1, int(config["progress_interval"]))
        
        rng = self.build_rng(rng, config)
        evaluator = FitnessEvaluator(employees, projects)
        generator = SolutionGenerator(employees, projects, rng)
        
        logger.info(f"Iniciando recocido simulado: T0={initial_temp}, enfriamiento={cooling_rate}, "
                    f"Tmin={min_temp}, máximo {max_iterations} iteraciones")
        start_time = time.time()
        
        if config["seed_with_existing"] and assignments:
            current_solution = Solution(assignments=[a.clone() for a in assignments])
        else:
            current_solution = generator.random_solution()
        current_fitness = evaluator.score(current_solution)
        evaluations = 1
        
        best_solution = current_solution.clone()
        best_fitness = current_fitness
        
        temperature = initial_temp
        history: List[IterationRecord] = []
        cancelled = False
        
        for iteration in range(max_iterations):
            if temperature <= min_temp:
                break
            if run_control is not None and run_control.should_stop():
                cancelled = True
                logger.warning(f"Recocido simulado cancelado en la iteración {iteration}")
                break
            
            neighbor = generator.neighbor(current_solution)
            neighbor_fitness = evaluator.score(neighbor)
            evaluations += 1
            
            delta = neighbor_fitness - current_fitness
            if delta > 0 or rng.random() < self._acceptance_probability(delta, temperature):
                current_solution = neighbor
                current_fitness = neighbor_fitness
                
                if current_fitness > best_fitness:
                    best_solution = current_solution.clone()
                    best_fitness = current_fitness
                    logger.debug(f"Iteración {iteration}: nuevo mejor fitness {best_fitness:.4f}")
            
            temperature *= cooling_rate
            
            if iteration % history_interval == 0:
                history.append(IterationRecord(
                    iteration=iteration,
                    temperature=temperature,
                    current_fitness=current_fitness,
                    best_fitness=best_fitness
                ))
            
            if iteration % progress_interval == 0:
                logger.info(f"Iteración {iteration}: Fitness actual = {current_fitness:.4f}, "
                            f"Mejor fitness = {best_fitness:.4f}, Temperatura = {temperature:.4f}")
                if run_control is not None:
                    run_control.report_progress(100.0 * (iteration + 1) / max_iterations, best_fitness)
        
        # El ciclo suele terminar por temperatura antes de max_iterations
        if run_control is not None and not cancelled:
            run_control.report_progress(100.0, best_fitness)

        best_solution.fitness_score = best_fitness
        execution_time = time.time() - start_time
        logger.info(f"Recocido simulado completado. Mejor fitness: {best_fitness:.4f}, "
                    f"{evaluations} evaluaciones en {execution_time:.2f} segundos")
        
        return OptimizationResult(
            solution=best_solution,
            fitness=best_fitness,
            algorithm=self.get_name(),
            history=history,
            cancelled=cancelled,
            execution_time=execution_time
        )
    
    @staticmethod
    def _acceptance_probability(delta: float, temperature: float) -> float:
        """Probabilidad de Metropolis para un movimiento que no mejora."""
        return math.exp(delta / max(temperature, MIN_TEMPERATURE_DIVISOR))
