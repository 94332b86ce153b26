import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Tuple

from mh_asignacion_proyectos.domain.exceptions import InvalidInputError
from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.optimization_result import GenerationRecord, OptimizationResult
from mh_asignacion_proyectos.domain.models.project import Project
from mh_asignacion_proyectos.domain.models.solution import Solution
from mh_asignacion_proyectos.domain.services.fitness_evaluator import FitnessEvaluator
from mh_asignacion_proyectos.domain.services.optimizer_strategy import OptimizerStrategy
from mh_asignacion_proyectos.domain.services.run_control import RunControl
from mh_asignacion_proyectos.domain.services.solution_generator import SolutionGenerator

logger = logging.getLogger(__name__)

RankedPopulation = List[Tuple[Solution, float]]


class GeneticAlgorithmOptimizer(OptimizerStrategy):
    """Implementación de Algoritmo Genético para la asignación de empleados a proyectos.
    
    Representación de longitud variable: cada individuo es una lista de asignaciones.
    El cruce toma, para cada proyecto, el bloque completo de asignaciones de uno de
    los dos padres, por lo que un hijo puede ser más grande o más pequeño que ambos.
    """
    
    def get_name(self) -> str:
        return "Genetic Algorithm Optimizer"
    
    def get_default_config(self) -> Dict[str, Any]:
        return {
            "population_size": 50,
            "generations": 100,
            "mutation_rate": 0.1,
            "elite_size": 5,
            "crossover_rate": 0.7,
            "tournament_size": 3,
            "max_workers": None,              # >1 evalúa la población en paralelo
            "seed_with_existing": False,      # incluir las asignaciones existentes en la población inicial
            "progress_interval": 10,
            "seed": None
        }
    
    def optimize(self,
                 employees: List[Employee],
                 projects: List[Project],
                 config: Dict[str, Any] = None,
                 assignments: Optional[List[Assignment]] = None,
                 rng: Optional[random.Random] = None,
                 run_control: Optional[RunControl] = None) -> OptimizationResult:
        """Optimiza la asignación usando un algoritmo genético con elitismo y selección por torneo."""
        self.require_input(employees, projects)
        config = self.build_config(config)
        population_size = int(config["population_size"])
        generations = int(config["generations"])
        mutation_rate = float(config["mutation_rate"])
        crossover_rate = float(config["crossover_rate"])
        elite_size = max(0, min(int(config["elite_size"]), population_size))
        tournament_size = max(1, int(config["tournament_size"]))
        max_workers = config["max_workers"]
        progress_interval = max(1, int(config["progress_interval"]))
        
        if population_size < 1:
            raise InvalidInputError(f"population_size debe ser al menos 1, se recibió {population_size}")
        
        rng = self.build_rng(rng, config)
        evaluator = FitnessEvaluator(employees, projects)
        generator = SolutionGenerator(employees, projects, rng)
        metrics = {"objective_evaluations": 0}
        
        logger.info(f"Iniciando algoritmo genético con {population_size} individuos para {generations} generaciones")
        start_time = time.time()
        
        population = self._initialize_population(
            generator, population_size, assignments, config["seed_with_existing"]
        )
        
        best_solution: Optional[Solution] = None
        best_fitness = float('-inf')
        history: List[GenerationRecord] = []
        cancelled = False
        
        executor = ThreadPoolExecutor(max_workers=max_workers) if max_workers and max_workers > 1 else None
        try:
            for generation in range(generations):
                if run_control is not None and run_control.should_stop():
                    cancelled = True
                    logger.warning(f"Algoritmo genético cancelado en la generación {generation}")
                    break
                
                # Barrera: toda la generación se evalúa antes de seleccionar
                fitness_scores = self._evaluate_population(population, evaluator, executor, metrics)
                ranked = sorted(zip(population, fitness_scores), key=lambda pair: pair[1], reverse=True)
                
                if ranked[0][1] > best_fitness:
                    best_fitness = ranked[0][1]
                    best_solution = ranked[0][0].clone()
                    logger.debug(f"Generación {generation}: nuevo mejor fitness {best_fitness:.4f}")
                
                average_fitness = sum(fitness_scores) / len(fitness_scores)
                history.append(GenerationRecord(
                    generation=generation,
                    best_fitness=best_fitness,
                    average_fitness=average_fitness
                ))
                
                if generation % progress_interval == 0 or generation == generations - 1:
                    logger.info(f"Generación {generation}: Mejor fitness = {best_fitness:.4f}, "
                                f"Fitness promedio = {average_fitness:.4f}")
                    if run_control is not None:
                        run_control.report_progress(100.0 * (generation + 1) / generations, best_fitness)
                
                population = self._next_generation(
                    ranked, generator, rng, population_size, elite_size,
                    crossover_rate, mutation_rate, tournament_size
                )
            
            # Sin generaciones evaluadas: la mejor de la población inicial
            if best_solution is None:
                fitness_scores = self._evaluate_population(population, evaluator, executor, metrics)
                best_index = max(range(len(population)), key=lambda i: fitness_scores[i])
                best_solution = population[best_index].clone()
                best_fitness = fitness_scores[best_index]
        finally:
            if executor is not None:
                executor.shutdown(wait=True)
        
        best_solution.fitness_score = best_fitness
        execution_time = time.time() - start_time
        logger.info(f"Optimización completa. Fitness de la mejor solución: {best_fitness:.4f}")
        logger.info(f"Métricas: {metrics['objective_evaluations']} evaluaciones de función objetivo "
                    f"en {execution_time:.2f} segundos")
        
        return OptimizationResult(
            solution=best_solution,
            fitness=best_fitness,
            algorithm=self.get_name(),
            history=history,
            cancelled=cancelled,
            execution_time=execution_time
        )
    
    def _initialize_population(self,
                               generator: SolutionGenerator,
                               population_size: int,
                               assignments: Optional[List[Assignment]],
                               seed_with_existing: bool) -> List[Solution]:
        """Inicializa la población con soluciones aleatorias independientes."""
        population = [generator.random_solution() for _ in range(population_size)]
        if seed_with_existing and assignments:
            population[0] = Solution(assignments=[a.clone() for a in assignments])
        return population
    
    def _evaluate_population(self,
                             population: List[Solution],
                             evaluator: FitnessEvaluator,
                             executor: Optional[ThreadPoolExecutor],
                             metrics: Dict[str, Any]) -> List[float]:
        """Evalúa la aptitud de todas las soluciones en la población."""
        if executor is not None:
            fitness_scores = list(executor.map(evaluator.score, population))
        else:
            fitness_scores = [evaluator.score(solution) for solution in population]
        
        for solution, fitness in zip(population, fitness_scores):
            solution.fitness_score = fitness
        metrics["objective_evaluations"] += len(population)
        return fitness_scores
    
    def _next_generation(self,
                         ranked: RankedPopulation,
                         generator: SolutionGenerator,
                         rng: random.Random,
                         population_size: int,
                         elite_size: int,
                         crossover_rate: float,
                         mutation_rate: float,
                         tournament_size: int) -> List[Solution]:
        """Construye la siguiente generación: élite intacta más hijos de torneo."""
        new_population = [solution.clone() for solution, _ in ranked[:elite_size]]
        
        while len(new_population) < population_size:
            if rng.random() < crossover_rate and len(ranked) >= 2:
                parent1 = self._tournament_selection(ranked, rng, tournament_size)
                parent2 = self._tournament_selection(ranked, rng, tournament_size)
                child = self._crossover(parent1, parent2, rng)
            else:
                child = self._tournament_selection(ranked, rng, tournament_size).clone()
            
            if rng.random() < mutation_rate:
                generator.mutate(child)
            
            new_population.append(child)
        
        return new_population
    
    def _tournament_selection(self,
                              ranked: RankedPopulation,
                              rng: random.Random,
                              tournament_size: int) -> Solution:
        """Selecciona el mejor de `tournament_size` individuos muestreados con reemplazo."""
        tournament = [ranked[rng.randrange(len(ranked))] for _ in range(tournament_size)]
        return max(tournament, key=lambda pair: pair[1])[0]
    
    def _crossover(self, parent1: Solution, parent2: Solution, rng: random.Random) -> Solution:
        """Cruce por proyecto: cada bloque de asignaciones proviene íntegro de un padre."""
        child = Solution()
        project_ids = list(dict.fromkeys(
            a.project_id for a in parent1.assignments + parent2.assignments
        ))
        
        for project_id in project_ids:
            donor = parent1 if rng.random() < 0.5 else parent2
            for assignment in donor.get_project_assignments(project_id):
                child.add_assignment(assignment.clone())
        
        return child
