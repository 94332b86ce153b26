"""Caso de uso para comparación de algoritmos de optimización."""

import logging
import statistics
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

from mh_asignacion_proyectos.domain.value_objects.algorithm_type import AlgorithmType
from mh_asignacion_proyectos.domain.value_objects.export_format import ExportFormat
from mh_asignacion_proyectos.application.ports.input.assignment_optimization_service_port import AssignmentOptimizationServicePort
from mh_asignacion_proyectos.application.ports.output.summary_export_port import SummaryExportPort
from mh_asignacion_proyectos.application.ports.output.optimization_visualization_port import OptimizationVisualizationPort

logger = logging.getLogger(__name__)


class AlgorithmComparisonUseCase:
    """Caso de uso para comparar las estrategias de optimización sobre los mismos datos."""
    
    def __init__(
        self,
        assignment_service: AssignmentOptimizationServicePort,
        summary_export_service: SummaryExportPort,
        visualization_service: Optional[OptimizationVisualizationPort] = None
    ):
        self.assignment_service = assignment_service
        self.summary_export_service = summary_export_service
        self.visualization_service = visualization_service
    
    def run_algorithm(self, algorithm: AlgorithmType, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Ejecuta un algoritmo y recopila métricas de rendimiento.
        
        Args:
            algorithm: Tipo de algoritmo a ejecutar
            config: Configuración del algoritmo
            
        Returns:
            Diccionario con el resultado, su resumen y las métricas
        """
        start_time = time.time()
        result = self.assignment_service.generate_assignments(
            algorithm=algorithm,
            algorithm_config=config
        )
        summary = self.assignment_service.build_summary(result)
        
        return {
            "algorithm": algorithm.to_string(),
            "result": result,
            "summary": summary,
            "execution_time": time.time() - start_time,
            "fitness": result.fitness,
            "assignments_count": len(result.solution.assignments),
            "utilization": summary.overall_utilization,
            "skill_coverage": summary.skill_coverage,
            "overtime": summary.total_overtime
        }
    
    def compare_algorithms(
        self,
        algorithms: Optional[List[AlgorithmType]] = None,
        runs: int = 3,
        configs: Optional[Dict[AlgorithmType, Dict[str, Any]]] = None,
        output_dir: Optional[str] = "./assets/plots",
        ask_continue_callback: Optional[Callable[[AlgorithmType, int, int], bool]] = None
    ) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
        """
        Compara diferentes algoritmos de optimización.
        
        Args:
            algorithms: Lista de algoritmos a comparar, o None para usar todos
            runs: Número de ejecuciones por algoritmo
            configs: Configuración opcional por algoritmo
            output_dir: Directorio para los gráficos; None desactiva la visualización
            ask_continue_callback: Función que decide si continuar con la siguiente corrida
            
        Returns:
            Tupla con (resultados_por_algoritmo, resultados_individuales_todas_ejecuciones)
        """
        if algorithms is None:
            algorithms = AlgorithmType.get_all_algorithms()
        configs = configs or {}
        
        all_results = []
        algorithm_results = {}
        
        for algorithm in algorithms:
            logger.info(f"Evaluando algoritmo: {algorithm.to_string()}")
            config = configs.get(algorithm, {})
            
            run_results = []
            for run in range(runs):
                if run > 0 and ask_continue_callback and not ask_continue_callback(algorithm, run + 1, runs):
                    logger.info(f"Se detienen las ejecuciones de {algorithm.to_string()} después de {run} corridas.")
                    break
                
                logger.info(f"Ejecutando {algorithm.to_string()} - Corrida {run+1}/{runs}")
                # Una semilla fija se desplaza por corrida para que las corridas difieran
                run_config = config
                if config.get("seed") is not None:
                    run_config = dict(config, seed=int(config["seed"]) + run)
                metrics = self.run_algorithm(algorithm, run_config)
                run_results.append(metrics)
                
                logger.info(f"Tiempo de ejecución: {metrics['execution_time']:.2f} segundos")
                logger.info(f"Fitness: {metrics['fitness']:.4f}")
                logger.info(f"Utilización: {metrics['utilization']:.1f}%, "
                            f"Cobertura de habilidades: {metrics['skill_coverage']:.1f}%")
                logger.info("-" * 50)
                logger.debug("\n" + self.summary_export_service.export_summary(metrics["summary"], ExportFormat.TEXT))
            
            all_results.extend(run_results)
            
            if run_results:
                fitnesses = [r["fitness"] for r in run_results]
                times = [r["execution_time"] for r in run_results]
                utilizations = [r["utilization"] for r in run_results]
                coverages = [r["skill_coverage"] for r in run_results]
                best_run = max(run_results, key=lambda r: r["fitness"])
                
                algorithm_results[algorithm.to_string()] = {
                    "runs": len(run_results),
                    "best_result": best_run["result"],
                    "best_fitness": best_run["fitness"],
                    "avg_fitness": statistics.mean(fitnesses),
                    "std_fitness": statistics.stdev(fitnesses) if len(fitnesses) > 1 else 0,
                    "avg_time": statistics.mean(times),
                    "std_time": statistics.stdev(times) if len(times) > 1 else 0,
                    "avg_utilization": statistics.mean(utilizations),
                    "std_utilization": statistics.stdev(utilizations) if len(utilizations) > 1 else 0,
                    "avg_skill_coverage": statistics.mean(coverages),
                    "std_skill_coverage": statistics.stdev(coverages) if len(coverages) > 1 else 0
                }
        
        if self.visualization_service and output_dir and algorithm_results:
            self.visualization_service.plot_comparison(algorithm_results, output_dir)
            for stats in algorithm_results.values():
                self.visualization_service.plot_convergence(stats["best_result"], output_dir)
        
        if algorithm_results:
            best_algorithm = max(algorithm_results, key=lambda name: algorithm_results[name]["avg_fitness"])
            logger.info(f"El mejor algoritmo según el fitness promedio es: {best_algorithm}")
        
        return algorithm_results, all_results
