"""Adaptador para la interfaz de línea de comandos."""

import argparse
import json
import os
import logging
import sys
from typing import Any, Dict, List, Optional

from mh_asignacion_proyectos.domain.exceptions import InvalidInputError
from mh_asignacion_proyectos.domain.services.assignment_optimizer_service import AssignmentOptimizerService
from mh_asignacion_proyectos.domain.services.input_validator import InputValidator
from mh_asignacion_proyectos.domain.value_objects.algorithm_type import AlgorithmType
from mh_asignacion_proyectos.domain.value_objects.export_format import ExportFormat
from mh_asignacion_proyectos.application.usecases.algorithm_comparison_usecase import AlgorithmComparisonUseCase
from mh_asignacion_proyectos.infrastructure.adapters.input.assignment_optimization_service_adapter import AssignmentOptimizationServiceAdapter
from mh_asignacion_proyectos.infrastructure.adapters.input.payload_mapper import PayloadMapper
from mh_asignacion_proyectos.infrastructure.adapters.output.summary_export_adapter import SummaryExportAdapter
from mh_asignacion_proyectos.infrastructure.adapters.output.visualization_adapter import OptimizationVisualizationAdapter
from mh_asignacion_proyectos.infrastructure.repositories.in_memory_assignment_repository import InMemoryAssignmentRepository
from mh_asignacion_proyectos.infrastructure.repositories.in_memory_employee_repository import InMemoryEmployeeRepository
from mh_asignacion_proyectos.infrastructure.repositories.in_memory_project_repository import InMemoryProjectRepository

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = "./assets/logs/mh-asignacion-proyectos.log"


class CLIInterfaceAdapter:
    """Adaptador para la interfaz de línea de comandos del sistema.
    
    Lee una solicitud JSON con empleados, proyectos, asignaciones existentes,
    algoritmo y opciones, ejecuta la optimización (o una comparación de
    algoritmos) y exporta el resumen en el formato pedido.
    """
    
    def __init__(self, payload_mapper: PayloadMapper = None):
        self.payload_mapper = payload_mapper or PayloadMapper()
        self.summary_exporter = SummaryExportAdapter()
        self.visualization = OptimizationVisualizationAdapter()
    
    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="mh-asignacion-proyectos",
            description="Optimiza la asignación de empleados a proyectos con metaheurísticas."
        )
        parser.add_argument("request", help="Archivo JSON con employees, projects, assignments, algorithm y options")
        parser.add_argument("-a", "--algorithm", choices=[a.to_string() for a in AlgorithmType.get_all_algorithms()],
                            help="Algoritmo a utilizar (reemplaza el de la solicitud)")
        parser.add_argument("--seed", type=int, help="Semilla para ejecuciones reproducibles")
        parser.add_argument("-f", "--format", default="text",
                            choices=self.summary_exporter.get_supported_formats(),
                            help="Formato del resumen (default: text)")
        parser.add_argument("-o", "--output", help="Archivo donde guardar el resumen")
        parser.add_argument("--plot", metavar="DIR", help="Directorio donde guardar los gráficos")
        parser.add_argument("--compare", type=int, metavar="RUNS",
                            help="Compara todos los algoritmos con RUNS ejecuciones cada uno")
        parser.add_argument("--log-file", default=DEFAULT_LOG_FILE, help="Ruta al archivo de log")
        return parser
    
    def configure_logging(self, log_file: str = DEFAULT_LOG_FILE):
        """
        Configura el logging para la aplicación.
        
        Args:
            log_file: Ruta al archivo de log
        """
        # Asegurar que el directorio de logs exista
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler(log_file),
                logging.StreamHandler(sys.stdout)
            ]
        )
    
    def load_request(self, path: str) -> Dict[str, Any]:
        """Lee la solicitud JSON desde disco."""
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise InvalidInputError("La solicitud debe ser un objeto JSON")
        return payload
    
    def build_service_adapter(self, payload: Dict[str, Any]) -> AssignmentOptimizationServiceAdapter:
        """Carga la solicitud en repositorios en memoria y conecta el servicio."""
        employees = self.payload_mapper.employees_from_payload(payload.get("employees"))
        projects = self.payload_mapper.projects_from_payload(payload.get("projects"))
        assignments = self.payload_mapper.assignments_from_payload(payload.get("assignments"))
        
        service = AssignmentOptimizerService(
            employee_repository=InMemoryEmployeeRepository(employees),
            project_repository=InMemoryProjectRepository(projects),
            input_validator=InputValidator(),
            assignment_repository=InMemoryAssignmentRepository(assignments)
        )
        return AssignmentOptimizationServiceAdapter(service, self.payload_mapper)
    
    def _emit(self, content: str, output: Optional[str]) -> None:
        if output:
            with open(output, "w", encoding="utf-8") as f:
                f.write(content)
            logger.info(f"Resumen guardado en '{output}'")
        else:
            print(content)
    
    def run(self, argv: Optional[List[str]] = None) -> int:
        """Ejecuta la interfaz de línea de comandos y devuelve el código de salida."""
        args = self.build_parser().parse_args(argv)
        self.configure_logging(args.log_file)
        logger.info("Iniciando Sistema de Asignación Óptima de Empleados a Proyectos")
        
        try:
            payload = self.load_request(args.request)
            service_adapter = self.build_service_adapter(payload)
            
            config = self.payload_mapper.options_from_payload(payload.get("options"))
            if args.seed is not None:
                config["seed"] = args.seed
            
            if args.compare:
                comparison = AlgorithmComparisonUseCase(
                    assignment_service=service_adapter,
                    summary_export_service=self.summary_exporter,
                    visualization_service=self.visualization
                )
                configs = {algorithm: dict(config) for algorithm in AlgorithmType.get_all_algorithms()}
                results, _ = comparison.compare_algorithms(
                    runs=max(1, args.compare),
                    configs=configs,
                    output_dir=args.plot
                )
                print("\nResultados de la comparación:")
                for name, stats in results.items():
                    print(f"  {name}: fitness promedio {stats['avg_fitness']:.2f} "
                          f"(± {stats['std_fitness']:.2f}), tiempo {stats['avg_time']:.2f}s")
                return 0
            
            algorithm = args.algorithm or payload.get("algorithm") or AlgorithmType.GENETIC.to_string()
            result = service_adapter.generate_assignments(algorithm=algorithm, algorithm_config=config)
            summary = service_adapter.build_summary(result)
            
            content = self.summary_exporter.export_summary(summary, ExportFormat.from_string(args.format))
            self._emit(content, args.output)
            
            if args.plot:
                plot_path = self.visualization.plot_convergence(result, args.plot)
                if plot_path:
                    print(f"Gráfico de convergencia: {plot_path}")
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"No se pudo leer la solicitud '{args.request}': {e}")
            return 1
        except InvalidInputError as e:
            logger.error(f"Solicitud inválida: {e}")
            return 2
        
        logger.info("Proceso completado con éxito.")
        return 0


def main() -> None:
    sys.exit(CLIInterfaceAdapter().run())


if __name__ == "__main__":
    main()
