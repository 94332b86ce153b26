from typing import Dict, Any, List, Optional, Union
import logging

from mh_asignacion_proyectos.application.ports.input.assignment_optimization_service_port import AssignmentOptimizationServicePort
from mh_asignacion_proyectos.domain.exceptions import InvalidInputError
from mh_asignacion_proyectos.domain.models.optimization_result import OptimizationResult
from mh_asignacion_proyectos.domain.models.optimization_summary import OptimizationSummary
from mh_asignacion_proyectos.domain.services.assignment_optimizer_service import AssignmentOptimizerService
from mh_asignacion_proyectos.domain.services.optimization_summary_builder import OptimizationSummaryBuilder
from mh_asignacion_proyectos.domain.services.optimizers.constraint_satisfaction_optimizer import ConstraintSatisfactionOptimizer
from mh_asignacion_proyectos.domain.services.optimizers.genetic_algorithm_optimizer import GeneticAlgorithmOptimizer
from mh_asignacion_proyectos.domain.services.optimizers.simulated_annealing_optimizer import SimulatedAnnealingOptimizer
from mh_asignacion_proyectos.domain.services.run_control import RunControl
from mh_asignacion_proyectos.domain.value_objects.algorithm_type import AlgorithmType
from mh_asignacion_proyectos.infrastructure.adapters.input.payload_mapper import PayloadMapper


logger = logging.getLogger(__name__)


class AssignmentOptimizationServiceAdapter(AssignmentOptimizationServicePort):
    """Adaptador de entrada para el servicio de asignación de empleados a proyectos.
    
    Implementa el puerto de entrada AssignmentOptimizationServicePort y se comunica
    con el dominio de la aplicación.
    """
    
    def __init__(self, assignment_optimizer_service: AssignmentOptimizerService,
                 payload_mapper: PayloadMapper = None):
        self.assignment_optimizer_service = assignment_optimizer_service
        self.payload_mapper = payload_mapper or PayloadMapper()
        self.algorithms = {
            AlgorithmType.GENETIC: GeneticAlgorithmOptimizer(),
            AlgorithmType.ANNEALING: SimulatedAnnealingOptimizer(),
            AlgorithmType.CONSTRAINT: ConstraintSatisfactionOptimizer()
        }
    
    def _convert_to_algorithm_enum(self, algorithm: Union[AlgorithmType, str]) -> Optional[AlgorithmType]:
        """
        Convierte un nombre de algoritmo (string o enum) a un enum AlgorithmType.
        
        Raises:
            InvalidInputError: Si el algoritmo no está disponible
        """
        if algorithm is None:
            return None
        
        if isinstance(algorithm, AlgorithmType):
            return algorithm
        
        try:
            return AlgorithmType.from_string(str(algorithm))
        except ValueError:
            available_algorithms = self.get_available_algorithms()
            raise InvalidInputError(f"Algoritmo no disponible: {algorithm}. "
                                    f"Opciones: {', '.join(available_algorithms)}")
    
    def _validate_algorithm(self, algorithm_enum: AlgorithmType) -> None:
        if algorithm_enum not in self.algorithms:
            available_algorithms = self.get_available_algorithms()
            raise InvalidInputError(f"Algoritmo no disponible: {algorithm_enum}. "
                                    f"Opciones: {', '.join(available_algorithms)}")
    
    def generate_assignments(self,
                             algorithm: Union[AlgorithmType, str] = None,
                             algorithm_config: Dict[str, Any] = None,
                             run_control: Optional[RunControl] = None) -> OptimizationResult:
        """Optimiza con los datos de los repositorios.
        
        Implementación del método definido en el puerto de entrada.
        """
        algorithm_enum = self._convert_to_algorithm_enum(algorithm)
        
        if algorithm_enum is not None:
            self.set_algorithm(algorithm_enum)
        
        # Si no hay un algoritmo establecido en el servicio, usamos el genético por defecto
        if not self.assignment_optimizer_service.optimizer_strategy:
            self.set_algorithm(AlgorithmType.GENETIC)
        
        return self.assignment_optimizer_service.generate_optimal_assignments(
            config=algorithm_config,
            run_control=run_control
        )
    
    def optimize_request(self, payload: Dict[str, Any],
                         run_control: Optional[RunControl] = None) -> Dict[str, Any]:
        """Atiende una solicitud con la forma {employees, projects, assignments, algorithm, options}."""
        if not isinstance(payload, dict):
            raise InvalidInputError("La solicitud debe ser un objeto")
        if not payload.get("employees") or not payload.get("projects"):
            raise InvalidInputError("Faltan datos obligatorios: se requieren 'employees' y 'projects'")
        
        algorithm_enum = self._convert_to_algorithm_enum(payload.get("algorithm") or "")
        self._validate_algorithm(algorithm_enum)
        
        employees = self.payload_mapper.employees_from_payload(payload["employees"])
        projects = self.payload_mapper.projects_from_payload(payload["projects"])
        assignments = self.payload_mapper.assignments_from_payload(payload.get("assignments"))
        config = self.payload_mapper.options_from_payload(payload.get("options"))
        
        self.assignment_optimizer_service.set_optimizer_strategy(self.algorithms[algorithm_enum])
        result = self.assignment_optimizer_service.optimize(
            employees, projects, assignments, config, run_control=run_control
        )
        summary = OptimizationSummaryBuilder(employees, projects).build_from_result(result)
        
        response = result.to_dict()
        response["summary"] = summary.to_dict()
        return {"success": True, "result": response}
    
    def build_summary(self, result: OptimizationResult) -> OptimizationSummary:
        return self.assignment_optimizer_service.build_summary(result)
    
    def get_available_algorithms(self) -> List[str]:
        """Obtiene la lista de algoritmos de optimización disponibles como strings."""
        return [alg.to_string() for alg in self.algorithms.keys()]
    
    def get_available_algorithm_enums(self) -> List[AlgorithmType]:
        """Obtiene la lista de algoritmos de optimización disponibles como enums."""
        return list(self.algorithms.keys())
    
    def set_algorithm(self, algorithm_name: Union[AlgorithmType, str]) -> None:
        """Establece el algoritmo de optimización a utilizar."""
        algorithm_enum = self._convert_to_algorithm_enum(algorithm_name)
        self._validate_algorithm(algorithm_enum)
        
        self.assignment_optimizer_service.set_optimizer_strategy(self.algorithms[algorithm_enum])
        logger.info(f"Algoritmo establecido: {algorithm_enum.to_string()}")
    
    def get_algorithm_default_config(self, algorithm_name: Union[AlgorithmType, str]) -> Dict[str, Any]:
        """Obtiene la configuración predeterminada para un algoritmo."""
        algorithm_enum = self._convert_to_algorithm_enum(algorithm_name)
        self._validate_algorithm(algorithm_enum)
        
        return self.algorithms[algorithm_enum].get_default_config()
