from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

from mh_asignacion_proyectos.domain.models.optimization_result import OptimizationResult
from mh_asignacion_proyectos.domain.models.optimization_summary import OptimizationSummary
from mh_asignacion_proyectos.domain.services.run_control import RunControl
from mh_asignacion_proyectos.domain.value_objects.algorithm_type import AlgorithmType


class AssignmentOptimizationServicePort(ABC):
    """Puerto de entrada para el servicio de asignación de empleados a proyectos.
    
    Define la interfaz que los adaptadores de entrada utilizarán para interactuar con
    el núcleo de la aplicación.
    """
    
    @abstractmethod
    def generate_assignments(self,
                             algorithm: Union[AlgorithmType, str] = None,
                             algorithm_config: Dict[str, Any] = None,
                             run_control: Optional[RunControl] = None) -> OptimizationResult:
        """Optimiza las asignaciones con los datos cargados en los repositorios.
        
        Args:
            algorithm: Algoritmo a utilizar como enum AlgorithmType o string
            algorithm_config: Configuración específica para el algoritmo
            run_control: Cancelación y progreso opcionales
            
        Returns:
            Resultado de la optimización
        """
        pass
    
    @abstractmethod
    def optimize_request(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Atiende una solicitud completa con empleados, proyectos, algoritmo y opciones.
        
        Args:
            payload: Diccionario con las claves employees, projects, assignments,
                     algorithm y options
            
        Returns:
            Diccionario {"success": True, "result": {...}} con solución, fitness y resumen
            
        Raises:
            InvalidInputError: Si la solicitud está mal formada
        """
        pass
    
    @abstractmethod
    def get_available_algorithms(self) -> List[str]:
        """Obtiene la lista de algoritmos de optimización disponibles como strings."""
        pass
    
    @abstractmethod
    def set_algorithm(self, algorithm_name: Union[AlgorithmType, str]) -> None:
        """Establece el algoritmo de optimización a utilizar.
        
        Raises:
            InvalidInputError: Si el algoritmo no está disponible
        """
        pass
    
    @abstractmethod
    def get_algorithm_default_config(self, algorithm_name: Union[AlgorithmType, str]) -> Dict[str, Any]:
        """Obtiene la configuración predeterminada para un algoritmo."""
        pass
    
    @abstractmethod
    def build_summary(self, result: OptimizationResult) -> OptimizationSummary:
        """Genera el resumen de utilización y cobertura de un resultado."""
        pass
