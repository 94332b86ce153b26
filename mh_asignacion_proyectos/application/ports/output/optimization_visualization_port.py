"""Puerto de salida para la visualización de optimizaciones."""

from abc import ABC, abstractmethod
from typing import Any, Dict

from mh_asignacion_proyectos.domain.models.optimization_result import OptimizationResult


class OptimizationVisualizationPort(ABC):
    """Puerto para graficar la convergencia y comparar algoritmos."""
    
    @abstractmethod
    def plot_convergence(self, result: OptimizationResult, output_dir: str = "./assets/plots") -> str:
        """
        Grafica el historial de una ejecución y lo guarda como imagen.
        
        Args:
            result: Resultado con historial (genético o recocido)
            output_dir: Directorio donde guardar el gráfico
            
        Returns:
            Ruta del archivo generado, o cadena vacía si el resultado no tiene historial
        """
        pass
    
    @abstractmethod
    def plot_comparison(self, results: Dict[str, Any], output_dir: str = "./assets/plots") -> Dict[str, str]:
        """
        Crea gráficos de comparación entre algoritmos y los guarda en el directorio especificado.
        
        Args:
            results: Estadísticas por algoritmo
            output_dir: Directorio donde guardar los gráficos generados
            
        Returns:
            Diccionario con rutas de los archivos generados
        """
        pass
