from abc import ABC, abstractmethod
from typing import List, Optional, Union

from mh_asignacion_proyectos.domain.models.optimization_summary import OptimizationSummary
from mh_asignacion_proyectos.domain.value_objects.export_format import ExportFormat


class SummaryExportPort(ABC):
    """Puerto de salida para exportar el resumen de una optimización."""
    
    @abstractmethod
    def export_summary(self,
                       summary: OptimizationSummary,
                       export_format: Union[ExportFormat, str],
                       output_path: Optional[str] = None) -> str:
        """Exporta un resumen a un formato específico.
        
        Args:
            summary: Resumen a exportar
            export_format: Formato como enum ExportFormat o string (text, csv, json)
            output_path: Ruta de salida opcional; sin ella se devuelve el contenido
            
        Returns:
            El contenido exportado, o la ruta escrita si se indicó output_path
            
        Raises:
            ValueError: Si el formato no está soportado
        """
        pass
    
    @abstractmethod
    def get_supported_formats(self) -> List[str]:
        """Obtiene la lista de formatos de exportación soportados."""
        pass
