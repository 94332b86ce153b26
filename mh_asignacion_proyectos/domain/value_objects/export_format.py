from enum import Enum, auto
from typing import List


class ExportFormat(Enum):
    """Representa los formatos de exportación del resumen de optimización."""
    
    TEXT = auto()
    CSV = auto()
    JSON = auto()
    
    @classmethod
    def from_string(cls, format_str: str) -> 'ExportFormat':
        """Convierte una cadena de texto a un enum ExportFormat.
        
        Raises:
            ValueError: Si la cadena no corresponde a un formato válido
        """
        format_str_lower = format_str.lower()
        
        if format_str_lower == 'text':
            return cls.TEXT
        elif format_str_lower == 'csv':
            return cls.CSV
        elif format_str_lower == 'json':
            return cls.JSON
        else:
            raise ValueError(f"'{format_str}' no es un formato de exportación válido")
    
    def to_string(self) -> str:
        if self == self.TEXT:
            return "text"
        elif self == self.CSV:
            return "csv"
        elif self == self.JSON:
            return "json"
        
    @classmethod
    def get_all_formats(cls) -> List['ExportFormat']:
        """Obtiene una lista con todos los formatos disponibles."""
        return [cls.TEXT, cls.CSV, cls.JSON]
