from enum import IntEnum
from typing import List, Union


class ProficiencyLevel(IntEnum):
    """Nivel de dominio de una habilidad, ordenado de menor a mayor."""
    
    NONE = 0
    BEGINNER = 1
    INTERMEDIATE = 2
    ADVANCED = 3
    EXPERT = 4
    
    @classmethod
    def from_string(cls, level_str: str) -> 'ProficiencyLevel':
        """Convierte una cadena de texto a un enum ProficiencyLevel.
        
        Acepta los nombres usados en las hojas de cálculo ('Expert', 'Beginner', ...)
        sin distinguir mayúsculas, y también su valor numérico ('0'..'4').
        
        Args:
            level_str: Cadena de texto que representa un nivel
            
        Returns:
            Enum ProficiencyLevel correspondiente
            
        Raises:
            ValueError: Si la cadena no corresponde a un nivel válido
        """
        level_str_lower = level_str.strip().lower()
        
        if level_str_lower in ('none', 'ninguno', ''):
            return cls.NONE
        elif level_str_lower in ('beginner', 'principiante'):
            return cls.BEGINNER
        elif level_str_lower in ('intermediate', 'intermedio'):
            return cls.INTERMEDIATE
        elif level_str_lower in ('advanced', 'avanzado'):
            return cls.ADVANCED
        elif level_str_lower in ('expert', 'experto'):
            return cls.EXPERT
        elif level_str_lower.isdigit() and int(level_str_lower) in range(5):
            return cls(int(level_str_lower))
        else:
            raise ValueError(f"'{level_str}' no es un nivel de habilidad válido")
    
    @classmethod
    def coerce(cls, value: Union['ProficiencyLevel', str, int, None]) -> 'ProficiencyLevel':
        """Normaliza un nivel recibido como enum, cadena, entero o None."""
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"'{value}' no es un nivel de habilidad válido")
        if isinstance(value, int):
            if value not in range(5):
                raise ValueError(f"'{value}' no es un nivel de habilidad válido")
            return cls(value)
        return cls.from_string(str(value))
    
    def to_string(self) -> str:
        """Convierte el enum a la representación usada en la interfaz."""
        return self.name.capitalize()
    
    @classmethod
    def get_all_levels(cls) -> List['ProficiencyLevel']:
        return list(cls)
