from dataclasses import dataclass, field
from datetime import date
from typing import List


@dataclass
class Project:
    """Representa un proyecto que requiere horas de trabajo y habilidades."""
    
    id: str = field(
        metadata={"description": "Identificador único del proyecto"}
    )
    name: str = field(
        metadata={"description": "Nombre del proyecto"}
    )
    start_date: date = field(
        metadata={"description": "Fecha de inicio del proyecto"}
    )
    end_date: date = field(
        metadata={"description": "Fecha de término del proyecto (>= start_date)"}
    )
    required_skills: List[str] = field(
        default_factory=list,
        metadata={
            "description": "Habilidades requeridas en orden; los duplicados se permiten "
                        "pero son redundantes"
        }
    )
    
    @property
    def duration_days(self) -> int:
        """Duración del proyecto en días."""
        return (self.end_date - self.start_date).days
