from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4


def new_assignment_id() -> str:
    """Genera un identificador para asignaciones creadas por el optimizador."""
    return f"assign_{uuid4().hex}"


@dataclass
class Assignment:
    """Representa las horas semanales que un empleado dedica a un proyecto."""
    
    employee_id: str = field(
        metadata={"description": "Identificador del empleado asignado"}
    )
    project_id: str = field(
        metadata={"description": "Identificador del proyecto asignado"}
    )
    hours: float = field(
        default=0.0,
        metadata={"description": "Horas por semana comprometidas (nunca negativas)"}
    )
    id: str = field(
        default_factory=new_assignment_id,
        metadata={"description": "Identificador único dentro de una solución candidata"}
    )
    week: Optional[str] = field(
        default=None,
        metadata={"description": "Etiqueta opaca de semana/fecha, se conserva sin cambios"}
    )
    
    def clone(self) -> 'Assignment':
        """Crear una copia independiente de la asignación."""
        return Assignment(
            employee_id=self.employee_id,
            project_id=self.project_id,
            hours=self.hours,
            id=self.id,
            week=self.week
        )
