from dataclasses import dataclass, field
from typing import Dict, Iterable

from mh_asignacion_proyectos.domain.value_objects.proficiency_level import ProficiencyLevel


@dataclass
class Employee:
    """Representa un empleado disponible para ser asignado a proyectos."""
    
    id: str = field(
        metadata={"description": "Identificador único del empleado"}
    )
    name: str = field(
        metadata={"description": "Nombre del empleado"}
    )
    max_hours: float = field(
        default=40.0,
        metadata={"description": "Capacidad semanal del empleado en horas"}
    )
    skills: Dict[str, ProficiencyLevel] = field(
        default_factory=dict,
        metadata={
            "description": "Diccionario habilidad -> nivel de dominio. "
                        "Ejemplo: {'SQL': ProficiencyLevel.EXPERT}"
        }
    )
    
    def __post_init__(self):
        self.skills = {skill: ProficiencyLevel.coerce(level) for skill, level in self.skills.items()}
    
    @property
    def available_capacity(self) -> float:
        """Capacidad utilizable; una capacidad no positiva equivale a cero disponibilidad."""
        return self.max_hours if self.max_hours > 0 else 0.0
    
    def skill_level(self, skill: str) -> int:
        """Nivel numérico (0-4) de una habilidad; la ausencia equivale a NONE."""
        return int(self.skills.get(skill, ProficiencyLevel.NONE))
    
    def has_skill(self, skill: str) -> bool:
        return self.skill_level(skill) > ProficiencyLevel.NONE
    
    def has_any_skill(self, skills: Iterable[str]) -> bool:
        """Verifica si el empleado posee al menos una de las habilidades indicadas."""
        return any(self.has_skill(skill) for skill in skills)
