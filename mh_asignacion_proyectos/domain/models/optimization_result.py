from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from mh_asignacion_proyectos.domain.models.solution import Solution


@dataclass
class GenerationRecord:
    """Registro de una generación del algoritmo genético."""
    generation: int
    best_fitness: float
    average_fitness: float
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "generation": self.generation,
            "bestFitness": self.best_fitness,
            "averageFitness": self.average_fitness
        }


@dataclass
class IterationRecord:
    """Registro periódico del recocido simulado."""
    iteration: int
    temperature: float
    current_fitness: float
    best_fitness: float
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "iteration": self.iteration,
            "temperature": self.temperature,
            "currentFitness": self.current_fitness,
            "bestFitness": self.best_fitness
        }


HistoryRecord = Union[GenerationRecord, IterationRecord]


@dataclass
class OptimizationResult:
    """Resultado de ejecutar una estrategia de optimización."""
    
    solution: Solution = field(
        metadata={"description": "Mejor solución encontrada"}
    )
    fitness: float = field(
        metadata={"description": "Fitness de la mejor solución"}
    )
    algorithm: str = field(
        default="",
        metadata={"description": "Nombre del algoritmo que produjo el resultado"}
    )
    history: Optional[List[HistoryRecord]] = field(
        default=None,
        metadata={"description": "Historial por generación o iteración, si el algoritmo lo registra"}
    )
    unassigned_projects: Optional[List[str]] = field(
        default=None,
        metadata={"description": "Proyectos sin horas tras la construcción (solo heurística de restricciones)"}
    )
    cancelled: bool = field(
        default=False,
        metadata={"description": "True si la ejecución se detuvo por cancelación o plazo vencido"}
    )
    execution_time: float = field(
        default=0.0,
        metadata={"description": "Tiempo de ejecución en segundos"}
    )
    
    def to_dict(self) -> Dict[str, Any]:
        """Representación serializable con las claves del contrato externo."""
        result: Dict[str, Any] = {
            "solution": [
                {
                    "id": a.id,
                    "employeeId": a.employee_id,
                    "projectId": a.project_id,
                    "hours": a.hours,
                    **({"week": a.week} if a.week is not None else {})
                }
                for a in self.solution.assignments
            ],
            "fitness": self.fitness
        }
        if self.history is not None:
            result["history"] = [record.to_dict() for record in self.history]
        if self.unassigned_projects is not None:
            result["unassignedProjects"] = list(self.unassigned_projects)
        return result
