import random
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from mh_asignacion_proyectos.domain.exceptions import InvalidInputError
from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.optimization_result import OptimizationResult
from mh_asignacion_proyectos.domain.models.project import Project
from mh_asignacion_proyectos.domain.services.run_control import RunControl


class OptimizerStrategy(ABC):
    """Strategy interface for optimization algorithms.
    
    This follows the Strategy pattern to allow interchangeable search algorithms.
    Each algorithm implementation must follow this interface and must not keep
    state between runs: all data arrives as parameters and leaves in the result.
    """
    
    @abstractmethod
    def optimize(self,
                 employees: List[Employee],
                 projects: List[Project],
                 config: Dict[str, Any] = None,
                 assignments: Optional[List[Assignment]] = None,
                 rng: Optional[random.Random] = None,
                 run_control: Optional[RunControl] = None) -> OptimizationResult:
        """Search for a good assignment set for the given employees and projects.
        
        Args:
            employees: List of available employees
            projects: List of projects to staff
            config: Algorithm-specific configuration parameters
            assignments: Existing assignments supplied by the caller (never mutated)
            rng: Random source; a seeded instance makes the run reproducible
            run_control: Optional cancellation token and progress callback
            
        Returns:
            An OptimizationResult with the best solution and its fitness
        """
        pass
    
    @abstractmethod
    def get_name(self) -> str:
        """Get the name of the optimization strategy."""
        pass
    
    @abstractmethod
    def get_default_config(self) -> Dict[str, Any]:
        """Get the default configuration parameters for this algorithm."""
        pass
    
    @staticmethod
    def require_input(employees: List[Employee], projects: List[Project]) -> None:
        """Reject empty inputs before any search work starts."""
        if not employees:
            raise InvalidInputError("Se requiere al menos un empleado")
        if not projects:
            raise InvalidInputError("Se requiere al menos un proyecto")

    def build_config(self, config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Merge the caller's configuration over the defaults."""
        merged = self.get_default_config()
        if config:
            merged.update({k: v for k, v in config.items() if v is not None})
        return merged
    
    @staticmethod
    def build_rng(rng: Optional[random.Random], config: Dict[str, Any]) -> random.Random:
        if rng is not None:
            return rng
        return random.Random(config.get("seed"))
