"""
Tests shared by every optimization strategy.
"""

import pytest

from mh_asignacion_proyectos.domain.exceptions import InvalidInputError
from mh_asignacion_proyectos.domain.services.optimizers.constraint_satisfaction_optimizer import ConstraintSatisfactionOptimizer
from mh_asignacion_proyectos.domain.services.optimizers.genetic_algorithm_optimizer import GeneticAlgorithmOptimizer
from mh_asignacion_proyectos.domain.services.optimizers.simulated_annealing_optimizer import SimulatedAnnealingOptimizer
from mh_asignacion_proyectos.domain.services.run_control import RunControl

STRATEGIES = [GeneticAlgorithmOptimizer, SimulatedAnnealingOptimizer, ConstraintSatisfactionOptimizer]


@pytest.mark.parametrize("strategy_class", STRATEGIES)
class TestStrategyInputGuard:
    """Test cases for rejecting empty inputs when a strategy is called directly."""

    def test_rejects_empty_employees(self, strategy_class, projects, rng):
        reports = []
        control = RunControl(progress_callback=lambda progress, best: reports.append(progress))

        with pytest.raises(InvalidInputError):
            strategy_class().optimize([], projects, rng=rng, run_control=control)
        assert reports == []

    def test_rejects_empty_projects(self, strategy_class, employees, rng):
        with pytest.raises(InvalidInputError):
            strategy_class().optimize(employees, [], rng=rng)
