"""
Tests for the simulated annealing strategy.
"""

import random

import pytest

from conftest import signature
from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.optimization_result import IterationRecord
from mh_asignacion_proyectos.domain.services.fitness_evaluator import FitnessEvaluator
from mh_asignacion_proyectos.domain.services.optimizers.simulated_annealing_optimizer import SimulatedAnnealingOptimizer
from mh_asignacion_proyectos.domain.services.run_control import RunControl
from mh_asignacion_proyectos.domain.services.solution_generator import SolutionGenerator


class TestSimulatedAnnealingOptimizer:
    """Test cases for the single-trajectory search."""
    
    def test_initial_temperature_below_minimum_returns_initial_solution(self, employees, projects):
        expected = SolutionGenerator(employees, projects, random.Random(3)).random_solution()
        
        result = SimulatedAnnealingOptimizer().optimize(
            employees, projects,
            {"initial_temp": 0.5, "min_temp": 1.0},
            rng=random.Random(3)
        )
        
        assert signature(result.solution) == signature(expected)
        assert result.fitness == pytest.approx(FitnessEvaluator(employees, projects).score(expected))
        assert result.history == []
    
    def test_history_is_recorded_every_ten_iterations(self, employees, projects, rng):
        result = SimulatedAnnealingOptimizer().optimize(
            employees, projects,
            {"initial_temp": 1000, "cooling_rate": 0.99, "min_temp": 1, "max_iterations": 50},
            rng=rng
        )
        
        assert [record.iteration for record in result.history] == [0, 10, 20, 30, 40]
        assert all(isinstance(record, IterationRecord) for record in result.history)
        # temperature is recorded after cooling
        assert result.history[0].temperature == pytest.approx(990.0)
        assert result.history[1].temperature == pytest.approx(1000 * 0.99 ** 11)
    
    def test_stops_when_temperature_reaches_minimum(self, employees, projects, rng):
        result = SimulatedAnnealingOptimizer().optimize(
            employees, projects,
            {"initial_temp": 100, "cooling_rate": 0.5, "min_temp": 1, "max_iterations": 1000},
            rng=rng
        )
        
        # 100 * 0.5^7 < 1, so at most seven iterations run
        assert [record.iteration for record in result.history] == [0]
    
    def test_best_is_never_worse_than_visited_states(self, employees, projects, rng):
        result = SimulatedAnnealingOptimizer().optimize(
            employees, projects, {"max_iterations": 300, "history_interval": 1}, rng=rng
        )
        
        assert all(record.current_fitness <= result.fitness for record in result.history)
        best = [record.best_fitness for record in result.history]
        assert best == sorted(best)
        assert FitnessEvaluator(employees, projects).score(result.solution) == pytest.approx(result.fitness)
    
    def test_seeded_runs_are_reproducible(self, employees, projects):
        config = {"max_iterations": 200, "seed": 42}
        
        first = SimulatedAnnealingOptimizer().optimize(employees, projects, config)
        second = SimulatedAnnealingOptimizer().optimize(employees, projects, config)
        
        assert first.fitness == second.fitness
        assert signature(first.solution) == signature(second.solution)
        assert [r.to_dict() for r in first.history] == [r.to_dict() for r in second.history]
    
    def test_cancellation_returns_best_so_far(self, employees, projects, rng):
        control = RunControl()
        control.cancel()
        
        result = SimulatedAnnealingOptimizer().optimize(employees, projects, rng=rng, run_control=control)
        
        assert result.cancelled is True
        assert result.history == []
        assert len(result.solution) > 0
    
    def test_starts_from_existing_assignments_when_requested(self, employees, projects, rng):
        existing = [Assignment("e1", "p1", 40)]
        
        result = SimulatedAnnealingOptimizer().optimize(
            employees, projects,
            {"initial_temp": 0.5, "seed_with_existing": True},
            assignments=existing, rng=rng
        )
        
        assert signature(result.solution) == [("e1", "p1", 40)]
        assert result.solution.assignments[0] is not existing[0]
    
    def test_final_progress_is_reported_when_temperature_stops_the_loop(self, employees, projects, rng):
        reports = []
        control = RunControl(progress_callback=lambda progress, best: reports.append((progress, best)))

        # with the defaults the temperature reaches the minimum long before max_iterations
        result = SimulatedAnnealingOptimizer().optimize(employees, projects, rng=rng, run_control=control)

        assert reports[-1] == (100.0, result.fitness)
        assert all(progress < 100.0 for progress, _ in reports[:-1])

    def test_acceptance_probability(self):
        assert SimulatedAnnealingOptimizer._acceptance_probability(0, 10) == pytest.approx(1.0)
        assert SimulatedAnnealingOptimizer._acceptance_probability(-10, 10) == pytest.approx(0.36787944)
        assert SimulatedAnnealingOptimizer._acceptance_probability(-10, 0) == pytest.approx(0.0)
