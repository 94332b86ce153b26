"""
Tests for random solution construction and the mutation operators.
"""

import random

import pytest

from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.solution import Solution
from mh_asignacion_proyectos.domain.services.solution_generator import (
    MAX_ASSIGNMENTS_PER_PROJECT,
    MAX_HOURS,
    MIN_HOURS,
    SolutionGenerator,
)


class TestRandomSolution:
    """Test cases for random candidate generation."""
    
    def test_each_project_gets_one_to_three_distinct_employees(self, employees, projects, rng):
        generator = SolutionGenerator(employees, projects, rng)
        
        for _ in range(50):
            solution = generator.random_solution()
            for project in projects:
                assigned = [a.employee_id for a in solution.get_project_assignments(project.id)]
                assert 1 <= len(assigned) <= MAX_ASSIGNMENTS_PER_PROJECT
                assert len(assigned) == len(set(assigned))
    
    def test_hours_within_bounds(self, employees, projects, rng):
        generator = SolutionGenerator(employees, projects, rng)
        
        for _ in range(50):
            for assignment in generator.random_solution().assignments:
                assert MIN_HOURS <= assignment.hours <= MAX_HOURS
    
    def test_references_are_valid(self, employees, projects, rng):
        generator = SolutionGenerator(employees, projects, rng)
        employee_ids = {e.id for e in employees}
        project_ids = {p.id for p in projects}
        
        for _ in range(20):
            for assignment in generator.random_solution().assignments:
                assert assignment.employee_id in employee_ids
                assert assignment.project_id in project_ids
    
    def test_seeded_generators_agree(self, employees, projects):
        first = SolutionGenerator(employees, projects, random.Random(7)).random_solution()
        second = SolutionGenerator(employees, projects, random.Random(7)).random_solution()
        
        assert [(a.employee_id, a.project_id, a.hours) for a in first.assignments] == \
               [(a.employee_id, a.project_id, a.hours) for a in second.assignments]


class TestMutationOperators:
    """Test cases for the shared mutation operators."""
    
    def test_mutation_keeps_hours_non_negative_and_references_valid(self, employees, projects, rng):
        generator = SolutionGenerator(employees, projects, rng)
        employee_ids = {e.id for e in employees}
        project_ids = {p.id for p in projects}
        solution = generator.random_solution()
        
        for _ in range(500):
            generator.mutate(solution)
            for assignment in solution.assignments:
                assert assignment.hours >= 0
                assert assignment.employee_id in employee_ids
                assert assignment.project_id in project_ids
    
    def test_perturb_hours_is_clamped(self, employees, projects, rng):
        generator = SolutionGenerator(employees, projects, rng)
        solution = Solution([Assignment("e1", "p1", MAX_HOURS), Assignment("e2", "p2", MIN_HOURS)])
        
        for _ in range(200):
            assert generator.perturb_hours(solution)
            for assignment in solution.assignments:
                assert MIN_HOURS <= assignment.hours <= MAX_HOURS
    
    def test_remove_keeps_at_least_one_assignment(self, employees, projects, rng):
        generator = SolutionGenerator(employees, projects, rng)
        solution = Solution([Assignment("e1", "p1", 10), Assignment("e2", "p2", 10)])
        
        assert generator.remove_assignment(solution) is True
        assert len(solution) == 1
        assert generator.remove_assignment(solution) is False
        assert len(solution) == 1
    
    def test_add_random_assignment(self, employees, projects, rng):
        generator = SolutionGenerator(employees, projects, rng)
        solution = Solution()
        
        assert generator.add_random_assignment(solution) is True
        assert len(solution) == 1
    
    def test_operators_on_empty_solution(self, employees, projects, rng):
        generator = SolutionGenerator(employees, projects, rng)
        
        assert generator.reassign_employee(Solution()) is False
        assert generator.perturb_hours(Solution()) is False
        assert generator.remove_assignment(Solution()) is False
    
    def test_neighbor_is_an_independent_copy(self, employees, projects, rng):
        generator = SolutionGenerator(employees, projects, rng)
        original = generator.random_solution()
        before = [(a.id, a.employee_id, a.project_id, a.hours) for a in original.assignments]
        
        for _ in range(20):
            neighbor = generator.neighbor(original)
            for assignment in neighbor.assignments:
                assignment.hours = 0
        
        assert [(a.id, a.employee_id, a.project_id, a.hours) for a in original.assignments] == before


class TestSolutionModel:
    """Test cases for the candidate container."""
    
    def test_clone_is_deep(self):
        solution = Solution([Assignment("e1", "p1", 10, week="2024-W01")], fitness_score=3.0)
        
        copy = solution.clone()
        copy.assignments[0].hours = 99
        copy.add_assignment(Assignment("e2", "p1", 5))
        
        assert solution.assignments[0].hours == 10
        assert len(solution) == 1
        assert copy.assignments[0].id == solution.assignments[0].id
        assert copy.assignments[0].week == "2024-W01"
        assert copy.fitness_score == 3.0
    
    def test_project_ids_keep_first_appearance_order(self):
        solution = Solution([
            Assignment("e1", "p2", 10),
            Assignment("e2", "p1", 10),
            Assignment("e3", "p2", 10),
        ])
        
        assert solution.get_project_ids() == ["p2", "p1"]
        assert solution.get_employee_hours() == {"e1": 10.0, "e2": 10.0, "e3": 10.0}
    
    def test_generated_ids_are_unique(self):
        ids = {Assignment("e1", "p1", 1).id for _ in range(100)}
        
        assert len(ids) == 100
        assert all(i.startswith("assign_") for i in ids)
