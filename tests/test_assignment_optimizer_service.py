"""
Tests for the optimizer service facade and the in-memory repositories.
"""

from datetime import date

import pytest

from mh_asignacion_proyectos.domain.exceptions import InvalidInputError
from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.services.assignment_optimizer_service import AssignmentOptimizerService
from mh_asignacion_proyectos.domain.services.input_validator import InputValidator
from mh_asignacion_proyectos.domain.value_objects.algorithm_type import AlgorithmType
from mh_asignacion_proyectos.infrastructure.repositories.in_memory_assignment_repository import InMemoryAssignmentRepository
from mh_asignacion_proyectos.infrastructure.repositories.in_memory_employee_repository import InMemoryEmployeeRepository
from mh_asignacion_proyectos.infrastructure.repositories.in_memory_project_repository import InMemoryProjectRepository


@pytest.fixture
def service(employees, projects):
    return AssignmentOptimizerService(
        employee_repository=InMemoryEmployeeRepository(employees),
        project_repository=InMemoryProjectRepository(projects),
        input_validator=InputValidator(),
        assignment_repository=InMemoryAssignmentRepository([Assignment("e1", "p1", 10)])
    )


class TestAssignmentOptimizerService:
    """Test cases for running strategies through the service."""
    
    def test_requires_a_strategy(self, service):
        with pytest.raises(ValueError):
            service.generate_optimal_assignments()
    
    def test_rejects_empty_input(self, service, projects):
        service.set_algorithm(AlgorithmType.CONSTRAINT)
        
        with pytest.raises(InvalidInputError):
            service.optimize([], projects)
    
    def test_metrics_are_accumulated_per_algorithm(self, service):
        service.set_algorithm(AlgorithmType.CONSTRAINT)
        service.generate_optimal_assignments()
        service.generate_optimal_assignments()
        service.set_algorithm(AlgorithmType.ANNEALING)
        result = service.generate_optimal_assignments({"max_iterations": 20, "seed": 3})
        
        metrics = service.get_metrics()
        assert metrics["total_optimizations"] == 3
        assert metrics["algorithm_metrics"]["Constraint Satisfaction Optimizer"]["runs"] == 2
        annealing = metrics["algorithm_metrics"]["Simulated Annealing Optimizer"]
        assert annealing["runs"] == 1
        assert annealing["best_fitness"] == result.fitness
    
    def test_rejected_config_is_not_counted_as_a_run(self, service):
        service.set_algorithm(AlgorithmType.GENETIC)

        with pytest.raises(InvalidInputError):
            service.generate_optimal_assignments({"population_size": 0})

        metrics = service.get_metrics()
        assert metrics["total_optimizations"] == 0
        assert metrics["algorithm_metrics"] == {}

    def test_period_filter(self, service):
        service.set_algorithm(AlgorithmType.CONSTRAINT)
        
        result = service.generate_optimal_assignments(start_date=date(2024, 2, 1), end_date=date(2024, 2, 28))
        
        assert set(result.solution.get_project_ids()) <= {"p2"}
    
    def test_apply_solution(self, service):
        service.set_algorithm(AlgorithmType.CONSTRAINT)
        result = service.generate_optimal_assignments()
        
        service.apply_solution(result)
        
        stored = service.assignment_repository.get_all()
        assert [(a.employee_id, a.project_id, a.hours) for a in stored] == \
               [(a.employee_id, a.project_id, a.hours) for a in result.solution.assignments]
        stored[0].hours = -1
        assert service.assignment_repository.get_all()[0].hours != -1
    
    def test_apply_solution_without_repository(self, employees, projects):
        service = AssignmentOptimizerService(
            InMemoryEmployeeRepository(employees), InMemoryProjectRepository(projects), InputValidator()
        )
        service.set_algorithm(AlgorithmType.CONSTRAINT)
        
        with pytest.raises(ValueError):
            service.apply_solution(service.generate_optimal_assignments())
    
    def test_build_summary_uses_repositories(self, service):
        service.set_algorithm(AlgorithmType.CONSTRAINT)
        result = service.generate_optimal_assignments()
        
        summary = service.build_summary(result)
        
        assert summary.fitness == result.fitness
        assert summary.total_assignments == len(result.solution)


class TestInMemoryRepositories:
    """Test cases for the in-memory repositories."""
    
    def test_employees_with_skill(self, employees):
        repo = InMemoryEmployeeRepository(employees)
        
        assert sorted(e.id for e in repo.get_employees_with_skill("SQL")) == ["e1", "e3"]
        repo.delete("e3")
        assert [e.id for e in repo.get_employees_with_skill("SQL")] == ["e1"]
    
    def test_projects_by_period(self, projects):
        repo = InMemoryProjectRepository(projects)
        
        in_january = repo.get_projects_by_period(date(2024, 1, 15), date(2024, 1, 31))
        
        assert sorted(p.id for p in in_january) == ["p1", "p3"]
        assert repo.get_by_id("p2").name == "Backend"
    
    def test_assignments_by_project(self):
        repo = InMemoryAssignmentRepository([Assignment("e1", "p1", 10), Assignment("e2", "p2", 5)])
        
        assert [a.employee_id for a in repo.get_by_project("p2")] == ["e2"]
