"""
Tests for the solution summary (utilization, coverage and skill matches).
"""

from datetime import date

import pytest

from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.optimization_result import OptimizationResult
from mh_asignacion_proyectos.domain.models.project import Project
from mh_asignacion_proyectos.domain.models.solution import Solution
from mh_asignacion_proyectos.domain.services.optimization_summary_builder import OptimizationSummaryBuilder


@pytest.fixture
def builder():
    employees = [
        Employee("e1", "Ana", 40, {"SQL": "Expert"}),
        Employee("e2", "Bruno", 20, {"Java": "Intermediate"}),
    ]
    projects = [
        Project("p1", "Reportes", date(2024, 1, 1), date(2024, 1, 31), ["SQL"]),
        Project("p2", "Backend", date(2024, 2, 1), date(2024, 2, 28), ["Java", "Python"]),
    ]
    return OptimizationSummaryBuilder(employees, projects)


@pytest.fixture
def assignments():
    return [Assignment("e1", "p1", 30), Assignment("e2", "p2", 25)]


class TestOptimizationSummaryBuilder:
    """Test cases for summary statistics."""
    
    def test_employee_utilization(self, builder, assignments):
        summary = builder.build(assignments, fitness=12.5)
        
        rows = {row.employee_id: row for row in summary.employee_utilization}
        assert rows["e1"].utilization == pytest.approx(75.0)
        assert rows["e1"].overtime == 0
        assert rows["e1"].utilization_label == "75.0%"
        assert rows["e2"].utilization == pytest.approx(125.0)
        assert rows["e2"].overtime == pytest.approx(5.0)
        assert summary.total_overtime == pytest.approx(5.0)
        assert summary.fitness == 12.5
        assert summary.total_assignments == 2
    
    def test_overall_utilization_caps_each_employee_at_capacity(self, builder, assignments):
        summary = builder.build(assignments, fitness=0)
        
        assert summary.overall_utilization == pytest.approx(100.0 * (30 + 20) / 60)
    
    def test_project_coverage(self, builder):
        summary = builder.build(
            [Assignment("e1", "p1", 30), Assignment("e2", "p1", 10)], fitness=0
        )
        
        assert len(summary.project_coverage) == 1
        coverage = summary.project_coverage[0]
        assert coverage.project == "Reportes"
        assert coverage.assigned_employees == 2
        assert coverage.total_hours == 40
        assert [e.name for e in coverage.employees] == ["Ana", "Bruno"]
    
    def test_skill_matches(self, builder, assignments):
        summary = builder.build(assignments, fitness=0)
        
        matches = {(m.project_id, m.skill): m for m in summary.skill_matches}
        assert matches[("p1", "SQL")].matched is True
        assert [(e.name, e.level) for e in matches[("p1", "SQL")].employees] == [("Ana", "Expert")]
        assert matches[("p2", "Java")].employees[0].level == "Intermediate"
        assert matches[("p2", "Python")].matched is False
        assert summary.skill_coverage == pytest.approx(100.0 * 2 / 3)
    
    def test_employee_listed_once_per_skill(self, builder):
        summary = builder.build(
            [Assignment("e1", "p1", 10), Assignment("e1", "p1", 5)], fitness=0
        )
        
        sql = [m for m in summary.skill_matches if m.skill == "SQL"][0]
        assert len(sql.employees) == 1
    
    def test_unknown_employee_falls_back_to_id(self, builder):
        summary = builder.build([Assignment("ghost", "p1", 10)], fitness=0)
        
        row = summary.employee_utilization[0]
        assert row.employee == "ghost"
        assert row.utilization == 0.0
        assert row.overtime == 10
    
    def test_summary_is_idempotent_and_does_not_mutate(self, builder, assignments):
        before = [(a.id, a.employee_id, a.project_id, a.hours) for a in assignments]
        
        first = builder.build(assignments, fitness=1.0, unassigned_projects=["p3"])
        second = builder.build(assignments, fitness=1.0, unassigned_projects=["p3"])
        
        assert first.to_dict() == second.to_dict()
        assert [(a.id, a.employee_id, a.project_id, a.hours) for a in assignments] == before
    
    def test_empty_solution(self, builder):
        summary = builder.build([], fitness=-600)
        
        assert summary.employee_utilization == []
        assert summary.project_coverage == []
        assert summary.overall_utilization == 0.0
        assert summary.skill_coverage == 0.0
    
    def test_build_from_result_and_serialization(self, builder, assignments):
        result = OptimizationResult(solution=Solution(assignments), fitness=7.0, unassigned_projects=["p9"])
        
        data = builder.build_from_result(result).to_dict()
        
        assert data["fitness"] == 7.0
        assert data["unassignedProjects"] == ["p9"]
        assert data["employeeUtilization"][0]["utilization"] == "75.0%"
        assert data["projectCoverage"][0]["employees"] == [{"employeeId": "e1", "name": "Ana", "hours": 30}]
        assert data["skillMatches"][0]["employees"] == [{"name": "Ana", "level": "Expert"}]
