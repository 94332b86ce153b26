"""
Tests for structural input validation.
"""

from datetime import date

import pytest

from mh_asignacion_proyectos.domain.exceptions import InvalidInputError
from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.project import Project
from mh_asignacion_proyectos.domain.services.input_validator import InputValidator


class TestInputValidator:
    """Test cases for rejecting malformed input before any search."""
    
    def test_valid_input(self, employees, projects):
        result = InputValidator().validate(employees, projects, [Assignment("e1", "p1", 10)])
        
        assert result.is_valid is True
        assert result.violations == 0
        assert result.violation_details == []
    
    def test_empty_lists_are_rejected(self):
        result = InputValidator().validate([], [])
        
        assert result.is_valid is False
        assert result.violations == 2
    
    def test_duplicate_ids(self, projects):
        employees = [Employee("e1", "Ana"), Employee("e1", "Otra Ana")]
        
        result = InputValidator().validate(employees, projects)
        
        assert result.is_valid is False
        assert any("duplicado" in detail for detail in result.violation_details)
    
    def test_end_before_start(self, employees):
        projects = [Project("p1", "Al revés", date(2024, 2, 1), date(2024, 1, 1), [])]
        
        result = InputValidator().validate(employees, projects)
        
        assert result.violations == 1
    
    def test_unknown_references_and_negative_hours(self, employees, projects):
        assignments = [Assignment("nobody", "p1", 10), Assignment("e1", "nowhere", -1)]
        
        result = InputValidator().validate(employees, projects, assignments)
        
        assert result.violations == 3
    
    def test_unsatisfiable_input_is_still_valid(self):
        employees = [Employee("e1", "Ana", 0, {})]
        projects = [Project("p1", "Móvil", date(2024, 1, 1), date(2024, 1, 31), ["Kotlin"])]
        
        assert InputValidator().validate(employees, projects).is_valid is True
    
    def test_validate_or_raise(self):
        with pytest.raises(InvalidInputError) as excinfo:
            InputValidator().validate_or_raise([], [])
        
        assert isinstance(excinfo.value, ValueError)
        assert "2 problemas" in str(excinfo.value)
