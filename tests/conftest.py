"""
Shared fixtures for the assignment optimization tests.
"""

import random
from datetime import date

import matplotlib
matplotlib.use("Agg")

import pytest

from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.project import Project
from mh_asignacion_proyectos.domain.value_objects.proficiency_level import ProficiencyLevel


def signature(solution):
    """Comparable view of a solution that ignores generated assignment ids."""
    return [(a.employee_id, a.project_id, a.hours) for a in solution.assignments]


@pytest.fixture
def employees():
    return [
        Employee("e1", "Ana", 40, {"SQL": ProficiencyLevel.EXPERT, "Python": ProficiencyLevel.ADVANCED}),
        Employee("e2", "Bruno", 20, {"Java": ProficiencyLevel.INTERMEDIATE}),
        Employee("e3", "Carla", 30, {"React": ProficiencyLevel.EXPERT, "SQL": ProficiencyLevel.BEGINNER}),
    ]


@pytest.fixture
def projects():
    return [
        Project("p1", "Reportes", date(2024, 1, 1), date(2024, 1, 31), ["SQL"]),
        Project("p2", "Backend", date(2024, 2, 1), date(2024, 3, 31), ["Java", "Python"]),
        Project("p3", "Frontend", date(2024, 1, 10), date(2024, 1, 20), ["React"]),
    ]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def request_payload():
    return {
        "employees": [
            {"id": "e1", "name": "Ana", "maxHours": 40, "skills": {"SQL": "Expert", "Python": "Advanced"}},
            {"id": "e2", "name": "Bruno", "maxHours": 20, "skills": {"Java": "Intermediate"}},
        ],
        "projects": [
            {"id": "p1", "name": "Reportes", "startDate": "2024-01-01", "endDate": "2024-01-31",
             "requiredSkills": ["SQL"]},
            {"id": "p2", "name": "Móvil", "startDate": "2024-02-01T00:00:00.000Z", "endDate": "2024-02-20",
             "requiredSkills": ["Kotlin"]},
        ],
        "assignments": [
            {"id": "a1", "employeeId": "e1", "projectId": "p1", "hours": 10, "week": "2024-W01"},
        ],
        "algorithm": "constraint",
        "options": {"maxIterations": 10},
    }
