"""Módulo principal para el sistema de asignación de empleados a proyectos."""

# Para facilitar los imports
from .domain.models.employee import Employee
from .domain.models.project import Project
from .domain.models.assignment import Assignment
from .domain.models.solution import Solution
from .domain.models.optimization_result import OptimizationResult
from .domain.models.optimization_summary import OptimizationSummary
from .domain.exceptions import InvalidInputError, PayloadError
# Imports de value_objects
from .domain.value_objects.proficiency_level import ProficiencyLevel
from .domain.value_objects.algorithm_type import AlgorithmType
from .domain.value_objects.export_format import ExportFormat
# Services
from .domain.services.fitness_evaluator import FitnessEvaluator, FitnessWeights
from .domain.services.run_control import RunControl
from .domain.services.optimizer_strategy import OptimizerStrategy
from .domain.services.optimizers.genetic_algorithm_optimizer import GeneticAlgorithmOptimizer
from .domain.services.optimizers.simulated_annealing_optimizer import SimulatedAnnealingOptimizer
from .domain.services.optimizers.constraint_satisfaction_optimizer import ConstraintSatisfactionOptimizer
from .domain.services.optimization_summary_builder import OptimizationSummaryBuilder
