#!/usr/bin/env python
"""
Ejemplo de uso del Sistema de Asignación Óptima de Empleados a Proyectos.

Este script demuestra la implementación completa del sistema utilizando
los tres algoritmos disponibles (Algoritmo Genético, Recocido Simulado y
Satisfacción de Restricciones) para asignar empleados a proyectos.
"""

import os
import logging
import sys
from datetime import date

# Importar componentes del dominio
from mh_asignacion_proyectos.domain.models.assignment import Assignment
from mh_asignacion_proyectos.domain.models.employee import Employee
from mh_asignacion_proyectos.domain.models.project import Project
from mh_asignacion_proyectos.domain.services.assignment_optimizer_service import AssignmentOptimizerService
from mh_asignacion_proyectos.domain.services.input_validator import InputValidator
from mh_asignacion_proyectos.domain.value_objects.export_format import ExportFormat

# Importar adaptadores y casos de uso
from mh_asignacion_proyectos.application.usecases.algorithm_comparison_usecase import AlgorithmComparisonUseCase
from mh_asignacion_proyectos.infrastructure.adapters.input.assignment_optimization_service_adapter import AssignmentOptimizationServiceAdapter
from mh_asignacion_proyectos.infrastructure.adapters.output.summary_export_adapter import SummaryExportAdapter
from mh_asignacion_proyectos.infrastructure.adapters.output.visualization_adapter import OptimizationVisualizationAdapter
from mh_asignacion_proyectos.infrastructure.repositories.in_memory_assignment_repository import InMemoryAssignmentRepository
from mh_asignacion_proyectos.infrastructure.repositories.in_memory_employee_repository import InMemoryEmployeeRepository
from mh_asignacion_proyectos.infrastructure.repositories.in_memory_project_repository import InMemoryProjectRepository


def demo_employees():
    return [
        Employee("e1", "Ana", 40, {"Python": "Expert", "SQL": "Advanced"}),
        Employee("e2", "Bruno", 40, {"Java": "Advanced", "SQL": "Intermediate"}),
        Employee("e3", "Carla", 30, {"React": "Expert", "CSS": "Advanced"}),
        Employee("e4", "Diego", 20, {"Python": "Beginner", "Docker": "Advanced"}),
        Employee("e5", "Elena", 40, {"Java": "Expert", "Docker": "Intermediate", "SQL": "Advanced"}),
    ]


def demo_projects():
    return [
        Project("p1", "Portal de clientes", date(2024, 1, 1), date(2024, 3, 31), ["React", "CSS"]),
        Project("p2", "API de facturación", date(2024, 1, 15), date(2024, 2, 15), ["Java", "SQL"]),
        Project("p3", "Pipeline de datos", date(2024, 2, 1), date(2024, 4, 30), ["Python", "SQL", "Docker"]),
        Project("p4", "Migración móvil", date(2024, 3, 1), date(2024, 3, 20), ["Kotlin"]),
    ]


def main():
    """Función principal del ejemplo."""
    # 1. Configurar logging básico antes de iniciar cualquier componente
    os.makedirs('./assets/logs', exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler("./assets/logs/mh-asignacion-proyectos.log"),
            logging.StreamHandler(sys.stdout)
        ]
    )
    logger = logging.getLogger(__name__)
    logger.info("Iniciando sistema de asignación óptima de empleados a proyectos")

    # 2. Cargar datos de ejemplo en repositorios en memoria
    employee_repo = InMemoryEmployeeRepository(demo_employees())
    project_repo = InMemoryProjectRepository(demo_projects())
    assignment_repo = InMemoryAssignmentRepository([Assignment("e1", "p3", 20)])

    # 3. Instanciar el servicio del dominio con sus dependencias
    optimizer_service = AssignmentOptimizerService(
        employee_repository=employee_repo,
        project_repository=project_repo,
        input_validator=InputValidator(),
        assignment_repository=assignment_repo
    )

    # 4. Crear adaptadores de entrada y salida
    assignment_adapter = AssignmentOptimizationServiceAdapter(optimizer_service)
    summary_export_adapter = SummaryExportAdapter()
    visualization_adapter = OptimizationVisualizationAdapter()

    # 5. Comparar los algoritmos sobre los mismos datos
    comparison = AlgorithmComparisonUseCase(
        assignment_service=assignment_adapter,
        summary_export_service=summary_export_adapter,
        visualization_service=visualization_adapter
    )
    results, _ = comparison.compare_algorithms(runs=3, output_dir="./assets/plots")

    # 6. Aplicar la mejor solución y mostrar su resumen
    best_name = max(results, key=lambda name: results[name]["best_fitness"])
    best_result = results[best_name]["best_result"]
    optimizer_service.apply_solution(best_result)
    summary = assignment_adapter.build_summary(best_result)

    print(f"\nMejor algoritmo: {best_name}")
    print(summary_export_adapter.export_summary(summary, ExportFormat.TEXT))
    print("\nProceso completado. Revisa los resultados en la carpeta 'assets/plots'.")

    logger.info("Ejemplo completado con éxito.")


if __name__ == "__main__":
    main()
