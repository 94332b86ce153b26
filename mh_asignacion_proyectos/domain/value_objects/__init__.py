"""
Value Objects del dominio de asignación de proyectos.

Enumeraciones inmutables: niveles de dominio de habilidades, tipos de
algoritmo disponibles y formatos de exportación del resumen.
"""
