class InvalidInputError(ValueError):
    """Entrada estructuralmente inválida; se rechaza antes de iniciar cualquier búsqueda."""


class PayloadError(InvalidInputError):
    """Solicitud mal formada en el límite de entrada (claves faltantes, fechas ilegibles, ...)."""
