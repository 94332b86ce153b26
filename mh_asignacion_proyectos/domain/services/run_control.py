import logging
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float, float], None]


class RunControl:
    """Control de una ejecución: cancelación, plazo máximo y notificación de progreso.
    
    Las estrategias consultan `should_stop()` al inicio de cada generación o
    iteración y llaman a `report_progress()` solo en puntos de control gruesos.
    """
    
    def __init__(self,
                 progress_callback: Optional[ProgressCallback] = None,
                 timeout: Optional[float] = None):
        self.progress_callback = progress_callback
        self._cancel_event = threading.Event()
        self._deadline = time.monotonic() + timeout if timeout is not None else None
    
    def cancel(self) -> None:
        """Solicita detener la ejecución en el próximo punto de control."""
        self._cancel_event.set()
    
    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()
    
    def should_stop(self) -> bool:
        if self._cancel_event.is_set():
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            logger.warning("Plazo de ejecución vencido, se devolverá la mejor solución encontrada")
            self._cancel_event.set()
            return True
        return False
    
    def report_progress(self, progress: float, best_fitness: float) -> None:
        """Notifica el avance (0-100) y el mejor fitness conocido."""
        if self.progress_callback is not None:
            self.progress_callback(min(100.0, max(0.0, progress)), best_fitness)
