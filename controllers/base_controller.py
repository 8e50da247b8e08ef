# -*- coding: utf-8 -*-
"""
Base Controller
===============
Qt side of an operation: signals while it runs, a result object when it
returns, plain-Python callbacks for callers that are not widgets.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """What a controller call did, returned to the widget that asked."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: List[str] = None, data: T = None) -> 'OperationResult[T]':
        return cls(success=False, data=data, message=message, errors=list(errors or []))


class BaseController(QObject):
    """
    Base class of the wizard controllers.

    Signals:
        operation_started(str): operation name
        operation_completed(str, bool): operation name, success
        operation_error(str, str): operation name, technical message
        loading_changed(bool): a background operation started or ended
    """

    operation_started = pyqtSignal(str)
    operation_completed = pyqtSignal(str, bool)
    operation_error = pyqtSignal(str, str)
    loading_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._running: Optional[str] = None
        self._last_error = ""
        self._subscribers: Dict[str, List[Callable[..., Any]]] = {}

    @property
    def is_loading(self) -> bool:
        return self._running is not None

    @property
    def last_error(self) -> str:
        return self._last_error

    # =========================================================================
    # Operation lifecycle
    # =========================================================================

    def _begin(self, operation: str, **details):
        logger.info(f"{self.__class__.__name__}.{operation} started {details or ''}".rstrip())
        self._running = operation
        self._last_error = ""
        self.operation_started.emit(operation)
        self.loading_changed.emit(True)

    def _finish(self, operation: str, success: bool, error: str = ""):
        if error:
            self._last_error = error
            logger.error(f"{self.__class__.__name__}.{operation}: {error}")
        self._running = None
        self.operation_completed.emit(operation, success)
        self.loading_changed.emit(False)

    def _crash(self, operation: str, error: str):
        """Operation ended by an unexpected exception."""
        self._last_error = error
        self._running = None
        logger.error(f"{self.__class__.__name__}.{operation} crashed: {error}")
        self.operation_error.emit(operation, error)
        self.loading_changed.emit(False)

    # =========================================================================
    # Callbacks
    # =========================================================================

    def subscribe(self, event: str, callback: Callable[..., Any]):
        """Call `callback` each time `event` is published."""
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[..., Any]):
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def _publish(self, event: str, *args):
        for callback in list(self._subscribers.get(event, [])):
            try:
                callback(*args)
            except Exception as e:
                logger.error(f"Subscriber of '{event}' failed: {e}", exc_info=True)
