from typing import Any, Dict, List, Optional


class SchedulerError(Exception):
    """Base class for errors raised by the scheduling engine."""

    pass


class InputError(SchedulerError, ValueError):
    """Raised when catalog data is malformed (bad time slot, unknown weekday, dangling parent section)."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []
