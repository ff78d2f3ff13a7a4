"""
Structured Logging for Shape Raster
===================================

Bounded Context: Observability

JSON-structured logging for shape construction, rendering and scene output.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from shape_raster.logging import create_logger, LogEvent
    >>> logger = create_logger("shapes")
    >>> logger.info(
    ...     event=LogEvent.SHAPE_CREATED,
    ...     message="Created circle",
    ...     metadata={'radius': 10}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
