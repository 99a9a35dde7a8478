"""Per-repository operations."""

from .base import Operation, OperationResult, OperationStatus
from .clone_missing import CloneMissingOperation
from .status import StatusOperation
from .pull import PullOperation

__all__ = [
    'Operation',
    'OperationResult',
    'OperationStatus',
    'CloneMissingOperation',
    'StatusOperation',
    'PullOperation',
]
