"""eachr — iterate sequences, mappings and records with early exit."""

from .classify import classify
from .dispatch import each, entries
from .errors import EachrError, UnsupportedContainerError
from .model import Continue, ContainerKind, IteratorCallback, Step, Stop

__all__ = [
    "each",
    "entries",
    "classify",
    "ContainerKind",
    "Step",
    "Stop",
    "Continue",
    "IteratorCallback",
    "EachrError",
    "UnsupportedContainerError",
]
