"""Data model for eachr: container kinds, step control and callback types."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, TypeVar, Union


# ---------------------------------------------------------------------------
# ContainerKind — tag chosen once per call by classify()
# ---------------------------------------------------------------------------

class ContainerKind(Enum):
    Sequence = auto()        # int keys, ascending index order
    AssociativeMap = auto()  # any hashable key, insertion order
    Mapping = auto()         # str keys, own attributes / dataclass fields


# ---------------------------------------------------------------------------
# Step — explicit control value a callback may return
# ---------------------------------------------------------------------------

class Step(Enum):
    CONTINUE = auto()
    STOP = auto()

    def __repr__(self) -> str:
        return f"Step.{self.name}"


Stop = Step.STOP
Continue = Step.CONTINUE


def is_stop(result: object) -> bool:
    """True only for ``False`` itself or ``Step.STOP``.

    Other falsy results (``0``, ``""``, ``None``) keep the iteration going.
    """
    return result is False or result is Step.STOP


# ---------------------------------------------------------------------------
# Callback typing
# ---------------------------------------------------------------------------

K = TypeVar("K")
V = TypeVar("V")
C = TypeVar("C")

StepResult = Union[bool, Step, None]

IteratorCallback = Callable[[V, K, C], StepResult]
