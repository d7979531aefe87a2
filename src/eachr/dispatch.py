"""Iterator dispatcher: each() and the per-kind traversals behind it."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, Callable, TypeVar, overload

from .classify import classify, record_keys
from .model import ContainerKind, IteratorCallback, is_stop

logger = logging.getLogger(__name__)

SeqT = TypeVar("SeqT", bound=Sequence)
MapT = TypeVar("MapT", bound=Mapping)
T = TypeVar("T")

_MISSING = object()


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------

def _walk_sequence(container: Sequence) -> Iterator[tuple[int, Any]]:
    # Length and item are read at every step, so callbacks that grow or
    # shrink the sequence change what is visited next.
    index = 0
    while index < len(container):
        yield index, container[index]
        index += 1


def _walk_associative(container: Mapping) -> Iterator[tuple[Any, Any]]:
    for key in list(container):
        if key not in container:
            continue  # removed by an earlier callback
        yield key, container[key]


def _walk_record(container: object) -> Iterator[tuple[str, Any]]:
    own = getattr(container, "__dict__", None)
    for name in record_keys(container):
        if own is not None:
            if name not in own:
                continue
            value = own[name]
        else:
            # slots dataclass
            value = getattr(container, name, _MISSING)
            if value is _MISSING:
                continue
        yield name, value


_WALKERS: dict[ContainerKind, Callable[[Any], Iterator[tuple[Any, Any]]]] = {
    ContainerKind.Sequence: _walk_sequence,
    ContainerKind.AssociativeMap: _walk_associative,
    ContainerKind.Mapping: _walk_record,
}


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def entries(container: Any) -> Iterator[tuple[Any, Any]]:
    """Yield ``(key, value)`` pairs of *container* in traversal order.

    Classification happens on the first ``next()``; unsupported input raises
    UnsupportedContainerError at that point.
    """
    kind = classify(container)
    yield from _WALKERS[kind](container)


@overload
def each(container: SeqT, callback: IteratorCallback[Any, int, SeqT]) -> SeqT: ...
@overload
def each(container: MapT, callback: IteratorCallback[Any, Any, MapT]) -> MapT: ...
@overload
def each(container: T, callback: IteratorCallback[Any, str, T]) -> T: ...


def each(container, callback):
    """Call ``callback(value, key, container)`` for every entry of *container*.

    Sequences are visited by ascending index, mappings in insertion order and
    records (dataclass instances, SimpleNamespace, plain objects) by their
    own fields. Iteration stops right after a callback returns exactly
    ``False`` or ``Step.STOP``; any other result continues.

    Returns *container* itself.

    Example::

        seen = []
        each(["hello", "world", "break", "never"],
             lambda v, k, c: False if v == "break" else seen.append(v))
        seen  # → ["hello", "world"]
    """
    kind = classify(container)
    logger.debug("each: %s via %s strategy", type(container).__name__, kind.name)

    for key, value in _WALKERS[kind](container):
        if is_stop(callback(value, key, container)):
            logger.debug("each: stopped at key %r", key)
            break

    return container
