"""Container classification: pick one traversal strategy per call."""

from __future__ import annotations

import dataclasses
import io
import sys
import types
from collections.abc import Mapping, Sequence

from .errors import UnsupportedContainerError
from .model import ContainerKind

# Text is a Sequence in Python but a primitive here.
_TEXT_TYPES = (str, bytes, bytearray, memoryview)

# Objects with an instance __dict__ that are still not records.
_NON_RECORD_TYPES = (
    type,
    types.ModuleType,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    io.IOBase,
    BaseException,
)


def classify(container: object) -> ContainerKind:
    """Return the ContainerKind of *container*.

    The checks run in a fixed order:

    - text / bytes → rejected
    - ``collections.abc.Sequence`` → ContainerKind.Sequence
    - ``collections.abc.Mapping`` → ContainerKind.AssociativeMap
    - dataclass instance, SimpleNamespace or plain object → ContainerKind.Mapping

    Mappings are tested before records because a mapping object may also
    carry an instance ``__dict__``.

    Raises UnsupportedContainerError for anything else.
    """
    if isinstance(container, _TEXT_TYPES):
        raise UnsupportedContainerError(container)
    if isinstance(container, Sequence):
        return ContainerKind.Sequence
    if isinstance(container, Mapping):
        return ContainerKind.AssociativeMap
    if is_record(container):
        return ContainerKind.Mapping
    raise UnsupportedContainerError(container)


def is_record(obj: object) -> bool:
    """True if *obj* exposes named fields as its own attributes.

    Accepted: SimpleNamespace, dataclass instances and instances of plain
    user classes. Objects of builtin, extension or standard-library classes
    (files, exceptions, loggers ...) are not records.
    """
    if isinstance(obj, _NON_RECORD_TYPES):
        return False
    if isinstance(obj, types.SimpleNamespace):
        return True
    if dataclasses.is_dataclass(obj):
        return True
    if _is_library_class(type(obj)):
        return False
    return hasattr(obj, "__dict__") and not callable(obj)


def _is_library_class(cls: type) -> bool:
    root = (cls.__module__ or "builtins").partition(".")[0]
    return root in sys.stdlib_module_names


def record_keys(obj: object) -> list[str]:
    """Own field names of a record, in declaration / assignment order.

    Class attributes, properties and methods are never included. For a
    dataclass the declared fields come first, then any other attributes
    assigned on the instance.
    """
    if dataclasses.is_dataclass(obj):
        names = [f.name for f in dataclasses.fields(obj)]
        own = getattr(obj, "__dict__", None)
        if own is not None:
            names.extend(name for name in own if name not in names)
        return names
    return list(vars(obj))
