"""Exceptions raised by eachr."""

from __future__ import annotations


class EachrError(Exception):
    """Base class for every error raised by eachr itself."""


class UnsupportedContainerError(EachrError, TypeError):
    """The value passed to each() is not a sequence, mapping or record."""

    def __init__(self, container: object) -> None:
        self.container = container
        super().__init__(
            f"eachr does not know how to iterate {type(container).__name__!r}"
        )
