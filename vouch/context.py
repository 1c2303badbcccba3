"""
Scoped settings for validators that have a strict and a lenient mode.

Settings live in a ContextVar, so a scope opened in one thread or asyncio
task does not leak into another.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class ValidationSettings:
    # Lists and tuples pass `object` alongside mappings
    allow_sequence_objects: bool = False


_settings: ContextVar[ValidationSettings] = ContextVar(
    "vouch_settings", default=ValidationSettings()
)


def current_settings() -> ValidationSettings:
    return _settings.get()


def allows_sequence_objects() -> bool:
    return _settings.get().allow_sequence_objects


@contextmanager
def validation_context(*, allow_sequence_objects: bool | None = None):
    """
    Override validator settings for the duration of a `with` block.

    Options left as None keep the value of the enclosing scope, so
    nested blocks only change what they name.

    Args:
        allow_sequence_objects: Let `object` accept lists and tuples, for
            payloads where an array stands in for a record.

    Example:
        import vouch as v

        rows = v.fields({"row": v.object})
        rows({"row": ["Ada", 36]})  # Err: row is not an object

        with v.validation_context(allow_sequence_objects=True):
            rows({"row": ["Ada", 36]})  # Ok({"row": ["Ada", 36]})
    """
    settings = _settings.get()
    if allow_sequence_objects is not None:
        settings = replace(settings, allow_sequence_objects=allow_sequence_objects)

    token = _settings.set(settings)
    try:
        yield settings
    finally:
        _settings.reset(token)
