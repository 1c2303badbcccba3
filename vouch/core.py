"""
Core combinators for vouch.

Provides compose() for chaining validators and fields() for validating
the keys of an object.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import reduce
from typing import Any, Callable

from .types import Err, Ok, Result, ValidationFailure, Validator

logger = logging.getLogger(__name__)


def _lift(value: Any) -> Result:
    """Wrap plain return values so every stage yields a Result."""
    if isinstance(value, (Ok, Err)):
        return value
    return Ok(value)


def compose(*fns: Callable[[Any], Any]) -> Validator:
    """
    Compose validators right-to-left: compose(f, g)(x) == f(g(x)).

    Each stage may return Ok/Err or a plain value, so ordinary functions
    can sit in a pipeline. The first Err stops the pipeline and is
    returned as-is.

    Usage:
        clean_name = compose(not_blank, trim)
        clean_name("  Ada ")   # Ok("Ada")
        clean_name("   ")      # Err(ValidationFailure("is blank", ...))
    """

    def step(result: Result, fn: Callable[[Any], Any]) -> Result:
        if isinstance(result, Err):
            return result
        return _lift(fn(result.value))

    def composed(value: Any) -> Result:
        return reduce(step, reversed(fns), Ok(value))

    return composed


def fields(
    required: Mapping[str, Validator],
    optional: Mapping[str, Validator] | None = None,
) -> Validator:
    """
    Build a validator for an object from per-key validators.

    Args:
        required: Keys that must be present (not None) in the input
        optional: Keys that are validated only when present (not None)

    Returns:
        A validator producing Ok(new_dict) with only the listed keys, or
        the first Err encountered, tagged with the key that failed.

    Raises:
        ValueError: If a key is listed as both required and optional

    Usage:
        person = fields({"name": string}, {"age": int})
        person({"name": "Bob", "age": "42"})  # Ok({"name": "Bob", "age": 42})
        person({"age": "42"})                 # Err(... field="name", "is required")
    """
    optional = optional or {}

    shared = required.keys() & optional.keys()
    if shared:
        raise ValueError(
            f"Keys cannot be both required and optional: {sorted(shared)}"
        )

    def validate_fields(obj: Any) -> Result:
        if not isinstance(obj, Mapping):
            return Err(ValidationFailure("is not an object", value=obj))

        output: dict[str, Any] = {}

        for key, validator in optional.items():
            if obj.get(key) is None:
                continue
            result = _validate_key(key, validator, obj[key])
            if isinstance(result, Err):
                return result
            output[key] = result.value

        for key, validator in required.items():
            if obj.get(key) is None:
                logger.debug("Required field %r is missing", key)
                return Err(ValidationFailure("is required", field=key))
            result = _validate_key(key, validator, obj[key])
            if isinstance(result, Err):
                return result
            output[key] = result.value

        return Ok(output)

    return validate_fields


def _validate_key(key: str, validator: Validator, value: Any) -> Result:
    """Run one field validator, naming the field on failure."""
    result = _lift(validator(value))
    if isinstance(result, Ok):
        return result

    failure = result.error
    if isinstance(failure, ValidationFailure) and failure.field is None:
        failure = failure.with_field(key)
    logger.debug("Field %r failed validation: %s", key, failure)
    return Err(failure)
