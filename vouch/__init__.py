"""
vouch - small composable validators for untrusted input.

Usage:
    import vouch as v

    signup = v.fields(
        {
            "email": v.email,
            "name": v.compose(v.length_range(1, 80), v.not_blank, v.trim),
        },
        {"age": v.compose(v.range(13, 130), v.int)},
    )

    result = signup({"email": "ada@lovelace.org", "name": " Ada ", "age": "36"})
    # Ok({"age": 36, "email": "ada@lovelace.org", "name": "Ada"})
"""

from .context import allows_sequence_objects, validation_context
from .core import compose, fields
from .types import Err, Ok, ValidationError, ValidationFailure
from .validators import (
    date,
    email,
    float,
    int,
    length_range,
    max,
    max_length,
    min,
    min_length,
    not_blank,
    object,
    range,
    required,
    string,
    timestamp,
    trim,
)

__all__ = [
    # Result types
    "Ok",
    "Err",
    "ValidationFailure",
    "ValidationError",
    # Combinators
    "compose",
    "fields",
    # Validators
    "date",
    "timestamp",
    "int",
    "float",
    "string",
    "email",
    "not_blank",
    "trim",
    "object",
    "required",
    # Bounds
    "min",
    "max",
    "range",
    "min_length",
    "max_length",
    "length_range",
    # Configuration
    "validation_context",
    "allows_sequence_objects",
]
