"""Shared field types for request schemas."""

from typing import Annotated

from pydantic import StringConstraints

# Surrounding whitespace is stripped before the length check, so "   " is rejected.
NonBlankName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
]
