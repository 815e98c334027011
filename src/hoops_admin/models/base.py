"""Shared helpers for form records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hoops_admin.exceptions import FormDataError


def require_mapping(data: Any, record_name: str) -> Mapping[str, Any]:
    """Return ``data`` if it is a mapping, else raise FormDataError."""
    if not isinstance(data, Mapping):
        raise FormDataError(
            f"{record_name} must be built from a mapping, got {type(data).__name__}"
        )
    return data
