"""Public result models for wrapkit package."""

from typing import Any, Dict, Optional
from pydantic import BaseModel


class WrapIssue(BaseModel):
    """A wrapping failure reported as data."""
    code: str  # WrapErrorCode value, e.g. "KEY_COLLISION"
    message: str
    path: str  # field path to the failing value, "" for the root
    key: Optional[str] = None  # For KEY_COLLISION
    value_type: Optional[str] = None  # For UNWRAPPABLE_TYPE, DATE_FORMATTING_FAILURE, CYCLIC_REFERENCE


class WrapResult(BaseModel):
    """Result of try_wrap()."""
    ok: bool
    value: Optional[Dict[str, Any]] = None  # Wrapped dict when ok
    error: Optional[WrapIssue] = None  # First failure when not ok
