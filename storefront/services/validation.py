"""Structured validation results for expected business rejections."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a validation step.

    Expected rejections (empty cart, unknown discount code) come back as
    ``is_valid=False`` with a message instead of raising; callers branch on it.
    """

    is_valid: bool
    message: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, **data) -> 'ValidationResult':
        return cls(is_valid=True, data=data)

    @classmethod
    def fail(cls, message: str, **data) -> 'ValidationResult':
        return cls(is_valid=False, message=message, data=data)
