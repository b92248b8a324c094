# failchain/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Codes we do not define collapse to UNKNOWN.
    """
    c = _safe_str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass(eq=False)
class FailChainError(Exception):
    """
    The one public exception type raised by failchain itself.

    Failures flowing *through* the engine are never converted to this type;
    it only reports problems with how the engine was called or configured.
    """
    message: str
    error_code: str = codes.UNKNOWN
    error_type: str = "FAILCHAIN_ERROR"  # e.g. PRECONDITION_ERROR / MUTATION_ERROR
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.cause is not None:
            self.__cause__ = self.cause

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_fatal_configuration(self) -> bool:
        return self.error_code in codes.FATAL_CONFIGURATION_CODES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.error_type,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    # -------- factories --------

    @classmethod
    def precondition(
        cls,
        message: str,
        *,
        error_code: str = codes.PRECONDITION_FAILED,
        details: Optional[Dict[str, Any]] = None,
    ) -> "FailChainError":
        return cls(
            message=message,
            error_code=_normalize_error_code(error_code),
            error_type="PRECONDITION_ERROR",
            details=details or {},
        )

    @classmethod
    def mutation_denied(
        cls,
        message: str,
        *,
        target: Optional[BaseException] = None,
        cause: Optional[BaseException] = None,
    ) -> "FailChainError":
        details: Dict[str, Any] = {}
        if target is not None:
            details["target_type"] = f"{type(target).__module__}.{type(target).__qualname__}"
        return cls(
            message=message,
            error_code=codes.MUTATION_DENIED,
            error_type="MUTATION_ERROR",
            details=details,
            cause=cause,
        )

    @classmethod
    def invalid_config(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> "FailChainError":
        return cls(
            message=message,
            error_code=codes.INVALID_CONFIG,
            error_type="CONFIG_ERROR",
            details=details or {},
        )
