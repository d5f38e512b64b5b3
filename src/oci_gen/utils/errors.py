"""Error types for oci-gen."""

from __future__ import annotations

from typing import Any

from oci_gen.models.common import ErrorDetail


class OciGenError(Exception):
    """Base exception for oci-gen."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_error_detail(self) -> ErrorDetail:
        """Convert to ErrorDetail model."""
        return ErrorDetail(code=self.code, message=self.message, details=self.details)


class TemplateNotFoundError(OciGenError):
    """Template configuration file does not exist."""

    def __init__(self, path: str):
        super().__init__(
            f"template configuration at {path} not found",
            code="TEMPLATE_NOT_FOUND",
            details={"path": path},
        )


class DecodeError(OciGenError):
    """Input could not be decoded into a runtime config."""

    def __init__(self, message: str, source: str | None = None):
        details = {"source": source} if source else {}
        super().__init__(message, code="DECODE_ERROR", details=details)


class ValidationError(OciGenError):
    """Validation failed."""

    def __init__(self, message: str, field: str | None = None, code: str = "VALIDATION_ERROR"):
        details = {"field": field} if field else {}
        super().__init__(message, code=code, details=details)


class SeccompRuleError(ValidationError):
    """A seccomp action, architecture, operator or syscall rule is invalid."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, field=field, code="SECCOMP_ERROR")


class HostUnsupportedCapabilityError(ValidationError):
    """Capability is known but the running kernel does not support it."""

    def __init__(self, capability: str, last_supported: int | None = None):
        super().__init__(
            f"{capability} is not supported on the current host",
            field="capability",
            code="HOST_UNSUPPORTED_CAPABILITY",
        )
        self.details["capability"] = capability
        if last_supported is not None:
            self.details["last_supported"] = last_supported


class SerializationError(OciGenError):
    """Runtime config could not be encoded."""

    def __init__(self, message: str):
        super().__init__(message, code="SERIALIZATION_ERROR")


class SpecIOError(OciGenError):
    """Reading or writing a runtime config failed."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, code="IO_ERROR", details=details)
