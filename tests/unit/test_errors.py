"""Unit tests for the errors module."""

from oci_gen.models.common import ErrorDetail
from oci_gen.utils.errors import (
    DecodeError,
    HostUnsupportedCapabilityError,
    OciGenError,
    SeccompRuleError,
    SerializationError,
    SpecIOError,
    TemplateNotFoundError,
    ValidationError,
)


class TestOciGenError:
    """Tests for base OciGenError."""

    def test_basic_error(self):
        """Test basic error creation."""
        error = OciGenError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "UNKNOWN_ERROR"
        assert error.details == {}

    def test_to_error_detail(self):
        """Test conversion to ErrorDetail model."""
        error = OciGenError("Test error", code="TEST_ERROR", details={"key": "value"})
        detail = error.to_error_detail()
        assert isinstance(detail, ErrorDetail)
        assert detail.code == "TEST_ERROR"
        assert detail.details == {"key": "value"}
        assert str(detail) == "[TEST_ERROR] Test error"


class TestSpecificErrors:
    """Tests for the specific error types."""

    def test_template_not_found(self):
        """Test TemplateNotFoundError names the path."""
        error = TemplateNotFoundError("/etc/base.json")
        assert str(error) == "template configuration at /etc/base.json not found"
        assert error.code == "TEMPLATE_NOT_FOUND"
        assert error.details == {"path": "/etc/base.json"}

    def test_decode_error(self):
        """Test DecodeError."""
        error = DecodeError("bad json")
        assert error.code == "DECODE_ERROR"
        assert error.details == {}

    def test_validation_error(self):
        """Test ValidationError with a field."""
        error = ValidationError("Invalid namespace", field="namespace")
        assert error.code == "VALIDATION_ERROR"
        assert error.details == {"field": "namespace"}

    def test_seccomp_error_is_validation_error(self):
        """Test SeccompRuleError is a ValidationError with its own code."""
        error = SeccompRuleError("unrecognized action", field="action")
        assert isinstance(error, ValidationError)
        assert error.code == "SECCOMP_ERROR"

    def test_host_unsupported(self):
        """Test HostUnsupportedCapabilityError."""
        error = HostUnsupportedCapabilityError("CAP_BPF")
        assert isinstance(error, ValidationError)
        assert error.code == "HOST_UNSUPPORTED_CAPABILITY"
        assert error.details == {"field": "capability", "capability": "CAP_BPF"}

    def test_serialization_and_io(self):
        """Test SerializationError and SpecIOError codes."""
        assert SerializationError("x").code == "SERIALIZATION_ERROR"
        error = SpecIOError("disk full", path="/out/config.json")
        assert error.code == "IO_ERROR"
        assert error.details == {"path": "/out/config.json"}

    def test_all_are_oci_gen_errors(self):
        """Test every error type derives from OciGenError."""
        errors = [
            TemplateNotFoundError("p"),
            DecodeError("m"),
            ValidationError("m"),
            SeccompRuleError("m"),
            HostUnsupportedCapabilityError("CAP_BPF"),
            SerializationError("m"),
            SpecIOError("m"),
        ]
        assert all(isinstance(error, OciGenError) for error in errors)
