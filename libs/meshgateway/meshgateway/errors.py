"""Validation errors raised for rejected gateway config entries."""

from enum import Enum
from typing import Optional

from .protocols import describe_multiplexing_protocols


class ValidationErrorCode(str, Enum):
    """Machine-readable reason a config entry was rejected."""
    PORT_CONFLICT = "port-conflict"
    NO_SERVICE_DECLARED = "no-service-declared"
    BLANK_SERVICE_NAME = "blank-service-name"
    WILDCARD_NOT_ALLOWED = "wildcard-not-allowed"
    MULTIPLE_SERVICES_NOT_ALLOWED = "multiple-services-not-allowed"
    DUPLICATE_SERVICE = "duplicate-service"


class ValidationError(ValueError):
    """Raised when a gateway config entry is not acceptable."""
    code: ValidationErrorCode


class PortConflictError(ValidationError):
    """Two listeners in one ingress entry share a port."""
    code = ValidationErrorCode.PORT_CONFLICT

    def __init__(self, port: int):
        self.port = port
        super().__init__(f"port {port} declared on two listeners")


class NoServiceDeclaredError(ValidationError):
    """A listener declares no services."""
    code = ValidationErrorCode.NO_SERVICE_DECLARED

    def __init__(self, port: int):
        self.port = port
        super().__init__(f"no service declared for listener with port {port}")


class BlankServiceNameError(ValidationError):
    """A service has an empty name. `port` is None for linked services."""
    code = ValidationErrorCode.BLANK_SERVICE_NAME

    def __init__(self, port: Optional[int] = None):
        self.port = port
        if port is None:
            message = "Service name cannot be blank."
        else:
            message = f"Service name cannot be blank (listener on port {port})"
        super().__init__(message)


class WildcardNotAllowedError(ValidationError):
    """The wildcard service is used on a protocol that cannot route by host."""
    code = ValidationErrorCode.WILDCARD_NOT_ALLOWED

    def __init__(self, protocol: str, port: int):
        self.protocol = getattr(protocol, "value", protocol)
        self.port = port
        super().__init__(
            f"Wildcard service name is only valid for protocol "
            f"{describe_multiplexing_protocols()} "
            f"(listener on port {port} uses '{self.protocol}')"
        )


class MultipleServicesNotAllowedError(ValidationError):
    """Several services share a listener whose protocol cannot route by host."""
    code = ValidationErrorCode.MULTIPLE_SERVICES_NOT_ALLOWED

    def __init__(self, protocol: str, port: int):
        self.protocol = getattr(protocol, "value", protocol)
        self.port = port
        super().__init__(
            f"multiple services per listener are only supported for protocol "
            f"{describe_multiplexing_protocols()} "
            f"(listener on port {port} uses '{self.protocol}')"
        )


class DuplicateServiceError(ValidationError):
    """A terminating gateway links the same service twice."""
    code = ValidationErrorCode.DUPLICATE_SERVICE

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Service "{name}" was specified more than once')
