"""
Mesh Gateway - validation of ingress and terminating gateway config entries.

Entries are checked right before the control plane stores them, so that port
clashes and protocol misuse never reach the proxies.
"""

from .types import (
    GatewayKind,
    Protocol,
    GatewayConfigEntry,
    IngressGatewayConfigEntry,
    IngressListener,
    IngressService,
    TerminatingGatewayConfigEntry,
    LinkedService,
    validate_config_entry,
)
from .protocols import (
    WILDCARD_SERVICE,
    ProtocolCapabilities,
    classify,
    is_host_multiplexing,
)
from .errors import (
    ValidationErrorCode,
    ValidationError,
    PortConflictError,
    NoServiceDeclaredError,
    BlankServiceNameError,
    WildcardNotAllowedError,
    MultipleServicesNotAllowedError,
    DuplicateServiceError,
)
from .validation import (
    validate_ingress_gateway,
    validate_terminating_gateway,
)

__version__ = "0.1.0"
__all__ = [
    # Types
    "GatewayKind",
    "Protocol",
    "GatewayConfigEntry",
    "IngressGatewayConfigEntry",
    "IngressListener",
    "IngressService",
    "TerminatingGatewayConfigEntry",
    "LinkedService",
    # Protocols
    "WILDCARD_SERVICE",
    "ProtocolCapabilities",
    "classify",
    "is_host_multiplexing",
    # Errors
    "ValidationErrorCode",
    "ValidationError",
    "PortConflictError",
    "NoServiceDeclaredError",
    "BlankServiceNameError",
    "WildcardNotAllowedError",
    "MultipleServicesNotAllowedError",
    "DuplicateServiceError",
    # Validation
    "validate_ingress_gateway",
    "validate_terminating_gateway",
    "validate_config_entry",
]
