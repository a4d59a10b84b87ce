"""
Validation of gateway config entries.

Validators stop at the first broken rule and raise it. Listeners are checked
in declaration order and services in declaration order within a listener, so
the same entry always reports the same error.
"""

import logging
from typing import TYPE_CHECKING, Optional, Set

from .errors import (
    BlankServiceNameError,
    DuplicateServiceError,
    MultipleServicesNotAllowedError,
    NoServiceDeclaredError,
    PortConflictError,
    ValidationError,
    WildcardNotAllowedError,
)
from .protocols import WILDCARD_SERVICE, classify

if TYPE_CHECKING:
    from .types import (
        IngressGatewayConfigEntry,
        IngressListener,
        TerminatingGatewayConfigEntry,
    )

logger = logging.getLogger(__name__)


def is_blank(name: Optional[str]) -> bool:
    """Check if a service name is missing, empty or whitespace only."""
    if name is None:
        return True
    return not str(name).strip()


def _validate_listener(listener: "IngressListener", declared_ports: Set[int]) -> None:
    if listener.port in declared_ports:
        raise PortConflictError(listener.port)
    declared_ports.add(listener.port)

    if not listener.services:
        raise NoServiceDeclaredError(listener.port)

    capabilities = classify(listener.protocol)

    for service in listener.services:
        if is_blank(service.name):
            raise BlankServiceNameError(listener.port)
        if service.name == WILDCARD_SERVICE and not capabilities.allows_wildcard_service:
            raise WildcardNotAllowedError(listener.protocol, listener.port)

    if len(listener.services) > 1 and not capabilities.allows_multiple_services:
        raise MultipleServicesNotAllowedError(listener.protocol, listener.port)


def validate_ingress_gateway(entry: "IngressGatewayConfigEntry") -> None:
    """
    Validate an ingress gateway entry.

    Checks, per listener: the port is not already taken by an earlier
    listener, at least one service is declared, no service name is blank,
    the wildcard service only appears on host-multiplexing protocols, and
    only host-multiplexing protocols carry more than one service.

    Args:
        entry: Ingress gateway config entry

    Raises:
        ValidationError: The first rule the entry breaks
    """
    logger.debug(f"Validating {entry.kind.value} '{entry.name}'")

    declared_ports: Set[int] = set()
    try:
        for listener in entry.listeners:
            _validate_listener(listener, declared_ports)
    except ValidationError as e:
        logger.info(f"Rejected {entry.kind.value} '{entry.name}': {e}")
        raise

    logger.debug(f"{entry.kind.value} '{entry.name}' is valid ({len(entry.listeners)} listeners)")


def validate_terminating_gateway(entry: "TerminatingGatewayConfigEntry") -> None:
    """
    Validate a terminating gateway entry.

    Every linked service needs a name, and each name may only be linked once.
    Names are compared case-sensitively. An entry without services is valid.

    Raises:
        ValidationError: The first rule the entry breaks
    """
    logger.debug(f"Validating {entry.kind.value} '{entry.name}'")

    seen: Set[str] = set()
    try:
        for service in entry.services:
            if is_blank(service.name):
                raise BlankServiceNameError()
            if service.name in seen:
                raise DuplicateServiceError(service.name)
            seen.add(service.name)
    except ValidationError as e:
        logger.info(f"Rejected {entry.kind.value} '{entry.name}': {e}")
        raise

    logger.debug(f"{entry.kind.value} '{entry.name}' is valid ({len(seen)} services)")
