"""
Protocol capabilities for gateway listeners.

Maps a listener protocol to what a listener speaking it is allowed to do.
Protocols that multiplex by request host (http, http2, grpc) can route a
wildcard service and host several services on one port; everything else is
treated like raw tcp.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

# Service name that matches any request host.
WILDCARD_SERVICE = "*"


@dataclass(frozen=True)
class ProtocolCapabilities:
    """What a listener may declare for a given protocol."""
    allows_wildcard_service: bool = False
    allows_multiple_services: bool = False


HOST_MULTIPLEXING = ProtocolCapabilities(
    allows_wildcard_service=True,
    allows_multiple_services=True,
)
RESTRICTED = ProtocolCapabilities()

PROTOCOL_CAPABILITIES: Mapping[str, ProtocolCapabilities] = MappingProxyType({
    "tcp": RESTRICTED,
    "http": HOST_MULTIPLEXING,
    "http2": HOST_MULTIPLEXING,
    "grpc": HOST_MULTIPLEXING,
})

MULTIPLEXING_PROTOCOLS: Tuple[str, ...] = tuple(
    name for name, caps in PROTOCOL_CAPABILITIES.items() if caps == HOST_MULTIPLEXING
)


def classify(protocol: Optional[str]) -> ProtocolCapabilities:
    """
    Look up the capabilities of a listener protocol.

    Unknown protocols get the tcp capabilities. Whether the protocol name
    itself is valid is decided elsewhere, so this never raises.

    Args:
        protocol: Listener protocol, e.g. "http" or "tcp"

    Returns:
        ProtocolCapabilities for the protocol
    """
    if not isinstance(protocol, str):
        return RESTRICTED
    return PROTOCOL_CAPABILITIES.get(protocol, RESTRICTED)


def is_host_multiplexing(protocol: Optional[str]) -> bool:
    """Check if a protocol routes by request host."""
    return classify(protocol) == HOST_MULTIPLEXING


def describe_multiplexing_protocols() -> str:
    """Human-readable list of host-multiplexing protocols, e.g. "'http', 'http2' or 'grpc'"."""
    quoted = [f"'{name}'" for name in MULTIPLEXING_PROTOCOLS]
    if len(quoted) == 1:
        return quoted[0]
    return ", ".join(quoted[:-1]) + " or " + quoted[-1]
