"""
Type definitions for gateway config entries.

Each gateway kind is its own dataclass holding its own listeners or services.
Both share the GatewayConfigEntry interface, whose validate() is called by the
config-entry write path right before an entry is stored.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .protocols import WILDCARD_SERVICE
from .validation import is_blank, validate_ingress_gateway, validate_terminating_gateway


class GatewayKind(str, Enum):
    """Config entry kind discriminator."""
    INGRESS = "ingress-gateway"
    TERMINATING = "terminating-gateway"


class Protocol(str, Enum):
    """Listener protocols known to the mesh."""
    TCP = "tcp"
    HTTP = "http"
    HTTP2 = "http2"
    GRPC = "grpc"


def _check_kind(data: Dict, expected: GatewayKind) -> None:
    kind = data.get("kind")
    if kind is not None and kind != expected.value:
        raise ValueError(f"Expected kind '{expected.value}', got '{kind}'")


class GatewayConfigEntry(ABC):
    """Common interface of every gateway config entry."""
    kind: GatewayKind
    name: str

    @abstractmethod
    def validate(self) -> None:
        """
        Check the entry before it is accepted.

        Raises:
            ValidationError: On the first rule the entry breaks
        """

    @abstractmethod
    def list_related_services(self) -> List[str]:
        """Sorted names of the concrete services this entry references."""


@dataclass
class IngressService:
    """A service reachable through an ingress listener."""
    name: str

    @classmethod
    def from_dict(cls, data: Dict) -> "IngressService":
        return cls(name=data.get("name", ""))

    @property
    def is_wildcard(self) -> bool:
        """True for the "*" service that routes by request host."""
        return self.name == WILDCARD_SERVICE


@dataclass
class IngressListener:
    """A port and protocol on the ingress gateway forwarding to services."""
    port: int
    protocol: str = Protocol.TCP.value
    services: List[IngressService] = field(default_factory=list)

    def __post_init__(self):
        # Keep the plain protocol name when a Protocol member is passed.
        if isinstance(self.protocol, Protocol):
            self.protocol = self.protocol.value

    @classmethod
    def from_dict(cls, data: Dict) -> "IngressListener":
        return cls(
            port=data["port"],
            protocol=data.get("protocol", Protocol.TCP.value),
            services=[IngressService.from_dict(s) for s in data.get("services") or []],
        )


@dataclass
class IngressGatewayConfigEntry(GatewayConfigEntry):
    """Ingress gateway: external traffic entering the mesh through listeners."""
    name: str
    listeners: List[IngressListener] = field(default_factory=list)
    kind: GatewayKind = field(default=GatewayKind.INGRESS, init=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IngressGatewayConfigEntry":
        _check_kind(data, GatewayKind.INGRESS)
        return cls(
            name=data["name"],
            listeners=[IngressListener.from_dict(listener) for listener in data.get("listeners") or []],
        )

    def validate(self) -> None:
        validate_ingress_gateway(self)

    def list_related_services(self) -> List[str]:
        names = {
            service.name
            for listener in self.listeners
            for service in listener.services
            if not is_blank(service.name) and not service.is_wildcard
        }
        return sorted(names)

    def get_listener(self, port: int) -> Optional[IngressListener]:
        """Get the first listener bound to a port."""
        for listener in self.listeners:
            if listener.port == port:
                return listener
        return None


@dataclass
class LinkedService:
    """An external service exposed through a terminating gateway."""
    name: str

    @classmethod
    def from_dict(cls, data: Dict) -> "LinkedService":
        return cls(name=data.get("name", ""))


@dataclass
class TerminatingGatewayConfigEntry(GatewayConfigEntry):
    """Terminating gateway: non-mesh services exposed as mesh members."""
    name: str
    services: List[LinkedService] = field(default_factory=list)
    kind: GatewayKind = field(default=GatewayKind.TERMINATING, init=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TerminatingGatewayConfigEntry":
        _check_kind(data, GatewayKind.TERMINATING)
        return cls(
            name=data["name"],
            services=[LinkedService.from_dict(s) for s in data.get("services") or []],
        )

    def validate(self) -> None:
        validate_terminating_gateway(self)

    def list_related_services(self) -> List[str]:
        return sorted({service.name for service in self.services if not is_blank(service.name)})


def validate_config_entry(entry: GatewayConfigEntry) -> None:
    """
    Validate any gateway config entry before it is written.

    Raises:
        TypeError: If entry is not a gateway config entry
        ValidationError: The first rule the entry breaks
    """
    if not isinstance(entry, GatewayConfigEntry):
        raise TypeError(f"Not a gateway config entry: {type(entry).__name__}")
    entry.validate()
