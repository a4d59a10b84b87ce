"""Tests for meshgateway protocol capabilities."""

from dataclasses import FrozenInstanceError

import pytest

from meshgateway.protocols import (
    MULTIPLEXING_PROTOCOLS,
    PROTOCOL_CAPABILITIES,
    ProtocolCapabilities,
    classify,
    describe_multiplexing_protocols,
    is_host_multiplexing,
)


class TestClassify:
    @pytest.mark.parametrize("protocol", ["http", "http2", "grpc"])
    def test_host_multiplexing_protocols(self, protocol):
        caps = classify(protocol)
        assert caps.allows_wildcard_service is True
        assert caps.allows_multiple_services is True

    def test_tcp(self):
        caps = classify("tcp")
        assert caps.allows_wildcard_service is False
        assert caps.allows_multiple_services is False

    @pytest.mark.parametrize("protocol", ["udp", "HTTP", "", None])
    def test_unknown_protocol_is_restricted(self, protocol):
        assert classify(protocol) == classify("tcp")

    def test_is_host_multiplexing(self):
        assert is_host_multiplexing("http")
        assert is_host_multiplexing("grpc")
        assert not is_host_multiplexing("tcp")
        assert not is_host_multiplexing("websocket")


class TestCapabilityTable:
    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            PROTOCOL_CAPABILITIES["udp"] = ProtocolCapabilities(True, True)

    def test_capabilities_are_frozen(self):
        caps = classify("http")
        with pytest.raises(FrozenInstanceError):
            caps.allows_wildcard_service = False

    def test_multiplexing_protocols(self):
        assert MULTIPLEXING_PROTOCOLS == ("http", "http2", "grpc")

    def test_describe_multiplexing_protocols(self):
        assert describe_multiplexing_protocols() == "'http', 'http2' or 'grpc'"
