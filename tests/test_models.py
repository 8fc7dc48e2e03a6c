# tests/test_models.py
from datetime import datetime, timedelta, timezone

import pytest

from netinterp.core.models import (
    ConnectionDirection,
    ConnectionRecord,
    Hop,
    NetworkProtocol,
    TraceResult,
    TraceStatus,
)
from netinterp.core.services import KnownService

T0 = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_hop_creation():
    """Fields are stored as given, RTTs as a tuple."""
    hop = Hop(hop_number=1, address="192.168.1.1", hostname="router.local", rtts=[1.5, 2.0, 1.8])
    assert hop.hop_number == 1
    assert hop.rtts == (1.5, 2.0, 1.8)
    assert not hop.is_timeout


def test_hop_average_rtt():
    """Average is the arithmetic mean, None without samples."""
    assert Hop(hop_number=1, rtts=(10.0, 20.0, 30.0)).average_rtt == pytest.approx(20.0)
    assert Hop(hop_number=1).average_rtt is None


def test_hop_display_address():
    """hostname (address), then whichever exists, then *."""
    assert Hop(1, address="192.168.1.1", hostname="router.local").display_address == "router.local (192.168.1.1)"
    assert Hop(2, address="10.0.0.1").display_address == "10.0.0.1"
    assert Hop(3, hostname="server.local").display_address == "server.local"
    assert Hop(4, is_timeout=True).display_address == "*"


def test_hop_invariants():
    """Timed-out hops carry no data and hop numbers are positive."""
    with pytest.raises(ValueError):
        Hop(hop_number=2, address="10.0.0.1", is_timeout=True)
    with pytest.raises(ValueError):
        Hop(hop_number=2, rtts=(1.0,), is_timeout=True)
    with pytest.raises(ValueError):
        Hop(hop_number=0)


def test_trace_result_lifecycle():
    """Results open empty, collect hops and get a duration once finished."""
    result = TraceResult(target="8.8.8.8", start_time=T0)
    assert result.hops == []
    assert result.duration is None
    assert result.status is TraceStatus.IDLE

    result.add_hop(Hop(1, address="192.168.1.1"))
    result.add_hop(Hop(2, is_timeout=True))
    assert result.status is TraceStatus.RUNNING
    assert not result.is_complete

    result.finish(end_time=T0 + timedelta(seconds=2.5))
    assert result.is_complete
    assert result.duration == pytest.approx(2.5)
    assert result.status is TraceStatus.COMPLETED
    assert [h.hop_number for h in result.hops] == [1, 2]


def test_trace_result_failure():
    """Finishing with an error leaves the trace incomplete."""
    result = TraceResult(target="bad.example", start_time=T0)
    result.finish(end_time=T0, error="unknown host")
    assert not result.is_complete
    assert result.error_message == "unknown host"
    assert result.status is TraceStatus.FAILED
    assert result.duration == 0.0


def test_direction_display_name():
    assert ConnectionDirection.INCOMING.display_name == "Incoming"
    assert ConnectionDirection.OUTGOING.display_name == "Outgoing"


def test_connection_display_description():
    """Descriptions mention the service when known, else the protocol."""
    base = dict(direction=ConnectionDirection.INCOMING, application="Brave Browser",
                raw_message="x", timestamp=T0)
    with_service = ConnectionRecord(protocol=NetworkProtocol.UDP, remote_port=5353,
                                    service=KnownService.MDNS, **base)
    assert with_service.display_description == "Brave Browser using mDNS (Bonjour) on port 5353"

    bare_port = ConnectionRecord(protocol=NetworkProtocol.UDP, remote_port=12345, **base)
    assert bare_port.display_description == "Brave Browser (UDP) on port 12345"

    no_port = ConnectionRecord(protocol=NetworkProtocol.TCP, **base)
    assert no_port.display_description == "Brave Browser (TCP)"

    local_only = ConnectionRecord(protocol=NetworkProtocol.TCP, local_port=22, **base)
    assert local_only.display_description == "Brave Browser (TCP) on port 22"


def test_finish_keeps_naive_start_naive():
    """A naive start time gets a naive default end time."""
    result = TraceResult(target="8.8.8.8", start_time=datetime.now())
    result.finish()
    assert result.end_time.tzinfo is None
    assert result.duration >= 0
