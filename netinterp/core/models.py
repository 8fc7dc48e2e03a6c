# netinterp/core/models.py
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from netinterp.core.services import KnownService


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Hop:
    hop_number: int
    address: str | None = None
    hostname: str | None = None
    rtts: tuple[float, ...] = ()          # milliseconds, in the order they were printed
    is_timeout: bool = False
    annotations: tuple[str, ...] = ()     # "!H", "!N", "!X", ...

    def __post_init__(self):
        if self.hop_number < 1:
            raise ValueError(f"hop number must be positive, got {self.hop_number}")
        if self.is_timeout and (self.address or self.hostname or self.rtts or self.annotations):
            raise ValueError("a timed-out hop carries no address, hostname or RTTs")
        # accept lists from callers but always store a tuple
        object.__setattr__(self, "rtts", tuple(self.rtts))
        object.__setattr__(self, "annotations", tuple(self.annotations))

    @property
    def average_rtt(self) -> float | None:
        if not self.rtts:
            return None
        return sum(self.rtts) / len(self.rtts)

    @property
    def display_address(self) -> str:
        if self.hostname and self.address:
            return f"{self.hostname} ({self.address})"
        return self.hostname or self.address or "*"


class TraceStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class TraceResult:
    """
    Hops of one traceroute run, appended as they arrive.
    The result is open until finish() stamps the end time.
    """
    target: str
    start_time: datetime = field(default_factory=utcnow)
    end_time: datetime | None = None
    hops: list[Hop] = field(default_factory=list)
    is_complete: bool = False
    error_message: str | None = None

    def add_hop(self, hop: Hop) -> None:
        self.hops.append(hop)

    def finish(self, end_time: datetime | None = None, error: str | None = None) -> None:
        # match the start stamp so naive and aware times never mix
        self.end_time = end_time or datetime.now(self.start_time.tzinfo)
        self.error_message = error
        self.is_complete = error is None

    @property
    def duration(self) -> float | None:
        """Seconds between start and end, or None while the trace is open."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def status(self) -> TraceStatus:
        if self.error_message is not None:
            return TraceStatus.FAILED
        if self.is_complete:
            return TraceStatus.COMPLETED
        if self.hops:
            return TraceStatus.RUNNING
        return TraceStatus.IDLE


class ConnectionDirection(Enum):
    INCOMING = "incoming"
    OUTGOING = "outgoing"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class NetworkProtocol(Enum):
    TCP = "tcp"
    UDP = "udp"
    ICMP = "icmp"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ConnectionRecord:
    direction: ConnectionDirection
    application: str
    protocol: NetworkProtocol
    raw_message: str
    process: str | None = None
    remote_address: str | None = None
    remote_port: int | None = None
    local_port: int | None = None
    service: KnownService | None = None
    timestamp: datetime = field(default_factory=utcnow)

    @property
    def display_description(self) -> str:
        port = self.remote_port if self.remote_port is not None else self.local_port
        if port is None:
            return f"{self.application} ({self.protocol.value.upper()})"
        if self.service is not None:
            return f"{self.application} using {self.service.display_name} on port {port}"
        return f"{self.application} ({self.protocol.value.upper()}) on port {port}"
