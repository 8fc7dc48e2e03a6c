from typing import Literal, TypedDict, Optional

TraceStatusName = Literal["idle", "running", "completed", "failed"]

class HopSummary(TypedDict):
    hop: int
    address: Optional[str]
    hostname: Optional[str]
    rtts_ms: list[float]
    avg_rtt_ms: Optional[float]
    timeout: bool
    annotations: list[str]

class TraceSummary(TypedDict):
    target: str
    status: TraceStatusName
    start_time: str
    end_time: Optional[str]
    duration_s: Optional[float]
    error: Optional[str]
    path: dict[int, str]    # hop number -> display address, "*" for silent hops
    hops: list[HopSummary]

class ConnectionSummary(TypedDict):
    direction: str
    application: str
    process: Optional[str]
    protocol: str
    remote_address: Optional[str]
    remote_port: Optional[int]
    local_port: Optional[int]
    service: Optional[str]
    description: str
    timestamp: str
    raw: str  # original message, untouched
