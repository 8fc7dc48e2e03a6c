# netinterp/brain/assembly.py
import logging
from datetime import datetime
from typing import Callable, Optional

from netinterp.core.models import ConnectionRecord, Hop, TraceResult
from netinterp.parser.hops import parse_traceroute_output
from netinterp.schemas import ConnectionSummary, HopSummary, TraceSummary

log = logging.getLogger(__name__)

HopCallback = Callable[[Hop], None]


def assemble_trace(target: str,
                   text: str,
                   start_time: Optional[datetime] = None,
                   end_time: Optional[datetime] = None,
                   on_hop: Optional[HopCallback] = None,
                   error: Optional[str] = None) -> TraceResult:
    """
    Build a finished TraceResult from the captured output of one run.
    Hops keep the order traceroute printed them in; `on_hop` sees each
    one as it is added.
    """
    result = TraceResult(target=target)
    if start_time is not None:
        result.start_time = start_time

    for hop in parse_traceroute_output(text):
        result.add_hop(hop)
        if on_hop is not None:
            on_hop(hop)

    result.finish(end_time=end_time, error=error)
    log.debug("assembled %d hops for %s", len(result.hops), target)
    return result


def summarize_hop(hop: Hop) -> HopSummary:
    return {
        "hop": hop.hop_number,
        "address": hop.address,
        "hostname": hop.hostname,
        "rtts_ms": list(hop.rtts),
        "avg_rtt_ms": hop.average_rtt,
        "timeout": hop.is_timeout,
        "annotations": list(hop.annotations),
    }


def summarize_trace(result: TraceResult) -> TraceSummary:
    """
    JSON-ready view of a trace:
    - path: display address per hop number ("*" when the hop stayed silent)
    - hops: every hop with its RTT samples and average
    """
    path = {}
    for hop in result.hops:
        # a hop number printed twice keeps its first line
        path.setdefault(hop.hop_number, hop.display_address)

    return {
        "target": result.target,
        "status": result.status.value,
        "start_time": result.start_time.isoformat(),
        "end_time": result.end_time.isoformat() if result.end_time else None,
        "duration_s": result.duration,
        "error": result.error_message,
        "path": path,
        "hops": [summarize_hop(h) for h in result.hops],
    }


def summarize_connection(record: ConnectionRecord) -> ConnectionSummary:
    return {
        "direction": record.direction.value,
        "application": record.application,
        "process": record.process,
        "protocol": record.protocol.value,
        "remote_address": record.remote_address,
        "remote_port": record.remote_port,
        "local_port": record.local_port,
        "service": record.service.display_name if record.service else None,
        "description": record.display_description,
        "timestamp": record.timestamp.isoformat(),
        "raw": record.raw_message,
    }
