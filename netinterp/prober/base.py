# netinterp/prober/base.py
import logging
from abc import ABC, abstractmethod
from typing import NamedTuple, Optional

from netinterp.brain.assembly import HopCallback, assemble_trace
from netinterp.core.models import TraceResult, utcnow

log = logging.getLogger(__name__)


class TracerouteError(RuntimeError):
    pass


class InvalidTarget(TracerouteError):
    def __init__(self, target):
        super().__init__(f"Invalid target: {target!r}")
        self.target = target


class CommandFailed(TracerouteError):
    def __init__(self, message: str):
        super().__init__(f"Command failed: {message}")


class CapturedOutput(NamedTuple):
    returncode: int
    stdout: str
    stderr: str = ""


class TraceRunner(ABC):
    @abstractmethod
    def capture(self, target: str) -> CapturedOutput:
        """Run one complete trace to `target` and return everything it printed."""
        raise NotImplementedError

    def trace(self, target: str, on_hop: Optional[HopCallback] = None) -> TraceResult:
        target = check_target(target)
        start = utcnow()
        out = self.capture(target)
        end = utcnow()

        error = None
        if out.returncode != 0 and out.stderr.strip():
            error = out.stderr.strip()
            log.warning("trace to %s exited with %d: %s", target, out.returncode, error)

        return assemble_trace(target, out.stdout, start_time=start, end_time=end,
                              on_hop=on_hop, error=error)


def check_target(target: str) -> str:
    if target is None:
        raise InvalidTarget(target)
    t = target.strip()
    # a leading dash would be read as an option by traceroute
    if not t or t.startswith("-") or any(c.isspace() for c in t):
        raise InvalidTarget(target)
    return t
