# netinterp/prober/fake.py
from collections import deque

from netinterp.prober.base import CapturedOutput, TraceRunner


class FakeRunner(TraceRunner):
    """
    script: dict[target] -> list of outputs to hand back, one per trace() call.
    An output is either a plain stdout string or a CapturedOutput.
    Once a target's script runs dry, traces come back empty.
    """
    def __init__(self, script=None):
        self.script = {}
        self.calls = []
        if script:
            for k, v in script.items():
                self.script[k] = deque(v)

    def capture(self, target: str) -> CapturedOutput:
        self.calls.append(target)
        dq = self.script.get(target)
        if dq:
            out = dq.popleft()
            if isinstance(out, CapturedOutput):
                return out
            return CapturedOutput(0, out)
        return CapturedOutput(0, "")
