# netinterp/prober/system.py
import logging
import shlex
import shutil
import subprocess

from netinterp.config import Settings
from netinterp.parser.host import parse_host_output
from netinterp.prober.base import CapturedOutput, CommandFailed, TraceRunner

log = logging.getLogger(__name__)


class SystemTracerouteRunner(TraceRunner):
    """
    Runs the OS traceroute binary and captures its output in one go.
    IPv6 targets (anything containing a colon) go to traceroute6.
    """

    def __init__(self, settings: Settings | None = None):
        self.s = settings or Settings()

    def binary_for(self, target: str) -> str:
        return self.s.traceroute6_bin if ":" in target else self.s.traceroute_bin

    def _build_cmd(self, binary: str, target: str) -> str:
        return (f"{shlex.quote(binary)} -m {int(self.s.max_hops)} "
                f"-w {int(self.s.probe_timeout)} {shlex.quote(target)}")

    def _run_cmd(self, cmd: str) -> subprocess.CompletedProcess:
        return subprocess.run(cmd, shell=True, check=False, stdout=subprocess.PIPE,
                              stderr=subprocess.PIPE, text=True)

    def capture(self, target: str) -> CapturedOutput:
        name = self.binary_for(target)
        binary = shutil.which(name)
        if binary is None:
            raise CommandFailed(f"{name} not found on PATH")

        cmd = self._build_cmd(binary, target)
        log.info("running: %s", cmd)
        try:
            proc = self._run_cmd(cmd)
        except OSError as e:
            raise CommandFailed(f"failed to start traceroute: {e}") from e

        return CapturedOutput(proc.returncode, proc.stdout or "", proc.stderr or "")

    def reverse_lookup(self, address: str) -> str | None:
        """PTR name for a hop address via `host`, None when there is none."""
        binary = shutil.which(self.s.host_bin)
        if binary is None:
            log.warning("%s not found on PATH, skipping reverse lookup", self.s.host_bin)
            return None
        try:
            proc = self._run_cmd(f"{shlex.quote(binary)} {shlex.quote(address)}")
        except OSError as e:
            log.warning("reverse lookup of %s failed: %s", address, e)
            return None
        return parse_host_output(proc.stdout or "")
