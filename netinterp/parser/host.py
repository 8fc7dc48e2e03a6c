# netinterp/parser/host.py
import logging

log = logging.getLogger(__name__)

POINTER_MARKER = "domain name pointer "


def parse_host_output(text: str) -> str | None:
    """
    Pull the PTR name out of `host <ip>` output, e.g.
    "8.8.8.8.in-addr.arpa domain name pointer dns.google." -> "dns.google"
    """
    if not text:
        return None
    for line in text.splitlines():
        idx = line.find(POINTER_MARKER)
        if idx < 0:
            continue
        name = line[idx + len(POINTER_MARKER):].strip().rstrip(".")
        if name:
            return name
    log.debug("no PTR record in host output")
    return None
