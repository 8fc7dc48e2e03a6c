# netinterp/parser/hops.py
"""
Turn captured `traceroute` / `traceroute6` output into Hop records.

Typical input:

    traceroute to 8.8.8.8 (8.8.8.8), 30 hops max, 60 byte packets
     1  router.local (192.168.1.1)  1.512 ms  1.389 ms  1.301 ms
     2  * * *
     3  10.10.1.1  9.234 ms *  9.089 ms !H

Lines that don't look like a hop are dropped; the parse never fails.
"""
import logging
import re

from netinterp.core.address import AddressLiteral
from netinterp.core.models import Hop

log = logging.getLogger(__name__)

BANNER = "traceroute"

# plain decimals only; float() would also take nan, inf and 1_0
RTT_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def parse_traceroute_output(text: str) -> list[Hop]:
    hops = []
    if not text:
        return hops

    for line in text.splitlines():
        line = line.strip()
        # also drops the "traceroute6 to ..." header
        if not line or line.startswith(BANNER):
            continue
        hop = parse_hop_line(line)
        if hop is not None:
            hops.append(hop)
    return hops


def parse_hop_line(line: str) -> Hop | None:
    tokens = line.split()
    if not tokens:
        return None

    hop_number = _hop_number(tokens[0])
    if hop_number is None:
        log.debug("dropping non-hop line: %r", line)
        return None

    rest = tokens[1:]
    if all(tok == "*" for tok in rest):
        return Hop(hop_number=hop_number, is_timeout=True)

    address = None
    hostname = None
    rtts = []
    annotations = []

    i = 0
    while i < len(rest):
        tok = rest[i]

        if tok == "*":
            i += 1
            continue

        if len(tok) >= 2 and tok.startswith("(") and tok.endswith(")"):
            if address is None:
                address = tok[1:-1] or None
            i += 1
            continue

        if i + 1 < len(rest) and rest[i + 1] == "ms":
            if RTT_RE.fullmatch(tok):
                rtts.append(float(tok))
            else:
                log.debug("hop %d: unparseable rtt %r", hop_number, tok)
            i += 2
            continue

        if tok.startswith("!"):
            annotations.append(tok)
            i += 1
            continue

        # first hostname/address pair wins; a dotted token is only
        # considered while no address has been seen
        dotted = "." in tok
        if (hostname is None and not dotted) or (dotted and address is None):
            if AddressLiteral.parse(tok) is not None:
                if address is None:
                    address = tok
            elif hostname is None:
                hostname = tok

        i += 1

    return Hop(
        hop_number=hop_number,
        address=address,
        hostname=hostname,
        rtts=tuple(rtts),
        annotations=tuple(annotations),
    )


def _hop_number(token: str) -> int | None:
    if not token.isascii() or not token.isdigit():
        return None
    n = int(token)
    return n if n > 0 else None
