# netinterp/parser/connection.py
"""
Parser for firewall connection notices, e.g.

    tried to establish an incoming connection to Brave Browser via
    Brave Browser Helper on UDP port 5353 (mdns).

Every field is extracted independently; whatever can't be found falls
back to a default, so parse() always returns a record.
"""
import logging
import re

from netinterp.config import Settings
from netinterp.core.address import AddressLiteral
from netinterp.core.models import ConnectionDirection, ConnectionRecord, NetworkProtocol
from netinterp.core.services import KnownService

log = logging.getLogger(__name__)

PORT_RE = re.compile(r"port\s+(\d+)(?:\s*\(([^)]+)\))?", re.IGNORECASE)

# runs of hex digits and colons with at least two colons, not running into
# a dotted tail (::ffff:10.0.0.1); validated afterwards
IPV6_CANDIDATE_RE = re.compile(
    r"(?<![0-9A-Za-z:.])(?=[0-9A-Fa-f:]*[0-9A-Fa-f])"
    r"[0-9A-Fa-f]*:[0-9A-Fa-f:]*:[0-9A-Fa-f]*(?![0-9A-Za-z:]|\.\d)"
)
# octets are not range-checked
IPV4_RE = re.compile(r"\b(\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})\b")

CONNECTION_TO_RE = re.compile(re.escape("connection to "), re.IGNORECASE)
VIA_RE = re.compile(re.escape(" via "), re.IGNORECASE)
ON_RE = re.compile(re.escape(" on "), re.IGNORECASE)


class ConnectionMessageParser:
    def __init__(self, settings: Settings | None = None):
        self.s = settings or Settings()

    def parse(self, message: str) -> ConnectionRecord:
        raw = message if message is not None else ""
        text = raw.strip()

        port, hint = extract_port(text)
        if hint is not None:
            service = KnownService.from_name(hint)
        elif port is not None:
            service = KnownService.from_port(port)
        else:
            service = None

        application = extract_application(text)
        if not application:
            log.debug("no application in message: %r", text)
            application = self.s.unknown_application

        return ConnectionRecord(
            direction=extract_direction(text),
            application=application,
            process=extract_process(text),
            protocol=extract_protocol(text),
            remote_address=extract_address(text),
            remote_port=port,
            service=service,
            raw_message=raw,
        )

    def parse_address(self, text: str) -> AddressLiteral | None:
        return AddressLiteral.parse(text)


def parse_connection_message(message: str) -> ConnectionRecord:
    return ConnectionMessageParser().parse(message)


def extract_direction(text: str) -> ConnectionDirection:
    if "incoming connection" in text:
        return ConnectionDirection.INCOMING
    # "outgoing connection" / "connect to" are outgoing, and so is anything else
    return ConnectionDirection.OUTGOING


def extract_application(text: str) -> str | None:
    m = CONNECTION_TO_RE.search(text)
    if m is None:
        return None
    after = text[m.end():]

    stop = VIA_RE.search(after) or ON_RE.search(after)
    if stop is None:
        return None
    return after[:stop.start()].strip()


def extract_process(text: str) -> str | None:
    m = VIA_RE.search(text)
    if m is None:
        return None
    after = text[m.end():]
    stop = ON_RE.search(after)
    process = (after[:stop.start()] if stop else after).strip()
    return process or None


def extract_protocol(text: str) -> NetworkProtocol:
    lowered = text.lower()
    for proto in (NetworkProtocol.UDP, NetworkProtocol.TCP, NetworkProtocol.ICMP):
        if proto.value in lowered:
            return proto
    return NetworkProtocol.UNKNOWN


def extract_port(text: str) -> tuple[int | None, str | None]:
    m = PORT_RE.search(text)
    if m is None:
        return None, None
    return int(m.group(1)), m.group(2)


def extract_address(text: str) -> str | None:
    for m in IPV6_CANDIDATE_RE.finditer(text):
        addr = AddressLiteral.parse(m.group(0))
        if addr is not None and addr.is_ipv6:
            return m.group(0)

    m = IPV4_RE.search(text)
    if m is not None:
        return m.group(1)
    return None
