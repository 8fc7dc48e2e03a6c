# tests/test_hops.py
from netinterp.parser.hops import parse_hop_line, parse_traceroute_output

LINUX_OUTPUT = """traceroute to 8.8.8.8 (8.8.8.8), 30 hops max, 60 byte packets
 1  router.local (192.168.1.1)  1.512 ms  1.389 ms  1.301 ms
 2  * * *
 3  10.10.1.1  9.234 ms *  9.089 ms
 4  dns.google (8.8.8.8)  12.441 ms  12.310 ms  12.502 ms
"""


def test_named_hop_with_address():
    """hostname (address) followed by RTT samples."""
    hops = parse_traceroute_output("1  router.local (192.168.1.1)  1.5 ms  2.0 ms")
    assert len(hops) == 1
    hop = hops[0]
    assert hop.hop_number == 1
    assert hop.hostname == "router.local"
    assert hop.address == "192.168.1.1"
    assert hop.rtts == (1.5, 2.0)
    assert hop.is_timeout is False
    assert hop.average_rtt == 1.75


def test_timeout_hop():
    """A line of stars is a timed-out hop with nothing else set."""
    hops = parse_traceroute_output("3  * * *")
    assert len(hops) == 1
    hop = hops[0]
    assert hop.hop_number == 3
    assert hop.is_timeout is True
    assert hop.address is None
    assert hop.hostname is None
    assert hop.rtts == ()
    assert hop.display_address == "*"


def test_empty_input():
    """No text, no hops."""
    assert parse_traceroute_output("") == []
    assert parse_traceroute_output("\n\n   \n") == []


def test_banner_is_dropped():
    """The traceroute header line never becomes a hop."""
    hops = parse_traceroute_output(LINUX_OUTPUT)
    assert [h.hop_number for h in hops] == [1, 2, 3, 4]
    assert hops[1].is_timeout
    assert hops[3].hostname == "dns.google"
    assert hops[3].address == "8.8.8.8"


def test_traceroute6_banner_is_dropped():
    """traceroute6 headers start with the same command name."""
    text = ("traceroute6 to 2001:4860:4860::8888 (2001:4860:4860::8888), 30 hops max\n"
            " 1  fe80::1  0.512 ms  0.401 ms  0.388 ms\n")
    hops = parse_traceroute_output(text)
    assert len(hops) == 1
    assert hops[0].address == "fe80::1"
    assert hops[0].hostname is None


def test_bare_address_hop():
    """`traceroute -n` style lines put the address in the hostname slot."""
    hop = parse_hop_line("3  10.10.1.1  9.234 ms *  9.089 ms")
    assert hop.address == "10.10.1.1"
    assert hop.hostname is None
    assert hop.rtts == (9.234, 9.089)
    assert not hop.is_timeout


def test_partial_timeout_keeps_samples():
    """Stars between samples are skipped."""
    hop = parse_hop_line("5  gw.example.net (203.0.113.9)  * 20.1 ms *")
    assert hop.rtts == (20.1,)
    assert hop.hostname == "gw.example.net"
    assert hop.address == "203.0.113.9"


def test_non_hop_lines_are_dropped():
    """Lines without a positive hop number are ignored."""
    text = "garbage line\n0  1.1.1.1  1 ms\n-2  1.1.1.1  1 ms\n 7  host.example (1.2.3.4)  3.0 ms\n"
    hops = parse_traceroute_output(text)
    assert [h.hop_number for h in hops] == [7]


def test_first_hostname_and_address_win():
    """Lines naming several routers keep only the first pair."""
    hop = parse_hop_line("6  a.example (1.1.1.1)  10.0 ms b.example (2.2.2.2)  11.0 ms")
    assert hop.hostname == "a.example"
    assert hop.address == "1.1.1.1"
    assert hop.rtts == (10.0, 11.0)


def test_dotted_token_after_address_is_ignored():
    """Once an address is known, further dotted tokens are not classified."""
    hop = parse_hop_line("4  (10.0.0.1) edge.example.net 2.0 ms")
    assert hop.address == "10.0.0.1"
    assert hop.hostname is None


def test_undotted_hostname():
    """A single-label name becomes the hostname."""
    hop = parse_hop_line("2  gateway (192.168.0.1)  0.9 ms")
    assert hop.hostname == "gateway"
    assert hop.address == "192.168.0.1"


def test_annotations_collected():
    """!H style flags are kept apart from hostnames."""
    hop = parse_hop_line("9  10.0.0.9  31.0 ms !H  30.5 ms !H  *")
    assert hop.hostname is None
    assert hop.address == "10.0.0.9"
    assert hop.annotations == ("!H", "!H")
    assert hop.rtts == (31.0, 30.5)


def test_unparseable_rtt_is_dropped():
    """A value in front of `ms` that isn't a number is skipped with its unit."""
    hop = parse_hop_line("2  host.example (1.2.3.4)  abc ms  4.5 ms")
    assert hop.rtts == (4.5,)
    assert hop.hostname == "host.example"


def test_hops_keep_emitted_order():
    """Hops come back in the order they were printed."""
    text = "2  a (1.1.1.1)  1 ms\n1  b (2.2.2.2)  1 ms\n"
    assert [h.hop_number for h in parse_traceroute_output(text)] == [2, 1]


def test_hop_number_only_is_timeout():
    """A hop number with nothing after it counts as silent."""
    hop = parse_hop_line("12")
    assert hop.is_timeout


def test_rtt_accepts_plain_decimals_only():
    """nan, inf and underscored numbers are not RTT samples."""
    hop = parse_hop_line("1  host.example (1.2.3.4)  nan ms  inf ms  1_0 ms  2 ms  0.5 ms")
    assert hop.rtts == (2.0, 0.5)
    assert hop.average_rtt == 1.25


def test_undotted_address_after_hostname_is_ignored():
    """With a hostname already set, an undotted token is left unclassified."""
    hop = parse_hop_line("1  gw fe80::1  1 ms")
    assert hop.hostname == "gw"
    assert hop.address is None
    assert hop.rtts == (1.0,)
