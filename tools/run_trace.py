# tools/run_trace.py
# Usage examples:
#   python3 -m tools.run_trace 8.8.8.8
#   python3 -m tools.run_trace 2001:4860:4860::8888 --max-hops 20 --timeout 2
#   python3 -m tools.run_trace 8.8.8.8 --resolve
#   python3 -m tools.run_trace fake

import sys
import json
import argparse
import logging

from netinterp.brain.assembly import summarize_trace
from netinterp.config import Settings
from netinterp.prober.base import TracerouteError

FAKE_OUTPUT = """traceroute to 8.8.8.8 (8.8.8.8), 30 hops max, 60 byte packets
 1  router.local (192.168.1.1)  1.512 ms  1.389 ms  1.301 ms
 2  10.0.0.1 (10.0.0.1)  8.120 ms  7.954 ms  8.003 ms
 3  * * *
 4  dns.google (8.8.8.8)  12.441 ms  12.310 ms  12.502 ms
"""

def print_hop(hop):
    rtts = "  ".join(f"{r:.3f} ms" for r in hop.rtts)
    print(f"{hop.hop_number:2d}  {hop.display_address}  {rtts}", file=sys.stderr)

def build_runner(args):
    if args.target == "fake":
        from netinterp.prober.fake import FakeRunner
        return FakeRunner(script={"fake": [FAKE_OUTPUT]})

    from netinterp.prober.system import SystemTracerouteRunner
    return SystemTracerouteRunner(Settings(max_hops=args.max_hops, probe_timeout=args.timeout))

def resolve_hops(runner, result):
    # hop number -> PTR name, for hops traceroute printed without one
    names = {}
    lookup = getattr(runner, "reverse_lookup", None)
    if lookup is None:
        return names
    for hop in result.hops:
        if hop.address and (not hop.hostname or hop.hostname == hop.address):
            name = lookup(hop.address)
            if name:
                names[hop.hop_number] = name
    return names

def build_argparser():
    ap = argparse.ArgumentParser(description="Run traceroute and print a JSON summary")
    ap.add_argument("target", help="Destination host/IP (or 'fake' for canned output)")
    ap.add_argument("--max-hops", type=int, default=30, help="Maximum number of hops")
    ap.add_argument("--timeout", type=int, default=5, help="Seconds to wait per probe")
    ap.add_argument("--resolve", action="store_true",
                    help="Look up PTR names of bare hop addresses with `host`")
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    return ap

if __name__ == "__main__":
    args = build_argparser().parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    runner = build_runner(args)
    try:
        result = runner.trace(args.target, on_hop=print_hop)
    except TracerouteError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    summary = summarize_trace(result)
    if args.resolve:
        summary["ptr"] = resolve_hops(runner, result)
    print(json.dumps(summary, indent=2))
