# tools/parse_message.py
# Usage:
#   python3 -m tools.parse_message "tried to establish an incoming connection to Brave Browser via Brave Browser Helper on UDP port 5353 (mdns)."
#   pbpaste | python3 -m tools.parse_message

import sys
import json
import argparse
import logging

from netinterp.brain.assembly import summarize_connection
from netinterp.config import Settings
from netinterp.parser.connection import ConnectionMessageParser

def main():
    ap = argparse.ArgumentParser(description="Parse a firewall connection notice into JSON")
    ap.add_argument("message", nargs="*", help="Notice text (default: one notice per stdin line)")
    ap.add_argument("--unknown-app", default="Unknown Application",
                    help="Name reported when the notice names no application")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    parser = ConnectionMessageParser(Settings(unknown_application=args.unknown_app))
    if args.message:
        messages = [" ".join(args.message)]
    else:
        messages = [line for line in sys.stdin.read().splitlines() if line.strip()]

    out = [summarize_connection(parser.parse(m)) for m in messages]
    print(json.dumps(out[0] if len(out) == 1 else out, indent=2))

if __name__ == "__main__":
    main()
