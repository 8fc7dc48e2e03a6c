# tools/parse_trace.py
# Usage:
#   traceroute 8.8.8.8 | python3 -m tools.parse_trace
#   python3 -m tools.parse_trace saved_trace.txt --target 8.8.8.8

import sys
import json
import argparse
import logging

from netinterp.brain.assembly import assemble_trace, summarize_trace

def main():
    ap = argparse.ArgumentParser(description="Parse captured traceroute output into JSON")
    ap.add_argument("file", nargs="?", help="File holding traceroute output (default: stdin)")
    ap.add_argument("--target", default="", help="Target the trace was run against")
    ap.add_argument("--verbose", action="store_true", help="Log dropped lines")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.file:
        with open(args.file, encoding="utf-8") as fh:
            text = fh.read()
    else:
        text = sys.stdin.read()

    result = assemble_trace(args.target, text)
    print(json.dumps(summarize_trace(result), indent=2))

if __name__ == "__main__":
    main()
