"""
Command-line driver: normalize newline-delimited WOF GeoJSON features.

Reads one feature per line from a file (or stdin) and writes the transformed
features to stdout, one per line. Configuration comes from WOFPIP_*
environment variables.
"""

import argparse
import json
import logging
import sys

from wofpip import PipelineConfig, process_records


def read_features(stream):
    """Yield decoded features, skipping blank lines."""
    for line_number, line in enumerate(stream, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError as e:
            raise SystemExit(f"❌ Error: invalid JSON on line {line_number}: {e}") from e


def main(argv=None):
    """Run the transform over a file or stdin."""
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("input", nargs="?", help="NDJSON file of WOF features (default: stdin)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level for diagnostics")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = PipelineConfig.from_env()

    if args.input:
        with open(args.input, encoding="utf-8") as f:
            _write(process_records(read_features(f), config))
    else:
        _write(process_records(read_features(sys.stdin), config))


def _write(features):
    for feature in features:
        sys.stdout.write(json.dumps(feature, ensure_ascii=False))
        sys.stdout.write("\n")


if __name__ == "__main__":
    main()
