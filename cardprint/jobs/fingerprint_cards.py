"""
Fingerprint card descriptors from the command line.

Usage:
    python -m cardprint.jobs.fingerprint_cards fingerprint cards.jsonl
    python -m cardprint.jobs.fingerprint_cards parse "curry messi|topps|2023||||"
    cat cards.json | python -m cardprint.jobs.fingerprint_cards duplicates

Input files hold a JSON array, a single JSON object, or JSON Lines.
Reads stdin when no file (or "-") is given.
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from dataclasses import asdict
from pathlib import Path
from typing import TextIO

from cardprint.config import LOG_LEVELS, settings
from cardprint.parsers.descriptor_import import DescriptorImportError, parse_descriptors
from cardprint.services.duplicate_finder import find_duplicates
from cardprint.services.fingerprint import (
    build_fingerprint,
    classify_descriptor,
    parse_fingerprint,
)


def _read_input(path: Path | None, stdin: TextIO) -> str:
    if path is None or str(path) == "-":
        return stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DescriptorImportError(f"{path}: not valid UTF-8 ({exc.reason})") from exc


def run_fingerprint(text: str, out: TextIO) -> None:
    """Write "kind<TAB>fingerprint" per descriptor."""
    for descriptor in parse_descriptors(text):
        kind = classify_descriptor(descriptor)
        out.write(f"{kind.value}\t{build_fingerprint(descriptor)}\n")


def run_parse(fingerprints: Sequence[str], out: TextIO) -> None:
    """Write each parsed fingerprint as one JSON object per line."""
    for fingerprint in fingerprints:
        out.write(json.dumps(parse_fingerprint(fingerprint).to_dict()) + "\n")


def run_duplicates(text: str, out: TextIO) -> int:
    """Write each duplicate group as JSON. Returns the number of groups."""
    groups = find_duplicates(parse_descriptors(text))
    for group in groups:
        payload = {
            "fingerprint": group.fingerprint,
            "kind": group.kind.value,
            "count": group.count,
            "descriptors": [
                {k: v for k, v in asdict(d).items() if v is not None}
                for d in group.descriptors
            ],
        }
        out.write(json.dumps(payload) + "\n")
    return len(groups)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        description="Build and inspect card identity fingerprints",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.effective_log_level,
        help="Logging level (default: %(default)s)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    fingerprint_cmd = commands.add_parser("fingerprint", help="Fingerprint descriptors")
    fingerprint_cmd.add_argument(
        "file", nargs="?", type=Path, help="JSON / JSON Lines file (default: stdin)"
    )

    parse_cmd = commands.add_parser("parse", help="Parse fingerprints back into fields")
    parse_cmd.add_argument("fingerprints", nargs="+", help="Fingerprint strings")

    duplicates_cmd = commands.add_parser(
        "duplicates", help="Report descriptors that share a fingerprint"
    )
    duplicates_cmd.add_argument(
        "file", nargs="?", type=Path, help="JSON / JSON Lines file (default: stdin)"
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.command == "parse":
            run_parse(args.fingerprints, sys.stdout)
        elif args.command == "fingerprint":
            run_fingerprint(_read_input(args.file, sys.stdin), sys.stdout)
        else:
            run_duplicates(_read_input(args.file, sys.stdin), sys.stdout)
    except (DescriptorImportError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
