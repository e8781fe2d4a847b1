"""Command line interface for parsing and importing Congressional Record sections."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import load_config
from .core.types import CHAMBERS
from .parsing import bill_url, extract_bill_numbers, group_transcript, parse_congressional_record_html
from .pipeline import JsonDirectorySink, PipelineEvent
from .runtime import create_pipeline

LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Congressional Record floor transcript parser")
    parser.add_argument("--config", type=Path, help="Path to an explicit configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Parse a local transcript file and print JSON")
    parse_cmd.add_argument("path", type=Path, help="HTML or plain text transcript")
    parse_cmd.add_argument("--chamber", choices=CHAMBERS, default="senate")
    parse_cmd.add_argument("--date", default="", help="Session date recorded in the metadata")
    parse_cmd.add_argument(
        "--no-group",
        action="store_true",
        help="Keep consecutive segments of the same speaker separate",
    )

    bills_cmd = commands.add_parser("bills", help="List bill citations found in a file")
    bills_cmd.add_argument("path", type=Path, help="Any text or HTML file")

    import_cmd = commands.add_parser("import", help="Fetch and parse GovInfo packages for a date range")
    import_cmd.add_argument("from_date", help="First date (YYYY-MM-DD)")
    import_cmd.add_argument("--to", dest="to_date", help="Last date (YYYY-MM-DD), defaults to the first date")
    import_cmd.add_argument("--chamber", dest="chambers", action="append", choices=CHAMBERS)
    import_cmd.add_argument("--limit", type=int, help="Maximum number of packages to import")
    import_cmd.add_argument("--output", type=Path, required=True, help="Directory for the JSON results")
    return parser


def _log_event(event: PipelineEvent) -> None:
    if event.kind in {"parsed", "skipped", "error"}:
        LOGGER.info("%s: %s", event.kind, event.message)


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    config = load_config(args.config)

    if args.command == "parse":
        markup = args.path.read_text(encoding="utf8", errors="replace")
        transcript = parse_congressional_record_html(markup, args.chamber)
        transcript.metadata.date = args.date
        if config.parser.group_segments and not args.no_group:
            transcript = group_transcript(transcript)
        json.dump(transcript.to_dict(), sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")
        return 0
    if args.command == "bills":
        text = args.path.read_text(encoding="utf8", errors="replace")
        for citation in extract_bill_numbers(text):
            url = bill_url(citation, config.parser.congress)
            print(f"{citation}\t{url or '-'}")
        return 0
    if args.command == "import":
        sink = JsonDirectorySink(args.output)
        resources = create_pipeline(config, sink=sink)
        try:
            processed = resources.pipeline.run(
                args.from_date,
                args.to_date or args.from_date,
                chambers=tuple(args.chambers or CHAMBERS),
                limit=args.limit,
                progress_callback=_log_event,
            )
            LOGGER.info("Imported %s packages (%s files)", processed, len(sink.written))
            return 0
        finally:
            resources.close()
    parser.error(f"Unknown command {args.command}")
    return 2


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
