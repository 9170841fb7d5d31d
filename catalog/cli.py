# -*- coding: utf-8 -*-
"""Catalog assistant CLI.

Local entry for enriching a catalog sheet without the web front-end.

Commands:
- `enrich`: read a CSV sheet plus raw text, enrich, and write the export CSV.
- `ask`: classify a chat command and print the assistant reply.

Every command prints a single JSON object to stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from catalog import config
from catalog.pipeline.router import AssistantSession, respond
from catalog.processor import process_enrich_request
from catalog.services.csv_store import export_filename, read_catalog_csv, write_catalog_csv

logger = logging.getLogger(__name__)


def _print_json(payload: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False))
    sys.stdout.write("\n")


def _read_raw_text(args: argparse.Namespace) -> str:
    if args.raw_file:
        return Path(args.raw_file).read_text(encoding="utf-8")
    return args.raw_text or ""


def cmd_enrich(args: argparse.Namespace) -> int:
    try:
        rows = read_catalog_csv(args.catalog)
        raw_text = _read_raw_text(args)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read catalog inputs: {e}")
        _print_json({"status": "error", "error": {"message": str(e), "reason": "read_failed"}})
        return 1

    response = process_enrich_request({"catalog": rows, "rawData": raw_text})
    if not response.ok:
        _print_json(
            {
                "status": "error",
                "error": {"message": response.body.get("error"), "status": response.status},
            }
        )
        return 1

    enriched = response.body["enrichedCatalog"]
    output_dir = Path(args.output_dir) if args.output_dir else config.EXPORT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / export_filename()
    write_catalog_csv(enriched, output_path)

    _print_json({"status": "ok", "rows": len(enriched), "output": str(output_path)})
    return 0


def cmd_ask(args: argparse.Namespace) -> int:
    catalog_rows = 0
    if args.catalog:
        try:
            catalog_rows = len(read_catalog_csv(args.catalog))
        except (OSError, ValueError) as e:
            _print_json({"status": "error", "error": {"message": str(e), "reason": "read_failed"}})
            return 1

    session = AssistantSession(catalog_rows=catalog_rows, raw_data=_read_raw_text(args))
    reply = respond(args.command, session)
    _print_json({"intent": reply.intent.value, "message": reply.message})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catalog", description="Catalog enrichment assistant")
    sub = parser.add_subparsers(dest="cmd", required=True)

    enrich = sub.add_parser("enrich", help="Enrich a catalog CSV with raw product text")
    enrich.add_argument("--catalog", required=True, help="Catalog sheet (CSV with header row)")
    raw = enrich.add_mutually_exclusive_group(required=True)
    raw.add_argument("--raw-file", help="File with one raw product line per row")
    raw.add_argument("--raw-text", help="Raw product text (newline separated)")
    enrich.add_argument("--output-dir", help="Directory for the exported CSV (default: EXPORT_DIR)")
    enrich.set_defaults(func=cmd_enrich)

    ask = sub.add_parser("ask", help="Send a chat command to the assistant")
    ask.add_argument("command")
    ask.add_argument("--catalog", help="Catalog sheet currently loaded")
    ask.add_argument("--raw-file")
    ask.add_argument("--raw-text")
    ask.set_defaults(func=cmd_ask)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
