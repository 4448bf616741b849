from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import HtmlTablesError
from .parser import HtmlTableParser
from .transform.frames import records_to_dataframe, tables_to_dataframe

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser("html-tables", description="Convert HTML tables to JSON records or CSV")
    ap.add_argument("file", help="HTML file to read")
    ap.add_argument("--selector", default=None, help="CSS selector of one table (default: all tables)")
    ap.add_argument("--format", choices=("json", "csv"), default="json", help="Output format (default: json)")
    ap.add_argument("--out", default=None, help="Write output here instead of stdout")
    ap.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    ap.add_argument("--sep", default=".", help="CSV column path separator (default: '.')")
    ap.add_argument("--no-trim-keys", dest="trim_keys", action="store_const", const=False, default=None)
    ap.add_argument("--no-lowercase-keys", dest="lowercase_keys", action="store_const", const=False, default=None)
    ap.add_argument(
        "--keep-double-whitespace", dest="collapse_whitespace", action="store_const", const=False, default=None
    )
    ws = ap.add_mutually_exclusive_group()
    ws.add_argument("--replace-whitespace", dest="replace_whitespace", default=None, metavar="STR",
                    help="Replace whitespace in keys with STR (default: '_')")
    ws.add_argument("--no-replace-whitespace", dest="replace_whitespace", action="store_const", const=False)
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def _options(args: argparse.Namespace) -> Dict[str, Any]:
    opts: Dict[str, Any] = {}
    for name in ("trim_keys", "lowercase_keys", "collapse_whitespace", "replace_whitespace"):
        v = getattr(args, name)
        if v is not None:
            opts[name] = v
    return opts


def _render(args: argparse.Namespace, payload: Any) -> str:
    if args.format == "csv":
        if args.selector:
            df = records_to_dataframe(payload, sep=args.sep)
        else:
            df = tables_to_dataframe(payload, sep=args.sep)
        return df.to_csv(index=False)
    return json.dumps(payload, indent=args.indent, ensure_ascii=False) + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        parser = HtmlTableParser.from_file(args.file, **_options(args))
        if args.selector:
            payload: Any = parser.parse_table(args.selector)
            logger.info("Parsed %d row(s) from %s", len(payload), args.selector)
        else:
            payload = parser.parse_all_tables()
            logger.info("Parsed %d table(s) from %s", len(payload), args.file)
        text = _render(args, payload)
        if args.out:
            out = Path(args.out).expanduser()
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(text, encoding="utf-8")
            logger.info("Wrote %s", out)
        else:
            sys.stdout.write(text)
    except (HtmlTablesError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
