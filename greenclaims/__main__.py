"""Command line entry point for greenclaims.

Scan a text file, an inline string or standard input and print a report:

```sh
    python -m greenclaims scan landing_page.txt
    python -m greenclaims scan --text "100% klimaneutral verpackt" --json
    python -m greenclaims scan --sample high_risk --highlight
    python -m greenclaims terms --severity critical --language en
```

Input longer than the configured ``max_input_chars`` is truncated before
scanning, matching what the HTTP front end accepts.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .config import build_corpus, load_config
from .highlight import highlight
from .legacy import to_legacy_shape
from .report import render_report
from .samples import SAMPLE_TEXTS, get_sample
from .scanner import scan
from .terms import CATEGORIES, LANGUAGES, SEVERITIES, get_all_terms

logger = logging.getLogger(__name__)


def _read_input(args: argparse.Namespace) -> str | None:
    if args.text is not None:
        return args.text
    if args.sample is not None:
        return get_sample(args.sample)
    if args.file is not None:
        return Path(args.file).read_text(encoding="utf-8")
    if not sys.stdin.isatty():
        return sys.stdin.read() or None
    return None


def _cmd_scan(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    config = load_config(args.config)
    text = _read_input(args)
    if text is None:
        parser.error("no input: pass FILE, --text, --sample or pipe text on stdin")

    if len(text) > config.max_input_chars:
        logger.warning(f"Input has {len(text)} characters, truncating to {config.max_input_chars}")
        text = text[: config.max_input_chars]

    result = scan(text, build_corpus(config), context_chars=config.context_chars)

    if args.highlight:
        print(highlight(text, result))
    elif args.json:
        payload = to_legacy_shape(result).to_dict() if args.legacy else result.to_dict()
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(render_report(to_legacy_shape(result), result.summary.estimated_penalty), end="")
    return 0


def _cmd_terms(args: argparse.Namespace) -> int:
    terms = [
        t for t in get_all_terms()
        if (args.severity is None or t.severity == args.severity)
        and (args.language is None or t.language == args.language)
        and (args.category is None or t.category == args.category)
    ]
    if args.json:
        print(json.dumps([t.to_dict() for t in terms], ensure_ascii=False, indent=2))
    else:
        for t in terms:
            print(f"{t.severity:<9} {t.language:<4} {t.category:<10} {t.term}")
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Green Claims Scanner CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    # ---- scan ----
    p1 = sub.add_parser("scan", help="Scan text for regulated green claims")
    p1.add_argument("file", nargs="?", default=None, help="Text file to scan (default: stdin)")
    p1.add_argument("--text", default=None, help="Scan this string instead of a file")
    p1.add_argument("--sample", choices=sorted(SAMPLE_TEXTS), default=None, help="Scan a bundled sample text")
    p1.add_argument("--json", action="store_true", help="Print the result as JSON")
    p1.add_argument(
        "--legacy",
        action="store_true",
        help="With --json, print the per-term grouped shape instead of the severity-grouped one",
    )
    p1.add_argument("--highlight", action="store_true", help="Print the text with matches wrapped in <mark> tags")
    p1.add_argument("--config", default=None, help="Path to greenclaims.yaml (default: $GREENCLAIMS_CONFIG)")
    p1.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    # ---- terms ----
    p2 = sub.add_parser("terms", help="List the built-in term corpus")
    p2.add_argument("--severity", choices=SEVERITIES, default=None)
    p2.add_argument("--language", choices=LANGUAGES, default=None)
    p2.add_argument("--category", choices=CATEGORIES, default=None)
    p2.add_argument("--json", action="store_true", help="Print term definitions as JSON")
    p2.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    if args.cmd == "scan":
        return _cmd_scan(args, parser)
    return _cmd_terms(args)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
