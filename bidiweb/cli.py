#!/usr/bin/env python3
"""
Command line interface for bidiweb
Usage: python -m bidiweb.cli estimate <text> [options]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .core.config import BidiSettings, load_settings
from .dom.document import process_html
from .i18n.char_ranges import LTR_RANGES, RTL_RANGES
from .i18n.estimator import DirectionEstimator, embed_direction
from .metrics.instrumentation import MetricsCollector


def setup_logging(verbose: bool = False):
    """Configure logging"""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        format="%(asctime)s | %(levelname)s | %(name)s:%(funcName)s:%(lineno)d - %(message)s",
        level=level,
    )


def _read_input(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    return value


def _settings_from_args(args) -> BidiSettings:
    """Settings file/env first, then explicit command line options."""
    settings = load_settings(args.config)
    data: Dict[str, Any] = settings.model_dump(mode="json")

    estimation = data["estimation"]
    for option, key in (
        ("strategy", "strategy"),
        ("threshold", "threshold"),
        ("sample_size", "sample_size"),
        ("min_sample", "min_sample_to_compare"),
        ("min_ratio", "min_ratio"),
    ):
        value = getattr(args, option, None)
        if value is not None:
            estimation[key] = value

    processor = data["processor"]
    if getattr(args, "mode", None):
        processor["mode"] = args.mode
    if getattr(args, "no_align", False):
        processor["align"] = False
    if getattr(args, "classes", None):
        rtl, _, ltr = args.classes.partition(",")
        processor["classes"] = {"rtl": rtl.strip(), "ltr": ltr.strip()}
    if getattr(args, "prune", False):
        processor["prune"] = True

    return BidiSettings.model_validate(data)


def _dump(data: Dict[str, Any], fmt: str) -> str:
    if fmt == "yaml":
        return yaml.dump(data, default_flow_style=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False)


def estimate_command(args) -> int:
    """Estimation command"""
    settings = _settings_from_args(args)
    text = _read_input(args.text)

    analysis = DirectionEstimator(settings.estimation).analyze(text)

    if args.embed:
        print(embed_direction(text, analysis.direction))
    elif args.format == "text":
        print(analysis.direction.name)
    else:
        print(_dump(analysis.to_dict(), args.format))
    return 0


def html_command(args) -> int:
    """HTML processing command"""
    settings = _settings_from_args(args)

    if args.input == "-":
        html = sys.stdin.read()
    else:
        input_path = Path(args.input)
        if not input_path.exists():
            print(f"❌ File not found: {input_path}", file=sys.stderr)
            return 1
        html = input_path.read_text(encoding="utf-8")

    run_id = "stdin" if args.input == "-" else Path(args.input).stem
    collector = MetricsCollector(run_id=run_id)
    output, _ = process_html(
        html, settings, selector=args.selector, collector=collector
    )
    collector.finalize()

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"💾 Saved: {args.output}", file=sys.stderr)
    else:
        print(output)

    if args.metrics:
        collector.save(args.metrics)
    if args.report:
        print(collector.summary(), file=sys.stderr)
    return 0


def info_command(args) -> int:
    """Effective settings and range tables"""
    settings = load_settings(args.config)
    data = {
        "settings": settings.model_dump(mode="json"),
        "ranges": {
            "ltr": [f"U+{r.start:04X}-U+{r.end:04X}" for r in LTR_RANGES],
            "rtl": [f"U+{r.start:04X}-U+{r.end:04X}" for r in RTL_RANGES],
        },
    }
    print(_dump(data, "yaml"))
    return 0


def _add_estimation_options(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--strategy",
        choices=["weighted", "first_strong", "first_n_words"],
        help="Estimation strategy (default: weighted)",
    )
    parser.add_argument(
        "--threshold", type=float, help="RTL share threshold for 'weighted'"
    )
    parser.add_argument(
        "--sample-size", type=int, help="Words sampled by 'first_n_words'"
    )
    parser.add_argument(
        "--min-sample", type=int, help="Minimum sample before comparing counts"
    )
    parser.add_argument(
        "--min-ratio", type=float, help="Agreeing/opposing ratio to keep the first word"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bidiweb", description="Paragraph direction estimation"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose mode")
    parser.add_argument("--config", help="YAML settings file")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # estimate
    estimate_parser = subparsers.add_parser("estimate", help="Estimate text direction")
    estimate_parser.add_argument("text", help="Text to analyze ('-' for stdin)")
    _add_estimation_options(estimate_parser)
    estimate_parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format",
    )
    estimate_parser.add_argument(
        "--embed",
        action="store_true",
        help="Print the text wrapped in directional embedding marks",
    )
    estimate_parser.set_defaults(func=estimate_command)

    # html
    html_parser = subparsers.add_parser("html", help="Fix directions in an HTML fragment")
    html_parser.add_argument("input", help="HTML file ('-' for stdin)")
    html_parser.add_argument("-o", "--output", help="Output file")
    _add_estimation_options(html_parser)
    html_parser.add_argument("--mode", choices=["style", "css"], help="Processor")
    html_parser.add_argument(
        "--no-align", action="store_true", help="Do not set text-align"
    )
    html_parser.add_argument("--classes", help="css classes as 'rtl,ltr'")
    html_parser.add_argument(
        "--prune", action="store_true", help="Remove overrides repeating the parent"
    )
    html_parser.add_argument("--selector", default="*", help="Elements to process")
    html_parser.add_argument("--metrics", help="Write run metrics as JSON")
    html_parser.add_argument(
        "--report", action="store_true", help="Print a summary on stderr"
    )
    html_parser.set_defaults(func=html_command)

    # info
    info_parser = subparsers.add_parser("info", help="Settings and range tables")
    info_parser.set_defaults(func=info_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    try:
        return args.func(args)
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
