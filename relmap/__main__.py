import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from relmap import (
    Canvas,
    LayoutOptions,
    RecordLoadError,
    ValidationError,
    layout_map,
    load_records,
    validate_canvas,
)

logger = logging.getLogger(__name__)

FORMATS = ("svg", "tikz", "tikz-document", "json")


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _load_settings(path: Optional[str]) -> Dict[str, Any]:
    if not path:
        return {}
    with open(path, encoding="utf-8") as fin:
        try:
            data = json.load(fin)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"settings file {path} is not valid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ValidationError(f"settings file {path} must contain a JSON object")
    return data


def _build_options(args: argparse.Namespace) -> LayoutOptions:
    options = LayoutOptions.from_mapping(_load_settings(args.config))
    overrides: Dict[str, Any] = {}
    if args.iterations is not None:
        overrides["iterations"] = args.iterations
    if args.no_resolve_links:
        overrides["resolve_links"] = False
    return options.replace(**overrides) if overrides else options


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Lay out records by their relative distances")
    parser.add_argument("path", help="Path to a JSON file with the records")
    parser.add_argument("--config", help="JSON settings file (camelCase or snake_case keys)")
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="svg",
        help="Output format (default: svg)",
    )
    parser.add_argument("--output", help="Write the result to this path instead of stdout")
    parser.add_argument("--width", type=float, default=800.0, help="Canvas width (default: 800)")
    parser.add_argument("--height", type=float, default=600.0, help="Canvas height (default: 600)")
    parser.add_argument("--padding", type=float, default=24.0, help="Canvas padding (default: 24)")
    parser.add_argument("--iterations", type=int, help="Override the solver iteration count")
    parser.add_argument(
        "--no-resolve-links",
        action="store_true",
        help="Keep distance targets as written instead of resolving them to record ids",
    )
    parser.add_argument(
        "--dump-layout",
        action="store_true",
        help="Log the per-edge length residuals after solving",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        options = _build_options(args)
        canvas = Canvas(width=args.width, height=args.height, padding=args.padding)
        validate_canvas(canvas)
        source = load_records(args.path)
        layout = layout_map(source, options, canvas)
    except (ValidationError, RecordLoadError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc

    if args.dump_layout:
        for residual in layout.report.residuals:
            logger.info(
                "edge %s -> %s target=%.4f actual=%.4f error=%+.4f",
                residual.from_id,
                residual.to_id,
                residual.target,
                residual.actual,
                residual.error,
            )
        logger.info(
            "max error=%.6g, dangling edges=%d", layout.report.max_error, layout.report.skipped_edges
        )

    if args.format == "svg":
        output = layout.to_svg()
    elif args.format == "tikz":
        output = layout.to_tikz()
    elif args.format == "tikz-document":
        output = layout.to_tikz(standalone=True)
    else:
        output = json.dumps(layout.to_dict(), indent=2) + "\n"

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(output, encoding="utf-8")
        logger.info("Wrote %s output to %s", args.format, out_path)
    else:
        sys.stdout.write(output)


if __name__ == "__main__":
    main()
