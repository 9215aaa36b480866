"""
Paginate text files into poster pages and write the result as JSON.
"""

import argparse
import json
import sys
from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import List, Sequence

from tqdm import tqdm

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from poster_pages.export import ExportError, export_filename
from poster_pages.models import CUSTOM_RATIO, PaginationResult, StyleMetrics
from poster_pages.pagination import paginate
from poster_pages.presets import apply_preset, find_preset


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return CLI arguments for the pagination script."""

    parser = argparse.ArgumentParser(
        description="Split marked-up text files into poster pages."
    )
    parser.add_argument("inputs", nargs="+", type=Path, help="UTF-8 text files.")
    parser.add_argument(
        "--output-file",
        "-o",
        type=Path,
        default=None,
        help="Write JSON here instead of stdout.",
    )
    parser.add_argument("--preset", default=None, help="Stock preset id (e.g. xhs-3).")
    parser.add_argument(
        "--title",
        default=None,
        help="Poster title; defaults to the input file stem.",
    )
    parser.add_argument("--author", default=None)
    parser.add_argument("--font-size", type=float, default=None)
    parser.add_argument("--title-font-size", type=float, default=None)
    parser.add_argument("--ratio", default=None, help="3:4, 9:16 or custom.")
    parser.add_argument(
        "--custom-size",
        nargs=2,
        type=float,
        metavar=("WIDTH", "HEIGHT"),
        default=None,
        help="Ratio terms used with --ratio custom.",
    )
    return parser.parse_args(argv)


def _style_for(*, args: argparse.Namespace, title: str) -> StyleMetrics:
    """Return style metrics from a preset plus CLI overrides.

    Args:
        args: Parsed CLI arguments.
        title: Title for the poster.
    Returns:
        StyleMetrics for the run.
    """

    style = StyleMetrics(title=title, author=args.author)
    if args.preset:
        style = apply_preset(style, find_preset(args.preset))
    overrides: dict = {}
    if args.font_size is not None:
        overrides["font_size"] = args.font_size
    if args.title_font_size is not None:
        overrides["title_font_size"] = args.title_font_size
    if args.ratio is not None:
        overrides["aspect_ratio"] = args.ratio
    if args.custom_size is not None:
        overrides["aspect_ratio"] = CUSTOM_RATIO
        overrides["custom_width"], overrides["custom_height"] = args.custom_size
    return StyleMetrics(**{**asdict(style), **overrides})


def _result_payload(
    *, source: Path, style: StyleMetrics, result: PaginationResult, day: date
) -> dict:
    """Return a JSON-ready summary of one paginated file."""

    return {
        "source": str(source),
        "title": style.title,
        "content_length": result.content_length,
        "reading_time": result.reading_time,
        "pages": [
            {
                **asdict(page),
                "content": page.content,
                "filename": export_filename(style.title, page.index, day),
            }
            for page in result
        ],
    }


def _write_output(*, payload: List[dict], output_file: Path | None) -> None:
    """Write the JSON payload, wrapping filesystem errors as ExportError."""

    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if output_file is None:
        print(text)
        return
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ExportError() from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Paginate every input file and emit one JSON document.

    Example:
        >>> main(["notes.txt", "-o", "output/pages.json"])  # doctest: +SKIP
        0
    """

    args = _parse_args(argv)
    day = date.today()
    payload: List[dict] = []
    for source in tqdm(args.inputs, desc="Paginating", unit="file", file=sys.stderr):
        style = _style_for(args=args, title=args.title or source.stem)
        result = paginate(source.read_text(encoding="utf-8"), style)
        payload.append(_result_payload(source=source, style=style, result=result, day=day))
    try:
        _write_output(payload=payload, output_file=args.output_file)
    except ExportError as exc:
        print(f"{exc} ({exc.__cause__})", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
