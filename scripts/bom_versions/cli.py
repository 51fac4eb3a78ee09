"""CLI entry point and file I/O.

Wires together parsing, coalescing, and rendering to turn a POM's
dependency management into a property-driven BOM.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .coalescer import transform_pom
from .config import parse_merge_file, parse_merge_options
from .errors import BomVersionsError
from .pom_parser import parse_pom_string, resolve_versions
from .pom_writer import render_bom


def build_bom(
    pom_path: Path,
    merged_properties: dict,
    output_path: Optional[Path] = None,
    resolve: bool = True,
) -> str:
    """Read a POM, coalesce its managed versions, and write or return the BOM.

    Args:
        pom_path: Path to the source ``pom.xml``.
        merged_properties: Property name → comma-separated name patterns.
        output_path: File to write the BOM to. When ``None`` nothing is written.
        resolve: Interpolate ``${...}`` versions against the POM's properties
            before coalescing.

    Returns:
        The generated BOM content.
    """
    pom = parse_pom_string(pom_path.read_text(encoding="utf-8"))
    if resolve:
        pom = resolve_versions(pom)
    content = render_bom(transform_pom(pom, merged_properties))
    if output_path is not None:
        _write(output_path, content)
    return content


def _write(path: Path, content: str):
    """Write content to a file, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    print(f"  ✓ {path}", file=sys.stderr)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Replace managed dependency versions with shared version properties"
    )
    parser.add_argument("pom", type=Path, help="Path to the source pom.xml")
    parser.add_argument("--output", "-o", type=Path, default=None,
                        help="Write the generated BOM here (default: stdout)")
    parser.add_argument(
        "--merge", "-m", action="append", default=[], metavar="NAME=PATTERNS",
        help="Store versions whose generated property name fully matches one of "
             "the comma-separated PATTERNS under NAME (repeatable)",
    )
    parser.add_argument("--merge-file", type=Path, default=None,
                        help="Properties file of NAME=PATTERNS entries")
    parser.add_argument("--no-resolve", action="store_true",
                        help="Do not interpolate ${...} versions before coalescing; a version "
                             "that already references its own generated property keeps that "
                             "property's value")
    return parser.parse_args(argv)


def main(argv=None):
    """CLI entry point. Parses arguments and delegates to ``build_bom()``."""
    args = parse_args(argv)
    if not args.pom.exists():
        print(f"ERROR: No pom.xml found at {args.pom}", file=sys.stderr)
        sys.exit(1)

    try:
        merged = {}
        if args.merge_file is not None:
            merged.update(parse_merge_file(args.merge_file.read_text(encoding="utf-8")))
        merged.update(parse_merge_options(args.merge))
        content = build_bom(args.pom, merged, args.output, resolve=not args.no_resolve)
    except (BomVersionsError, OSError, UnicodeDecodeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output is None:
        print(content, end="")
