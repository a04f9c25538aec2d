#!/usr/bin/env python3
"""
Align a short query DNA sequence against a reference sequence.

The query is covered with the fewest exact-match segments taken from either
strand of the reference, and the segments are printed as a colored report.
Sequences missing from the command line are prompted for interactively.

Usage:
    python scripts/align_sequences.py --reference ATCGGATTACA --query GATTCGAT
    python scripts/align_sequences.py --reference-fasta ref.fasta --query-fasta q.fasta \
        --csv segments.csv --png segments.png --genbank segments.gbk

Exit status is 0 on success and 1 on any input or alignment failure.

Date: 2026-03-07
"""

import argparse
import logging
import os
import sys
from typing import Optional

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from modules.alignment_report import (
    ANSI_RESET,
    ANSI_STYLES,
    colorize,
    format_alignment_report,
    format_error,
)
from modules.segment_aligner import SegmentAligner
from utils.parsers import prepare_sequence, read_first_fasta_sequence, save_segments_to_csv

logger = logging.getLogger(__name__)


class InputUnavailable(Exception):
    """Raised when stdin is closed before a sequence could be read."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Cover a query DNA sequence with the fewest exact-match reference segments",
    )
    ref_group = parser.add_mutually_exclusive_group()
    ref_group.add_argument(
        "--reference",
        help="Reference sequence (A/T/C/G)",
    )
    ref_group.add_argument(
        "--reference-fasta",
        help="FASTA file whose first record is the reference",
    )
    query_group = parser.add_mutually_exclusive_group()
    query_group.add_argument(
        "--query",
        help="Query sequence (A/T/C/G)",
    )
    query_group.add_argument(
        "--query-fasta",
        help="FASTA file whose first record is the query",
    )
    parser.add_argument(
        "--no-color", action="store_true",
        help="Disable ANSI colors in the report",
    )
    parser.add_argument(
        "--csv",
        help="Also write the segments to this CSV file",
    )
    parser.add_argument(
        "--png",
        help="Also draw the segment diagram to this PNG file",
    )
    parser.add_argument(
        "--genbank",
        help="Also write the annotated query to this GenBank file",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    return parser


def prompt_sequence(step: int, label: str, color: bool) -> str:
    """Ask for one sequence on stdin; typed text is echoed in the input color."""
    print(colorize(f"\n>>> Step {step}/2: Enter {label}", "step", color))
    prompt = f"Enter {label.split()[0].lower()} sequence (A/T/C/G only): "
    if color:
        prompt += ANSI_STYLES["input"]
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    if color:
        print(ANSI_RESET, end="")
    if not line:
        raise InputUnavailable("Failed to read input")
    return line


def resolve_sequence(raw: Optional[str], fasta_path: Optional[str],
                     step: int, label: str, color: bool) -> str:
    """Pick a sequence from the command line, a FASTA file or the prompt."""
    if raw is not None:
        return raw
    if fasta_path is not None:
        logger.info("Reading %s from %s", label.lower(), fasta_path)
        return read_first_fasta_sequence(fasta_path)
    return prompt_sequence(step, label, color)


def write_exports(args, reference: str, query: str, segments):
    """Write the optional CSV, PNG and GenBank outputs."""
    if args.csv:
        save_segments_to_csv(segments, args.csv, reference=reference)
        logger.info("Saved %d segments to %s", len(segments), args.csv)
    if args.png:
        from modules.segment_visualizer import SegmentVisualizer
        SegmentVisualizer().save_png(len(query), segments, args.png)
    if args.genbank:
        from modules.segment_genbank import SegmentGenBank
        SegmentGenBank().write_genbank(query, segments, args.genbank)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    color = not args.no_color

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    interactive = (args.reference is None and args.reference_fasta is None) or \
        (args.query is None and args.query_fasta is None)
    if interactive:
        print(colorize("\n======== DNA Sequence Alignment Tool ========", "banner", color))

    try:
        reference = prepare_sequence(
            resolve_sequence(args.reference, args.reference_fasta, 1,
                             "Reference Sequence (long)", color),
            "Reference sequence",
        )
        query = prepare_sequence(
            resolve_sequence(args.query, args.query_fasta, 2,
                             "Query Sequence (short)", color),
            "Query sequence",
        )

        aligner = SegmentAligner(reference)
        segments = aligner.align(query)
    except (ValueError, InputUnavailable, OSError) as e:
        logger.debug("Alignment failed: %s", e)
        print("\n" + format_error(str(e), color), file=sys.stderr)
        return 1

    print()
    print(format_alignment_report(reference, query, segments, color=color), end="")

    try:
        write_exports(args, reference, query, segments)
    except (OSError, ImportError) as e:
        logger.exception("Failed to write outputs")
        print("\n" + format_error(str(e), color), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
