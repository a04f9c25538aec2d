"""
Alignment Report Module

Renders segment alignments as the terminal report printed by the aligner CLI:
a banner, the input lengths, the number of matched segments and one block per
segment with reference/query positions, strand, matched sequence and length.

Colors are plain ANSI escape codes and can be switched off for logs, files or
terminals that do not support them.

Date: 2026-03-05
"""

from typing import List

from .path_reconstructor import MatchSegment
from .reference_index import Strand


ANSI_RESET = "\033[0m"
ANSI_STYLES = {
    "banner": "\033[1;34m",
    "step": "\033[1;32m",
    "input": "\033[36m",
    "count": "\033[1;36m",
    "segment": "\033[1;95m",
    "label": "\033[90m",
    "position": "\033[35m",
    "value": "\033[33m",
    "sequence": "\033[36m",
    "length": "\033[32m",
    "error": "\033[31m",
}

STRAND_LABELS = {
    Strand.FORWARD: "Forward",
    Strand.REVERSE_COMPLEMENT: "Reverse complement",
}


def colorize(text: str, style: str, color: bool = True) -> str:
    """Wrap text in the ANSI code for a named style."""
    if not color:
        return text
    return f"{ANSI_STYLES[style]}{text}{ANSI_RESET}"


def _format_range(start: int, end: int, color: bool) -> str:
    return (f"[{colorize(str(start), 'position', color)}"
            f"-{colorize(str(end), 'position', color)}]")


def format_segment(index: int, segment: MatchSegment, reference: str, color: bool = True) -> str:
    """Render one segment block; index is 1-based."""
    matched = reference[segment.ref_start:segment.ref_end + 1]
    lines = [
        colorize(f"Segment {index}:", "segment", color),
        f"  {colorize('Ref position:', 'label', color)} "
        f"{_format_range(segment.ref_start, segment.ref_end, color)}",
        f"  {colorize('Query position:', 'label', color)} "
        f"{_format_range(segment.query_start, segment.query_end, color)}",
        f"  {colorize('Strand:', 'label', color)} "
        f"{colorize(STRAND_LABELS[segment.strand], 'value', color)}",
        f"  {colorize('Matched sequence:', 'label', color)} {colorize(matched, 'sequence', color)}",
        f"  {colorize('Length:', 'label', color)} {colorize(f'{len(matched)} bp', 'length', color)}",
    ]
    return "\n".join(lines)


def format_alignment_report(reference: str,
                            query: str,
                            segments: List[MatchSegment],
                            color: bool = True) -> str:
    """
    Render the full alignment report.

    Parameters:
        reference: Reference sequence the segments refer to
        query: Aligned query sequence
        segments: Output of SegmentAligner.align
        color: Emit ANSI color codes (default: True)

    Returns:
        Multi-line report string ending with a newline
    """
    parts = [
        colorize("======== Alignment Results ========", "banner", color),
        f"Reference length: {colorize(f'{len(reference)} bp', 'value', color)}",
        f"Query length: {colorize(f'{len(query)} bp', 'value', color)}",
        colorize(f"Matched segments: {len(segments)}", "count", color),
        "",
    ]
    for i, segment in enumerate(segments, 1):
        parts.append(format_segment(i, segment, reference, color))
        parts.append("")
    parts.append(colorize("==========================", "banner", color))
    return "\n".join(parts) + "\n"


def format_error(message: str, color: bool = True) -> str:
    """Render an error line for stderr."""
    return colorize(f"Error: {message}", "error", color)
