"""
Unit tests for the Alignment Report module.

Run with: python -m pytest tests/test_alignment_report.py -v
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from modules.alignment_report import (
    colorize,
    format_alignment_report,
    format_error,
    format_segment,
)
from modules.segment_aligner import align_sequences


class TestPlainReport:
    """Test the report without ANSI codes."""

    def test_report_layout(self):
        segments = align_sequences("AC", "ACGT")
        report = format_alignment_report("AC", "ACGT", segments, color=False)

        assert "\033[" not in report
        lines = report.splitlines()
        assert lines[0] == "======== Alignment Results ========"
        assert "Reference length: 2 bp" in lines
        assert "Query length: 4 bp" in lines
        assert "Matched segments: 2" in lines
        assert lines[-1] == "=========================="
        assert report.endswith("\n")

    def test_segment_block(self):
        segments = align_sequences("ATCG", "CGAT")
        block = format_segment(1, segments[0], "ATCG", color=False)
        assert block.splitlines() == [
            "Segment 1:",
            "  Ref position: [0-3]",
            "  Query position: [0-3]",
            "  Strand: Reverse complement",
            "  Matched sequence: ATCG",
            "  Length: 4 bp",
        ]

    def test_forward_strand_label(self):
        segments = align_sequences("ATCG", "TC")
        report = format_alignment_report("ATCG", "TC", segments, color=False)
        assert "  Strand: Forward" in report
        assert "  Ref position: [1-2]" in report

    def test_segments_numbered_in_order(self):
        segments = align_sequences("AC", "ACGT")
        report = format_alignment_report("AC", "ACGT", segments, color=False)
        assert report.index("Segment 1:") < report.index("Segment 2:")


class TestColors:
    def test_colorize(self):
        assert colorize("x", "error") == "\033[31mx\033[0m"
        assert colorize("x", "error", color=False) == "x"

    def test_colored_report_contains_escapes(self):
        segments = align_sequences("ATCG", "AT")
        report = format_alignment_report("ATCG", "AT", segments)
        assert "\033[1;34m" in report
        assert "\033[0m" in report

    def test_format_error(self):
        assert format_error("bad input", color=False) == "Error: bad input"
        assert format_error("bad input").startswith("\033[31m")
