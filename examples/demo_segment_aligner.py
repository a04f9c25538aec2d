"""
Demo script for the Segment Aligner module.

This script demonstrates how to cover a query with the fewest exact-match
segments taken from either strand of a reference, and how to export the
result.

Use cases:
- Tracing which parts of a construct came from which reference region
- Spotting inverted (reverse complement) pieces in a rearranged sequence
- Checking that every base of a query occurs somewhere in a reference

Date: 2026-03-08
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from modules.alignment_report import format_alignment_report
from modules.exceptions import AlignmentBreakError
from modules.segment_aligner import SegmentAligner, align_sequences
from utils.parsers import segments_to_dataframe


def example_1_basic_usage():
    """Example 1: A query made of two forward pieces."""
    print("=" * 80)
    print("Example 1: Forward segments")
    print("=" * 80)

    reference = "ATGCATGCTTTAAACCCGGGAAAGCTAGCTA"
    query = "TTTAAACCC" + "GCTAGC"

    segments = align_sequences(reference, query)
    print(format_alignment_report(reference, query, segments))


def example_2_reverse_complement():
    """Example 2: A query with an inverted piece."""
    print("=" * 80)
    print("Example 2: Reverse complement segment")
    print("=" * 80)

    reference = "GATTACAGGCCTTAA"
    # TGTAATC is the reverse complement of GATTACA
    query = "TGTAATC" + "GGCCTT"

    segments = align_sequences(reference, query)
    for i, segment in enumerate(segments, 1):
        print(f"Segment {i}: query {segment.query_start}-{segment.query_end} -> "
              f"reference {segment.ref_start}-{segment.ref_end} ({segment.strand.value})")
    print()


def example_3_reuse_index():
    """Example 3: Index the reference once, align several queries."""
    print("=" * 80)
    print("Example 3: Reusing one reference index")
    print("=" * 80)

    aligner = SegmentAligner("ACGTTGCAAGGCTTAC")
    print(f"Index entries: {len(aligner.index)}\n")

    for query in ["ACGTTG", "GTAAGCC", "CAACGTGTAAG"]:
        segments = aligner.align(query)
        print(f"{query}: {len(segments)} segment(s)")
    print()


def example_4_dataframe():
    """Example 4: Segments as a pandas DataFrame."""
    print("=" * 80)
    print("Example 4: DataFrame output")
    print("=" * 80)

    reference = "CCGGAATT"
    query = "AATTCCGG"
    segments = align_sequences(reference, query)
    df = segments_to_dataframe(segments, reference=reference)
    print(df.to_string(index=False))
    print()


def example_5_alignment_break():
    """Example 5: A base that occurs on neither strand."""
    print("=" * 80)
    print("Example 5: Alignment break")
    print("=" * 80)

    try:
        align_sequences("AAAA", "AAGA")
    except AlignmentBreakError as e:
        print(f"{e} (path stopped at {e.path_position})")
    print()


if __name__ == "__main__":
    example_1_basic_usage()
    example_2_reverse_complement()
    example_3_reuse_index()
    example_4_dataframe()
    example_5_alignment_break()
