"""
Segment Aligner Module

Aligns a short query DNA sequence against a reference by covering the query
with the fewest exact-match segments, each taken from the forward or the
reverse-complement strand of the reference.

The reference index is built once per SegmentAligner and can be reused for
any number of queries.

Usage:
    from modules.segment_aligner import SegmentAligner

    aligner = SegmentAligner("ATCGGATTACA")
    for segment in aligner.align("GATTCGAT"):
        print(segment.query_start, segment.query_end, segment.strand.value)

Date: 2026-03-04
"""

import logging
from typing import List

from .path_planner import find_optimal_path
from .path_reconstructor import MatchSegment, reconstruct_path
from .reference_index import HashIndex, build_index

logger = logging.getLogger(__name__)


def align(query: str, index: HashIndex) -> List[MatchSegment]:
    """
    Cover a query with the minimum number of indexed reference segments.

    Parameters:
        query: Query DNA sequence (A/T/C/G only)
        index: HashIndex built from the reference

    Returns:
        Contiguous segments in ascending query order

    Raises:
        EmptyInputError: If the query is empty
        InvalidSymbolError: If the query contains a non-ATCG character
        AlignmentBreakError: If some query position cannot be covered
    """
    plan = find_optimal_path(query, index)
    segments = reconstruct_path(plan)
    logger.debug("Aligned %d bp query in %d segment(s)", len(query), len(segments))
    return segments


class SegmentAligner:
    """
    Reusable aligner bound to one reference sequence.

    Attributes:
        reference (str): The indexed reference sequence
        index (HashIndex): Hash index over all reference substrings
    """

    def __init__(self, reference: str):
        """
        Index the reference on both strands.

        Raises:
            EmptyInputError: If the reference is empty
            InvalidSymbolError: If the reference contains a non-ATCG character
        """
        self._reference = reference
        self._index = build_index(reference)

    @property
    def reference(self) -> str:
        return self._reference

    @property
    def index(self) -> HashIndex:
        return self._index

    def align(self, query: str) -> List[MatchSegment]:
        """Align a query against this aligner's reference."""
        return align(query, self._index)

    def matched_sequence(self, segment: MatchSegment) -> str:
        """Reference bases covered by a segment, read on the forward strand."""
        return self._reference[segment.ref_start:segment.ref_end + 1]


def align_sequences(reference: str, query: str) -> List[MatchSegment]:
    """
    Convenience function to align a query without keeping the index around.

    Example:
        >>> segments = align_sequences("ATCG", "CGAT")
        >>> segments[0].strand.value
        'reverse_complement'
    """
    return SegmentAligner(reference).align(query)
