"""
Path Reconstructor Module

Walks the planner's per-position decisions from query position 0 into the
ordered list of matched segments.

Date: 2026-03-03
"""

from dataclasses import dataclass
from typing import Dict, List

from .exceptions import AlignmentBreakError
from .path_planner import AlignmentPlan
from .reference_index import ReferenceLocation, Strand


@dataclass(frozen=True)
class MatchSegment:
    """One query range matched exactly to one reference range"""
    ref_location: ReferenceLocation
    query_start: int
    query_end: int

    @property
    def length(self) -> int:
        return self.query_end - self.query_start + 1

    @property
    def strand(self) -> Strand:
        return self.ref_location.strand

    @property
    def ref_start(self) -> int:
        return self.ref_location.start

    @property
    def ref_end(self) -> int:
        return self.ref_location.end

    def to_dict(self) -> Dict:
        return {
            'ref_start': self.ref_start,
            'ref_end': self.ref_end,
            'query_start': self.query_start,
            'query_end': self.query_end,
            'strand': self.strand.value,
            'length': self.length,
        }


def reconstruct_path(plan: AlignmentPlan) -> List[MatchSegment]:
    """
    Turn an AlignmentPlan into contiguous segments covering the whole query.

    Parameters:
        plan: Output of find_optimal_path

    Returns:
        Segments in ascending query order; segment k ends right before
        segment k + 1 starts

    Raises:
        AlignmentBreakError: If a position on the path has no decision. The
            error names the first query position at or after it where no
            indexed substring starts, i.e. the base that cannot be covered
    """
    segments = []
    position = 0
    while position < plan.query_length:
        decision = plan.decisions[position]
        if decision is None:
            raise AlignmentBreakError(plan.first_unmatched(position), path_position=position)
        segments.append(MatchSegment(
            ref_location=decision.matched_location,
            query_start=decision.query_start,
            query_end=decision.query_end,
        ))
        position = decision.resume_at
    return segments
