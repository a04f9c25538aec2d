"""
Unit tests for the Path Reconstructor module.

Run with: python -m pytest tests/test_path_reconstructor.py -v
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from modules.exceptions import AlignmentBreakError
from modules.path_planner import UNREACHABLE, AlignmentPlan, PlanDecision, find_optimal_path
from modules.path_reconstructor import MatchSegment, reconstruct_path
from modules.reference_index import ReferenceLocation, Strand, build_index


class TestReconstructPath:
    """Test walking decisions into segments."""

    def test_follows_resume_positions(self):
        first = ReferenceLocation(0, 1, Strand.FORWARD)
        second = ReferenceLocation(3, 5, Strand.REVERSE_COMPLEMENT)
        plan = AlignmentPlan(
            query_length=5,
            costs=[2, UNREACHABLE, 1, UNREACHABLE, UNREACHABLE, 0],
            decisions=[
                PlanDecision(first, resume_at=2, query_start=0, query_end=1),
                None,
                PlanDecision(second, resume_at=5, query_start=2, query_end=4),
                None,
                None,
                None,
            ],
        )
        segments = reconstruct_path(plan)
        assert segments == [
            MatchSegment(first, 0, 1),
            MatchSegment(second, 2, 4),
        ]

    def test_break_at_first_position(self):
        plan = AlignmentPlan(query_length=2, costs=[UNREACHABLE, UNREACHABLE, 0],
                             decisions=[None, None, None])
        with pytest.raises(AlignmentBreakError) as excinfo:
            reconstruct_path(plan)
        assert excinfo.value.position == 0

    def test_break_names_uncoverable_base(self):
        """The path stops at 0, but the error points at the G that nothing covers."""
        plan = find_optimal_path("AAGAA", build_index("AAAA"))
        with pytest.raises(AlignmentBreakError, match="No match found at position 2") as excinfo:
            reconstruct_path(plan)
        assert excinfo.value.position == 2
        assert excinfo.value.path_position == 0

    def test_segment_count_matches_cost(self):
        plan = find_optimal_path("ACGTAC", build_index("AC"))
        segments = reconstruct_path(plan)
        assert len(segments) == plan.costs[0]

    def test_contiguous_cover(self):
        query = "GATTACAGATTACA"
        plan = find_optimal_path(query, build_index("TTACAGA"))
        segments = reconstruct_path(plan)

        assert segments[0].query_start == 0
        assert segments[-1].query_end == len(query) - 1
        for prev, nxt in zip(segments, segments[1:]):
            assert prev.query_end + 1 == nxt.query_start
        assert sum(segment.length for segment in segments) == len(query)


class TestMatchSegment:
    def test_properties(self):
        segment = MatchSegment(ReferenceLocation(4, 7, Strand.REVERSE_COMPLEMENT), 2, 5)
        assert segment.length == 4
        assert segment.strand is Strand.REVERSE_COMPLEMENT
        assert segment.ref_start == 4
        assert segment.ref_end == 7

    def test_to_dict(self):
        segment = MatchSegment(ReferenceLocation(0, 1, Strand.FORWARD), 0, 1)
        assert segment.to_dict() == {
            'ref_start': 0,
            'ref_end': 1,
            'query_start': 0,
            'query_end': 1,
            'strand': 'forward',
            'length': 2,
        }
