"""
Path Planner Module

Dynamic program over query start positions that picks, for each position, the
hashed reference match to take next so that chaining the choices covers the
whole query in the fewest segments.

Algorithm:
1. costs[query_len] = 0; every other cost starts at UNREACHABLE
2. For start = query_len - 1 down to 0, extend a rolling hash over
   query[start:end + 1] for ascending end and look each hash up in the index
3. A hit is a candidate with cost costs[end + 1] + 1. It replaces the current
   decision if it is strictly cheaper, or equally cheap and on the forward strand

Because end ascends, the decision kept among equal-cost forward hits is the
last (longest) one, and a forward hit always beats a reverse-complement hit of
the same cost.

Date: 2026-03-03
"""

import sys
from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import EmptyInputError
from .reference_index import HashIndex, ReferenceLocation, extend_hash


UNREACHABLE = sys.maxsize


@dataclass(frozen=True)
class PlanDecision:
    """Best match starting at one query position"""
    matched_location: ReferenceLocation
    resume_at: int
    query_start: int
    query_end: int


@dataclass
class AlignmentPlan:
    """Cost table and per-position decisions for one query"""
    query_length: int
    costs: List[int] = field(default_factory=list)
    decisions: List[Optional[PlanDecision]] = field(default_factory=list)
    # has_hits[i]: some indexed substring starts at query position i
    has_hits: List[bool] = field(default_factory=list)

    def is_reachable(self, position: int) -> bool:
        return self.costs[position] != UNREACHABLE

    def first_unmatched(self, position: int) -> int:
        """First position at or after `position` where no indexed substring starts."""
        for i in range(position, min(self.query_length, len(self.has_hits))):
            if not self.has_hits[i]:
                return i
        return position

    @property
    def segment_count(self) -> Optional[int]:
        """Minimum number of segments covering the query, or None if impossible."""
        if not self.is_reachable(0):
            return None
        return self.costs[0]


def find_optimal_path(query: str, index: HashIndex) -> AlignmentPlan:
    """
    Compute the minimum-segment plan for a query against a reference index.

    Parameters:
        query: Query DNA sequence (A/T/C/G only)
        index: HashIndex built from the reference

    Returns:
        AlignmentPlan whose decisions[i] is the match to take at position i,
        or None where no usable match starts

    Raises:
        EmptyInputError: If the query is empty
        InvalidSymbolError: If the query contains a non-ATCG character
    """
    if not query:
        raise EmptyInputError("Query sequence cannot be empty")

    query_len = len(query)
    costs = [UNREACHABLE] * (query_len + 1)
    costs[query_len] = 0
    decisions: List[Optional[PlanDecision]] = [None] * (query_len + 1)
    has_hits = [False] * query_len

    for start in range(query_len - 1, -1, -1):
        current = 0
        for end in range(start, query_len):
            current = extend_hash(current, query[end])
            location = index.lookup(current)
            if location is None:
                continue
            has_hits[start] = True
            if costs[end + 1] == UNREACHABLE:
                continue

            new_cost = costs[end + 1] + 1
            if new_cost < costs[start] or (new_cost == costs[start] and location.is_forward):
                costs[start] = new_cost
                decisions[start] = PlanDecision(
                    matched_location=location,
                    resume_at=end + 1,
                    query_start=start,
                    query_end=end,
                )

    return AlignmentPlan(query_length=query_len, costs=costs,
                         decisions=decisions, has_hits=has_hits)
