"""
Reference Index Module

Builds a hash-to-location table covering every substring of a reference
sequence, read on the forward strand and again on the reverse-complement
strand.

Each substring is hashed with a polynomial rolling hash:

    hash = (hash * HASH_BASE + encode_symbol(base)) % HASH_MODULUS

so extending a substring by one base costs O(1). The table records only the
first location seen for a hash value (ascending start, then ascending end,
forward pass before reverse pass); later substrings with the same hash are
shadowed, including genuinely different substrings that collide modulo
HASH_MODULUS.

The index holds O(n^2) entries and is meant for short-to-moderate references.

Usage:
    from modules.reference_index import build_index

    index = build_index("ATCG")
    index.lookup(1)   # ReferenceLocation(start=0, end=0, strand=Strand.FORWARD)

Date: 2026-03-02
"""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from .exceptions import EmptyInputError
from .symbol_codec import encode_symbol, reverse_complement

logger = logging.getLogger(__name__)


# Fixed hashing parameters. Changing either changes which substrings collide.
HASH_BASE = 5
HASH_MODULUS = 10_000_000_000_007


class Strand(Enum):
    """Reference strand a match was taken from"""
    FORWARD = 'forward'
    REVERSE_COMPLEMENT = 'reverse_complement'


@dataclass(frozen=True)
class ReferenceLocation:
    """Inclusive [start, end] range in forward reference coordinates"""
    start: int
    end: int
    strand: Strand

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    @property
    def is_forward(self) -> bool:
        return self.strand is Strand.FORWARD


def extend_hash(current: int, symbol: str) -> int:
    """Extend a rolling hash by one base."""
    return (current * HASH_BASE + encode_symbol(symbol)) % HASH_MODULUS


class HashIndex:
    """
    Mapping from rolling-hash value to the first ReferenceLocation seen for it.

    Entries are only ever added through insert_if_absent, so an existing
    location is never overwritten. build_index freezes the index before
    returning it.

    Attributes:
        reference_length (int): Length of the indexed reference
    """

    def __init__(self, reference_length: int = 0):
        self.reference_length = reference_length
        self._locations: Dict[int, ReferenceLocation] = {}
        self._frozen = False

    def insert_if_absent(self, hash_value: int, location: ReferenceLocation) -> bool:
        """
        Record a location for a hash value unless one is already stored.

        Returns:
            True if the location was inserted, False if the hash was taken

        Raises:
            RuntimeError: If the index has been frozen
        """
        if self._frozen:
            raise RuntimeError("HashIndex is frozen; build a new index instead")
        if hash_value in self._locations:
            return False
        self._locations[hash_value] = location
        return True

    def lookup(self, hash_value: int) -> Optional[ReferenceLocation]:
        """Return the stored location for a hash value, or None."""
        return self._locations.get(hash_value)

    def freeze(self):
        """Reject any further insertions."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def strand_counts(self) -> Dict[Strand, int]:
        """Count stored locations per strand."""
        counts = Counter(location.strand for location in self._locations.values())
        return {strand: counts.get(strand, 0) for strand in Strand}

    def items(self) -> Iterator[Tuple[int, ReferenceLocation]]:
        return iter(self._locations.items())

    def __contains__(self, hash_value: int) -> bool:
        return hash_value in self._locations

    def __len__(self) -> int:
        return len(self._locations)

    def __repr__(self) -> str:
        return f"HashIndex(reference_length={self.reference_length}, entries={len(self)})"


def _index_orientation(reference: str, index: HashIndex, strand: Strand):
    """
    Hash every substring of one orientation of the reference into the index.

    For the reverse-complement pass, the [start, end] range in the reversed
    sequence is mapped back to forward coordinates.
    """
    ref_len = len(reference)
    reverse = strand is Strand.REVERSE_COMPLEMENT
    seq = reverse_complement(reference) if reverse else reference

    for start in range(ref_len):
        current = 0
        for end in range(start, ref_len):
            current = extend_hash(current, seq[end])
            if current in index:
                continue
            if reverse:
                location = ReferenceLocation(ref_len - end - 1, ref_len - start - 1, strand)
            else:
                location = ReferenceLocation(start, end, strand)
            index.insert_if_absent(current, location)


def build_index(reference: str) -> HashIndex:
    """
    Build the hash index of every substring of a reference, on both strands.

    Parameters:
        reference: Reference DNA sequence (A/T/C/G only)

    Returns:
        Frozen HashIndex

    Raises:
        EmptyInputError: If the reference is empty
        InvalidSymbolError: If the reference contains a non-ATCG character
    """
    if not reference:
        raise EmptyInputError("Reference sequence cannot be empty")

    index = HashIndex(reference_length=len(reference))
    _index_orientation(reference, index, Strand.FORWARD)
    _index_orientation(reference, index, Strand.REVERSE_COMPLEMENT)
    index.freeze()

    counts = index.strand_counts()
    logger.debug("Indexed %d bp reference: %d hashes (%d forward, %d reverse complement)",
                 len(reference), len(index),
                 counts[Strand.FORWARD], counts[Strand.REVERSE_COMPLEMENT])
    return index
