"""
Unit tests for the Reference Index module.

Tests cover:
- Rolling hash arithmetic
- Coverage of single-base substrings
- First-writer-wins insertion order
- Reverse-complement coordinate translation
- Freezing and error handling

Run with: python -m pytest tests/test_reference_index.py -v
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from modules.exceptions import EmptyInputError, InvalidSymbolError
from modules.reference_index import (
    HASH_BASE,
    HASH_MODULUS,
    HashIndex,
    ReferenceLocation,
    Strand,
    build_index,
    extend_hash,
)
from modules.symbol_codec import encode_symbol


def sequence_hash(sequence):
    """Hash a whole sequence the way the index does."""
    current = 0
    for base in sequence:
        current = extend_hash(current, base)
    return current


class TestRollingHash:
    """Test the polynomial hash."""

    def test_constants(self):
        assert HASH_BASE == 5
        assert HASH_MODULUS == 10_000_000_000_007

    def test_extend(self):
        assert extend_hash(0, 'A') == 1
        assert extend_hash(1, 'T') == 7
        assert sequence_hash("ATC") == 38

    def test_modulus_applied(self):
        assert extend_hash(HASH_MODULUS - 1, 'G') == ((HASH_MODULUS - 1) * 5 + 4) % HASH_MODULUS

    def test_invalid_symbol(self):
        with pytest.raises(InvalidSymbolError):
            extend_hash(0, 'N')


class TestBuildIndex:
    """Test index construction."""

    @pytest.mark.parametrize("reference", ["A", "ATCG", "GGATTACA", "CCCCAAAAT"])
    def test_single_bases_retrievable(self, reference):
        index = build_index(reference)
        for base in reference:
            location = index.lookup(encode_symbol(base))
            assert location is not None
            assert location.start == location.end
            assert location.is_forward
            assert reference[location.start] == base

    def test_every_forward_substring_found(self):
        reference = "GATTACA"
        index = build_index(reference)
        for start in range(len(reference)):
            for end in range(start, len(reference)):
                location = index.lookup(sequence_hash(reference[start:end + 1]))
                assert location is not None
                assert location.is_forward
                assert reference[location.start:location.end + 1] == reference[start:end + 1]

    def test_first_occurrence_wins(self):
        """Repeated substrings keep the location with the smallest start."""
        index = build_index("ACA")
        assert index.lookup(sequence_hash("A")) == ReferenceLocation(0, 0, Strand.FORWARD)

    def test_forward_pass_before_reverse_pass(self):
        """'AT' is its own reverse complement, so only the forward entry is stored."""
        index = build_index("AT")
        assert index.lookup(sequence_hash("AT")) == ReferenceLocation(0, 1, Strand.FORWARD)
        counts = index.strand_counts()
        assert counts[Strand.REVERSE_COMPLEMENT] == 0
        assert counts[Strand.FORWARD] == 3

    def test_reverse_coordinates_translated(self):
        # reverse complement of "AC" is "GT"
        index = build_index("AC")
        assert index.lookup(sequence_hash("G")) == ReferenceLocation(1, 1, Strand.REVERSE_COMPLEMENT)
        assert index.lookup(sequence_hash("T")) == ReferenceLocation(0, 0, Strand.REVERSE_COMPLEMENT)
        assert index.lookup(sequence_hash("GT")) == ReferenceLocation(0, 1, Strand.REVERSE_COMPLEMENT)

    def test_reverse_complement_full_length(self):
        index = build_index("ATCG")
        location = index.lookup(sequence_hash("CGAT"))
        assert location == ReferenceLocation(0, 3, Strand.REVERSE_COMPLEMENT)
        assert location.length == 4

    def test_all_a_reference(self):
        index = build_index("AAAA")
        assert len(index) == 8
        assert index.lookup(sequence_hash("TTTT")) == ReferenceLocation(0, 3, Strand.REVERSE_COMPLEMENT)
        assert index.lookup(sequence_hash("TT")) == ReferenceLocation(2, 3, Strand.REVERSE_COMPLEMENT)

    def test_reference_length_recorded(self):
        assert build_index("GATTACA").reference_length == 7

    def test_empty_reference(self):
        with pytest.raises(EmptyInputError):
            build_index("")

    def test_invalid_reference(self):
        with pytest.raises(InvalidSymbolError) as excinfo:
            build_index("ATXG")
        assert excinfo.value.symbol == 'X'

    def test_index_is_frozen(self):
        index = build_index("ATCG")
        assert index.frozen
        with pytest.raises(RuntimeError):
            index.insert_if_absent(999, ReferenceLocation(0, 0, Strand.FORWARD))


class TestHashIndex:
    """Test the insert-if-absent container."""

    def test_insert_if_absent(self):
        index = HashIndex(reference_length=4)
        first = ReferenceLocation(0, 1, Strand.FORWARD)
        second = ReferenceLocation(2, 3, Strand.REVERSE_COMPLEMENT)

        assert index.insert_if_absent(42, first) is True
        assert index.insert_if_absent(42, second) is False
        assert index.lookup(42) == first
        assert 42 in index
        assert len(index) == 1

    def test_lookup_missing(self):
        assert HashIndex().lookup(7) is None

    def test_strand_counts_empty(self):
        assert HashIndex().strand_counts() == {Strand.FORWARD: 0, Strand.REVERSE_COMPLEMENT: 0}
