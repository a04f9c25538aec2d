"""
Symbol Codec Module

Maps DNA symbols to the small integers used by the rolling hash and computes
strand complements. Only the four upper-case bases A/T/C/G are accepted; any
other character raises InvalidSymbolError naming the offending character.

Usage:
    from modules.symbol_codec import encode_symbol, reverse_complement

    encode_symbol('G')            # 4
    reverse_complement('ATCG')    # 'CGAT'

Date: 2026-03-02
"""

from typing import List

from .exceptions import InvalidSymbolError


DNA_ALPHABET = "ATCG"

# Hash digit per base. Zero is never used so that leading bases change the hash.
SYMBOL_CODES = {'A': 1, 'T': 2, 'C': 3, 'G': 4}

COMPLEMENTS = {'A': 'T', 'T': 'A', 'C': 'G', 'G': 'C'}


def encode_symbol(symbol: str) -> int:
    """
    Return the hash digit of a single DNA symbol.

    Parameters:
        symbol: One of 'A', 'T', 'C', 'G'

    Returns:
        1, 2, 3 or 4 for A, T, C, G respectively

    Raises:
        InvalidSymbolError: If the symbol is not an upper-case DNA base
    """
    try:
        return SYMBOL_CODES[symbol]
    except KeyError:
        raise InvalidSymbolError(symbol) from None


def complement(symbol: str) -> str:
    """Return the Watson-Crick partner of a single base (A<->T, C<->G)."""
    try:
        return COMPLEMENTS[symbol]
    except KeyError:
        raise InvalidSymbolError(symbol) from None


def reverse_complement(sequence: str) -> str:
    """
    Return the reverse complement of a DNA sequence.

    The sequence is read back-to-front; the first invalid character met in
    that order aborts the conversion.

    Parameters:
        sequence: DNA sequence (A/T/C/G only)

    Returns:
        Reverse complement sequence

    Raises:
        InvalidSymbolError: If any character is outside the DNA alphabet
    """
    return ''.join(complement(base) for base in reversed(sequence))


def encode_sequence(sequence: str) -> List[int]:
    """Encode every base of a sequence, failing on the first invalid one."""
    return [encode_symbol(base) for base in sequence]


def is_valid_sequence(sequence: str) -> bool:
    """Check whether a sequence contains only A/T/C/G."""
    return all(base in SYMBOL_CODES for base in sequence)
