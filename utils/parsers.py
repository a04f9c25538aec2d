"""
Parsers Module for the DNA Segment Aligner

Input and output helpers around the alignment core:
- Sequence normalization and validation of user input
- FASTA files (reference or query read from disk)
- DataFrame / CSV conversion of matched segments

Usage:
    from utils.parsers import prepare_sequence, read_first_fasta_sequence
"""

from typing import Dict, List, Iterator, Optional
from dataclasses import dataclass

from modules.exceptions import EmptyInputError, InvalidSymbolError
from modules.path_reconstructor import MatchSegment
from modules.symbol_codec import SYMBOL_CODES

try:
    import pandas as pd
    PANDAS_AVAILABLE = True
except ImportError:
    PANDAS_AVAILABLE = False


SEGMENT_COLUMNS = [
    'segment', 'ref_start', 'ref_end', 'query_start', 'query_end', 'strand', 'length'
]


# ============================================
# Data Classes
# ============================================

@dataclass
class FastaRecord:
    """Represents a FASTA sequence record"""
    header: str
    sequence: str

    @property
    def id(self) -> str:
        """Extract ID (first word) from header"""
        return self.header.split()[0] if self.header else ""

    @property
    def description(self) -> str:
        """Extract description (everything after ID) from header"""
        parts = self.header.split(maxsplit=1)
        return parts[1] if len(parts) > 1 else ""

    @property
    def length(self) -> int:
        return len(self.sequence)


# ============================================
# Sequence Input
# ============================================

def normalize_sequence(raw: str) -> str:
    """Strip surrounding whitespace and convert to uppercase."""
    return raw.strip().upper()


def validate_dna(sequence: str, name: str) -> None:
    """
    Check that a sequence contains only A/T/C/G.

    Args:
        sequence: Sequence to check
        name: Human-readable name used in the error message

    Raises:
        InvalidSymbolError: On the first character outside the alphabet
    """
    for base in sequence:
        if base not in SYMBOL_CODES:
            msg = f"{name} contains invalid character: '{base}'. Only A/T/C/G allowed"
            if base.islower():
                msg += " (detected lowercase, auto-converted to uppercase)"
            raise InvalidSymbolError(base, name=name, message=msg)


def prepare_sequence(raw: str, name: str) -> str:
    """
    Normalize, check for emptiness and validate one input sequence.

    Args:
        raw: Sequence as typed or read from a file
        name: Human-readable name, e.g. "Reference sequence"

    Returns:
        Upper-case sequence containing only A/T/C/G

    Raises:
        EmptyInputError: If nothing is left after trimming
        InvalidSymbolError: If a non-ATCG character remains
    """
    sequence = normalize_sequence(raw)
    if not sequence:
        raise EmptyInputError(f"{name} cannot be empty")
    validate_dna(sequence, name)
    return sequence


# ============================================
# FASTA Parsers
# ============================================

def iter_fasta(fasta_path: str) -> Iterator[FastaRecord]:
    """
    Iterate over FASTA records without loading entire file into memory.

    Args:
        fasta_path: Path to FASTA file

    Yields:
        FastaRecord objects
    """
    current_header = None
    current_seq = []

    with open(fasta_path, 'r') as f:
        for line in f:
            if line.startswith('>'):
                if current_header is not None:
                    yield FastaRecord(
                        header=current_header,
                        sequence=''.join(current_seq)
                    )
                current_header = line[1:].strip()
                current_seq = []
            else:
                current_seq.append(line.strip())

        if current_header is not None:
            yield FastaRecord(
                header=current_header,
                sequence=''.join(current_seq)
            )


def parse_fasta(fasta_path: str) -> Dict[str, str]:
    """
    Parse a FASTA file into a dictionary.

    Args:
        fasta_path: Path to FASTA file

    Returns:
        Dict mapping sequence_id -> sequence
    """
    return {record.id: record.sequence for record in iter_fasta(fasta_path)}


def read_first_fasta_sequence(fasta_path: str) -> str:
    """
    Return the sequence of the first record in a FASTA file.

    Raises:
        ValueError: If the file contains no FASTA record
    """
    for record in iter_fasta(fasta_path):
        return record.sequence
    raise ValueError(f"No FASTA record found in {fasta_path}")


# ============================================
# DataFrame Conversion Functions
# ============================================

def segments_to_dataframe(segments: List[MatchSegment],
                          reference: Optional[str] = None) -> 'pd.DataFrame':
    """
    Convert matched segments to a pandas DataFrame.

    Args:
        segments: Output of SegmentAligner.align
        reference: If given, add a matched_sequence column with the
            reference bases of each segment (forward strand)

    Returns:
        pandas DataFrame with one row per segment, numbered from 1

    Raises:
        ImportError: If pandas is not installed
    """
    if not PANDAS_AVAILABLE:
        raise ImportError("pandas is required for DataFrame conversion. Install with: pip install pandas")

    columns = list(SEGMENT_COLUMNS)
    if reference is not None:
        columns.append('matched_sequence')

    if not segments:
        # Return empty DataFrame with expected columns
        return pd.DataFrame(columns=columns)

    data = []
    for i, segment in enumerate(segments, 1):
        row = {'segment': i}
        row.update(segment.to_dict())
        if reference is not None:
            row['matched_sequence'] = reference[segment.ref_start:segment.ref_end + 1]
        data.append(row)

    df = pd.DataFrame(data, columns=columns)

    # Set appropriate data types
    for col in ['segment', 'ref_start', 'ref_end', 'query_start', 'query_end', 'length']:
        df[col] = df[col].astype('int64')

    return df


def save_segments_to_csv(segments: List[MatchSegment], output_file: str,
                         reference: Optional[str] = None) -> None:
    """
    Save matched segments to a CSV file.

    Args:
        segments: Output of SegmentAligner.align
        output_file: Path to output CSV file
        reference: If given, include the matched_sequence column
    """
    if not PANDAS_AVAILABLE:
        raise ImportError("pandas is required for CSV export. Install with: pip install pandas")

    df = segments_to_dataframe(segments, reference=reference)
    df.to_csv(output_file, index=False)
