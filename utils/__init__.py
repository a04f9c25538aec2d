# Utility functions for the DNA Segment Aligner

from .parsers import (
    # Data classes
    FastaRecord,
    # Sequence input
    normalize_sequence,
    validate_dna,
    prepare_sequence,
    # FASTA parsers
    iter_fasta,
    parse_fasta,
    read_first_fasta_sequence,
    # DataFrame conversion
    segments_to_dataframe,
    save_segments_to_csv,
)
