# DNA Segment Aligner Modules

from .exceptions import (
    AlignmentError,
    InvalidSymbolError,
    EmptyInputError,
    AlignmentBreakError,
)
from .symbol_codec import (
    encode_symbol,
    complement,
    reverse_complement,
    DNA_ALPHABET,
)
from .reference_index import (
    Strand,
    ReferenceLocation,
    HashIndex,
    build_index,
    HASH_BASE,
    HASH_MODULUS,
)
from .path_planner import (
    PlanDecision,
    AlignmentPlan,
    find_optimal_path,
    UNREACHABLE,
)
from .path_reconstructor import (
    MatchSegment,
    reconstruct_path,
)
from .segment_aligner import (
    SegmentAligner,
    align,
    align_sequences,
)
from .alignment_report import (
    format_alignment_report,
    format_error,
)
