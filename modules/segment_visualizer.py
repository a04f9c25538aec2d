"""
Segment Visualizer Module

Generates PNG diagrams using dna_features_viewer showing how a query is tiled
by matched reference segments. Forward-strand segments are drawn as right
arrows, reverse-complement segments as left arrows, each labelled with the
reference range it was taken from.

Date: 2026-03-06
"""

import logging
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from dna_features_viewer import GraphicFeature, GraphicRecord

from .path_reconstructor import MatchSegment
from .reference_index import Strand

logger = logging.getLogger(__name__)

STRAND_COLORS = {
    Strand.FORWARD: "#1f77b4",             # blue
    Strand.REVERSE_COMPLEMENT: "#d62728",  # red
}


class SegmentVisualizer:
    """Draw segment coverage diagrams for aligned queries."""

    def visualize_segments(self, query_length: int, segments: List[MatchSegment]) -> plt.Figure:
        """Build a dna_features_viewer diagram of the segments along the query.

        Args:
            query_length: length of the aligned query.
            segments: output of SegmentAligner.align.

        Returns:
            matplotlib Figure.
        """
        features = []
        for segment in segments:
            strand = +1 if segment.strand is Strand.FORWARD else -1
            tag = "" if segment.strand is Strand.FORWARD else " rc"
            features.append(GraphicFeature(
                start=segment.query_start,
                end=segment.query_end + 1,
                strand=strand,
                color=STRAND_COLORS[segment.strand],
                label=f"ref {segment.ref_start}-{segment.ref_end}{tag}",
                linewidth=1,
            ))

        record = GraphicRecord(sequence_length=query_length, features=features)
        ax, _ = record.plot(figure_width=max(8, query_length / 10))
        return ax.figure

    def save_png(
        self,
        query_length: int,
        segments: List[MatchSegment],
        output_path: str,
        title: str = "",
        dpi: int = 150,
        figure_width: int = 12,
    ):
        """Generate and save a PNG diagram for one alignment.

        Args:
            query_length: length of the aligned query.
            segments: output of SegmentAligner.align.
            output_path: path to save the PNG.
            title: optional title prefix; the segment count is appended.
            dpi: resolution.
            figure_width: figure width in inches.
        """
        fig = self.visualize_segments(query_length, segments)

        heading = f"{title}  " if title else ""
        heading += f"({query_length} bp query)  \u2014  {len(segments)} segment(s)"
        fig.axes[0].set_title(heading, fontsize=10, pad=10)
        fig.set_size_inches(figure_width, fig.get_size_inches()[1])

        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
        plt.close(fig)
        logger.info("Wrote segment diagram to %s", output_path)
