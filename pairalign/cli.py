"""
cli.py — command-line front end for pairalign

    pairalign GAATTC GATTA --mode local --show-matrix
    pairalign HEAGAWGHEE PAWHEAE --matrix BLOSUM50 --gap -8 --plot dag.png
"""

import argparse
import logging
import sys

from . import default
from .aligners import align
from .dp_core import AlignmentMode
from .formatting import format_alignments, format_matrix
from .matrices import SubstitutionMatrix

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pairalign",
        description="Pairwise sequence alignment listing every optimal alignment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pairalign GAATTC GATTA
  pairalign GAATTC GATTA --mode local --show-matrix
  pairalign HEAGAWGHEE PAWHEAE --matrix BLOSUM50 --gap -8 --plot matrix.png
        """,
    )
    parser.add_argument("seq1", nargs="?", default=default.SEQ1,
                        help=f"First sequence, drawn down the rows (default: {default.SEQ1})")
    parser.add_argument("seq2", nargs="?", default=default.SEQ2,
                        help=f"Second sequence, drawn across the columns (default: {default.SEQ2})")
    parser.add_argument("--mode", "-m", default=AlignmentMode.GLOBAL.value,
                        choices=[mode.value for mode in AlignmentMode],
                        help="global (Needleman-Wunsch) or local (Smith-Waterman) (default: global)")
    parser.add_argument("--match", type=int, default=default.MATCH_SCORE,
                        help=f"Match score (default: {default.MATCH_SCORE})")
    parser.add_argument("--mismatch", type=int, default=default.MISMATCH_SCORE,
                        help=f"Mismatch score (default: {default.MISMATCH_SCORE})")
    parser.add_argument("--gap", type=int, default=default.GAP_PENALTY,
                        help=f"Gap penalty (default: {default.GAP_PENALTY})")
    parser.add_argument("--matrix", default=default.SUBSTITUTION_MATRIX,
                        choices=[matrix.value for matrix in SubstitutionMatrix],
                        help="Substitution matrix; match/mismatch apply to pairs it does not cover "
                             "(default: none)")
    parser.add_argument("--show-matrix", action="store_true",
                        help="Print the score matrix with backpointers (double arrows are optimal)")
    parser.add_argument("--plot", type=str, default=None,
                        help="Write a figure of the score matrix to this path (needs pairalign[plot])")
    parser.add_argument("--dag", action="store_true",
                        help="With --plot, draw the backpointer DAG instead of a heatmap")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose output (show debug information)")
    return parser


def save_plot(result, path: str, dag: bool = False) -> None:
    """Render `result` to an image file."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from .plot import draw_alignment_dag, plot_score_matrix

    if dag:
        fig, _ = draw_alignment_dag(result)
    else:
        fig = plot_score_matrix(result)
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    logger.info("Saved figure to %s", path)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.dag and not args.plot:
        parser.error("--dag requires --plot")

    result = align(
        args.seq1,
        args.seq2,
        mode=args.mode,
        match_score=args.match,
        mismatch_score=args.mismatch,
        gap_penalty=args.gap,
        substitution_matrix=args.matrix,
    )

    if args.matrix != SubstitutionMatrix.NONE.value:
        print(f"Using {args.matrix} for scoring.")
    print(f"Score: {result.score}")
    print(f"Optimal alignments: {len(result.alignments)}")
    print()
    print(format_alignments(result.alignments))

    if args.show_matrix:
        print()
        print(format_matrix(result.matrix))

    if args.plot:
        try:
            save_plot(result, args.plot, dag=args.dag)
        except ImportError:
            parser.error('--plot requires plotting dependencies. Install with: pip install "pairalign[plot]"')
    return 0


if __name__ == "__main__":
    sys.exit(main())
