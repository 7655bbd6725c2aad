#!/usr/bin/env python3
"""
generate_traceback_figure.py — global vs local traceback figure

This script aligns the example pair GAATTC / GATTA globally and locally
and draws, for each mode, the score matrix heatmap (top) and the
backpointer DAG (bottom) with the optimal edges highlighted.

Output (default):
  figures/traceback.pdf
"""

import argparse
import sys
from pathlib import Path

# Use Agg backend by default for headless generation
import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pairalign import default
from pairalign.aligners import align_global, align_local
from pairalign.plot import plot_score_matrix, draw_alignment_dag


# =============================================================================
# CONFIGURATION
# =============================================================================

FIGURE = {
    'width': 11,
    'height': 10,
    'dpi': 300,
    'format': 'pdf',
    'background': '#ffffff',
}


def generate_figure(seq1, seq2, output_path, dpi=None, fmt=None):
    """Draw the 2x2 global/local, heatmap/DAG figure and save it."""
    dpi = dpi or FIGURE['dpi']
    fmt = fmt or FIGURE['format']

    results = {
        'Global': align_global(seq1, seq2, **default.align_params()),
        'Local': align_local(seq1, seq2, **default.align_params()),
    }

    fig, axes = plt.subplots(2, 2, figsize=(FIGURE['width'], FIGURE['height']))
    for col, (name, result) in enumerate(results.items()):
        plot_score_matrix(result, ax=axes[0, col],
                          title=f"{name}: score {result.score}, {len(result.alignments)} alignment(s)")
        draw_alignment_dag(result, ax=axes[1, col], optimal_only=False,
                           title=f"{name} backpointer DAG")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(output_path, dpi=dpi, format=fmt, bbox_inches='tight',
                facecolor=FIGURE['background'])
    print(f"Saved traceback figure to: {output_path}")

    return fig


# =============================================================================
# CLI
# =============================================================================

def main():
    parser = argparse.ArgumentParser(description='Generate the global/local traceback figure')
    parser.add_argument('seq1', nargs='?', default=default.SEQ1,
                        help=f'First sequence (default: {default.SEQ1})')
    parser.add_argument('seq2', nargs='?', default=default.SEQ2,
                        help=f'Second sequence (default: {default.SEQ2})')
    parser.add_argument('--output', '-o', type=str, default=None,
                        help='Output file path (default: figures/traceback.pdf)')
    parser.add_argument('--dpi', type=int, default=None,
                        help='Resolution in DPI (default: 300)')
    parser.add_argument('--format', '-f', type=str, default=None,
                        choices=['pdf', 'png', 'svg', 'eps'],
                        help='Output format (default: pdf)')
    parser.add_argument('--show', action='store_true',
                        help='Display figure interactively')
    args = parser.parse_args()

    output_path = Path(args.output) if args.output else Path(__file__).parent.parent / 'figures' / 'traceback.pdf'
    generate_figure(args.seq1, args.seq2, output_path=output_path, dpi=args.dpi, fmt=args.format)

    if args.show:
        plt.show()


if __name__ == '__main__':
    main()
