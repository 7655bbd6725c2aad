"""
test_plot.py — Smoke tests for the matplotlib/seaborn figures
"""

import pytest

pytest.importorskip("matplotlib")
pytest.importorskip("seaborn")

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, FancyArrowPatch, Rectangle

from pairalign.aligners import align_global, align_local
from pairalign.plot import (
    EDGE_COLORS,
    AlignmentDagPlotter,
    draw_alignment_dag,
    draw_shortened_arrow,
    edge_color,
    plot_score_matrix,
)


def _count(ax, kind):
    return sum(isinstance(p, kind) for p in ax.patches)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestScoreMatrixPlot:

    def test_one_arrow_per_edge(self, scoring_params):
        result = align_global("GAATTC", "GATTA", **scoring_params)
        fig = plot_score_matrix(result)
        ax = fig.axes[0]
        assert _count(ax, FancyArrowPatch) == len(list(result.matrix.edges()))
        assert _count(ax, Rectangle) >= len(result.terminals)

    def test_optimal_only(self, scoring_params):
        result = align_local("GAATTC", "GATTA", **scoring_params)
        fig = plot_score_matrix(result, optimal_only=True, title="local")
        ax = fig.axes[0]
        assert _count(ax, FancyArrowPatch) == len(result.matrix.optimal_edges())
        assert ax.get_title() == "local"

    def test_draws_on_given_axes(self, scoring_params):
        result = align_global("AC", "A", **scoring_params)
        fig, ax = plt.subplots()
        assert plot_score_matrix(result, ax=ax) is fig


class TestDagPlot:

    def test_nodes_and_edges(self, scoring_params):
        result = align_global("GAATTC", "GATTA", **scoring_params)
        fig, ax = draw_alignment_dag(result)
        n, m = result.matrix.shape
        assert _count(ax, Circle) == n * m
        assert _count(ax, FancyArrowPatch) == len(list(result.matrix.edges()))

    def test_optimal_only(self, scoring_params):
        result = align_global("GAATTC", "GATTA", **scoring_params)
        fig, ax = draw_alignment_dag(result, optimal_only=True)
        assert _count(ax, FancyArrowPatch) == len(result.matrix.optimal_edges())

    def test_alignment_path_overlay(self, scoring_params):
        result = align_local("GAATTC", "GATTA", **scoring_params)
        fig, ax = plt.subplots()
        plotter = AlignmentDagPlotter(result)
        plotter.draw(ax)
        plotter.draw_alignment_path(ax, result.alignments[0])
        assert len(ax.lines) == 1

    def test_path_overlay_follows_its_own_terminal(self, scoring_params):
        result = align_local("AAAGGGGCCC", "AAATCCC", **scoring_params)
        fig, ax = plt.subplots()
        plotter = AlignmentDagPlotter(result)
        plotter.draw_alignment_path(ax, result.alignments[1])
        line = ax.lines[0]
        assert list(line.get_xdata()) == [4.0, 5.0, 6.0, 7.0]
        assert list(line.get_ydata()) == [7.0, 8.0, 9.0, 10.0]


class TestArrowHelpers:

    def test_arrow_is_added(self):
        fig, ax = plt.subplots()
        arrow = draw_shortened_arrow(ax, (0, 0), (1, 1), color="red", node_radius=0.2)
        assert isinstance(arrow, FancyArrowPatch)
        assert arrow in ax.patches

    def test_zero_length_arrow(self):
        fig, ax = plt.subplots()
        draw_shortened_arrow(ax, (2, 2), (2, 2), color="red", node_radius=0.2)
        assert _count(ax, FancyArrowPatch) == 1

    def test_edge_color(self):
        assert edge_color("diag", 1) == EDGE_COLORS["match"]
        assert edge_color("diag", -1) == EDGE_COLORS["mismatch"]
        assert edge_color("up", -1) == EDGE_COLORS["gap"]
        assert edge_color("left", -1) == EDGE_COLORS["gap"]
