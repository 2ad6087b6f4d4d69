"""Plotting helper tests (Agg backend)."""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from nbez.bezier import NBez
from nbez.chain import BezCubeChain, BezNode
from nbez.fixed import Bez3o2d
from nbez.visualization import (
    create_curve_figure,
    plot_chain,
    plot_curve,
    plot_segments,
    plot_tangents,
    sample_curve,
)


@pytest.fixture
def ax():
    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)


class TestSampleCurve:
    def test_shape(self, cubic_curve):
        pts = sample_curve(cubic_curve, 25)
        assert pts.shape == (25, 2)
        assert np.array_equal(pts[0], [0.0, 0.0])

    def test_fixed_shape_curve(self, cubic_points):
        pts = sample_curve(Bez3o2d(*cubic_points), 10)
        assert np.allclose(pts, sample_curve(NBez(cubic_points), 10))

    def test_too_few_samples_warns(self, cubic_curve):
        with pytest.warns(UserWarning):
            pts = sample_curve(cubic_curve, 1)
        assert pts.shape == (2, 2)


class TestPlotCurve:
    def test_nbez(self, ax, cubic_curve):
        lines = plot_curve(ax, cubic_curve, samples=30, label="cubic")
        assert len(lines) == 2
        assert len(lines[0].get_xdata()) == 30

    def test_without_control_polygon(self, ax, cubic_curve):
        assert len(plot_curve(ax, cubic_curve, show_control=False)) == 1

    def test_fixed_shape(self, ax, cubic_points):
        lines = plot_curve(ax, Bez3o2d(*cubic_points))
        assert len(lines) == 2

    def test_one_dimensional_curve(self, ax):
        with pytest.raises(ValueError):
            plot_curve(ax, NBez([0.0, 1.0, 2.0]))

    def test_tangents(self, ax, cubic_curve):
        quiver = plot_tangents(ax, cubic_curve, [0.0, 0.5, 1.0])
        assert quiver.N == 3


class TestPlotSegments:
    def test_pieces(self, ax, cubic_curve):
        pieces = plot_segments(ax, cubic_curve, 4)
        assert len(pieces) == 4
        assert len(ax.get_lines()) == 4


class TestPlotChain:
    def test_chain(self, ax):
        A, C = BezNode.anchor, BezNode.control
        chain = BezCubeChain.from_container([
            A(0.0, 0.0), C(1.0, 2.0), C(2.0, 2.0), A(3.0, 0.0),
            C(4.0, -2.0), C(5.0, -2.0), A(6.0, 0.0),
        ])
        plot_chain(ax, chain, samples=20)
        # two curves, two control polygons, one anchor marker line
        assert len(ax.get_lines()) == 5


class TestCreateCurveFigure:
    def test_panels(self, cubic_curve, cubic_points):
        fig = create_curve_figure([cubic_curve, Bez3o2d(*cubic_points)], title="curves", tangents=[0.5])
        try:
            assert len(fig.axes) == 2
            assert fig.axes[0].get_title().startswith("order 3")
        finally:
            plt.close(fig)
