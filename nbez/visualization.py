"""
Visualization functions for Bézier curves and cubic chains.
"""

import warnings

import numpy as np
import matplotlib.pyplot as plt

from .bezier import NBez
from .constants import DEFAULT_SAMPLES
from .utils import format_number


def _control_points(curve):
    """(N+1, dim) control point array of a generic or fixed-shape curve."""
    if isinstance(curve, NBez):
        return np.asarray(curve.points)
    return curve.as_array()


def sample_curve(curve, samples=DEFAULT_SAMPLES):
    """
    Sample positions along a curve.

    Args:
        curve: NBez or fixed-shape composite curve
        samples: Number of evenly spaced parameters in [0, 1]

    Returns:
        (samples, dim) array of positions
    """
    if samples < 2:
        warnings.warn(f"samples={samples} is too small to draw a curve; using 2")
        samples = 2

    ts = np.linspace(0, 1, samples)
    if isinstance(curve, NBez):
        return curve.interp_array(ts)
    return np.stack([curve.interp_unbounded(t).as_array() for t in ts])


def _plot_polyline(ax, pts, *args, **kwargs):
    if pts.shape[1] >= 3 and hasattr(ax, 'zaxis'):
        return ax.plot(pts[:, 0], pts[:, 1], pts[:, 2], *args, **kwargs)
    return ax.plot(pts[:, 0], pts[:, 1], *args, **kwargs)


def plot_curve(ax, curve, samples=DEFAULT_SAMPLES, show_control=True, color='#3498DB', lw=2.0, label=None):
    """
    Plot a curve and, optionally, its control polygon.

    Args:
        ax: matplotlib axes (3D axes draw the z component of 3D+ curves)
        curve: NBez or fixed-shape composite curve
        samples: Number of points along the curve
        show_control: Whether to draw the control polygon
        color: Curve color
        lw: Line width for the curve
        label: Legend label

    Returns:
        list: The created Line2D objects
    """
    pts = sample_curve(curve, samples)
    if pts.shape[1] < 2:
        raise ValueError("plot_curve needs curves of dimension 2 or more")

    lines = _plot_polyline(ax, pts, '-', color=color, lw=lw, label=label)
    if show_control:
        P = _control_points(curve)
        lines += _plot_polyline(ax, P, 'k.--', lw=1.0, ms=6, alpha=0.6)
    return lines


def plot_tangents(ax, curve, ts, scale=0.2, color='#E74C3C'):
    """
    Draw slope vectors as arrows at the given parameters (2D only).

    Args:
        ax: 2D matplotlib axes
        curve: NBez or fixed-shape composite curve
        ts: Parameters in [0, 1]
        scale: Arrow length as a fraction of the slope magnitude
        color: Arrow color
    """
    ts = np.atleast_1d(ts)
    pos = np.stack([curve.interp(t).as_array() for t in ts])
    vel = np.stack([curve.slope(t).as_array() for t in ts]) * scale
    return ax.quiver(pos[:, 0], pos[:, 1], vel[:, 0], vel[:, 1],
                     angles='xy', scale_units='xy', scale=1, color=color, width=0.004)


def plot_segments(ax, curve, n_seg, lw=2.0, samples=60):
    """
    Plot a curve split into n_seg equal-parameter pieces in alternating colors.

    Args:
        ax: matplotlib axes
        curve: NBez
        n_seg: Number of segments
        lw: Line width
        samples: Points per segment
    """
    base_colors = ['#E74C3C', '#3498DB', '#F39C12']  # (red, blue, orange)
    pieces = curve.subdivide(n_seg)
    for i, piece in enumerate(pieces):
        plot_curve(ax, piece, samples=samples, show_control=False, color=base_colors[i % 3], lw=lw)
    return pieces


def plot_chain(ax, chain, samples=DEFAULT_SAMPLES, show_control=True):
    """
    Plot every cubic segment of a BezCubeChain.

    Args:
        ax: 2D matplotlib axes
        chain: BezCubeChain
        samples: Points per segment
        show_control: Whether to draw control handles
    """
    for curve in chain.curves():
        plot_curve(ax, curve, samples=samples, show_control=show_control)

    anchors = np.array([node.as_tuple() for node in chain.unwrap() if node.is_anchor])
    if anchors.size:
        ax.plot(anchors[:, 0], anchors[:, 1], 'ko', ms=5)


def create_curve_figure(curves, title=None, samples=DEFAULT_SAMPLES, tangents=None):
    """
    Create a figure with one 2D panel per curve.

    Args:
        curves: List of NBez or fixed-shape composite curves
        title: Figure title
        samples: Points per curve
        tangents: Optional parameters at which to draw slope arrows

    Returns:
        matplotlib Figure object
    """
    n = max(len(curves), 1)
    fig, axes = plt.subplots(1, n, figsize=(5 * n, 4.5), constrained_layout=True, squeeze=False)

    for ax, curve in zip(axes[0], curves):
        plot_curve(ax, curve, samples=samples)
        if tangents is not None:
            plot_tangents(ax, curve, tangents)

        start, end = curve.interp(0.0), curve.interp(1.0)
        order = curve.order() if isinstance(curve, NBez) else curve.ORDER
        ax.set_title(
            f"order {order}: ({format_number(start[0])}, {format_number(start[1])}) → "
            f"({format_number(end[0])}, {format_number(end[1])})",
            fontsize=10,
        )
        ax.set_aspect('equal', adjustable='datalim')
        ax.grid(True, alpha=0.3)

    if title:
        fig.suptitle(title)
    return fig
