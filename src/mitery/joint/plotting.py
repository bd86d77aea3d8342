"""
Plotting helpers for projected miter joints.

All save outputs are forced to `.svg` when `save_path` is provided.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Polygon

from .analysis import JointAnalysis
from .projection import ProjectedHalf, ProjectedJoint

REFERENCE_COLOR = "#34d3a3"
MATING_COLOR = "#fb923c"
HOLE_EDGE_COLOR = "lightgray"
CUT_LINE_COLOR = "dimgray"


def plot_joint(
    joint: JointAnalysis | ProjectedJoint,
    *,
    ax: plt.Axes | None = None,
    show: bool = True,
    save_path: str | Path | None = None,
    background: str = "white",
    length_unit: str = "mm",
) -> plt.Axes:
    """Plot both tube cross-sections, their holes and the cut indicators.

    A `JointAnalysis` is drawn at 1 unit per mm about (0, 0). A
    `ProjectedJoint` is drawn as-is, in whatever units it was projected in.
    The y-axis is inverted to match the screen frame of the projection.
    """
    if isinstance(joint, JointAnalysis):
        analysis: JointAnalysis | None = joint
        projected = joint.project(scale=1.0)
    elif isinstance(joint, ProjectedJoint):
        analysis = None
        projected = joint
    else:
        raise TypeError(f"Cannot plot object of type {type(joint).__name__}")

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    else:
        fig = ax.figure

    ax.set_facecolor(background)

    _plot_half(ax, projected.reference, color=REFERENCE_COLOR, background=background, zorder=2)
    _plot_half(ax, projected.mating, color=MATING_COLOR, background=background, zorder=4)

    ox, oy = projected.origin
    ax.plot(ox, oy, "o", color="black", markersize=6, zorder=7)

    handles = [
        Line2D([0], [0], color=REFERENCE_COLOR, linewidth=2, label="Tube A (reference)"),
        Line2D([0], [0], color=MATING_COLOR, linewidth=2, label="Tube B (rotated)"),
        Line2D([0], [0], color=CUT_LINE_COLOR, linewidth=3, label="Cut indicator"),
    ]
    ax.legend(handles=handles, loc="upper right", framealpha=0.9)

    xs = [x for half in projected.halves for x, _ in half.outer]
    ys = [y for half in projected.halves for _, y in half.outer]
    extent = max(max(xs) - min(xs), max(ys) - min(ys), 1.0)
    margin = extent * 0.1

    ax.set_aspect("equal")
    ax.set_xlim(min(xs) - margin, max(xs) + margin)
    ax.set_ylim(max(ys) + margin, min(ys) - margin)
    ax.set_xlabel(f"x ({length_unit})", fontsize=11)
    ax.set_ylabel(f"y ({length_unit})", fontsize=11)
    ax.grid(True, alpha=0.3, linestyle="--")

    if analysis is not None:
        title = f"Miter Joint θ = {analysis.joint_angle_deg:g}°"
        title += f"\nα = {analysis.cut_angle_deg:g}° | A = {analysis.net_area:.0f} mm²"
        title += f" | {analysis.weight_per_meter_kg:.2f} kg/m"
    else:
        title = "Miter Joint (2D cross-section view)"
    ax.set_title(title, fontsize=12)

    fig.tight_layout()

    if save_path is not None:
        out = Path(save_path)
        if out.suffix.lower() != ".svg":
            out = out.with_suffix(".svg")
        fig.savefig(str(out), format="svg", bbox_inches="tight")

    if show:
        plt.show()

    return ax


def _plot_half(ax: plt.Axes, half: ProjectedHalf, *, color: str, background: str, zorder: int) -> None:
    """Outer outline, filled hole and cut indicator for one half."""
    ax.add_patch(
        Polygon(half.outer, closed=True, fill=False, edgecolor=color, linewidth=2, zorder=zorder)
    )
    ax.add_patch(
        Polygon(
            half.inner,
            closed=True,
            facecolor=background,
            edgecolor=HOLE_EDGE_COLOR,
            linewidth=1,
            zorder=zorder + 0.5,
        )
    )
    (x0, y0), (x1, y1) = half.cut_line
    ax.plot([x0, x1], [y0, y1], color=CUT_LINE_COLOR, linewidth=3, alpha=0.6, zorder=6)


__all__ = ["plot_joint"]
