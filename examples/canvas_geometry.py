"""Dump the drawable joint geometry for a fixed-size canvas.

Shows what a renderer receives: pixel-space rectangles (top-left first,
clockwise with y down) and the two cut-indicator segments.
"""

from __future__ import annotations

from mitery import TubeParameters, fit_scale, project_joint, require_valid

CANVAS_WIDTH = 1000
CANVAS_HEIGHT = 700


def _fmt_points(points) -> str:
    return ", ".join(f"({x:.1f}, {y:.1f})" for x, y in points)


def main() -> None:
    params = require_valid(TubeParameters(width=80, height=120, thickness=6, joint_angle=120))

    scale = fit_scale(CANVAS_WIDTH, CANVAS_HEIGHT, params)
    joint = project_joint(params, scale, origin=(CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2))

    print(f"Scale: {scale:.4f} px/mm, joint centre {joint.origin}")
    for label, half in (("A (reference)", joint.reference), ("B (mating)", joint.mating)):
        print(f"\nTube {label}")
        print(f"  outer: {_fmt_points(half.outer)}")
        print(f"  inner: {_fmt_points(half.inner)}")
        print(f"  cut:   {_fmt_points(half.cut_line)}")


if __name__ == "__main__":
    main()
