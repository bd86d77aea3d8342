"""Preset joint angles: report + plot for each.

Outputs (created under `gallery/joint/`):
- joint_<angle>.txt
- joint_<angle>.svg
"""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # non-interactive backend for scripts/CI

import matplotlib.pyplot as plt

from mitery import PRESET_ANGLES, InvalidGeometryError, TubeParameters, analyze_joint


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _out_dir() -> Path:
    out_dir = _project_root() / "gallery" / "joint"
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir


def _write_text(path: Path, text: str) -> None:
    path.write_text(text.rstrip() + "\n", encoding="utf-8")
    print(f"Saved: {path}")


def main() -> None:
    out_dir = _out_dir()
    base = TubeParameters(width=60, height=60, thickness=5, length=400)

    for angle in PRESET_ANGLES:
        analysis = analyze_joint(base.with_joint_angle(angle))
        _write_text(out_dir / f"joint_{angle}.txt", analysis.report())

        analysis.plot(show=False, save_path=out_dir / f"joint_{angle}.svg")
        plt.close("all")
        print(f"Saved: {out_dir / f'joint_{angle}.svg'}")

    # Rejected geometry: report the suggestion instead of a result
    try:
        analyze_joint(base.with_thickness(30))
    except InvalidGeometryError as err:
        print(f"Rejected: {err.reason}; try T = {err.suggested_thickness:g} mm")


if __name__ == "__main__":
    main()
