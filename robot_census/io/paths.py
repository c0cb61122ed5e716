"""Path construction helpers for diagnostic output files."""

from __future__ import annotations

from pathlib import Path


def state_image_path(image_dir: Path, step: int) -> Path:
    """Return path to the occupancy image written after ``step``."""
    return image_dir / f"state_{step}.png"


def ensure_parent(path: Path) -> Path:
    """Create the parent directory of ``path`` and return ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
