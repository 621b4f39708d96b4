"""Grid layout and stream display settings of the monitor."""

from __future__ import annotations

import json
import math
from pathlib import Path

TOTAL_CAMERAS = 48
DEFAULT_GRID_SIZE = 4

_STREAM_COUNTS = (4, 9, 25, 36, 49, 64)

_SCALE_FACTORS = (
    ("10%", 0.1),
    ("25%", 0.25),
    ("50%", 0.5),
    ("75%", 0.75),
    ("100%", 1.0),
)
_DEFAULT_SCALE_INDEX = 2


def stream_count_options() -> list[int]:
    """Return the selectable numbers of streams shown in one group."""
    return list(_STREAM_COUNTS)


def scale_factor_options() -> list[tuple[str, float]]:
    """Return the selectable stream scale factors as (label, factor) pairs."""
    return list(_SCALE_FACTORS)


def default_scale_factor() -> float:
    """Return the scale factor selected by default."""
    return _SCALE_FACTORS[_DEFAULT_SCALE_INDEX][1]


def _check_per_page(per_page: int) -> None:
    if per_page <= 0:
        raise ValueError(f"streams per page must be positive, got {per_page}")


def page_ranges(total_cams: int, per_page: int) -> list[tuple[int, int]]:
    """Split ``total_cams`` cameras into pages of ``per_page``.

    Each page is a ``(first_camera, end)`` pair with ``end`` exclusive;
    the last page always ends at ``total_cams``.
    """
    _check_per_page(per_page)
    if total_cams < 0:
        raise ValueError(f"camera count must not be negative, got {total_cams}")
    total_pages = math.ceil(total_cams / per_page)
    ranges = []
    for page in range(total_pages):
        start = page * per_page
        end = total_cams if page == total_pages - 1 else start + per_page
        ranges.append((start, end))
    return ranges


def target_group(cam_index: int, per_page: int) -> int:
    """Return the page that holds the camera at ``cam_index``."""
    _check_per_page(per_page)
    if cam_index < 0:
        raise ValueError(f"camera index must not be negative, got {cam_index}")
    return cam_index // per_page


def grid_side(count: int) -> int:
    """Return the side length of the square grid for ``count`` streams."""
    if count < 0:
        raise ValueError(f"stream count must not be negative, got {count}")
    return math.isqrt(count)


def layout_change_message(count: int) -> str:
    """Return the notice shown after the grid size has been changed."""
    side = grid_side(count)
    return f"视频网格布局已更改 {side}x{side}, \n请重新启动应用以应用新的布局设置"


class LayoutSettings:
    """Grid size persisted in a JSON settings file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (FileNotFoundError, json.JSONDecodeError):
            return {}
        return data if isinstance(data, dict) else {}

    def load_grid_size(self) -> int:
        """Return the saved grid size, or the default when none is saved."""
        layout = self._read().get("layout")
        if not isinstance(layout, dict):
            return DEFAULT_GRID_SIZE
        value = layout.get("grid_size", DEFAULT_GRID_SIZE)
        if isinstance(value, bool):
            return DEFAULT_GRID_SIZE
        try:
            return int(value)
        except (TypeError, ValueError):
            return DEFAULT_GRID_SIZE

    def save_grid_size(self, size: int) -> None:
        """Store ``size`` as the grid size, keeping other saved settings."""
        data = self._read()
        layout = data.get("layout")
        if not isinstance(layout, dict):
            layout = {}
        layout["grid_size"] = int(size)
        data["layout"] = layout
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8"
        )