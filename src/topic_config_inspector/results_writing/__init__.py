"""Results writing exports."""

from .entry_renderer import (
    name_column_width,
    render_config_entries,
    sort_config_entries,
)

__all__ = [
    "name_column_width",
    "render_config_entries",
    "sort_config_entries",
]
