"""Display formatting shared by the chart and table renderers."""

from __future__ import annotations

# One colour per winter, oldest first
WINTER_COLORS = ["#3b82f6", "#ef4444", "#10b981", "#f59e0b", "#8b5cf6", "#ec4899"]


def winter_color(index: int) -> str:
    """Line colour for the winter at ``index`` in legend order."""
    return WINTER_COLORS[index % len(WINTER_COLORS)]


def format_value(value: float | None, unit: str, missing: str = "—") -> str:
    """Format a value to one decimal with its unit, e.g. ``11.0 °C``."""
    if value is None:
        return missing
    return f"{value:.1f} {unit}"
