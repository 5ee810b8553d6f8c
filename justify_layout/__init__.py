"""Justify layout: rows of widgets with evenly distributed free space."""

from justify_layout.core.justify import JustifyEngine, Measurement, Placement, Rect, Row
from justify_layout.core.measure_spec import (
    MATCH_PARENT,
    WRAP_CONTENT,
    Insets,
    LayoutParams,
    MeasureMode,
    MeasureSpec,
)
from justify_layout.core.spacing import SpacingConfig, dp_to_px

__version__ = "0.1.0"
