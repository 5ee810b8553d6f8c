"""Spacing configuration and density-independent unit conversion."""

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping

logger = logging.getLogger(__name__)

DEFAULT_SPACING_DP = 20

HORIZONTAL_SPACING_ATTR = "horizontalSpacing"
VERTICAL_SPACING_ATTR = "verticalSpacing"

_DIMENSION_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(px|dp|dip|sp)?\s*$")


def dp_to_px(dp: float, density: float) -> int:
    """Convert density-independent units to pixels, rounding half up."""
    return int(dp * density + 0.5)


def parse_dimension(value: int | str, density: float = 1.0) -> int:
    """
    Parse a declarative dimension attribute into pixels.

    Args:
        value: An integer pixel count, or a string such as "12px", "20dp" or "16sp"
        density: Display density scale used for dp/sp values

    Returns:
        The dimension in whole pixels

    Raises:
        ValueError: If the value is negative or not a recognised dimension
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid dimension: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Dimension must be non-negative, got {value}")
        return value

    match = _DIMENSION_RE.match(str(value))
    if match is None:
        raise ValueError(f"Invalid dimension: {value!r}")

    number = float(match.group(1))
    unit = match.group(2) or "px"
    # sp scales with density only; font scaling is not modelled
    scaled = number if unit == "px" else number * density
    pixels = int(scaled + 0.5)
    # Any non-zero dimension is at least one pixel
    if pixels == 0 and scaled > 0:
        return 1
    return pixels


@dataclass(frozen=True)
class SpacingConfig:
    """Horizontal and vertical spacing in pixels, fixed for a container's lifetime."""
    horizontal_spacing: int
    vertical_spacing: int

    def __post_init__(self) -> None:
        if self.horizontal_spacing < 0 or self.vertical_spacing < 0:
            raise ValueError(
                "Spacing must be non-negative, got "
                f"({self.horizontal_spacing}, {self.vertical_spacing})"
            )

    @classmethod
    def default(cls, density: float = 1.0) -> "SpacingConfig":
        """Return the default spacing of 20dp on both axes."""
        px = dp_to_px(DEFAULT_SPACING_DP, density)
        return cls(px, px)

    @classmethod
    def from_attributes(cls, attrs: Mapping[str, Any], density: float = 1.0) -> "SpacingConfig":
        """
        Build a config from declarative attributes.

        Missing attributes fall back to the density-scaled default.
        """
        default_px = dp_to_px(DEFAULT_SPACING_DP, density)
        horizontal = attrs.get(HORIZONTAL_SPACING_ATTR)
        vertical = attrs.get(VERTICAL_SPACING_ATTR)

        config = cls(
            parse_dimension(horizontal, density) if horizontal is not None else default_px,
            parse_dimension(vertical, density) if vertical is not None else default_px,
        )
        logger.debug("Spacing from attributes %s at density %s: %s", dict(attrs), density, config)
        return config
