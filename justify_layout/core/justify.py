"""
Justify layout engine.

Arranges children left to right in rows, wrapping when the next child would
overflow the available width, and spreads each row's leftover width as equal
gaps before, between and after its children.

A layout cycle is two passes:
    measure() sizes every child and returns the container size
    place() regroups the measured children into rows and positions them

Both passes apply the same row-break rule independently, so for the same
input they always agree on row membership. All row buffers are local to a
pass; nothing is kept between cycles.
"""

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from justify_layout.core.measure_spec import (
    Insets,
    LayoutParams,
    MeasureMode,
    MeasureSpec,
)
from justify_layout.core.spacing import SpacingConfig

logger = logging.getLogger(__name__)


class ChildBox(Protocol):
    """A child element as seen by the layout engine."""

    layout_params: LayoutParams

    @property
    def measured_width(self) -> int: ...

    @property
    def measured_height(self) -> int: ...

    def measure(self, width_spec: MeasureSpec, height_spec: MeasureSpec) -> tuple[int, int]: ...

    def place(self, x: int, y: int, x2: int, y2: int) -> None: ...


@dataclass(frozen=True)
class Rect:
    """Absolute placement of a child."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class Row:
    """Children sharing one visual line."""
    indices: tuple[int, ...]
    content_width: int
    height: int
    gap: int


@dataclass(frozen=True)
class Measurement:
    """Result of the sizing pass."""
    width: int
    height: int
    available_width: int
    rows: tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class Placement:
    """Result of the placement pass. Rects are in input order."""
    rows: tuple[Row, ...]
    rects: tuple[Rect, ...]

    @property
    def membership(self) -> tuple[tuple[int, ...], ...]:
        return tuple(row.indices for row in self.rows)


def breaks_row(horizontal_spacing: int, excess: int, line_width: int,
               child_width: int, available_width: int) -> bool:
    """
    Return True if the child must start a new row.

    Two spacings are reserved on top of the committed excess, one more than
    the row strictly needs, so the leading gap added by placement never
    overflows.
    """
    return 2 * horizontal_spacing + excess + line_width + child_width > available_width


def distribute_gap(container_width: int, content_width: int, count: int) -> int:
    """Split leftover width into count + 1 equal gaps, truncating toward zero."""
    slack = container_width - content_width
    slots = count + 1
    gap = abs(slack) // slots
    return gap if slack >= 0 else -gap


def child_measure_specs(params: LayoutParams, available_width: int,
                        height_spec: MeasureSpec) -> tuple[MeasureSpec, MeasureSpec]:
    """Derive the constraints a child is measured against."""
    if params.has_fixed_width:
        width_spec = MeasureSpec.exactly(params.width)
    else:
        width_spec = MeasureSpec.at_most(max(available_width, 0))

    if params.has_fixed_height:
        child_height_spec = MeasureSpec.exactly(params.height)
    elif height_spec.mode is MeasureMode.UNSPECIFIED:
        child_height_spec = MeasureSpec.unspecified()
    else:
        child_height_spec = MeasureSpec.at_most(height_spec.size)

    return width_spec, child_height_spec


class JustifyEngine:
    """Two-pass justify layout over a sequence of ChildBox objects."""

    def __init__(self, spacing: SpacingConfig | None = None) -> None:
        self._spacing = spacing if spacing is not None else SpacingConfig.default()

    @property
    def spacing(self) -> SpacingConfig:
        return self._spacing

    def measure(self, children: Sequence[ChildBox], width_spec: MeasureSpec,
                height_spec: MeasureSpec, padding: Insets = Insets()) -> Measurement:
        """
        Sizing pass: measure every child and compute the container size.

        Args:
            children: Children in layout order
            width_spec: Width constraint of the container
            height_spec: Height constraint of the container
            padding: Container padding

        Returns:
            The container size, the width rows were broken against, and the
            row membership as child indices
        """
        h_spacing = self._spacing.horizontal_spacing
        v_spacing = self._spacing.vertical_spacing
        available_width = width_spec.size - padding.horizontal

        total_width = 0
        total_height = 0
        line_width = 0
        line_height = 0
        excess = 0

        rows: list[tuple[int, ...]] = []
        line: list[int] = []

        for index, child in enumerate(children):
            child_width_spec, child_height_spec = child_measure_specs(
                child.layout_params, available_width, height_spec
            )
            child_width, child_height = child.measure(child_width_spec, child_height_spec)

            if breaks_row(h_spacing, excess, line_width, child_width, available_width):
                total_width = max(total_width, line_width)
                total_height += line_height + v_spacing
                rows.append(tuple(line))
                line = [index]
                line_width = child_width
                line_height = child_height
                excess = 0
            else:
                line.append(index)
                excess = h_spacing
                line_width += child_width
                line_height = max(line_height, child_height)

        if children:
            rows.append(tuple(line))
        total_height += line_height

        if width_spec.mode is MeasureMode.EXACTLY:
            width = available_width
        else:
            width = total_width + padding.horizontal
        if height_spec.mode is MeasureMode.EXACTLY:
            height = height_spec.size
        else:
            height = total_height + padding.vertical

        logger.debug("Measured %d children into %d rows: %dx%d", len(children), len(rows), width, height)
        return Measurement(width, height, available_width, tuple(rows))

    def place(self, children: Sequence[ChildBox], container_width: int,
              padding: Insets = Insets()) -> Placement:
        """
        Placement pass: group measured children into rows and position them.

        Each child's place() is called exactly once with its absolute bounds.
        """
        h_spacing = self._spacing.horizontal_spacing
        v_spacing = self._spacing.vertical_spacing

        rows: list[Row] = []
        line: list[int] = []
        line_width = 0
        line_height = 0
        excess = 0

        def close_line() -> None:
            gap = distribute_gap(container_width, line_width, len(line))
            rows.append(Row(tuple(line), line_width, line_height, gap))

        for index, child in enumerate(children):
            child_width = child.measured_width
            if breaks_row(h_spacing, excess, line_width, child_width, container_width):
                close_line()
                line = []
                line_width = 0
                line_height = 0
                excess = 0
            else:
                excess = h_spacing
            line.append(index)
            line_width += child_width
            line_height = max(line_height, child.measured_height)

        if children:
            close_line()

        rects: list[Rect | None] = [None] * len(children)
        y = padding.top
        for row in rows:
            x = row.gap
            for index in row.indices:
                child = children[index]
                width = child.measured_width
                height = child.measured_height
                # Vertical centering within the row is disabled
                rect = Rect(x, y, width, height)
                child.place(rect.x, rect.y, rect.right, rect.bottom)
                rects[index] = rect
                x += width + row.gap
            y += row.height + v_spacing

        logger.debug("Placed %d children in %d rows at width %d", len(children), len(rows), container_width)
        return Placement(tuple(rows), tuple(rects))

    def layout(self, children: Sequence[ChildBox], width_spec: MeasureSpec,
               height_spec: MeasureSpec, padding: Insets = Insets()) -> tuple[Measurement, Placement]:
        """
        Run the sizing pass, then the placement pass.

        Placement uses the width the sizing pass broke rows against, so both
        passes see the same rows whatever the width mode.
        """
        measurement = self.measure(children, width_spec, height_spec, padding)
        placement = self.place(children, measurement.available_width, padding)
        return measurement, placement
