"""Justify Layout - A flow layout that spreads each row's free space evenly around its widgets."""

import logging

from PySide6.QtWidgets import QLayout, QLayoutItem, QWidget
from PySide6.QtCore import Qt, QRect, QSize

from justify_layout.core.justify import JustifyEngine, Measurement, Placement
from justify_layout.core.measure_spec import (
    Insets,
    LayoutParams,
    MeasureSpec,
    WRAP_CONTENT,
    resolve_size,
)
from justify_layout.core.spacing import SpacingConfig

logger = logging.getLogger(__name__)


class QtChildBox:
    """
    Adapts a QLayoutItem to the engine's child protocol.

    Placement coordinates are relative to the container; they are shifted by
    the given origin before the item's geometry is set.
    """

    def __init__(self, item: QLayoutItem, origin_x: int = 0, origin_y: int = 0) -> None:
        self.item = item
        self._origin_x = origin_x
        self._origin_y = origin_y
        self._measured_width = 0
        self._measured_height = 0
        self.layout_params = self._params_for(item)

    @staticmethod
    def _params_for(item: QLayoutItem) -> LayoutParams:
        """Fixed-size items request their size exactly; anything else wraps its content."""
        minimum = item.minimumSize()
        maximum = item.maximumSize()
        width = minimum.width() if minimum.width() == maximum.width() else WRAP_CONTENT
        height = minimum.height() if minimum.height() == maximum.height() else WRAP_CONTENT
        return LayoutParams(width, height)

    @property
    def measured_width(self) -> int:
        return self._measured_width

    @property
    def measured_height(self) -> int:
        return self._measured_height

    def measure(self, width_spec: MeasureSpec, height_spec: MeasureSpec) -> tuple[int, int]:
        """Resolve the item's size hint against the given constraints."""
        hint = self.item.sizeHint()
        self._measured_width = resolve_size(max(hint.width(), 0), width_spec)
        self._measured_height = resolve_size(max(hint.height(), 0), height_spec)
        return self._measured_width, self._measured_height

    def place(self, x: int, y: int, x2: int, y2: int) -> None:
        self.item.setGeometry(QRect(self._origin_x + x, self._origin_y + y, x2 - x, y2 - y))


class JustifyLayout(QLayout):
    """
    A layout that arranges child widgets in rows, wrapping to a new row
    when the next widget doesn't fit, and distributing each row's leftover
    width as equal gaps before, between and after its widgets.

    Good for tag clouds and button groups that should look evenly spread
    at any window width.
    """

    def __init__(
        self,
        parent: QWidget = None,
        margin: int = 0,
        spacing: SpacingConfig = None,
        density: float = 1.0,
    ):
        """
        Initialize the justify layout.

        Args:
            parent: Parent widget
            margin: Margin around the layout
            spacing: Horizontal and vertical spacing; 20dp each if omitted
            density: Display density used to scale the default spacing
        """
        super().__init__(parent)
        self._item_list: list[QLayoutItem] = []
        self._engine = JustifyEngine(spacing if spacing is not None else SpacingConfig.default(density))

        if margin >= 0:
            self.setContentsMargins(margin, margin, margin, margin)

    def __del__(self):
        """Clean up items when layout is deleted."""
        while self._item_list:
            self.takeAt(0)

    def addItem(self, item: QLayoutItem) -> None:
        """Add an item to the layout."""
        self._item_list.append(item)

    def horizontalSpacing(self) -> int:
        """Return the horizontal spacing used by the row-break rule."""
        return self._engine.spacing.horizontal_spacing

    def verticalSpacing(self) -> int:
        """Return the vertical spacing between rows."""
        return self._engine.spacing.vertical_spacing

    def count(self) -> int:
        """Return the number of items in the layout."""
        return len(self._item_list)

    def itemAt(self, index: int) -> QLayoutItem | None:
        """Return the item at the given index."""
        if 0 <= index < len(self._item_list):
            return self._item_list[index]
        return None

    def takeAt(self, index: int) -> QLayoutItem | None:
        """Remove and return the item at the given index."""
        if 0 <= index < len(self._item_list):
            return self._item_list.pop(index)
        return None

    def expandingDirections(self) -> Qt.Orientation:
        """Return the expanding directions (none)."""
        return Qt.Orientation(0)

    def hasHeightForWidth(self) -> bool:
        """Return True because height depends on width."""
        return True

    def heightForWidth(self, width: int) -> int:
        """Calculate the height needed for the given width."""
        measurement = self._engine.measure(
            self._child_boxes(QRect(0, 0, width, 0)),
            MeasureSpec.exactly(width),
            MeasureSpec.unspecified(),
            self._padding(),
        )
        return measurement.height

    def setGeometry(self, rect: QRect) -> None:
        """Set the geometry of the layout and arrange items."""
        super().setGeometry(rect)
        self._do_layout(rect)

    def sizeHint(self) -> QSize:
        """Return the preferred size."""
        return self.minimumSize()

    def minimumSize(self) -> QSize:
        """Return the minimum size needed by the layout."""
        size = QSize()
        for item in self._item_list:
            size = size.expandedTo(item.minimumSize())

        # The row-break rule reserves two spacings beside the widest item
        margins = self.contentsMargins()
        size += QSize(
            2 * self.horizontalSpacing() + margins.left() + margins.right(),
            margins.top() + margins.bottom(),
        )
        return size

    def _padding(self) -> Insets:
        margins = self.contentsMargins()
        return Insets(margins.left(), margins.top(), margins.right(), margins.bottom())

    def _child_boxes(self, rect: QRect) -> list[QtChildBox]:
        """Wrap the visible items, positioned relative to the content area of rect."""
        origin_x = rect.x() + self.contentsMargins().left()
        return [
            QtChildBox(item, origin_x, rect.y())
            for item in self._item_list
            if item.widget() is not None and not item.isEmpty()
        ]

    def _do_layout(self, rect: QRect) -> tuple[Measurement, Placement]:
        """
        Arrange items in the given rectangle.

        Args:
            rect: The rectangle to arrange items in

        Returns:
            The results of the sizing and placement passes
        """
        measurement, placement = self._engine.layout(
            self._child_boxes(rect),
            MeasureSpec.exactly(max(rect.width(), 0)),
            MeasureSpec.exactly(max(rect.height(), 0)),
            self._padding(),
        )
        logger.debug("Laid out %d rows in %s", len(placement.rows), rect)
        return measurement, placement
