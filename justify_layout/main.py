"""Demo entry point for the justify layout"""

import logging
import sys

from PySide6.QtWidgets import QApplication, QPushButton, QScrollArea, QWidget

from justify_layout.core.spacing import SpacingConfig
from justify_layout.ui.widgets import JustifyLayout

logger = logging.getLogger(__name__)

DEMO_TAGS = [
    "python", "layout", "qt", "pyside6", "justify", "rows", "wrap",
    "spacing", "density", "widgets", "flow", "gap", "measure", "place",
    "tags", "cloud",
]


class DemoWindow(QScrollArea):
    """Scrollable window showing a tag cloud laid out by JustifyLayout"""

    def __init__(self, density: float = 1.0, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Justify Layout Demo")
        self.setWidgetResizable(True)

        content = QWidget()
        layout = JustifyLayout(content, margin=10, spacing=SpacingConfig.from_attributes(
            {"horizontalSpacing": "8dp", "verticalSpacing": "12dp"}, density
        ))
        for tag in DEMO_TAGS:
            button = QPushButton(tag)
            button.setFixedSize(button.sizeHint())
            layout.addWidget(button)

        self.setWidget(content)
        self.resize(480, 320)


def main():
    """Main application entry point"""
    logging.basicConfig(
        level=logging.DEBUG if "--debug" in sys.argv else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Justify Layout Demo")

    screen = app.primaryScreen()
    density = screen.logicalDotsPerInch() / 96.0 if screen is not None else 1.0
    logger.info("Starting demo at density %.2f", density)

    window = DemoWindow(density)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
