import sys
import os
import logging

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Only show warnings and errors
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)  # Output to console
    ]
)

# Add plotter/src to path so imports work when running directly
if __name__ == "__main__":
    # Get the directory containing the package (plotter/src)
    src_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    # Add it to the Python path
    if src_dir not in sys.path:
        sys.path.insert(0, src_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QFileDialog, QMessageBox, QLabel, QAction
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor, QKeySequence

# Component imports
from cartesian_plane.components.plane_canvas import PlaneCanvasWidget
from cartesian_plane.components.input_panel import InputPanel

# Model imports
from cartesian_plane.models.plane import Plane

# Utility imports
from cartesian_plane.utils.logger import loggerRaise, notify_user, set_main_window

# Service imports
from cartesian_plane.services.plane_commands import handle_add_point, handle_add_vector, handle_clear
from cartesian_plane.services.headless_renderer import save_png
from cartesian_plane.constants import (
    CANVAS_WIDTH, CANVAS_HEIGHT, DEFAULT_SCALE,
    WINDOW_TITLE, WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT
)
from cartesian_plane.version import get_version


class CartesianPlaneWindow(QMainWindow):
    def __init__(self, scale=DEFAULT_SCALE):
        super().__init__()
        self.setWindowTitle(f"{WINDOW_TITLE} {get_version()}")
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        # Canvas owns the backing surface; the plane draws into it
        self.canvas = PlaneCanvasWidget(self, CANVAS_WIDTH, CANVAS_HEIGHT)
        self.plane = Plane(self.canvas.surface, scale=scale)
        self.canvas.plane = self.plane
        self.plane.add_listener(self._on_plane_changed)

        # Initialize global logger with main window reference
        set_main_window(self)

        self.setup_ui()

    # ============= UI Setup =============

    def setup_ui(self):
        self._create_menu_bar()

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QHBoxLayout(central_widget)
        main_layout.setContentsMargins(8, 8, 8, 8)
        main_layout.setSpacing(8)

        main_layout.addWidget(self.canvas, 0, Qt.AlignTop)

        self.input_panel = InputPanel(self)
        self.input_panel.add_point_requested.connect(self._on_add_point)
        self.input_panel.add_vector_requested.connect(self._on_add_vector)
        self.input_panel.clear_requested.connect(self._on_clear)
        main_layout.addWidget(self.input_panel, 1)

        # Status bar: entity counts on the left, cursor position on the right
        self.status_left = QLabel("")
        self.status_right = QLabel("")
        self.statusBar().addWidget(self.status_left, 1)
        self.statusBar().addPermanentWidget(self.status_right)
        self.canvas.cursor_moved.connect(self._on_cursor_moved)
        self.canvas.cursor_left.connect(lambda: self.status_right.setText(""))
        self._on_plane_changed(len(self.plane.points), len(self.plane.vectors))

    def _create_menu_bar(self):
        file_menu = self.menuBar().addMenu("&File")

        export_action = QAction("&Export PNG...", self)
        export_action.setShortcut(QKeySequence("Ctrl+E"))
        export_action.triggered.connect(self.export_png)
        file_menu.addAction(export_action)

        file_menu.addSeparator()

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        edit_menu = self.menuBar().addMenu("&Edit")
        clear_action = QAction("&Clear Plane", self)
        clear_action.setShortcut(QKeySequence("Ctrl+L"))
        clear_action.triggered.connect(self._on_clear)
        edit_menu.addAction(clear_action)

    # ============= Command wiring =============

    def _on_add_point(self, x_text, y_text):
        handle_add_point(self.plane, x_text, y_text, notify_user)

    def _on_add_vector(self, origin_text, tip_text):
        handle_add_vector(self.plane, origin_text, tip_text, notify_user)

    def _on_clear(self):
        handle_clear(self.plane)

    def _on_plane_changed(self, point_count, vector_count):
        self.status_left.setText(f"Points: {point_count}   Vectors: {vector_count}")

    def _on_cursor_moved(self, x, y):
        self.status_right.setText(f"x: {x:.2f}   y: {y:.2f}")

    # ========================================
    # Core Application Methods
    # ========================================

    def export_png(self):
        """Export the current plane as PNG"""
        try:
            filename, _ = QFileDialog.getSaveFileName(
                self,
                "Export as PNG",
                "",
                "PNG Files (*.png);;All Files (*)"
            )

            if not filename:
                return

            out_file = save_png(self.canvas.surface.image(), filename)
            QMessageBox.information(self, "Export Successful", f"Plane exported to:\n{out_file}")
        except Exception as e:
            loggerRaise(e, "Failed to export PNG")


def main():
    """Main entry point for the Cartesian Plane application"""
    app = QtWidgets.QApplication([])

    # Use Fusion style with dark palette
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(25, 25, 25))
    dark_palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ToolTipBase, Qt.white)
    dark_palette.setColor(QPalette.ToolTipText, Qt.white)
    dark_palette.setColor(QPalette.Text, Qt.white)
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.BrightText, Qt.red)
    dark_palette.setColor(QPalette.Link, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.HighlightedText, Qt.black)

    app.setPalette(dark_palette)

    window = CartesianPlaneWindow()
    window.show()
    app.exec_()


if __name__ == "__main__":
    main()
