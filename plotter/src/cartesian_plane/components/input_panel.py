"""Input panel with point/vector fields and action buttons."""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QFormLayout, QGroupBox, QLineEdit, QPushButton
)
from PyQt5.QtCore import pyqtSignal


class InputPanel(QWidget):
	"""Raw text entry for points and vectors.

	The panel does no parsing: it only forwards field text through signals so
	the main window can hand it to the command handlers.
	"""

	add_point_requested = pyqtSignal(str, str)   # x text, y text
	add_vector_requested = pyqtSignal(str, str)  # origin text, tip text
	clear_requested = pyqtSignal()

	def __init__(self, parent=None):
		super().__init__(parent)

		layout = QVBoxLayout()
		layout.setContentsMargins(8, 8, 8, 8)
		layout.setSpacing(10)

		# Point group
		point_group = QGroupBox("Point")
		point_form = QFormLayout()
		self.x_edit = QLineEdit()
		self.x_edit.setPlaceholderText("e.g. 2")
		self.y_edit = QLineEdit()
		self.y_edit.setPlaceholderText("e.g. 3")
		point_form.addRow("X:", self.x_edit)
		point_form.addRow("Y:", self.y_edit)
		self.add_point_btn = QPushButton("Add Point")
		self.add_point_btn.clicked.connect(self._on_add_point)
		point_form.addRow(self.add_point_btn)
		point_group.setLayout(point_form)
		layout.addWidget(point_group)

		# Vector group
		vector_group = QGroupBox("Vector")
		vector_form = QFormLayout()
		self.origin_edit = QLineEdit()
		self.origin_edit.setPlaceholderText("x,y")
		self.tip_edit = QLineEdit()
		self.tip_edit.setPlaceholderText("x,y")
		vector_form.addRow("Origin:", self.origin_edit)
		vector_form.addRow("Tip:", self.tip_edit)
		self.add_vector_btn = QPushButton("Add Vector")
		self.add_vector_btn.clicked.connect(self._on_add_vector)
		vector_form.addRow(self.add_vector_btn)
		vector_group.setLayout(vector_form)
		layout.addWidget(vector_group)

		# Clear
		self.clear_btn = QPushButton("Clear")
		self.clear_btn.setToolTip("Remove all points and vectors")
		self.clear_btn.clicked.connect(self.clear_requested.emit)
		layout.addWidget(self.clear_btn)

		layout.addStretch()
		self.setLayout(layout)

		# Enter in a field triggers its group's action
		self.x_edit.returnPressed.connect(self._on_add_point)
		self.y_edit.returnPressed.connect(self._on_add_point)
		self.origin_edit.returnPressed.connect(self._on_add_vector)
		self.tip_edit.returnPressed.connect(self._on_add_vector)

	def _on_add_point(self):
		"""Handle Add Point button / Enter"""
		self.add_point_requested.emit(self.x_edit.text(), self.y_edit.text())

	def _on_add_vector(self):
		"""Handle Add Vector button / Enter"""
		self.add_vector_requested.emit(self.origin_edit.text(), self.tip_edit.text())
