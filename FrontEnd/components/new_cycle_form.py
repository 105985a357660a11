from PySide6.QtCore import Qt, Signal, QStringListModel
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QLineEdit, QSpinBox, QCompleter
from FrontEnd.styles.design_tokens import COLORS, FONTS


class NewCycleForm(QWidget):
	"""Task + minutes inputs. Bounds come from Settings; the store only rejects structural errors."""
	task_changed = Signal(str)

	def __init__(self, settings):
		super().__init__()
		layout = QHBoxLayout()
		layout.setSpacing(12)

		layout.addWidget(QLabel("I will work on"))
		self.task_input = QLineEdit()
		self.task_input.setObjectName("TaskInput")
		self.task_input.setPlaceholderText("Give your project a name")
		self._suggestions = QStringListModel([])
		completer = QCompleter(self._suggestions, self)
		completer.setCaseSensitivity(Qt.CaseInsensitive)
		self.task_input.setCompleter(completer)
		layout.addWidget(self.task_input, 1)

		layout.addWidget(QLabel("for"))
		self.minutes_input = QSpinBox()
		self.minutes_input.setObjectName("MinutesInput")
		self.minutes_input.setRange(settings.min_minutes, settings.max_minutes)
		self.minutes_input.setSingleStep(5)
		self.minutes_input.setValue(settings.default_minutes)
		layout.addWidget(self.minutes_input)
		layout.addWidget(QLabel("minutes."))

		self.setLayout(layout)
		self.setStyleSheet(f"color: {COLORS['text_strong']}; font-size: {FONTS['text']}px; font-weight: 600;")
		self.task_input.textChanged.connect(self.task_changed.emit)

	def values(self):
		return self.task_input.text(), self.minutes_input.value()

	def has_task(self) -> bool:
		return bool(self.task_input.text().strip())

	def set_suggestions(self, tasks):
		self._suggestions.setStringList(list(tasks))

	def set_locked(self, locked: bool):
		self.task_input.setEnabled(not locked)
		self.minutes_input.setEnabled(not locked)

	def reset(self, default_minutes):
		self.task_input.clear()
		self.minutes_input.setValue(default_minutes)
