from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QListWidget,
	QStackedWidget, QListWidgetItem, QTableWidget, QTableWidgetItem, QSizePolicy
)
from PySide6.QtGui import QColor
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from PySide6.QtCore import Qt, QTimer
from BackEnd.core.clock import system_now
from BackEnd.domain.cycles import CycleError, CycleStatus
from BackEnd.services.history_service import STATUS_LABELS, history_rows, status_summary, task_suggestions
from FrontEnd.components.new_cycle_form import NewCycleForm
from FrontEnd.styles.design_tokens import COLORS, app_stylesheet

APP_TITLE = "Focus Cycles"

STATUS_COLORS = {
	CycleStatus.IN_PROGRESS: COLORS['status_in_progress'],
	CycleStatus.INTERRUPTED: COLORS['status_interrupted'],
	CycleStatus.FINISHED: COLORS['status_finished'],
}


class MainWindow(QMainWindow):
	def __init__(self, timer_service):
		super().__init__()
		self.timer_service = timer_service
		self.settings = timer_service.settings
		self.setWindowTitle(APP_TITLE)
		self.resize(1000, 650)
		self.setStyleSheet(app_stylesheet())

		# --- Sidebar ---
		self.sidebar = QListWidget()
		self.sidebar.setFixedWidth(200)
		self.sidebar.setSpacing(16)
		self.sidebar.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
		self.sidebar.addItem(QListWidgetItem("Timer"))
		self.sidebar.addItem(QListWidgetItem("History"))
		self.sidebar.setCurrentRow(0)

		# --- Pages ---
		self.stack = QStackedWidget()
		self.timer_tab = self._build_timer_tab()
		self.history_tab = self._build_history_tab()
		self.stack.addWidget(self.timer_tab)
		self.stack.addWidget(self.history_tab)

		main_layout = QHBoxLayout()
		main_layout.setContentsMargins(0, 0, 0, 0)
		main_layout.setSpacing(0)
		main_layout.addWidget(self.sidebar)
		main_layout.addWidget(self.stack)
		container = QWidget()
		container.setLayout(main_layout)
		self.setCentralWidget(container)

		self.sidebar.currentRowChanged.connect(self.stack.setCurrentIndex)

		# --- Service wiring ---
		self.timer_service.display_changed.connect(self._on_display)
		self.timer_service.state_changed.connect(self._on_state)
		self.timer_service.store.history_changed.connect(self._refresh_history)

		# Relative start times in the history table go stale; refresh them once a minute.
		self._history_clock = QTimer(self)
		self._history_clock.setInterval(60 * 1000)
		self._history_clock.timeout.connect(self._refresh_history)
		self._history_clock.start()

		self._on_state("running" if self.timer_service.running else "idle")
		self._on_display(self.timer_service.display())
		self._refresh_history()

	def closeEvent(self, event):
		# Release the sampling timer; history is in-memory only.
		self._history_clock.stop()
		self.timer_service.shutdown()
		super().closeEvent(event)

	def _build_timer_tab(self):
		w = QWidget()
		outer = QVBoxLayout()
		outer.setContentsMargins(32, 32, 32, 32)
		outer.setSpacing(0)
		outer.addStretch()

		timer_card = QWidget()
		timer_card_layout = QVBoxLayout()
		timer_card_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
		timer_card.setLayout(timer_card_layout)
		timer_card.setObjectName("TimerCard")

		self.form = NewCycleForm(self.settings)
		timer_card_layout.addWidget(self.form)

		self.timer_label = QLabel("00:00")
		self.timer_label.setObjectName("TimerLabel")
		self.timer_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		timer_card_layout.addWidget(self.timer_label)

		# One button: Start while idle, Interrupt while a cycle runs
		self.start_stop_btn = QPushButton("Start")
		self.start_stop_btn.setObjectName("StartBtn")
		self.start_stop_btn.setMinimumHeight(56)
		timer_card_layout.addSpacing(24)
		timer_card_layout.addWidget(self.start_stop_btn)

		self.status_label = QLabel("")
		self.status_label.setObjectName("StatusLabel")
		self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		timer_card_layout.addWidget(self.status_label)

		outer.addWidget(timer_card, alignment=Qt.AlignmentFlag.AlignHCenter)
		outer.addStretch()
		w.setLayout(outer)

		self.start_stop_btn.clicked.connect(self._start_stop)
		self.form.task_changed.connect(lambda _text: self._set_buttons("running" if self.timer_service.running else "idle"))
		self.form.task_input.returnPressed.connect(self._start_stop)
		return w

	def _build_history_tab(self):
		w = QWidget()
		layout = QVBoxLayout()
		layout.setAlignment(Qt.AlignmentFlag.AlignTop)
		layout.setContentsMargins(32, 32, 32, 32)

		title = QLabel("My history")
		title.setStyleSheet(f"font-size: 22px; font-weight: bold; color: {COLORS['text_strong']};")
		layout.addWidget(title)

		# Bar chart (matplotlib)
		self.figure = Figure(figsize=(5, 2.5))
		self.canvas = FigureCanvas(self.figure)
		layout.addWidget(self.canvas)

		# Table
		self.history_table = QTableWidget()
		self.history_table.setColumnCount(4)
		self.history_table.setHorizontalHeaderLabels(["Task", "Duration", "Started", "Status"])
		self.history_table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
		self.history_table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
		self.history_table.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		self.history_table.horizontalHeader().setStretchLastSection(True)
		layout.addWidget(self.history_table)
		w.setLayout(layout)
		return w

	def _update_bar_chart(self, cycles, now):
		totals = status_summary(cycles, now)
		statuses = list(CycleStatus)
		x = [STATUS_LABELS[s] for s in statuses]
		y = [totals[s].focused_sec / 60 for s in statuses]

		self.figure.clear()
		self.figure.patch.set_alpha(0.0)
		ax = self.figure.add_subplot(111)
		ax.set_facecolor(COLORS['chart_bg'])
		bars = ax.bar(x, y, color=[STATUS_COLORS[s] for s in statuses], alpha=0.9)

		for bar, status in zip(bars, statuses):
			count = totals[status].count
			if count:
				ax.text(bar.get_x() + bar.get_width()/2, bar.get_height(),
				       f"{count} cycle{'s' if count != 1 else ''}", ha='center', va='bottom',
				       fontsize=9, fontweight='600', color=COLORS['text_strong'])

		ax.set_ylabel("Minutes focused", fontsize=12, fontweight='600', color=COLORS['text_strong'])
		ax.set_ylim(bottom=0)
		ax.grid(True, axis='y', alpha=0.25, linestyle='--', linewidth=0.8, color=COLORS['chart_grid'])
		ax.set_axisbelow(True)
		for spine in ['top', 'right']:
			ax.spines[spine].set_visible(False)
		self.figure.tight_layout()
		self.canvas.draw()

	def _on_display(self, display):
		self.timer_label.setText(display.text)
		self.setWindowTitle(self.timer_service.window_title(APP_TITLE))

	def _on_state(self, state):
		self._set_buttons(state)
		self.form.set_locked(state == "running")
		if state == "idle":
			self.form.reset(self.settings.default_minutes)

	def _set_buttons(self, state):
		if state == "running":
			self.start_stop_btn.setObjectName("StopBtn")
			self.start_stop_btn.setText("Interrupt")
			self.start_stop_btn.setEnabled(True)
		else:
			self.start_stop_btn.setObjectName("StartBtn")
			self.start_stop_btn.setText("Start")
			# submit stays disabled until a task is typed
			self.start_stop_btn.setEnabled(self.form.has_task())
		# re-polish so the objectName selector applies
		self.start_stop_btn.style().unpolish(self.start_stop_btn)
		self.start_stop_btn.style().polish(self.start_stop_btn)

	def _start_stop(self):
		if self.timer_service.running:
			self.timer_service.interrupt()
			return
		task, minutes = self.form.values()
		try:
			self.timer_service.create_cycle(task, minutes)
		except CycleError as exc:
			self.status_label.setText(str(exc))
			return
		self.status_label.setText("")

	def _refresh_history(self):
		cycles = self.timer_service.store.cycles
		now = system_now()
		self.form.set_suggestions(task_suggestions(cycles))
		rows = history_rows(cycles, now)
		self.history_table.setRowCount(len(rows))
		for i, row in enumerate(rows):
			self.history_table.setItem(i, 0, QTableWidgetItem(row.task))
			self.history_table.setItem(i, 1, QTableWidgetItem(row.duration))
			self.history_table.setItem(i, 2, QTableWidgetItem(row.started))
			status_item = QTableWidgetItem(row.status_label)
			status_item.setForeground(QColor(STATUS_COLORS[row.status]))
			self.history_table.setItem(i, 3, status_item)
		self._update_bar_chart(cycles, now)
