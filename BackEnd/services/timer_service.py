from PySide6.QtCore import QObject, Signal

from BackEnd.core.clock import seconds_between, system_now
from BackEnd.core.config import Settings
from BackEnd.domain.countdown import countdown_display, window_title
from BackEnd.services.countdown_engine import CountdownEngine
from BackEnd.services.cycle_store import CycleStore


class TimerService(QObject):
	display_changed = Signal(object)  # emits CountdownDisplay
	state_changed = Signal(str)  # emits 'running', 'idle'

	def __init__(self, store=None, engine=None, now=None, settings=None, parent=None):
		super().__init__(parent)
		self.settings = settings or Settings()
		self._now = now or system_now
		self.store = store or CycleStore(now=self._now, parent=self)
		self.engine = engine or CountdownEngine(
			self.store, now=self._now, interval_ms=self.settings.tick_interval_ms, parent=self
		)
		self.store.elapsed_changed.connect(self._emit_display)
		self.store.cycle_started.connect(self._on_started)
		self.store.cycle_ended.connect(self._on_ended)

	@property
	def running(self) -> bool:
		return self.store.active_cycle is not None

	def create_cycle(self, task, minutes) -> str:
		return self.store.create_cycle(task, minutes)

	def interrupt(self):
		"""Interrupt the active cycle unless its time is already up, in which case it finishes."""
		active = self.store.active_cycle
		if active is None:
			return None
		# decided from the clock so it holds even when the engine is stopped
		if seconds_between(self._now(), active.start_date) >= active.total_seconds:
			self.engine.stop()
			self.store.set_elapsed_seconds(active.total_seconds)
			self.store.mark_active_cycle_finished()
			return None
		return self.store.interrupt()

	def display(self):
		active = self.store.active_cycle
		if active is None:
			return countdown_display(0, 0, is_active=False)
		return countdown_display(active.total_seconds, self.store.elapsed_seconds)

	def window_title(self, base: str) -> str:
		return window_title(base, self.display())

	def shutdown(self) -> None:
		self.engine.stop()

	def _emit_display(self, _elapsed=None):
		self.display_changed.emit(self.display())

	def _on_started(self, _cycle):
		self.state_changed.emit("running")
		self._emit_display()

	def _on_ended(self, _cycle):
		self.state_changed.emit("idle")
		self._emit_display()
