import logging

from PySide6.QtCore import QObject, Signal, QTimer

from BackEnd.core.clock import seconds_between, system_now

logger = logging.getLogger(__name__)


class CountdownEngine(QObject):
	"""
	Samples the active cycle once per interval and finishes it when its time is up.

	Elapsed time is always recomputed from the cycle's start date and the
	current wall-clock time, so late or skipped ticks never accumulate error.
	The QTimer is held only while bound to an active cycle.
	"""
	tick = Signal(int)  # emits reported elapsed seconds
	state_changed = Signal(str)  # 'sampling' | 'idle'

	def __init__(self, store, now=None, interval_ms=1000, parent=None):
		super().__init__(parent)
		self._store = store
		self._now = now or system_now
		self._cycle_id = None
		self._start_date = None
		self._total_sec = 0
		self._timer = QTimer(self)
		self._timer.setInterval(int(interval_ms))
		self._timer.timeout.connect(self.sample)

		store.cycle_started.connect(self.begin)
		store.cycle_ended.connect(self._on_cycle_ended)
		if store.active_cycle is not None:
			self.begin(store.active_cycle)

	@property
	def is_sampling(self) -> bool:
		return self._timer.isActive()

	@property
	def bound_cycle_id(self):
		return self._cycle_id

	@property
	def interval_ms(self) -> int:
		return self._timer.interval()

	def begin(self, cycle) -> None:
		# release any previous trigger before taking a new one
		self.stop()
		if cycle.is_terminal or cycle.id != self._store.active_cycle_id:
			logger.debug("not sampling cycle %s, it is not active", cycle.id)
			return
		self._cycle_id = cycle.id
		self._start_date = cycle.start_date
		self._total_sec = cycle.total_seconds
		self._timer.start()
		logger.debug("sampling cycle %s (%ds)", cycle.id, self._total_sec)
		self.state_changed.emit("sampling")
		self.sample()

	def stop(self) -> None:
		if self._cycle_id is None and not self._timer.isActive():
			return
		self._timer.stop()
		self._cycle_id = None
		self._start_date = None
		self._total_sec = 0
		self.state_changed.emit("idle")

	def sample(self):
		"""Take one sample. Returns the reported elapsed seconds, or None when idle."""
		if self._cycle_id is None:
			return None
		if self._store.active_cycle_id != self._cycle_id:
			self.stop()
			return None

		elapsed = seconds_between(self._now(), self._start_date)
		if elapsed >= self._total_sec:
			elapsed = self._total_sec
			self.stop()
			self._store.set_elapsed_seconds(elapsed)
			self.tick.emit(elapsed)
			self._store.mark_active_cycle_finished()
			return elapsed

		logger.debug("sample elapsed=%d", elapsed)
		self._store.set_elapsed_seconds(elapsed)
		self.tick.emit(elapsed)
		return elapsed

	def _on_cycle_ended(self, cycle) -> None:
		if cycle.id == self._cycle_id:
			self.stop()
