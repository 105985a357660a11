import logging
import uuid

from PySide6.QtCore import QObject, Signal

from BackEnd.core.clock import system_now
from BackEnd.domain.cycles import (
	CreateCycle, CycleError, CycleHistory, FinishCycle, InterruptCycle, check_can_create, reduce_cycles
)

logger = logging.getLogger(__name__)


def new_cycle_id():
	return uuid.uuid4().hex


class CycleStore(QObject):
	"""
	Single owner of the cycle history and the active-cycle slot.
	All changes go through create_cycle / interrupt / mark_active_cycle_finished.
	"""
	cycle_started = Signal(object)  # Cycle
	cycle_ended = Signal(object)  # terminal Cycle
	history_changed = Signal()
	elapsed_changed = Signal(int)

	def __init__(self, now=None, id_factory=None, parent=None):
		super().__init__(parent)
		self._now = now or system_now
		self._new_id = id_factory or new_cycle_id
		self._history = CycleHistory()
		self._elapsed_sec = 0

	# ----- Read model -----
	@property
	def history(self) -> CycleHistory:
		return self._history

	@property
	def cycles(self):
		return self._history.cycles

	@property
	def active_cycle_id(self):
		return self._history.active_cycle_id

	@property
	def active_cycle(self):
		return self._history.active_cycle

	@property
	def elapsed_seconds(self) -> int:
		return self._elapsed_sec

	# ----- Transitions -----
	def create_cycle(self, task, duration_minutes) -> str:
		"""Start a new cycle and make it active. Raises CycleError and changes nothing on rejection."""
		try:
			# reject before an id or timestamp is drawn
			check_can_create(self._history, task, duration_minutes)
		except CycleError as exc:
			logger.warning("create_cycle rejected: %s", exc)
			raise
		action = CreateCycle(
			cycle_id=self._new_id(),
			task=task,
			duration_minutes=duration_minutes,
			at=self._now(),
		)
		self._history = reduce_cycles(self._history, action)
		cycle = self._history.active_cycle
		logger.info("cycle created id=%s task=%r minutes=%d", cycle.id, cycle.task, cycle.duration_minutes)
		self._elapsed_sec = 0
		self.elapsed_changed.emit(0)
		self.history_changed.emit()
		self.cycle_started.emit(cycle)
		return cycle.id

	def interrupt(self):
		"""Interrupt the active cycle. Returns the ended cycle, or None if nothing was active."""
		ended = self._end(InterruptCycle(at=self._now()))
		if ended is not None:
			logger.info("cycle interrupted id=%s", ended.id)
		return ended

	def mark_active_cycle_finished(self):
		"""Finish the active cycle. Returns the ended cycle, or None if nothing was active."""
		ended = self._end(FinishCycle(at=self._now()))
		if ended is not None:
			logger.info("cycle finished id=%s", ended.id)
		return ended

	def set_elapsed_seconds(self, seconds: int) -> None:
		seconds = int(seconds)
		if seconds == self._elapsed_sec:
			return
		self._elapsed_sec = seconds
		self.elapsed_changed.emit(seconds)

	def _end(self, action):
		before = self._history
		active_id = before.active_cycle_id
		after = reduce_cycles(before, action)
		if after is before:
			logger.debug("%s ignored, no active cycle", type(action).__name__)
			return None
		self._history = after
		ended = next(c for c in after.cycles if c.id == active_id)
		self.history_changed.emit()
		self.cycle_ended.emit(ended)
		return ended
