"""Cycle records, the history that holds them, and the transitions between states.

Every transition goes through `reduce_cycles`, which takes the current
`CycleHistory` and one action and returns the next history. Histories are
immutable; a transition rebuilds only the entry it touches and reuses the
other `Cycle` objects as-is.
"""
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple, Union


class CycleError(Exception):
	"""Base class for rejected cycle operations."""


class InvalidInput(CycleError, ValueError):
	pass


class InvalidTransition(CycleError, RuntimeError):
	pass


class InvariantViolation(CycleError, AssertionError):
	pass


class CycleStatus(str, Enum):
	IN_PROGRESS = "in_progress"
	INTERRUPTED = "interrupted"
	FINISHED = "finished"


@dataclass(frozen=True)
class Cycle:
	id: str
	task: str
	duration_minutes: int
	start_date: datetime
	interrupted_date: Optional[datetime] = None
	finished_date: Optional[datetime] = None

	@property
	def total_seconds(self) -> int:
		return self.duration_minutes * 60

	@property
	def is_terminal(self) -> bool:
		return self.interrupted_date is not None or self.finished_date is not None


@dataclass(frozen=True)
class CycleHistory:
	cycles: Tuple[Cycle, ...] = ()
	active_cycle_id: Optional[str] = None

	@property
	def active_cycle(self) -> Optional[Cycle]:
		if self.active_cycle_id is None:
			return None
		for cycle in self.cycles:
			if cycle.id == self.active_cycle_id:
				return cycle
		return None

	def _active_index(self) -> int:
		if self.active_cycle_id is None:
			return -1
		for i, cycle in enumerate(self.cycles):
			if cycle.id == self.active_cycle_id:
				return i
		return -1


# ----- Actions -----
@dataclass(frozen=True)
class CreateCycle:
	cycle_id: str
	task: str
	duration_minutes: int
	at: datetime


@dataclass(frozen=True)
class InterruptCycle:
	at: datetime


@dataclass(frozen=True)
class FinishCycle:
	at: datetime


CycleAction = Union[CreateCycle, InterruptCycle, FinishCycle]


def validate_new_cycle(task, duration_minutes) -> str:
	"""Check the structural preconditions of a new cycle and return the cleaned task label."""
	if not isinstance(task, str) or not task.strip():
		raise InvalidInput("Task must be a non-empty label.")
	if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int):
		raise InvalidInput("Duration must be a whole number of minutes.")
	if duration_minutes <= 0:
		raise InvalidInput("Duration must be positive.")
	return task.strip()


def check_can_create(history: CycleHistory, task, duration_minutes) -> str:
	"""Raise if a cycle with these inputs cannot be created now; return the cleaned task label."""
	task = validate_new_cycle(task, duration_minutes)
	if history.active_cycle_id is not None:
		raise InvalidTransition(
			"A cycle is already active; interrupt or finish it first."
		)
	return task


def reduce_cycles(history: CycleHistory, action: CycleAction) -> CycleHistory:
	"""Apply one action. Returns `history` itself when the action is a no-op."""
	if isinstance(action, CreateCycle):
		task = check_can_create(history, action.task, action.duration_minutes)
		cycle = Cycle(
			id=action.cycle_id,
			task=task,
			duration_minutes=action.duration_minutes,
			start_date=action.at,
		)
		return CycleHistory(cycles=history.cycles + (cycle,), active_cycle_id=cycle.id)

	if isinstance(action, InterruptCycle):
		return _end_active(history, interrupted_date=action.at)

	if isinstance(action, FinishCycle):
		return _end_active(history, finished_date=action.at)

	raise TypeError(f"unknown cycle action: {action!r}")


def _end_active(history: CycleHistory, **stamp) -> CycleHistory:
	idx = history._active_index()
	if idx < 0:
		return history
	ended = replace(history.cycles[idx], **stamp)
	cycles = history.cycles[:idx] + (ended,) + history.cycles[idx + 1:]
	return CycleHistory(cycles=cycles, active_cycle_id=None)


def cycle_status(cycle: Cycle) -> CycleStatus:
	if cycle.finished_date is not None:
		return CycleStatus.FINISHED
	if cycle.interrupted_date is not None:
		return CycleStatus.INTERRUPTED
	return CycleStatus.IN_PROGRESS


def check_invariants(history: CycleHistory) -> None:
	"""Raise InvariantViolation if `history` is not a reachable state."""
	ids = [c.id for c in history.cycles]
	if len(ids) != len(set(ids)):
		raise InvariantViolation("cycle ids are not unique")
	for cycle in history.cycles:
		if cycle.interrupted_date is not None and cycle.finished_date is not None:
			raise InvariantViolation(f"cycle {cycle.id} is both interrupted and finished")
	in_progress = [c for c in history.cycles if not c.is_terminal]
	if len(in_progress) > 1:
		raise InvariantViolation("more than one cycle is in progress")
	if history.active_cycle_id is None:
		if in_progress:
			raise InvariantViolation(f"cycle {in_progress[0].id} is in progress but not active")
		return
	matches = [c for c in history.cycles if c.id == history.active_cycle_id]
	if len(matches) != 1:
		raise InvariantViolation("active cycle id does not name exactly one cycle")
	if matches[0].is_terminal:
		raise InvariantViolation("active cycle already has a terminal timestamp")


def check_transition(before: CycleHistory, after: CycleHistory) -> None:
	"""Raise InvariantViolation if `after` rewrote anything `before` had settled."""
	if len(after.cycles) < len(before.cycles):
		raise InvariantViolation("cycle history shrank")
	for old, new in zip(before.cycles, after.cycles):
		if (old.id, old.task, old.duration_minutes, old.start_date) != (
			new.id, new.task, new.duration_minutes, new.start_date
		):
			raise InvariantViolation(f"cycle {old.id} changed identity fields")
		if old.is_terminal and old != new:
			raise InvariantViolation(f"terminal cycle {old.id} was modified")
