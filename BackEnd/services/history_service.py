from dataclasses import dataclass
from typing import Dict, List

from BackEnd.core.clock import fmt_relative, seconds_between
from BackEnd.domain.cycles import CycleStatus, cycle_status

STATUS_LABELS = {
	CycleStatus.IN_PROGRESS: "In progress",
	CycleStatus.INTERRUPTED: "Interrupted",
	CycleStatus.FINISHED: "Finished",
}


@dataclass(frozen=True)
class HistoryRow:
	cycle_id: str
	task: str
	duration: str
	started: str
	status: CycleStatus

	@property
	def status_label(self) -> str:
		return STATUS_LABELS[self.status]


@dataclass(frozen=True)
class StatusTotals:
	count: int = 0
	focused_sec: int = 0


def task_suggestions(cycles, limit=None) -> List[str]:
	"""Distinct task labels, most recently started first."""
	seen = []
	for cycle in reversed(cycles):
		if cycle.task not in seen:
			seen.append(cycle.task)
			if limit is not None and len(seen) >= limit:
				break
	return seen


def history_rows(cycles, now) -> List[HistoryRow]:
	"""Table rows for the history tab, newest first."""
	return [
		HistoryRow(
			cycle_id=c.id,
			task=c.task,
			duration=f"{c.duration_minutes} minutes",
			started=fmt_relative(c.start_date, now),
			status=cycle_status(c),
		)
		for c in reversed(cycles)
	]


def focused_seconds(cycle, now) -> int:
	"""Seconds actually spent on a cycle, capped at its planned length."""
	end = cycle.finished_date or cycle.interrupted_date or now
	return min(seconds_between(end, cycle.start_date), cycle.total_seconds)


def status_summary(cycles, now) -> Dict[CycleStatus, StatusTotals]:
	totals = {status: StatusTotals() for status in CycleStatus}
	for cycle in cycles:
		status = cycle_status(cycle)
		cur = totals[status]
		totals[status] = StatusTotals(
			count=cur.count + 1,
			focused_sec=cur.focused_sec + focused_seconds(cycle, now),
		)
	return totals
