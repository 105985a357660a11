from datetime import timedelta

from BackEnd.domain.cycles import CycleStatus
from BackEnd.services.history_service import (
	focused_seconds, history_rows, status_summary, task_suggestions
)


def _populate(store, clock):
	store.create_cycle("Read", 25)
	clock.advance(25 * 60)
	store.mark_active_cycle_finished()
	store.create_cycle("Write", 10)
	clock.advance(120)
	store.interrupt()
	store.create_cycle("Read", 5)
	clock.advance(60)


def test_task_suggestions_most_recent_first(store, clock):
	_populate(store, clock)
	assert task_suggestions(store.cycles) == ["Read", "Write"]
	assert task_suggestions(store.cycles, limit=1) == ["Read"]
	assert task_suggestions(()) == []


def test_history_rows_newest_first(store, clock):
	_populate(store, clock)
	rows = history_rows(store.cycles, clock())
	assert [r.task for r in rows] == ["Read", "Write", "Read"]
	assert [r.status_label for r in rows] == ["In progress", "Interrupted", "Finished"]
	assert rows[0].duration == "5 minutes"
	assert rows[0].started == "1 minute ago"
	assert rows[2].started == "28 minutes ago"


def test_status_summary_totals(store, clock):
	_populate(store, clock)
	totals = status_summary(store.cycles, clock())
	assert totals[CycleStatus.FINISHED].count == 1
	assert totals[CycleStatus.FINISHED].focused_sec == 1500
	assert totals[CycleStatus.INTERRUPTED].focused_sec == 120
	assert totals[CycleStatus.IN_PROGRESS].focused_sec == 60


def test_focused_seconds_capped_at_planned_length(store, clock):
	store.create_cycle("Read", 1)
	clock.advance(500)
	store.mark_active_cycle_finished()
	assert focused_seconds(store.cycles[0], clock() + timedelta(hours=1)) == 60
