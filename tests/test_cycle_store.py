from datetime import timedelta

import pytest

from BackEnd.domain.cycles import InvalidInput, InvalidTransition, check_invariants, check_transition
from BackEnd.services.cycle_store import CycleStore


def test_create_then_interrupt_round_trip(store, clock):
	cid = store.create_cycle("Write spec", 25)
	clock.advance(90)
	ended = store.interrupt()

	cycle = store.cycles[0]
	assert ended == cycle
	assert cycle.id == cid
	assert cycle.start_date <= cycle.interrupted_date
	assert cycle.finished_date is None
	assert store.active_cycle_id is None
	assert store.active_cycle is None


def test_interrupt_is_idempotent(store, clock):
	store.create_cycle("Write spec", 25)
	clock.advance(10)
	store.interrupt()
	after_first = store.history
	clock.advance(10)
	assert store.interrupt() is None
	assert store.history is after_first


def test_second_finish_is_a_noop(store, clock):
	store.create_cycle("Focus", 1)
	clock.advance(60)
	store.mark_active_cycle_finished()
	stamped = store.cycles[0].finished_date
	clock.advance(30)
	assert store.mark_active_cycle_finished() is None
	assert store.cycles[0].finished_date == stamped


def test_noop_transitions_emit_nothing(store):
	events = []
	store.history_changed.connect(lambda: events.append("history"))
	store.cycle_ended.connect(lambda c: events.append("ended"))
	store.interrupt()
	store.mark_active_cycle_finished()
	assert events == []


def test_create_rejects_invalid_input_and_keeps_state(store):
	events = []
	store.history_changed.connect(lambda: events.append("history"))
	before = store.history
	with pytest.raises(InvalidInput):
		store.create_cycle("", 25)
	with pytest.raises(InvalidInput):
		store.create_cycle("Focus", 0)
	assert store.history is before
	assert events == []


def test_create_while_active_keeps_existing_cycle(store, clock):
	first = store.create_cycle("First", 25)
	clock.advance(5)
	with pytest.raises(InvalidTransition):
		store.create_cycle("Second", 25)
	assert store.active_cycle_id == first
	assert len(store.cycles) == 1
	assert not store.active_cycle.is_terminal


def test_ids_unique_within_same_instant(store):
	# the fake clock never moves here, so every cycle starts at the same instant
	ids = []
	for i in range(5):
		ids.append(store.create_cycle(f"Task {i}", 5))
		store.interrupt()
	assert len(set(ids)) == 5
	assert len({c.start_date for c in store.cycles}) == 1


def test_id_factory_is_injectable(clock):
	counter = iter(range(100))
	s = CycleStore(now=clock, id_factory=lambda: f"cycle-{next(counter)}")
	assert s.create_cycle("A", 1) == "cycle-0"


def test_create_resets_elapsed_and_emits_signals(store, clock):
	started, elapsed = [], []
	store.cycle_started.connect(started.append)
	store.elapsed_changed.connect(elapsed.append)
	store.create_cycle("A", 5)
	store.set_elapsed_seconds(42)
	store.interrupt()
	store.create_cycle("B", 5)
	assert store.elapsed_seconds == 0
	assert elapsed == [0, 42, 0]
	assert [c.task for c in started] == ["A", "B"]


def test_set_elapsed_only_emits_on_change(store):
	elapsed = []
	store.elapsed_changed.connect(elapsed.append)
	store.set_elapsed_seconds(0)
	store.set_elapsed_seconds(3)
	store.set_elapsed_seconds(3)
	assert elapsed == [3]


def test_cycle_ended_carries_terminal_cycle(store, clock):
	ended = []
	store.cycle_ended.connect(ended.append)
	store.create_cycle("A", 5)
	clock.advance(300)
	store.mark_active_cycle_finished()
	assert len(ended) == 1
	assert ended[0].finished_date == ended[0].start_date + timedelta(seconds=300)


def test_invariants_hold_across_operation_sequence(store, clock):
	ops = [
		lambda: store.create_cycle("A", 1),
		store.interrupt,
		store.interrupt,
		lambda: store.create_cycle("B", 2),
		lambda: store.create_cycle("C", 2),
		store.mark_active_cycle_finished,
		store.mark_active_cycle_finished,
		lambda: store.create_cycle("", 2),
		lambda: store.create_cycle("D", 3),
		store.interrupt,
	]
	sizes = []
	for op in ops:
		before = store.history
		clock.advance(7)
		try:
			op()
		except (InvalidInput, InvalidTransition):
			assert store.history is before
		check_invariants(store.history)
		check_transition(before, store.history)
		sizes.append(len(store.cycles))
	assert sizes == sorted(sizes)
	assert [c.task for c in store.cycles] == ["A", "B", "D"]


def test_rejected_create_draws_no_id(clock):
	counter = iter(range(100))
	s = CycleStore(now=clock, id_factory=lambda: f"cycle-{next(counter)}")
	with pytest.raises(InvalidInput):
		s.create_cycle("", 5)
	assert s.create_cycle("A", 5) == "cycle-0"
	with pytest.raises(InvalidTransition):
		s.create_cycle("B", 5)
	s.interrupt()
	assert s.create_cycle("C", 5) == "cycle-1"
