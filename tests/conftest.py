from datetime import datetime, timedelta, timezone

import pytest
from PySide6.QtCore import QCoreApplication

from BackEnd.services.countdown_engine import CountdownEngine
from BackEnd.services.cycle_store import CycleStore


class FakeClock:
	"""Settable wall clock; call it to read the time."""

	def __init__(self, start=None):
		self.current = start or datetime(2024, 1, 1, 9, 0, 0, tzinfo=timezone.utc)

	def __call__(self):
		return self.current

	def advance(self, seconds):
		self.current += timedelta(seconds=seconds)

	def set_offset(self, origin, seconds):
		self.current = origin + timedelta(seconds=seconds)


@pytest.fixture(scope="session", autouse=True)
def qapp():
	# QTimer needs a core application on the main thread
	app = QCoreApplication.instance() or QCoreApplication([])
	yield app


@pytest.fixture
def clock():
	return FakeClock()


@pytest.fixture
def store(clock):
	return CycleStore(now=clock)


@pytest.fixture
def engine(store, clock):
	eng = CountdownEngine(store, now=clock)
	yield eng
	eng.stop()


@pytest.fixture
def finish_calls(store):
	"""Record every call the engine makes to mark_active_cycle_finished."""
	calls = []
	original = store.mark_active_cycle_finished

	def spy():
		calls.append(store.active_cycle_id)
		return original()

	store.mark_active_cycle_finished = spy
	return calls
