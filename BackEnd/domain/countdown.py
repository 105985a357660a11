from dataclasses import dataclass

from BackEnd.core.clock import fmt_mmss


@dataclass(frozen=True)
class CountdownDisplay:
	remaining_seconds: int
	minutes: str
	seconds: str
	is_active: bool

	@property
	def text(self) -> str:
		return f"{self.minutes}:{self.seconds}"


def remaining_seconds(total_seconds: int, elapsed: int) -> int:
	return max(total_seconds - elapsed, 0)


def countdown_display(total_seconds: int, elapsed: int, is_active: bool = True) -> CountdownDisplay:
	"""Split the time left into zero-padded minute and second fields."""
	remaining = remaining_seconds(total_seconds, elapsed)
	return CountdownDisplay(
		remaining_seconds=remaining,
		minutes=f"{remaining // 60:02}",
		seconds=f"{remaining % 60:02}",
		is_active=is_active,
	)


def window_title(base: str, display: CountdownDisplay) -> str:
	# countdown only while a cycle runs
	if not display.is_active:
		return base
	return f"{fmt_mmss(display.remaining_seconds)} - {base}"
