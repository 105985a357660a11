import math
from datetime import datetime, timezone


def system_now():
	"""Return the current wall-clock time as an aware UTC datetime."""
	return datetime.now(timezone.utc)


def seconds_between(later: datetime, earlier: datetime) -> int:
	"""Whole seconds from `earlier` to `later`, rounded down, never negative."""
	return max(0, math.floor((later - earlier).total_seconds()))


def fmt_mmss(seconds: int) -> str:
	"""Format seconds as MM:SS."""
	seconds = max(0, int(seconds))
	return f"{seconds // 60:02}:{seconds % 60:02}"


def fmt_relative(then: datetime, now: datetime) -> str:
	"""Human text for how long ago `then` was, e.g. '5 minutes ago'."""
	delta = seconds_between(now, then)
	if delta < 45:
		return "less than a minute ago"
	minutes = round(delta / 60)
	if minutes < 60:
		return "1 minute ago" if minutes == 1 else f"{minutes} minutes ago"
	hours = round(minutes / 60)
	if hours < 24:
		return "about 1 hour ago" if hours == 1 else f"about {hours} hours ago"
	days = round(hours / 24)
	return "1 day ago" if days == 1 else f"{days} days ago"
