import logging
import os
from dataclasses import dataclass

ENV_PREFIX = "FOCUSCYCLES_"


class ConfigError(ValueError):
	pass


@dataclass(frozen=True)
class Settings:
	tick_interval_ms: int = 1000
	min_minutes: int = 1
	max_minutes: int = 60
	default_minutes: int = 25
	log_level: str = "WARNING"


def _int_var(environ, name, default):
	raw = environ.get(ENV_PREFIX + name)
	if raw is None or raw.strip() == "":
		return default
	try:
		return int(raw.strip())
	except ValueError:
		raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}")


def load_settings(environ=None) -> Settings:
	"""Build Settings from FOCUSCYCLES_* environment variables."""
	if environ is None:
		environ = os.environ
	defaults = Settings()
	tick = _int_var(environ, "TICK_MS", defaults.tick_interval_ms)
	lo = _int_var(environ, "MIN_MINUTES", defaults.min_minutes)
	hi = _int_var(environ, "MAX_MINUTES", defaults.max_minutes)
	default_minutes = _int_var(environ, "DEFAULT_MINUTES", defaults.default_minutes)
	level = (environ.get(ENV_PREFIX + "LOG_LEVEL") or defaults.log_level).strip().upper()

	if tick <= 0:
		raise ConfigError("tick interval must be positive")
	if lo < 1:
		raise ConfigError("minimum minutes must be at least 1")
	if hi < lo:
		raise ConfigError("maximum minutes must not be below the minimum")
	if not lo <= default_minutes <= hi:
		raise ConfigError(f"default minutes must be within {lo}-{hi}")
	if not isinstance(logging.getLevelName(level), int):
		raise ConfigError(f"unknown log level {level!r}")

	return Settings(
		tick_interval_ms=tick,
		min_minutes=lo,
		max_minutes=hi,
		default_minutes=default_minutes,
		log_level=level,
	)
