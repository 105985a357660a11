import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler = None


def configure_logging(level="WARNING"):
	"""Attach one stream handler to the root logger and set its level."""
	global _handler
	root = logging.getLogger()
	if _handler is None:
		_handler = logging.StreamHandler()
		_handler.setFormatter(logging.Formatter(LOG_FORMAT))
		root.addHandler(_handler)
	root.setLevel(level)
	return root
