"""
Logging configuration module.

Provides centralized logging setup for the application with
configurable log levels, consistent formatting and masking of
personal data (employee/leader emails, audit link tokens).
"""

from __future__ import annotations

import logging
import re

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# e.g. jane.doe@example.com -> j***@example.com
_EMAIL_RE = re.compile(
    r"\b([A-Za-z0-9])[A-Za-z0-9._%+-]*(@[A-Za-z0-9.-]+\.[A-Za-z]{2,})\b")

# Leader links carry the rater token as the last path segment,
# e.g. https://host/audit/6f1c...-...
_TOKEN_RE = re.compile(r"(/audit/)[A-Za-z0-9-]+", re.IGNORECASE)


def sanitize_text(text: str) -> str:
	"""Mask personal data in text.

	Email addresses keep their first character and domain; audit link
	tokens (``/audit/<token>``) are replaced with ``***``.

	Parameters:
		text: Raw text that may contain emails or leader links.

	Returns:
		Text with emails and tokens masked.
	"""
	text = _EMAIL_RE.sub(r"\1***\2", text)
	return _TOKEN_RE.sub(r"\1***", text)


class PiiMaskingFilter(logging.Filter):
	"""Logging filter that masks personal data in log records.

	Installed on the root logger's handlers so records from every
	module logger are masked without call-site awareness.
	"""

	def filter(self, record: logging.LogRecord) -> bool:
		"""Sanitize the log record message and args."""
		if isinstance(record.msg, str):
			record.msg = sanitize_text(record.msg)
		if record.args:
			if isinstance(record.args, dict):
				record.args = {
				    k: sanitize_text(v) if isinstance(v, str) else v
				    for k, v in record.args.items()
				}
			elif isinstance(record.args, tuple):
				record.args = tuple(
				    sanitize_text(a) if isinstance(a, str) else a
				    for a in record.args)
		return True


def configure_logging(level: str = "info") -> None:
	"""
	Configure basic logging with level, format, and PII masking.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = logging.getLevelName(level.upper())
	if not isinstance(lvl, int):
		lvl = logging.INFO
	logging.basicConfig(level=lvl, format=LOG_FORMAT)
	# Root logger filters never see records propagated from child
	# loggers, so the filter goes on each handler, once.
	for handler in logging.getLogger().handlers:
		if not any(isinstance(f, PiiMaskingFilter) for f in handler.filters):
			handler.addFilter(PiiMaskingFilter())


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = [
    "configure_logging",
    "get_logger",
    "sanitize_text",
    "PiiMaskingFilter",
]
