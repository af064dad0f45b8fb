# SitemapLens — Logging configuration (rotating file + stderr)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import logging.handlers
import os
from typing import Optional


NOISY_LOGGERS = ("urllib3", "requests")


def configure_logging(level: str = "INFO", log_dir: Optional[str] = "logs") -> None:
	"""Configure the root logger for CLI runs.

	Records go to stderr so entry output on stdout stays clean. When
	``log_dir`` is set, a rotating file ``sitemaplens.log`` is written there too.
	"""
	fmt = logging.Formatter("%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s")

	root = logging.getLogger()
	root.setLevel(getattr(logging, level.upper(), logging.INFO))

	# Clear existing handlers in case of re-init
	for h in list(root.handlers):
		root.removeHandler(h)

	stream = logging.StreamHandler()
	stream.setFormatter(fmt)
	root.addHandler(stream)

	if log_dir:
		os.makedirs(log_dir, exist_ok=True)
		file_handler = logging.handlers.RotatingFileHandler(
			os.path.join(log_dir, "sitemaplens.log"),
			maxBytes=2 * 1024 * 1024,
			backupCount=3,
			encoding="utf-8",
		)
		file_handler.setFormatter(fmt)
		root.addHandler(file_handler)

	# connection pool chatter drowns per-sitemap records at DEBUG
	for name in NOISY_LOGGERS:
		logging.getLogger(name).setLevel(max(root.level, logging.WARNING))
