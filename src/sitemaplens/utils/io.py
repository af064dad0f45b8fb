# SitemapLens — IO helpers (JSONL and CSV export of entries)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import csv
import json
import os
from typing import Iterable

from ..core.models import SitemapEntry


EXPORT_FORMATS = (".jsonl", ".csv")


def ensure_parent_dir(path: str) -> None:
	parent = os.path.dirname(path)
	if parent:
		os.makedirs(parent, exist_ok=True)


def write_jsonl(path: str, entries: Iterable[SitemapEntry]) -> int:
	count = 0
	with open(path, "w", encoding="utf-8") as f:
		for e in entries:
			f.write(json.dumps(e.to_dict(), ensure_ascii=False) + "\n")
			count += 1
	return count


def write_csv(path: str, entries: Iterable[SitemapEntry]) -> int:
	count = 0
	with open(path, "w", encoding="utf-8", newline="") as f:
		writer = csv.writer(f)
		writer.writerow(["location", "last_modified"])
		for e in entries:
			writer.writerow([e.location, e.last_modified])
			count += 1
	return count


def export_entries(path: str, entries: Iterable[SitemapEntry]) -> int:
	"""Write entries to ``path``; the format follows the file extension."""
	ext = os.path.splitext(path)[1].lower()
	if ext not in EXPORT_FORMATS:
		raise ValueError(f"Unsupported export format {ext or '(none)'}; use one of {', '.join(EXPORT_FORMATS)}")
	ensure_parent_dir(path)
	if ext == ".csv":
		return write_csv(path, entries)
	return write_jsonl(path, entries)
