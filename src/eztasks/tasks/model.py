# ---------------------------------------------------------------------------
# File: model.py
# ---------------------------------------------------------------------------
# Description:
#	Task record + id generation for eztasks.
#
# Notes:
#	- Ids come from a monotonic counter; they are never reused within a
#	  session, even after a task is deleted.
#	- Text stored on a Task is always trimmed and non-empty.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/12/2026	Initial coding / release
# 10/13/2026	Replace timestamp ids with TaskIdGenerator
# ---------------------------------------------------------------------------

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterator, Optional


TaskId = int


def normalize_text(raw: Optional[str]) -> Optional[str]:
	"""
	Trim raw user text. Returns None when nothing is left.
	"""
	if raw is None:
		return None
	text = raw.strip()
	return text or None


@dataclass(slots=True)
class Task:
	"""
	Task

	- id:			Unique within the session (see TaskIdGenerator).
	- text:			Trimmed, non-empty.
	- completed:	False on creation.
	"""
	id: TaskId
	text: str
	completed: bool = False

	def __post_init__(self) -> None:
		text = normalize_text(self.text)
		if text is None:
			raise ValueError("Task text must not be empty")
		self.text = text


@dataclass(slots=True)
class TaskIdGenerator:
	"""
	Monotonic id source.
	"""
	start: int = 1
	_counter: Iterator[int] = field(init=False, repr=False)

	def __post_init__(self) -> None:
		self._counter = itertools.count(self.start)

	def next_id(self) -> TaskId:
		return next(self._counter)
