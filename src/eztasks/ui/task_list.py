# ---------------------------------------------------------------------------
# File: task_list.py
# ---------------------------------------------------------------------------
# Description:
#	Task list card: heading with counts, empty state or one TaskRow per task.
#
# Notes:
#	- Counts are derived from the snapshot on each render, never stored.
#	- Rows are rebuilt on every render (lists are short).
#	- The edit entry selects its text only on the render that starts the edit.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/13/2026	Initial coding / release
# 10/17/2026	Track edit start for text selection
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import tkinter as tk
from tkinter import ttk

from . import styles
from .component import Component, EnabledQuery, Invoker, TextListener
from .task_row import TaskRow

if TYPE_CHECKING:
	from eztasks.tasks.store import TaskSnapshot


EMPTY_ICON = "\U0001F4DD"
EMPTY_TITLE = "No tasks yet"
EMPTY_HINT = "Add your first task above to get started!"


def summary_text(snapshot: "TaskSnapshot") -> str:
	return f"{snapshot.completed_count} of {snapshot.total_count} completed"


@dataclass
class TaskListView(Component):
	title: str = "Tasks"

	invoker: Optional[Invoker] = None
	is_enabled: Optional[EnabledQuery] = None
	on_edit_text_change: Optional[TextListener] = None

	_summary: Optional[ttk.Label] = field(default=None, init=False, repr=False)
	_body: Optional[ttk.Frame] = field(default=None, init=False, repr=False)
	_empty: Optional[ttk.Frame] = field(default=None, init=False, repr=False)
	_last_editing_id: Optional[int] = field(default=None, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent, padding=(16, 8))

		heading = ttk.Frame(frame)
		heading.pack(side="top", fill="x", pady=(0, 8))
		ttk.Label(heading, text=self.title, style=styles.HEADING).pack(side="left")
		self._summary = ttk.Label(heading, text="", style=styles.MUTED)
		self._summary.pack(side="right")

		self._body = ttk.Frame(frame)
		self._body.pack(side="top", fill="both", expand=True)

		self._empty = ttk.Frame(self._body, padding=(0, 32))
		ttk.Label(self._empty, text=EMPTY_ICON, style=styles.EMPTY_ICON, anchor="center").pack(fill="x")
		ttk.Label(self._empty, text=EMPTY_TITLE, anchor="center").pack(fill="x", pady=(8, 0))
		ttk.Label(self._empty, text=EMPTY_HINT, style=styles.MUTED, anchor="center").pack(fill="x")

		return frame

	def get_child_parent(self) -> tk.Misc:
		if self._body is None:
			return super().get_child_parent()
		return self._body

	def layout(self) -> None:
		if self.root is None:
			return
		self.root.pack(side="top", fill="both", expand=True)

	def render(self, snapshot: "TaskSnapshot") -> None:
		if self._summary is not None:
			self._summary.configure(text=summary_text(snapshot))

		self.clear_components()

		edit_started = snapshot.editing_id is not None and snapshot.editing_id != self._last_editing_id
		self._last_editing_id = snapshot.editing_id

		if self._empty is None:
			return

		if snapshot.is_empty:
			self._empty.pack(fill="x")
			return

		self._empty.pack_forget()
		for task in snapshot.tasks:
			editing = snapshot.editing_id == task.id
			self.add_component(TaskRow(
				name=f"TaskRow-{task.id}",
				task=task,
				editing=editing,
				edit_text=snapshot.edit_text if editing else "",
				select_text=editing and edit_started,
				invoker=self.invoker,
				is_enabled=self.is_enabled,
				on_edit_text_change=self.on_edit_text_change,
			))

	def rows(self) -> list[TaskRow]:
		return [c for c in self.components if isinstance(c, TaskRow)]

	def destroy(self) -> None:
		self._summary = None
		self._body = None
		self._empty = None
		super().destroy()
