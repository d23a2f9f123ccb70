# ---------------------------------------------------------------------------
# File: task_row.py
# ---------------------------------------------------------------------------
# Description:
#	One task line: checkbox | text or edit entry | action buttons.
#
# Notes:
#	- View mode actions: Edit (disabled for completed tasks), Delete.
#	- Edit mode actions: Save, Cancel. Enter/Escape come through the
#	  "task.editor" key scope.
#	- Clicking the task text toggles it, like a checkbox label.
#	- row_actions() / text_style() hold the decisions so they can be
#	  tested without Tk.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/13/2026	Initial coding / release
# 10/14/2026	Derive Edit enablement from the command registry
# 10/17/2026	Select edit text only when the edit starts
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import tkinter as tk
from tkinter import ttk

from eztasks.app.default_keys import SCOPE_EDITOR
from eztasks.tasks.model import Task

from . import styles
from .component import Component, EnabledQuery, Invoker, KeyScopedEntry, TextListener


@dataclass(frozen=True, slots=True)
class RowAction:
	command_id: str
	label: str
	enabled: bool = True


def text_style(task: Task) -> str:
	return styles.TASK_DONE if task.completed else styles.TASK


def row_actions(task: Task, editing: bool, is_enabled: Optional[EnabledQuery] = None) -> tuple[RowAction, ...]:
	if editing:
		return (
			RowAction("task.save_edit", "Save"),
			RowAction("task.cancel_edit", "Cancel"),
		)

	if is_enabled is not None:
		can_edit = bool(is_enabled("task.begin_edit", task_id=task.id))
	else:
		can_edit = not task.completed

	return (
		RowAction("task.begin_edit", "Edit", enabled=can_edit),
		RowAction("task.delete", "Delete"),
	)


@dataclass
class TaskRow(Component):
	task: Optional[Task] = None
	editing: bool = False
	edit_text: str = ""
	# Select the whole text on focus (first render of this edit only)
	select_text: bool = False

	invoker: Optional[Invoker] = None
	is_enabled: Optional[EnabledQuery] = None
	on_edit_text_change: Optional[TextListener] = None

	_checked: Optional[tk.BooleanVar] = field(default=None, init=False, repr=False)
	_edit_var: Optional[tk.StringVar] = field(default=None, init=False, repr=False)
	_buttons: dict[str, ttk.Button] = field(default_factory=dict, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		if self.task is None:
			raise RuntimeError("TaskRow needs a task before mount()")
		task = self.task

		frame = ttk.Frame(parent, padding=(8, 6), relief="groove", borderwidth=1)
		frame.columnconfigure(1, weight=1)

		self._checked = tk.BooleanVar(master=frame, value=task.completed)
		ttk.Checkbutton(
			frame,
			variable=self._checked,
			command=lambda: self._invoke("task.toggle"),
		).grid(row=0, column=0, padx=(0, 8))

		if self.editing:
			self._edit_var = tk.StringVar(master=frame, value=self.edit_text)
			self._edit_var.trace_add("write", self._on_edit_write)
			entry = KeyScopedEntry(frame, key_scope=SCOPE_EDITOR, textvariable=self._edit_var)
			entry.grid(row=0, column=1, sticky="ew")
			entry.after_idle(lambda: self._focus_entry(entry))
		else:
			label = ttk.Label(frame, text=task.text, style=text_style(task), cursor="hand2")
			label.grid(row=0, column=1, sticky="ew")
			label.bind("<Button-1>", lambda _e: self._invoke("task.toggle"))

		actions = ttk.Frame(frame)
		actions.grid(row=0, column=2, padx=(8, 0))
		for action in row_actions(task, self.editing, self.is_enabled):
			btn = ttk.Button(
				actions,
				text=action.label,
				width=7,
				command=lambda cid=action.command_id: self._invoke(cid),
			)
			if not action.enabled:
				btn.state(["disabled"])
			btn.pack(side="left", padx=(2, 0))
			self._buttons[action.command_id] = btn

		return frame

	def layout(self) -> None:
		if self.root is None:
			return
		self.root.pack(side="top", fill="x", pady=(0, 4))

	def render(self, snapshot) -> None:
		# Rows are rebuilt by TaskListView on every snapshot.
		return

	def destroy(self) -> None:
		self._buttons.clear()
		self._checked = None
		self._edit_var = None
		super().destroy()

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _invoke(self, command_id: str) -> None:
		if self.invoker is None or self.task is None:
			return
		self.invoker(command_id, task_id=self.task.id)

	def _on_edit_write(self, *_args: object) -> None:
		if self._edit_var is None or self.on_edit_text_change is None:
			return
		self.on_edit_text_change(self._edit_var.get())

	def _focus_entry(self, entry: KeyScopedEntry) -> None:
		try:
			if not entry.winfo_exists():
				return
			entry.focus_set()
			entry.icursor("end")
			if self.select_text:
				entry.select_range(0, "end")
			else:
				entry.selection_clear()
		except tk.TclError:
			# Row was rebuilt before the idle callback ran
			return
