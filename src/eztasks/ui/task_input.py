# ---------------------------------------------------------------------------
# File: task_input.py
# ---------------------------------------------------------------------------
# Description:
#	New-task input row: entry + Add button.
#
# Notes:
#	- Typing is pushed to the store as a silent draft (on_text_change).
#	- Enter is handled by KeyRouter via the "task.input" key scope.
#	- render() only rewrites the entry when the store draft differs, so
#	  clearing after Add does not echo back through the trace.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/13/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import tkinter as tk
from tkinter import ttk

from eztasks.app.default_keys import SCOPE_INPUT

from .component import Component, Invoker, KeyScopedEntry, TextListener

if TYPE_CHECKING:
	from eztasks.tasks.store import TaskSnapshot


@dataclass
class TaskInput(Component):
	invoker: Optional[Invoker] = None
	on_text_change: Optional[TextListener] = None
	button_text: str = "+ Add"

	_var: Optional[tk.StringVar] = field(default=None, init=False, repr=False)
	_entry: Optional[KeyScopedEntry] = field(default=None, init=False, repr=False)
	_syncing: bool = field(default=False, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent, padding=(16, 8))

		self._var = tk.StringVar(master=frame)
		self._var.trace_add("write", self._on_write)

		self._entry = KeyScopedEntry(frame, key_scope=SCOPE_INPUT, textvariable=self._var)
		self._entry.pack(side="left", fill="x", expand=True)

		ttk.Button(frame, text=self.button_text, command=self._on_add).pack(side="left", padx=(8, 0))

		return frame

	def layout(self) -> None:
		if self.root is None:
			return
		self.root.pack(side="top", fill="x")

	def render(self, snapshot: "TaskSnapshot") -> None:
		if self._var is None:
			return
		if self._var.get() == snapshot.new_text:
			return
		self._syncing = True
		try:
			self._var.set(snapshot.new_text)
		finally:
			self._syncing = False

	def focus(self) -> None:
		if self._entry is not None:
			self._entry.focus_set()

	def destroy(self) -> None:
		self._entry = None
		self._var = None
		super().destroy()

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _on_write(self, *_args: object) -> None:
		if self._syncing or self._var is None or self.on_text_change is None:
			return
		self.on_text_change(self._var.get())

	def _on_add(self) -> None:
		if self.invoker is not None:
			self.invoker("task.add")
		self.focus()
