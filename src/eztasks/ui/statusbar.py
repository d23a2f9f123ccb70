# ---------------------------------------------------------------------------
# File: statusbar.py
# ---------------------------------------------------------------------------
# Description:
#	StatusBar component for eztasks: task totals at the foot of the list.
#
# Notes:
#	- Sections: left ("Total tasks: N"), middle (log mirror), right
#	  ("Completed: M").
#	- Hidden while the task list is empty.
#	- Optional logging.Handler mirrors log records into the middle section.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/13/2026	Initial coding / release
# 10/14/2026	Add log mirroring
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, Optional

import tkinter as tk
from tkinter import ttk

from . import styles
from .component import Component

if TYPE_CHECKING:
	from eztasks.tasks.store import TaskSnapshot


TkAnchor = Literal["nw", "n", "ne", "w", "center", "e", "sw", "s", "se"]


def totals_text(snapshot: "TaskSnapshot") -> dict[str, str]:
	return {
		"left": f"Total tasks: {snapshot.total_count}",
		"right": f"Completed: {snapshot.completed_count}",
	}


# ---------------------------------------------------------------------------
# Logging integration
# ---------------------------------------------------------------------------

class StatusBarLogHandler(logging.Handler):
	"""
	Mirrors formatted log records into a StatusBar section.

	emit() never raises; a broken formatter just drops the record.
	"""

	def __init__(
		self,
		statusbar: "StatusBar",
		*,
		section: str = "middle",
		level: int = logging.INFO,
	) -> None:
		super().__init__(level=level)
		self._sb = statusbar
		self._section = section

	def emit(self, record: logging.LogRecord) -> None:
		try:
			msg = self.format(record)
		except Exception:
			return
		try:
			self._sb.set_text(self._section, msg)
		except tk.TclError:
			# Label already destroyed
			return


# ---------------------------------------------------------------------------
# StatusBar
# ---------------------------------------------------------------------------

@dataclass
class StatusBar(Component):
	sections: tuple[str, ...] = ("left", "middle", "right")

	# Middle stretches; others don't.
	weights: dict[str, int] = field(default_factory=lambda: {"left": 0, "middle": 1, "right": 0})

	text: dict[str, str] = field(default_factory=dict)

	hide_when_empty: bool = True

	_section_labels: dict[str, ttk.Label] = field(default_factory=dict, init=False, repr=False)
	_visible: bool = field(default=False, init=False, repr=False)

	log_handler: Optional[StatusBarLogHandler] = field(default=None, init=False, repr=False)
	_log_target: Optional[logging.Logger] = field(default=None, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent, padding=(16, 4))

		for col, name in enumerate(self.sections):
			frame.columnconfigure(col, weight=int(self.weights.get(name, 0)))

			lbl = ttk.Label(
				frame,
				text=self.text.get(name, ""),
				style=styles.MUTED,
				anchor=self._default_anchor_for(name),
			)
			lbl.grid(row=0, column=col, sticky="ew", padx=(8, 8), pady=2)
			self._section_labels[name] = lbl

		return frame

	def layout(self) -> None:
		if self.root is None:
			return
		if self.hide_when_empty and not self._visible:
			self.root.pack_forget()
			return
		self.root.pack(side="bottom", fill="x")

	def render(self, snapshot: "TaskSnapshot") -> None:
		for section, value in totals_text(snapshot).items():
			self.set_text(section, value)

		visible = not snapshot.is_empty
		if visible != self._visible:
			self._visible = visible
			self.layout()

	def destroy(self) -> None:
		if self._log_target is not None:
			self.detach_logging(self._log_target)
		self._section_labels.clear()
		super().destroy()

	@property
	def visible(self) -> bool:
		return self._visible or not self.hide_when_empty

	# -----------------------------------------------------------------------
	# Section API
	# -----------------------------------------------------------------------

	def set_text(self, section: str, value: str) -> None:
		self.text[section] = value

		lbl = self._section_labels.get(section)
		if lbl is None:
			return
		lbl.configure(text=value)

	def clear_section(self, section: str) -> None:
		self.set_text(section, "")

	# -----------------------------------------------------------------------
	# Logging integration
	# -----------------------------------------------------------------------

	def attach_logging(
		self,
		logger: logging.Logger,
		*,
		section: str = "middle",
		level: int = logging.INFO,
		fmt: str = "%(message)s",
	) -> StatusBarLogHandler:
		h = StatusBarLogHandler(self, section=section, level=level)
		h.setFormatter(logging.Formatter(fmt))
		logger.addHandler(h)
		self.log_handler = h
		self._log_target = logger
		return h

	def detach_logging(self, logger: logging.Logger) -> None:
		if self.log_handler is None:
			return
		logger.removeHandler(self.log_handler)
		self.log_handler = None
		self._log_target = None

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _default_anchor_for(self, section: str) -> TkAnchor:
		if section == "left":
			return "w"
		if section == "right":
			return "e"
		return "center"
