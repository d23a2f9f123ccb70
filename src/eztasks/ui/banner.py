# ---------------------------------------------------------------------------
# File: banner.py
# ---------------------------------------------------------------------------
# Description:
#	Static page header + footer for eztasks.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/13/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass

import tkinter as tk
from tkinter import ttk

from . import styles
from .component import Component


@dataclass
class Header(Component):
	title: str = "My Todo List"
	subtitle: str = "Stay organized and get things done"

	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent, padding=(16, 20, 16, 12))
		ttk.Label(frame, text=self.title, style=styles.TITLE, anchor="center").pack(fill="x")
		ttk.Label(frame, text=self.subtitle, style=styles.SUBTITLE, anchor="center").pack(fill="x", pady=(6, 0))
		return frame

	def layout(self) -> None:
		if self.root is None:
			return
		self.root.pack(side="top", fill="x")


@dataclass
class Footer(Component):
	lines: tuple[str, ...] = ("eztasks. Built with Tkinter.", "Stay productive and organized!")

	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent, padding=(16, 8))
		ttk.Separator(frame, orient="horizontal").pack(fill="x", pady=(0, 8))
		for line in self.lines:
			ttk.Label(frame, text=line, style=styles.MUTED, anchor="center").pack(fill="x")
		return frame

	def layout(self) -> None:
		if self.root is None:
			return
		self.root.pack(side="bottom", fill="x")
