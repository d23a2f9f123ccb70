# ---------------------------------------------------------------------------
# File: styles.py
# ---------------------------------------------------------------------------
# Description:
#	ttk style names + one-time style setup for eztasks.
#
# Notes:
#	- Call configure_styles() after the theme is applied; theme_use()
#	  resets custom style options.
#	- Keep a reference to the returned fonts (Tk drops unreferenced fonts).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/13/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import tkinter as tk
from tkinter import font as tkfont
from tkinter import ttk


TITLE = "Title.TLabel"
SUBTITLE = "Subtitle.TLabel"
HEADING = "Heading.TLabel"
MUTED = "Muted.TLabel"
TASK = "Task.TLabel"
TASK_DONE = "TaskDone.TLabel"
EMPTY_ICON = "EmptyIcon.TLabel"

MUTED_FG = "#6B7280"


def configure_styles(master: tk.Misc) -> dict[str, tkfont.Font]:
	style = ttk.Style(master)
	base = tkfont.nametofont("TkDefaultFont", root=master)
	size = int(base.cget("size")) or 10

	fonts = {
		"title": _derive(base, size=abs(size) + 10, weight="bold"),
		"heading": _derive(base, size=abs(size) + 4, weight="bold"),
		"done": _derive(base, overstrike=True),
		"icon": _derive(base, size=abs(size) + 20),
	}

	style.configure(TITLE, font=fonts["title"])
	style.configure(SUBTITLE, foreground=MUTED_FG)
	style.configure(HEADING, font=fonts["heading"])
	style.configure(MUTED, foreground=MUTED_FG)
	style.configure(TASK)
	style.configure(TASK_DONE, font=fonts["done"], foreground=MUTED_FG)
	style.configure(EMPTY_ICON, font=fonts["icon"])

	return fonts


def _derive(base: tkfont.Font, **options: object) -> tkfont.Font:
	f = base.copy()
	f.configure(**options)
	return f
