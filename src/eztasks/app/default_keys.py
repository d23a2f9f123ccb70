# ---------------------------------------------------------------------------
# File: default_keys.py
# ---------------------------------------------------------------------------
# Description:
#	Default key bindings for eztasks.
#
# Notes:
#	- Declares bindings only; KeyRouter decides which layer applies.
#	- Quit is platform-aware (Cmd on macOS, Ctrl elsewhere).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/12/2026	Initial coding / release
# 10/13/2026	Add input/editor scopes + edit mode
# ---------------------------------------------------------------------------

from __future__ import annotations

import sys

from eztasks.app.keys import KeyMap


SCOPE_INPUT = "task.input"
SCOPE_EDITOR = "task.editor"
MODE_EDIT = "edit"


def build_global_keymap() -> KeyMap:
	km = KeyMap()

	if sys.platform == "darwin":
		km.bind("<Command-q>", "app.quit")
		# Some Tk builds map Command to Meta
		km.bind("<Meta-q>", "app.quit")

	km.bind("<Control-q>", "app.quit")
	km.bind("<F1>", "app.about")
	return km


def build_input_keymap() -> KeyMap:
	km = KeyMap()
	km.bind("<Return>", "task.add")
	km.bind("<KP_Enter>", "task.add")
	return km


def build_editor_keymap() -> KeyMap:
	km = KeyMap()
	km.bind("<Return>", "task.save_edit")
	km.bind("<KP_Enter>", "task.save_edit")
	km.bind("<Escape>", "task.cancel_edit")
	return km


def build_edit_mode_keymap() -> KeyMap:
	km = KeyMap()
	km.bind("<Escape>", "task.cancel_edit")
	return km
