# ---------------------------------------------------------------------------
# File: default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Default command definitions for eztasks.
#
# Notes:
#	- task.* commands delegate to ctx.store; per-task commands read
#	  ctx.extra["task_id"].
#	- task.begin_edit is disabled for completed tasks; the Edit button
#	  reflects this through CommandRegistry.is_enabled().
#	- Shortcuts are platform-aware (CMD on macOS, CTRL elsewhere).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/12/2026	Initial coding / release
# 10/13/2026	Add task commands
# 10/14/2026	Log dialog failures instead of printing
# ---------------------------------------------------------------------------

from __future__ import annotations

import sys
import tkinter as tk
from tkinter import messagebox

from eztasks.app.commands import Command, CommandContext, CommandRegistry
from eztasks.core.logging import get_app_logger


log = get_app_logger("commands")


def _is_mac() -> bool:
	return sys.platform == "darwin"


def _store(ctx: CommandContext):
	if ctx.store is None:
		raise RuntimeError("Command context has no TaskStore")
	return ctx.store


# ---------------------------------------------------------------------------
# Task handlers
# ---------------------------------------------------------------------------

def _task_add(ctx: CommandContext):
	return _store(ctx).add()


def _task_delete(ctx: CommandContext) -> bool:
	return _store(ctx).delete(ctx.task_id())


def _task_toggle(ctx: CommandContext) -> bool:
	return _store(ctx).toggle(ctx.task_id())


def _task_begin_edit(ctx: CommandContext) -> bool:
	return _store(ctx).begin_edit(ctx.task_id())


def _task_save_edit(ctx: CommandContext) -> bool:
	return _store(ctx).save_edit(ctx.task_id())


def _task_cancel_edit(ctx: CommandContext) -> None:
	_store(ctx).cancel_edit()


def _can_begin_edit(ctx: CommandContext) -> bool:
	return ctx.store is not None and ctx.store.can_edit(ctx.task_id())


def _is_editing(ctx: CommandContext) -> bool:
	return ctx.store is not None and ctx.store.is_editing()


def register_task_commands(registry: CommandRegistry) -> None:
	registry.register(Command(
		id="task.add",
		label="Add",
		description="Add the typed text as a new task.",
		handler=_task_add,
		order=100,
	))

	registry.register(Command(
		id="task.toggle",
		label="Toggle complete",
		description="Mark a task completed or not completed.",
		handler=_task_toggle,
		order=110,
	))

	registry.register(Command(
		id="task.begin_edit",
		label="Edit",
		description="Edit the text of an open task.",
		handler=_task_begin_edit,
		enabled_fn=_can_begin_edit,
		order=120,
	))

	registry.register(Command(
		id="task.save_edit",
		label="Save",
		description="Save the edited task text.",
		handler=_task_save_edit,
		enabled_fn=_is_editing,
		order=130,
	))

	registry.register(Command(
		id="task.cancel_edit",
		label="Cancel",
		description="Discard the edit.",
		handler=_task_cancel_edit,
		enabled_fn=_is_editing,
		order=140,
	))

	registry.register(Command(
		id="task.delete",
		label="Delete",
		description="Remove a task.",
		handler=_task_delete,
		order=150,
	))


# ---------------------------------------------------------------------------
# App handlers
# ---------------------------------------------------------------------------

def _app_quit(ctx: CommandContext) -> None:
	if ctx.app is None:
		return
	log.info("Quit requested")
	ctx.app.destroy()


def _app_about(ctx: CommandContext) -> None:
	try:
		messagebox.showinfo(
			title="About eztasks",
			message="eztasks\n\nStay organized and get things done.\n",
			parent=ctx.app,
		)
	except tk.TclError:
		log.warning("About dialog unavailable", exc_info=True)


def register_app_commands(registry: CommandRegistry) -> None:
	quit_shortcut = "CMD+Q" if _is_mac() else "CTRL+Q"
	about_label = "About eztasks" if _is_mac() else "About"
	quit_label = "Quit eztasks" if _is_mac() else "Quit"

	registry.register(Command(
		id="app.about",
		label=about_label,
		description="Show application information.",
		handler=_app_about,
		order=10,
	))

	registry.register(Command(
		id="app.quit",
		label=quit_label,
		description="Exit eztasks.",
		shortcut=quit_shortcut,
		handler=_app_quit,
		order=20,
	))


def register_default_commands(registry: CommandRegistry) -> None:
	register_app_commands(registry)
	register_task_commands(registry)
