# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public UI package surface for eztasks.
#
# Notes:
#	- Uses lazy exports to avoid circular imports (PEP 562).
#	- Do NOT import from eztasks.ui inside ui modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Component",
	"KeyScopedEntry",
	"Header",
	"Footer",
	"TaskInput",
	"TaskListView",
	"TaskRow",
	"StatusBar",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Component": ("eztasks.ui.component", "Component"),
	"KeyScopedEntry": ("eztasks.ui.component", "KeyScopedEntry"),
	"Header": ("eztasks.ui.banner", "Header"),
	"Footer": ("eztasks.ui.banner", "Footer"),
	"TaskInput": ("eztasks.ui.task_input", "TaskInput"),
	"TaskListView": ("eztasks.ui.task_list", "TaskListView"),
	"TaskRow": ("eztasks.ui.task_row", "TaskRow"),
	"StatusBar": ("eztasks.ui.statusbar", "StatusBar"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from eztasks.ui.component import Component, KeyScopedEntry
	from eztasks.ui.banner import Header, Footer
	from eztasks.ui.task_input import TaskInput
	from eztasks.ui.task_list import TaskListView
	from eztasks.ui.task_row import TaskRow
	from eztasks.ui.statusbar import StatusBar
