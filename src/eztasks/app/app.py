# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#	Root window for eztasks.
#
# Notes:
#	- App owns the TaskStore, commands, key routing and the component tree.
#	- Every store change re-renders all top-level components from one
#	  snapshot and flips the key router into "edit" mode while editing.
#	- Components talk back only through execute()/is_enabled() and the
#	  draft-text listeners.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/12/2026	Initial coding / release
# 10/13/2026	Wire TaskStore subscription + KeyRouter
# 10/14/2026	Apply ttkthemes theme from cfg
# 10/14/2026	Log Tk callback exceptions
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import tkinter as tk
from tkinter import ttk

import ttkthemes as ttk_themes

from eztasks.app.commands import CommandContext, CommandRegistry
from eztasks.app.default_commands import register_default_commands
from eztasks.app.default_keys import (
	MODE_EDIT,
	SCOPE_EDITOR,
	SCOPE_INPUT,
	build_edit_mode_keymap,
	build_editor_keymap,
	build_global_keymap,
	build_input_keymap,
)
from eztasks.app.keyrouter import KeyRouter
from eztasks.app.keys import KeyMap
from eztasks.core.logging import get_app_logger
from eztasks.core.telemetry import Telemetry, get_telemetry
from eztasks.tasks.store import TaskSnapshot, TaskStore
from eztasks.ui import styles
from eztasks.ui.component import Component


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for config options.
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)


class App(tk.Tk):
	"""
	App

	Main window for eztasks and the root container for all UI components.
	"""

	def __init__(
		self,
		width: int | None = None,
		height: int | None = None,
		title: str | None = None,
		cfg: dict[str, Any] | None = None,
		*,
		store: TaskStore | None = None,
		telemetry: Telemetry | None = None,
	) -> None:
		super().__init__()

		self.cfg = AppConfig(cfg)
		self.log = get_app_logger()
		self.telemetry = telemetry or get_telemetry()

		self.title_text = title or self.cfg.get("title") or "eztasks"
		self.title(self.title_text)

		# -------------------------------------------------------------------
		# State
		# -------------------------------------------------------------------

		self.store = store or TaskStore(telemetry=self.telemetry)

		# -------------------------------------------------------------------
		# Commands + key routing
		# -------------------------------------------------------------------

		self.commands = CommandRegistry()
		register_default_commands(self.commands)

		self.keymaps: dict[str, KeyMap] = {
			"global": build_global_keymap(),
			SCOPE_INPUT: build_input_keymap(),
			SCOPE_EDITOR: build_editor_keymap(),
			MODE_EDIT: build_edit_mode_keymap(),
		}

		self.router = KeyRouter(
			registry=self.commands,
			global_keymap=self.keymaps["global"],
			telemetry=self.telemetry,
		)
		self.router.register_scope_keymap(SCOPE_INPUT, self.keymaps[SCOPE_INPUT])
		self.router.register_scope_keymap(SCOPE_EDITOR, self.keymaps[SCOPE_EDITOR])
		self.router.register_mode_keymap(MODE_EDIT, self.keymaps[MODE_EDIT])
		self.router.set_focus_provider(self.focused_scope)

		# -------------------------------------------------------------------
		# Component registry (ids must be unique within the App)
		# -------------------------------------------------------------------

		self.components: list[Component] = []
		self._components_by_id: dict[str, Component] = {}

		self.update_idletasks()
		self._apply_geometry(width, height)

		self._apply_theme(self.cfg.get("theme"))
		self._fonts = styles.configure_styles(self)

		if bool(self.cfg.get("scrollable", False)):
			self._build_scrollable_root()
			if bool(self.cfg.get("mousewheel", True)):
				self._bind_mousewheel()
		else:
			self.root_frame = ttk.Frame(self)
			self.root_frame.pack(fill="both", expand=True)

		self._bind_keys()
		self._unsubscribe = self.store.subscribe(self._on_store_change)

	# -----------------------------------------------------------------------
	# Invocation surface (handed to components)
	# -----------------------------------------------------------------------

	def context(self, **extra: Any) -> CommandContext:
		return CommandContext(app=self, store=self.store, extra=extra)

	def execute(self, command_id: str, **extra: Any) -> Any:
		return self.commands.execute(command_id, self.context(**extra))

	def is_enabled(self, command_id: str, **extra: Any) -> bool:
		return self.commands.is_enabled(command_id, self.context(**extra))

	def route_key(self, keyseq: str) -> bool:
		return self.router.route_keyseq(keyseq, self.context())

	def focused_scope(self) -> Optional[str]:
		"""
		Key scope of the focused widget (see KeyScopedEntry), if any.
		"""
		try:
			widget = self.focus_get()
		except (KeyError, tk.TclError):
			# focus_get() fails while a menu/popup owns focus
			return None
		return getattr(widget, "key_scope", None)

	# -----------------------------------------------------------------------
	# Component lifecycle management
	# -----------------------------------------------------------------------

	def add_component(self, component: Component) -> None:
		if component.id is None:
			raise ValueError("Component id must not be None")

		if component.id in self._components_by_id:
			existing = self._components_by_id[component.id]
			raise ValueError(
				f"Duplicate component id {component.id!r}: "
				f"existing={existing.__class__.__name__} name={existing.name!r}, "
				f"new={component.__class__.__name__} name={component.name!r}"
			)

		self.components.append(component)
		self._components_by_id[component.id] = component

		component.mount(self.root_frame)
		component.layout()
		component.render(self.store.snapshot())

	def remove_component(self, component: Component) -> None:
		if component not in self.components:
			return

		component.destroy()
		self.components.remove(component)
		if component.id is not None:
			self._components_by_id.pop(component.id, None)

	def clear_components(self) -> None:
		for component in list(self.components):
			component.destroy()

		self.components.clear()
		self._components_by_id.clear()

	def get_component(self, component_id: str) -> Optional[Component]:
		return self._components_by_id.get(component_id)

	def find_component_by_name(self, name: str) -> Optional[Component]:
		for component in self.components:
			if component.name == name:
				return component
		return None

	def render(self, snapshot: TaskSnapshot | None = None) -> None:
		"""
		Re-render every component from one snapshot.
		"""
		snap = snapshot if snapshot is not None else self.store.snapshot()

		self.router.set_mode(MODE_EDIT if snap.editing_id is not None else None)

		for component in self.components:
			component.render(snap)

	# -----------------------------------------------------------------------
	# Store + key events
	# -----------------------------------------------------------------------

	def _on_store_change(self, snapshot: TaskSnapshot) -> None:
		self.render(snapshot)

	def _bind_keys(self) -> None:
		seen: set[str] = set()
		for km in self.keymaps.values():
			for keyseq in km.keys():
				if keyseq in seen:
					continue
				seen.add(keyseq)
				self.bind_all(keyseq, lambda _e, k=keyseq: self._on_key(k))

	def _on_key(self, keyseq: str) -> Optional[str]:
		if self.route_key(keyseq):
			return "break"
		return None

	def report_callback_exception(self, exc, val, tb) -> None:
		self.log.error("Unhandled exception in Tk callback", exc_info=(exc, val, tb))

	# -----------------------------------------------------------------------
	# Window & root setup
	# -----------------------------------------------------------------------

	def _apply_theme(self, theme: str | None) -> None:
		if not theme:
			return

		style = ttk_themes.ThemedStyle(self)
		try:
			style.set_theme(theme)
		except tk.TclError:
			self.log.warning("Unknown theme %r; keeping %r", theme, style.theme_use())
			return
		self.log.debug("Applied theme %r", theme)

	def _apply_geometry(self, width: int | None, height: int | None) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		req_w = width if width is not None else min(640, screen_w)
		req_h = height if height is not None else min(720, screen_h)

		win_w = max(1, min(req_w, screen_w))
		win_h = max(1, min(req_h, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	def _build_scrollable_root(self) -> None:
		"""
		Canvas + inner Frame + Scrollbar, for long lists.
		"""
		container = ttk.Frame(self)
		container.pack(fill="both", expand=True)

		self.canvas = tk.Canvas(container, highlightthickness=0)
		self.v_scroll = ttk.Scrollbar(container, orient="vertical", command=self.canvas.yview)

		self.root_frame = ttk.Frame(self.canvas)
		self.root_frame.bind("<Configure>", self._on_root_configure)

		self._window_id = self.canvas.create_window((0, 0), window=self.root_frame, anchor="nw")
		self.canvas.bind("<Configure>", self._on_canvas_configure)
		self.canvas.configure(yscrollcommand=self.v_scroll.set)

		self.canvas.pack(side="left", fill="both", expand=True)
		self.v_scroll.pack(side="right", fill="y")

	def _on_root_configure(self, event: tk.Event) -> None:
		if hasattr(self, "canvas"):
			self.canvas.configure(scrollregion=self.canvas.bbox("all"))

	def _on_canvas_configure(self, event: tk.Event) -> None:
		# Inner frame tracks canvas width so rows stretch
		self.canvas.itemconfigure(self._window_id, width=event.width)

	def _bind_mousewheel(self) -> None:
		def _on_mousewheel(event: tk.Event) -> None:
			if not hasattr(self, "canvas"):
				return
			delta = getattr(event, "delta", 0)
			if delta:
				self.canvas.yview_scroll(int(-1 * (delta / 120)), "units")

		self.bind_all("<MouseWheel>", _on_mousewheel)

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		self.mainloop()

	def destroy(self) -> None:
		unsubscribe = getattr(self, "_unsubscribe", None)
		if unsubscribe is not None:
			unsubscribe()
			self._unsubscribe = None
		if hasattr(self, "components"):
			self.clear_components()
		super().destroy()

	def __str__(self) -> str:
		return f"{self.__class__.__name__}(title={self.title_text!r})"

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
