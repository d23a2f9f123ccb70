# ---------------------------------------------------------------------------
# File: component.py
# ---------------------------------------------------------------------------
# Description:
#	Base UI Component for eztasks (Tkinter).
#
# Notes:
#	Composite pattern: every component can contain child components.
#	Components are presentational: render(snapshot) redraws from a
#	TaskSnapshot, and user actions go out through an Invoker.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/12/2026	Initial coding / release
# 10/13/2026	Add render(snapshot) hook + KeyScopedEntry
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol
from uuid import uuid4

import tkinter as tk
from tkinter import ttk

if TYPE_CHECKING:
	from eztasks.tasks.store import TaskSnapshot


class Invoker(Protocol):
	"""
	Runs a command by id; extra keyword args land in CommandContext.extra.
	"""
	def __call__(self, command_id: str, **extra: Any) -> Any: ...


class EnabledQuery(Protocol):
	def __call__(self, command_id: str, **extra: Any) -> bool: ...


TextListener = Callable[[str], None]


class KeyScopedEntry(ttk.Entry):
	"""
	ttk.Entry tagged with a key scope.

	App's focus provider reads key_scope from the focused widget so the
	KeyRouter can pick the matching keymap.
	"""

	def __init__(self, master: tk.Misc, *, key_scope: str, **kwargs: Any) -> None:
		super().__init__(master, **kwargs)
		self.key_scope = key_scope


@dataclass
class Component:
	"""
	Base UI component.

	- id:	Stable identifier (auto-generated when omitted).
	- name:	Friendly label (defaults to class name).

	- mount() builds self.root and mounts children into it.
	- layout() applies geometry; default is pack.
	- render() redraws from a snapshot; default delegates to children.
	- destroy() destroys children then root.
	"""
	id: Optional[str] = None
	name: Optional[str] = None

	components: list["Component"] = field(default_factory=list)

	parent: Optional[tk.Misc] = field(default=None, init=False)
	root: Optional[tk.Widget] = field(default=None, init=False)

	def __post_init__(self) -> None:
		if not self.id:
			self.id = str(uuid4())
		if not self.name:
			self.name = self.__class__.__name__

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} id={self.id!r} name={self.name!r}>"

	@property
	def is_mounted(self) -> bool:
		return self.root is not None

	def mount(self, parent: tk.Misc) -> None:
		self.parent = parent
		self.root = self.build(parent)

		for child in self.components:
			child.mount(self.get_child_parent())

	def build(self, parent: tk.Misc) -> tk.Widget:
		"""
		Create this component's root widget (a Frame unless overridden).
		"""
		return ttk.Frame(parent)

	def get_child_parent(self) -> tk.Misc:
		if self.root is None:
			raise RuntimeError(f"Component not mounted: id={self.id!r} name={self.name!r}")
		return self.root

	def add_component(self, child: "Component") -> None:
		self.components.append(child)

		if self.root is not None:
			child.mount(self.get_child_parent())
			child.layout()

	def remove_component(self, child: "Component") -> None:
		if child in self.components:
			child.destroy()
			self.components.remove(child)

	def clear_components(self) -> None:
		for child in list(self.components):
			child.destroy()
		self.components.clear()

	def layout(self) -> None:
		if self.root is None:
			return

		self.root.pack(fill="both", expand=True)

		for child in self.components:
			child.layout()

	def render(self, snapshot: "TaskSnapshot") -> None:
		for child in self.components:
			child.render(snapshot)

	def destroy(self) -> None:
		for child in list(self.components):
			child.destroy()
		self.components.clear()

		if self.root is not None:
			self.root.destroy()
			self.root = None
