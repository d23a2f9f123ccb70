# ---------------------------------------------------------------------------
# File: test_component.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the base Component class.
#
# Notes:
#	- Validates component identity (id/name).
#	- Validates mount / destroy lifecycle.
#	- Validates composite (child component) behavior + render delegation.
#
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
import tkinter as tk
from tkinter import ttk

from eztasks.tasks.store import TaskSnapshot
from eztasks.ui.component import Component, KeyScopedEntry


@dataclass
class _TestComponent(Component):
	"""
	Minimal concrete Component that records renders.
	"""
	rendered: list[TaskSnapshot] = field(default_factory=list)

	def build(self, parent: tk.Misc) -> tk.Widget:
		return ttk.Frame(parent)

	def render(self, snapshot: TaskSnapshot) -> None:
		self.rendered.append(snapshot)
		super().render(snapshot)


def test_component_auto_generates_id_and_name():
	component = _TestComponent()

	assert isinstance(component.id, str)
	assert component.name == "_TestComponent"
	assert component.is_mounted is False


def test_get_child_parent_requires_mount():
	with pytest.raises(RuntimeError):
		_TestComponent().get_child_parent()


def test_render_delegates_to_children_without_mount():
	parent = _TestComponent()
	child = _TestComponent()
	parent.components.append(child)

	snap = TaskSnapshot()
	parent.render(snap)

	assert parent.rendered == [snap]
	assert child.rendered == [snap]


def test_component_mount_sets_parent_and_root(tk_root):
	component = _TestComponent()
	component.mount(tk_root)

	assert component.parent is tk_root
	assert isinstance(component.root, tk.Widget)
	assert component.is_mounted is True


def test_component_destroy_cleans_up_root(tk_root):
	component = _TestComponent()
	component.mount(tk_root)

	widget = component.root
	assert widget is not None
	assert widget.winfo_exists() == 1

	component.destroy()

	assert component.root is None
	assert widget.winfo_exists() == 0


def test_component_add_child_mounts_child_when_parent_is_mounted(tk_root):
	parent = _TestComponent()
	child = _TestComponent()

	parent.mount(tk_root)
	parent.add_component(child)

	assert child in parent.components
	assert child.parent is parent.root
	assert child.root is not None


def test_component_remove_child_destroys_child(tk_root):
	parent = _TestComponent()
	child = _TestComponent()

	parent.mount(tk_root)
	parent.add_component(child)

	child_root = child.root
	assert child_root is not None

	parent.remove_component(child)

	assert child not in parent.components
	assert child_root.winfo_exists() == 0


def test_component_clear_components_destroys_all_children(tk_root):
	parent = _TestComponent()
	parent.mount(tk_root)

	children = [_TestComponent(), _TestComponent()]
	for child in children:
		parent.add_component(child)

	child_roots = [c.root for c in children]

	parent.clear_components()

	assert parent.components == []
	for root_widget in child_roots:
		assert root_widget is not None
		assert root_widget.winfo_exists() == 0


def test_key_scoped_entry_carries_scope(tk_root):
	entry = KeyScopedEntry(tk_root, key_scope="task.input")

	assert entry.key_scope == "task.input"
