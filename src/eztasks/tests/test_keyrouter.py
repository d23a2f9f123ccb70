# ---------------------------------------------------------------------------
# File: test_keyrouter.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for KeyRouter (contextual key routing).
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Telemetry assertions use MemorySink.
#
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from eztasks.app.commands import Command, CommandContext, CommandRegistry
from eztasks.app.default_commands import register_task_commands
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
from eztasks.core.telemetry import MemorySink, Telemetry
from eztasks.tasks.store import TaskStore


def _ctx(store: TaskStore | None = None) -> CommandContext:
	return CommandContext(app=None, store=store, extra={})


def _telemetry() -> tuple[Telemetry, MemorySink]:
	sink = MemorySink()
	return Telemetry(enabled=True, sink=sink), sink


def test_global_routing_executes_command():
	reg = CommandRegistry()
	calls: list[str] = []

	reg.register(Command(id="app.quit", label="Quit", handler=lambda ctx: calls.append("app.quit")))
	km = KeyMap()
	km.bind("<Control-q>", "app.quit")

	r = KeyRouter(registry=reg, global_keymap=km)

	assert r.route_keyseq("<Control-q>", _ctx()) is True
	assert calls == ["app.quit"]


def test_mode_overrides_global():
	reg = CommandRegistry()
	calls: list[str] = []

	reg.register(Command(id="a", handler=lambda ctx: calls.append("a")))
	reg.register(Command(id="b", handler=lambda ctx: calls.append("b")))

	global_km = KeyMap()
	global_km.bind("<Escape>", "a")
	mode_km = KeyMap()
	mode_km.bind("<Escape>", "b")

	r = KeyRouter(registry=reg, global_keymap=global_km)
	r.register_mode_keymap(MODE_EDIT, mode_km)
	r.set_mode(MODE_EDIT)

	assert r.route_keyseq("<Escape>", _ctx()) is True
	assert calls == ["b"]

	r.set_mode(None)
	assert r.route_keyseq("<Escape>", _ctx()) is True
	assert calls == ["b", "a"]


def test_scope_overrides_mode_and_global():
	reg = CommandRegistry()
	calls: list[str] = []

	for cid in ("global", "mode", "scope"):
		reg.register(Command(id=cid, handler=lambda ctx, c=cid: calls.append(c)))

	global_km = KeyMap()
	global_km.bind("<Return>", "global")
	mode_km = KeyMap()
	mode_km.bind("<Return>", "mode")
	scope_km = KeyMap()
	scope_km.bind("<Return>", "scope")

	focus: Optional[str] = SCOPE_EDITOR

	r = KeyRouter(registry=reg, global_keymap=global_km)
	r.set_focus_provider(lambda: focus)
	r.register_mode_keymap(MODE_EDIT, mode_km)
	r.register_scope_keymap(SCOPE_EDITOR, scope_km)
	r.set_mode(MODE_EDIT)

	assert r.route_keyseq("<Return>", _ctx()) is True
	assert calls == ["scope"]


def test_unhandled_returns_false():
	reg = CommandRegistry()
	r = KeyRouter(registry=reg, global_keymap=KeyMap())

	assert r.route_keyseq("<Control-q>", _ctx()) is False


def test_disabled_command_returns_false():
	reg = CommandRegistry()
	register_task_commands(reg)
	store = TaskStore()

	r = KeyRouter(registry=reg, global_keymap=build_global_keymap())
	r.register_mode_keymap(MODE_EDIT, build_edit_mode_keymap())
	r.set_mode(MODE_EDIT)

	# Not editing: task.cancel_edit resolves but is disabled
	assert r.resolve_command_id("<Escape>") == "task.cancel_edit"
	assert r.route_keyseq("<Escape>", _ctx(store)) is False


def test_enter_in_input_adds_and_in_editor_saves():
	reg = CommandRegistry()
	register_task_commands(reg)
	store = TaskStore()

	focus: Optional[str] = SCOPE_INPUT

	r = KeyRouter(registry=reg, global_keymap=build_global_keymap())
	r.register_scope_keymap(SCOPE_INPUT, build_input_keymap())
	r.register_scope_keymap(SCOPE_EDITOR, build_editor_keymap())
	r.set_focus_provider(lambda: focus)

	store.set_new_text("Buy milk")
	assert r.route_keyseq("<Return>", _ctx(store)) is True
	task = store.tasks[0]
	assert task.text == "Buy milk"

	store.begin_edit(task.id)
	store.set_edit_text("Buy oat milk")
	focus = SCOPE_EDITOR

	assert r.route_keyseq("<Return>", _ctx(store)) is True
	assert store.get(task.id).text == "Buy oat milk"
	assert store.editing_id is None


def test_telemetry_global_dispatch():
	reg = CommandRegistry()
	reg.register(Command(id="app.quit", handler=lambda ctx: None))
	km = KeyMap()
	km.bind("<Control-q>", "app.quit")

	telemetry, sink = _telemetry()
	r = KeyRouter(registry=reg, global_keymap=km, telemetry=telemetry)

	assert r.route_keyseq("<Control-q>", _ctx()) is True

	assert len(sink.metrics) == 1
	assert sink.metrics[0].name == "keys.pressed"
	assert sink.metrics[0].attrs["keyseq"] == "<Control-q>"

	ev = next(e for e in sink.events if e.name == "command.dispatched")
	assert ev.attrs["command_id"] == "app.quit"
	assert ev.attrs["layer"] == "global"


def test_telemetry_scope_layer():
	reg = CommandRegistry()
	reg.register(Command(id="task.add", handler=lambda ctx: None))
	scope_km = KeyMap()
	scope_km.bind("<Return>", "task.add")

	telemetry, sink = _telemetry()
	r = KeyRouter(registry=reg, global_keymap=KeyMap(), telemetry=telemetry)
	r.register_scope_keymap(SCOPE_INPUT, scope_km)
	r.set_focus_provider(lambda: SCOPE_INPUT)

	assert r.route_keyseq("<Return>", _ctx()) is True

	ev = next(e for e in sink.events if e.name == "command.dispatched")
	assert ev.attrs["layer"] == "scope"


def test_telemetry_unhandled_key_emits_event():
	telemetry, sink = _telemetry()
	r = KeyRouter(registry=CommandRegistry(), global_keymap=KeyMap(), telemetry=telemetry)

	assert r.route_keyseq("<Control-q>", _ctx()) is False

	assert [m.name for m in sink.metrics] == ["keys.pressed"]
	ev = next(e for e in sink.events if e.name == "key.unhandled")
	assert ev.attrs["keyseq"] == "<Control-q>"
