# ---------------------------------------------------------------------------
# File: test_default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for default command registration + task command behavior.
#
# Notes:
#	- Task commands run against a real TaskStore (no Tk).
#	- App commands are checked for platform-aware labels only.
#
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from eztasks.app.commands import CommandContext, CommandRegistry
from eztasks.app.default_commands import register_default_commands
from eztasks.tasks.store import TaskStore


TASK_COMMANDS = (
	"task.add",
	"task.toggle",
	"task.begin_edit",
	"task.save_edit",
	"task.cancel_edit",
	"task.delete",
)


@pytest.fixture()
def registry() -> CommandRegistry:
	reg = CommandRegistry()
	register_default_commands(reg)
	return reg


def _run(registry: CommandRegistry, store: TaskStore, command_id: str, **extra):
	return registry.execute(command_id, CommandContext(store=store, extra=extra))


def _enabled(registry: CommandRegistry, store: TaskStore, command_id: str, **extra) -> bool:
	return registry.is_enabled(command_id, CommandContext(store=store, extra=extra))


def test_registers_task_and_app_commands(registry: CommandRegistry):
	for command_id in TASK_COMMANDS + ("app.about", "app.quit"):
		assert registry.has(command_id), command_id


def test_app_command_labels_are_platform_aware(monkeypatch):
	monkeypatch.setattr("eztasks.app.default_commands.sys.platform", "darwin")
	mac = CommandRegistry()
	register_default_commands(mac)

	assert mac.get("app.quit").label == "Quit eztasks"
	assert mac.get("app.quit").shortcut == "CMD+Q"
	assert mac.get("app.about").label == "About eztasks"

	monkeypatch.setattr("eztasks.app.default_commands.sys.platform", "linux")
	other = CommandRegistry()
	register_default_commands(other)

	assert other.get("app.quit").label == "Quit"
	assert other.get("app.quit").shortcut == "CTRL+Q"
	assert other.get("app.about").label == "About"


def test_task_add_uses_store_draft(registry: CommandRegistry, store: TaskStore):
	store.set_new_text("Buy milk")

	task = _run(registry, store, "task.add")

	assert task is not None
	assert [t.text for t in store.tasks] == ["Buy milk"]
	assert store.new_text == ""


def test_begin_edit_disabled_for_completed_task(registry: CommandRegistry, store: TaskStore):
	task = store.add("Buy milk")
	assert task is not None

	assert _enabled(registry, store, "task.begin_edit", task_id=task.id) is True

	_run(registry, store, "task.toggle", task_id=task.id)

	assert _enabled(registry, store, "task.begin_edit", task_id=task.id) is False
	assert _run(registry, store, "task.begin_edit", task_id=task.id) is None
	assert store.editing_id is None


def test_save_and_cancel_only_enabled_while_editing(registry: CommandRegistry, store: TaskStore):
	task = store.add("a")
	assert task is not None

	assert _enabled(registry, store, "task.save_edit") is False
	assert _enabled(registry, store, "task.cancel_edit") is False

	_run(registry, store, "task.begin_edit", task_id=task.id)

	assert _enabled(registry, store, "task.save_edit") is True
	assert _enabled(registry, store, "task.cancel_edit") is True

	store.set_edit_text("b")
	assert _run(registry, store, "task.save_edit") is True
	assert store.get(task.id).text == "b"


def test_task_delete_command(registry: CommandRegistry, store: TaskStore):
	task = store.add("a")
	assert task is not None

	assert _run(registry, store, "task.delete", task_id=task.id) is True
	assert _run(registry, store, "task.delete", task_id=task.id) is False
	assert store.tasks == []


def test_task_command_without_store_raises(registry: CommandRegistry):
	with pytest.raises(RuntimeError):
		registry.execute("task.add", CommandContext())


def test_quit_destroys_app(registry: CommandRegistry):
	class _App:
		destroyed = False

		def destroy(self) -> None:
			self.destroyed = True

	app = _App()
	registry.execute("app.quit", CommandContext(app=app))

	assert app.destroyed is True
