# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#	Command definitions + registry for eztasks.
#
# Notes:
#	Commands are the single invocation spine for UI actions (keys, buttons,
#	checkboxes). Per-task actions receive the task id via ctx.extra.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/12/2026	Initial coding / release
# 10/13/2026	Add CommandContext + context-aware enablement
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
	from eztasks.tasks.store import TaskStore


@dataclass(frozen=True, slots=True)
class CommandContext:
	"""
	What a command handler can reach.

	- app:		The App window (may be None in tests).
	- store:	The TaskStore.
	- extra:	Per-invocation arguments (e.g., {"task_id": 3}).
	"""
	app: Any = None
	store: Optional["TaskStore"] = None
	extra: dict[str, Any] = field(default_factory=dict)

	def task_id(self) -> Any:
		return self.extra.get("task_id")


CommandHandler = Callable[[CommandContext], Any]
EnabledCheck = Callable[[CommandContext], bool]


@dataclass(frozen=True, slots=True)
class Command:
	"""
	Command

	- id:			Unique identifier (required).
	- handler:		Callable executed on execute(ctx).
	- label:		Optional friendly label.
	- description:	Optional help text.
	- shortcut:		Optional display hint (e.g., "CTRL+Q").
	- order:		Sort hint for presenting commands.
	- enabled:		Static enable/disable.
	- enabled_fn:	Optional dynamic enablement.
	"""
	id: str
	handler: CommandHandler

	label: Optional[str] = None
	description: Optional[str] = None
	shortcut: Optional[str] = None
	order: int = 0

	enabled: bool = True
	enabled_fn: Optional[EnabledCheck] = None

	def is_enabled(self, ctx: CommandContext) -> bool:
		if not self.enabled:
			return False
		if self.enabled_fn is None:
			return True
		return bool(self.enabled_fn(ctx))


class CommandRegistry:
	"""
	CommandRegistry

	Stores commands by id and executes them.
	"""

	def __init__(self) -> None:
		self._commands: dict[str, Command] = {}

	def register(self, command: Command) -> None:
		if not command.id:
			raise ValueError("Command id must be a non-empty string")

		if command.id in self._commands:
			raise ValueError(f"Duplicate command id: {command.id!r}")

		self._commands[command.id] = command

	def unregister(self, command_id: str) -> None:
		self._commands.pop(command_id, None)

	def has(self, command_id: str) -> bool:
		return command_id in self._commands

	def get(self, command_id: str) -> Optional[Command]:
		return self._commands.get(command_id)

	def ids(self) -> list[str]:
		return [c.id for c in sorted(self._commands.values(), key=lambda c: c.order)]

	def is_enabled(self, command_id: str, ctx: CommandContext) -> bool:
		return self._require(command_id).is_enabled(ctx)

	def execute(self, command_id: str, ctx: CommandContext) -> Any:
		"""
		Run a command. Disabled commands are skipped and return None.
		"""
		command = self._require(command_id)

		if not command.is_enabled(ctx):
			return None

		return command.handler(ctx)

	def _require(self, command_id: str) -> Command:
		command = self._commands.get(command_id)
		if command is None:
			raise KeyError(f"Unknown command id: {command_id!r}")
		return command
