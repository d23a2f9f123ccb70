# ---------------------------------------------------------------------------
# File: keyrouter.py
# ---------------------------------------------------------------------------
# Description:
#	KeyRouter for eztasks (contextual key routing -> command execution).
#
# Notes:
#	- Routes by key sequence strings; no Tk imports.
#	- Layered resolution:
#		1) Focused key scope (e.g., "task.input", "task.editor")
#		2) Current mode (e.g., "edit" while a task is being edited)
#		3) Global/app keymap
#	- Emits keys.pressed, command.dispatched, key.unhandled telemetry.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/12/2026	Initial coding / release
# 10/13/2026	Add telemetry + layer reporting
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, runtime_checkable

from eztasks.app.commands import CommandContext, CommandRegistry
from eztasks.core.telemetry import Telemetry


FocusProvider = Callable[[], Optional[str]]


@runtime_checkable
class KeyMapLike(Protocol):
	def resolve_keyseq(self, keyseq: str) -> Optional[str]:
		...


@dataclass(slots=True)
class KeyRouter:
	"""
	KeyRouter

	- keyseq -> command_id using layered KeyMaps
	- command_id -> execute via CommandRegistry
	"""
	registry: CommandRegistry
	global_keymap: KeyMapLike

	mode_keymaps: dict[str, KeyMapLike] = field(default_factory=dict)
	_mode: Optional[str] = None

	scope_keymaps: dict[str, KeyMapLike] = field(default_factory=dict)
	focus_provider: Optional[FocusProvider] = None

	telemetry: Optional[Telemetry] = None

	def set_mode(self, mode: Optional[str]) -> None:
		self._mode = mode

	def get_mode(self) -> Optional[str]:
		return self._mode

	def set_focus_provider(self, provider: Optional[FocusProvider]) -> None:
		self.focus_provider = provider

	def register_mode_keymap(self, mode: str, keymap: KeyMapLike) -> None:
		self.mode_keymaps[mode] = keymap

	def register_scope_keymap(self, scope: str, keymap: KeyMapLike) -> None:
		self.scope_keymaps[scope] = keymap

	def route_keyseq(self, keyseq: str, ctx: CommandContext) -> bool:
		"""
		Route a key sequence to a command.

		Returns True if a command executed. Resolved-but-disabled commands
		return False so the key can fall through to the widget.
		Unknown command ids raise KeyError.
		"""
		if self.telemetry:
			self.telemetry.counter("keys.pressed", 1, {"keyseq": keyseq})

		command_id, layer = self.resolve(keyseq)
		if not command_id:
			if self.telemetry:
				self.telemetry.event("key.unhandled", {"keyseq": keyseq})
			return False

		if not self.registry.is_enabled(command_id, ctx):
			return False

		if self.telemetry:
			self.telemetry.event(
				"command.dispatched",
				{"command_id": command_id, "keyseq": keyseq, "layer": layer},
			)

		self.registry.execute(command_id, ctx)
		return True

	def resolve_command_id(self, keyseq: str) -> Optional[str]:
		return self.resolve(keyseq)[0]

	def resolve(self, keyseq: str) -> tuple[Optional[str], Optional[str]]:
		"""
		Return (command_id, layer) where layer is "scope", "mode" or "global".
		"""
		scope = self.focus_provider() if self.focus_provider else None
		if scope:
			km = self.scope_keymaps.get(scope)
			if km:
				cid = km.resolve_keyseq(keyseq)
				if cid:
					return cid, "scope"

		if self._mode:
			km = self.mode_keymaps.get(self._mode)
			if km:
				cid = km.resolve_keyseq(keyseq)
				if cid:
					return cid, "mode"

		cid = self.global_keymap.resolve_keyseq(keyseq)
		return cid, ("global" if cid else None)
