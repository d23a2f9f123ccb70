# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#	Key mapping for eztasks (key sequence -> command id).
#
# Notes:
#	Pure mapping; no Tk imports. Tk event binding lives in App.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/12/2026	Initial coding / release
# 10/13/2026	Add resolve_keyseq (KeyPress-variant matching)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


def canonical_keyseq(keyseq: str) -> str:
	"""
	Drop Tk's optional "KeyPress-" detail: "<Control-KeyPress-q>" -> "<Control-q>".
	"""
	return keyseq.replace("KeyPress-", "")


@dataclass
class KeyMap:
	"""
	KeyMap

	Bindings of key sequences (e.g., "<Return>") to command ids (e.g., "task.add").
	"""
	_bindings: dict[str, str] = field(default_factory=dict)

	def bind(self, keyseq: str, command_id: str, *, overwrite: bool = True) -> None:
		if not keyseq:
			raise ValueError("keyseq must be a non-empty string")
		if not command_id:
			raise ValueError("command_id must be a non-empty string")

		if not overwrite and keyseq in self._bindings:
			raise ValueError(f"Key binding already exists for {keyseq!r}")

		self._bindings[keyseq] = command_id

	def unbind(self, keyseq: str) -> None:
		self._bindings.pop(keyseq, None)

	def resolve(self, keyseq: str) -> Optional[str]:
		return self._bindings.get(keyseq)

	def resolve_keyseq(self, keyseq: str) -> Optional[str]:
		"""
		Exact match first, then canonical (KeyPress-free) match.
		"""
		cid = self._bindings.get(keyseq)
		if cid:
			return cid

		wanted = canonical_keyseq(keyseq)
		for bound, cid in self._bindings.items():
			if canonical_keyseq(bound) == wanted:
				return cid
		return None

	def keys(self) -> list[str]:
		return list(self._bindings.keys())

	def items(self) -> list[tuple[str, str]]:
		return list(self._bindings.items())

	def clear(self) -> None:
		self._bindings.clear()
