# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared pytest fixtures for eztasks.
#
# Notes:
#	- Tk fixtures skip when no display is available (headless CI).
#	- Pure-logic tests should not request them.
#
# ---------------------------------------------------------------------------

from __future__ import annotations

import tkinter as tk
from typing import Iterator

import pytest

from eztasks.core.telemetry import MemorySink, Telemetry
from eztasks.tasks.store import TaskStore


@pytest.fixture()
def sink() -> MemorySink:
	return MemorySink()


@pytest.fixture()
def telemetry(sink: MemorySink) -> Telemetry:
	return Telemetry(enabled=True, sink=sink)


@pytest.fixture()
def store(telemetry: Telemetry) -> TaskStore:
	return TaskStore(telemetry=telemetry)


@pytest.fixture()
def tk_root() -> Iterator[tk.Tk]:
	try:
		root = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"Tk unavailable: {ex}")
	root.withdraw()
	try:
		yield root
	finally:
		try:
			root.destroy()
		except tk.TclError:
			pass


@pytest.fixture()
def app(store: TaskStore, telemetry: Telemetry):
	from eztasks.app import App

	try:
		a = App(width=480, height=360, store=store, telemetry=telemetry)
	except tk.TclError as ex:
		pytest.skip(f"Tk unavailable: {ex}")
	a.withdraw()
	try:
		yield a
	finally:
		try:
			a.destroy()
		except tk.TclError:
			pass
