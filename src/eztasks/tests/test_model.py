# ---------------------------------------------------------------------------
# File: test_model.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for Task, TaskIdGenerator and normalize_text.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------

import pytest

from eztasks.tasks.model import Task, TaskIdGenerator, normalize_text


def test_normalize_text_trims():
	assert normalize_text("  Buy milk \n") == "Buy milk"


def test_normalize_text_empty_and_whitespace_are_none():
	assert normalize_text("") is None
	assert normalize_text("   \t\n") is None
	assert normalize_text(None) is None


def test_task_defaults_to_not_completed_and_trims_text():
	task = Task(id=1, text="  Walk dog ")

	assert task.completed is False
	assert task.text == "Walk dog"


def test_task_rejects_blank_text():
	with pytest.raises(ValueError):
		Task(id=1, text="   ")


def test_id_generator_is_monotonic_and_unique():
	ids = TaskIdGenerator()

	issued = [ids.next_id() for _ in range(1000)]

	assert issued[0] == 1
	assert len(set(issued)) == 1000
	assert issued == sorted(issued)


def test_id_generator_custom_start():
	ids = TaskIdGenerator(start=40)

	assert ids.next_id() == 40
	assert ids.next_id() == 41
