# ---------------------------------------------------------------------------
# File: store.py
# ---------------------------------------------------------------------------
# Description:
#	TaskStore for eztasks: the task collection plus editor state.
#
# Notes:
#	- TaskStore owns all state (tasks, new-task draft, edit mode).
#	- UI components never mutate tasks directly; they render snapshots.
#	- Subscribers receive an immutable TaskSnapshot after every transition
#	  that changes the list or the edit mode.
#	- Draft text updates (set_new_text/set_edit_text) are silent.
#	- Invalid text is discarded without raising.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/12/2026	Initial coding / release
# 10/13/2026	Add subscribe/snapshot observation
# 10/14/2026	Exit edit mode when the edited task is deleted/completed
# 10/17/2026	Keep the draft on explicit add; refuse saving a task not in edit
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional

from eztasks.core.logging import get_app_logger
from eztasks.core.telemetry import Telemetry, get_telemetry
from eztasks.tasks.model import Task, TaskId, TaskIdGenerator, normalize_text


log = get_app_logger("tasks")


@dataclass(frozen=True, slots=True)
class TaskSnapshot:
	"""
	Immutable view of store state, handed to renderers.
	"""
	tasks: tuple[Task, ...] = ()
	new_text: str = ""
	editing_id: Optional[TaskId] = None
	edit_text: str = ""

	@property
	def total_count(self) -> int:
		return len(self.tasks)

	@property
	def completed_count(self) -> int:
		return sum(1 for t in self.tasks if t.completed)

	@property
	def is_empty(self) -> bool:
		return not self.tasks


Subscriber = Callable[[TaskSnapshot], None]


class TaskStore:
	"""
	TaskStore

	In-memory, insertion-ordered task list with a single edit slot.
	"""

	def __init__(
		self,
		*,
		ids: TaskIdGenerator | None = None,
		telemetry: Telemetry | None = None,
	) -> None:
		self._ids = ids or TaskIdGenerator()
		self._telemetry = telemetry

		self._tasks: list[Task] = []
		self._new_text: str = ""
		self._editing_id: Optional[TaskId] = None
		self._edit_text: str = ""

		self._subscribers: list[Subscriber] = []

	# -----------------------------------------------------------------------
	# Queries
	# -----------------------------------------------------------------------

	@property
	def tasks(self) -> list[Task]:
		return [replace(t) for t in self._tasks]

	@property
	def new_text(self) -> str:
		return self._new_text

	@property
	def editing_id(self) -> Optional[TaskId]:
		return self._editing_id

	@property
	def edit_text(self) -> str:
		return self._edit_text

	def get(self, task_id: TaskId) -> Optional[Task]:
		task = self._find(task_id)
		return replace(task) if task is not None else None

	def is_editing(self, task_id: TaskId | None = None) -> bool:
		if task_id is None:
			return self._editing_id is not None
		return self._editing_id == task_id

	def can_edit(self, task_id: TaskId) -> bool:
		task = self._find(task_id)
		return task is not None and not task.completed

	def total_count(self) -> int:
		return len(self._tasks)

	def completed_count(self) -> int:
		return sum(1 for t in self._tasks if t.completed)

	def snapshot(self) -> TaskSnapshot:
		return TaskSnapshot(
			tasks=tuple(replace(t) for t in self._tasks),
			new_text=self._new_text,
			editing_id=self._editing_id,
			edit_text=self._edit_text,
		)

	# -----------------------------------------------------------------------
	# Observation
	# -----------------------------------------------------------------------

	def subscribe(self, cb: Subscriber, *, replay: bool = False) -> Callable[[], None]:
		"""
		Register a callback for state changes.

		Returns a function that removes the subscription.
		"""
		self._subscribers.append(cb)
		if replay:
			cb(self.snapshot())

		def _unsubscribe() -> None:
			if cb in self._subscribers:
				self._subscribers.remove(cb)

		return _unsubscribe

	# -----------------------------------------------------------------------
	# Drafts
	# -----------------------------------------------------------------------

	def set_new_text(self, text: str) -> None:
		self._new_text = text

	def set_edit_text(self, text: str) -> None:
		self._edit_text = text

	# -----------------------------------------------------------------------
	# Mutators
	# -----------------------------------------------------------------------

	def add(self, text: str | None = None) -> Optional[Task]:
		"""
		Append a new task built from text (defaults to the new-task draft).

		Empty/whitespace text is a no-op; the draft is left as typed.
		The draft is only cleared when it was the text added.
		"""
		raw = self._new_text if text is None else text
		clean = normalize_text(raw)
		if clean is None:
			log.debug("Ignoring empty task text")
			self._t().counter("tasks.input_rejected", attrs={"action": "add"})
			return None

		task = Task(id=self._ids.next_id(), text=clean)
		self._tasks.append(task)
		if text is None:
			self._new_text = ""

		log.info("Added task %s: %s", task.id, task.text)
		self._t().event("task.added", {"task_id": task.id})
		self._notify()
		return replace(task)

	def delete(self, task_id: TaskId) -> bool:
		task = self._find(task_id)
		if task is None:
			return False

		self._tasks.remove(task)
		if self._editing_id == task_id:
			self._reset_edit()

		log.info("Deleted task %s", task_id)
		self._t().event("task.deleted", {"task_id": task_id})
		self._notify()
		return True

	def toggle(self, task_id: TaskId) -> bool:
		task = self._find(task_id)
		if task is None:
			return False

		task.completed = not task.completed

		# Completed tasks are never editable
		if task.completed and self._editing_id == task_id:
			self._reset_edit()

		log.info("Task %s completed=%s", task_id, task.completed)
		self._t().event("task.toggled", {"task_id": task_id, "completed": task.completed})
		self._notify()
		return True

	def begin_edit(self, task_id: TaskId) -> bool:
		task = self._find(task_id)
		if task is None or task.completed:
			return False

		self._editing_id = task_id
		self._edit_text = task.text

		log.debug("Editing task %s", task_id)
		self._t().event("task.edit_started", {"task_id": task_id})
		self._notify()
		return True

	def save_edit(self, task_id: TaskId | None = None) -> bool:
		"""
		Commit the edit draft to the target task, then leave edit mode.

		Returns True if the task text was replaced. A task_id other than the
		one being edited is refused and leaves state unchanged.
		"""
		target = self._editing_id
		if target is None:
			return False
		if task_id is not None and task_id != target:
			log.debug("Refusing save for task %s while editing %s", task_id, target)
			return False

		clean = normalize_text(self._edit_text)
		task = self._find(target)

		changed = False
		if clean is not None and task is not None:
			task.text = clean
			changed = True
		elif clean is None:
			self._t().counter("tasks.input_rejected", attrs={"action": "edit"})

		self._reset_edit()

		if changed:
			log.info("Updated task %s: %s", target, clean)
		self._t().event("task.edit_saved", {"task_id": target, "changed": changed})
		self._notify()
		return changed

	def cancel_edit(self) -> None:
		if self._editing_id is None and not self._edit_text:
			return

		task_id = self._editing_id
		self._reset_edit()

		self._t().event("task.edit_cancelled", {"task_id": task_id})
		self._notify()

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _find(self, task_id: TaskId) -> Optional[Task]:
		for task in self._tasks:
			if task.id == task_id:
				return task
		return None

	def _reset_edit(self) -> None:
		self._editing_id = None
		self._edit_text = ""

	def _t(self) -> Telemetry:
		# Resolve lazily so init_telemetry() after construction still applies.
		return self._telemetry if self._telemetry is not None else get_telemetry()

	def _notify(self) -> None:
		if not self._subscribers:
			return
		snap = self.snapshot()
		for cb in list(self._subscribers):
			cb(snap)
