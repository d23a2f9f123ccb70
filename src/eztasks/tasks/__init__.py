# ---------------------------------------------------------------------------
# File: __init__.py
# Description:
#	Task domain for eztasks (model + store).
#
# Notes:
#	- No Tk dependencies in this package.
#
# ---------------------------------------------------------------------------

from .model import Task, TaskId, TaskIdGenerator, normalize_text
from .store import TaskSnapshot, TaskStore

__all__ = [
	"Task",
	"TaskId",
	"TaskIdGenerator",
	"TaskSnapshot",
	"TaskStore",
	"normalize_text",
]
