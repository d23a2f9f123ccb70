from __future__ import annotations

from typing import Any

from eztasks.app import App
from eztasks.core.logging import get_app_logger, init_logging
from eztasks.core.telemetry import init_telemetry
from eztasks.ui.banner import Footer, Header
from eztasks.ui.statusbar import StatusBar
from eztasks.ui.task_input import TaskInput
from eztasks.ui.task_list import TaskListView


DEFAULT_CONFIG: dict[str, Any] = {
	"title": "eztasks",
	"scrollable": True,
	"log_level": "INFO",
	"status_log": True,
	"telemetry_enabled": False,
	"telemetry_sink": "log",
}


def build_app(app: App) -> None:
	"""
	Compose the UI tree: header, input, list, totals, footer.
	"""
	app.add_component(Header(name="Header"))

	task_input = TaskInput(
		name="TaskInput",
		invoker=app.execute,
		on_text_change=app.store.set_new_text,
	)
	app.add_component(task_input)

	app.add_component(TaskListView(
		name="TaskList",
		invoker=app.execute,
		is_enabled=app.is_enabled,
		on_edit_text_change=app.store.set_edit_text,
	))

	# Bottom-packed: Footer first so it stays below the totals bar
	app.add_component(Footer(name="Footer"))

	statusbar = StatusBar(name="StatusBar")
	app.add_component(statusbar)
	if bool(app.cfg.get("status_log", True)):
		statusbar.attach_logging(get_app_logger("tasks"))

	task_input.focus()


def main(cfg: dict[str, Any] | None = None) -> None:
	options = dict(DEFAULT_CONFIG)
	options.update(cfg or {})

	init_logging(options)
	init_telemetry(options, logger=get_app_logger("telemetry"))

	app = App(cfg=options)
	build_app(app)
	app.run()


if __name__ == "__main__":
	main()
