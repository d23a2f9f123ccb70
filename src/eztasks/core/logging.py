# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for eztasks (stdlib logging).
#
# Notes:
#	- Safe to call before any UI is mounted (no Tk dependencies).
#	- Idempotent initialization (won't duplicate handlers).
#	- Each setting has a dotted key and a flat alias; first match wins:
#
#		level		"logging.level"		/ "log_level"		(default: "INFO")
#		console		"logging.console"	/ "log_console"		(default: True)
#		file		"logging.file"		/ "log_file"		(default: None)
#		file_mode	"logging.file_mode"	/ "log_file_mode"	(default: "a")
#		reset_root	"logging.reset_root"	/ "log_reset_root"	(default: True)
#		format		"logging.format"	/ "log_format"		(default: DEFAULT_FORMAT)
#		datefmt		"logging.datefmt"	/ "log_datefmt"		(default: DEFAULT_DATEFMT)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/12/2026	Initial coding / release
# 10/13/2026	Table-driven cfg lookup
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


APP_LOGGER_NAME = "eztasks.app"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_SETTINGS: dict[str, tuple[str, str, Any]] = {
	"level": ("logging.level", "log_level", "INFO"),
	"console": ("logging.console", "log_console", True),
	"file": ("logging.file", "log_file", None),
	"file_mode": ("logging.file_mode", "log_file_mode", "a"),
	"reset_root": ("logging.reset_root", "log_reset_root", True),
	"format": ("logging.format", "log_format", DEFAULT_FORMAT),
	"datefmt": ("logging.datefmt", "log_datefmt", DEFAULT_DATEFMT),
}


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()			-> eztasks.app
		get_app_logger("tasks")		-> eztasks.app.tasks
		get_app_logger("keys")		-> eztasks.app.keys
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_NAME}.{component}")
	return logging.getLogger(APP_LOGGER_NAME)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Initialize stdlib logging for eztasks.

	Safe to call multiple times; the root logger is only reconfigured when
	the effective settings change.

	Args:
		cfg:
			Anything with cfg.get(key, default) (e.g., AppConfig) or a dict.
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	opts = {name: _setting(cfg, name) for name in _SETTINGS}

	level = _coerce_level(opts["level"])
	log_file = str(opts["file"]) if opts["file"] else None
	file_mode = _coerce_file_mode(opts["file_mode"])

	signature: tuple[Any, ...] = (
		level,
		bool(opts["console"]),
		log_file,
		file_mode,
		bool(opts["reset_root"]),
		str(opts["format"]),
		str(opts["datefmt"]),
	)

	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	_configure_root_logger(
		level=level,
		console_enabled=bool(opts["console"]),
		log_file=log_file,
		file_mode=file_mode,
		fmt=str(opts["format"]),
		datefmt=str(opts["datefmt"]),
		reset_root=bool(opts["reset_root"]),
	)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _setting(cfg: Any | None, name: str) -> Any:
	dotted, flat, default = _SETTINGS[name]
	value = _cfg_get(cfg, dotted, None)
	if value is None:
		value = _cfg_get(cfg, flat, default)
	return value


def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	"""
	Read a key from cfg.get(key, default) or a mapping.
	"""
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if callable(getter):
		return getter(key, default)

	try:
		return cfg[key]
	except (KeyError, IndexError, TypeError):
		return default


def _coerce_level(level: Any) -> int:
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = logging.getLevelName(val)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	# Only append/overwrite are meaningful for a log file
	if isinstance(mode, str) and mode.strip().lower() in ("a", "w"):
		return mode.strip().lower()
	return "a"


def _configure_root_logger(
	*,
	level: int,
	console_enabled: bool,
	log_file: str | None,
	file_mode: str,
	fmt: str,
	datefmt: str,
	reset_root: bool,
) -> None:
	root = logging.getLogger()
	root.setLevel(level)

	if reset_root:
		for h in list(root.handlers):
			root.removeHandler(h)

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console_enabled:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if log_file:
		parent = os.path.dirname(os.path.abspath(log_file))
		if parent:
			os.makedirs(parent, exist_ok=True)
		fh = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		root.addHandler(fh)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Reset module-scoped init state (unit tests only).
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE
	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
