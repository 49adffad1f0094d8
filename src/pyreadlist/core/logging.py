# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pyreadlist (stdlib logging).
#
# Notes:
#	- Safe to call before any UI is mounted (no Tk dependencies).
#	- Idempotent initialization (won't duplicate handlers).
#	- cfg-driven; each setting accepts two keys, first match wins:
#		level		"logging.level"		/ "log_level"		(default: "INFO")
#		console		"logging.console"	/ "log_console"		(default: True)
#		file		"logging.file"		/ "log_file"		(default: None)
#		format		"logging.format"	/ "log_format"		(default: DEFAULT_FORMAT)
#		datefmt		"logging.datefmt"	/ "log_datefmt"		(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial coding / release
# 10/15/2026	Paul G. LeDuc				Table-driven cfg lookup
# ---------------------------------------------------------------------------

from __future__ import annotations

from pathlib import Path
from typing import Any
import logging


APP_LOGGER_NAME = "pyreadlist.app"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# setting -> (primary key, alias key, default)
_SETTINGS: dict[str, tuple[str, str, Any]] = {
	"level": ("logging.level", "log_level", "INFO"),
	"console": ("logging.console", "log_console", True),
	"file": ("logging.file", "log_file", None),
	"format": ("logging.format", "log_format", DEFAULT_FORMAT),
	"datefmt": ("logging.datefmt", "log_datefmt", "%Y-%m-%d %H:%M:%S"),
}

_CONFIG_SIGNATURE: tuple[Any, ...] | None = None
_HANDLERS: list[logging.Handler] = []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()				-> pyreadlist.app
		get_app_logger("navigation")	-> pyreadlist.app.navigation
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_NAME}.{component}")
	return logging.getLogger(APP_LOGGER_NAME)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Configure root logging for pyreadlist.

	Repeated calls with the same settings are no-ops. Calls with different
	settings replace the handlers installed by the previous call.

	Args:
		cfg:
			AppConfig, dict, or anything with get(key, default).
	"""
	global _CONFIG_SIGNATURE

	settings = {name: _lookup(cfg, *spec) for name, spec in _SETTINGS.items()}

	level = coerce_level(settings["level"])
	console = bool(settings["console"])
	log_file = str(settings["file"]) if settings["file"] else None
	fmt = str(settings["format"])
	datefmt = str(settings["datefmt"])

	signature = (level, console, log_file, fmt, datefmt)
	if _CONFIG_SIGNATURE == signature:
		return

	root = logging.getLogger()
	for handler in _HANDLERS:
		root.removeHandler(handler)
		handler.close()
	_HANDLERS.clear()

	root.setLevel(level)
	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console:
		_HANDLERS.append(logging.StreamHandler())

	if log_file:
		Path(log_file).expanduser().parent.mkdir(parents=True, exist_ok=True)
		_HANDLERS.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))

	for handler in _HANDLERS:
		handler.setLevel(level)
		handler.setFormatter(formatter)
		root.addHandler(handler)

	_CONFIG_SIGNATURE = signature


def coerce_level(level: Any) -> int:
	"""
	Convert "debug", "10", 10, etc. to a logging level int (INFO on junk).
	"""
	if isinstance(level, bool):
		return logging.INFO

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


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _lookup(cfg: Any | None, key: str, alias: str, default: Any) -> Any:
	if cfg is None:
		return default

	for k in (key, alias):
		value = cfg.get(k, None)
		if value is not None:
			return value
	return default


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Remove installed handlers and forget the last configuration.
	"""
	global _CONFIG_SIGNATURE
	root = logging.getLogger()
	for handler in _HANDLERS:
		root.removeHandler(handler)
		handler.close()
	_HANDLERS.clear()
	_CONFIG_SIGNATURE = None
