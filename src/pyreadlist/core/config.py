# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	App configuration helpers for pyreadlist.
#
# Notes:
#	- AppConfig is a light read-only wrapper over a plain dict.
#	- Supported keys:
#		"title"			window title (default: "Reading List")
#		"width"/"height"	requested window size (clamped to screen)
#		"theme"			ttkthemes theme name (default: "arc")
#		"state_file"	path of the persisted state JSON file
#		"scope"			navigation destination for the selection slot
#		logging keys	see pyreadlist.core.logging
#	- Default state file:
#		Windows:	%LOCALAPPDATA%\pyreadlist\state.json
#		Others:		~/.pyreadlist/state.json
#		PYREADLIST_STATE_FILE overrides both.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Moved AppConfig out of app.py
# 10/13/2026	Paul G. LeDuc				Add default state file resolution
# ---------------------------------------------------------------------------

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any


STATE_FILE_ENV = "PYREADLIST_STATE_FILE"
STATE_FILE_NAME = "state.json"


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for config options.
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)

	def state_file(self) -> Path:
		"""
		Resolve the state file path (cfg first, then env, then platform default).
		"""
		configured = self.get("state_file")
		if configured:
			return Path(configured).expanduser()
		return default_state_file()


def user_data_dir() -> Path:
	"""
	Per-user directory for pyreadlist state.
	"""
	if os.name == "nt":
		local_appdata = os.environ.get("LOCALAPPDATA")
		if local_appdata:
			return Path(local_appdata) / "pyreadlist"
		return Path.home() / "AppData" / "Local" / "pyreadlist"
	return Path.home() / ".pyreadlist"


def default_state_file() -> Path:
	override = os.environ.get(STATE_FILE_ENV)
	if override:
		return Path(override).expanduser()
	return user_data_dir() / STATE_FILE_NAME
