# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#	Main window for pyreadlist.
#
# Notes:
#	- App owns the session services: settings storage, RecordStore,
#	  SelectionController, navigator, commands and key map.
#	- Services can be injected (tests, alternate storage); otherwise they
#	  are built from cfg.
#	- Window close routes through the app.quit command.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/16/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Add ttkthemes theme + key -> command binding
# 10/19/2026	Paul G. LeDuc				Selection-gated registry; warn on dangling keys
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional

import tkinter as tk
from tkinter import ttk

from ttkthemes import ThemedStyle

from pyreadlist.app.commands import CommandRegistry, build_command_registry
from pyreadlist.app.keys import KeyMap, build_default_keymap
from pyreadlist.app.navigation import ReadingListNavigator
from pyreadlist.core.config import AppConfig
from pyreadlist.core.logging import get_app_logger, init_logging
from pyreadlist.models import RecordStore
from pyreadlist.services import (
	JsonSettingsStore,
	SelectionController,
	SettingsStore,
	selection_slot,
)
from pyreadlist.ui.component import Component


DEFAULT_TITLE = "Reading List"
DEFAULT_THEME = "arc"


class App(tk.Tk):
	"""
	App

	Root window and service owner for the reading list.
	"""

	def __init__(
		self,
		width: int | None = None,
		height: int | None = None,
		title: str | None = None,
		cfg: dict[str, Any] | None = None,
		*,
		store: RecordStore | None = None,
		settings: SettingsStore | None = None,
	) -> None:
		super().__init__()

		self.cfg = AppConfig(cfg)
		init_logging(self.cfg)
		self.log = get_app_logger()

		self.title_text = title or str(self.cfg.get("title", DEFAULT_TITLE))
		self.title(self.title_text)

		# -------------------------------------------------------------------
		# Services
		# -------------------------------------------------------------------

		if settings is None:
			settings = JsonSettingsStore(self.cfg.state_file())
		self.settings = settings

		self.store = store if store is not None else RecordStore.with_sample_records()
		self.selection = SelectionController(
			selection_slot(self.settings, str(self.cfg.get("scope", "main")))
		)
		self.navigator = ReadingListNavigator(self.store, self.selection)

		# -------------------------------------------------------------------
		# Commands + keys
		# -------------------------------------------------------------------

		self.commands: CommandRegistry = build_command_registry(self.navigator, self.quit_app)

		self.keymap: KeyMap = build_default_keymap()
		self._bind_keys()

		# -------------------------------------------------------------------
		# Components
		# -------------------------------------------------------------------

		self.components: list[Component] = []
		self._components_by_name: dict[str, Component] = {}

		self.update_idletasks()
		self._apply_geometry(
			width if width is not None else self.cfg.get("width", 900),
			height if height is not None else self.cfg.get("height", 600),
		)
		self._apply_theme(str(self.cfg.get("theme", DEFAULT_THEME)))

		self.root_frame = ttk.Frame(self)
		self.root_frame.pack(fill="both", expand=True)

		self.protocol("WM_DELETE_WINDOW", self.quit_app)

		self.log.info("App created (state=%r, records=%d)", self.settings, len(self.store))

	# -----------------------------------------------------------------------
	# Component lifecycle
	# -----------------------------------------------------------------------

	def add_component(self, component: Component) -> None:
		"""
		Mount a top-level component. Names must be unique within the App.
		"""
		if component.name in self._components_by_name:
			raise ValueError(f"Duplicate component name {component.name!r}")

		self.components.append(component)
		if component.name is not None:
			self._components_by_name[component.name] = component

		component.mount(self.root_frame)
		component.layout()

	def find_component(self, name: str) -> Optional[Component]:
		return self._components_by_name.get(name)

	# -----------------------------------------------------------------------
	# Commands
	# -----------------------------------------------------------------------

	def invoke(self, command_id: str) -> Any:
		return self.commands.invoke(command_id)

	def _bind_keys(self) -> None:
		for keyseq, command_id in self.keymap.dangling(self.commands.ids()):
			self.log.warning("Key %s is bound to unknown command %s", keyseq, command_id)
			self.keymap.unbind(keyseq)

		for keyseq, command_id in self.keymap.items():
			try:
				self.bind_all(keyseq, lambda _e, cid=command_id: self._on_key(cid))
			except tk.TclError as ex:
				self.log.warning("Cannot bind %s -> %s: %s", keyseq, command_id, ex)

	def _on_key(self, command_id: str) -> str:
		self.invoke(command_id)
		return "break"

	# -----------------------------------------------------------------------
	# Window setup
	# -----------------------------------------------------------------------

	def _apply_geometry(self, width: Any, height: Any) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		win_w = max(1, min(int(width), screen_w))
		win_h = max(1, min(int(height), screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	def _apply_theme(self, theme: str) -> None:
		self.style = ThemedStyle(self)
		try:
			self.style.set_theme(theme)
		except tk.TclError as ex:
			self.log.warning("Unknown theme %r, keeping default: %s", theme, ex)

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		self.navigator.restore()
		self.mainloop()

	def quit_app(self) -> None:
		self.log.info("Shutting down (selection=%s)", self.selection.current_selection())
		self.navigator.close()
		for component in list(self.components):
			component.destroy()
		self.components.clear()
		self._components_by_name.clear()
		self.destroy()

	def __str__(self) -> str:
		return f"{self.__class__.__name__}(title={self.title_text!r})"

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
