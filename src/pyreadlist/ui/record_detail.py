# ---------------------------------------------------------------------------
# File: record_detail.py
# ---------------------------------------------------------------------------
# Description:
#	Read-only detail pane for the selected record.
#
# Notes:
#	- show(None) renders a placeholder (nothing selected, or the selection
#	  points at a record that no longer exists).
#	- _render() decides what to show; _write() touches widgets. Tests can
#	  override _write to check decisions without a GUI.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/16/2026	Paul G. LeDuc				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import tkinter as tk
from tkinter import ttk

from pyreadlist.models import Record
from pyreadlist.ui.component import Component


@dataclass(slots=True)
class RecordDetailView(Component):
	placeholder: str = "No book selected"
	subtitle_prefix: str = "by "

	_title_label: ttk.Label | None = field(default=None, init=False, repr=False)
	_subtitle_label: ttk.Label | None = field(default=None, init=False, repr=False)
	_last: tuple[str, str] = field(default=("", ""), init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		root = ttk.Frame(parent, padding=16)

		self._title_label = ttk.Label(root, text="", font=("TkDefaultFont", 18, "bold"))
		self._subtitle_label = ttk.Label(root, text="")

		self._title_label.pack(anchor="nw")
		self._subtitle_label.pack(anchor="nw", pady=(6, 0))

		title, subtitle = self._last
		self._write(title, subtitle)

		return root

	# -----------------------------------------------------------------------
	# RecordDetailSink
	# -----------------------------------------------------------------------

	def show(self, record: Optional[Record]) -> None:
		title, subtitle = self._render(record)
		self._last = (title, subtitle)
		self._write(title, subtitle)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _render(self, record: Optional[Record]) -> tuple[str, str]:
		if record is None:
			return self.placeholder, ""

		if record.subtitle:
			return record.title, f"{self.subtitle_prefix}{record.subtitle}"
		return record.title, ""

	def _write(self, title: str, subtitle: str) -> None:
		if self._title_label is None or self._subtitle_label is None:
			return
		self._title_label.configure(text=title)
		self._subtitle_label.configure(text=subtitle)
