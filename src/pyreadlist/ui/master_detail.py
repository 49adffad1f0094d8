# ---------------------------------------------------------------------------
# File: master_detail.py
# ---------------------------------------------------------------------------
# Description:
#	MasterDetailLayout container for pyreadlist.
#
# Notes:
#	- Two-pane layout: Master (list) | splitter | Detail
#	- The splitter is draggable and adjusts the master pane width,
#	  clamped to [min_master_width, max_master_width].
#	- Hosts two Components and mounts them into its panes.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/16/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import tkinter as tk
from tkinter import ttk

from pyreadlist.ui.component import Component


@dataclass(slots=True)
class MasterDetailLayout(Component):
	master: Optional[Component] = None
	detail: Optional[Component] = None

	master_width: int = 280
	splitter_width: int = 2
	splitter_color: str = "#C8C8C8"
	splitter_active_color: str = "#9E9E9E"

	min_master_width: int = 160
	max_master_width: int = 560

	master_frame: ttk.Frame | None = field(default=None, init=False, repr=False)
	detail_frame: ttk.Frame | None = field(default=None, init=False, repr=False)
	_splitter: tk.Frame | None = field(default=None, init=False, repr=False)

	# Drag state
	_dragging: bool = field(default=False, init=False, repr=False)
	_drag_start_x: int = field(default=0, init=False, repr=False)
	_drag_start_width: int = field(default=0, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		root = ttk.Frame(parent)

		self.master_width = self._clamp(int(self.master_width), self.min_master_width, self.max_master_width)

		root.rowconfigure(0, weight=1)
		root.columnconfigure(0, weight=0, minsize=self.master_width)
		root.columnconfigure(1, weight=0, minsize=int(self.splitter_width))
		root.columnconfigure(2, weight=1, minsize=200)

		self.master_frame = ttk.Frame(root)
		self.master_frame.grid(row=0, column=0, sticky="nsew")

		self._splitter = tk.Frame(
			root,
			bg=self.splitter_color,
			width=int(self.splitter_width),
			cursor="sb_h_double_arrow",
		)
		self._splitter.grid(row=0, column=1, sticky="ns")

		self.detail_frame = ttk.Frame(root)
		self.detail_frame.grid(row=0, column=2, sticky="nsew")

		self._splitter.bind("<Button-1>", self._start_drag)
		self._splitter.bind("<B1-Motion>", self._on_drag)
		self._splitter.bind("<ButtonRelease-1>", self._stop_drag)

		for pane, frame in ((self.master, self.master_frame), (self.detail, self.detail_frame)):
			if pane is not None:
				pane.mount(frame)
				pane.layout()

		return root

	def destroy(self) -> None:
		for pane in (self.master, self.detail):
			if pane is not None:
				pane.destroy()
		Component.destroy(self)

	# -----------------------------------------------------------------------
	# Public setters
	# -----------------------------------------------------------------------

	def set_master_width(self, px: int) -> None:
		self.master_width = self._clamp(int(px), self.min_master_width, self.max_master_width)
		if self.root is None:
			return
		self.root.columnconfigure(0, minsize=self.master_width)

	# -----------------------------------------------------------------------
	# Drag handling
	# -----------------------------------------------------------------------

	def _start_drag(self, event: tk.Event) -> None:
		self._dragging = True
		self._drag_start_x = int(getattr(event, "x_root", 0))
		self._drag_start_width = int(self.master_width)
		if self._splitter is not None:
			self._splitter.configure(bg=self.splitter_active_color)

	def _on_drag(self, event: tk.Event) -> None:
		if not self._dragging:
			return
		dx = int(getattr(event, "x_root", 0)) - self._drag_start_x
		self.set_master_width(self._drag_start_width + dx)

	def _stop_drag(self, _event: tk.Event) -> None:
		if not self._dragging:
			return
		self._dragging = False
		if self._splitter is not None:
			self._splitter.configure(bg=self.splitter_color)

	def _clamp(self, v: int, lo: int, hi: int) -> int:
		if v < lo:
			return lo
		if v > hi:
			return hi
		return v
