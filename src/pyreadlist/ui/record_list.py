# ---------------------------------------------------------------------------
# File: record_list.py
# ---------------------------------------------------------------------------
# Description:
#	RecordListView component (ttk.Treeview) for the reading list master pane.
#
# Notes:
#	- One row per record: title in the tree column, subtitle in "subtitle".
#	- Treeview item ids are str(record.id), so no side lookup table is needed.
#	- Single selection. Emits on_select(UUID) when the user picks a row.
#	- select() is the programmatic path (restore, keyboard commands); the
#	  resulting <<TreeviewSelect>> echo is ignored.
#	- A selection id with no matching row leaves the tree unselected.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/16/2026	Paul G. LeDuc				Initial version
# 10/17/2026	Paul G. LeDuc				Ignore programmatic selection echo
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence
from uuid import UUID

import tkinter as tk
from tkinter import ttk

from pyreadlist.core.logging import get_app_logger
from pyreadlist.models import Record
from pyreadlist.ui.component import Component


log = get_app_logger("ui.record_list")


@dataclass(slots=True)
class RecordListView(Component):
	"""
	Read-only list of records.
	"""

	title: str = "Books"
	show_title: bool = True
	show_subtitles: bool = True

	on_select: Optional[Callable[[Optional[UUID]], None]] = None

	tree: ttk.Treeview | None = field(default=None, init=False, repr=False)

	_records: tuple[Record, ...] = field(default=(), init=False, repr=False)
	_selected: Optional[UUID] = field(default=None, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		root = ttk.Frame(parent)

		row = 0
		if self.show_title:
			ttk.Label(root, text=self.title).grid(row=0, column=0, columnspan=2, sticky="w", padx=8, pady=4)
			ttk.Separator(root, orient="horizontal").grid(row=1, column=0, columnspan=2, sticky="ew")
			row = 2

		columns = ("subtitle",) if self.show_subtitles else ()
		self.tree = ttk.Treeview(root, columns=columns, show="tree", selectmode="browse")
		if self.show_subtitles:
			self.tree.column("subtitle", anchor="w", stretch=True)

		vsb = ttk.Scrollbar(root, orient="vertical", command=self.tree.yview)
		self.tree.configure(yscrollcommand=vsb.set)

		self.tree.grid(row=row, column=0, sticky="nsew")
		vsb.grid(row=row, column=1, sticky="ns")

		root.rowconfigure(row, weight=1)
		root.columnconfigure(0, weight=1)

		self.tree.bind("<<TreeviewSelect>>", self._on_select)

		self._populate()
		return root

	# -----------------------------------------------------------------------
	# RecordListSink
	# -----------------------------------------------------------------------

	def set_records(self, records: Sequence[Record]) -> None:
		self._records = tuple(records)
		self._populate()

	def select(self, record_id: Optional[UUID]) -> None:
		self._selected = record_id
		self._apply_selection()

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _row_values(self, record: Record) -> tuple[str, tuple[str, ...]]:
		"""
		(text, values) for one Treeview row.
		"""
		if self.show_subtitles:
			return record.title, (record.subtitle,)
		return record.title, ()

	def _iid_for(self, record_id: Optional[UUID]) -> Optional[str]:
		"""
		Treeview item id for a record id, or None if there is no such row.
		"""
		if record_id is None:
			return None
		for record in self._records:
			if record.id == record_id:
				return str(record.id)
		return None

	def _populate(self) -> None:
		if self.tree is None:
			return

		existing = self.tree.get_children("")
		if existing:
			self.tree.delete(*existing)

		for record in self._records:
			text, values = self._row_values(record)
			self.tree.insert("", "end", iid=str(record.id), text=text, values=values)

		self._apply_selection()

	def _apply_selection(self) -> None:
		if self.tree is None:
			return

		iid = self._iid_for(self._selected)
		current = self.tree.selection()

		if iid is None:
			if current:
				self.tree.selection_remove(*current)
			return

		if tuple(current) != (iid,):
			self.tree.selection_set(iid)
		self.tree.focus(iid)
		self.tree.see(iid)

	def _on_select(self, _event: tk.Event) -> None:
		if self.tree is None:
			return

		sel = self.tree.selection()
		if not sel:
			return

		iid = sel[0]
		if iid == self._iid_for(self._selected):
			return

		try:
			record_id = UUID(iid)
		except ValueError:
			log.warning("Ignoring selection of unknown row %r", iid)
			return

		self._selected = record_id
		if self.on_select:
			self.on_select(record_id)
