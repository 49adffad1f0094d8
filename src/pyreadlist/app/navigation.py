# ---------------------------------------------------------------------------
# File: navigation.py
# ---------------------------------------------------------------------------
# Description:
#	ReadingListNavigator: master/detail routing for pyreadlist.
#
# Notes:
#	- UI-toolkit-agnostic. Views attach as sinks (RecordListSink,
#	  RecordDetailSink) and receive pushes; they never query services.
#	- The only inbound UI event is on_row_selected(record_id | None).
#	- Existence checks happen here, at render time: a selection whose id is
#	  not in the store renders as an empty detail pane but is left in place.
#	- Keyboard navigation (next/previous) follows all_records() order and
#	  clamps at the ends.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	Paul G. LeDuc				Initial coding / release
# 10/15/2026	Paul G. LeDuc				Add next/previous/clear for commands
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable
from uuid import UUID

from pyreadlist.core.logging import get_app_logger
from pyreadlist.models import Record, RecordStore
from pyreadlist.services.selection import SelectionController, TypedSelection


log = get_app_logger("navigation")


@runtime_checkable
class RecordListSink(Protocol):
	"""
	Minimal interface implemented by list (master) views.
	"""

	def set_records(self, records: Sequence[Record]) -> None: ...
	def select(self, record_id: Optional[UUID]) -> None: ...


@runtime_checkable
class RecordDetailSink(Protocol):
	"""
	Minimal interface implemented by detail views.
	"""

	def show(self, record: Optional[Record]) -> None: ...


class ReadingListNavigator:
	"""
	ReadingListNavigator

	Keeps attached list/detail sinks in step with RecordStore and
	SelectionController.
	"""

	def __init__(self, store: RecordStore, selection: SelectionController) -> None:
		self.store = store
		self.selection = selection

		self._list: Optional[RecordListSink] = None
		self._detail: Optional[RecordDetailSink] = None

		self._unsubscribers = [
			store.subscribe(self._on_records_changed),
			selection.subscribe(self._on_selection_changed),
		]

	# -----------------------------------------------------------------------
	# Wiring
	# -----------------------------------------------------------------------

	def attach_list(self, sink: Optional[RecordListSink]) -> None:
		self._list = sink
		self._push_list()

	def attach_detail(self, sink: Optional[RecordDetailSink]) -> None:
		self._detail = sink
		self._push_detail()

	def restore(self) -> None:
		"""
		Push the restored state to every attached sink.
		"""
		current = self.selection.current_selection()
		log.info(
			"Restoring reading list: %d records, selection=%s",
			len(self.store),
			current if current is not None else "none",
		)
		self._push_list()
		self._push_detail()

	def close(self) -> None:
		for unsubscribe in self._unsubscribers:
			unsubscribe()
		self._unsubscribers.clear()
		self._list = None
		self._detail = None

	# -----------------------------------------------------------------------
	# Events + queries
	# -----------------------------------------------------------------------

	def on_row_selected(self, record_id: Optional[UUID]) -> None:
		"""
		The user picked a row (or cleared the selection) in the list view.
		"""
		self.selection.set_selection(record_id)

	def selected_record(self) -> Optional[Record]:
		current = self.selection.current_selection()
		if current is None:
			return None

		record = self.store.find(current)
		if record is None:
			log.debug("Selection %s does not match any record", current)
		return record

	def has_selection(self) -> bool:
		return self.selection.current_selection() is not None

	# -----------------------------------------------------------------------
	# Navigation
	# -----------------------------------------------------------------------

	def select_next(self) -> None:
		self._step(+1)

	def select_previous(self) -> None:
		self._step(-1)

	def clear_selection(self) -> None:
		self.selection.set_selection(None)

	def _step(self, delta: int) -> None:
		records = self.store.all_records()
		if not records:
			return

		current = self.selection.current_selection()
		index = self.store.index_of(current) if current is not None else None

		if index is None:
			target = records[0] if delta > 0 else records[-1]
		else:
			target = records[max(0, min(len(records) - 1, index + delta))]

		self.selection.set_selection(target.id)

	# -----------------------------------------------------------------------
	# Internal helpers
	# -----------------------------------------------------------------------

	def _on_records_changed(self, _records: tuple[Record, ...]) -> None:
		self._push_list()
		self._push_detail()

	def _on_selection_changed(self, selection: TypedSelection) -> None:
		if self._list is not None:
			self._list.select(selection)
		self._push_detail()

	def _push_list(self) -> None:
		if self._list is None:
			return
		self._list.set_records(self.store.all_records())
		self._list.select(self.selection.current_selection())

	def _push_detail(self) -> None:
		if self._detail is None:
			return
		self._detail.show(self.selected_record())
