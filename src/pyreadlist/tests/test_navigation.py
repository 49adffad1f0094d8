# ---------------------------------------------------------------------------
# File: test_navigation.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ReadingListNavigator.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Fake sinks record every push for deterministic assertions.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/15/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional, Sequence
from uuid import UUID

from pyreadlist.app.navigation import (
	ReadingListNavigator,
	RecordDetailSink,
	RecordListSink,
)
from pyreadlist.models import Record, RecordStore
from pyreadlist.services import MemorySettingsStore, SelectionController, selection_slot


A = Record(title="A", subtitle="a", id=UUID(int=1))
B = Record(title="B", subtitle="b", id=UUID(int=2))
C = Record(title="C", subtitle="c", id=UUID(int=3))


class _FakeList:
	def __init__(self) -> None:
		self.records: tuple[Record, ...] = ()
		self.selected: Optional[UUID] = None
		self.select_calls = 0

	def set_records(self, records: Sequence[Record]) -> None:
		self.records = tuple(records)

	def select(self, record_id: Optional[UUID]) -> None:
		self.selected = record_id
		self.select_calls += 1


class _FakeDetail:
	def __init__(self) -> None:
		self.shown: list[Optional[Record]] = []

	def show(self, record: Optional[Record]) -> None:
		self.shown.append(record)


def _navigator(
	records: Sequence[Record] = (A, B, C),
	settings: MemorySettingsStore | None = None,
) -> tuple[ReadingListNavigator, _FakeList, _FakeDetail]:
	store = RecordStore(records)
	controller = SelectionController(selection_slot(settings or MemorySettingsStore()))
	nav = ReadingListNavigator(store, controller)

	lst = _FakeList()
	detail = _FakeDetail()
	nav.attach_list(lst)
	nav.attach_detail(detail)
	return nav, lst, detail


def test_fakes_satisfy_sink_protocols():
	assert isinstance(_FakeList(), RecordListSink)
	assert isinstance(_FakeDetail(), RecordDetailSink)


def test_attach_pushes_records_and_empty_detail():
	_, lst, detail = _navigator()

	assert lst.records == (A, B, C)
	assert lst.selected is None
	assert detail.shown == [None]


def test_restore_pushes_persisted_selection():
	settings = MemorySettingsStore({"main.selection": str(B.id)})
	nav, lst, detail = _navigator(settings=settings)

	nav.restore()

	assert lst.selected == B.id
	assert detail.shown[-1] is B


def test_row_selection_updates_slot_and_detail():
	settings = MemorySettingsStore()
	nav, _, detail = _navigator(settings=settings)

	nav.on_row_selected(C.id)

	assert settings.values == {"main.selection": str(C.id)}
	assert detail.shown[-1] is C
	assert nav.selected_record() is C


def test_dangling_selection_renders_empty_detail_but_is_kept():
	settings = MemorySettingsStore({"main.selection": str(UUID(int=404))})
	nav, lst, detail = _navigator(settings=settings)

	nav.restore()

	assert nav.selected_record() is None
	assert detail.shown[-1] is None
	assert lst.selected == UUID(int=404)
	assert settings.values["main.selection"] == str(UUID(int=404))


def test_removing_selected_record_keeps_selection_and_refreshes():
	nav, lst, detail = _navigator()
	nav.on_row_selected(B.id)

	nav.store.remove(B.id)

	assert lst.records == (A, C)
	assert detail.shown[-1] is None
	assert nav.selection.current_selection() == B.id


def test_select_next_and_previous_clamp_at_ends():
	nav, _, _ = _navigator()

	nav.select_next()
	assert nav.selected_record() is A

	nav.select_next()
	nav.select_next()
	nav.select_next()
	assert nav.selected_record() is C

	nav.select_previous()
	assert nav.selected_record() is B

	nav.select_previous()
	nav.select_previous()
	assert nav.selected_record() is A


def test_select_previous_without_selection_picks_last():
	nav, _, _ = _navigator()

	nav.select_previous()

	assert nav.selected_record() is C


def test_step_from_dangling_selection_restarts_at_first():
	settings = MemorySettingsStore({"main.selection": str(UUID(int=404))})
	nav, _, _ = _navigator(settings=settings)

	nav.select_next()

	assert nav.selected_record() is A


def test_step_on_empty_store_is_noop():
	nav, _, detail = _navigator(records=())

	nav.select_next()
	nav.select_previous()

	assert nav.selection.current_selection() is None
	assert detail.shown == [None]


def test_clear_selection_and_has_selection():
	nav, lst, detail = _navigator()
	nav.on_row_selected(A.id)
	assert nav.has_selection() is True

	nav.clear_selection()

	assert nav.has_selection() is False
	assert lst.selected is None
	assert detail.shown[-1] is None


def test_close_detaches_from_services():
	nav, lst, detail = _navigator()
	calls_before = lst.select_calls
	shown_before = len(detail.shown)

	nav.close()
	nav.selection.set_selection(A.id)
	nav.store.add(Record(title="D", id=UUID(int=4)))

	assert lst.select_calls == calls_before
	assert len(detail.shown) == shown_before
