# ---------------------------------------------------------------------------
# File: test_record_views.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for RecordListView / RecordDetailView / MasterDetailLayout
#	decision logic.
#
# Notes:
#	- Avoid GUI/Tk event loop tests (flaky in CI). No widgets are created.
#	- Skipped entirely when tkinter is not available.
#	- Detail decisions are validated via a capture subclass that intercepts _write.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/16/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from uuid import UUID

import pytest

pytest.importorskip("tkinter")

from pyreadlist.app.navigation import RecordDetailSink, RecordListSink
from pyreadlist.models import Record
from pyreadlist.ui.master_detail import MasterDetailLayout
from pyreadlist.ui.record_detail import RecordDetailView
from pyreadlist.ui.record_list import RecordListView


A = Record(title="Middlemarch", subtitle="George Eliot", id=UUID(int=1))
B = Record(title="Untitled", subtitle="", id=UUID(int=2))


class _CaptureDetail(RecordDetailView):
	def __init__(self, *args, **kwargs) -> None:
		super().__init__(*args, **kwargs)
		self.writes: list[tuple[str, str]] = []

	def _write(self, title: str, subtitle: str) -> None:
		self.writes.append((title, subtitle))


# ---------------------------------------------------------------------------
# RecordDetailView
# ---------------------------------------------------------------------------

def test_detail_view_is_a_detail_sink():
	assert isinstance(RecordDetailView(), RecordDetailSink)


def test_detail_shows_placeholder_for_none():
	v = _CaptureDetail()
	v.show(None)

	assert v.writes == [("No book selected", "")]


def test_detail_shows_title_and_subtitle():
	v = _CaptureDetail()
	v.show(A)

	assert v.writes == [("Middlemarch", "by George Eliot")]


def test_detail_omits_empty_subtitle():
	v = _CaptureDetail(placeholder="Nothing here")
	v.show(B)
	v.show(None)

	assert v.writes == [("Untitled", ""), ("Nothing here", "")]


def test_detail_show_before_mount_is_safe():
	v = RecordDetailView()
	v.show(A)

	assert v.is_mounted is False


# ---------------------------------------------------------------------------
# RecordListView
# ---------------------------------------------------------------------------

def test_list_view_is_a_list_sink():
	assert isinstance(RecordListView(), RecordListSink)


def test_list_row_values_with_and_without_subtitles():
	assert RecordListView()._row_values(A) == ("Middlemarch", ("George Eliot",))
	assert RecordListView(show_subtitles=False)._row_values(A) == ("Middlemarch", ())


def test_list_iid_lookup_only_matches_known_rows():
	v = RecordListView()
	v.set_records([A, B])

	assert v._iid_for(A.id) == str(A.id)
	assert v._iid_for(UUID(int=404)) is None
	assert v._iid_for(None) is None


def test_list_accepts_pushes_before_mount():
	v = RecordListView()
	v.set_records([A])
	v.select(A.id)

	assert v.tree is None
	assert v._selected == A.id


# ---------------------------------------------------------------------------
# MasterDetailLayout
# ---------------------------------------------------------------------------

def test_layout_clamp_bounds():
	ml = MasterDetailLayout()

	assert ml._clamp(5, 10, 20) == 10
	assert ml._clamp(15, 10, 20) == 15
	assert ml._clamp(25, 10, 20) == 20


def test_layout_set_master_width_clamps_before_mount():
	ml = MasterDetailLayout(min_master_width=100, max_master_width=300)

	ml.set_master_width(50)
	assert ml.master_width == 100

	ml.set_master_width(900)
	assert ml.master_width == 300
