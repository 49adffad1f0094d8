# ---------------------------------------------------------------------------
# File: test_app.py
# ---------------------------------------------------------------------------
# Description:
#	Smoke tests for the App window + composed master/detail UI.
#
# Notes:
#	- Needs a display; skipped when Tk cannot open one (headless CI).
#	- Uses MemorySettingsStore so nothing touches the user's state file.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Iterator
from uuid import UUID

import pytest

tk = pytest.importorskip("tkinter")
pytest.importorskip("ttkthemes")

from pyreadlist.__main__ import build_app
from pyreadlist.app import App
from pyreadlist.core import logging as rl_logging
from pyreadlist.models import Record, RecordStore
from pyreadlist.services import MemorySettingsStore


A = Record(title="A", subtitle="a", id=UUID(int=1))
B = Record(title="B", subtitle="b", id=UUID(int=2))


@pytest.fixture
def settings() -> MemorySettingsStore:
	return MemorySettingsStore({"main.selection": str(B.id)})


@pytest.fixture
def app(settings: MemorySettingsStore) -> Iterator[App]:
	try:
		instance = App(
			width=400,
			height=300,
			cfg={"log_console": False},
			store=RecordStore([A, B]),
			settings=settings,
		)
	except tk.TclError as ex:
		pytest.skip(f"Tk display not available: {ex}")

	yield instance

	try:
		instance.destroy()
	except tk.TclError:
		pass
	rl_logging._reset_logging_for_tests()


def test_app_default_title(app: App):
	assert app.wm_title() == "Reading List"


def test_build_app_restores_persisted_selection(app: App):
	build_app(app)
	app.navigator.restore()
	app.update_idletasks()

	list_view = app.find_component("master_detail").master  # type: ignore[union-attr]
	assert list_view.tree.selection() == (str(B.id),)


def test_row_selection_is_persisted(app: App, settings: MemorySettingsStore):
	build_app(app)
	list_view = app.find_component("master_detail").master  # type: ignore[union-attr]

	list_view.tree.selection_set(str(A.id))
	list_view.tree.event_generate("<<TreeviewSelect>>")
	app.update()

	assert settings.values == {"main.selection": str(A.id)}


def test_duplicate_component_name_rejected(app: App):
	build_app(app)

	with pytest.raises(ValueError):
		build_app(app)
