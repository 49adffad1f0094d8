# ---------------------------------------------------------------------------
# File: test_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the pyreadlist command registry + default commands.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/15/2026	Paul G. LeDuc				Initial tests
# 10/15/2026	Paul G. LeDuc				Add default command coverage
# 10/19/2026	Paul G. LeDuc				Selection gating + built registry coverage
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from uuid import UUID

import pytest

from pyreadlist.app.commands import (
	Command,
	CommandRegistry,
	build_command_registry,
	register_default_commands,
)
from pyreadlist.app.navigation import ReadingListNavigator
from pyreadlist.models import Record, RecordStore
from pyreadlist.services import MemorySettingsStore, SelectionController, selection_slot


def _navigator() -> ReadingListNavigator:
	store = RecordStore([
		Record(title="A", id=UUID(int=1)),
		Record(title="B", id=UUID(int=2)),
	])
	return ReadingListNavigator(store, SelectionController(selection_slot(MemorySettingsStore())))


def test_register_and_get_command():
	registry = CommandRegistry()
	cmd = Command(id="x", label="X", handler=lambda: "ok")

	registry.register(cmd)

	assert registry.has("x") is True
	assert registry.get("x") is cmd
	assert registry.ids() == ["x"]


def test_register_empty_or_duplicate_id_raises():
	registry = CommandRegistry()
	registry.register(Command(id="x", handler=lambda: 1))

	with pytest.raises(ValueError):
		registry.register(Command(id="x", handler=lambda: 2))

	with pytest.raises(ValueError):
		registry.register(Command(id="", handler=lambda: 3))


def test_unregister_removes_command():
	registry = CommandRegistry()
	registry.register(Command(id="x", handler=lambda: 1))

	registry.unregister("x")
	registry.unregister("never-there")

	assert registry.has("x") is False


def test_invoke_returns_handler_result():
	registry = CommandRegistry()
	registry.register(Command(id="do", handler=lambda: 123))

	assert registry.invoke("do") == 123


def test_invoke_unknown_command_raises_key_error():
	with pytest.raises(KeyError):
		CommandRegistry().invoke("missing")


def test_invoke_disabled_command_skips_handler():
	registry = CommandRegistry()
	allow = False
	calls: list[str] = []

	registry.register(Command(
		id="dynamic",
		handler=lambda: calls.append("ran"),
		enabled_fn=lambda: allow,
	))

	assert registry.invoke("dynamic") is None
	assert calls == []

	allow = True
	registry.invoke("dynamic")
	assert calls == ["ran"]


def test_default_commands_are_registered():
	registry = CommandRegistry()
	register_default_commands(registry, _navigator(), quit_fn=lambda: None)

	assert set(registry.ids()) == {
		"selection.next",
		"selection.previous",
		"selection.clear",
		"app.quit",
	}


def test_default_commands_drive_navigator():
	nav = _navigator()
	quits: list[bool] = []
	registry = build_command_registry(nav, quit_fn=lambda: quits.append(True))

	registry.invoke("selection.next")
	assert nav.selection.current_selection() == UUID(int=1)

	registry.invoke("selection.next")
	assert nav.selection.current_selection() == UUID(int=2)

	registry.invoke("selection.previous")
	assert nav.selection.current_selection() == UUID(int=1)

	registry.invoke("selection.clear")
	assert nav.selection.current_selection() is None

	registry.invoke("app.quit")
	assert quits == [True]


def test_clear_is_disabled_without_selection():
	nav = _navigator()
	registry = build_command_registry(nav, quit_fn=lambda: None)

	assert registry.get("selection.clear").requires_selection is True
	assert registry.is_enabled("selection.clear") is False
	assert "selection.clear" not in registry.enabled_ids()

	nav.on_row_selected(UUID(int=2))

	assert registry.is_enabled("selection.clear") is True
	assert registry.enabled_ids() == [
		"selection.next",
		"selection.previous",
		"selection.clear",
		"app.quit",
	]


def test_selection_gate_without_check_keeps_command_disabled():
	registry = CommandRegistry()
	calls: list[str] = []
	registry.register(Command(id="selection.clear", handler=lambda: calls.append("ran"), requires_selection=True))

	assert registry.invoke("selection.clear") is None
	assert calls == []


def test_selection_gate_and_enabled_fn_must_both_pass():
	selected = False
	extra = False
	calls: list[str] = []
	registry = CommandRegistry(selection_check=lambda: selected)
	registry.register(Command(
		id="selection.open",
		handler=lambda: calls.append("ran"),
		requires_selection=True,
		enabled_fn=lambda: extra,
	))

	selected = True
	assert registry.is_enabled("selection.open") is False

	selected, extra = False, True
	assert registry.is_enabled("selection.open") is False

	selected = True
	registry.invoke("selection.open")
	assert calls == ["ran"]


def test_unknown_command_is_not_enabled():
	assert CommandRegistry().is_enabled("missing") is False


def test_command_title_falls_back_to_id():
	assert Command(id="x", handler=lambda: None).title == "x"
	assert Command(id="x", handler=lambda: None, label="Ex").title == "Ex"


def test_invoke_logs_command_title(caplog: pytest.LogCaptureFixture):
	registry = CommandRegistry()
	registry.register(Command(id="do", handler=lambda: None, label="Do It"))

	with caplog.at_level(logging.DEBUG, logger="pyreadlist.app.commands"):
		registry.invoke("do")

	assert any("Do It" in r.getMessage() for r in caplog.records)
