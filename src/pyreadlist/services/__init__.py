# ---------------------------------------------------------------------------
# File: __init__.py
# Description:
#	Public service exports for pyreadlist.
#
#	Services are UI-agnostic capabilities shared by the navigator, commands
#	and the App: persisted settings storage and the selection controller.
#
# Notes:
#	- Services must not depend on Tk widgets.
#	- App is responsible for constructing and wiring service instances.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from .selection import (
	SelectionController,
	SelectionSlot,
	TypedSelection,
	format_selection,
	parse_selection,
)
from .storage import (
	JsonSettingsStore,
	MemorySettingsStore,
	SettingsStore,
	StorageSlot,
	selection_slot,
)

__all__ = [
	"SelectionController",
	"SelectionSlot",
	"TypedSelection",
	"format_selection",
	"parse_selection",
	"JsonSettingsStore",
	"MemorySettingsStore",
	"SettingsStore",
	"StorageSlot",
	"selection_slot",
]
