# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public app package surface for pyreadlist.
#
# Notes:
#	- Lazy exports: App pulls in tkinter + ttkthemes, the navigator and
#	  commands do not. Headless code can import those without a display.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"App",
	"ReadingListNavigator",
	"CommandRegistry",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"App": ("pyreadlist.app.app", "App"),
	"ReadingListNavigator": ("pyreadlist.app.navigation", "ReadingListNavigator"),
	"CommandRegistry": ("pyreadlist.app.commands", "CommandRegistry"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pyreadlist.app.app import App
	from pyreadlist.app.navigation import ReadingListNavigator
	from pyreadlist.app.commands import CommandRegistry
