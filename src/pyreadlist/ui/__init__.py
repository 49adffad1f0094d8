# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public UI package surface for pyreadlist.
#
# Notes:
#	- Uses lazy exports (PEP 562) so importing pyreadlist.ui does not pull in
#	  tkinter until a widget class is actually used.
#	- Do NOT import from pyreadlist.ui inside ui modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Component",
	"RecordListView",
	"RecordDetailView",
	"MasterDetailLayout",
]

# Map public name -> (module, attribute)
_EXPORTS: dict[str, tuple[str, str]] = {
	"Component": ("pyreadlist.ui.component", "Component"),
	"RecordListView": ("pyreadlist.ui.record_list", "RecordListView"),
	"RecordDetailView": ("pyreadlist.ui.record_detail", "RecordDetailView"),
	"MasterDetailLayout": ("pyreadlist.ui.master_detail", "MasterDetailLayout"),
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
	from pyreadlist.ui.component import Component
	from pyreadlist.ui.record_list import RecordListView
	from pyreadlist.ui.record_detail import RecordDetailView
	from pyreadlist.ui.master_detail import MasterDetailLayout
