# ---------------------------------------------------------------------------
# File: __main__.py
# ---------------------------------------------------------------------------
# Description:
#	Entry point: python -m pyreadlist (or the pyreadlist console script).
# ---------------------------------------------------------------------------

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
	from pyreadlist.app import App


def parse_args(argv: Sequence[str] | None = None) -> dict[str, Any]:
	"""
	Translate command-line options into an App cfg dict.
	"""
	parser = argparse.ArgumentParser(prog="pyreadlist", description="A small reading list.")
	parser.add_argument("--state-file", help="JSON file holding the saved selection")
	parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, ...")
	parser.add_argument("--log-file", help="Also write logs to this file")
	parser.add_argument("--theme", help="ttkthemes theme name (default: arc)")
	args = parser.parse_args(argv)

	cfg: dict[str, Any] = {"log_level": args.log_level}
	if args.state_file:
		cfg["state_file"] = args.state_file
	if args.log_file:
		cfg["log_file"] = args.log_file
	if args.theme:
		cfg["theme"] = args.theme
	return cfg


def build_app(app: "App") -> None:
	"""
	Compose the master/detail UI and attach it to the navigator.
	"""
	from pyreadlist.ui import MasterDetailLayout, RecordDetailView, RecordListView

	list_view = RecordListView(name="record_list", on_select=app.navigator.on_row_selected)
	detail_view = RecordDetailView(name="record_detail")

	app.add_component(MasterDetailLayout(name="master_detail", master=list_view, detail=detail_view))

	app.navigator.attach_list(list_view)
	app.navigator.attach_detail(detail_view)


def main(argv: Sequence[str] | None = None) -> None:
	from pyreadlist.app import App

	app = App(cfg=parse_args(argv))
	build_app(app)
	app.run()


if __name__ == "__main__":
	main()
