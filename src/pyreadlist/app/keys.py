# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#	Keyboard shortcuts for the reading list (Tk key sequence -> command id).
#
# Notes:
#	- KeyMap only maps; App does the Tk bind_all.
#	- Several sequences may share one command (Control-q and Command-q on
#	  macOS); keys_for() gives them back in binding order.
#	- DEFAULT_BINDINGS is the whole default layout; a row with a platform
#	  only applies there.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/15/2026	Paul G. LeDuc				Initial coding / release
# 10/15/2026	Paul G. LeDuc				Add build_default_keymap
# 10/19/2026	Paul G. LeDuc				Binding table, keys_for, dangling check
# ---------------------------------------------------------------------------

from __future__ import annotations

import sys
from typing import Iterable, Optional

from pyreadlist.core.logging import get_app_logger


log = get_app_logger("keys")

# (keyseq, command id, platform or None for all)
DEFAULT_BINDINGS: tuple[tuple[str, str, Optional[str]], ...] = (
	("<Control-n>", "selection.next", None),
	("<Control-p>", "selection.previous", None),
	("<Escape>", "selection.clear", None),
	("<Command-q>", "app.quit", "darwin"),
	("<Control-q>", "app.quit", None),
)


class KeyMap:
	"""
	KeyMap

	Key sequences (e.g. "<Control-n>") bound to reading list command ids.
	"""

	def __init__(self) -> None:
		self._bindings: dict[str, str] = {}

	def bind(self, keyseq: str, command_id: str, *, overwrite: bool = True) -> None:
		if not keyseq:
			raise ValueError("keyseq must be a non-empty string")
		if not command_id:
			raise ValueError("command_id must be a non-empty string")

		previous = self._bindings.get(keyseq)
		if previous is not None and previous != command_id:
			if not overwrite:
				raise ValueError(f"{keyseq!r} is already bound to {previous!r}")
			log.debug("Rebinding %s: %s -> %s", keyseq, previous, command_id)

		self._bindings[keyseq] = command_id

	def unbind(self, keyseq: str) -> None:
		self._bindings.pop(keyseq, None)

	def resolve(self, keyseq: str) -> Optional[str]:
		return self._bindings.get(keyseq)

	def keys_for(self, command_id: str) -> list[str]:
		return [k for k, cid in self._bindings.items() if cid == command_id]

	def dangling(self, known_ids: Iterable[str]) -> list[tuple[str, str]]:
		"""
		Bindings whose command id is not in known_ids.
		"""
		known = set(known_ids)
		return [(k, cid) for k, cid in self._bindings.items() if cid not in known]

	def items(self) -> list[tuple[str, str]]:
		return list(self._bindings.items())

	def __len__(self) -> int:
		return len(self._bindings)


def build_default_keymap(*, platform: str | None = None) -> KeyMap:
	current = platform or sys.platform
	km = KeyMap()

	for keyseq, command_id, only_on in DEFAULT_BINDINGS:
		if only_on is None or only_on == current:
			km.bind(keyseq, command_id, overwrite=False)

	log.debug("Default keymap for %s: %d binding(s)", current, len(km))
	return km
