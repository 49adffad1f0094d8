# ---------------------------------------------------------------------------
# File: selection.py
# ---------------------------------------------------------------------------
# Description:
#	SelectionController for pyreadlist.
#
# Notes:
#	- Bridges a persisted text slot and a typed Optional[UUID] selection.
#	- The text <-> UUID codec lives here and nowhere else.
#	- Reads never raise: malformed text reads as "no selection".
#	- Writes are not validated against RecordStore; a dangling id is stored
#	  as-is and the UI decides what to render for it.
#	- Listeners are notified only when the stored text actually changes.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/14/2026	Paul G. LeDuc				Add subscribe + change-only notification
# 10/19/2026	Paul G. LeDuc				Strict 8-4-4-4-12 hex match; isolate listener failures
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Optional, Protocol, runtime_checkable
from uuid import UUID


logger = logging.getLogger(__name__)

# None = no selection
TypedSelection = Optional[UUID]
SelectionListener = Callable[[TypedSelection], None]

# Canonical hyphenated form: 8-4-4-4-12, ASCII hex only
_UUID_TEXT = re.compile(
	r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


@runtime_checkable
class SelectionSlot(Protocol):
	"""
	Persisted text cell supplied by the host environment.
	"""

	def get(self) -> Optional[str]: ...
	def set(self, value: Optional[str]) -> None: ...


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------

def parse_selection(text: Any) -> TypedSelection:
	"""
	Decode persisted text into a selection.

	Accepts the hyphenated 36-character UUID form in any letter case.
	Anything else (None, non-text, malformed) decodes to None.
	"""
	if text is None:
		return None

	if not isinstance(text, str) or _UUID_TEXT.fullmatch(text) is None:
		logger.debug("Discarding malformed selection value %r", text)
		return None

	return UUID(text)


def format_selection(selection: TypedSelection) -> Optional[str]:
	"""
	Encode a selection as persisted text (None stays None).
	"""
	if selection is None:
		return None
	return str(selection)


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------

class SelectionController:
	"""
	SelectionController

	Owns the only read/write path to the persisted selection slot.
	"""

	def __init__(self, slot: SelectionSlot) -> None:
		self._slot = slot
		self._listeners: list[SelectionListener] = []

	def current_selection(self) -> TypedSelection:
		"""
		Read the slot and decode it. Never raises on bad data.
		"""
		return parse_selection(self._slot.get())

	def set_selection(self, selection: TypedSelection) -> None:
		"""
		Encode and write the selection. None clears the slot.
		"""
		text = format_selection(selection)
		previous = self._slot.get()
		if text == previous:
			return

		self._slot.set(text)
		logger.debug("Selection changed: %r -> %r", previous, text)

		for listener in list(self._listeners):
			try:
				listener(selection)
			except Exception:
				logger.exception("Selection listener %r failed", listener)

	def clear(self) -> None:
		self.set_selection(None)

	def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
		"""
		Register a listener called with the new selection after each change.

		Returns a callable that removes the listener.
		"""
		self._listeners.append(listener)

		def _unsubscribe() -> None:
			if listener in self._listeners:
				self._listeners.remove(listener)

		return _unsubscribe
