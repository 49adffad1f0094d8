# ---------------------------------------------------------------------------
# File: storage.py
# ---------------------------------------------------------------------------
# Description:
#	Persisted key/text storage for pyreadlist (the host side of the
#	selection slot).
#
# Notes:
#	- SettingsStore is the minimal key -> text interface.
#	- MemorySettingsStore is for tests and throwaway sessions.
#	- JsonSettingsStore persists to a single JSON file:
#		{
#			"version": 1,
#			"values": {"main.selection": "<text>"}
#		}
#	- Restored lazily before the first read, flushed on every write.
#	- A flush writes "<name>.tmp" next to the file, then replaces the file,
#	  so an interrupted write never leaves a truncated state file.
#	- Corrupt or unreadable files load as empty. Write failures are logged,
#	  never raised; persistence is best-effort UI state.
#	- StorageSlot binds one key into a get()/set() pair for SelectionController.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/14/2026	Paul G. LeDuc				Add StorageSlot + scoped selection_slot
# 10/19/2026	Paul G. LeDuc				Stage flush in a temp file + replace
# ---------------------------------------------------------------------------

from __future__ import annotations

import contextlib
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Protocol, runtime_checkable


logger = logging.getLogger(__name__)

STATE_FORMAT_VERSION = 1
SELECTION_KEY = "selection"


@runtime_checkable
class SettingsStore(Protocol):
	"""
	Minimal key -> text storage interface.
	"""

	def get(self, key: str) -> Optional[str]: ...
	def set(self, key: str, value: Optional[str]) -> None: ...


# ---------------------------------------------------------------------------
# Store implementations
# ---------------------------------------------------------------------------

class MemorySettingsStore:
	"""
	In-memory settings store.

	Setting None removes the key.
	"""

	def __init__(self, values: Optional[dict[str, str]] = None) -> None:
		self.values: dict[str, str] = dict(values or {})

	def get(self, key: str) -> Optional[str]:
		return self.values.get(key)

	def set(self, key: str, value: Optional[str]) -> None:
		if value is None:
			self.values.pop(key, None)
		else:
			self.values[key] = value


class JsonSettingsStore:
	"""
	Settings store backed by a JSON file on disk.
	"""

	def __init__(self, path: str | Path) -> None:
		self.path = Path(path)
		self._values: dict[str, str] = {}
		self._loaded = False

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	def load(self) -> None:
		"""
		Restore values from disk (once). Missing file means no values.
		"""
		if self._loaded:
			return
		self._loaded = True

		if not self.path.exists():
			return

		try:
			data = json.loads(self.path.read_text(encoding="utf-8"))
		except (OSError, ValueError) as ex:
			logger.warning("Ignoring unreadable state file %s: %s", self.path, ex)
			self._values = {}
			return

		self._values = _coerce_values(data, self.path)

	def save(self) -> None:
		"""
		Flush current values to disk.
		"""
		payload = {
			"version": STATE_FORMAT_VERSION,
			"values": dict(self._values),
		}
		tmp = self._tmp_path()
		try:
			self.path.parent.mkdir(parents=True, exist_ok=True)
			tmp.write_text(
				json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True),
				encoding="utf-8",
			)
			tmp.replace(self.path)
		except OSError as ex:
			logger.warning("Could not write state file %s: %s", self.path, ex)
			with contextlib.suppress(OSError):
				tmp.unlink(missing_ok=True)

	def _tmp_path(self) -> Path:
		"""
		Sibling file the next flush is staged in (same directory, so the
		final replace stays on one filesystem).
		"""
		return self.path.with_name(f"{self.path.name}.tmp")

	# -----------------------------------------------------------------------
	# SettingsStore
	# -----------------------------------------------------------------------

	def get(self, key: str) -> Optional[str]:
		self.load()
		return self._values.get(key)

	def set(self, key: str, value: Optional[str]) -> None:
		self.load()
		if value is None:
			self._values.pop(key, None)
		else:
			self._values[key] = str(value)
		self.save()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} path={str(self.path)!r}>"


def _coerce_values(data: Any, path: Path) -> dict[str, str]:
	"""
	Pull the "values" mapping out of a decoded state file.

	Anything that is not a str -> str entry is dropped.
	"""
	if not isinstance(data, dict):
		logger.warning("Ignoring state file %s: expected an object", path)
		return {}

	version = data.get("version")
	if version != STATE_FORMAT_VERSION:
		logger.info("State file %s has version %r (expected %d)", path, version, STATE_FORMAT_VERSION)

	raw = data.get("values", {})
	if not isinstance(raw, dict):
		logger.warning("Ignoring state file %s: 'values' is not an object", path)
		return {}

	values: dict[str, str] = {}
	for key, value in raw.items():
		if isinstance(key, str) and isinstance(value, str):
			values[key] = value
		else:
			logger.debug("Dropping non-text state entry %r=%r", key, value)
	return values


# ---------------------------------------------------------------------------
# Slots
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StorageSlot:
	"""
	One named entry of a SettingsStore, exposed as get()/set().
	"""
	store: SettingsStore
	key: str

	def get(self) -> Optional[str]:
		return self.store.get(self.key)

	def set(self, value: Optional[str]) -> None:
		self.store.set(self.key, value)


def selection_slot(store: SettingsStore, scope: str = "main") -> StorageSlot:
	"""
	Return the selection slot for a navigation destination.

	Examples:
		selection_slot(store)			-> key "main.selection"
		selection_slot(store, "shelf")	-> key "shelf.selection"
	"""
	if not scope:
		raise ValueError("scope must be a non-empty string")
	return StorageSlot(store=store, key=f"{scope}.{SELECTION_KEY}")
