# ---------------------------------------------------------------------------
# File: store.py
# ---------------------------------------------------------------------------
# Description:
#	RecordStore for pyreadlist (owner of the reading list collection).
#
# Notes:
#	- Insertion order is display order.
#	- Record ids are unique within the store. Colliding inserts are rejected.
#	- Ids of removed records are retired and can never be added again.
#	- Callers only ever see tuples; the backing list is never handed out.
#	- Subscribers are notified after every add/remove.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/13/2026	Paul G. LeDuc				Add add/remove + retired id tracking
# 10/13/2026	Paul G. LeDuc				Add subscribe (publish-on-change)
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional
from uuid import UUID

from pyreadlist.models.record import Record, sample_records


logger = logging.getLogger(__name__)

RecordsListener = Callable[[tuple[Record, ...]], None]


class DuplicateRecordError(ValueError):
	"""
	Raised when a record id is already present in (or was retired from) a store.
	"""

	def __init__(self, record_id: UUID, *, retired: bool = False) -> None:
		self.record_id = record_id
		self.retired = retired
		reason = "was removed and cannot be reused" if retired else "already exists"
		super().__init__(f"Record id {str(record_id)!r} {reason}")


class RecordStore:
	"""
	RecordStore

	Owns an ordered collection of Record instances for one app session.
	"""

	def __init__(self, records: Iterable[Record] = ()) -> None:
		self._records: list[Record] = []
		self._by_id: dict[UUID, Record] = {}
		self._retired: set[UUID] = set()
		self._listeners: list[RecordsListener] = []

		for record in records:
			self.add(record)

	@classmethod
	def with_sample_records(cls) -> "RecordStore":
		return cls(sample_records())

	# -----------------------------------------------------------------------
	# Queries
	# -----------------------------------------------------------------------

	def all_records(self) -> tuple[Record, ...]:
		"""
		Return the current records in display order.
		"""
		return tuple(self._records)

	def find(self, record_id: UUID) -> Optional[Record]:
		"""
		Look up a record by id. Returns None when nothing matches.
		"""
		return self._by_id.get(record_id)

	def index_of(self, record_id: UUID) -> Optional[int]:
		record = self._by_id.get(record_id)
		if record is None:
			return None
		return self._records.index(record)

	def __len__(self) -> int:
		return len(self._records)

	def __iter__(self) -> Iterator[Record]:
		return iter(tuple(self._records))

	def __contains__(self, record_id: object) -> bool:
		return record_id in self._by_id

	# -----------------------------------------------------------------------
	# Mutators
	# -----------------------------------------------------------------------

	def add(self, record: Record) -> None:
		"""
		Append a record.

		Raises:
			DuplicateRecordError: the id is already present or was retired.
		"""
		if record.id in self._by_id:
			raise DuplicateRecordError(record.id)
		if record.id in self._retired:
			raise DuplicateRecordError(record.id, retired=True)

		self._records.append(record)
		self._by_id[record.id] = record
		logger.debug("Added record id=%s title=%r", record.id, record.title)
		self._notify()

	def remove(self, record_id: UUID) -> Optional[Record]:
		"""
		Remove a record and retire its id. Returns the removed record, if any.
		"""
		record = self._by_id.pop(record_id, None)
		if record is None:
			return None

		self._records.remove(record)
		self._retired.add(record_id)
		logger.debug("Removed record id=%s title=%r", record.id, record.title)
		self._notify()
		return record

	# -----------------------------------------------------------------------
	# Observers
	# -----------------------------------------------------------------------

	def subscribe(self, listener: RecordsListener) -> Callable[[], None]:
		"""
		Register a listener called with the new records after each change.

		Returns a callable that removes the listener.
		"""
		self._listeners.append(listener)

		def _unsubscribe() -> None:
			if listener in self._listeners:
				self._listeners.remove(listener)

		return _unsubscribe

	def _notify(self) -> None:
		snapshot = self.all_records()
		for listener in list(self._listeners):
			listener(snapshot)

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} records={len(self._records)}>"
