# ---------------------------------------------------------------------------
# File: record.py
# ---------------------------------------------------------------------------
# Description:
#	Record model for pyreadlist (one row in the reading list).
#
# Notes:
#	- Identity is a UUID generated once at creation and never changes.
#	- Frozen: records are replaced, not mutated.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4, uuid5


# Seed ids are derived from the title so they survive restarts.
SAMPLE_NAMESPACE = UUID("6f1c2d0e-93a4-4b7e-9d55-2a8f3c1e7b40")


@dataclass(frozen=True, slots=True)
class Record:
	"""
	Record

	- title:	Primary text (e.g., book title).
	- subtitle:	Secondary text (e.g., author).
	- id:		Stable identifier; auto-generated when not provided.
	"""
	title: str
	subtitle: str = ""
	id: UUID = field(default_factory=uuid4)

	def __str__(self) -> str:
		if self.subtitle:
			return f"{self.title} ({self.subtitle})"
		return self.title


def sample_records() -> tuple[Record, ...]:
	"""
	Fixed seed set shown on every launch (same ids each time).
	"""
	books = (
		("Moby-Dick", "Herman Melville"),
		("Pride and Prejudice", "Jane Austen"),
		("Middlemarch", "George Eliot"),
		("The Left Hand of Darkness", "Ursula K. Le Guin"),
		("Invisible Cities", "Italo Calvino"),
	)
	return tuple(
		Record(title=title, subtitle=author, id=uuid5(SAMPLE_NAMESPACE, title))
		for title, author in books
	)
