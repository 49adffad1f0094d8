# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Data model package for pyreadlist (records + record store).
#
# Notes:
#	No Tk dependencies. Safe to import from tests and services.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .record import Record, sample_records
from .store import DuplicateRecordError, RecordStore

__all__ = [
	"Record",
	"RecordStore",
	"DuplicateRecordError",
	"sample_records",
]
