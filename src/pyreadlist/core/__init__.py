# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for pyreadlist (logging, config).
#
# Notes:
#	Keep this lightweight. Re-export stable public helpers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .config import AppConfig, default_state_file, user_data_dir
from .logging import init_logging, get_logger, get_app_logger

__all__ = [
	"AppConfig",
	"default_state_file",
	"user_data_dir",
	"get_logger",
	"get_app_logger",
	"init_logging",
]
