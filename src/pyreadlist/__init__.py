"""pyreadlist: a small master/detail reading list with a persisted selection."""

__version__ = "0.1.0"
