# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#	Reading list actions (next/previous/clear book, quit) and the registry
#	that keyboard bindings invoke them through.
#
# Notes:
#	- A Command may require a current book (requires_selection). The
#	  registry answers that from the selection check it was built with, so
#	  commands never reach into the navigator themselves.
#	- enabled_fn is an extra, command-specific gate; both must pass.
#	- Disabled commands are not an error: invoke() logs and returns None.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/15/2026	Paul G. LeDuc				Initial coding / release
# 10/15/2026	Paul G. LeDuc				Add default reading list commands
# 10/19/2026	Paul G. LeDuc				Selection-gated commands; table-driven defaults
# ---------------------------------------------------------------------------

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

from pyreadlist.core.logging import get_app_logger

if TYPE_CHECKING:
	from pyreadlist.app.navigation import ReadingListNavigator


log = get_app_logger("commands")

CommandHandler = Callable[[], Any]
EnabledCheck = Callable[[], bool]


@dataclass(frozen=True, slots=True)
class Command:
	"""
	Command

	- id:					Dotted identifier, e.g. "selection.next".
	- handler:				Callable executed on invoke.
	- label:				Menu/help text; falls back to id.
	- description:			Optional help text.
	- enabled_fn:			Optional extra gate.
	- requires_selection:	Only enabled while a book is selected.
	"""
	id: str
	handler: CommandHandler

	label: Optional[str] = None
	description: Optional[str] = None

	enabled_fn: Optional[EnabledCheck] = None
	requires_selection: bool = False

	@property
	def title(self) -> str:
		return self.label or self.id


class CommandRegistry:
	"""
	CommandRegistry

	Commands by id, in registration order. selection_check tells the
	registry whether a book is currently selected; without one, commands
	that require a selection are never enabled.
	"""

	def __init__(self, selection_check: Optional[EnabledCheck] = None) -> None:
		self._commands: dict[str, Command] = {}
		self._selection_check = selection_check

	def register(self, command: Command) -> None:
		if not command.id:
			raise ValueError("Command id must be a non-empty string")

		if command.id in self._commands:
			raise ValueError(f"Duplicate command id: {command.id!r}")

		self._commands[command.id] = command
		log.debug("Registered command %s (%s)", command.id, command.title)

	def unregister(self, command_id: str) -> None:
		self._commands.pop(command_id, None)

	def has(self, command_id: str) -> bool:
		return command_id in self._commands

	def get(self, command_id: str) -> Optional[Command]:
		return self._commands.get(command_id)

	def ids(self) -> list[str]:
		return list(self._commands.keys())

	def is_enabled(self, command_id: str) -> bool:
		"""
		True when the command exists and every gate it declares passes.
		"""
		command = self._commands.get(command_id)
		if command is None:
			return False

		if command.requires_selection:
			if self._selection_check is None or not self._selection_check():
				return False

		if command.enabled_fn is not None and not command.enabled_fn():
			return False

		return True

	def enabled_ids(self) -> list[str]:
		return [cid for cid in self._commands if self.is_enabled(cid)]

	def invoke(self, command_id: str) -> Any:
		"""
		Run a command by id.

		Raises:
			KeyError: unknown command id.

		Disabled commands are skipped and return None.
		"""
		command = self._commands.get(command_id)
		if command is None:
			raise KeyError(f"Unknown command id: {command_id!r}")

		if not self.is_enabled(command_id):
			log.debug("Skipping %s: %s is disabled", command.title, command_id)
			return None

		log.debug("Invoking %s (%s)", command_id, command.title)
		return command.handler()


# ---------------------------------------------------------------------------
# Default commands
# ---------------------------------------------------------------------------

# (id, navigator method, label, description, requires_selection)
_SELECTION_COMMANDS: tuple[tuple[str, str, str, str, bool], ...] = (
	("selection.next", "select_next", "Next Book", "Select the next book in the list.", False),
	("selection.previous", "select_previous", "Previous Book", "Select the previous book in the list.", False),
	("selection.clear", "clear_selection", "Clear Selection", "Deselect the current book.", True),
)


def build_command_registry(
	navigator: "ReadingListNavigator",
	quit_fn: Callable[[], None],
) -> CommandRegistry:
	"""
	Registry gated on the navigator's selection, with the default commands.
	"""
	registry = CommandRegistry(selection_check=navigator.has_selection)
	register_default_commands(registry, navigator, quit_fn)
	return registry


def register_default_commands(
	registry: CommandRegistry,
	navigator: "ReadingListNavigator",
	quit_fn: Callable[[], None],
) -> None:
	for command_id, method, label, description, requires_selection in _SELECTION_COMMANDS:
		registry.register(Command(
			id=command_id,
			handler=getattr(navigator, method),
			label=label,
			description=description,
			requires_selection=requires_selection,
		))

	registry.register(Command(
		id="app.quit",
		handler=quit_fn,
		label="Quit Reading List" if sys.platform == "darwin" else "Quit",
		description="Save state and exit.",
	))
