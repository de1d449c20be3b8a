# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..errors import StorageError, TaskpadError, UnrecognizedCommandError
from ..tasks.task_models import TAG_MARKER, Task
from . import parser
from .parser import Command

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Maps command keywords to handlers and acts as the single error boundary.

    A handler receives the session state and the raw argument remainder and
    returns the response text. Handlers registered with mutates=True get the
    task list saved after they succeed.
    """

    def __init__(self) -> None:
        self._handlers: dict[Command, CommandHandler] = {}
        self._mutating: set[Command] = set()

    def register(self, command: Command, handler: CommandHandler, *, mutates: bool = False) -> None:
        self._handlers[command] = handler
        if mutates:
            self._mutating.add(command)
        else:
            self._mutating.discard(command)

    def handle(self, state: AppState, line: str) -> str:
        """
        Run one input line to completion: parse, execute, persist, respond.

        Any TaskpadError is turned into its message; the session goes on.
        A failed save does not undo the in-memory change.
        """
        try:
            parsed = parser.parse(line)
            handler = self._handlers.get(parsed.command)
            if handler is None:
                raise UnrecognizedCommandError()

            response = handler(state, parsed.arguments)

            if parsed.command in self._mutating:
                state.task_store.save(state.tasks)
            return response
        except StorageError as e:
            logger.warning("Storage error while handling %r: %s", line, e)
            return e.message
        except TaskpadError as e:
            logger.info("Rejected command %r: %s", line, e)
            return e.message


registry = CommandRegistry()


def submit(state: AppState, line: str) -> str:
    """Front-end entry point: one line in, one response out."""
    return registry.handle(state, line)


def _added(state: AppState, task: Task) -> str:
    state.tasks.add(task)
    return (
        "Got it. I've added this task:\n"
        f"  {task}\n"
        f"Now you have {len(state.tasks)} tasks in the list."
    )


def cmd_list(state: AppState, args: str) -> str:
    return state.tasks.render()


def cmd_todo(state: AppState, args: str) -> str:
    return _added(state, parser.parse_todo(args))


def cmd_deadline(state: AppState, args: str) -> str:
    return _added(state, parser.parse_deadline(args))


def cmd_event(state: AppState, args: str) -> str:
    return _added(state, parser.parse_event(args))


def cmd_mark(state: AppState, args: str) -> str:
    task = state.tasks.mark(parser.parse_index(args))
    return f"Nice! I've marked this task as done:\n  {task}"


def cmd_unmark(state: AppState, args: str) -> str:
    task = state.tasks.unmark(parser.parse_index(args))
    return f"OK, I've marked this task as not done yet:\n  {task}"


def cmd_delete(state: AppState, args: str) -> str:
    task = state.tasks.delete(parser.parse_index(args))
    return (
        "Noted. I've removed this task:\n"
        f"  {task}\n"
        f"Now you have {len(state.tasks)} tasks in the list."
    )


def cmd_find(state: AppState, args: str) -> str:
    """
    find <keyword>  -> description substring match (case-sensitive)
    find #tag       -> tag match
    """
    keyword = parser.parse_keyword(args)
    if keyword.startswith(TAG_MARKER):
        matches = state.tasks.find_tasks_by_tag(keyword)
    else:
        matches = state.tasks.find_tasks(keyword)

    if matches.is_empty():
        return "No matching tasks found."
    return "Here are the matching tasks in your list:\n" + matches.render()


def cmd_tag(state: AppState, args: str) -> str:
    parsed = parser.parse_index_and_tags(args)
    task = state.tasks.tag(parsed.index, parsed.tags)
    return f"Tagged this task:\n  {task}"


def cmd_untag(state: AppState, args: str) -> str:
    parsed = parser.parse_index_and_tags(args)
    task = state.tasks.untag(parsed.index, parsed.tags)
    return f"Removed tags from this task:\n  {task}"


def cmd_bye(state: AppState, args: str) -> str:
    state.is_exit = True
    return "Bye. Hope to see you again soon!"


registry.register(Command.LIST, cmd_list)
registry.register(Command.TODO, cmd_todo, mutates=True)
registry.register(Command.DEADLINE, cmd_deadline, mutates=True)
registry.register(Command.EVENT, cmd_event, mutates=True)
registry.register(Command.MARK, cmd_mark, mutates=True)
registry.register(Command.UNMARK, cmd_unmark, mutates=True)
registry.register(Command.DELETE, cmd_delete, mutates=True)
registry.register(Command.FIND, cmd_find)
registry.register(Command.TAG, cmd_tag, mutates=True)
registry.register(Command.UNTAG, cmd_untag, mutates=True)
registry.register(Command.BYE, cmd_bye)
