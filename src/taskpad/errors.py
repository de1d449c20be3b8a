# src/taskpad/errors.py

"""
Exception hierarchy.

Every error raised by the parser, the task list or the storage layer derives
from TaskpadError and carries a message that is safe to show to the user.
The command registry is the only place that converts them into responses.
"""

from __future__ import annotations

ADD_USAGE = {
    "todo": "Usage: todo <desc> [#tag ...]",
    "deadline": "Usage: deadline <desc> /by <yyyy-mm-dd>",
    "event": "Usage: event <desc> /from <start> /to <end>",
}


class TaskpadError(Exception):
    """Base class for all user-facing errors."""

    default_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


# ---- parse errors ----


class ParseError(TaskpadError):
    default_message = "Unable to understand that command."


class BlankCommandError(ParseError):
    default_message = "Command cannot be empty."


class UnrecognizedCommandError(ParseError):
    default_message = "I'm sorry, but I don't know what that means :("


class InvalidIndexError(ParseError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid task index provided: {raw.strip()}.")


class InvalidDateFormatError(ParseError):
    default_message = "Dates must follow the yyyy-mm-dd format (e.g., 2019-10-15)."


class MissingTagArgumentsError(ParseError):
    default_message = "Please provide a task number and at least one tag.\nUsage: tag <n> #tag [#tag ...]"


class InvalidTagTokenError(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Tags must start with '#': {token}")


class InvalidTagError(ParseError):
    def __init__(self, raw: str) -> None:
        super().__init__(
            f"Invalid tag: {raw}. Tags look like #word and may only use letters, digits, '_' and '-'."
        )


class MissingByClauseError(ParseError):
    default_message = f"Deadline task must have a /by clause.\n{ADD_USAGE['deadline']}"


class MissingFromToClauseError(ParseError):
    default_message = f"Event task must have /from and /to clauses.\n{ADD_USAGE['event']}"


class FromAfterToError(ParseError):
    default_message = f"/from clause must come before /to clause.\n{ADD_USAGE['event']}"


class EmptyDescriptionError(ParseError):
    def __init__(self, kind: str = "todo") -> None:
        usage = ADD_USAGE.get(kind, "")
        super().__init__(f"{kind.capitalize()} task must have a description.\n{usage}".rstrip())


class EmptyDueDateError(ParseError):
    default_message = f"Deadline task must have a specified /by date.\n{ADD_USAGE['deadline']}"


class EmptyFromDateError(ParseError):
    default_message = f"Event task must have a specified /from date.\n{ADD_USAGE['event']}"


class EmptyToDateError(ParseError):
    default_message = f"Event task must have a specified /to date.\n{ADD_USAGE['event']}"


class EmptyKeywordError(ParseError):
    default_message = "Please tell me what to look for.\nUsage: find <keyword> | find #tag"


class ReservedCharacterError(ParseError):
    def __init__(self, char: str) -> None:
        super().__init__(f"Task text cannot contain '{char}', it is used to separate fields in the save file.")


# ---- task list errors ----


class TaskListError(TaskpadError):
    default_message = "That task list operation failed."


class IndexOutOfBoundsError(TaskListError):
    def __init__(self, size: int) -> None:
        super().__init__(f"Task index out of bounds. You have {size} tasks.")


class NoTagsProvidedError(TaskListError):
    default_message = "No tags provided."


# ---- storage errors ----


class StorageError(TaskpadError):
    default_message = "Storage failure."


class CorruptedSaveEntryError(StorageError):
    def __init__(self, line: str) -> None:
        super().__init__(f"Corrupted save entry: {line}")


class InvalidCompletionFlagError(StorageError):
    def __init__(self, line: str) -> None:
        super().__init__(f"Invalid completion flag in entry: {line}")


class CorruptedDeadlineEntryError(StorageError):
    def __init__(self, line: str) -> None:
        super().__init__(f"Corrupted deadline entry: {line}")


class CorruptedDeadlineDateError(StorageError):
    def __init__(self, line: str) -> None:
        super().__init__(f"Corrupted deadline date: {line}")


class CorruptedEventEntryError(StorageError):
    def __init__(self, line: str) -> None:
        super().__init__(f"Corrupted event entry: {line}")


class UnknownTaskTypeError(StorageError):
    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown task type in save: {kind}")
