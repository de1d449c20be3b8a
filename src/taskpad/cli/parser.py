# src/taskpad/cli/parser.py

"""
Command grammar.

A line is split once into a keyword and the untouched argument remainder.
The sub-parsers below pull structured values out of that remainder; they
raise ParseError subclasses and never touch the task list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum

from ..errors import (
    BlankCommandError,
    EmptyDescriptionError,
    EmptyDueDateError,
    EmptyFromDateError,
    EmptyKeywordError,
    EmptyToDateError,
    FromAfterToError,
    InvalidDateFormatError,
    InvalidIndexError,
    InvalidTagError,
    InvalidTagTokenError,
    MissingByClauseError,
    MissingFromToClauseError,
    MissingTagArgumentsError,
    ReservedCharacterError,
)
from ..tasks.task_models import TAG_MARKER, Deadline, Event, Todo, normalize_tag

BY_CLAUSE = "/by"
FROM_CLAUSE = "/from"
TO_CLAUSE = "/to"

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_INDEX_RE = re.compile(r"[+-]?[0-9]+")

# Separates fields in the save file, so it may not appear inside task text.
RESERVED_CHAR = "|"


class Command(StrEnum):
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    FIND = "find"
    TAG = "tag"
    UNTAG = "untag"
    BYE = "bye"
    UNKNOWN = "unknown"

    @classmethod
    def from_token(cls, raw: str | None) -> Command:
        if not raw or not raw.strip():
            return cls.UNKNOWN
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    command: Command
    arguments: str = ""


@dataclass(frozen=True, slots=True)
class ParsedIndexTags:
    index: int
    tags: list[str] = field(default_factory=list)


def parse(line: str | None) -> ParsedCommand:
    """
    Split a raw input line into command + arguments.

    Only the first space separates the keyword, so "todo   a  b" keeps
    "  a  b" as its arguments. Unknown keywords come back as
    Command.UNKNOWN; rejecting them is the dispatcher's job.
    """
    trimmed = (line or "").strip()
    if not trimmed:
        raise BlankCommandError()

    head, _, rest = trimmed.partition(" ")
    return ParsedCommand(Command.from_token(head), rest)


def parse_index(text: str) -> int:
    """1-based index text -> 0-based int. Bounds are checked by the list."""
    raw = text.strip()
    if not _INDEX_RE.fullmatch(raw):
        raise InvalidIndexError(text)
    return int(raw) - 1


def parse_date(text: str) -> date:
    raw = text.strip()
    if not _DATE_RE.fullmatch(raw):
        raise InvalidDateFormatError()
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateFormatError() from e


def parse_index_and_tags(text: str) -> ParsedIndexTags:
    tokens = text.split()
    if len(tokens) < 2:
        raise MissingTagArgumentsError()

    index = parse_index(tokens[0])
    tags = tokens[1:]
    for token in tags:
        if not token.startswith(TAG_MARKER):
            raise InvalidTagTokenError(token)
    return ParsedIndexTags(index=index, tags=tags)


def parse_keyword(text: str) -> str:
    keyword = text.strip()
    if not keyword:
        raise EmptyKeywordError()
    return keyword


def extract_tags(text: str) -> tuple[str, set[str]]:
    """
    Lenient tag extraction for free-form descriptions.

    "read #Fun book #bad!" -> ("read book", {"fun"}). Tokens that look like
    tags but fail validation are dropped; only the explicit tag/untag
    commands reject them.
    """
    words: list[str] = []
    tags: set[str] = set()
    for token in text.split():
        if not token.startswith(TAG_MARKER):
            words.append(token)
            continue
        try:
            tags.add(normalize_tag(token))
        except InvalidTagError:
            continue
    return " ".join(words), tags


def _check_reserved(*values: str) -> None:
    for value in values:
        if RESERVED_CHAR in value:
            raise ReservedCharacterError(RESERVED_CHAR)


def parse_todo(text: str) -> Todo:
    description, tags = extract_tags(text)
    if not description:
        raise EmptyDescriptionError("todo")
    _check_reserved(description)
    return Todo(description, tags=tags)


def parse_deadline(text: str) -> Deadline:
    by_idx = text.find(BY_CLAUSE)
    if by_idx == -1:
        raise MissingByClauseError()

    description, tags = extract_tags(text[:by_idx])
    if not description:
        raise EmptyDescriptionError("deadline")
    _check_reserved(description)

    due_text = text[by_idx + len(BY_CLAUSE) :].strip()
    if not due_text:
        raise EmptyDueDateError()

    return Deadline(description, parse_date(due_text), tags=tags)


def parse_event(text: str) -> Event:
    from_idx = text.find(FROM_CLAUSE)
    to_idx = text.find(TO_CLAUSE)
    if from_idx == -1 or to_idx == -1:
        raise MissingFromToClauseError()
    if from_idx >= to_idx:
        raise FromAfterToError()

    description, tags = extract_tags(text[:from_idx])
    if not description:
        raise EmptyDescriptionError("event")

    start = text[from_idx + len(FROM_CLAUSE) : to_idx].strip()
    if not start:
        raise EmptyFromDateError()

    end = text[to_idx + len(TO_CLAUSE) :].strip()
    if not end:
        raise EmptyToDateError()
    _check_reserved(description, start, end)

    return Event(description, start, end, tags=tags)
