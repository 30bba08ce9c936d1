"""Defines the note value type, the results returned by store operations, and the errors they use.

The most important classes are :class:`Note` and :class:`Result`
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


class Error(Exception):
    pass


class StoreInitError(Error):
    """Raised when the backing file does not exist and cannot be created.

    Nothing else can work without the file, so callers should treat this as fatal.
    """
    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause


class StoreWriteError(Error):
    """Raised when lines cannot be appended to or written over the backing file."""
    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause


@dataclass
class Note:
    """A single note as stored in the notes file."""

    title: str
    """Used to look the note up. Not necessarily unique."""

    content: str

    created_at: str = ''
    """When the note was written or last modified, formatted with :data:`TIMESTAMP_FORMAT`.

    This is kept as the literal text from the file, so a note read back from disk compares equal to the one
    that was written.
    """

    @classmethod
    def create(cls, title: str, content: str, when: datetime = None) -> Note:
        """Returns a new note stamped with the given time, or the current local time."""
        when = when or datetime.now()
        return cls(title, content, when.strftime(TIMESTAMP_FORMAT))

    def created(self) -> Optional[datetime]:
        """Parses :attr:`created_at`, returning None if it is missing or malformed."""
        try:
            return datetime.strptime(self.created_at, TIMESTAMP_FORMAT)
        except ValueError:
            return None

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {
            'title': self.title,
            'content': self.content,
            'created_at': self.created_at,
        }


class Outcome(Enum):
    OK = 'ok'
    EMPTY = 'empty'
    NOT_FOUND = 'not_found'
    INVALID = 'invalid'
    DECLINED = 'declined'
    FAILED = 'failed'


@dataclass
class Result:
    """What happened when a :class:`notesfile.store.NoteStore` operation ran.

    Expected situations like a missing title are reported through :attr:`outcome` rather than raised.
    Write failures are reported with :attr:`outcome` set to ``FAILED`` and the exception in :attr:`error`.
    """

    outcome: Outcome

    notes: List[Note] = field(default_factory=list)
    """The notes found, created, updated or removed by the operation, in file order."""

    error: Optional[StoreWriteError] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK
