"""Provides the :class:`NoteStore` class, which reads and changes the notes file."""

import os.path
import sys
from typing import List

from notesfile import codec
from notesfile.conf import NotesConf
from notesfile.models import Note, Outcome, Result, StoreInitError, StoreWriteError


class NoteStore:
    """Reads and rewrites the notes file configured in :class:`notesfile.conf.NotesConf`.

    New notes are appended; every other change reads the whole file and writes it all back. Nothing is locked,
    and writes are not atomic, so a crash in the middle of a write can leave the file truncated.

    Operations like :meth:`add` and :meth:`modify` never raise for I/O problems; they return a
    :class:`notesfile.models.Result` instead. The exception is :meth:`ensure_exists`, which should be called
    once before anything else.

    .. attribute:: conf
       :type: notesfile.conf.NotesConf
    """
    def __init__(self, conf: NotesConf):
        self.conf = conf

    @property
    def path(self) -> str:
        return self.conf.notes_path

    def ensure_exists(self) -> None:
        """Creates the notes file if it does not exist yet.

        Raises :exc:`notesfile.models.StoreInitError` if it cannot be created.
        """
        if os.path.exists(self.path):
            return
        try:
            with open(self.path, 'a', encoding=self.conf.encoding):
                pass
        except OSError as e:
            raise StoreInitError(f'Failed to initialize storage file: {e}', self.path, e) from e

    def append(self, note: Note) -> None:
        """Adds the note to the end of the file. Raises :exc:`notesfile.models.StoreWriteError` on failure."""
        text = ''.join(f'{line}\n' for line in codec.encode(note))
        try:
            with open(self.path, 'a', encoding=self.conf.encoding) as file:
                file.write(text)
        except OSError as e:
            raise StoreWriteError(f'Error writing note: {e}', self.path, e) from e

    def load_all_lines(self) -> List[str]:
        """Returns every line of the file, without line endings.

        If the file cannot be read or decoded, an error is printed and an empty list is returned, so to callers an
        unreadable file looks the same as an empty one.
        """
        try:
            with open(self.path, 'r', encoding=self.conf.encoding) as file:
                return [line.rstrip('\n') for line in file]
        except (OSError, UnicodeDecodeError) as e:
            print(f'Error reading notes: {e}', file=sys.stderr)
            return []

    def overwrite_all(self, lines: List[str]) -> None:
        """Replaces the contents of the file. Raises :exc:`notesfile.models.StoreWriteError` on failure."""
        try:
            with open(self.path, 'w', encoding=self.conf.encoding) as file:
                file.write(''.join(f'{line}\n' for line in lines))
        except OSError as e:
            raise StoreWriteError(f'Error saving notes: {e}', self.path, e) from e

    def add(self, title: str, content: str) -> Result:
        if not (title and content):
            return Result(Outcome.INVALID)
        note = Note.create(title, content)
        try:
            self.append(note)
        except StoreWriteError as e:
            return Result(Outcome.FAILED, error=e)
        return Result(Outcome.OK, [note])

    def list_all(self) -> Result:
        notes = codec.decode_all(self.load_all_lines())
        if not notes:
            return Result(Outcome.EMPTY)
        return Result(Outcome.OK, notes)

    def find_by_title(self, title: str) -> List[Note]:
        """Returns every note with exactly the given title, in file order."""
        lines = self.load_all_lines()
        return [codec.decode_block_at(lines, i) for i in codec.find_title_line_indices(lines, title)]

    def search(self, title: str) -> Result:
        lines = self.load_all_lines()
        if not lines:
            return Result(Outcome.EMPTY)
        notes = [codec.decode_block_at(lines, i) for i in codec.find_title_line_indices(lines, title)]
        if not notes:
            return Result(Outcome.NOT_FOUND)
        return Result(Outcome.OK, notes)

    def modify(self, title: str, new_content: str) -> Result:
        """Gives the first note with the given title new content and a new timestamp.

        Other notes with the same title are left alone.
        """
        if not new_content:
            return Result(Outcome.INVALID)
        lines = self.load_all_lines()
        offsets = codec.find_title_line_indices(lines, title)
        if not offsets:
            return Result(Outcome.NOT_FOUND)
        note = Note.create(title, new_content)
        try:
            self.overwrite_all(codec.update_block_at(lines, offsets[0], note))
        except StoreWriteError as e:
            return Result(Outcome.FAILED, error=e)
        return Result(Outcome.OK, [note])

    def delete_by_title(self, title: str) -> Result:
        """Deletes every note with the given title."""
        remaining, removed = codec.remove_blocks(self.load_all_lines(), title)
        if not removed:
            return Result(Outcome.NOT_FOUND)
        try:
            self.overwrite_all(remaining)
        except StoreWriteError as e:
            return Result(Outcome.FAILED, error=e)
        return Result(Outcome.OK, removed)

    def delete_all(self, confirmation: str) -> Result:
        """Deletes every note, but only if confirmation is "yes" (ignoring case and surrounding whitespace)."""
        notes = codec.decode_all(self.load_all_lines())
        if not notes:
            return Result(Outcome.EMPTY)
        if not confirmation.strip().lower() == 'yes':
            return Result(Outcome.DECLINED)
        try:
            self.overwrite_all([])
        except StoreWriteError as e:
            return Result(Outcome.FAILED, error=e)
        return Result(Outcome.OK, notes)
