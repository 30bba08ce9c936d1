"""Configuration for notesfile.

Settings can be placed in ``~/.notesfile.conf.py``, which should assign a :class:`NotesConf` to the variable
``conf``. For example:

.. code-block:: python

   from notesfile.conf import NotesConf
   conf = NotesConf(notes_path='~/Documents/notes.txt', pause_seconds=0)
"""
from __future__ import annotations
from dataclasses import dataclass, replace
import os.path
from typing import Optional


@dataclass
class NotesConf:
    notes_path: str = 'notes.txt'
    """Path of the file the notes are kept in.

    Relative paths are resolved against the working directory. The file is created on startup if it doesn't
    exist yet, but its parent folder is not.
    """

    encoding: Optional[str] = None
    """Text encoding of the notes file. The platform default is used if this is None."""

    pause_seconds: float = 0.45
    """How long the interactive menu waits after each action before showing the menu again.

    You can pass ``--no-pause`` on the command line to set this to zero.
    """

    @classmethod
    def user_config_path(cls) -> str:
        return os.path.expanduser(os.path.join('~', '.notesfile.conf.py'))

    @classmethod
    def for_user(cls) -> NotesConf:
        """Loads ``~/.notesfile.conf.py``, or returns the default configuration if that file does not exist.

        Raises :exc:`Exception` if the file exists but does not define configuration.
        """
        path = cls.user_config_path()
        if not os.path.exists(path):
            return cls()
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise Exception('You need to assign an instance of NotesConf to the variable `conf` '
                            f'in your config file: {path}')
        return context['conf']

    def standardize(self):
        return replace(
            self,
            notes_path=os.path.abspath(os.path.expanduser(self.notes_path))
        )

    def instantiate(self):
        from notesfile.store import NoteStore
        return NoteStore(self.standardize())
