"""Keeps short personal notes in a single plain text file.

If you installed via ``pip``, run ``notesfile`` for the interactive menu, or ``notesfile -h`` to get help.

To use the Python API, look at :class:`notesfile.store.NoteStore`
"""
