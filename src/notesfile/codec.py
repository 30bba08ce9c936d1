"""Converts between :class:`notesfile.models.Note` instances and the lines of the notes file.

Each note is stored as a block of four lines::

    TITLE: Groceries
    CONTENT: eggs, milk
    CREATED_AT: 2024-01-02 03:04:05
    -----

Nothing is escaped, so a title or content containing a line break or the separator will corrupt the file.
Every function that needs to know where a block starts or ends lives in this module.
"""

from typing import List, Tuple

from notesfile.models import Note

TITLE_PREFIX = 'TITLE: '
CONTENT_PREFIX = 'CONTENT: '
CREATED_AT_PREFIX = 'CREATED_AT: '
SEPARATOR = '-----'
BLOCK_SIZE = 4


def _strip_prefix(line: str, prefix: str) -> str:
    if line.startswith(prefix):
        return line[len(prefix):]
    return line


def encode(note: Note) -> List[str]:
    """Returns the four lines representing the note. Does not validate the note's fields."""
    return [
        TITLE_PREFIX + note.title,
        CONTENT_PREFIX + note.content,
        CREATED_AT_PREFIX + note.created_at,
        SEPARATOR,
    ]


def find_title_line_indices(lines: List[str], title: str) -> List[int]:
    """Returns the index of every line that is the title line for the given title, in file order."""
    target = TITLE_PREFIX + title
    return [i for i, line in enumerate(lines) if line == target]


def decode_block_at(lines: List[str], offset: int) -> Note:
    """Decodes the block starting at the given index.

    If the file ends before the block is complete, only the lines that are present are used, and the
    missing fields are left empty.
    """
    block = lines[offset:offset + BLOCK_SIZE]
    fields = [_strip_prefix(line, prefix) for line, prefix
              in zip(block, (TITLE_PREFIX, CONTENT_PREFIX, CREATED_AT_PREFIX))]
    fields.extend([''] * (3 - len(fields)))
    return Note(*fields)


def decode_all(lines: List[str]) -> List[Note]:
    """Decodes every block in the file, including a short block at the end if there is one."""
    return [decode_block_at(lines, offset) for offset in range(0, len(lines), BLOCK_SIZE)]


def update_block_at(lines: List[str], offset: int, note: Note) -> List[str]:
    """Returns a copy of the lines with the content and timestamp of the block at offset taken from the note.

    The title line and everything after the timestamp line are left as they are. If the file ends before the
    block does, the missing lines are added.
    """
    result = list(lines)
    missing = encode(note)[len(result) - offset:]
    result.extend(missing)
    result[offset + 1] = CONTENT_PREFIX + note.content
    result[offset + 2] = CREATED_AT_PREFIX + note.created_at
    return result


def remove_blocks(lines: List[str], title: str) -> Tuple[List[str], List[Note]]:
    """Returns a copy of the lines without any of the blocks for the given title, and the notes that were removed."""
    target = TITLE_PREFIX + title
    result = []
    removed = []
    i = 0
    while i < len(lines):
        if lines[i] == target:
            removed.append(decode_block_at(lines, i))
            i += BLOCK_SIZE
        else:
            result.append(lines[i])
            i += 1
    return result, removed
