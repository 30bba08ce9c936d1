"""Command-line interface for notesfile."""


import argparse
import json
import sys
import time
from typing import List
from terminaltables import AsciiTable
from notesfile import codec
from notesfile.conf import NotesConf
from notesfile.models import Note, Outcome, Result, StoreInitError
from notesfile.store import NoteStore


MENU = """
===== Notes Manager =====
1. Add a Note
2. View All Notes
3. View Notes by Title
4. Modify a Note by Title
5. Delete a Note by Title
6. Delete All Notes
7. Exit"""


def _print_notes(notes: List[Note], spaced=False) -> None:
    for note in notes:
        for line in codec.encode(note):
            print(line)
        if spaced:
            print()


def _print_table(notes: List[Note]) -> None:
    data = [('Title', 'Content', 'Created')] + [(n.title, n.content, n.created_at) for n in notes]
    print(AsciiTable(data).table)


def _report_failure(result: Result) -> None:
    print(f'Error saving notes: {result.error.cause or result.error}', file=sys.stderr)


def _exit_code(result: Result) -> int:
    return 0 if result.outcome in (Outcome.OK, Outcome.EMPTY) else 1


class Menu:
    """Runs the interactive menu against a store until the user exits or input runs out."""

    def __init__(self, store: NoteStore):
        self.store = store
        self.actions = {
            1: self.add,
            2: self.view_all,
            3: self.view_by_title,
            4: self.modify,
            5: self.delete,
            6: self.delete_all,
        }

    def pause(self) -> None:
        try:
            time.sleep(self.store.conf.pause_seconds)
        except KeyboardInterrupt:
            pass

    def ask(self, prompt: str) -> str:
        return input(prompt).strip()

    def choice(self) -> int:
        """Returns the number the user entered, or -1 if it wasn't a number."""
        answer = self.ask('Enter your choice: ')
        return int(answer) if answer.isdecimal() else -1

    def run(self) -> int:
        while True:
            print(MENU)
            try:
                choice = self.choice()
                if choice == 7:
                    print('Exiting application... Goodbye!')
                    return 0
                action = self.actions.get(choice)
                if action:
                    action()
                else:
                    print('Invalid choice. Please select between 1 and 7.')
            except EOFError:
                print()
                print('Exiting application... Goodbye!')
                return 0
            self.pause()

    def add(self) -> None:
        title = self.ask('Enter note title: ')
        if not title:
            print('Title cannot be empty.')
            return
        content = self.ask('Enter note content: ')
        if not content:
            print('Content cannot be empty.')
            return
        result = self.store.add(title, content)
        if result.outcome is Outcome.FAILED:
            _report_failure(result)
        else:
            print('Note added successfully!')

    def view_all(self) -> None:
        result = self.store.list_all()
        if result.outcome is Outcome.EMPTY:
            print('No notes available. Please add one.')
            return
        print('\n----- All Notes -----')
        _print_notes(result.notes)

    def view_by_title(self) -> None:
        if self.store.list_all().outcome is Outcome.EMPTY:
            print('No notes available.')
            return
        title = self.ask('Enter title to search: ')
        result = self.store.search(title)
        if result.ok:
            print('\n----- Matching Notes -----')
            _print_notes(result.notes, spaced=True)
        else:
            print(f'No notes found with title: {title}')

    def modify(self) -> None:
        title = self.ask('Enter title of note to modify: ')
        if not self.store.find_by_title(title):
            print('No notes found with that title.')
            return
        result = self.store.modify(title, self.ask('Enter new content: '))
        if result.outcome is Outcome.INVALID:
            print('Content cannot be empty.')
        elif result.outcome is Outcome.NOT_FOUND:
            print('No notes found with that title.')
        elif result.outcome is Outcome.FAILED:
            _report_failure(result)
        else:
            print('Note updated successfully!')

    def delete(self) -> None:
        title = self.ask('Enter title of note to delete: ')
        result = self.store.delete_by_title(title)
        if result.outcome is Outcome.NOT_FOUND:
            print('No notes found with that title.')
        elif result.outcome is Outcome.FAILED:
            _report_failure(result)
        else:
            print(f'Note(s) deleted with title: {title}')

    def delete_all(self) -> None:
        if self.store.list_all().outcome is Outcome.EMPTY:
            print('No notes available to delete.')
            return
        result = self.store.delete_all(self.ask('Are you sure you want to delete ALL notes? (yes/no): '))
        if result.outcome is Outcome.DECLINED:
            print('Nothing was deleted. Answer "yes" to delete all notes.')
        elif result.outcome is Outcome.FAILED:
            _report_failure(result)
        elif result.outcome is Outcome.EMPTY:
            print('No notes available to delete.')
        else:
            print('All notes deleted successfully!')


def _interactive(args, store: NoteStore) -> int:
    return Menu(store).run()


def _add(args, store: NoteStore) -> int:
    result = store.add(args.title[0].strip(), args.content[0].strip())
    if result.outcome is Outcome.INVALID:
        print('Title and content cannot be empty.', file=sys.stderr)
    elif result.outcome is Outcome.FAILED:
        _report_failure(result)
    else:
        print(f'Added {result.notes[0].title}')
    return _exit_code(result)


def _list(args, store: NoteStore) -> int:
    result = store.list_all()
    if args.json:
        print(json.dumps([n.as_json() for n in result.notes]))
    elif args.table:
        _print_table(result.notes)
    elif result.notes:
        _print_notes(result.notes)
    else:
        print('No notes available.', file=sys.stderr)
    return _exit_code(result)


def _show(args, store: NoteStore) -> int:
    title = args.title[0].strip()
    result = store.search(title)
    if args.json:
        print(json.dumps([n.as_json() for n in result.notes]))
    elif args.table:
        _print_table(result.notes)
    elif result.notes:
        _print_notes(result.notes, spaced=True)
    else:
        print(f'No notes found with title: {title}', file=sys.stderr)
    return 0 if result.ok else 1


def _modify(args, store: NoteStore) -> int:
    result = store.modify(args.title[0].strip(), args.content[0].strip())
    if result.outcome is Outcome.NOT_FOUND:
        print('No notes found with that title.', file=sys.stderr)
    elif result.outcome is Outcome.INVALID:
        print('Content cannot be empty.', file=sys.stderr)
    elif result.outcome is Outcome.FAILED:
        _report_failure(result)
    return _exit_code(result)


def _delete(args, store: NoteStore) -> int:
    result = store.delete_by_title(args.title[0].strip())
    if result.outcome is Outcome.NOT_FOUND:
        print('No notes found with that title.', file=sys.stderr)
    elif result.outcome is Outcome.FAILED:
        _report_failure(result)
    else:
        print(f'Deleted {len(result.notes)} note(s)')
    return _exit_code(result)


def _clear(args, store: NoteStore) -> int:
    if args.yes:
        confirmation = 'yes'
    elif store.list_all().outcome is Outcome.EMPTY:
        return 0
    else:
        try:
            confirmation = input('Are you sure you want to delete ALL notes? (yes/no): ')
        except EOFError:
            print()
            confirmation = ''
    result = store.delete_all(confirmation)
    if result.outcome is Outcome.DECLINED:
        print('Nothing was deleted.', file=sys.stderr)
    elif result.outcome is Outcome.FAILED:
        _report_failure(result)
    elif result.ok:
        print(f'Deleted {len(result.notes)} note(s)')
    return _exit_code(result)


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Keep short notes in a plain text file. Run without a command for the interactive menu.')
    parser.set_defaults(func=_interactive)
    parser.add_argument('-f', '--file', nargs=1,
                        help='Path of the notes file. Overrides notes_path from ~/.notesfile.conf.py; '
                             'defaults to notes.txt in the current directory.')
    parser.add_argument('--no-pause', action='store_true',
                        help='Do not pause after each action in the interactive menu.')

    subs = parser.add_subparsers(title='Commands')

    p_add = subs.add_parser('add', help='Add a note.')
    p_add.add_argument('title', nargs=1)
    p_add.add_argument('content', nargs=1)
    p_add.set_defaults(func=_add)

    p_list = subs.add_parser('list', help='Show all notes, oldest first.')
    p_list_formats = p_list.add_mutually_exclusive_group()
    p_list_formats.add_argument('-j', '--json', help='Output as JSON.', action='store_true')
    p_list_formats.add_argument('-t', '--table', help='Format output as a table.', action='store_true')
    p_list.set_defaults(func=_list)

    p_show = subs.add_parser('show', help='Show every note with the given title.')
    p_show.add_argument('title', nargs=1)
    p_show_formats = p_show.add_mutually_exclusive_group()
    p_show_formats.add_argument('-j', '--json', help='Output as JSON.', action='store_true')
    p_show_formats.add_argument('-t', '--table', help='Format output as a table.', action='store_true')
    p_show.set_defaults(func=_show)

    p_modify = subs.add_parser(
        'modify',
        help='Replace the content of the first note with the given title, and update its timestamp. '
             'Other notes with the same title are not changed.')
    p_modify.add_argument('title', nargs=1)
    p_modify.add_argument('content', nargs=1)
    p_modify.set_defaults(func=_modify)

    p_delete = subs.add_parser('delete', help='Delete every note with the given title.')
    p_delete.add_argument('title', nargs=1)
    p_delete.set_defaults(func=_delete)

    p_clear = subs.add_parser('clear', help='Delete all notes. Asks for confirmation unless --yes is given.')
    p_clear.add_argument('-y', '--yes', action='store_true', help='Do not ask for confirmation.')
    p_clear.set_defaults(func=_clear)

    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    conf = NotesConf.for_user()
    if args.file:
        conf.notes_path = args.file[0]
    if args.no_pause:
        conf.pause_seconds = 0
    store = conf.instantiate()
    try:
        store.ensure_exists()
    except StoreInitError as e:
        print(e.message, file=sys.stderr)
        return 1
    return args.func(args, store)
