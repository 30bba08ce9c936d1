import pytest
from notesfile.conf import NotesConf


@pytest.fixture
def store(fs):
    fs.create_dir('/work')
    fs.cwd = '/work'
    store = NotesConf(pause_seconds=0).instantiate()
    store.ensure_exists()
    return store
