import pytest

from kanban.domain.models import Ticket, User
from kanban.storage.preferences import JsonPreferenceStore


@pytest.fixture
def make_ticket():
    def _make(id, priority=0, status="Todo", title="", user_id="", tag=None):
        return Ticket(
            id=id,
            title=title,
            priority=priority,
            status=status,
            user_id=user_id,
            tag=list(tag) if tag is not None else [],
        )

    return _make


@pytest.fixture
def users():
    return [User(id="usr-1", name="Anoop sharma"), User(id="usr-2", name="Yogesh")]


@pytest.fixture
def prefs_path(tmp_path):
    return str(tmp_path / "prefs" / "preferences.json")


@pytest.fixture
def prefs(prefs_path):
    return JsonPreferenceStore(prefs_path)


@pytest.fixture
def broken_prefs(tmp_path):
    """A store whose directory is a regular file, so every write fails."""
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    return JsonPreferenceStore(str(blocker / "preferences.json"))
