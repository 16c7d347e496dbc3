import pytest

from kanban.domain.errors import InvalidDraft
from kanban.domain.models import TicketDraft
from kanban.services.ticket_store import TicketStore, parse_priority


@pytest.fixture
def store(users, make_ticket):
    s = TicketStore()
    s.load([make_ticket("CAM-1"), make_ticket("CAM-2")], users)
    return s


def test_append_assigns_sequential_id_and_default_tag(store):
    draft = TicketDraft(title="Fix bug", priority="3", status="Backlog", user_id="u1")

    ticket = store.append(draft)

    assert ticket.id == "CAM-3"
    assert ticket.tag == ["Feature Request"]
    assert ticket.priority == 3
    assert ticket.status == "Backlog"
    assert ticket.user_id == "u1"
    assert ticket.title == "Fix bug"
    assert store.all()[-1] is ticket


def test_append_allows_empty_title(store):
    ticket = store.append(TicketDraft(title="", priority="0"))

    assert ticket.title == ""
    assert ticket.status == "Todo"


def test_append_non_numeric_priority_leaves_store_unchanged(store):
    before = store.all()

    with pytest.raises(InvalidDraft) as exc_info:
        store.append(TicketDraft(title="x", priority="high", status="Todo", user_id="u1"))

    assert exc_info.value.field == "priority"
    assert store.all() == before
    assert len(store) == 2


@pytest.mark.parametrize("raw", ["", "5", "-1", "2.5", None, True])
def test_parse_priority_rejects(raw):
    with pytest.raises(InvalidDraft):
        parse_priority(raw)


@pytest.mark.parametrize("raw,expected", [("0", 0), (" 4 ", 4), (2, 2)])
def test_parse_priority_accepts(raw, expected):
    assert parse_priority(raw) == expected


def test_append_rejects_non_string_status(store):
    with pytest.raises(InvalidDraft):
        store.append(TicketDraft(title="x", priority="1", status=None))
    assert len(store) == 2


def test_load_replaces_contents(store, users, make_ticket):
    store.load([make_ticket("X-1")], users[:1])

    assert [t.id for t in store.all()] == ["X-1"]
    assert [u.id for u in store.users()] == ["usr-1"]


def test_all_is_a_snapshot(store):
    snapshot = store.all()
    store.append(TicketDraft(title="new", priority="1"))

    assert len(snapshot) == 2
    assert len(store.all()) == 3


def test_empty_store():
    store = TicketStore()

    assert store.all() == ()
    assert store.users() == ()
    assert store.append(TicketDraft(title="first")).id == "CAM-1"
