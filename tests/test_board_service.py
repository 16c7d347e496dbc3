import httpx
import respx

from kanban.domain.models import TicketDraft
from kanban.services.board_service import build_board, load_store
from kanban.services.ticket_store import TicketStore
from kanban.services.view_state import ViewState

API = "https://tickets.example.test/board"


def ids(tickets):
    return [t.id for t in tickets]


def test_board_groups_then_orders(prefs, users, make_ticket):
    store = TicketStore()
    store.load(
        [
            make_ticket("CAM-1", priority=2, status="Todo"),
            make_ticket("CAM-2", priority=4, status="Todo"),
        ],
        users,
    )
    view_state = ViewState(prefs)
    view_state.load()

    board = build_board(store, view_state)

    assert list(board) == ["Todo"]
    assert ids(board["Todo"]) == ["CAM-2", "CAM-1"]
    # store order untouched
    assert ids(store.all()) == ["CAM-1", "CAM-2"]


def test_board_follows_view_state_changes(prefs, users, make_ticket):
    store = TicketStore()
    store.load(
        [
            make_ticket("CAM-1", title="beta", priority=1, user_id="usr-1"),
            make_ticket("CAM-2", title="Alpha", priority=3, user_id="usr-2"),
            make_ticket("CAM-3", title="gamma", priority=3, user_id="usr-1"),
        ],
        users,
    )
    view_state = ViewState(prefs)
    view_state.set_group_by("user")
    view_state.set_sort_by("title")

    board = build_board(store, view_state)

    assert list(board) == ["Anoop sharma", "Yogesh"]
    assert ids(board["Anoop sharma"]) == ["CAM-1", "CAM-3"]

    view_state.set_group_by("priority")
    board = build_board(store, view_state)

    assert list(board) == ["Low", "High"]
    assert ids(board["High"]) == ["CAM-2", "CAM-3"]


def test_board_includes_appended_ticket(prefs, users, make_ticket):
    store = TicketStore()
    store.load([make_ticket("CAM-1", status="Todo")], users)
    view_state = ViewState(prefs)

    store.append(TicketDraft(title="New", priority="2", status="Backlog", user_id="usr-2"))
    board = build_board(store, view_state)

    assert ids(board["Backlog"]) == ["CAM-2"]
    assert board["Backlog"][0].tag == ["Feature Request"]


def test_empty_store_gives_empty_board(prefs):
    assert build_board(TicketStore(), ViewState(prefs)) == {}


@respx.mock
def test_load_store_populates_from_remote():
    respx.get(API).mock(
        return_value=httpx.Response(
            200,
            json={
                "tickets": [{"id": "CAM-1", "title": "t", "status": "Todo", "priority": 2, "userId": "usr-1"}],
                "users": [{"id": "usr-1", "name": "Anoop sharma"}],
            },
        )
    )
    store = TicketStore()

    assert load_store(store, API) is None
    assert ids(store.all()) == ["CAM-1"]
    assert [u.name for u in store.users()] == ["Anoop sharma"]


@respx.mock
def test_load_store_unavailable_source_leaves_store_empty(prefs):
    respx.get(API).mock(return_value=httpx.Response(503))
    store = TicketStore()

    message = load_store(store, API)

    assert message and message.startswith("Could not load tickets")
    assert store.all() == ()
    assert store.users() == ()
    assert build_board(store, ViewState(prefs)) == {}
