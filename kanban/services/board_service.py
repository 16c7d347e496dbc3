"""
board_service.py - Board pipeline
Single responsibility: populate the store once and turn the store + view
state into ordered buckets.
"""
import logging

import httpx

from kanban.config import API_URL
from kanban.domain.errors import RemoteSourceError
from kanban.domain.models import Ticket
from kanban.services.grouping import group_tickets
from kanban.services.ordering import order_tickets
from kanban.services.remote_source import fetch_board_data
from kanban.services.ticket_store import TicketStore
from kanban.services.view_state import ViewState

logger = logging.getLogger(__name__)


def load_store(
    store: TicketStore, url: str = API_URL, client: httpx.Client | None = None
) -> str | None:
    """
    Populate the store from the remote source.

    Returns None on success, or a user-facing message when the source is
    unavailable; the store is then left untouched (empty on startup).
    """
    try:
        data = fetch_board_data(url, client=client)
    except RemoteSourceError as exc:
        logger.warning("Remote ticket source unavailable", exc_info=True)
        return f"Could not load tickets: {exc}"
    store.load(data.tickets, data.users)
    return None


def build_board(store: TicketStore, view_state: ViewState) -> dict[str, list[Ticket]]:
    groups = group_tickets(store.all(), store.users(), view_state.group_by)
    return {
        label: order_tickets(bucket, view_state.sort_by)
        for label, bucket in groups.items()
    }
