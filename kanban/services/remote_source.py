"""
remote_source.py - Remote ticket source
Single responsibility: one-shot read of tickets/users over HTTP and
tolerant conversion of the payload into domain models.
"""
import logging
from dataclasses import dataclass, field

import httpx

from kanban.config import API_URL, FETCH_TIMEOUT
from kanban.domain.errors import RemoteSourceError
from kanban.domain.models import Ticket, User

logger = logging.getLogger(__name__)

# Lands in the fallback priority bucket
INVALID_PRIORITY = -1


@dataclass
class BoardData:
    tickets: list[Ticket] = field(default_factory=list)
    users: list[User] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Payload parsing
# ---------------------------------------------------------------------------


def _as_text(value) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_priority(value) -> int:
    if isinstance(value, bool):
        return INVALID_PRIORITY
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return INVALID_PRIORITY
    return INVALID_PRIORITY


def parse_ticket(raw) -> Ticket | None:
    if not isinstance(raw, dict):
        return None
    tags = raw.get("tag")
    return Ticket(
        id=_as_text(raw.get("id")),
        title=_as_text(raw.get("title")),
        priority=_as_priority(raw.get("priority")),
        status=_as_text(raw.get("status")),
        user_id=_as_text(raw.get("userId")),
        tag=[_as_text(t) for t in tags] if isinstance(tags, list) else [],
    )


def parse_user(raw) -> User | None:
    if not isinstance(raw, dict) or raw.get("id") in (None, ""):
        return None
    return User(id=_as_text(raw["id"]), name=_as_text(raw.get("name")))


def parse_board_data(payload) -> BoardData:
    if not isinstance(payload, dict):
        raise RemoteSourceError(
            f"Unexpected payload type: {type(payload).__name__}"
        )
    raw_tickets = payload.get("tickets")
    raw_users = payload.get("users")
    if not isinstance(raw_tickets, list):
        raw_tickets = []
    if not isinstance(raw_users, list):
        raw_users = []

    tickets = [t for t in map(parse_ticket, raw_tickets) if t is not None]
    users = [u for u in map(parse_user, raw_users) if u is not None]
    skipped = len(raw_tickets) - len(tickets)
    if skipped:
        logger.warning(f"Skipped {skipped} malformed ticket entries")
    return BoardData(tickets=tickets, users=users)


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------


def fetch_board_data(
    url: str = API_URL, client: httpx.Client | None = None
) -> BoardData:
    """Read tickets and users from the remote endpoint."""
    own_client = client is None
    http = client or httpx.Client(timeout=FETCH_TIMEOUT)
    try:
        response = http.get(url)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as exc:
        raise RemoteSourceError(f"Failed to fetch {url}: {exc}") from exc
    except ValueError as exc:
        raise RemoteSourceError(f"Invalid JSON from {url}: {exc}") from exc
    finally:
        if own_client:
            http.close()

    data = parse_board_data(payload)
    logger.info(f"Fetched {len(data.tickets)} tickets, {len(data.users)} users")
    return data
