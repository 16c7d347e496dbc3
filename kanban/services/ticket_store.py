"""
ticket_store.py - Working set of tickets and users
Single responsibility: hold the board's tickets/users and append local tickets.
"""
import logging
from collections.abc import Iterable

from kanban.config import DEFAULT_TAG, PRIORITY_LABELS, TICKET_ID_PREFIX
from kanban.domain.errors import InvalidDraft
from kanban.domain.models import Ticket, TicketDraft, User

logger = logging.getLogger(__name__)


def parse_priority(raw) -> int:
    """Parse the form's priority string; reject anything outside the label table."""
    if isinstance(raw, bool):
        raise InvalidDraft("priority", f"not a number: {raw!r}")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise InvalidDraft("priority", f"not a number: {raw!r}") from None
    if value not in PRIORITY_LABELS:
        raise InvalidDraft("priority", f"out of range: {value}")
    return value


class TicketStore:
    def __init__(self):
        self._tickets: list[Ticket] = []
        self._users: list[User] = []

    def load(self, tickets: Iterable[Ticket], users: Iterable[User]) -> None:
        """Replace the full contents (called once after the remote read)."""
        self._tickets = list(tickets)
        self._users = list(users)
        logger.info(
            f"Store loaded: {len(self._tickets)} tickets, {len(self._users)} users"
        )

    def append(self, draft: TicketDraft) -> Ticket:
        priority = parse_priority(draft.priority)
        if not isinstance(draft.status, str):
            raise InvalidDraft("status", f"not a string: {draft.status!r}")
        if not isinstance(draft.user_id, str):
            raise InvalidDraft("user_id", f"not a string: {draft.user_id!r}")

        ticket = Ticket(
            id=f"{TICKET_ID_PREFIX}{len(self._tickets) + 1}",
            title=draft.title or "",
            priority=priority,
            status=draft.status,
            user_id=draft.user_id,
            tag=[DEFAULT_TAG],
        )
        self._tickets.append(ticket)
        logger.debug(f"Ticket appended: {ticket.id}")
        return ticket

    def all(self) -> tuple[Ticket, ...]:
        return tuple(self._tickets)

    def users(self) -> tuple[User, ...]:
        return tuple(self._users)

    def __len__(self) -> int:
        return len(self._tickets)
