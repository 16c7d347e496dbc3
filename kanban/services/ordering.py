"""
ordering.py - Ticket ordering within a bucket
Single responsibility: return a newly ordered list for a sort key.
"""
import locale
import unicodedata
from collections.abc import Iterable

from kanban.domain.models import Ticket
from kanban.domain.view_keys import SortKey


def title_collation_key(title: str) -> str:
    """Case- and accent-insensitive key, collated with the active locale."""
    # strxfrm rejects embedded NULs
    decomposed = unicodedata.normalize("NFKD", (title or "").replace("\x00", ""))
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return locale.strxfrm(stripped.casefold())


def order_tickets(tickets: Iterable[Ticket], key: SortKey | str) -> list[Ticket]:
    """
    Order tickets by priority (highest first) or by title (ascending).

    Always returns a new list; sorted() is stable, so tickets with equal
    keys keep their input order.
    """
    key = SortKey(key)
    if key is SortKey.PRIORITY:
        return sorted(tickets, key=lambda t: t.priority, reverse=True)
    return sorted(tickets, key=lambda t: title_collation_key(t.title))
