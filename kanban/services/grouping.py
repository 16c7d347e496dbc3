"""
grouping.py - Ticket grouping
Single responsibility: partition tickets into labelled buckets.
"""
from collections.abc import Callable, Iterable

from kanban.config import PRIORITY_LABELS, UNKNOWN_PRIORITY_LABEL, UNKNOWN_USER_LABEL
from kanban.domain.models import Ticket, User
from kanban.domain.view_keys import GroupKey


def priority_label(priority) -> str:
    return PRIORITY_LABELS.get(priority, UNKNOWN_PRIORITY_LABEL)


def _bucket_label_fn(users: Iterable[User], key: GroupKey) -> Callable[[Ticket], str]:
    if key is GroupKey.STATUS:
        return lambda ticket: ticket.status
    if key is GroupKey.USER:
        # First user wins on duplicate ids
        names: dict[str, str] = {}
        for user in users:
            names.setdefault(user.id, user.name)
        return lambda ticket: names.get(ticket.user_id, UNKNOWN_USER_LABEL)
    return lambda ticket: priority_label(ticket.priority)


def group_tickets(
    tickets: Iterable[Ticket], users: Iterable[User], key: GroupKey | str
) -> dict[str, list[Ticket]]:
    """
    Group tickets by status, owning user name or priority label.

    Buckets appear in first-appearance order and keep input order inside;
    empty buckets are never created. The input sequence is not modified.
    """
    label_of = _bucket_label_fn(users, GroupKey(key))
    groups: dict[str, list[Ticket]] = {}
    for ticket in tickets:
        groups.setdefault(label_of(ticket), []).append(ticket)
    return groups
