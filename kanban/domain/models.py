"""
models.py - Domain models
Single responsibility: typed containers for tickets, users and drafts.
"""
from dataclasses import dataclass, field


@dataclass
class Ticket:
    id: str
    title: str
    priority: int
    status: str
    user_id: str = ""
    tag: list[str] = field(default_factory=list)


@dataclass
class User:
    id: str
    name: str


@dataclass
class TicketDraft:
    """Unvalidated add-ticket form input; priority is still the raw string."""

    title: str = ""
    priority: str = "1"
    status: str = "Todo"
    user_id: str = ""
