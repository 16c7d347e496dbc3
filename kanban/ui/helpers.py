"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across the board UI.
"""
import flet as ft

from kanban.config import COLOR_TEXT_MUTED, PRIORITY_COLORS, PRIORITY_LABELS
from kanban.domain.models import TicketDraft, User

_PRIORITY_ICONS = {
    4: ft.Icons.PRIORITY_HIGH,
    3: ft.Icons.SIGNAL_CELLULAR_ALT,
    2: ft.Icons.SIGNAL_CELLULAR_ALT_2_BAR,
    1: ft.Icons.SIGNAL_CELLULAR_ALT_1_BAR,
    0: ft.Icons.MORE_HORIZ,
}


def priority_color(priority) -> str:
    return PRIORITY_COLORS.get(priority, COLOR_TEXT_MUTED)


def priority_icon(priority):
    return _PRIORITY_ICONS.get(priority, ft.Icons.HELP_OUTLINE)


def priority_options() -> list[tuple[str, str]]:
    """(value, label) pairs for the add-ticket form, highest first."""
    return [(str(p), PRIORITY_LABELS[p]) for p in sorted(PRIORITY_LABELS, reverse=True)]


def draft_from_form(title, priority, status, user_id) -> TicketDraft:
    """Collect dialog values; the title is kept exactly as typed."""
    defaults = TicketDraft()
    return TicketDraft(
        title=title or "",
        priority=priority or "",
        status=status or defaults.status,
        user_id=user_id or "",
    )


def user_name_map(users: list[User] | tuple[User, ...]) -> dict[str, str]:
    names: dict[str, str] = {}
    for user in users:
        names.setdefault(user.id, user.name)
    return names


def initials(name: str) -> str:
    parts = [p for p in (name or "").split() if p]
    if not parts:
        return "?"
    return "".join(p[0] for p in parts[:2]).upper()
