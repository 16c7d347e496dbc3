"""
actions.py - UI-side actions and dialogs
Single responsibility: handle modal flows that add tickets.
"""

import logging

import flet as ft

from kanban.config import (
    COLOR_BORDER,
    COLOR_PRIMARY,
    COLOR_DANGER,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    TICKET_STATUSES,
)
from kanban.domain.errors import InvalidDraft
from kanban.domain.models import TicketDraft
from kanban.services.ticket_store import TicketStore
from kanban.ui.helpers import draft_from_form, priority_options

logger = logging.getLogger(__name__)


def show_new_ticket_dialog(page: ft.Page, store: TicketStore, on_created):
    """Open the "Add New Ticket" dialog and refresh the board on success."""
    defaults = TicketDraft()

    title_field = ft.TextField(
        label="Ticket Title",
        value=defaults.title,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )
    priority_field = ft.Dropdown(
        label="Priority",
        options=[ft.dropdown.Option(key=value, text=label) for value, label in priority_options()],
        value=defaults.priority,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )
    status_field = ft.Dropdown(
        label="Status",
        options=[ft.dropdown.Option(key=s, text=s) for s in TICKET_STATUSES],
        value=defaults.status,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )
    user_field = ft.Dropdown(
        label="User",
        options=[ft.dropdown.Option(key="", text="Select User")]
        + [ft.dropdown.Option(key=u.id, text=u.name) for u in store.users()],
        value=defaults.user_id,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )
    error_text = ft.Text("", color=COLOR_DANGER, size=12)

    def on_save(_e=None):
        draft = draft_from_form(
            title_field.value,
            priority_field.value,
            status_field.value,
            user_field.value,
        )
        try:
            ticket = store.append(draft)
        except InvalidDraft as exc:
            error_text.value = f"⚠  {exc.message}"
            page.update()
            return
        logger.info(f"Ticket created: {ticket.id}")
        dialog.open = False
        on_created()
        page.update()

    def on_cancel(_e=None):
        dialog.open = False
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Add New Ticket", weight=ft.FontWeight.BOLD),
        content=ft.Container(
            content=ft.Column(
                controls=[
                    title_field,
                    priority_field,
                    status_field,
                    user_field,
                    error_text,
                ],
                spacing=16,
                tight=True,
            ),
            width=420,
        ),
        actions=[
            ft.TextButton("Cancel", on_click=on_cancel),
            ft.FilledButton(
                "Add Ticket",
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=on_save,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()
