"""
views.py - UI view builders (board)
Single responsibility: build flet Views using provided callbacks/state.
"""

import flet as ft

from kanban.config import (
    APP_TITLE,
    COLOR_BG,
    COLOR_CARD,
    COLOR_BORDER,
    COLOR_TEXT_MUTED,
    COLOR_TEXT_MAIN,
    COLOR_PRIMARY,
    COLOR_APPBAR_BG,
    COLOR_APPBAR_FG,
    BORDER_RADIUS_CARD,
    BORDER_RADIUS_BTN,
    COLUMN_WIDTH,
    SHADOW_ELEVATION,
)
from kanban.domain.models import Ticket, User
from kanban.domain.view_keys import GROUP_KEY_LABELS, SORT_KEY_LABELS
from kanban.services.view_state import ViewState
from kanban.ui.components.ticket_card import TicketCard
from kanban.ui.helpers import user_name_map


def build_appbar(on_toggle_display) -> ft.AppBar:
    display_btn = ft.Container(
        content=ft.Row(
            [
                ft.Icon(ft.Icons.TUNE, size=16, color=COLOR_TEXT_MAIN),
                ft.Text("Display", size=14, color=COLOR_TEXT_MAIN),
                ft.Icon(ft.Icons.KEYBOARD_ARROW_DOWN, size=16, color=COLOR_TEXT_MUTED),
            ],
            spacing=6,
            tight=True,
        ),
        padding=ft.Padding.symmetric(horizontal=12, vertical=6),
        border=ft.border.all(1, COLOR_BORDER),
        border_radius=BORDER_RADIUS_BTN,
        bgcolor=COLOR_CARD,
        on_click=lambda _: on_toggle_display(),
        ink=True,
    )
    return ft.AppBar(
        leading=ft.Container(content=display_btn, padding=ft.Padding.only(left=16)),
        leading_width=140,
        title=ft.Text(
            APP_TITLE,
            color=COLOR_APPBAR_FG,
            weight=ft.FontWeight.BOLD,
            size=20,
        ),
        bgcolor=COLOR_APPBAR_BG,
        center_title=False,
        elevation=SHADOW_ELEVATION,
        shadow_color=ft.Colors.BLACK12,
        automatically_imply_leading=False,
    )


def _build_option_btn(label: str, selected: bool, on_click) -> ft.Container:
    color = COLOR_PRIMARY if selected else COLOR_TEXT_MUTED
    return ft.Container(
        content=ft.Text(
            label,
            color=color,
            size=13,
            weight=ft.FontWeight.BOLD if selected else ft.FontWeight.NORMAL,
        ),
        padding=ft.Padding.symmetric(vertical=6, horizontal=14),
        border=ft.border.all(1, COLOR_PRIMARY if selected else COLOR_BORDER),
        border_radius=BORDER_RADIUS_BTN,
        on_click=lambda _: on_click(),
        ink=True,
    )


def build_display_panel(view_state: ViewState, on_group_change, on_sort_change) -> ft.Container:
    """Grouping / Ordering selectors shown under the Display button."""
    group_row = ft.Row(
        controls=[
            _build_option_btn(
                label,
                view_state.group_by is key,
                lambda k=key: on_group_change(k),
            )
            for key, label in GROUP_KEY_LABELS.items()
        ],
        spacing=6,
    )
    sort_row = ft.Row(
        controls=[
            _build_option_btn(
                label,
                view_state.sort_by is key,
                lambda k=key: on_sort_change(k),
            )
            for key, label in SORT_KEY_LABELS.items()
        ],
        spacing=6,
    )
    return ft.Container(
        content=ft.Column(
            controls=[
                ft.Row(
                    [ft.Text("Grouping", size=13, color=COLOR_TEXT_MUTED, width=80), group_row]
                ),
                ft.Row(
                    [ft.Text("Ordering", size=13, color=COLOR_TEXT_MUTED, width=80), sort_row]
                ),
            ],
            spacing=10,
            tight=True,
        ),
        bgcolor=COLOR_CARD,
        padding=ft.Padding.all(14),
        border=ft.border.all(1, COLOR_BORDER),
        border_radius=BORDER_RADIUS_CARD,
        shadow=ft.BoxShadow(
            blur_radius=6,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 2),
        ),
        width=420,
    )


def _build_column(label: str, tickets: list[Ticket], user_names: dict[str, str], on_add_ticket) -> ft.Container:
    header = ft.Row(
        controls=[
            ft.Text(label, size=14, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
            ft.Text(str(len(tickets)), size=13, color=COLOR_TEXT_MUTED),
            ft.Container(expand=True),
            ft.IconButton(
                icon=ft.Icons.ADD,
                icon_size=18,
                icon_color=COLOR_TEXT_MUTED,
                tooltip="Add New Card",
                on_click=lambda _: on_add_ticket(),
            ),
        ],
        spacing=8,
        vertical_alignment=ft.CrossAxisAlignment.CENTER,
    )
    return ft.Container(
        content=ft.Column(
            controls=[header, *[TicketCard(t, user_names) for t in tickets]],
            spacing=4,
            scroll=ft.ScrollMode.AUTO,
        ),
        width=COLUMN_WIDTH,
        padding=ft.Padding.symmetric(horizontal=4),
    )


def _build_empty_board(message: str) -> ft.Container:
    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(ft.Icons.INBOX, size=64, color=COLOR_BORDER),
                ft.Text(message, color=COLOR_TEXT_MUTED, size=16),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        alignment=ft.Alignment.CENTER,
        padding=60,
        expand=True,
    )


def build_board_view(
    state,
    view_state: ViewState,
    board: dict[str, list[Ticket]],
    users: list[User] | tuple[User, ...],
    on_toggle_display,
    on_group_change,
    on_sort_change,
    on_add_ticket,
) -> ft.View:
    user_names = user_name_map(users)

    if board:
        body = ft.Row(
            controls=[
                _build_column(label, tickets, user_names, on_add_ticket)
                for label, tickets in board.items()
            ],
            spacing=20,
            scroll=ft.ScrollMode.AUTO,
            vertical_alignment=ft.CrossAxisAlignment.START,
            expand=True,
        )
    else:
        body = _build_empty_board(state.load_error or "No tickets yet")

    controls = []
    if state.show_display_menu:
        controls.append(build_display_panel(view_state, on_group_change, on_sort_change))
    controls.append(body)

    return ft.View(
        route="/",
        appbar=build_appbar(on_toggle_display),
        bgcolor=COLOR_BG,
        padding=ft.Padding.all(24),
        controls=[ft.Column(controls=controls, spacing=16, expand=True)],
        floating_action_button=ft.FloatingActionButton(
            icon=ft.Icons.ADD,
            bgcolor=COLOR_PRIMARY,
            on_click=lambda _: on_add_ticket(),
        ),
    )
