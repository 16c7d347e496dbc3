import flet as ft
from kanban.config import (
    COLOR_CARD,
    COLOR_BORDER,
    COLOR_TEXT_MUTED,
    COLOR_TEXT_MAIN,
    COLOR_PRIMARY,
    BORDER_RADIUS_CARD,
    UNKNOWN_USER_LABEL,
)
from kanban.domain.models import Ticket
from kanban.ui.helpers import initials, priority_color, priority_icon


class TicketCard(ft.Container):
    def __init__(self, ticket: Ticket, user_names: dict[str, str]):
        super().__init__()
        self.ticket = ticket
        self.user_names = user_names

        self.padding = ft.Padding.all(12)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.border.all(1, COLOR_BORDER)
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 1),
        )
        self.margin = ft.margin.only(bottom=10)

        self.content = self._build_content()

    def _build_content(self):
        ticket = self.ticket
        owner = self.user_names.get(ticket.user_id, UNKNOWN_USER_LABEL)

        header = ft.Row(
            controls=[
                ft.Text(ticket.id, size=12, color=COLOR_TEXT_MUTED),
                ft.Container(expand=True),
                ft.Container(
                    content=ft.Text(
                        initials(owner), size=10, color="white", weight=ft.FontWeight.BOLD
                    ),
                    bgcolor=COLOR_PRIMARY,
                    width=22,
                    height=22,
                    border_radius=11,
                    alignment=ft.Alignment.CENTER,
                    tooltip=owner,
                ),
            ],
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

        tag_chips = [
            ft.Container(
                content=ft.Row(
                    controls=[
                        ft.Icon(ft.Icons.CIRCLE, size=8, color=COLOR_TEXT_MUTED),
                        ft.Text(tag, size=11, color=COLOR_TEXT_MUTED),
                    ],
                    spacing=4,
                    tight=True,
                ),
                border=ft.border.all(1, COLOR_BORDER),
                padding=ft.Padding.symmetric(horizontal=6, vertical=2),
                border_radius=4,
            )
            for tag in ticket.tag
        ]

        return ft.Column(
            controls=[
                header,
                ft.Text(
                    ticket.title,
                    weight=ft.FontWeight.W_600,
                    size=14,
                    color=COLOR_TEXT_MAIN,
                    max_lines=2,
                    overflow=ft.TextOverflow.ELLIPSIS,
                ),
                ft.Row(
                    controls=[
                        ft.Container(
                            content=ft.Icon(
                                priority_icon(ticket.priority),
                                size=14,
                                color=priority_color(ticket.priority),
                            ),
                            border=ft.border.all(1, COLOR_BORDER),
                            padding=ft.Padding.all(2),
                            border_radius=4,
                        ),
                        *tag_chips,
                    ],
                    spacing=6,
                    run_spacing=4,
                    wrap=True,
                ),
            ],
            spacing=6,
        )
