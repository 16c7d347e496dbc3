"""
app_main.py - Ticket Board main application
Ticket Board v0.1
"""

import logging

import flet as ft

from kanban.config import APP_TITLE, COLOR_BG, COLOR_DANGER, COLOR_PRIMARY
from kanban.domain.view_keys import GroupKey, SortKey
from kanban.services.board_service import build_board, load_store
from kanban.services.ticket_store import TicketStore
from kanban.services.view_state import ViewState
from kanban.storage.preferences import JsonPreferenceStore
from kanban.ui import actions, views
from kanban.ui.state import AppState

logger = logging.getLogger(__name__)


def main(page: ft.Page):
    page.title = APP_TITLE
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(
        color_scheme_seed=COLOR_PRIMARY,
        font_family="Roboto",
    )

    state = AppState()
    store = TicketStore()
    view_state = ViewState(JsonPreferenceStore())
    view_state.load()

    def toggle_display():
        state.show_display_menu = not state.show_display_menu
        refresh_board()

    def show_error(message: str):
        page.snack_bar = ft.SnackBar(ft.Text(message), bgcolor=COLOR_DANGER)
        page.snack_bar.open = True
        page.update()

    def change_group(key: GroupKey):
        try:
            view_state.set_group_by(key)
        except OSError as exc:
            logger.exception("Failed to save grouping preference")
            show_error(f"Could not save grouping: {exc}")
            return
        refresh_board()

    def change_sort(key: SortKey):
        try:
            view_state.set_sort_by(key)
        except OSError as exc:
            logger.exception("Failed to save ordering preference")
            show_error(f"Could not save ordering: {exc}")
            return
        refresh_board()

    def refresh_board():
        try:
            board = build_board(store, view_state)
            page.views.clear()
            page.views.append(
                views.build_board_view(
                    state=state,
                    view_state=view_state,
                    board=board,
                    users=store.users(),
                    on_toggle_display=toggle_display,
                    on_group_change=change_group,
                    on_sort_change=change_sort,
                    on_add_ticket=lambda: actions.show_new_ticket_dialog(
                        page, store, refresh_board
                    ),
                )
            )
            page.update()
        except Exception as exc:
            logger.exception("Error in refresh_board")
            page.overlay.append(
                ft.AlertDialog(
                    title=ft.Text("Something went wrong"),
                    content=ft.Text(f"Details: {exc}"),
                    open=True,
                )
            )
            page.update()

    def route_change(_e: ft.RouteChangeEvent):
        if page.route == "/":
            refresh_board()

    page.on_route_change = route_change

    state.load_error = load_store(store)
    refresh_board()

    if state.load_error:
        show_error(state.load_error)


# ==========================================================================
# Entry point
# ==========================================================================


if __name__ == "__main__":
    ft.app(main)
