"""
state.py - UI state container
"""


class AppState:
    def __init__(self):
        self.show_display_menu: bool = False
        self.load_error: str | None = None
