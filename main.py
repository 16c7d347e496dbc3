import locale
import logging
import sys

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

if __name__ == "__main__":
    # Title ordering collates with the user's locale
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logging.warning("Unsupported locale; title ordering uses the C locale")

    import flet as ft
    from kanban.app_main import main

    try:
        ft.app(target=main)
    except Exception:
        logging.exception("Unhandled exception running Flet app")
        sys.exit(1)
