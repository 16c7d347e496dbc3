"""
config.py - Paths and app constants
Ticket Board v0.1
"""

import os

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

LOCAL_DIR = os.path.join(
    os.environ.get("LOCALAPPDATA") or os.path.expanduser("~"), ".kanban"
)
PREFS_PATH = os.environ.get("KANBAN_PREFS_PATH") or os.path.join(
    LOCAL_DIR, "preferences.json"
)

# ---------------------------------------------------------------------------
# Remote ticket source
# ---------------------------------------------------------------------------

API_URL = os.environ.get(
    "KANBAN_API_URL",
    "https://api.quicksell.co/v1/internal/frontend-assignment",
)
FETCH_TIMEOUT = float(os.environ.get("KANBAN_FETCH_TIMEOUT", "10"))

# ---------------------------------------------------------------------------
# Board constants
# ---------------------------------------------------------------------------

APP_TITLE = "Ticket Board"

TICKET_ID_PREFIX = "CAM-"
DEFAULT_TAG = "Feature Request"

PRIORITY_LABELS: dict[int, str] = {
    4: "Urgent",
    3: "High",
    2: "Medium",
    1: "Low",
    0: "No priority",
}
UNKNOWN_PRIORITY_LABEL = "Unknown Priority"
UNKNOWN_USER_LABEL = "Unknown User"

# Statuses offered by the add-ticket form; remote data may carry others
TICKET_STATUSES: list[str] = ["Todo", "In progress", "Backlog"]

# Preference keys
PREF_GROUP_BY = "groupBy"
PREF_SORT_BY = "sortBy"

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

COLOR_BG = "#F4F5F8"
COLOR_CARD = "#FFFFFF"
COLOR_BORDER = "#E0E3EA"
COLOR_TEXT_MUTED = "#8A8F98"
COLOR_TEXT_MAIN = "#1F2328"
COLOR_PRIMARY = "#5E6AD2"
COLOR_DANGER = "#CF222E"

COLOR_APPBAR_BG = "#FFFFFF"
COLOR_APPBAR_FG = "#1F2328"

PRIORITY_COLORS: dict[int, str] = {
    4: "#FC7840",  # Urgent
    3: "#F2BE00",  # High
    2: "#5E6AD2",  # Medium
    1: "#8A8F98",  # Low
    0: "#C4C8D0",  # No priority
}

# UI constants
BORDER_RADIUS_CARD = 8
BORDER_RADIUS_BTN = 6
SHADOW_ELEVATION = 2
COLUMN_WIDTH = 300
