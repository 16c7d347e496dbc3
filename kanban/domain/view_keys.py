"""
view_keys.py - Grouping / ordering keys
Single responsibility: define the recognized view-state values and defaults.
"""
from enum import Enum


class GroupKey(str, Enum):
    STATUS = "status"
    USER = "user"
    PRIORITY = "priority"


class SortKey(str, Enum):
    PRIORITY = "priority"
    TITLE = "title"


DEFAULT_GROUP_KEY = GroupKey.STATUS
DEFAULT_SORT_KEY = SortKey.PRIORITY

# Display labels for the selectors
GROUP_KEY_LABELS: dict[GroupKey, str] = {
    GroupKey.STATUS: "Status",
    GroupKey.USER: "User",
    GroupKey.PRIORITY: "Priority",
}
SORT_KEY_LABELS: dict[SortKey, str] = {
    SortKey.PRIORITY: "Priority",
    SortKey.TITLE: "Title",
}
