"""
view_state.py - Persisted grouping / ordering selection
Single responsibility: hold the selected keys and write them through to the
preference store.
"""
import logging
from enum import Enum

from kanban.config import PREF_GROUP_BY, PREF_SORT_BY
from kanban.domain.view_keys import (
    DEFAULT_GROUP_KEY,
    DEFAULT_SORT_KEY,
    GroupKey,
    SortKey,
)
from kanban.storage.preferences import PreferenceStore

logger = logging.getLogger(__name__)


def _restore(store: PreferenceStore, pref_key: str, enum_cls: type[Enum], default):
    raw = store.get(pref_key)
    if raw is None:
        return default
    try:
        return enum_cls(raw)
    except ValueError:
        logger.warning(f"Ignoring unrecognized {pref_key} preference: {raw!r}")
        return default


class ViewState:
    def __init__(self, store: PreferenceStore):
        self.store = store
        self.group_by: GroupKey = DEFAULT_GROUP_KEY
        self.sort_by: SortKey = DEFAULT_SORT_KEY

    def load(self) -> None:
        """Restore both keys, falling back to defaults when absent or unknown."""
        self.group_by = _restore(self.store, PREF_GROUP_BY, GroupKey, DEFAULT_GROUP_KEY)
        self.sort_by = _restore(self.store, PREF_SORT_BY, SortKey, DEFAULT_SORT_KEY)

    def set_group_by(self, key: GroupKey | str) -> None:
        """Persist first; a failed write leaves the current selection in place."""
        group_by = GroupKey(key)
        self.store.set(PREF_GROUP_BY, group_by.value)
        self.group_by = group_by

    def set_sort_by(self, key: SortKey | str) -> None:
        sort_by = SortKey(key)
        self.store.set(PREF_SORT_BY, sort_by.value)
        self.sort_by = sort_by
