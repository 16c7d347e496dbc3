import json

import pytest

from kanban.domain.view_keys import GroupKey, SortKey
from kanban.services.view_state import ViewState
from kanban.storage.preferences import JsonPreferenceStore


def test_defaults_when_nothing_stored(prefs):
    view_state = ViewState(prefs)
    view_state.load()

    assert view_state.group_by is GroupKey.STATUS
    assert view_state.sort_by is SortKey.PRIORITY


def test_set_group_by_survives_restart(prefs_path):
    ViewState(JsonPreferenceStore(prefs_path)).set_group_by("user")

    restarted = ViewState(JsonPreferenceStore(prefs_path))
    restarted.load()

    assert restarted.group_by is GroupKey.USER


def test_set_sort_by_survives_restart(prefs_path):
    ViewState(JsonPreferenceStore(prefs_path)).set_sort_by(SortKey.TITLE)

    restarted = ViewState(JsonPreferenceStore(prefs_path))
    restarted.load()

    assert restarted.sort_by is SortKey.TITLE
    assert restarted.group_by is GroupKey.STATUS


def test_setters_write_fixed_keys(prefs, prefs_path):
    view_state = ViewState(prefs)
    view_state.set_group_by(GroupKey.PRIORITY)
    view_state.set_sort_by(SortKey.TITLE)

    with open(prefs_path, encoding="utf-8") as f:
        assert json.load(f) == {"groupBy": "priority", "sortBy": "title"}


def test_unrecognized_values_fall_back_to_defaults(prefs):
    prefs.set("groupBy", "assignee")
    prefs.set("sortBy", "created")

    view_state = ViewState(prefs)
    view_state.load()

    assert view_state.group_by is GroupKey.STATUS
    assert view_state.sort_by is SortKey.PRIORITY


def test_invalid_key_is_not_persisted(prefs):
    view_state = ViewState(prefs)

    with pytest.raises(ValueError):
        view_state.set_group_by("assignee")

    assert view_state.group_by is GroupKey.STATUS
    assert prefs.get("groupBy") is None


def test_failed_write_keeps_current_selection(broken_prefs):
    view_state = ViewState(broken_prefs)
    view_state.load()

    with pytest.raises(OSError):
        view_state.set_group_by("user")
    with pytest.raises(OSError):
        view_state.set_sort_by("title")

    assert view_state.group_by is GroupKey.STATUS
    assert view_state.sort_by is SortKey.PRIORITY
