"""
Unit tests for the World Hub action creators
"""
from unittest.mock import Mock

import pytest

from worldhub.hub import (
    ActionType,
    Domain,
    OpenPrograms,
    OpenQuickLog,
    action_from_dict,
    create_initial_world_state,
    create_world_hub_actions,
    world_reducer,
)


def last_dispatched(dispatch: Mock) -> dict:
    """Serialized form of the last dispatched action."""
    return dispatch.call_args[0][0].to_dict()


@pytest.mark.unit
class TestCreateWorldHubActions:
    """Test that each action creator dispatches exactly one action."""

    @pytest.mark.parametrize("name,expected", [
        ("open_overview_action", {"type": "OPEN_OVERVIEW"}),
        ("open_badges_action", {"type": "OPEN_BADGES"}),
        ("open_programs_action", {"type": "OPEN_PROGRAMS"}),
        ("go_back_action", {"type": "GO_BACK"}),
        ("close_panel_action", {"type": "CLOSE_PANEL"}),
        ("open_panel_action", {"type": "OPEN_PANEL"}),
    ])
    def test_actions_without_payload(self, name, expected):
        dispatch = Mock()
        actions = create_world_hub_actions(dispatch)

        getattr(actions, name)()

        dispatch.assert_called_once()
        assert last_dispatched(dispatch) == expected

    def test_open_domain_detail(self):
        dispatch = Mock()
        actions = create_world_hub_actions(dispatch)

        actions.open_domain_detail_action(Domain.EXERCISE)

        dispatch.assert_called_once()
        assert last_dispatched(dispatch) == {"type": "OPEN_DOMAIN_DETAIL", "domain": "exercise"}

    def test_open_quick_log_without_domain_carries_none(self):
        dispatch = Mock()
        actions = create_world_hub_actions(dispatch)

        actions.open_quick_log_action()

        dispatch.assert_called_once()
        assert last_dispatched(dispatch) == {"type": "OPEN_QUICKLOG", "domain": None}
        assert dispatch.call_args[0][0] == OpenQuickLog(None)

    def test_open_quick_log_with_domain(self):
        dispatch = Mock()
        actions = create_world_hub_actions(dispatch)

        actions.open_quick_log_action(Domain.SLEEP)

        assert last_dispatched(dispatch) == {"type": "OPEN_QUICKLOG", "domain": "sleep"}

    def test_open_start_session_without_domain_carries_none(self):
        dispatch = Mock()
        actions = create_world_hub_actions(dispatch)

        actions.open_start_session_action()

        assert last_dispatched(dispatch) == {"type": "OPEN_STARTSESSION", "domain": None}

    def test_open_start_session_with_domain(self):
        dispatch = Mock()
        actions = create_world_hub_actions(dispatch)

        actions.open_start_session_action(Domain.MEDITATION)

        assert last_dispatched(dispatch) == {"type": "OPEN_STARTSESSION", "domain": "meditation"}

    def test_open_start_session_rejects_sleep(self):
        dispatch = Mock()
        actions = create_world_hub_actions(dispatch)

        with pytest.raises(ValueError):
            actions.open_start_session_action(Domain.SLEEP)

        dispatch.assert_not_called()

    def test_open_programs_dispatches_without_domain(self):
        dispatch = Mock()
        actions = create_world_hub_actions(dispatch)

        actions.open_programs_action()

        assert dispatch.call_args[0][0] == OpenPrograms()
        assert "domain" not in last_dispatched(dispatch)


@pytest.mark.unit
class TestActionTypes:
    """Test action construction and deserialization."""

    def test_programs_only_accept_exercise(self):
        with pytest.raises(ValueError):
            OpenPrograms(Domain.MEDITATION)

    def test_unknown_domain_rejected(self):
        with pytest.raises(ValueError):
            OpenQuickLog("yoga")

    def test_domain_strings_coerced(self):
        assert OpenQuickLog("sleep").domain is Domain.SLEEP

    @pytest.mark.parametrize("data", [
        {"type": "OPEN_PANEL"},
        {"type": "OPEN_DOMAIN_DETAIL", "domain": "sleep"},
        {"type": "OPEN_QUICKLOG", "domain": None},
        {"type": "OPEN_STARTSESSION", "domain": "exercise"},
        {"type": "GO_BACK"},
    ])
    def test_action_from_dict(self, data):
        action = action_from_dict(data)

        assert action.type == ActionType(data["type"])
        assert action.to_dict() == data

    def test_action_from_dict_empty_domain(self):
        action = action_from_dict({"type": "OPEN_QUICKLOG", "domain": ""})
        state = world_reducer(create_initial_world_state(), action)

        assert action.to_dict() == {"type": "OPEN_QUICKLOG", "domain": None}
        assert state.drawer_stack[-1].to_dict() == {"type": "quickLog"}

    def test_empty_domain_detail_rejected(self):
        with pytest.raises(ValueError):
            action_from_dict({"type": "OPEN_DOMAIN_DETAIL", "domain": ""})

    def test_action_from_dict_unknown_type(self):
        with pytest.raises(ValueError):
            action_from_dict({"type": "TELEPORT"})
