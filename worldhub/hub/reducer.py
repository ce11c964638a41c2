"""
World Hub reducer.

Pure transition function over :class:`WorldState`. Every "open X" action
rebuilds the drawer stack from the overview, so navigation is never more
than two levels deep.
"""

from dataclasses import replace

from ..config import DEFAULT_PROGRAMS_DOMAIN
from ..logger import setup_logger
from .types import (
    ActionType,
    BadgesView,
    DomainDetailView,
    OverviewView,
    ProgramsView,
    QuickLogView,
    StartSessionView,
    WorldAction,
    WorldState,
)

logger = setup_logger(__name__)


def create_initial_world_state() -> WorldState:
    """Closed panel showing the overview."""
    return WorldState(is_panel_open=False, drawer_stack=(OverviewView(),))


def world_reducer(state: WorldState, action: WorldAction) -> WorldState:
    """
    Apply an action to the hub state.

    Args:
        state: Current state (never mutated)
        action: Action to apply

    Returns:
        A new state, or ``state`` itself when the action is a no-op
        (GO_BACK on the root view, unknown action).
    """
    action_type = getattr(action, "type", None)

    if action_type == ActionType.OPEN_PANEL:
        return replace(state, is_panel_open=True)

    elif action_type == ActionType.CLOSE_PANEL:
        return replace(state, is_panel_open=False, drawer_stack=(OverviewView(),))

    elif action_type == ActionType.OPEN_OVERVIEW:
        return replace(state, is_panel_open=True, drawer_stack=(OverviewView(),))

    elif action_type == ActionType.OPEN_BADGES:
        return replace(state, is_panel_open=True, drawer_stack=(OverviewView(), BadgesView()))

    elif action_type == ActionType.OPEN_DOMAIN_DETAIL:
        return replace(
            state,
            is_panel_open=True,
            drawer_stack=(OverviewView(), DomainDetailView(action.domain)),
        )

    elif action_type == ActionType.OPEN_QUICKLOG:
        view = QuickLogView(action.domain) if action.domain else QuickLogView()
        return replace(state, is_panel_open=True, drawer_stack=(OverviewView(), view))

    elif action_type == ActionType.OPEN_STARTSESSION:
        view = StartSessionView(action.domain) if action.domain else StartSessionView()
        return replace(state, is_panel_open=True, drawer_stack=(OverviewView(), view))

    elif action_type == ActionType.OPEN_PROGRAMS:
        # Unlike quickLog/startSession, the domain is always filled in
        view = ProgramsView(action.domain or DEFAULT_PROGRAMS_DOMAIN)
        return replace(state, is_panel_open=True, drawer_stack=(OverviewView(), view))

    elif action_type == ActionType.GO_BACK:
        if len(state.drawer_stack) <= 1:
            return state
        return replace(state, drawer_stack=state.drawer_stack[:-1])

    logger.debug(f"Ignoring unknown world action: {action!r}")
    return state
