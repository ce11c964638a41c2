"""
Action creators for the World Hub reducer.

Centralizes the dispatch wrappers so the hub owner stays focused on wiring.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .types import (
    ClosePanel,
    Domain,
    GoBack,
    OpenBadges,
    OpenDomainDetail,
    OpenOverview,
    OpenPanel,
    OpenPrograms,
    OpenQuickLog,
    OpenStartSession,
    WorldAction,
)

WorldDispatch = Callable[[WorldAction], None]


@dataclass(frozen=True)
class WorldHubActions:
    """Collection of dispatch-wrapped actions exposed by the World Hub."""
    open_overview_action: Callable[[], None]
    open_badges_action: Callable[[], None]
    open_domain_detail_action: Callable[[Domain], None]
    open_quick_log_action: Callable[..., None]
    open_start_session_action: Callable[..., None]
    open_programs_action: Callable[[], None]
    go_back_action: Callable[[], None]
    close_panel_action: Callable[[], None]
    open_panel_action: Callable[[], None]


def create_world_hub_actions(dispatch: WorldDispatch) -> WorldHubActions:
    """
    Build the set of dispatch-wrapped actions for the World Hub.

    Args:
        dispatch: Function applying an action to the hub state

    Returns:
        WorldHubActions whose members each dispatch exactly one action
    """

    def open_overview_action():
        dispatch(OpenOverview())

    def open_badges_action():
        dispatch(OpenBadges())

    def open_domain_detail_action(domain: Domain):
        dispatch(OpenDomainDetail(domain))

    def open_quick_log_action(domain: Optional[Domain] = None):
        dispatch(OpenQuickLog(domain))

    def open_start_session_action(domain: Optional[Domain] = None):
        dispatch(OpenStartSession(domain))

    def open_programs_action():
        # The reducer falls back to the exercise domain
        dispatch(OpenPrograms())

    def go_back_action():
        dispatch(GoBack())

    def close_panel_action():
        dispatch(ClosePanel())

    def open_panel_action():
        dispatch(OpenPanel())

    return WorldHubActions(
        open_overview_action=open_overview_action,
        open_badges_action=open_badges_action,
        open_domain_detail_action=open_domain_detail_action,
        open_quick_log_action=open_quick_log_action,
        open_start_session_action=open_start_session_action,
        open_programs_action=open_programs_action,
        go_back_action=go_back_action,
        close_panel_action=close_panel_action,
        open_panel_action=open_panel_action,
    )
