"""
Hub package - World Hub navigation state machine.
"""

from .types import (
    Domain,
    DrawerView,
    OverviewView,
    BadgesView,
    QuickLogView,
    StartSessionView,
    ProgramsView,
    DomainDetailView,
    WorldState,
    ActionType,
    WorldAction,
    OpenPanel,
    ClosePanel,
    OpenOverview,
    OpenBadges,
    OpenDomainDetail,
    OpenQuickLog,
    OpenStartSession,
    OpenPrograms,
    GoBack,
    action_from_dict,
)
from .reducer import create_initial_world_state, world_reducer
from .actions import WorldHubActions, create_world_hub_actions
from .selectors import select_current_view, select_can_go_back
from .world_hub import WorldHub, get_world_hub

__all__ = [
    # Types
    'Domain',
    'DrawerView',
    'OverviewView',
    'BadgesView',
    'QuickLogView',
    'StartSessionView',
    'ProgramsView',
    'DomainDetailView',
    'WorldState',
    'ActionType',
    'WorldAction',
    'OpenPanel',
    'ClosePanel',
    'OpenOverview',
    'OpenBadges',
    'OpenDomainDetail',
    'OpenQuickLog',
    'OpenStartSession',
    'OpenPrograms',
    'GoBack',
    'action_from_dict',
    # Reducer
    'create_initial_world_state',
    'world_reducer',
    # Actions
    'WorldHubActions',
    'create_world_hub_actions',
    # Selectors
    'select_current_view',
    'select_can_go_back',
    # Owner
    'WorldHub',
    'get_world_hub',
]
