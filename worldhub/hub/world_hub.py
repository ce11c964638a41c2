"""
World Hub owner - holds the canonical hub state and its dispatch channel.
Exposes the derived view information and the navigation actions to the UI.
"""

from typing import Callable, List, Optional

from ..logger import setup_logger
from .actions import create_world_hub_actions
from .reducer import create_initial_world_state, world_reducer
from .selectors import select_can_go_back, select_current_view
from .types import Domain, DrawerView, WorldAction, WorldState

logger = setup_logger(__name__)

Listener = Callable[[WorldState], None]


class WorldHub:
    """
    Single owner of the World Hub state.

    The UI reads ``state``, ``current_view`` and ``can_go_back`` and calls
    the navigation methods. Subscribers are notified after each dispatch
    that produced a new state object.
    """

    def __init__(self, initial_state: Optional[WorldState] = None):
        self._state = initial_state or create_initial_world_state()
        self._listeners: List[Listener] = []
        self._refresh_key = 0
        self._actions = create_world_hub_actions(self.dispatch)

    @property
    def state(self) -> WorldState:
        return self._state

    @property
    def current_view(self) -> DrawerView:
        return select_current_view(self._state)

    @property
    def can_go_back(self) -> bool:
        return select_can_go_back(self._state)

    @property
    def refresh_key(self) -> int:
        """Counter consumers watch to know when to re-fetch their data."""
        return self._refresh_key

    def bump_refresh_key(self) -> None:
        self._refresh_key += 1
        logger.debug(f"World hub refresh key bumped to {self._refresh_key}")

    def dispatch(self, action: WorldAction) -> WorldState:
        """
        Apply an action and publish the resulting state.

        Args:
            action: Action to apply

        Returns:
            The state after the action
        """
        previous = self._state
        self._state = world_reducer(previous, action)

        if self._state is not previous:
            for listener in list(self._listeners):
                listener(self._state)

        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with each new state.

        Returns:
            Function removing the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Navigation API

    def open_overview(self) -> None:
        self._actions.open_overview_action()

    def open_badges(self) -> None:
        self._actions.open_badges_action()

    def open_domain(self, domain: Domain) -> None:
        """Alias of :meth:`open_domain_detail` kept for older call sites."""
        self.open_domain_detail(domain)

    def open_domain_detail(self, domain: Domain) -> None:
        self._actions.open_domain_detail_action(domain)

    def open_quick_log(self, domain: Optional[Domain] = None) -> None:
        self._actions.open_quick_log_action(domain)

    def open_start_session(self, domain: Optional[Domain] = None) -> None:
        self._actions.open_start_session_action(domain)

    def open_programs(self) -> None:
        self._actions.open_programs_action()

    def go_back(self) -> None:
        self._actions.go_back_action()

    def close_panel(self) -> None:
        self._actions.close_panel_action()

    def open_panel(self) -> None:
        self._actions.open_panel_action()


# Global singleton instance
_world_hub = WorldHub()


def get_world_hub() -> WorldHub:
    """
    Get the global WorldHub instance.

    Returns:
        WorldHub singleton
    """
    return _world_hub
