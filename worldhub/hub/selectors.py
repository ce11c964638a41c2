"""Selectors for state derived from the World Hub reducer."""

from .types import DrawerView, WorldState


def select_current_view(state: WorldState) -> DrawerView:
    """Return the top-most drawer view."""
    return state.drawer_stack[-1]


def select_can_go_back(state: WorldState) -> bool:
    """Whether the drawer stack holds more than the root view."""
    return len(state.drawer_stack) > 1
