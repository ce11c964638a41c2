"""
World Hub state machine types.

Defines the supported domains, the views that can sit on the drawer stack,
the hub state itself and the set of actions understood by the reducer.

Views and actions are small frozen dataclasses carrying a class-level
``type`` tag, so they compare by value and can be matched on ``type`` the
same way the UI layer matches on the serialized ``{"type": ...}`` dicts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional, Tuple, Union


class Domain(str, Enum):
    """Functional domains tracked by the hub."""
    SLEEP = "sleep"
    MEDITATION = "meditation"
    EXERCISE = "exercise"


def coerce_domain(value: Any) -> Optional[Domain]:
    """Convert a domain string to :class:`Domain`. Falsy values become ``None``.

    Raises:
        ValueError: if the value is not a known domain
    """
    if not value:
        return None
    return Domain(value)


# ---------------------------------------------------------------------------
# Drawer views
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OverviewView:
    """Root view of the drawer. Always the first stack entry."""
    type: ClassVar[str] = "overview"

    def to_dict(self) -> dict:
        return {"type": self.type}


@dataclass(frozen=True)
class BadgesView:
    type: ClassVar[str] = "badges"

    def to_dict(self) -> dict:
        return {"type": self.type}


@dataclass(frozen=True)
class QuickLogView:
    """Quick log form, optionally preset on a domain.

    The serialized form has no ``domain`` key at all when no domain is set.
    """
    domain: Optional[Domain] = None
    type: ClassVar[str] = "quickLog"

    def __post_init__(self):
        object.__setattr__(self, "domain", coerce_domain(self.domain))

    def to_dict(self) -> dict:
        data = {"type": self.type}
        if self.domain is not None:
            data["domain"] = self.domain.value
        return data


@dataclass(frozen=True)
class StartSessionView:
    """Guided session launcher. Sleep sessions cannot be started."""
    domain: Optional[Domain] = None
    type: ClassVar[str] = "startSession"

    def __post_init__(self):
        domain = coerce_domain(self.domain)
        if domain is Domain.SLEEP:
            raise ValueError("A session cannot be started for the sleep domain")
        object.__setattr__(self, "domain", domain)

    def to_dict(self) -> dict:
        data = {"type": self.type}
        if self.domain is not None:
            data["domain"] = self.domain.value
        return data


@dataclass(frozen=True)
class ProgramsView:
    """Programs catalogue. Only exercise programs exist."""
    domain: Optional[Domain] = None
    type: ClassVar[str] = "programs"

    def __post_init__(self):
        domain = coerce_domain(self.domain)
        if domain is not None and domain is not Domain.EXERCISE:
            raise ValueError(f"Programs are only available for exercise, got {domain.value!r}")
        object.__setattr__(self, "domain", domain)

    def to_dict(self) -> dict:
        data = {"type": self.type}
        if self.domain is not None:
            data["domain"] = self.domain.value
        return data


@dataclass(frozen=True)
class DomainDetailView:
    domain: Domain
    type: ClassVar[str] = "domainDetail"

    def __post_init__(self):
        domain = coerce_domain(self.domain)
        if domain is None:
            raise ValueError("Domain detail view requires a domain")
        object.__setattr__(self, "domain", domain)

    def to_dict(self) -> dict:
        return {"type": self.type, "domain": self.domain.value}


DrawerView = Union[
    OverviewView,
    BadgesView,
    QuickLogView,
    StartSessionView,
    ProgramsView,
    DomainDetailView,
]


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WorldState:
    """
    Global state of the World Hub.

    Attributes:
        is_panel_open: Whether the drawer overlay is visible
        drawer_stack: Navigation history inside the drawer, oldest first.
            Never empty; the first entry is the overview.
    """
    is_panel_open: bool = False
    drawer_stack: Tuple[DrawerView, ...] = field(default_factory=lambda: (OverviewView(),))

    def __post_init__(self):
        stack = tuple(self.drawer_stack)
        if not stack:
            raise ValueError("drawer_stack must contain at least one view")
        if not isinstance(stack[0], OverviewView):
            raise ValueError("drawer_stack must start with the overview view")
        object.__setattr__(self, "drawer_stack", stack)

    def to_dict(self) -> dict:
        return {
            "isPanelOpen": self.is_panel_open,
            "drawerStack": [view.to_dict() for view in self.drawer_stack],
        }


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

class ActionType(str, Enum):
    """Tags of the actions recognized by the reducer."""
    OPEN_PANEL = "OPEN_PANEL"
    CLOSE_PANEL = "CLOSE_PANEL"
    OPEN_OVERVIEW = "OPEN_OVERVIEW"
    OPEN_BADGES = "OPEN_BADGES"
    OPEN_DOMAIN_DETAIL = "OPEN_DOMAIN_DETAIL"
    OPEN_QUICKLOG = "OPEN_QUICKLOG"
    OPEN_STARTSESSION = "OPEN_STARTSESSION"
    OPEN_PROGRAMS = "OPEN_PROGRAMS"
    GO_BACK = "GO_BACK"


@dataclass(frozen=True)
class OpenPanel:
    type: ClassVar[ActionType] = ActionType.OPEN_PANEL

    def to_dict(self) -> dict:
        return {"type": self.type.value}


@dataclass(frozen=True)
class ClosePanel:
    type: ClassVar[ActionType] = ActionType.CLOSE_PANEL

    def to_dict(self) -> dict:
        return {"type": self.type.value}


@dataclass(frozen=True)
class OpenOverview:
    type: ClassVar[ActionType] = ActionType.OPEN_OVERVIEW

    def to_dict(self) -> dict:
        return {"type": self.type.value}


@dataclass(frozen=True)
class OpenBadges:
    type: ClassVar[ActionType] = ActionType.OPEN_BADGES

    def to_dict(self) -> dict:
        return {"type": self.type.value}


@dataclass(frozen=True)
class OpenDomainDetail:
    domain: Domain
    type: ClassVar[ActionType] = ActionType.OPEN_DOMAIN_DETAIL

    def __post_init__(self):
        domain = coerce_domain(self.domain)
        if domain is None:
            raise ValueError("OPEN_DOMAIN_DETAIL requires a domain")
        object.__setattr__(self, "domain", domain)

    def to_dict(self) -> dict:
        return {"type": self.type.value, "domain": self.domain.value}


@dataclass(frozen=True)
class OpenQuickLog:
    """Open the quick log. The payload always carries ``domain``, even when None."""
    domain: Optional[Domain] = None
    type: ClassVar[ActionType] = ActionType.OPEN_QUICKLOG

    def __post_init__(self):
        object.__setattr__(self, "domain", coerce_domain(self.domain))

    def to_dict(self) -> dict:
        return {"type": self.type.value, "domain": self.domain.value if self.domain else None}


@dataclass(frozen=True)
class OpenStartSession:
    domain: Optional[Domain] = None
    type: ClassVar[ActionType] = ActionType.OPEN_STARTSESSION

    def __post_init__(self):
        domain = coerce_domain(self.domain)
        if domain is Domain.SLEEP:
            raise ValueError("A session cannot be started for the sleep domain")
        object.__setattr__(self, "domain", domain)

    def to_dict(self) -> dict:
        return {"type": self.type.value, "domain": self.domain.value if self.domain else None}


@dataclass(frozen=True)
class OpenPrograms:
    domain: Optional[Domain] = None
    type: ClassVar[ActionType] = ActionType.OPEN_PROGRAMS

    def __post_init__(self):
        domain = coerce_domain(self.domain)
        if domain is not None and domain is not Domain.EXERCISE:
            raise ValueError(f"Programs are only available for exercise, got {domain.value!r}")
        object.__setattr__(self, "domain", domain)

    def to_dict(self) -> dict:
        data = {"type": self.type.value}
        if self.domain is not None:
            data["domain"] = self.domain.value
        return data


@dataclass(frozen=True)
class GoBack:
    type: ClassVar[ActionType] = ActionType.GO_BACK

    def to_dict(self) -> dict:
        return {"type": self.type.value}


WorldAction = Union[
    OpenPanel,
    ClosePanel,
    OpenOverview,
    OpenBadges,
    OpenDomainDetail,
    OpenQuickLog,
    OpenStartSession,
    OpenPrograms,
    GoBack,
]

_ACTION_CLASSES = {
    cls.type: cls
    for cls in (
        OpenPanel,
        ClosePanel,
        OpenOverview,
        OpenBadges,
        OpenDomainDetail,
        OpenQuickLog,
        OpenStartSession,
        OpenPrograms,
        GoBack,
    )
}


def action_from_dict(data: dict) -> WorldAction:
    """
    Build an action from its serialized ``{"type": ..., "domain": ...}`` form.

    Args:
        data: Dictionary with a ``type`` key and an optional ``domain``

    Returns:
        The matching action instance

    Raises:
        ValueError: if the type is unknown or the domain is invalid for it
    """
    action_type = ActionType(data.get("type"))
    cls = _ACTION_CLASSES[action_type]
    if "domain" in cls.__dataclass_fields__:
        return cls(domain=data.get("domain"))
    return cls()
