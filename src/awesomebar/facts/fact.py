"""Fact entity describing a user interaction with a component."""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class Component(str, Enum):
    """Components that emit facts."""
    BROWSER_TOOLBAR = "browser_toolbar"
    FEATURE_AWESOMEBAR = "feature_awesomebar"
    FEATURE_SESSION = "feature_session"


class Action(str, Enum):
    """Kinds of user action a fact records."""
    CLICK = "click"
    COMMIT = "commit"
    CANCEL = "cancel"
    DISPLAY = "display"
    INTERACTION = "interaction"


class Fact(BaseModel):
    """A structured, component-tagged interaction record.

    Attributes:
        component: The component that emitted the fact
        action: The kind of action
        item: Component-defined identifier of what was acted on
        value: Optional value attached to the action
        metadata: Optional free-form context
    """

    component: Component
    action: Action
    item: str
    value: str | None = None
    metadata: dict[str, Any] | None = None

    model_config = {
        "frozen": True,
    }

    def __hash__(self) -> int:
        # metadata may hold unhashable values; equal facts still hash equal
        return hash((self.component, self.action, self.item, self.value))
