from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ecomimic_site.core.content import CONSOLE_SWITCHES, DEFAULT_SERIES, FAQ_ITEMS, SERIES_TABS
from ecomimic_site.core.widgets import SelectableGroup, ToggleBank, accordion_group, tab_group

MODELS_GROUP = "models"
FAQ_GROUP = "faq"
TOGGLES_KEY = "toggles"


def _default_models() -> SelectableGroup:
    return tab_group([tab.value for tab in SERIES_TABS], default=DEFAULT_SERIES)


def _default_faq() -> SelectableGroup:
    return accordion_group([item.value for item in FAQ_ITEMS], default=None, collapsible=True)


def _default_toggles() -> ToggleBank:
    return ToggleBank({sw.name: sw.default for sw in CONSOLE_SWITCHES})


@dataclass
class PageState:
    """Widget state for one open page: series tabs, FAQ accordion and console switches."""

    models: SelectableGroup = field(default_factory=_default_models)
    faq: SelectableGroup = field(default_factory=_default_faq)
    toggles: ToggleBank = field(default_factory=_default_toggles)

    def to_payload(self) -> dict[str, Any]:
        return {
            MODELS_GROUP: self.models.active,
            FAQ_GROUP: self.faq.active,
            TOGGLES_KEY: self.toggles.values(),
        }

    @classmethod
    def from_payload(cls, payload: Optional[dict[str, Any]]) -> "PageState":
        state = cls()
        if not isinstance(payload, dict):
            return state
        for key, group in ((MODELS_GROUP, state.models), (FAQ_GROUP, state.faq)):
            if key not in payload:
                continue
            value = payload.get(key)
            if value is None or isinstance(value, str):
                group.active = value
        toggles = payload.get(TOGGLES_KEY)
        if isinstance(toggles, dict):
            state.toggles.restore(toggles)
        return state


def initial_payload() -> dict[str, Any]:
    return PageState().to_payload()


def select_series(state: PageState, series: str) -> None:
    state.models.select(series)


def toggle_faq(state: PageState, item_value: str) -> None:
    state.faq.select(item_value)


def activate_switch(state: PageState, name: str) -> None:
    if name not in state.toggles:
        return
    state.toggles.switch(name).activate()
