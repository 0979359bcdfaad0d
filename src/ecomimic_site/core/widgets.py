from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Hashable, Iterable, Optional

ChangeCallback = Callable[[Optional[Hashable]], None]


@dataclass
class SelectableGroup:
    """Single-selection state shared by the triggers and panels of one tab/accordion group.

    ``select`` is the only transition. A collapsible group clears its selection
    when the active item is selected again; a non-collapsible group always
    makes the selected item active. Identifiers are not checked against the
    registered items: an unknown id simply becomes active and no panel matches.
    """

    default: Optional[Hashable] = None
    collapsible: bool = False
    items: tuple[Hashable, ...] = ()
    active: Optional[Hashable] = field(default=None, init=False)
    _listeners: list[ChangeCallback] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.items = tuple(self.items)
        self.active = self.default

    def subscribe(self, callback: ChangeCallback) -> None:
        self._listeners.append(callback)

    def select(self, item_id: Hashable) -> Optional[Hashable]:
        previous = self.active
        if self.collapsible and item_id == previous:
            self.active = None
        else:
            self.active = item_id
        if self.active != previous:
            for callback in list(self._listeners):
                callback(self.active)
        return self.active

    def is_active(self, item_id: Hashable) -> bool:
        return item_id == self.active


def tab_group(items: Iterable[Hashable], default: Optional[Hashable] = None) -> SelectableGroup:
    return SelectableGroup(default=default, collapsible=False, items=tuple(items))


def accordion_group(
    items: Iterable[Hashable],
    default: Optional[Hashable] = None,
    *,
    collapsible: bool = True,
) -> SelectableGroup:
    return SelectableGroup(default=default, collapsible=collapsible, items=tuple(items))


@dataclass(frozen=True)
class ToggleSwitch:
    """Controlled two-state switch.

    The owner supplies the current value and the change handler; activation
    only reports the negated value back.
    """

    checked: bool
    on_change: Callable[[bool], None]

    def activate(self) -> None:
        self.on_change(not self.checked)


class ToggleBank:
    """Owner of the authoritative boolean for each named switch."""

    def __init__(self, defaults: dict[str, bool]):
        self._defaults = {str(k): bool(v) for k, v in defaults.items()}
        self._values = dict(self._defaults)

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def value(self, name: str) -> bool:
        return self._values[name]

    def values(self) -> dict[str, bool]:
        return dict(self._values)

    def apply(self, name: str, value: bool) -> None:
        if name not in self._values:
            return
        self._values[name] = bool(value)

    def switch(self, name: str) -> ToggleSwitch:
        return ToggleSwitch(
            checked=self._values[name],
            on_change=lambda new_value: self.apply(name, new_value),
        )

    def restore(self, values: dict[str, object]) -> None:
        """Load stored values; unknown names are ignored and missing ones keep their default."""
        self._values = dict(self._defaults)
        for name, value in (values or {}).items():
            if name in self._values and isinstance(value, bool):
                self._values[name] = value
