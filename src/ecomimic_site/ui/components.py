"""Stateless building blocks for the landing page.

Each helper returns a Dash component tree; none of them owns state. The
stateful widgets (series tabs, FAQ accordion, console switches) render
through ``tab_trigger``, ``accordion_item`` and ``switch_control`` and get
their current value from the page-state store.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional

import dash_bootstrap_components as dbc
from dash import html

from ecomimic_site.core.content import FeatureItem, ModelCard, StatItem

BUTTON_VARIANTS = {"primary": "eco-btn--primary", "secondary": "eco-btn--secondary"}
BUTTON_SIZES = {"sm": "sm", "md": None, "lg": "lg"}
BADGE_VARIANTS = {"default": "eco-badge--default", "secondary": "eco-badge--secondary"}


def cn(*classes: Optional[str]) -> str:
    return " ".join(c for c in classes if c)


def section(children: Any, *, section_id: Optional[str] = None, class_name: str = "") -> html.Section:
    kwargs: dict[str, Any] = {}
    if section_id:
        kwargs["id"] = section_id
    return html.Section(children, className=cn("eco-section", class_name), **kwargs)


def section_heading(title: str, subtitle: str = "") -> list[Any]:
    out: list[Any] = [html.H2(title, className="eco-h2")]
    if subtitle:
        out.append(html.P(subtitle, className="eco-muted"))
    return out


def icon(glyph: str, class_name: str = "") -> html.Span:
    return html.Span(glyph, className=cn("eco-icon", class_name), **{"aria-hidden": "true"})


def card(children: Any, *, title: Any = None, class_name: str = "", body_class: str = "") -> dbc.Card:
    parts: list[Any] = []
    if title is not None:
        parts.append(dbc.CardHeader(html.H3(title, className="eco-card-title"), className="eco-card-header"))
    parts.append(dbc.CardBody(children, className=cn("eco-card-body", body_class)))
    return dbc.Card(parts, className=cn("eco-card eco-glass", class_name))


def button(
    label: Any,
    *,
    variant: str = "primary",
    size: str = "md",
    class_name: str = "",
    **kwargs: Any,
) -> dbc.Button:
    if variant not in BUTTON_VARIANTS:
        raise ValueError(f"Unknown button variant: {variant}")
    return dbc.Button(
        label,
        size=BUTTON_SIZES.get(size),
        className=cn("eco-btn", BUTTON_VARIANTS[variant], class_name),
        **kwargs,
    )


def badge(label: str, *, variant: str = "default", class_name: str = "") -> dbc.Badge:
    return dbc.Badge(label, pill=True, className=cn("eco-badge", BADGE_VARIANTS.get(variant, ""), class_name))


def text_input(input_id: str, placeholder: str = "", input_type: str = "text") -> dbc.Input:
    return dbc.Input(id=input_id, type=input_type, placeholder=placeholder, className="eco-input")


def label(text: str, html_for: Optional[str] = None) -> dbc.Label:
    if html_for:
        return dbc.Label(text, html_for=html_for, className="eco-label")
    return dbc.Label(text, className="eco-label")


def checkbox_tile(checkbox_id: Any, text: str) -> html.Div:
    return html.Div(
        dbc.Checkbox(id=checkbox_id, label=text, value=False, className="eco-checkbox"),
        className="eco-check-tile",
    )


def progress(value: int, class_name: str = "") -> dbc.Progress:
    return dbc.Progress(value=max(0, min(100, int(value or 0))), className=cn("eco-progress", class_name))


def separator(class_name: str = "") -> html.Hr:
    return html.Hr(className=cn("eco-separator", class_name))


def stat(item: StatItem) -> html.Div:
    children = [
        html.Div(item.value, className="eco-stat-value"),
        html.Div(item.label, className="eco-stat-label"),
    ]
    if item.sub:
        children.append(html.Div(item.sub, className="eco-stat-sub"))
    return html.Div(children, className="eco-stat")


def feature(item: FeatureItem) -> dbc.Card:
    header = html.Div(
        [html.Div(icon(item.icon), className="eco-feature-icon"), html.H3(item.title, className="eco-card-title")],
        className="eco-feature-header",
    )
    return dbc.Card(
        [dbc.CardHeader(header, className="eco-card-header"), dbc.CardBody(item.body, className="eco-card-body")],
        className="eco-card eco-glass eco-feature",
    )


def feature_grid(items: Iterable[FeatureItem], class_name: str = "eco-grid-3") -> html.Div:
    return html.Div([feature(item) for item in items], className=cn("eco-grid", class_name))


def model_card(model: ModelCard) -> dbc.Card:
    return card(
        [
            html.P(model.summary),
            html.Ul([html.Li(b) for b in model.bullets], className="eco-list"),
            button("了解更多", variant="secondary", class_name="eco-btn--block"),
        ],
        title=[icon(model.icon), " ", model.title],
        class_name="eco-model-card",
    )


def phone_frame(children: Any) -> html.Div:
    return html.Div(
        [
            html.Div(html.Div(children, className="eco-phone-screen"), className="eco-phone-inner"),
            html.Div(className="eco-phone-notch"),
        ],
        className="eco-phone",
    )


def tab_trigger(group: str, value: str, text: str, active: bool) -> html.Button:
    return html.Button(
        text,
        id={"type": f"{group}-tab", "value": value},
        n_clicks=0,
        role="tab",
        className=tab_trigger_class(active),
    )


def tab_trigger_class(active: bool) -> str:
    return cn("eco-tab", "is-active" if active else None)


def accordion_item(group: str, value: str, question: str, answer: str, is_open: bool) -> html.Div:
    return html.Div(
        [
            html.H3(
                html.Button(
                    [html.Span(question), html.Span("⌄", className="eco-chevron", **{"aria-hidden": "true"})],
                    id={"type": f"{group}-trigger", "value": value},
                    n_clicks=0,
                    className=accordion_trigger_class(is_open),
                ),
                className="eco-accordion-heading",
            ),
            html.Div(
                html.Div(answer, className="eco-accordion-body"),
                id={"type": f"{group}-content", "value": value},
                className=accordion_content_class(is_open),
            ),
        ],
        className="eco-accordion-item",
    )


def accordion_trigger_class(is_open: bool) -> str:
    return cn("eco-accordion-trigger", "is-open" if is_open else None)


def accordion_content_class(is_open: bool) -> str:
    return cn("eco-accordion-content", "is-open" if is_open else None)


def switch_control(group: str, name: str, checked: bool) -> html.Button:
    """Visual for a controlled switch; clicks are turned into owner updates by a callback."""
    return html.Button(
        html.Span(className="eco-switch-thumb"),
        id={"type": f"{group}-switch", "name": name},
        n_clicks=0,
        type="button",
        role="switch",
        className=switch_class(checked),
    )


def switch_class(checked: bool) -> str:
    return cn("eco-switch", "is-on" if checked else None)


def error_card(title: str, exc: Exception) -> html.Div:
    return html.Div(
        className="eco-error-card",
        children=[
            html.Div([html.H3(title, className="eco-card-title"), badge("Error", variant="secondary")], className="eco-card-header"),
            html.P(f"{type(exc).__name__}: {exc}", className="eco-muted"),
            html.P("This section failed to render; the rest of the page is still available.", className="eco-muted"),
        ],
    )
