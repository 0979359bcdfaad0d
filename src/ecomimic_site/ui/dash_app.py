from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import ALL, Dash, Input, Output, State, ctx, dcc, html
from dash.exceptions import PreventUpdate
from flask import abort, request

from ecomimic_site.core import content
from ecomimic_site.core.config import SiteConfig
from ecomimic_site.core.state import (
    PageState,
    activate_switch,
    initial_payload,
    select_series,
    toggle_faq,
)
from ecomimic_site.core.telemetry import AXIS_COLOR, CONSOLE_READINGS, prepare_water_quality_plot
from ecomimic_site.core.widgets import ToggleSwitch
from ecomimic_site.plotting.helpers import tick_labels
from ecomimic_site.ui import components as ui
from ecomimic_site.utils.log import log_event, log_exception
from ecomimic_site.web.server import STATIC_URL_PATH, TOKEN_ROUTE, create_server

MODELS_TAB = "models-tab"
FAQ_TRIGGER = "faq-trigger"
FAQ_CONTENT = "faq-content"
CONSOLE_SWITCH = "console-switch"

# Dash internals, Dash assets, the document root and the JSON API.
SERVED_PREFIXES = ("/_dash-", "/_reload-hash", "/_favicon.ico", "/_alive_", "/assets/", f"{STATIC_URL_PATH}/", "/api/")

# Runs once per page load. Any failure leaves the token unset.
FETCH_TOKEN_JS = """
async function(pathname) {
    try {
        const resp = await fetch("%s", {headers: {"Accept": "application/json"}});
        if (!resp.ok) {
            return null;
        }
        const body = await resp.json();
        if (body && typeof body.token === "string" && body.token.length > 0) {
            return body.token;
        }
        return null;
    } catch (err) {
        return null;
    }
}
""" % TOKEN_ROUTE


def _dash_assets_dir() -> str:
    return str(Path(__file__).resolve().parents[1] / "assets" / "dash")


# ----------------------------- widget state transitions ----------------------------- #


def apply_page_event(payload: Optional[dict[str, Any]], trigger: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Apply one click on a tab, accordion trigger or switch to the stored page state."""
    state = PageState.from_payload(payload)
    if not isinstance(trigger, dict):
        return state.to_payload()
    state.models.subscribe(lambda series: log_event("series", f"selected {series}"))
    kind = trigger.get("type")
    if kind == MODELS_TAB:
        select_series(state, str(trigger.get("value")))
    elif kind == FAQ_TRIGGER:
        toggle_faq(state, str(trigger.get("value")))
    elif kind == CONSOLE_SWITCH:
        activate_switch(state, str(trigger.get("name")))
    return state.to_payload()


def widget_view(payload: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Class names and linked-panel children derived from the page state."""
    state = PageState.from_payload(payload)
    toggles = state.toggles.values()
    return {
        "tabs": [ui.tab_trigger_class(state.models.is_active(tab.value)) for tab in content.SERIES_TABS],
        "model_cards": _model_cards(state),
        "faq_triggers": [ui.accordion_trigger_class(state.faq.is_active(item.value)) for item in content.FAQ_ITEMS],
        "faq_contents": [ui.accordion_content_class(state.faq.is_active(item.value)) for item in content.FAQ_ITEMS],
        "switches": [ui.switch_class(toggles[sw.name]) for sw in content.CONSOLE_SWITCHES],
        "ar_view": ui.cn("eco-ar-view", None if toggles.get("ar") else "is-off"),
    }


def assistant_launcher_state(token: Any) -> tuple[bool, str]:
    """Return (disabled, title) for the header assistant button."""
    if isinstance(token, str) and token.strip():
        return False, "打开 AI 客服"
    return True, "AI 客服暂不可用：未获取到访问令牌"


def toggle_assistant(is_open: Any, token: Any) -> bool:
    disabled, _title = assistant_launcher_state(token)
    if disabled:
        return False
    result = {"open": bool(is_open)}
    ToggleSwitch(checked=bool(is_open), on_change=lambda value: result.update(open=value)).activate()
    return result["open"]


# ----------------------------- figure ----------------------------- #


def water_quality_figure() -> go.Figure:
    data = prepare_water_quality_plot()
    fig = go.Figure()
    for trace in data.traces:
        fig.add_scatter(
            x=list(trace.x),
            y=list(trace.y),
            mode="lines",
            name=trace.label,
            yaxis="y" if trace.axis == "left" else "y2",
            line=dict(color=trace.color, width=2, shape="spline"),
            hovertemplate=f"{trace.label}: %{{y}}<extra></extra>",
        )

    def axis_layout(spec, **extra):
        return dict(
            range=list(spec.domain),
            tickvals=list(spec.ticks),
            ticktext=tick_labels(spec.ticks),
            fixedrange=True,
            showgrid=False,
            zeroline=False,
            showline=False,
            ticks="",
            color=AXIS_COLOR,
            tickfont=dict(size=12),
            **extra,
        )

    fig.update_layout(
        template="plotly_dark",
        height=180,
        margin=dict(l=36, r=36, t=8, b=24),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        showlegend=False,
        hovermode="x unified",
        hoverlabel=dict(bgcolor="#1f2937", bordercolor="#4b5563"),
        xaxis=dict(type="category", fixedrange=True, showgrid=False, showline=False, ticks="", color=AXIS_COLOR),
        yaxis=axis_layout(data.left_axis, side="left"),
        yaxis2=axis_layout(data.right_axis, side="right", overlaying="y"),
    )
    return fig


# ----------------------------- layout ----------------------------- #


def _model_cards(state: PageState) -> list[Any]:
    return [ui.model_card(model) for model in content.model_cards_for_series(state.models.active)]


def _safe_section(title: str, builder: Callable[[PageState], Any], state: PageState) -> Any:
    try:
        return builder(state)
    except Exception as exc:
        log_exception(f"render section {title}")
        return ui.section(ui.error_card(title, exc))


def _header(_state: PageState) -> html.Header:
    return html.Header(
        className="eco-header",
        children=[
            html.Div(
                className="eco-header-row eco-container",
                children=[
                    html.Div(
                        className="eco-brand",
                        children=[
                            html.Div(ui.icon("🐟"), className="eco-brand-icon"),
                            html.Span(content.PRODUCT_NAME, className="eco-brand-title"),
                            ui.badge(content.PRODUCT_TAGLINE, variant="secondary", class_name="eco-hide-sm"),
                        ],
                    ),
                    html.Nav(
                        [html.A(link.label, href=f"#{link.anchor}", className="eco-nav-link") for link in content.NAV_LINKS],
                        className="eco-nav",
                    ),
                    html.Div(
                        className="eco-header-actions",
                        children=[
                            ui.button(
                                "AI 客服",
                                id="assistant-launcher",
                                variant="secondary",
                                disabled=True,
                                title=assistant_launcher_state(None)[1],
                                n_clicks=0,
                            ),
                            ui.button("预订演示", href="#contact", external_link=True),
                        ],
                    ),
                ],
            ),
            html.Div(
                id="assistant-panel",
                className="eco-assistant-panel",
                children=[
                    html.Div("AI 客服", className="eco-card-title"),
                    html.P("智能客服已就绪，可咨询产品款式、规格与演示预约。", className="eco-muted"),
                ],
            ),
            ui.separator(),
        ],
    )


def _hero(_state: PageState) -> html.Section:
    chart_card = ui.card(
        html.Div(
            className="eco-hero-card",
            children=[
                html.Div(
                    className="eco-hero-chart",
                    children=[
                        html.Div([ui.icon("◉"), " AR 第一视角"], className="eco-muted"),
                        html.Div(
                            className="eco-chart-frame",
                            children=[
                                dcc.Graph(
                                    id="water-quality-chart",
                                    figure=water_quality_figure(),
                                    config={"displayModeBar": False, "responsive": True},
                                ),
                                html.Div(prepare_water_quality_plot().caption, className="eco-chart-caption"),
                            ],
                        ),
                    ],
                ),
                html.Ul(
                    [html.Li([ui.icon(glyph), text]) for glyph, text in content.HERO_HIGHLIGHTS],
                    className="eco-hero-list",
                ),
            ],
        ),
        body_class="eco-flush",
    )
    return ui.section(
        html.Div(
            className="eco-grid eco-grid-2 eco-align-center",
            children=[
                html.Div(
                    [
                        html.H1(
                            [content.HERO_TITLE, html.Span(content.HERO_TITLE_ACCENT, className="eco-title-accent")],
                            className="eco-title",
                        ),
                        html.P(content.HERO_SUBTITLE, className="eco-subtitle"),
                        html.Div(
                            [
                                ui.button("立即体验", size="lg"),
                                ui.button("下载白皮书", variant="secondary", size="lg"),
                            ],
                            className="eco-actions",
                        ),
                        html.Div([ui.stat(item) for item in content.HERO_STATS], className="eco-grid eco-grid-3 eco-stats"),
                    ]
                ),
                html.Div(chart_card, className="eco-hero-visual"),
            ],
        ),
        class_name="eco-hero",
    )


def _features(_state: PageState) -> html.Section:
    return ui.section(
        ui.section_heading("核心功能矩阵", "将繁琐养护转化为沉浸互动与无人化运维。")
        + [ui.feature_grid(content.FEATURES)],
        section_id="features",
    )


def _models(state: PageState) -> html.Section:
    tabs = html.Div(
        [ui.tab_trigger("models", tab.value, tab.label, state.models.is_active(tab.value)) for tab in content.SERIES_TABS],
        role="tablist",
        className="eco-tabs eco-glass",
    )
    return ui.section(
        [
            html.Div([html.H2("产品系列与款式", className="eco-h2"), tabs], className="eco-section-head"),
            html.Div(_model_cards(state), id="model-cards", className="eco-grid eco-grid-3"),
        ],
        section_id="models",
    )


def _console(state: PageState) -> html.Section:
    toggles = state.toggles.values()
    switches = html.Div(
        [
            html.Div(
                [html.Div([ui.icon(sw.icon), " ", sw.label], className="eco-switch-label"), ui.switch_control("console", sw.name, toggles[sw.name])],
                className="eco-switch-row",
            )
            for sw in content.CONSOLE_SWITCHES
        ],
        className="eco-grid eco-grid-2",
    )
    readings = [
        html.Div(
            [
                html.Div([html.Span(r.label), html.Span(r.display, className="eco-muted")], className="eco-reading-head"),
                ui.progress(r.percent),
            ],
            className="eco-reading",
        )
        for r in CONSOLE_READINGS
    ]
    phone = ui.phone_frame(
        [
            html.Div(
                [html.Span("EcoMimic • Live", className="eco-muted"), ui.badge("在线", class_name="eco-badge--online")],
                className="eco-phone-bar",
            ),
            html.Div(
                html.Span("AR View", className="eco-ar-label"),
                id="phone-ar-view",
                className=ui.cn("eco-ar-view", None if toggles.get("ar") else "is-off"),
            ),
            html.Div([ui.button(a, variant="secondary", size="sm") for a in content.PHONE_ACTIONS], className="eco-grid eco-grid-3 eco-phone-bar"),
        ]
    )
    return ui.section(
        html.Div(
            className="eco-grid eco-grid-2",
            children=[
                html.Div(
                    ui.section_heading("实时控制台 · Demo", "模拟核心能力开关与水质监控。")
                    + [
                        ui.card([switches, ui.separator()] + readings),
                        html.Div([ui.button(a, variant="secondary") for a in content.CONSOLE_ACTIONS], className="eco-grid eco-grid-3 eco-actions"),
                    ]
                ),
                html.Div(phone, className="eco-phone-wrap"),
            ],
        ),
        section_id="console",
    )


def _architecture(_state: PageState) -> html.Section:
    return ui.section(
        ui.section_heading("分布式 AI 架构", content.ARCHITECTURE_SUMMARY) + [ui.feature_grid(content.ARCHITECTURE)],
    )


def _specs(_state: PageState) -> html.Section:
    table = dbc.Table(
        [
            html.Thead(html.Tr([html.Th(h) for h in content.SPEC_TABLE_HEADER])),
            html.Tbody(
                [
                    html.Tr(
                        [
                            html.Td(row.category, className="eco-strong"),
                            html.Td(row.param),
                            html.Td(row.desc, className="eco-muted"),
                        ]
                    )
                    for row in content.SPEC_ROWS
                ]
            ),
        ],
        className="eco-table",
        responsive=True,
    )
    return ui.section(ui.section_heading("关键规格") + [html.Div(table, className="eco-table-wrap")], section_id="specs")


def _timeline(_state: PageState) -> html.Section:
    cards = [
        ui.card([html.P(entry.body), ui.badge(entry.badge, variant="secondary")], title=entry.title)
        for entry in content.TIMELINE
    ]
    return ui.section(ui.section_heading("从 1.0 到 3.0 的进化") + [html.Div(cards, className="eco-grid eco-grid-3")])


def _contact(_state: PageState) -> html.Section:
    form = html.Form(
        className="eco-form",
        children=[
            html.Div([ui.label("联系人", "contact-name"), ui.text_input("contact-name", "您的姓名")]),
            html.Div([ui.label("邮箱", "contact-email"), ui.text_input("contact-email", "name@example.com", "email")]),
            html.Div(
                [
                    ui.label("应用场景"),
                    html.Div(
                        [ui.checkbox_tile({"type": "contact-scene", "index": i}, scene) for i, scene in enumerate(content.CONTACT_SCENES)],
                        className="eco-grid eco-grid-2",
                    ),
                ]
            ),
            html.Div([ui.label("备注", "contact-notes"), ui.text_input("contact-notes", "期望功能/交付时间/预算范围等")]),
            ui.button("提交", type="button", class_name="eco-btn--block"),
        ],
    )
    return ui.section(
        html.Div(
            className="eco-cta eco-glass eco-grid eco-grid-2 eco-align-center",
            children=[
                html.Div(
                    [
                        html.H3(content.CONTACT_TITLE, className="eco-h3"),
                        html.P(content.CONTACT_BLURB, className="eco-muted"),
                        html.Ul([html.Li([ui.icon(glyph), " ", text]) for glyph, text in content.CONTACT_PERKS], className="eco-perks"),
                    ]
                ),
                form,
            ],
        ),
        section_id="contact",
    )


def _faq(state: PageState) -> html.Section:
    return ui.section(
        ui.section_heading("常见问题")
        + [
            html.Div(
                [
                    ui.accordion_item("faq", item.value, item.question, item.answer, state.faq.is_active(item.value))
                    for item in content.FAQ_ITEMS
                ],
                className="eco-accordion",
            )
        ],
        section_id="faq",
    )


def _footer(_state: PageState) -> html.Footer:
    return html.Footer(
        html.Div(
            [
                html.Div([ui.icon("🐟"), f" © {datetime.now().year} {content.COMPANY_NAME}"], className="eco-footer-brand"),
                html.Div(content.FOOTER_NOTE, className="eco-footer-note"),
            ],
            className="eco-container eco-footer-row",
        ),
        className="eco-footer",
    )


PAGE_SECTIONS: tuple[tuple[str, Callable[[PageState], Any]], ...] = (
    ("Header", _header),
    ("Hero", _hero),
    ("Features", _features),
    ("Models", _models),
    ("Console", _console),
    ("Architecture", _architecture),
    ("Specs", _specs),
    ("Timeline", _timeline),
    ("Contact", _contact),
    ("FAQ", _faq),
    ("Footer", _footer),
)


def _root_layout() -> html.Div:
    state = PageState()
    return html.Div(
        id="app-shell",
        className="eco-app",
        children=[
            dcc.Location(id="url"),
            # Widget state lives only as long as the page is open.
            dcc.Store(id="page-state", storage_type="memory", data=initial_payload()),
            dcc.Store(id="token-store", storage_type="memory", data=None),
            dcc.Store(id="assistant-open", storage_type="memory", data=False),
            html.Main([_safe_section(title, builder, state) for title, builder in PAGE_SECTIONS]),
        ],
    )


# ----------------------------- app ----------------------------- #


def create_app(config: SiteConfig) -> Dash:
    server = create_server(config)
    app = Dash(
        __name__,
        server=server,
        assets_folder=_dash_assets_dir(),
        external_stylesheets=[dbc.themes.SUPERHERO],
        suppress_callback_exceptions=True,
        title=f"{content.PRODUCT_NAME} · {content.PRODUCT_TAGLINE}",
        update_title=None,
    )
    app.layout = _root_layout
    _register_callbacks(app)
    # Dash serves the page for any path; only "/" is a page here.
    server.before_request(_reject_unknown_paths)
    return app


def is_served_path(path: str) -> bool:
    if path == "/":
        return True
    return path.startswith(SERVED_PREFIXES)


def _reject_unknown_paths() -> None:
    if not is_served_path(request.path):
        abort(404)


def _register_callbacks(app: Dash) -> None:
    @app.callback(
        Output("page-state", "data"),
        Input({"type": MODELS_TAB, "value": ALL}, "n_clicks"),
        Input({"type": FAQ_TRIGGER, "value": ALL}, "n_clicks"),
        Input({"type": CONSOLE_SWITCH, "name": ALL}, "n_clicks"),
        State("page-state", "data"),
        prevent_initial_call=True,
    )
    def _on_widget_click(_tab_clicks, _faq_clicks, _switch_clicks, payload):
        trigger = ctx.triggered_id
        if trigger is None or not any(t.get("value") for t in ctx.triggered):
            raise PreventUpdate
        return apply_page_event(payload, dict(trigger))

    # One render callback per section, so a section that failed to build
    # (and so lacks its ids) does not stop the others from updating.
    @app.callback(
        Output({"type": MODELS_TAB, "value": ALL}, "className"),
        Output("model-cards", "children"),
        Input("page-state", "data"),
    )
    def _render_models(payload):
        view = widget_view(payload)
        return view["tabs"], view["model_cards"]

    @app.callback(
        Output({"type": FAQ_TRIGGER, "value": ALL}, "className"),
        Output({"type": FAQ_CONTENT, "value": ALL}, "className"),
        Input("page-state", "data"),
    )
    def _render_faq(payload):
        view = widget_view(payload)
        return view["faq_triggers"], view["faq_contents"]

    @app.callback(
        Output({"type": CONSOLE_SWITCH, "name": ALL}, "className"),
        Output("phone-ar-view", "className"),
        Input("page-state", "data"),
    )
    def _render_console(payload):
        view = widget_view(payload)
        return view["switches"], view["ar_view"]

    app.clientside_callback(
        FETCH_TOKEN_JS,
        Output("token-store", "data"),
        Input("url", "pathname"),
    )

    @app.callback(
        Output("assistant-launcher", "disabled"),
        Output("assistant-launcher", "title"),
        Input("token-store", "data"),
    )
    def _sync_assistant_launcher(token):
        return assistant_launcher_state(token)

    @app.callback(
        Output("assistant-open", "data"),
        Input("assistant-launcher", "n_clicks"),
        State("assistant-open", "data"),
        State("token-store", "data"),
        prevent_initial_call=True,
    )
    def _on_assistant_click(_n_clicks, is_open, token):
        return toggle_assistant(is_open, token)

    @app.callback(
        Output("assistant-panel", "className"),
        Input("assistant-open", "data"),
    )
    def _render_assistant_panel(is_open):
        return ui.cn("eco-assistant-panel", "is-open" if is_open else None)


def main(config: SiteConfig, **run_kwargs) -> None:
    app = create_app(config)
    run_kwargs.setdefault("host", config.host)
    run_kwargs.setdefault("port", config.port)
    app.run(**run_kwargs)

