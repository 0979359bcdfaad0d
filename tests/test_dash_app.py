import pytest
from dash import Dash

from ecomimic_site.core import content
from ecomimic_site.core.state import FAQ_GROUP, MODELS_GROUP, TOGGLES_KEY, initial_payload
from ecomimic_site.ui import dash_app
from ecomimic_site.ui.dash_app import (
    CONSOLE_SWITCH,
    FAQ_TRIGGER,
    MODELS_TAB,
    apply_page_event,
    assistant_launcher_state,
    create_app,
    toggle_assistant,
    water_quality_figure,
    widget_view,
)
from ecomimic_site.web.server import TOKEN_ROUTE


def _walk(node):
    yield node
    children = getattr(node, "children", None)
    if children is None:
        return
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        if hasattr(child, "to_plotly_json"):
            yield from _walk(child)


def _ids(tree):
    return [getattr(n, "id", None) for n in _walk(tree) if getattr(n, "id", None) is not None]


def _click(payload, kind, key, value):
    return apply_page_event(payload, {"type": kind, key: value})


def test_tab_clicks_follow_last_selection():
    payload = initial_payload()
    for series in ("metascape", "stardust", "metascape", "metascape"):
        payload = _click(payload, MODELS_TAB, "value", series)
    assert payload[MODELS_GROUP] == "metascape"


def test_faq_clicks_collapse_and_switch():
    payload = _click(initial_payload(), FAQ_TRIGGER, "value", "q1")
    assert payload[FAQ_GROUP] == "q1"
    payload = _click(payload, FAQ_TRIGGER, "value", "q3")
    assert payload[FAQ_GROUP] == "q3"
    payload = _click(payload, FAQ_TRIGGER, "value", "q3")
    assert payload[FAQ_GROUP] is None


@pytest.mark.parametrize("clicks", [1, 2, 5])
def test_switch_clicks_apply_parity(clicks):
    payload = initial_payload()
    for _ in range(clicks):
        payload = _click(payload, CONSOLE_SWITCH, "name", "auto_clean")
    assert payload[TOGGLES_KEY]["auto_clean"] is (clicks % 2 == 0)
    assert payload[TOGGLES_KEY]["ar"] is True


def test_unrecognised_trigger_leaves_state():
    assert apply_page_event(initial_payload(), {"type": "mystery", "value": "x"}) == initial_payload()
    assert apply_page_event(None, None) == initial_payload()


def test_widget_view_defaults():
    view = widget_view(initial_payload())
    assert view["tabs"] == ["eco-tab is-active", "eco-tab"]
    assert all(c == "eco-accordion-content" for c in view["faq_contents"])
    assert all(c == "eco-switch is-on" for c in view["switches"])
    assert len(view["model_cards"]) == len(content.model_cards_for_series("stardust")) == 2
    assert view["ar_view"] == "eco-ar-view"


def test_widget_view_linked_panels():
    payload = _click(initial_payload(), MODELS_TAB, "value", "metascape")
    payload = _click(payload, FAQ_TRIGGER, "value", "q2")
    payload = _click(payload, CONSOLE_SWITCH, "name", "ar")
    view = widget_view(payload)
    assert view["tabs"] == ["eco-tab", "eco-tab is-active"]
    assert len(view["model_cards"]) == 1
    assert view["faq_contents"] == ["eco-accordion-content", "eco-accordion-content is-open", "eco-accordion-content"]
    assert view["faq_triggers"][1] == "eco-accordion-trigger is-open"
    assert view["switches"][0] == "eco-switch"
    assert view["ar_view"] == "eco-ar-view is-off"


def test_unknown_series_shows_no_cards():
    view = widget_view(_click(initial_payload(), MODELS_TAB, "value", "retro"))
    assert view["model_cards"] == []
    assert view["tabs"] == ["eco-tab", "eco-tab"]


@pytest.mark.parametrize(
    "token, disabled",
    [("abc123", False), ("", True), ("   ", True), (None, True), ({"token": "x"}, True)],
)
def test_assistant_launcher_depends_on_token(token, disabled):
    assert assistant_launcher_state(token)[0] is disabled


def test_assistant_panel_toggle():
    assert toggle_assistant(False, "abc123") is True
    assert toggle_assistant(True, "abc123") is False
    assert toggle_assistant(False, None) is False
    assert toggle_assistant(True, None) is False


def test_figure_axes_are_fixed():
    fig = water_quality_figure()
    assert tuple(fig.layout.yaxis.range) == (24.8, 25.8)
    assert tuple(fig.layout.yaxis2.range) == (7.0, 8.6)
    assert fig.layout.yaxis2.overlaying == "y"
    assert fig.layout.yaxis2.side == "right"
    assert fig.layout.xaxis.type == "category"
    assert [t.yaxis for t in fig.data] == ["y", "y2"]
    assert all(t.line.shape == "spline" for t in fig.data)


def test_fetch_script_targets_token_route():
    assert TOKEN_ROUTE in dash_app.FETCH_TOKEN_JS
    assert "return null" in dash_app.FETCH_TOKEN_JS


def test_layout_contains_widgets_and_sections():
    ids = _ids(dash_app._root_layout())
    for expected in ("page-state", "token-store", "assistant-launcher", "model-cards", "water-quality-chart"):
        assert expected in ids
    for anchor in ("features", "models", "console", "specs", "faq", "contact"):
        assert anchor in ids
    tab_ids = [i for i in ids if isinstance(i, dict) and i.get("type") == MODELS_TAB]
    assert [i["value"] for i in tab_ids] == [t.value for t in content.SERIES_TABS]
    switch_ids = [i for i in ids if isinstance(i, dict) and i.get("type") == CONSOLE_SWITCH]
    assert [i["name"] for i in switch_ids] == [s.name for s in content.CONSOLE_SWITCHES]


def test_failing_section_renders_error_card(monkeypatch, temp_log_path):
    def broken(_state):
        raise RuntimeError("boom")

    monkeypatch.setattr(
        dash_app,
        "PAGE_SECTIONS",
        (("Hero", broken),) + tuple(s for s in dash_app.PAGE_SECTIONS if s[0] != "Hero"),
    )
    tree = dash_app._root_layout()
    texts = [n.children for n in _walk(tree) if isinstance(getattr(n, "children", None), str)]
    assert "RuntimeError: boom" in texts
    assert "model-cards" in _ids(tree)
    assert "render section Hero" in temp_log_path.read_text(encoding="utf-8")


def test_create_app_mounts_page_and_token_route(site_config):
    app = create_app(site_config)
    assert isinstance(app, Dash)
    client = app.server.test_client()
    assert client.get(TOKEN_ROUTE).get_json() == {"token": "abc123"}
    assert client.get("/").status_code == 200
    assert client.get("/_dash-layout").status_code == 200


def test_unknown_paths_are_not_found(site_config):
    client = create_app(site_config).server.test_client()
    for path in ("/no-such-file.png", "/about", "/api-docs"):
        assert client.get(path).status_code == 404
    assert client.get("/site/nope.txt").status_code == 404
    assert client.get("/site/index.html").status_code == 200
    assert client.get("/assets/site.css").status_code == 200


@pytest.mark.parametrize(
    "path, served",
    [
        ("/", True),
        ("/_dash-update-component", True),
        ("/_dash-component-suites/dash/dcc/dash_core_components.js", True),
        ("/_favicon.ico", True),
        ("/api/get-coze-token", True),
        ("/site/robots.txt", True),
        ("/index.html", False),
        ("/sitemap.xml", False),
    ],
)
def test_served_paths(path, served):
    assert dash_app.is_served_path(path) is served


def test_widget_sections_render_independently(site_config):
    app = create_app(site_config)
    outputs = [key for key in app.callback_map if "page-state" not in key]
    groups = {
        "models": ("model-cards", MODELS_TAB),
        "faq": (FAQ_TRIGGER, dash_app.FAQ_CONTENT),
        "console": ("phone-ar-view", CONSOLE_SWITCH),
    }
    for name, markers in groups.items():
        owners = [key for key in outputs if any(m in key for m in markers)]
        assert len(owners) == 1, name
        others = [m for other, ms in groups.items() if other != name for m in ms]
        assert not any(m in owners[0] for m in others), name
