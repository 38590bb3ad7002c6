"""HR Diagram Explorer — Streamlit app for nearby stars on the H-R diagram."""

import html

import streamlit as st
from streamlit_js_eval import streamlit_js_eval

from hrdiagram.config import load_settings
from hrdiagram.dashboard import DashboardSession, SelectStar
from hrdiagram.i18n import t
from hrdiagram.logging_config import setup_logging
from hrdiagram.models import StarCatalog
from hrdiagram.pipeline import DataLoadError, build_catalog
from hrdiagram.renderers.detail import render_detail_html
from hrdiagram.renderers.table import column_labels

settings = load_settings()
logger = setup_logging(settings.log_level)

# --- Language detection (HRD_LANG wins, then the browser via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in, at which point _lang is set correctly.
if settings.lang is not None:
    st.session_state.lang = settings.lang
elif "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="🔭",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(
    """
    <style>
    /* Hide streamlit_js_eval invisible iframe */
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    .units-guide {
        background-color: #f9f9f9;
        padding: 8px;
        border-radius: 5px;
        font-size: 13px;
        color: #333333;
    }
    .hover-hint {
        text-align: center;
        font-size: 16px;
        font-weight: bold;
        color: #0073e6;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


# --- Shared catalog (one per process, read-only) ---
@st.cache_resource(show_spinner=False)
def _load_catalog(stars_csv: str, classes_csv: str) -> StarCatalog:
    return build_catalog(stars_csv, classes_csv)


try:
    catalog = _load_catalog(str(settings.stars_csv), str(settings.classes_csv))
except DataLoadError as e:
    logger.error("Startup failed: %s", e)
    st.error(t("error_load", _lang).format(error=html.escape(str(e))))
    st.stop()

# --- Per-session state: selection lives here, the catalog is shared ---
_previous: DashboardSession | None = st.session_state.get("dashboard")
if _previous is None or _previous.catalog is not catalog or _previous.lang != _lang:
    st.session_state.dashboard = DashboardSession(
        catalog,
        selection=_previous.selection if _previous is not None else None,
        lang=_lang,
    )
dashboard: DashboardSession = st.session_state.dashboard


def _on_select() -> None:
    dashboard.dispatch(SelectStar(st.session_state.selected_star))


# --- Title ---
st.markdown(
    f"<h1 style='text-align: center; font-weight: bold; margin-bottom: 20px;'>"
    f"{t('app_title', _lang)}</h1>",
    unsafe_allow_html=True,
)

# --- Sidebar: selector, detail panel, units guide ---
with st.sidebar:
    st.header(t("sidebar_header", _lang))
    names = catalog.names()
    current = dashboard.selection.name
    st.selectbox(
        t("label_select_star", _lang),
        options=names,
        index=names.index(current) if current in names else (0 if names else None),
        key="selected_star",
        on_change=_on_select,
    )
    st.divider()

    fields = dashboard.view("detail")
    if fields:
        st.markdown(render_detail_html(fields), unsafe_allow_html=True)
    else:
        st.info(t("no_selection", _lang))

    st.markdown(
        f"<div class='units-guide'>{t('units_guide', _lang)}</div>",
        unsafe_allow_html=True,
    )

# --- Main area: chart and table tabs ---
tab_chart, tab_table = st.tabs([t("tab_chart", _lang), t("tab_table", _lang)])

with tab_chart:
    st.plotly_chart(
        dashboard.view("chart"),
        use_container_width=True,
        config={"scrollZoom": True, "displaylogo": False},
    )
    st.markdown(
        f"<div class='hover-hint'>{t('hover_hint', _lang)}</div>",
        unsafe_allow_html=True,
    )

with tab_table:
    st.dataframe(
        dashboard.view("table"),
        hide_index=True,
        use_container_width=True,
        column_config=column_labels(_lang),
    )
