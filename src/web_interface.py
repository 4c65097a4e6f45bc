# src/web_interface.py
import logging

import matplotlib.pyplot as plt
import streamlit as st

from analyser import submit
from panels import MAP_POINT, map_deck, scam_bar_figure, scam_frame
from settings import configure_logging

# ----------------- setup -----------------
configure_logging()
logger = logging.getLogger(__name__)
st.set_page_config(page_title="URL Safety Checker", layout="centered")

REPLY_SLOT = "check_reply"


def on_check_clicked():
    # runs before the rerun, so the reply is ready when the page renders
    url = st.session_state.get("url_input", "")
    logger.debug("check requested")
    st.session_state[REPLY_SLOT] = submit(url)


def on_url_changed():
    # a shown verdict belongs to the URL it was checked for
    st.session_state.pop(REPLY_SLOT, None)


def render_reply(reply):
    if reply is None:
        return
    show = {"warning": st.warning, "error": st.error, "success": st.success}[reply.level]
    show(reply.message)


# ===========================================================
# URL CHECK
# ===========================================================
st.title("🔍 URL Safety Checker")
st.write("Enter a URL to look it up in Google Safe Browsing.")

st.text_input("URL to check", key="url_input", on_change=on_url_changed, placeholder="https://example.com")
st.button("Check URL", on_click=on_check_clicked)
render_reply(st.session_state.get(REPLY_SLOT))

# ===========================================================
# MAP
# ===========================================================
st.subheader("🗺 Location")
st.pydeck_chart(map_deck())
st.caption(f"📍 {MAP_POINT['label']} ({MAP_POINT['lat']}, {MAP_POINT['lon']})")

# ===========================================================
# CHART
# ===========================================================
st.subheader("📊 Common scams")
fig = scam_bar_figure()
st.pyplot(fig)
plt.close(fig)
st.dataframe(scam_frame(), hide_index=True)
