# src/panels.py
from types import MappingProxyType

import matplotlib.pyplot as plt
import pandas as pd
import pydeck as pdk

MAP_POINT = MappingProxyType({"lat": 42.0285, "lon": -93.65, "label": "Ames, Iowa"})

SCAM_COUNTS = (
    ("Grandparent Scam", 120),
    ("Tech Support Scam", 200),
    ("Financial Scam", 180),
)


def map_frame():
    """One-row frame behind the map marker."""
    return pd.DataFrame([dict(MAP_POINT)], columns=["lat", "lon", "label"])


def map_deck():
    """Tile map with the single labelled marker; hover shows the label."""
    layer = pdk.Layer(
        "ScatterplotLayer",
        data=map_frame(),
        get_position=["lon", "lat"],
        get_radius=150,
        get_fill_color=[228, 87, 86, 200],
        pickable=True,
    )
    view = pdk.ViewState(latitude=MAP_POINT["lat"], longitude=MAP_POINT["lon"], zoom=12)
    return pdk.Deck(layers=[layer], initial_view_state=view, tooltip={"text": "{label}"}, map_style=None)


def scam_frame():
    return pd.DataFrame(list(SCAM_COUNTS), columns=["Category", "Count"])


def scam_bar_figure():
    df = scam_frame()
    fig, ax = plt.subplots(figsize=(6, 3.5))
    ax.bar(df["Category"], df["Count"], color=["#4c78a8", "#f58518", "#e45756"])
    ax.set_ylabel("Reports")
    ax.set_title("Reported scams by category")
    fig.tight_layout()
    return fig
