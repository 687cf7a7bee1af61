import logging
import sys
from pathlib import Path

import streamlit as st

sys.path.append(str(Path(__file__).resolve().parents[1]))

from oberweather.config import (
    LOCATION_NAME,
    LOCATION_POSTAL_CODE,
    LOCATION_SOURCE,
    LOG_LEVEL,
    WEATHER_DATE_FORMAT,
    WEATHER_EXPORT_FILENAME,
    WEATHER_SERIES_DAYS,
    WEATHER_START_DATE,
)
from oberweather.data.synthetic import default_rng, generate_series
from oberweather.met.series import period_label, recompute_vpd, series_frame, summarize
from oberweather.utils.export import to_csv, to_tsv

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
)

TABLE_LABELS = {
    "date": "Date",
    "temp_min": "Min °C",
    "temp_max": "Max °C",
    "temp_avg": "Avg °C",
    "humidity": "Humidity %",
    "vpd": "VPD kPa",
    "vpd_band": "VPD band",
    "par": "PAR µmol/m²/s",
    "solar_rad": "Solar W/m²",
    "pressure": "Pressure hPa",
    "wind": "Wind km/h",
}
VPD_GUIDE = [
    ("0.0-0.4 kPa", "Very humid, minimal plant stress"),
    ("0.4-0.8 kPa", "Moderate conditions"),
    ("0.8-1.2 kPa", "Optimal for most crops"),
    ("1.2-2.0 kPa", "Higher stress conditions"),
    (">2.0 kPa", "High stress, drought conditions"),
]


def _set_series(series) -> None:
    # series and summary are always replaced together
    st.session_state["series"] = series
    st.session_state["summary"] = summarize(series)


def _regenerate() -> None:
    _set_series(generate_series(WEATHER_START_DATE, WEATHER_SERIES_DAYS, st.session_state["rng"]))


# one generator per session: a WEATHER_SEED pins the sequence, not every draw
if "rng" not in st.session_state:
    st.session_state["rng"] = default_rng()
if "series" not in st.session_state:
    _regenerate()

st.set_page_config(page_title="Oberursel Weather", layout="wide")
st.markdown(
    """
    <style>
    div[data-testid="stMetric"] {
        border-radius: 18px;
        padding: 0.9rem 1.1rem;
        background: rgba(120, 181, 255, 0.06);
        border: 1px solid rgba(120, 181, 255, 0.25);
    }
    .stDataFrame {
        border-radius: 18px !important;
        overflow: hidden !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

series = st.session_state["series"]
summary = st.session_state["summary"]

st.title(f"🌡️ {len(series)}-Day Weather Data for {LOCATION_NAME}")
st.caption(f"📍 Postal Code: {LOCATION_POSTAL_CODE} | 📅 Period: {period_label(series)}")
st.caption(f"🏢 Data Sources: {LOCATION_SOURCE}")

metrics = st.columns(4)
metrics[0].metric("Avg Temperature", f"{summary.avg_temp:.1f} °C")
metrics[1].metric("Avg Humidity", f"{summary.avg_humidity:.1f} %")
metrics[2].metric("Avg VPD", f"{summary.avg_vpd:.3f} kPa")
metrics[3].metric("Avg PAR", f"{summary.avg_par} µmol/m²/s")

controls = st.columns(4)
if controls[0].button(
    "🔄 Generate Current Data",
    key="generate",
    help=(
        "Draws a fresh series. With WEATHER_SEED set, "
        "the sequence of series is reproducible per session."
    ),
    use_container_width=True,
):
    _regenerate()
    st.rerun()
if controls[1].button("📊 Recalculate VPD", key="recompute_vpd", use_container_width=True):
    _set_series(recompute_vpd(series))
    st.rerun()
controls[2].download_button(
    "💾 Export CSV",
    data=to_csv(series),
    file_name=WEATHER_EXPORT_FILENAME,
    mime="text/csv",
    use_container_width=True,
)
if controls[3].button("📋 Copy Data", key="copy", use_container_width=True):
    st.caption(
        "Tab-separated data for Excel or Google Sheets. "
        "Use the copy icon at the top right of the block, then paste."
    )
    st.code(to_tsv(series), language=None)

df = series_frame(series)
df["date"] = df["date"].map(lambda d: d.strftime(WEATHER_DATE_FORMAT))
st.dataframe(
    df[list(TABLE_LABELS)].rename(columns=TABLE_LABELS),
    use_container_width=True,
    hide_index=True,
    column_config={
        "VPD kPa": st.column_config.NumberColumn(format="%.3f"),
        "Min °C": st.column_config.NumberColumn(format="%.1f"),
        "Max °C": st.column_config.NumberColumn(format="%.1f"),
        "Avg °C": st.column_config.NumberColumn(format="%.1f"),
    },
)

info_left, info_right = st.columns(2)
with info_left:
    st.subheader("Data description")
    st.markdown(
        "- **Temperature:** daily minimum, maximum and average air temperature at 2 m\n"
        "- **Humidity:** relative humidity percentage\n"
        "- **VPD:** vapor pressure deficit from the Magnus formula\n"
        "- **PAR:** photosynthetically active radiation, ~45% of solar radiation\n"
        f"- **Data sources:** {LOCATION_SOURCE}"
    )
with info_right:
    st.subheader("VPD guide")
    for band, text in VPD_GUIDE:
        st.markdown(f"**{band}:** {text}")
