import logging

import streamlit as st

from config import LOG_LEVEL
from ui.dashboard import dashboard_page
from ui.savings_goals import savings_goals_page

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(
    page_title="Finanzas Personales",
    layout="wide",
)

st.sidebar.title("Navegación")
page = st.sidebar.radio(
    "Sección",
    ["Dashboard", "Metas de Ahorro"],
    label_visibility="collapsed",
)

# ---------------- Dashboard ----------------
if page == "Dashboard":
    dashboard_page()

# ---------------- Savings goals ----------------
elif page == "Metas de Ahorro":
    savings_goals_page()
