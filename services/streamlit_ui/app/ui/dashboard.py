import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional

import streamlit as st

import dashboard_service
from api import error_message
from charts import pie_figure, monthly_figure
from config import RECENT_TRANSACTIONS_LIMIT
from formatting import format_currency, format_percentage, format_date
from models import DashboardStats, MonthlyData, PieData, RecentTransaction

logger = logging.getLogger(__name__)

DEFAULT_ERROR = "Error al cargar los datos del dashboard"
STATE_KEY = "dashboard_state"


@dataclass
class DashboardState:
    stats: Optional[DashboardStats] = None
    monthly_data: List[MonthlyData] = field(default_factory=list)
    pie_data: List[PieData] = field(default_factory=list)
    recent_transactions: List[RecentTransaction] = field(default_factory=list)
    error: Optional[str] = None


def load_dashboard(service=dashboard_service, limit: int = RECENT_TRANSACTIONS_LIMIT) -> DashboardState:
    """
    Fetch the four dashboard resources in parallel.
    If any of them fails the whole batch is discarded and only the error is returned.
    """
    with ThreadPoolExecutor(max_workers=4) as pool:
        futures = [
            pool.submit(service.get_dashboard_stats),
            pool.submit(service.get_monthly_data),
            pool.submit(service.get_pie_data),
            pool.submit(service.get_recent_transactions, limit),
        ]

    try:
        stats, monthly, pie, transactions = [f.result() for f in futures]
    except Exception as e:
        logger.exception("Error loading dashboard")
        return DashboardState(error=error_message(e, DEFAULT_ERROR))

    return DashboardState(
        stats=stats,
        monthly_data=monthly or [],
        pie_data=pie or [],
        recent_transactions=transactions or [],
    )


def refresh_dashboard():
    with st.spinner("Cargando dashboard..."):
        st.session_state[STATE_KEY] = load_dashboard()


# -------------------------
# Rendering
# -------------------------

def _stats_cards(stats: Optional[DashboardStats]):
    stats = stats or DashboardStats()
    c1, c2, c3, c4 = st.columns(4)

    with c1.container(border=True):
        st.metric("💼 Saldo Actual", format_currency(stats.current_balance))
        st.caption("No configurado" if stats.current_balance is None else "Actualizado hoy")

    with c2.container(border=True):
        st.metric("📈 Ingresos del Mes", format_currency(stats.monthly_income))
        st.caption(f"{format_percentage(stats.income_change)} vs mes anterior")

    with c3.container(border=True):
        st.metric("📉 Gastos del Mes", format_currency(stats.monthly_expenses))
        st.caption(f"{format_percentage(stats.expense_change)} vs mes anterior")

    with c4.container(border=True):
        savings = "0" if stats.savings_percentage is None else f"{stats.savings_percentage:.1f}"
        st.metric("🐷 Ahorro", f"{savings}%")
        st.caption("Del total de ingresos")


def _charts(state: DashboardState):
    left, right = st.columns(2)

    with left.container(border=True):
        st.subheader("Distribución Mensual")
        fig = pie_figure(state.pie_data)
        if fig is None:
            st.info("No hay datos disponibles")
        else:
            st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})

    with right.container(border=True):
        st.subheader("Histórico (Últimos 5 meses)")
        fig = monthly_figure(state.monthly_data)
        if fig is None:
            st.info("No hay datos disponibles")
        else:
            st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def _recent_activity(transactions: List[RecentTransaction]):
    with st.container(border=True):
        st.subheader("Actividad Reciente")
        if not transactions:
            st.info("No hay transacciones recientes")
            return

        for item in transactions:
            icon, sign, color = ("📈", "+", "green") if item.is_income else ("📉", "-", "red")
            c1, c2 = st.columns([4, 1])
            c1.markdown(f"{icon} **{item.description}**  \n:gray[{format_date(item.date)}]")
            c2.markdown(f":{color}[**{sign}{format_currency(abs(item.amount))}**]")


def dashboard_page():
    if STATE_KEY not in st.session_state:
        refresh_dashboard()

    state: DashboardState = st.session_state[STATE_KEY]

    if state.error:
        st.error(f"**Error al cargar el dashboard**\n\n{state.error}")
        if st.button("Reintentar"):
            refresh_dashboard()
            st.rerun()
        return

    head, refresh = st.columns([6, 1])
    with head:
        st.title("Panel Principal")
        st.caption("Resumen de tu situación financiera")
    with refresh:
        if st.button("🔄", help="Actualizar datos"):
            refresh_dashboard()
            st.rerun()

    _stats_cards(state.stats)
    _charts(state)
    _recent_activity(state.recent_transactions)
