from typing import List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from models import MonthlyData, PieData

INCOME_COLOR = "#10B981"
EXPENSE_COLOR = "#EF4444"
PIE_COLORS = [INCOME_COLOR, EXPENSE_COLOR]


def pie_figure(pie_data: List[PieData]) -> Optional[go.Figure]:
    """Monthly income/expense split. None when there is nothing to draw."""
    if not pie_data:
        return None

    df = pd.DataFrame([p.model_dump() for p in pie_data])
    fig = px.pie(
        df,
        names="name",
        values="value",
        color_discrete_sequence=PIE_COLORS,
    )
    fig.update_traces(textinfo="label+percent", hovertemplate="%{label}: $ %{value:,.0f}<extra></extra>")
    fig.update_layout(height=300, margin=dict(t=10, b=10, l=10, r=10), showlegend=False)
    return fig


def monthly_figure(monthly_data: List[MonthlyData]) -> Optional[go.Figure]:
    """Grouped income vs expenses bars per month."""
    if not monthly_data:
        return None

    df = pd.DataFrame([m.model_dump() for m in monthly_data])
    df = df.rename(columns={"ingresos": "Ingresos", "gastos": "Gastos"})
    long_df = df.melt(id_vars="month", value_vars=["Ingresos", "Gastos"], var_name="tipo", value_name="monto")

    fig = px.bar(
        long_df,
        x="month",
        y="monto",
        color="tipo",
        barmode="group",
        color_discrete_map={"Ingresos": INCOME_COLOR, "Gastos": EXPENSE_COLOR},
    )
    fig.update_layout(height=300, margin=dict(t=10, b=10, l=10, r=10), xaxis_title=None, yaxis_title=None, legend_title=None)
    return fig
