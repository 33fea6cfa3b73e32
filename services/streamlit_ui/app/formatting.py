from datetime import date
from typing import Optional

import pandas as pd

_MONTHS_ES = ["ene", "feb", "mar", "abr", "may", "jun", "jul", "ago", "sept", "oct", "nov", "dic"]

PRIORITY_LABELS = {"HIGH": "Alta", "MEDIUM": "Media", "LOW": "Baja"}
PRIORITY_COLORS = {"HIGH": "red", "MEDIUM": "orange", "LOW": "green"}


# -------------------------
# Display formatting
# -------------------------

def format_currency(value: Optional[float]) -> str:
    """COP with es-CO grouping and no decimals: 1234567 -> "$ 1.234.567"."""
    value = value or 0
    grouped = f"{abs(value):,.0f}".replace(",", ".")
    sign = "-" if round(value) < 0 else ""
    return f"{sign}$ {grouped}"


def format_percentage(value: Optional[float]) -> str:
    if value is None:
        return "0%"
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.1f}%"


def format_date(value: str) -> str:
    try:
        ts = pd.to_datetime(value)
    except (ValueError, TypeError):
        return value
    if pd.isna(ts):
        return value
    return f"{ts.day} {_MONTHS_ES[ts.month - 1]} {ts.year}"


def format_amount(value: float) -> str:
    """es-CO grouping with two decimals: 1250.5 -> "$1.250,50"."""
    grouped = f"{abs(value):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if value < 0 and grouped.strip("0,.") else ""
    return f"{sign}${grouped}"


# -------------------------
# Goal helpers
# -------------------------

def calculate_progress(current: float, target: float) -> float:
    if target == 0:
        return 0.0
    return max(0.0, min(current / target * 100, 100.0))


def parse_deadline(deadline: Optional[str]) -> Optional[date]:
    if not deadline:
        return None
    try:
        return pd.to_datetime(deadline).date()
    except (ValueError, TypeError):
        return None


def days_remaining(deadline: Optional[str], today: Optional[date] = None) -> int:
    target = parse_deadline(deadline)
    if target is None:
        return 0
    today = today or date.today()
    return (target - today).days


def deadline_label(goal, today: Optional[date] = None) -> str:
    if goal.is_completed:
        return "¡Meta Completada!"
    days = days_remaining(goal.end_date, today)
    if days > 0:
        return f"{days} días restantes"
    return "Plazo vencido"


def priority_label(priority: str) -> str:
    return PRIORITY_LABELS.get(priority, priority)


def priority_color(priority: str) -> str:
    return PRIORITY_COLORS.get(priority, "gray")
