import logging
from typing import List, Optional

from api import api_client, unwrap_envelope
from config import RECENT_TRANSACTIONS_LIMIT
from models import DashboardStats, MonthlyData, PieData, RecentTransaction

logger = logging.getLogger(__name__)


def _fetch(path: str, client=None, params=None):
    client = client or api_client
    body = client.get(path, params=params)
    data = unwrap_envelope(body)
    logger.debug("dashboard %s payload: %r", path, data)
    return data


def get_dashboard_stats(client=None) -> Optional[DashboardStats]:
    data = _fetch("/dashboard/stats", client)
    if not data:
        return None
    return DashboardStats.model_validate(data)


def get_monthly_data(client=None) -> List[MonthlyData]:
    data = _fetch("/dashboard/monthly-data", client) or []
    return [MonthlyData.model_validate(d) for d in data]


def get_pie_data(client=None) -> List[PieData]:
    data = _fetch("/dashboard/pie-data", client) or []
    return [PieData.model_validate(d) for d in data]


def get_recent_transactions(limit: int = RECENT_TRANSACTIONS_LIMIT, client=None) -> List[RecentTransaction]:
    data = _fetch("/dashboard/recent-transactions", client, params={"limit": limit}) or []
    return [RecentTransaction.model_validate(d) for d in data]
