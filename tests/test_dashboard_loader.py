from types import SimpleNamespace

from api import ApiError
from models import DashboardStats, MonthlyData, PieData, RecentTransaction
from ui.dashboard import DEFAULT_ERROR, load_dashboard


def make_service(fail=None, exc=None):
    calls = []

    def call(name, value):
        def inner(*args):
            calls.append((name, args))
            if name == fail:
                raise exc or ApiError("Servicio no disponible", status_code=503)
            return value
        return inner

    service = SimpleNamespace(
        get_dashboard_stats=call("stats", DashboardStats(currentBalance=100)),
        get_monthly_data=call("monthly", [MonthlyData(month="Ene", ingresos=10, gastos=5)]),
        get_pie_data=call("pie", [PieData(name="Ingresos", value=10)]),
        get_recent_transactions=call(
            "recent",
            [RecentTransaction(id=1, description="Cafe", amount=-5, date="2026-10-01", type="gasto")],
        ),
        calls=calls,
    )
    return service


def test_all_resources_loaded():
    service = make_service()

    state = load_dashboard(service, limit=4)

    assert state.error is None
    assert state.stats.current_balance == 100
    assert len(state.monthly_data) == 1
    assert len(state.pie_data) == 1
    assert state.recent_transactions[0].description == "Cafe"
    assert sorted(name for name, _ in service.calls) == ["monthly", "pie", "recent", "stats"]
    assert ("recent", (4,)) in service.calls


def test_any_failure_discards_whole_batch():
    for failing in ("stats", "monthly", "pie", "recent"):
        state = load_dashboard(make_service(fail=failing))

        assert state.error == "Servicio no disponible"
        assert state.stats is None
        assert state.monthly_data == []
        assert state.pie_data == []
        assert state.recent_transactions == []


def test_failure_without_message_uses_default():
    state = load_dashboard(make_service(fail="pie", exc=RuntimeError()))
    assert state.error == DEFAULT_ERROR


def test_null_lists_become_empty():
    service = make_service()
    service.get_monthly_data = lambda: None
    service.get_pie_data = lambda: None

    state = load_dashboard(service)

    assert state.error is None
    assert state.monthly_data == []
    assert state.pie_data == []
