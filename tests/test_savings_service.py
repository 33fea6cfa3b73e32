import savings_service
from conftest import FakeClient
from models import CreateGoalRequest


def test_get_goals_path_and_parsing(make_goal):
    client = FakeClient({("GET", "/savings-goals/all/3"): [make_goal(), make_goal(idGoal=8, name="Auto")]})

    goals = savings_service.get_savings_goals(3, client=client)

    assert [g.id_goal for g in goals] == [7, 8]
    assert goals[0].target_amount == 1000.0
    assert client.calls[0][:2] == ("GET", "/savings-goals/all/3")


def test_get_goals_enveloped(make_goal):
    client = FakeClient({("GET", "/savings-goals/all/3"): {"data": [make_goal()]}})
    assert savings_service.get_savings_goals(3, client=client)[0].name == "Vacaciones"


def test_create_goal_sends_camel_case_body(make_goal):
    client = FakeClient({("POST", "/savings-goals/3"): make_goal()})
    request = CreateGoalRequest(
        name="Vacaciones",
        targetAmount=1000.0,
        endDate="2026-12-31",
        priority="HIGH",
        startDate="2026-10-18",
        frequency="MONTHLY",
    )

    goal = savings_service.create_savings_goal(3, request, client=client)

    method, path, kwargs = client.calls[0]
    assert (method, path) == ("POST", "/savings-goals/3")
    assert kwargs["json"] == {
        "name": "Vacaciones",
        "targetAmount": 1000.0,
        "endDate": "2026-12-31",
        "priority": "HIGH",
        "startDate": "2026-10-18",
        "frequency": "MONTHLY",
    }
    assert goal.id_goal == 7


def test_update_goal_uses_put(make_goal):
    client = FakeClient({("PUT", "/savings-goals/7/3"): make_goal(name="Viaje")})

    goal = savings_service.update_savings_goal(7, 3, {"name": "Viaje"}, client=client)

    assert client.calls[0] == ("PUT", "/savings-goals/7/3", {"json": {"name": "Viaje"}})
    assert goal.name == "Viaje"


def test_delete_goal():
    client = FakeClient()
    assert savings_service.delete_savings_goal(7, 3, client=client) is None
    assert client.calls == [("DELETE", "/savings-goals/7/3", {})]


def test_deposit_and_withdraw_paths(make_goal):
    client = FakeClient({
        ("POST", "/savings-goals/7/3/add"): make_goal(currentAmount=300.0),
        ("POST", "/savings-goals/7/3/withdraw"): {"data": make_goal(currentAmount=200.0)},
    })

    added = savings_service.add_to_savings_goal(7, 3, 50.0, client=client)
    taken = savings_service.withdraw_from_savings_goal(7, 3, 100.0, client=client)

    assert client.calls == [
        ("POST", "/savings-goals/7/3/add", {"json": {"amount": 50.0}}),
        ("POST", "/savings-goals/7/3/withdraw", {"json": {"amount": 100.0}}),
    ]
    assert added.current_amount == 300.0
    assert taken.current_amount == 200.0
