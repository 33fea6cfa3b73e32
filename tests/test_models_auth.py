import auth
from models import SavingsGoal


def test_goal_completion_and_remaining(make_goal):
    goal = SavingsGoal.model_validate(make_goal())
    assert not goal.is_completed
    assert goal.remaining == 750.0

    done = SavingsGoal.model_validate(make_goal(currentAmount=1200.0))
    assert done.is_completed
    assert done.remaining == 0.0

    flagged = SavingsGoal.model_validate(make_goal(status="COMPLETED"))
    assert flagged.is_completed


def test_goal_ignores_unknown_fields(make_goal):
    goal = SavingsGoal.model_validate(make_goal(createdAt="2026-01-01T00:00:00"))
    assert goal.id_goal == 7


def test_current_user_from_session(monkeypatch):
    monkeypatch.setattr(auth, "DEFAULT_USER_ID", None)
    assert auth.current_user_id({"user": {"id": "12", "email": "a@b.co"}}) == 12


def test_current_user_falls_back_to_default(monkeypatch):
    monkeypatch.setattr(auth, "DEFAULT_USER_ID", "5")
    assert auth.current_user_id({}) == 5


def test_no_user(monkeypatch):
    monkeypatch.setattr(auth, "DEFAULT_USER_ID", None)
    assert auth.current_user_id({}) is None
    assert auth.current_user_id({"user": {"id": 0}}) is None
