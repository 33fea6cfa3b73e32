from typing import List, Optional

from api import api_client, unwrap_envelope
from models import CreateGoalRequest, GoalTransactionRequest, SavingsGoal


def _goal(body) -> Optional[SavingsGoal]:
    data = unwrap_envelope(body)
    return SavingsGoal.model_validate(data) if data else None


# GET /savings-goals/all/{userId}
def get_savings_goals(user_id: int, client=None) -> List[SavingsGoal]:
    client = client or api_client
    data = unwrap_envelope(client.get(f"/savings-goals/all/{user_id}")) or []
    return [SavingsGoal.model_validate(g) for g in data]


# POST /savings-goals/{userId}
def create_savings_goal(user_id: int, goal: CreateGoalRequest, client=None) -> Optional[SavingsGoal]:
    client = client or api_client
    payload = goal.model_dump(by_alias=True, exclude_none=True)
    return _goal(client.post(f"/savings-goals/{user_id}", json=payload))


# PUT /savings-goals/{idGoal}/{userId}
def update_savings_goal(id_goal: int, user_id: int, goal: dict, client=None) -> Optional[SavingsGoal]:
    client = client or api_client
    return _goal(client.put(f"/savings-goals/{id_goal}/{user_id}", json=goal))


# DELETE /savings-goals/{idGoal}/{userId}
def delete_savings_goal(id_goal: int, user_id: int, client=None) -> None:
    client = client or api_client
    client.delete(f"/savings-goals/{id_goal}/{user_id}")


# POST /savings-goals/{idGoal}/{userId}/add
def add_to_savings_goal(id_goal: int, user_id: int, amount: float, client=None) -> Optional[SavingsGoal]:
    client = client or api_client
    payload = GoalTransactionRequest(amount=amount).model_dump()
    return _goal(client.post(f"/savings-goals/{id_goal}/{user_id}/add", json=payload))


# POST /savings-goals/{idGoal}/{userId}/withdraw
def withdraw_from_savings_goal(id_goal: int, user_id: int, amount: float, client=None) -> Optional[SavingsGoal]:
    client = client or api_client
    payload = GoalTransactionRequest(amount=amount).model_dump()
    return _goal(client.post(f"/savings-goals/{id_goal}/{user_id}/withdraw", json=payload))
