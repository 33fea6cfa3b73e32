import os

import pytest

# Keep the real backend out of reach for every test
os.environ.setdefault("API_BASE_URL", "http://backend.test/api/v1")
os.environ.pop("DEFAULT_USER_ID", None)


class FakeClient:
    """Records calls made through the ApiClient interface and replays canned bodies."""

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def _answer(self, method, path, **kwargs):
        self.calls.append((method, path, kwargs))
        body = self.responses.get((method, path))
        if isinstance(body, Exception):
            raise body
        return body

    def get(self, path, params=None):
        return self._answer("GET", path, params=params)

    def post(self, path, json=None):
        return self._answer("POST", path, json=json)

    def put(self, path, json=None):
        return self._answer("PUT", path, json=json)

    def delete(self, path):
        return self._answer("DELETE", path)


class RecordingNotifier:
    def __init__(self):
        self.successes = []
        self.errors = []

    def success(self, message):
        self.successes.append(message)

    def error(self, message):
        self.errors.append(message)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def notifier():
    return RecordingNotifier()


def goal_json(**overrides):
    goal = {
        "idGoal": 7,
        "name": "Vacaciones",
        "targetAmount": 1000.0,
        "currentAmount": 250.0,
        "startDate": "2026-01-01",
        "endDate": "2026-12-31",
        "priority": "HIGH",
        "status": "IN_PROGRESS",
        "frequency": "MONTHLY",
    }
    goal.update(overrides)
    return goal


@pytest.fixture
def make_goal():
    return goal_json
