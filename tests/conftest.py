# tests/conftest.py

"""
pytest 설정 및 공통 fixture.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest
import requests

# 프로젝트 루트를 PYTHONPATH에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from slacker.core.alerts.slack_alert import SlackWebhookClient  # noqa: E402


class FakeResponse:
    def __init__(self, text: str):
        self.text = text


class FakeSession:
    """requests.Session 대역. 호출을 기록하고 미리 정한 응답을 순서대로 돌려준다.

    responses 항목이 Exception 인스턴스면 raise, 문자열이면 응답 본문으로 사용.
    목록이 비면 "ok".
    """

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []
        self.closed = False

    def post(self, url, data=None, headers=None, timeout=None):
        self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        result = self.responses.pop(0) if self.responses else "ok"
        if isinstance(result, Exception):
            raise result
        return FakeResponse(result)

    def close(self):
        self.closed = True


HOOK_URL = "https://hooks.slack.test/services/T000/B000/XXXX"


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return SlackWebhookClient(HOOK_URL, session=session)


@pytest.fixture
def clock():
    """고정 시각을 돌려주는 시계. clock.now 를 바꿔서 시간 이동."""

    class _Clock:
        now = datetime(2024, 1, 2, 15, 30, 0)

        def __call__(self):
            return self.now

    return _Clock()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "slacker.json"


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
