import json
import logging
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from slacker.core.errors import DeliveryFailed
from slacker.models.common import SlackMessage

logger = logging.getLogger(__name__)

# 웹훅 하나에 keep-alive 연결을 넉넉히 재사용
POOL_MAXSIZE = 128
DEFAULT_TIMEOUT = 10.0


def build_session(pool_maxsize: int = POOL_MAXSIZE) -> requests.Session:
    """커넥션 풀이 설정된 requests 세션을 만든다."""
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=1, pool_maxsize=pool_maxsize, max_retries=0)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def classify_response(body: str) -> str:
    """Slack 웹훅은 성공 시 본문으로 정확히 "ok"를 돌려준다. 그 외는 실패."""
    if body != "ok":
        raise DeliveryFailed(f"Response from Slack: {body}")
    return body


class SlackWebhookClient:
    """Slack incoming webhook 으로 메시지 1건을 POST 하는 클라이언트."""

    def __init__(
        self,
        webhook_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._session = session

    @property
    def session(self) -> requests.Session:
        # 세션이 주입되지 않았으면 첫 전송 때 만든다
        if self._session is None:
            self._session = build_session()
        return self._session

    def send(self, message: SlackMessage) -> str:
        """메시지를 전송하고 응답 본문("ok")을 반환한다. 실패 시 DeliveryFailed."""
        payload = message.model_dump()
        headers = {"Content-Type": "application/json"}

        try:
            resp = self.session.post(
                self.webhook_url,
                data=json.dumps(payload),
                headers=headers,
                timeout=(self.timeout, self.timeout),
            )
        except requests.RequestException as exc:
            raise DeliveryFailed(f"Slack webhook request failed: {exc}") from exc

        return classify_response(resp.text)

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
