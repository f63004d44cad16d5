# feishu_notify/adapters/feishu_notifier.py
"""
Feishu 커스텀 봇 Webhook 전송 어댑터
"""
from __future__ import annotations

from typing import Optional
import json
import logging

import httpx
from pydantic import ValidationError

from feishu_notify.adapters.feishu_message import FeishuMessage, FeishuResponse
from feishu_notify.errors import ResponseError, SerializationError, TransportError

logger = logging.getLogger(__name__)

FEISHU_WEBHOOK_BASE_URL = "https://open.feishu.cn/open-apis/bot/v2/hook"
DEFAULT_TIMEOUT = 30.0
JSON_CONTENT_TYPE = "application/json"


def _pretty(raw: bytes | str) -> str:
    """로그용 JSON 들여쓰기. JSON 이 아니면 원문 그대로."""
    try:
        return json.dumps(json.loads(raw), indent=2, ensure_ascii=False)
    except ValueError:
        return raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw


def _mask_token(token: str) -> str:
    if len(token) <= 4:
        return "*" * len(token)
    return f"{'*' * 10}...{token[-4:]}"


class FeishuNotifier:
    """Feishu 봇 Webhook 으로 text 메시지 전송"""

    def __init__(
        self,
        base_url: str = FEISHU_WEBHOOK_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: webhook base URL (뒤에 /<bot_token> 이 붙는다)
            timeout: 요청 타임아웃(초). 초과 시 재시도 없이 실패 처리
            transport: 테스트에서 httpx.MockTransport 를 끼우기 위한 용도
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def webhook_url(self, bot_token: str) -> str:
        return f"{self.base_url}/{bot_token}"

    async def send(self, bot_token: str, message: FeishuMessage) -> FeishuResponse:
        """
        메시지를 POST 하고 응답을 검증한다.

        Args:
            bot_token: webhook 토큰
            message: 전송할 payload

        Returns:
            HTTP 200 이고 code == 0 인 응답

        Raises:
            SerializationError: body 를 JSON 으로 만들 수 없음
            TransportError: 요청 생성 실패 (잘못된 토큰 문자 등), 네트워크 오류, 타임아웃
            ResponseError: 응답 파싱 실패 또는 실패 응답
        """
        try:
            body = message.model_dump_json().encode("utf-8")
        except ValueError as exc:
            raise SerializationError(f"Failed to marshal request body: {exc}") from exc

        url = self.webhook_url(bot_token)

        logger.info("=== Request Information ===")
        logger.info("URL: %s/%s", self.base_url, _mask_token(bot_token))
        logger.info("Method: POST")
        logger.info("Content-Type: %s", JSON_CONTENT_TYPE)
        logger.info("Request Body:\n%s", _pretty(body))

        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            try:
                request = client.build_request(
                    "POST",
                    url,
                    content=body,
                    headers={"Content-Type": JSON_CONTENT_TYPE},
                )
            except httpx.InvalidURL as exc:
                raise TransportError(f"Failed to create request: {exc}") from exc

            try:
                resp = await client.send(request)
            except httpx.RequestError as exc:
                raise TransportError(f"Failed to send request: {exc}") from exc

        logger.info("=== Response Information ===")
        logger.info("HTTP Status Code: %s", resp.status_code)
        logger.info("Response Body:\n%s", _pretty(resp.content))

        try:
            result = FeishuResponse.model_validate_json(resp.content)
        except ValidationError as exc:
            raise ResponseError(
                f"Failed to parse response: {exc.errors()[0]['msg']}",
                status_code=resp.status_code,
            ) from exc

        if resp.status_code != httpx.codes.OK or not result.ok:
            raise ResponseError(
                f"Request failed with code {result.code}: {result.msg}",
                status_code=resp.status_code,
                code=result.code,
                msg=result.msg,
            )

        return result
