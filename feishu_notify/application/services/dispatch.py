# feishu_notify/application/services/dispatch.py
from __future__ import annotations

from pathlib import Path
import logging

from feishu_notify.adapters.feishu_message import FeishuMessage, FeishuResponse
from feishu_notify.application.ports.notifier import Notifier
from feishu_notify.config import DispatchSettings
from feishu_notify.domain.mentions import resolve_mentions
from feishu_notify.domain.message_type import DEFAULT_MSG_TYPE, MsgType
from feishu_notify.errors import ConfigError

logger = logging.getLogger(__name__)


class DispatchService:
    """
    알림 전송 서비스

    책임:
    - 입력값 검증 (토큰, 메시지 소스, msg_type)
    - 메시지 본문 로딩 (직접 입력 또는 파일)
    - assignee 멘션 prefix 붙이기
    - Notifier 로 전송
    """

    def __init__(self, notifier: Notifier):
        """
        Args:
            notifier: 알림 전송 구현체
        """
        self.notifier = notifier

    def build_message(self, settings: DispatchSettings) -> FeishuMessage:
        if not settings.bot_token:
            raise ConfigError("Please set the BOT_TOKEN secret.")

        if not settings.post_message and not settings.message_file:
            raise ConfigError(
                "Please set the post message or a file containing the message."
            )

        text = settings.post_message or self._read_message_file(settings.message_file)

        # 멘션은 실패해도 본문 전송은 계속
        if settings.has_mention_data:
            prefix = resolve_mentions(settings.user_maps, settings.assignees)
            if prefix:
                logger.info("Prepending mentions: %s", prefix.strip())
                text = prefix + text
            else:
                logger.info("No assignee matched user_maps. Sending without mentions.")

        msg_type = self._parse_msg_type(settings.msg_type)
        return FeishuMessage.from_text(text, msg_type)

    async def dispatch(self, settings: DispatchSettings) -> FeishuResponse:
        """
        메시지를 조립해서 전송한다.

        Raises:
            DispatchError: 검증/전송/응답 실패
        """
        message = self.build_message(settings)
        return await self.notifier.send(settings.bot_token, message)

    @staticmethod
    def _read_message_file(path: str) -> str:
        try:
            # 줄바꿈(CRLF 등)은 파일 그대로 보낸다
            return Path(path).read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"File '{path}' not found: {exc}") from exc

    @staticmethod
    def _parse_msg_type(raw: str) -> MsgType:
        if not raw:
            return DEFAULT_MSG_TYPE
        try:
            return MsgType(raw)
        except ValueError:
            raise ConfigError(
                f"Unsupported MSG_TYPE: {raw}. Supported types: text, markdown"
            ) from None
