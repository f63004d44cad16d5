# feishu_notify/application/ports/notifier.py
"""
알림 전송 포트 (인터페이스)

Secondary Port: 애플리케이션이 외부 메신저로 메시지를 보내기 위한 인터페이스
"""
from typing import Protocol

from feishu_notify.adapters.feishu_message import FeishuMessage, FeishuResponse


class Notifier(Protocol):
    """
    알림 전송 인터페이스

    이 Protocol을 구현하는 어댑터:
    - FeishuNotifier (adapters/feishu_notifier.py)

    Protocol을 사용하는 서비스:
    - dispatch.py (메시지 조립 후 전송)
    """

    async def send(self, bot_token: str, message: FeishuMessage) -> FeishuResponse:
        """
        봇 webhook 으로 메시지 전송

        Args:
            bot_token: webhook URL 마지막 segment
            message: 전송할 payload

        Returns:
            성공한 경우의 응답

        Raises:
            DispatchError: 직렬화/전송/응답 검증 실패
        """
        ...
