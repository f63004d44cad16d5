# feishu_notify/domain/message_type.py
from enum import Enum


class MsgType(str, Enum):
    """
    사용자가 고를 수 있는 메시지 유형.

    - TEXT: 일반 텍스트
    - MARKDOWN: 마크다운 문법이 섞인 텍스트. Feishu 는 text 타입 안에서도
      마크다운을 렌더링하므로 전송 시에는 TEXT 와 같은 wire 포맷을 쓴다.
    """

    TEXT = "text"
    MARKDOWN = "markdown"

    @property
    def wire_value(self) -> str:
        """Feishu 로 실제 전송되는 msg_type 값"""
        return MsgType.TEXT.value


DEFAULT_MSG_TYPE = MsgType.TEXT
