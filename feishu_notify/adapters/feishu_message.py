# feishu_notify/adapters/feishu_message.py
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, field_validator

from feishu_notify.domain.message_type import MsgType

OK_CODE = 0


class TextContent(BaseModel):
    """
    Feishu 커스텀 봇 text 메시지의 content.
    ex) { "text": "<at user_id=\"ou_xxx\">octocat</at> Build failed" }
    """

    text: str


class FeishuMessage(BaseModel):
    """
    Feishu 커스텀 봇 webhook 요청 payload.

    - msg_type 은 항상 "text" (markdown 도 text 로 전송)
    - content.text 에 멘션 prefix 가 포함된 최종 본문이 들어간다.
    """

    msg_type: str = MsgType.TEXT.value
    content: TextContent

    @classmethod
    def from_text(cls, body: str, msg_type: MsgType = MsgType.TEXT) -> "FeishuMessage":
        return cls(msg_type=msg_type.wire_value, content=TextContent(text=body))


class FeishuResponse(BaseModel):
    """
    Feishu webhook 응답.
    ex) { "code": 0, "msg": "success", "data": {} }

    code / msg 가 없거나 null 이면 0 / "" 로 본다. 모르는 필드는 무시한다.
    """

    code: int = OK_CODE
    msg: str = ""
    data: Optional[Dict[str, Any]] = None

    @field_validator("code", mode="before")
    @classmethod
    def _null_code(cls, value: Any) -> Any:
        return OK_CODE if value is None else value

    @field_validator("msg", mode="before")
    @classmethod
    def _null_msg(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def ok(self) -> bool:
        return self.code == OK_CODE
