# feishu_notify/errors.py
"""
전송 실패 유형

모두 DispatchError 를 상속하고 main() 에서만 잡아서 exit code 1 로 바꾼다.
"""
from __future__ import annotations

from typing import Optional


class DispatchError(Exception):
    """알림 전송 실패 (치명적)"""


class ConfigError(DispatchError):
    """필수 설정 누락, 지원하지 않는 msg_type, 메시지 파일 읽기 실패"""


class SerializationError(DispatchError):
    """요청 body 직렬화 실패"""


class TransportError(DispatchError):
    """요청 생성/전송 실패 (타임아웃 포함)"""


class ResponseError(DispatchError):
    """응답을 읽지 못했거나 성공 응답이 아님"""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[int] = None,
        msg: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.msg = msg
