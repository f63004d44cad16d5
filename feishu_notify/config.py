# feishu_notify/config.py
"""
액션 입력값 로딩

GitHub Actions 는 inputs.bot_token 을 INPUT_BOT_TOKEN 으로 넘겨준다.
로컬 실행이나 기존 워크플로우 호환을 위해 BOT_TOKEN 같은 일반 환경변수도 받는다.
"""
from __future__ import annotations

from typing import Callable, Mapping, Optional, Sequence
import os

from dotenv import load_dotenv
from pydantic import BaseModel

from feishu_notify.adapters.feishu_notifier import FEISHU_WEBHOOK_BASE_URL

# .env 읽어오기 (이미 설정된 환경변수는 덮어쓰지 않음)
load_dotenv()

ACTION_INPUT_PREFIX = "INPUT_"


def action_input_name(key: str) -> str:
    # bot-token -> INPUT_BOT_TOKEN
    return ACTION_INPUT_PREFIX + key.replace("-", "_").upper()


def plain_env_name(key: str) -> str:
    return key.upper()


# 앞에서부터 시도해서 처음 나온 비어있지 않은 값을 사용
LOOKUP_CHAIN: Sequence[Callable[[str], str]] = (
    action_input_name,
    plain_env_name,
)


def get_input(key: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    key 에 해당하는 입력값 조회

    Args:
        key: 논리 키 (ex. "bot_token")
        environ: 조회할 환경. None 이면 os.environ

    Returns:
        찾은 값. 없으면 빈 문자열
    """
    env = os.environ if environ is None else environ
    for name_for in LOOKUP_CHAIN:
        value = env.get(name_for(key), "")
        if value:
            return value
    return ""


class DispatchSettings(BaseModel):
    """한 번의 실행에 필요한 입력값 모음. 검증은 DispatchService 에서 한다."""

    bot_token: str = ""
    post_message: str = ""
    message_file: str = ""
    msg_type: str = ""
    user_maps: str = ""
    assignees: str = ""
    webhook_base_url: str = FEISHU_WEBHOOK_BASE_URL

    @property
    def has_mention_data(self) -> bool:
        return bool(self.user_maps and self.assignees)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> DispatchSettings:
    values = {
        name: get_input(name, environ)
        for name in DispatchSettings.model_fields
    }
    # base url 은 비어 있으면 기본값 유지
    if not values["webhook_base_url"]:
        del values["webhook_base_url"]
    return DispatchSettings(**values)
