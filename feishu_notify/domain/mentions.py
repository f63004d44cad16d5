# feishu_notify/domain/mentions.py
"""
assignee 목록과 사용자 매핑으로 Feishu @멘션 prefix 를 만든다.

- user_maps: "github_login:feishu_id,other:ou_xxxx" 형태의 문자열
- assignees: GitHub 이벤트의 assignees JSON (배열 또는 단일 객체)

멘션은 부가 기능이라 입력이 깨져 있어도 예외를 던지지 않는다.
최악의 경우 빈 문자열을 돌려주고 본 메시지 전송은 그대로 진행된다.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Set
import logging

from pydantic import BaseModel, TypeAdapter, ValidationError, model_validator

logger = logging.getLogger(__name__)

PAIR_SEPARATOR = ","
FIELD_SEPARATOR = ":"


class Assignee(BaseModel):
    """
    GitHub assignee 한 명.
    login 만 사용하고 나머지 필드(id, avatar_url 등)는 Pydantic 이 무시한다.
    "login" 키가 없으면 "Login" 처럼 대소문자만 다른 키도 받는다.
    """

    login: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _case_insensitive_login(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "login" in data:
            return data
        for key, value in data.items():
            if isinstance(key, str) and key.lower() == "login":
                return {**data, "login": value}
        return data


_ASSIGNEE_LIST = TypeAdapter(List[Assignee])


@dataclass(frozen=True)
class UserMapEntry:
    username: str     # 외부 시스템 사용자명 (GitHub login)
    external_id: str  # Feishu user_id / open_id


def parse_assignees(raw: str) -> List[Assignee]:
    """
    assignees JSON 을 Assignee 리스트로 파싱한다.

    배열로 먼저 시도하고, 실패하면 단일 객체로 다시 시도해서 1개짜리 리스트로 감싼다.
    둘 다 실패하면 빈 리스트.
    """
    if not raw:
        return []

    try:
        return _ASSIGNEE_LIST.validate_json(raw)
    except ValidationError:
        pass

    try:
        return [Assignee.model_validate_json(raw)]
    except ValidationError as exc:
        logger.debug("Ignoring malformed assignees payload: %s", exc)
        return []


def collect_logins(assignees: List[Assignee]) -> Set[str]:
    return {a.login for a in assignees if a.login}


def parse_user_maps(raw: str) -> List[UserMapEntry]:
    """
    "user:id,user:id" 문자열을 입력 순서대로 UserMapEntry 리스트로 만든다.

    - 앞뒤 공백은 조각/이름/ID 각각 trim
    - 빈 조각, 콜론이 없는 조각은 건너뜀
    - 첫 번째 콜론에서만 나누므로 ID 안의 콜론은 ID 에 남는다
    - 같은 username 이 여러 번 나와도 중복 제거하지 않는다
    """
    entries: List[UserMapEntry] = []
    for piece in raw.split(PAIR_SEPARATOR):
        piece = piece.strip()
        if not piece:
            continue

        username, sep, external_id = piece.partition(FIELD_SEPARATOR)
        if not sep:
            continue

        entries.append(UserMapEntry(username.strip(), external_id.strip()))
    return entries


def render_mention(entry: UserMapEntry) -> str:
    # Feishu text 메시지의 @ 포맷. escape 없이 그대로 넣는다.
    return f'<at user_id="{entry.external_id}">{entry.username}</at> '


def resolve_mentions(user_maps_raw: str, assignees_raw: str) -> str:
    """
    assignee 로 지정된 사용자 중 매핑이 있는 사용자만 @멘션 prefix 로 만든다.

    Args:
        user_maps_raw: "github_login:feishu_id,..." 매핑 문자열
        assignees_raw: assignees JSON (배열 또는 단일 객체)

    Returns:
        매핑 순서대로 이어붙인 멘션 토큰. 해당자가 없으면 빈 문자열.
    """
    if not user_maps_raw or not assignees_raw:
        return ""

    logins = collect_logins(parse_assignees(assignees_raw))
    if not logins:
        return ""

    return "".join(
        render_mention(entry)
        for entry in parse_user_maps(user_maps_raw)
        if entry.username in logins
    )
