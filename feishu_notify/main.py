# feishu_notify/main.py
from __future__ import annotations

from typing import Mapping, Optional
import asyncio
import logging
import sys

from feishu_notify.application.ports.notifier import Notifier
from feishu_notify.config import load_settings
from feishu_notify.container import ServiceContainer
from feishu_notify.errors import DispatchError
from feishu_notify.logging_config import setup_logging

logger = logging.getLogger(__name__)

SUCCESS_NOTICE = "Message sent successfully"


def annotate(level: str, message: str, stream=None) -> None:
    """GitHub Actions workflow command 한 줄 출력 (::error:: / ::notice::)"""
    one_line = " ".join(str(message).splitlines())
    print(f"::{level}::{one_line}", file=stream or sys.stdout, flush=True)


def main(
    environ: Optional[Mapping[str, str]] = None,
    notifier: Optional[Notifier] = None,
) -> int:
    """
    알림 1건 전송

    Args:
        environ: 입력값을 읽을 환경. None 이면 os.environ
        notifier: 전송 구현체 교체용 (테스트)

    Returns:
        exit code. 성공 0, 실패 1
    """
    setup_logging()

    settings = load_settings(environ)
    container = ServiceContainer(settings, notifier=notifier)

    try:
        asyncio.run(container.dispatch_service.dispatch(settings))
    except DispatchError as exc:
        logger.error("Dispatch failed: %s", exc)
        annotate("error", str(exc), stream=sys.stderr)
        return 1

    annotate("notice", SUCCESS_NOTICE)
    return 0
