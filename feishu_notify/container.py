# feishu_notify/container.py
"""
의존성 조립 (Dependency Assembly)
"""
from __future__ import annotations

from typing import Optional

from feishu_notify.adapters.feishu_notifier import FeishuNotifier
from feishu_notify.application.ports.notifier import Notifier
from feishu_notify.application.services.dispatch import DispatchService
from feishu_notify.config import DispatchSettings


class ServiceContainer:
    """
    서비스 컨테이너

    실행 한 번에 필요한 의존성을 생성하고 조립합니다.
    notifier 를 넘기면 그대로 사용합니다 (테스트용).
    """

    def __init__(self, settings: DispatchSettings, notifier: Optional[Notifier] = None):
        # Adapter 생성
        self._notifier = notifier or FeishuNotifier(base_url=settings.webhook_base_url)

        # Services 생성
        self._dispatch_service = DispatchService(self._notifier)

    @property
    def notifier(self) -> Notifier:
        """Notifier 인스턴스"""
        return self._notifier

    @property
    def dispatch_service(self) -> DispatchService:
        """DispatchService 인스턴스"""
        return self._dispatch_service
