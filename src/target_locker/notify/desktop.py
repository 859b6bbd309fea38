# src/target_locker/notify/desktop.py

from __future__ import annotations

import logging

from plyer import notification as plyer_notification

from ..core.ports import PermissionPrompt

logger = logging.getLogger(__name__)


class DesktopNotifier:
    """
    Desktop notifications through plyer.

    The OS has no per-app permission prompt we can rely on, so the permission
    gate lives here: it starts from configuration and changes only when
    request_permission() gets an answer from the injected prompt.
    """

    def __init__(
        self,
        *,
        enabled: bool = True,
        permission: str = "default",
        prompt: PermissionPrompt | None = None,
        app_name: str = "Target Locker",
        timeout: int = 10,
    ) -> None:
        self._enabled = enabled
        self._permission = permission
        self._prompt = prompt
        self._app_name = app_name
        self._timeout = timeout

    def is_available(self) -> bool:
        return self._enabled

    def current_permission(self) -> str:
        return self._permission

    async def request_permission(self) -> str:
        if self._permission != "default":
            return self._permission
        if self._prompt is None:
            logger.debug("No permission prompt configured; keeping %s", self._permission)
            return self._permission

        allowed = await self._prompt()
        self._permission = "granted" if allowed else "denied"
        return self._permission

    def show(self, title: str, body: str) -> None:
        # plyer raises NotImplementedError on platforms without a backend;
        # the gateway logs it and moves on.
        plyer_notification.notify(
            title=title,
            message=body,
            app_name=self._app_name,
            timeout=self._timeout,
        )
