"""Timeout Guard - 단일 비동기 작업에 데드라인 걸기

데드라인이 먼저 오면 TimeoutException을 던지고, 원래 작업은 취소하지 않고
백그라운드에서 끝나도록 둡니다 (결과는 버림). 호출자가 취소되어도
가드된 작업은 자기 타임아웃까지 계속 진행됩니다.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Optional, Set, TypeVar

from dealscope.core.config import settings
from dealscope.core.exceptions import TimeoutException
from dealscope.core.logging import logger

T = TypeVar("T")


class TimeoutGuard:
    """데드라인 경주(race) 래퍼

    Usage:
        guard = TimeoutGuard(default_deadline_ms=4000)
        try:
            outcome = await guard.run(adapter.fetch(query, page), name="amazon")
        except TimeoutException:
            outcome = ProviderOutcome.empty()
    """

    def __init__(self, default_deadline_ms: Optional[int] = None):
        self.default_deadline_ms = default_deadline_ms or settings.provider_timeout_ms
        if self.default_deadline_ms <= 0:
            raise ValueError("default_deadline_ms must be positive")
        # 타임아웃 후 분리된 작업 (GC 방지용 참조)
        self._detached: Set[asyncio.Future] = set()

    async def run(
        self,
        operation: Awaitable[T],
        deadline_ms: Optional[int] = None,
        *,
        name: str = "operation",
    ) -> T:
        """작업 실행

        Args:
            operation: 코루틴 또는 future
            deadline_ms: 데드라인 (없으면 기본값)
            name: 로그/예외에 쓰일 작업 이름

        Returns:
            작업 결과 (작업이 던진 예외는 그대로 전파)

        Raises:
            TimeoutException: 데드라인 초과
        """
        deadline = deadline_ms or self.default_deadline_ms
        task = asyncio.ensure_future(operation)

        done, _ = await asyncio.wait({task}, timeout=deadline / 1000.0)
        if task in done:
            return task.result()

        self._detach(task, name)
        raise TimeoutException(name, deadline)

    def _detach(self, task: asyncio.Future, name: str) -> None:
        self._detached.add(task)

        def _settled(fut: asyncio.Future) -> None:
            self._detached.discard(fut)
            if fut.cancelled():
                return
            exc = fut.exception()
            if exc is not None:
                logger.debug(f"[TIMEOUT_GUARD] late failure discarded: {name}: {type(exc).__name__}")
            else:
                logger.debug(f"[TIMEOUT_GUARD] late result discarded: {name}")

        task.add_done_callback(_settled)

    @property
    def pending_count(self) -> int:
        """데드라인 이후에도 아직 진행 중인 작업 수"""
        return len(self._detached)
