"""Retry Policy - 고정 간격 재시도

임의의 async 작업을 최대 N회 실행합니다. 실패 사이에는 고정 시간(지수 증가 없음)
대기하고, 모든 시도가 실패하면 마지막 예외를 그대로 다시 던집니다.
빈 결과를 성공으로 돌려주는 경우는 없습니다.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable, TypeVar

from search_scraper.core.config import settings
from search_scraper.core.exceptions import RetryExhaustedException
from search_scraper.core.logging import logger

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """재시도 정책

    Usage:
        policy = RetryPolicy(max_attempts=3, delay_s=1.0)
        await policy.run(lambda: session.navigate(page, url), description="navigate")
    """

    max_attempts: int = 3
    delay_s: float = 1.0
    retry_on: tuple[type[BaseException], ...] = field(default=(Exception,))

    @classmethod
    def from_settings(cls) -> "RetryPolicy":
        return cls(
            max_attempts=settings.retry_max_attempts,
            delay_s=settings.retry_delay_ms / 1000,
        )

    async def run(self, operation: Callable[[], Awaitable[T]], description: str = "operation") -> T:
        """작업 실행 (실패 시 재시도)

        Raises:
            RetryExhaustedException: max_attempts < 1 이라 한 번도 실행하지 못한 경우
            Exception: 마지막 시도의 예외 (그대로)
        """
        if self.max_attempts < 1:
            raise RetryExhaustedException(description, self.max_attempts)

        attempt = 1
        while True:
            try:
                return await operation()
            except self.retry_on as e:
                if attempt >= self.max_attempts:
                    raise
                logger.warning(
                    f"[Retry] {description}: attempt {attempt}/{self.max_attempts} failed "
                    f"({type(e).__name__}: {e}), retrying in {self.delay_s:.1f}s..."
                )
            await asyncio.sleep(self.delay_s)
            attempt += 1


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    delay_ms: int = 1000,
) -> T:
    """RetryPolicy 함수형 단축"""
    return await RetryPolicy(max_attempts=max_attempts, delay_s=delay_ms / 1000).run(operation)
