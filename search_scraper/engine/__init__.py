"""Engine Layer - retry, pipeline, result store

- SearchPipeline: (engine, query) → ResultRecord 목록
- RetryPolicy / with_retry: 고정 간격 재시도
- ResultStore: 프로세스 단위 결과 로그 + 스냅샷
"""

from .pipeline import SearchPipeline
from .retry import RetryPolicy, with_retry
from .store import ResultStore

__all__ = [
    "SearchPipeline",
    "RetryPolicy",
    "with_retry",
    "ResultStore",
]
