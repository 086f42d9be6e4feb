"""Search crawler modules (Playwright + extraction profiles).

공개 API는 이 파일에서만 export합니다.
"""

from .profiles import (
    ExtractionProfile,
    FieldRule,
    PROFILES,
    available_engines,
    get_profile,
    is_registered,
)
from .parsing import parse_results_html

__all__ = [
    "ExtractionProfile",
    "FieldRule",
    "PROFILES",
    "available_engines",
    "get_profile",
    "is_registered",
    "parse_results_html",
]
