"""엔진별 추출 프로필 (URL 템플릿 + 필드 셀렉터).

프로필은 순수 설정 데이터입니다. 브라우저 안의 JS 추출기와 host 쪽 selectolax
파서가 같은 descriptor(dict)를 받아 동일한 규칙으로 필드를 채웁니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from search_scraper.core.exceptions import UnknownEngineException
from search_scraper.utils.url_utils import encode_query_component


@dataclass(frozen=True)
class FieldRule:
    """컨테이너 안에서 필드 하나를 읽는 규칙

    Attributes:
        selector: 컨테이너 기준 CSS 셀렉터 (None이면 컨테이너 자신)
        attribute: 읽을 속성 이름 (None이면 textContent)
        live: True면 getAttribute 대신 DOM 프로퍼티(el.href 등, 절대 URL)를 읽음
        origin: 값에 스킴이 없을 때 앞에 붙일 사이트 origin
        strip: 앞뒤 공백 제거 여부
    """

    selector: Optional[str]
    attribute: Optional[str] = None
    live: bool = False
    origin: Optional[str] = None
    strip: bool = True

    def to_descriptor(self) -> dict[str, Any]:
        return {
            "selector": self.selector,
            "attribute": self.attribute,
            "live": self.live,
            "origin": self.origin,
            "strip": self.strip,
        }


@dataclass(frozen=True)
class ExtractionProfile:
    """검색 엔진 하나에 대한 추출 프로필"""

    engine: str
    category: str
    display_name: str
    search_url: str
    container: str
    fields: Mapping[str, FieldRule]
    query_filter: Optional[str] = None
    extra_fields: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if "{query}" not in self.search_url:
            raise ValueError(f"search_url for {self.engine} must contain '{{query}}'")
        # frozen이므로 object.__setattr__ 로 읽기 전용 매핑을 고정
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def full_query(self, query: str) -> str:
        """필터 절이 있는 엔진은 검색어와 AND로 결합"""
        if self.query_filter:
            return f"{query} AND {self.query_filter}"
        return query

    def build_url(self, query: str) -> str:
        return self.search_url.format(query=encode_query_component(self.full_query(query)))

    def to_descriptor(self) -> dict[str, Any]:
        """브라우저 경계를 넘길 순수 데이터 형태"""
        return {
            "engine": self.engine,
            "container": self.container,
            "fields": {name: rule.to_descriptor() for name, rule in self.fields.items()},
        }


YOUTUBE_ORIGIN = "https://www.youtube.com"
PUBMED_ORIGIN = "https://pubmed.ncbi.nlm.nih.gov"

# RCT / 메타분석 / 리뷰로 한정
PUBMED_PUBLICATION_FILTER = (
    '("Randomized controlled trial"[Publication Type] OR '
    '"Meta-Analysis"[Publication Type] OR '
    '"Review"[Publication Type])'
)


GOOGLE = ExtractionProfile(
    engine="google",
    category="web",
    display_name="Google",
    search_url="https://www.google.com/search?q={query}",
    container=".tF2Cxc",
    fields={
        "title": FieldRule(".LC20lb", strip=False),
        "url": FieldRule(".yuRUbf > a", attribute="href", live=True),
        "snippet": FieldRule(".VwiCzo", strip=False),
    },
)

DUCKDUCKGO = ExtractionProfile(
    engine="duckduckgo",
    category="web",
    display_name="DuckDuckGo",
    search_url="https://duckduckgo.com/?q={query}",
    container=".results_wrapper .web-results .result",
    fields={
        "title": FieldRule("a.result__a"),
        "url": FieldRule("a.result__a", attribute="href", live=True),
        "snippet": FieldRule(".result__snippet"),
    },
)

YOUTUBE = ExtractionProfile(
    engine="youtube",
    category="video",
    display_name="YouTube",
    search_url="https://www.youtube.com/results?search_query={query}",
    container="#contents ytd-item-section-renderer > div > ytd-video-renderer",
    fields={
        "title": FieldRule("#video-title"),
        "url": FieldRule("#video-title", attribute="href", origin=YOUTUBE_ORIGIN),
        "snippet": FieldRule("#description-text"),
    },
)

PUBMED = ExtractionProfile(
    engine="pubmed",
    category="literature",
    display_name="PubMed",
    search_url="https://pubmed.ncbi.nlm.nih.gov/?term={query}",
    container=".pubmed-citation-list > .pubmed-citation",
    fields={
        "title": FieldRule(".docsum-title"),
        "url": FieldRule(".docsum-title > a", attribute="href", origin=PUBMED_ORIGIN),
        "authors": FieldRule(".docsum-authors"),
        "journal": FieldRule(".docsum-journal"),
        "snippet": FieldRule(".full-citation"),
    },
    query_filter=PUBMED_PUBLICATION_FILTER,
    extra_fields=("authors", "journal"),
)


PROFILES: Mapping[str, ExtractionProfile] = MappingProxyType(
    {p.engine: p for p in (GOOGLE, DUCKDUCKGO, YOUTUBE, PUBMED)}
)


def available_engines() -> list[str]:
    return list(PROFILES.keys())


def is_registered(engine: Optional[str], profiles: Optional[Mapping[str, ExtractionProfile]] = None) -> bool:
    registry = PROFILES if profiles is None else profiles
    return bool(engine) and engine in registry


def get_profile(engine: str, profiles: Optional[Mapping[str, ExtractionProfile]] = None) -> ExtractionProfile:
    """엔진 이름으로 프로필 조회

    Raises:
        UnknownEngineException: 등록되지 않은 엔진
    """
    registry = PROFILES if profiles is None else profiles
    profile = registry.get(engine) if engine else None
    if profile is None:
        raise UnknownEngineException(str(engine))
    return profile
