"""렌더링된 DOM 직렬화 결과(HTML)를 host 쪽에서 파싱.

extraction_mode=html 일 때 사용합니다. page.content()로 받은 HTML에 대해
브라우저 추출기와 같은 descriptor 규칙을 selectolax로 적용합니다.
네트워크와 분리된 순수 파싱 로직만 담습니다.
"""

from __future__ import annotations

from typing import Any, Optional

from selectolax.parser import HTMLParser, Node

from search_scraper.core.logging import logger
from search_scraper.utils.url_utils import normalize_href, prefix_origin

from .profiles import ExtractionProfile, FieldRule


def _read_field(root: Node, rule: FieldRule, base_url: str) -> str:
    el: Optional[Node] = root.css_first(rule.selector) if rule.selector else root
    if el is None:
        return ""

    if not rule.attribute:
        value = el.text(deep=True) or ""
    else:
        value = el.attributes.get(rule.attribute) or ""
        if rule.live:
            # el.href 프로퍼티처럼 문서 URL 기준 절대 경로로 변환
            value = normalize_href(value, base_url)

    if rule.strip:
        value = value.strip()

    if rule.origin:
        value = prefix_origin(value, rule.origin)

    return value


def parse_results_html(html: str, profile: ExtractionProfile, base_url: str = "") -> list[dict[str, str]]:
    """HTML에서 프로필의 컨테이너마다 row 하나를 만듭니다.

    Args:
        html: 렌더링된 문서 HTML
        profile: 엔진 추출 프로필
        base_url: live 속성(href 등)을 절대 URL로 만들 때 쓰는 문서 URL

    Returns:
        필드명 → 문자열 dict 목록 (DOM 순서). 매칭된 컨테이너가 없으면 빈 리스트.
    """
    if not html:
        return []

    parser = HTMLParser(html)
    rows: list[dict[str, str]] = []
    for container in parser.css(profile.container):
        row: dict[str, Any] = {}
        for name, rule in profile.fields.items():
            row[name] = _read_field(container, rule, base_url)
        rows.append(row)

    logger.debug(f"[Parsing] {profile.engine}: {len(rows)} container(s) matched")
    return rows
