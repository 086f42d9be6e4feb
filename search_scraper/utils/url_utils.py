"""URL 유틸리티"""
import re
from urllib.parse import quote, urljoin


_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z\d+.\-]*:")

# encodeURIComponent 가 그대로 두는 문자
_URI_COMPONENT_SAFE = "-_.!~*'()"


def has_scheme(href: str) -> bool:
    """'https:', 'mailto:' 처럼 스킴으로 시작하는지 여부"""
    return bool(href) and bool(_SCHEME_RE.match(href))


def encode_query_component(value: str) -> str:
    """검색어를 URL 쿼리 값으로 percent-encoding

    Examples:
        >>> encode_query_component("climate change")
        'climate%20change'
        >>> encode_query_component('"Review"[Publication Type]')
        '%22Review%22%5BPublication%20Type%5D'
    """
    return quote(value or "", safe=_URI_COMPONENT_SAFE)


def prefix_origin(href: str, origin: str) -> str:
    """스킴이 없는 href 앞에 사이트 origin을 붙입니다.

    - "" -> ""
    - "/watch?v=1" -> "{origin}/watch?v=1"
    - "https://..." -> 그대로
    """
    if not href:
        return ""
    if has_scheme(href) or not origin:
        return href
    return f"{origin.rstrip('/')}{href}" if href.startswith("/") else f"{origin}{href}"


def normalize_href(href: str, base_url: str = "") -> str:
    """상대/프로토콜-상대 href를 절대 URL로 정규화합니다.

    브라우저의 a.href 프로퍼티와 같은 결과를 host 쪽에서 만들 때 사용합니다.

    - "//host/path" -> "https://host/path"
    - "/path" -> urljoin(base_url, "/path")
    - "http(s)://..." -> 그대로
    """
    if not href:
        return ""

    h = href.strip()
    if not h:
        return ""

    if h.startswith("//"):
        return f"https:{h}"

    if has_scheme(h) or not base_url:
        return h

    return urljoin(base_url, h)
