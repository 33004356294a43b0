"""
Result Renderer: 분석 markdown → HTML.

- 모델 출력은 신뢰하지 않음 → raw HTML은 마크업으로 해석하지 않고 텍스트로 출력
  (markdown 문법의 '>' 인용, 코드 안의 '<' 등은 그대로 동작)
- 링크/이미지 URL은 http(s)/mailto/상대 경로만 허용
- 섹션 구조는 검증하지 않음 (없는 섹션은 목차에서 빠질 뿐)
"""

import re
from xml.etree import ElementTree

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from src.app.prompts import SECTION_HEADERS

SAFE_URL_SCHEMES = ("http", "https", "mailto")

_HEADER_PATTERN = re.compile(r"^#{1,6}\s+(.+?)\s*#*\s*$", re.MULTILINE)


def is_safe_url(url: str) -> bool:
    """javascript:, data: 등 스킴 차단. 스킴 없는 상대 경로/앵커는 허용."""
    compact = "".join(ch for ch in url if ch.isprintable() and not ch.isspace()).lower()
    scheme, sep, _ = compact.partition(":")
    if not sep or any(ch in scheme for ch in "/?#"):
        return True
    return scheme in SAFE_URL_SCHEMES


class UnsafeUrlStripper(Treeprocessor):
    """허용되지 않은 href/src 속성 제거."""

    def run(self, root: ElementTree.Element) -> None:
        for element in root.iter():
            for attr in ("href", "src"):
                value = element.get(attr)
                if value is not None and not is_safe_url(value):
                    del element.attrib[attr]


class SafeModelOutputExtension(Extension):
    """raw HTML 블록/인라인 태그 처리 비활성화 → 직렬화 시 escape된 텍스트로 남음."""

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")
        # inline(20) 처리 이후 실행
        md.treeprocessors.register(UnsafeUrlStripper(md), "unsafe_url", 5)


def build_markdown_extensions() -> list:
    return ["sane_lists", "nl2br", "toc", SafeModelOutputExtension()]


def render_markdown(text: str) -> str:
    """markdown 텍스트 → 안전한 HTML 조각."""
    return markdown.markdown(text, extensions=build_markdown_extensions())


def find_sections(text: str) -> list[str]:
    """
    응답에 실제로 있는 기대 섹션 목록 (기대 순서 유지).

    헤더 비교는 대소문자/앞뒤 공백/굵게 표시(**) 무시.
    """
    found = {
        match.group(1).strip("* ").upper()
        for match in _HEADER_PATTERN.finditer(text)
    }
    return [header for header in SECTION_HEADERS if header in found]


def section_anchor(header: str) -> str:
    """섹션 헤더 → toc 확장이 만드는 id (예: 'PRICE ESTIMATE' → 'price-estimate')."""
    return "-".join(header.lower().split())
