"""Tag tokenizer

입력 문자열에서 `<tag ...>` / `</tag>` 모양의 부분만 골라 토큰으로 만든다.
태그 모양이 아닌 `<`, `>` 는 매칭되지 않을 뿐 오류가 아니다.
"""
import re
from typing import Iterator, NamedTuple, Union

# 그룹: 1 = 닫는 태그 표시 '/', 2 = 태그 이름, 3 = 속성 구간 (원문 그대로)
TAG_PATTERN = re.compile(r"<(/)?([A-Za-z1-6]+)([^<>]*)>")


class TagToken(NamedTuple):
    is_closing: bool
    tag_name: str
    raw_attributes: str


class TextToken(NamedTuple):
    text: str


Token = Union[TagToken, TextToken]


def tokenize(html: str, include_text: bool = False) -> Iterator[Token]:
    pos = 0
    for match in TAG_PATTERN.finditer(html):
        if include_text:
            text = html[pos:match.start()]
            if text and not text.isspace():
                yield TextToken(text)
            pos = match.end()
        yield TagToken(match.group(1) == "/", match.group(2).lower(), match.group(3))

    if include_text:
        text = html[pos:]
        if text and not text.isspace():
            yield TextToken(text)


class Tokenizer:
    """재시작 가능한 토큰 시퀀스. iter() 할 때마다 처음부터 다시 스캔한다"""

    def __init__(self, html: str, include_text: bool = False):
        self.html = html
        self.include_text = include_text

    def __iter__(self) -> Iterator[Token]:
        return tokenize(self.html, self.include_text)
