"""HTML tag-stream parser and tree builder"""
import logging
from dataclasses import replace
from typing import Optional

from ..common.errors import MismatchedTagError
from ..dom.element import Element
from ..dom.text import Text
from ..profiling import MeasureTime
from .attributes import parse_attributes
from .options import ParserOptions, RecoveryPolicy
from .tokenizer import TextToken, tokenize

logger = logging.getLogger(__name__)


class HTMLParser:
    """토큰 스트림을 한 번 훑으면서 트리를 만든다.

    상태는 커서(current) 하나뿐이다. 여는 태그는 커서 아래에 자식을 만들고
    그 자식으로 내려가며, 커서와 이름이 같은 닫는 태그는 부모로 올라간다.
    입력이 끝났을 때 커서가 루트로 돌아오지 않았어도 그대로 루트를 반환한다.
    """

    def __init__(self, body: str, options: Optional[ParserOptions] = None):
        if not isinstance(body, str):
            raise TypeError(f"HTML input must be str, not {type(body).__name__}")
        self.body = body
        self.options = options or ParserOptions()
        self.root: Optional[Element] = None
        self.current: Optional[Element] = None
        self.ignored_tags = 0

    @MeasureTime.trace("parse_html", "parsing")
    def parse(self) -> Element:
        self.root = Element(self.options.root_tag, {}, None)
        self.current = self.root
        self.ignored_tags = 0

        for token in tokenize(self.body, self.options.include_text):
            if isinstance(token, TextToken):
                self.add_text(token.text)
            elif token.is_closing:
                self.close_tag(token.tag_name)
            else:
                self.open_tag(token.tag_name, parse_attributes(token.raw_attributes))

        if self.current is not self.root:
            logger.debug("input ended inside <%s>", self.current.tag)
        if self.ignored_tags:
            logger.debug("ignored %d unmatched closing tag(s)", self.ignored_tags)
        return self.root

    def open_tag(self, tag: str, attributes: dict):
        node = Element(tag, attributes, self.current)
        self.current.children.append(node)
        self.current = node

    def close_tag(self, tag: str):
        # 루트에서는 이름과 무관하게 올라갈 곳이 없다
        if self.current is self.root:
            self._unmatched(tag)
            return
        if tag.casefold() != self.current.tag.casefold():
            self._unmatched(tag)
            return
        self.current = self.current.parent

    def add_text(self, text: str):
        node = Text(text, self.current)
        self.current.children.append(node)

    def _unmatched(self, tag: str):
        if self.options.recovery is RecoveryPolicy.STRICT:
            raise MismatchedTagError(self.current.tag, tag)
        logger.debug("ignoring </%s> while inside <%s>", tag, self.current.tag)
        self.ignored_tags += 1


def parse(html: str, options: Optional[ParserOptions] = None, **overrides) -> Element:
    """HTML 문자열을 파싱해서 루트 Element 반환.

    overrides 는 ParserOptions 필드 (recovery, include_text, root_tag).
    """
    options = options or ParserOptions()
    if overrides:
        options = replace(options, **overrides)
    return HTMLParser(html, options).parse()
