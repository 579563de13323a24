"""Text rendering of a DOM tree (console / file)"""
import asyncio
import logging
import sys
from typing import Iterator, Optional, TextIO

from ..common.constants import DEFAULT_ENCODING, INDENT_WIDTH
from .element import Element, format_attributes
from .tree_utils import iter_nodes

logger = logging.getLogger(__name__)


def format_line(node, depth: int) -> str:
    """`<들여쓰기><tag> (k="v", ...)` 한 줄"""
    indent = " " * (INDENT_WIDTH * depth)
    if not isinstance(node, Element):
        return f"{indent}{node!r}"
    if not node.attributes:
        return f"{indent}{node.tag}"
    pairs = ", ".join(f'{key}="{value}"' for key, value in node.attributes.items())
    return f"{indent}{node.tag} ({pairs})"


def traverse_lines(node, depth: int = 0) -> Iterator[str]:
    for current, offset in iter_nodes(node):
        yield format_line(current, depth + offset)


def traverse(node, writer: Optional[TextIO] = None, depth: int = 0):
    """DOM 트리를 한 노드당 한 줄로 출력 (기본: stdout)"""
    if writer is None:
        writer = sys.stdout
    for line in traverse_lines(node, depth):
        writer.write(line + "\n")


def save_tree(node, file_path) -> None:
    with open(file_path, "w", encoding=DEFAULT_ENCODING) as f:
        traverse(node, f)
    logger.info("tree saved to %s", file_path)


async def save_tree_async(node, file_path) -> None:
    """save_tree 와 같은 출력. 한 줄 쓸 때마다 이벤트 루프에 양보한다"""
    with open(file_path, "w", encoding=DEFAULT_ENCODING) as f:
        for line in traverse_lines(node):
            await asyncio.to_thread(f.write, line + "\n")
    logger.info("tree saved to %s", file_path)


def pretty_print(node, writer: Optional[TextIO] = None):
    """HTML 비슷한 들여쓰기 덤프. 자식이 없는 요소는 한 줄로 연다/닫는다"""
    if writer is None:
        writer = sys.stdout

    stack = [(node, 0, False)]
    while stack:
        current, depth, closing = stack.pop()
        indent = " " * (INDENT_WIDTH * depth)

        if closing:
            writer.write(f"{indent}</{current.tag}>\n")
        elif not isinstance(current, Element):
            writer.write(f"{indent}{current.text}\n")
        elif not current.children:
            writer.write(f"{indent}<{current.tag}{format_attributes(current.attributes)}></{current.tag}>\n")
        else:
            writer.write(f"{indent}<{current.tag}{format_attributes(current.attributes)}>\n")
            stack.append((current, depth, True))
            for child in reversed(current.children):
                stack.append((child, depth + 1, False))
