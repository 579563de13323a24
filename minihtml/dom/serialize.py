"""Tree -> structured data (dict / JSON)"""
import json
from typing import Optional

from .text import Text


def to_dict(node) -> dict:
    """{"tagName", "attributes", "children"?} 레코드로 변환 (children 이 없으면 키 생략)"""
    if isinstance(node, Text):
        return {"text": node.text}

    record = {"tagName": node.tag, "attributes": dict(node.attributes)}
    stack = [(node, record)]
    while stack:
        current, current_record = stack.pop()
        if not current.children:
            continue
        child_records = []
        for child in current.children:
            if isinstance(child, Text):
                child_records.append({"text": child.text})
            else:
                child_record = {"tagName": child.tag, "attributes": dict(child.attributes)}
                child_records.append(child_record)
                stack.append((child, child_record))
        current_record["children"] = child_records
    return record


def to_json(node, indent: Optional[int] = 2) -> str:
    """json.dumps(to_dict(node), indent=indent) 와 같은 문자열.

    json.dumps 는 중첩 깊이만큼 재귀하므로, 노드 단위는 명시적 스택으로 직접 쓰고
    스칼라와 속성 dict 만 json 모듈에 맡긴다.
    """
    if indent is None:
        item_sep = ", "

        def newline(level):
            return ""
    else:
        item_sep = ","

        def newline(level):
            return "\n" + " " * (indent * level)

    def dumps(value, level):
        text = json.dumps(value, indent=indent, ensure_ascii=False)
        # 여러 줄인 속성 dict 를 현재 깊이에 맞춰 다시 들여쓴다
        return text.replace("\n", newline(level)) if indent is not None else text

    parts = []
    stack = [(node, 0)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        current, level = item
        inner = newline(level + 1)
        if isinstance(current, Text):
            parts.append("{" + inner + '"text": ' + dumps(current.text, level + 1) + newline(level) + "}")
            continue

        parts.append(
            "{" + inner + '"tagName": ' + dumps(current.tag, level + 1)
            + item_sep + inner + '"attributes": ' + dumps(current.attributes, level + 1)
        )
        if not current.children:
            parts.append(newline(level) + "}")
            continue

        # 나중에 pop 되도록 닫는 부분부터 역순으로 push
        pending = ['"children": [']
        for i, child in enumerate(current.children):
            pending.append(item_sep if i else "")
            pending.append(newline(level + 2))
            pending.append((child, level + 2))
        pending.append(inner + "]" + newline(level) + "}")

        parts.append(item_sep + inner)
        for entry in reversed(pending):
            stack.append(entry)

    return "".join(parts)
