"""Attribute extraction from the raw attribute segment of a tag"""
import re
from typing import Dict

# name="value" 또는 name 단독. 값의 엔티티는 디코딩하지 않는다
ATTRIBUTE_PATTERN = re.compile(r'(\w+)(="([^"]*)")?')


def parse_attributes(segment: str) -> Dict[str, str]:
    attributes = {}
    for match in ATTRIBUTE_PATTERN.finditer(segment):
        # 같은 이름이 다시 나오면 나중 값이 덮어쓴다
        attributes[match.group(1)] = match.group(3) or ""
    return attributes
