"""DOM Tree utilities

모든 순회는 depth-first pre-order 이며, 닫히지 않은 태그가 많은 입력에서
트리가 매우 깊어질 수 있으므로 재귀 대신 명시적 스택을 사용한다.
"""
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .element import Element


def iter_nodes(node) -> Iterator[Tuple[object, int]]:
    """(node, depth) 를 pre-order 로 yield"""
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        yield current, depth
        for child in reversed(current.children):
            stack.append((child, depth + 1))


def iter_elements(node) -> Iterator[Element]:
    for current, _ in iter_nodes(node):
        if isinstance(current, Element):
            yield current


def tree_to_list(tree, result_list=None):
    """DOM 트리를 flat list로 변환"""
    if result_list is None:
        result_list = []
    result_list.extend(current for current, _ in iter_nodes(tree))
    return result_list


def find_by_condition(node, condition: Callable[[Element], bool]) -> List[Element]:
    return [element for element in iter_elements(node) if condition(element)]


def find_by_tag(node, tag: str) -> List[Element]:
    """tag 이름이 대소문자 무시하고 같은 요소들 (루트 포함)"""
    tag = tag.casefold()
    return find_by_condition(node, lambda el: el.tag.casefold() == tag)


def find_by_attribute(node, name: str, value: Optional[str] = None) -> List[Element]:
    """속성 name 을 가진 요소들. value 가 주어지면 정확히 일치하는 것만"""
    def condition(el):
        if name not in el.attributes:
            return False
        return value is None or el.attributes[name] == value

    return find_by_condition(node, condition)


def get_elements_by_class_name(node, class_name: str) -> List[Element]:
    return find_by_condition(
        node, lambda el: class_name in el.attributes.get("class", "").split()
    )


def get_elements_by_id(node, element_id: str) -> List[Element]:
    return find_by_condition(node, lambda el: el.attributes.get("id") == element_id)


def query_selector(node, selector: str) -> List[Element]:
    """`.class`, `#id`, 또는 태그 이름 하나만 지원"""
    selector = selector.strip()
    if not selector:
        raise ValueError("empty selector")
    if selector.startswith("."):
        return get_elements_by_class_name(node, selector[1:])
    if selector.startswith("#"):
        return get_elements_by_id(node, selector[1:])
    return find_by_tag(node, selector)


def build_id_index(node) -> Dict[str, Element]:
    """id -> element. 중복 id 는 마지막 요소가 이긴다"""
    index = {}
    for element in iter_elements(node):
        if "id" in element.attributes:
            index[element.attributes["id"]] = element
    return index
