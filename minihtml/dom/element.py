"""DOM Element node"""
from typing import Dict, List, Optional

from .node import Node
from .text import Text


def format_attributes(attributes) -> str:
    """` k="v" k2="v2"` 형태 (속성이 없으면 빈 문자열)"""
    if not attributes:
        return ""
    return " " + " ".join(f'{key}="{value}"' for key, value in attributes.items())


class Element(Node):
    """HTML Element를 나타내는 DOM 노드"""

    def __init__(self, tag, attributes=None, parent=None):
        super().__init__(parent)
        self.tag = tag
        self.attributes: Dict[str, str] = attributes if attributes is not None else {}

    def __repr__(self) -> str:
        return f"<{self.tag}>"

    def __str__(self) -> str:
        return f"<{self.tag}{format_attributes(self.attributes)}>"

    # --- tree editing ---

    def add_child(self, tag: str, attributes: Optional[Dict[str, str]] = None) -> "Element":
        child = Element(tag.lower(), dict(attributes) if attributes else {}, self)
        self.children.append(child)
        return child

    def add_text(self, text: str) -> Text:
        node = Text(text, self)
        self.children.append(node)
        return node

    def remove_child(self, node) -> None:
        # 구조적으로 같은 다른 노드가 아니라 바로 그 객체를 제거
        for i, child in enumerate(self.children):
            if child is node:
                del self.children[i]
                node.parent = None
                return
        raise ValueError(f"{node!r} is not a child of {self!r}")

    # --- text ---

    @property
    def inner_text(self) -> str:
        from .tree_utils import iter_nodes
        return "".join(node.text for node, _ in iter_nodes(self) if isinstance(node, Text))

    @inner_text.setter
    def inner_text(self, value: str):
        if self.children and isinstance(self.children[0], Text):
            self.children[0].text = value
        else:
            self.children.insert(0, Text(value, self))

    # --- search (tree_utils 위임) ---

    def find_by_tag(self, tag: str) -> List["Element"]:
        from .tree_utils import find_by_tag
        return find_by_tag(self, tag)

    def find_by_attribute(self, name: str, value: Optional[str] = None) -> List["Element"]:
        from .tree_utils import find_by_attribute
        return find_by_attribute(self, name, value)

    def query_selector(self, selector: str) -> List["Element"]:
        from .tree_utils import query_selector
        return query_selector(self, selector)

    def build_id_index(self) -> Dict[str, "Element"]:
        from .tree_utils import build_id_index
        return build_id_index(self)

    def to_dict(self) -> dict:
        from .serialize import to_dict
        return to_dict(self)

    def to_json(self, indent: Optional[int] = 2) -> str:
        from .serialize import to_json
        return to_json(self, indent)
