"""Shared parent-link handling for DOM nodes"""
import weakref


class Node:
    """부모는 소유하지 않는 약한 참조로만 보관한다 (자식 소유는 부모의 children 리스트)"""

    def __init__(self, parent=None):
        self.children = []
        self._parent_ref = None
        self.parent = parent

    @property
    def parent(self):
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, node):
        self._parent_ref = weakref.ref(node) if node is not None else None

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth
