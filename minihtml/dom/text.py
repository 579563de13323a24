"""DOM Text node"""
from .node import Node


class Text(Node):
    """텍스트 콘텐츠를 나타내는 DOM 노드"""

    def __init__(self, text, parent=None):
        super().__init__(parent)
        self.text = text

    def __repr__(self) -> str:
        return repr(self.text)
