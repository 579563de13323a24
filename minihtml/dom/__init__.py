# DOM (Document Object Model) components
from .element import Element
from .text import Text
from .tree_utils import (
    iter_nodes,
    iter_elements,
    tree_to_list,
    find_by_tag,
    find_by_attribute,
    get_elements_by_class_name,
    get_elements_by_id,
    query_selector,
    build_id_index,
)
from .serialize import to_dict, to_json
from .viewer import traverse, save_tree, save_tree_async, pretty_print

__all__ = [
    'Element',
    'Text',
    'iter_nodes',
    'iter_elements',
    'tree_to_list',
    'find_by_tag',
    'find_by_attribute',
    'get_elements_by_class_name',
    'get_elements_by_id',
    'query_selector',
    'build_id_index',
    'to_dict',
    'to_json',
    'traverse',
    'save_tree',
    'save_tree_async',
    'pretty_print',
]
