"""Forest serialization — JSON round-trip for selector trees.

Converts SelectorForest and SelectorNode to/from JSON-compatible dicts.
Useful for debugging, for diffing generated trees, and for handing the
tree to tools that produce something other than SCSS.

Example:
    from bemtree import parse
    from bemtree.serialization import to_json, from_json

    forest = parse('<div class="card card__body"></div>')
    restored = from_json(to_json(forest))
    assert forest == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from bemtree.errors import SerializationError
from bemtree.nodes import SelectorForest, SelectorNode

_FOREST_TYPE = "SelectorForest"
_NODE_TYPE = "SelectorNode"


def _node_to_dict(node: SelectorNode) -> dict[str, Any]:
    return {
        "_type": _NODE_TYPE,
        "name": node.name,
        "children": [_node_to_dict(child) for child in node.children],
    }


def to_dict(tree: SelectorForest | SelectorNode) -> dict[str, Any]:
    """Convert a forest or node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    """
    if isinstance(tree, SelectorForest):
        return {"_type": _FOREST_TYPE, "roots": [_node_to_dict(root) for root in tree]}
    return _node_to_dict(tree)


def _check_unique(nodes: tuple[SelectorNode, ...], what: str) -> None:
    names = [node.name for node in nodes]
    if len(set(names)) != len(names):
        raise SerializationError(f"Duplicate {what}: {names}")


def _node_from_dict(data: Any) -> SelectorNode:
    if not isinstance(data, dict) or data.get("_type") != _NODE_TYPE:
        raise SerializationError(f"Expected {_NODE_TYPE} dict, got {data!r}")
    name = data.get("name")
    if not isinstance(name, str):
        raise SerializationError(f"{_NODE_TYPE} name must be a string, got {name!r}")
    children = data.get("children", [])
    if not isinstance(children, list):
        raise SerializationError(f"{_NODE_TYPE} children must be a list, got {children!r}")

    nodes = tuple(_node_from_dict(child) for child in children)
    _check_unique(nodes, f"child names under {name!r}")
    return SelectorNode(name=name, children=nodes)


def from_dict(data: dict[str, Any]) -> SelectorForest | SelectorNode:
    """Reconstruct a forest or node from a dict.

    Raises:
        SerializationError: If the dict is not a serialized forest or node.

    """
    if isinstance(data, dict) and data.get("_type") == _FOREST_TYPE:
        roots = data.get("roots", [])
        if not isinstance(roots, list):
            raise SerializationError(f"{_FOREST_TYPE} roots must be a list, got {roots!r}")
        nodes = tuple(_node_from_dict(root) for root in roots)
        _check_unique(nodes, "block names")
        return SelectorForest(nodes)
    return _node_from_dict(data)


def to_json(tree: SelectorForest | SelectorNode, *, indent: int | None = None) -> str:
    """Serialize a forest or node to a JSON string.

    Output is deterministic (sorted keys).

    """
    return json.dumps(to_dict(tree), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(json_str: str) -> SelectorForest | SelectorNode:
    """Deserialize a JSON string produced by ``to_json``."""
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    return from_dict(data)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
