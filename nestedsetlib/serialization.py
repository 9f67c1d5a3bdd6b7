"""Record and JSON serialization for NestedSetLib.

A nested set serializes as an ordered array of node records:

    [{"id": 0, "node_name": "root", "level": 0, "left": 0, "right": 3}, ...]

Records come out in collection order, which is insertion order unless a
branch query has since sorted the collection by left bound.
"""

import json
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from .config import NestedSetConfig
from .core.nested_set import NestedSet
from .core.node import NestedNode, Node
from .errors import SerializationError

logger = logging.getLogger(__name__)

RECORD_FIELDS = ('id', 'node_name', 'level', 'left', 'right')

NodeFactory = Callable[[Dict[str, Any]], NestedNode]


def _default_factory(record: Dict[str, Any]) -> NestedNode:
    return Node(
        record['id'],
        record['node_name'],
        level=record['level'],
        left=record['left'],
        right=record['right'],
    )


def dump_records(nested_set: NestedSet) -> List[Dict[str, Any]]:
    """Return one record per node, in collection order."""
    return [node.to_dict() for node in nested_set.nodes()]


def dumps(nested_set: NestedSet, indent: Optional[int] = 2) -> str:
    """Serialize a nested set to JSON text.

    Args:
        nested_set: The nested set to serialize
        indent: JSON indentation (None for compact output)

    Returns:
        JSON array of node records
    """
    return json.dumps(dump_records(nested_set), indent=indent)


def load_records(records: Iterable[Dict[str, Any]],
                 node_factory: Optional[NodeFactory] = None,
                 config: Optional[NestedSetConfig] = None) -> NestedSet:
    """Rebuild a nested set from node records.

    The coordinates in the records are used as-is and must describe a
    valid tree.

    Args:
        records: Node records as produced by dump_records
        node_factory: Callable turning a record into a NestedNode
            (defaults to building Node instances)
        config: Configuration for the new container

    Returns:
        NestedSet holding the loaded nodes

    Raises:
        SerializationError: If a record is malformed
        IntegrityError: If the coordinates do not form a valid tree
    """
    factory = node_factory or _default_factory
    nodes = []

    for position, record in enumerate(records):
        if not isinstance(record, dict):
            raise SerializationError(f"Record {position} is not an object")

        missing = [name for name in RECORD_FIELDS if name not in record]
        if missing:
            raise SerializationError(
                f"Record {position} is missing fields: {', '.join(missing)}"
            )

        for name in ('level', 'left', 'right'):
            value = record[name]
            if isinstance(value, bool) or not isinstance(value, int):
                raise SerializationError(
                    f"Record {position} field {name!r} must be an integer, got {value!r}"
                )

        nodes.append(factory(record))

    logger.debug("Loaded %d node records", len(nodes))
    return NestedSet.from_nodes(nodes, config=config)


def loads(text: str,
          node_factory: Optional[NodeFactory] = None,
          config: Optional[NestedSetConfig] = None) -> NestedSet:
    """Rebuild a nested set from JSON text produced by dumps().

    Raises:
        SerializationError: If the text is not a JSON array of records
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise SerializationError("Expected a JSON array of node records")

    return load_records(data, node_factory=node_factory, config=config)
