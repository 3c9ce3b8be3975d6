# -*- coding: utf-8 -*-
"""Location: ./configalchemy/values.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Generic value model shared by every format adapter.

Every decoder produces a tree built only from the types below and every
encoder consumes one:

- ``None``                      -> Null
- ``bool``                      -> Bool
- ``int`` / ``float``           -> Number
- ``str``                       -> String
- ``list``                      -> Sequence (order preserved)
- ``dict[str, Value]``          -> Mapping (insertion order preserved)

Decoders hand their native output to :func:`normalize`, which coerces the few
extra scalar types the libraries produce (timestamps, binary, sets) and
stringifies non-string mapping keys. Encoders that walk the tree themselves
dispatch on :func:`kind_of`, which refuses anything outside the closed set.

Examples:
    >>> from datetime import date
    >>> normalize({1: date(2024, 1, 2), None: {True: [1.5]}})
    {'1': '2024-01-02', 'null': {'true': [1.5]}}
    >>> kind_of([1, 2]).value
    'sequence'
    >>> kind_of(True) is ValueKind.BOOL
    True
"""

# Standard
import base64
from datetime import date, time
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

Value = Union[None, bool, int, float, str, List["Value"], Dict[str, "Value"]]
Mapping = Dict[str, Value]
Sequence = List[Value]


class ValueKind(str, Enum):
    """Closed set of value variants."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def kind_of(value: Any) -> ValueKind:
    """Classify a value tree node.

    ``bool`` is checked before the numeric types because it subclasses ``int``.

    Args:
        value: Node to classify.

    Returns:
        ValueKind: The variant of ``value``.

    Raises:
        TypeError: If ``value`` is not part of the value model.

    Examples:
        >>> kind_of(None)
        <ValueKind.NULL: 'null'>
        >>> kind_of(1) is kind_of(1.0) is ValueKind.NUMBER
        True
        >>> kind_of({"a": 1}).value
        'mapping'
        >>> kind_of(object())
        Traceback (most recent call last):
            ...
        TypeError: Object of type object is not a supported value
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.SEQUENCE
    if isinstance(value, dict):
        return ValueKind.MAPPING
    raise TypeError(f"Object of type {type(value).__name__} is not a supported value")


def stringify_key(key: Any) -> str:
    """Render a mapping key as a string, using JSON spelling for literals.

    Args:
        key: Key produced by a decoder.

    Returns:
        str: The key as text.

    Examples:
        >>> stringify_key("name")
        'name'
        >>> stringify_key(True), stringify_key(None), stringify_key(3)
        ('true', 'null', '3')
        >>> stringify_key(date(2024, 5, 1))
        '2024-05-01'
    """
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, (date, time)):
        return key.isoformat()
    return str(key)


class ExpansionLimitError(ValueError):
    """Raised when a decoded tree holds more nodes than allowed."""


def _sort_key(item: Any) -> Tuple[str, str]:
    """Order set members of mixed types deterministically.

    Args:
        item: Set member.

    Returns:
        Tuple[str, str]: Type name and text of ``item``.
    """
    return (type(item).__name__, str(item))


def normalize(native: Any, max_nodes: Optional[int] = None) -> Value:
    """Coerce decoder output into the value model.

    - ``datetime`` / ``date`` / ``time`` become ISO-8601 strings
    - ``bytes`` become base64 text
    - ``set`` / ``frozenset`` become sorted sequences
    - ``tuple`` becomes a sequence
    - mapping keys are stringified with :func:`stringify_key`; when two keys
      collapse onto the same string the later one wins

    The walk uses an explicit stack, so nesting depth is not bounded by the
    interpreter's recursion limit. Shared or self-referencing containers
    (YAML aliases) are copied at every place they appear; ``max_nodes`` bounds
    the size of the copied tree.

    Args:
        native: Tree returned by a format library.
        max_nodes: Largest number of nodes the result may hold; ``None`` for no limit.

    Returns:
        Value: An equivalent tree made only of model types.

    Raises:
        TypeError: If a node has no representation in the model.
        ExpansionLimitError: If the result would exceed ``max_nodes``.

    Examples:
        >>> normalize({"a": (1, 2), "b": b"hi"})
        {'a': [1, 2], 'b': 'aGk='}
        >>> normalize({1: "x", "1": "y"})
        {'1': 'y'}
        >>> normalize({"s": {"b", "a"}})
        {'s': ['a', 'b']}
        >>> shared = [1, 2]
        >>> normalize({"x": shared, "y": shared})
        {'x': [1, 2], 'y': [1, 2]}
        >>> normalize([[1, 2], [3, 4]], max_nodes=5)
        Traceback (most recent call last):
            ...
        configalchemy.values.ExpansionLimitError: Document expands to more than 5 values
        >>> normalize(complex(1, 2))
        Traceback (most recent call last):
            ...
        TypeError: Object of type complex is not a supported value
    """
    holder: List[Value] = [None]
    # (source node, output container, slot in that container)
    stack: List[Tuple[Any, Any, Any]] = [(native, holder, 0)]
    count = 0
    while stack:
        node, parent, slot = stack.pop()
        count += 1
        if max_nodes is not None and count > max_nodes:
            raise ExpansionLimitError(f"Document expands to more than {max_nodes} values")

        if node is None or isinstance(node, (bool, int, float, str)):
            parent[slot] = node
        elif isinstance(node, dict):
            mapping: Dict[str, Value] = {}
            parent[slot] = mapping
            children = [(stringify_key(key), item) for key, item in node.items()]
            for key, _item in children:
                mapping.setdefault(key, None)
            # pushed in reverse so later duplicates are assigned last
            for key, item in reversed(children):
                stack.append((item, mapping, key))
        elif isinstance(node, (list, tuple, set, frozenset)):
            items = sorted(node, key=_sort_key) if isinstance(node, (set, frozenset)) else node
            sequence: List[Value] = [None] * len(items)
            parent[slot] = sequence
            for index in range(len(items) - 1, -1, -1):
                stack.append((items[index], sequence, index))
        # datetime is a subclass of date
        elif isinstance(node, (date, time)):
            parent[slot] = node.isoformat()
        elif isinstance(node, (bytes, bytearray)):
            parent[slot] = base64.b64encode(bytes(node)).decode("ascii")
        else:
            raise TypeError(f"Object of type {type(node).__name__} is not a supported value")
    return holder[0]
