# -*- coding: utf-8 -*-
"""Location: ./configalchemy/formats/yaml_format.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

YAML adapter backed by PyYAML.

Only the safe loader and dumper are used, so documents cannot instantiate
Python objects. Anchors and aliases are resolved by the loader into shared
objects; normalizing copies them out, and the copied tree may hold at most
one node per byte of the content ceiling (``settings.max_content_bytes``),
which alias-free documents within the ceiling stay well below. An empty document
decodes to ``None``.

Examples:
    >>> adapter = YamlFormat()
    >>> adapter.decode("database:\\n  host: localhost\\n  port: 5432")
    {'database': {'host': 'localhost', 'port': 5432}}
    >>> print(adapter.encode({"name": "test", "version": "1.0.0"}), end="")
    name: test
    version: 1.0.0
    >>> adapter.decode("") is None
    True
"""

# Third-Party
import yaml

# First-Party
from configalchemy.config import settings
from configalchemy.formats.base import FormatAdapter
from configalchemy.values import normalize, Value


class YamlFormat(FormatAdapter):
    """YAML in block style."""

    name = "yaml"
    label = "YAML"

    def decode(self, text: str) -> Value:
        """Parse a single YAML document.

        Args:
            text: YAML text.

        Returns:
            Value: Decoded tree.
        """
        return normalize(yaml.safe_load(text), max_nodes=settings.max_content_bytes)

    def encode(self, value: Value) -> str:
        """Dump a tree as block-style YAML, keeping key order.

        Args:
            value: Tree to render.

        Returns:
            str: YAML text.
        """
        return yaml.safe_dump(value, default_flow_style=False, sort_keys=False, allow_unicode=True)
