# -*- coding: utf-8 -*-
"""Location: ./configalchemy/formats/base.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Base class for format adapters.

An adapter pairs a decoder (text -> value tree) with an encoder
(value tree -> text) for one textual format. Adapters let the underlying
library's exception propagate; the conversion service classifies it.
"""

# Standard
from abc import ABC, abstractmethod

# First-Party
from configalchemy.values import Value


class FormatAdapter(ABC):
    """Decode/encode pair for one format.

    Attributes:
        name: Lower-case format tag used in requests, e.g. ``"json"``.
        label: Upper-case tag used in error codes and messages.
        can_decode: False when the format is accepted only as a target.
    """

    name: str = ""
    label: str = ""
    can_decode: bool = True

    @abstractmethod
    def decode(self, text: str) -> Value:
        """Parse ``text`` into a value tree.

        Args:
            text: Source document.

        Returns:
            Value: Decoded tree.
        """

    @abstractmethod
    def encode(self, value: Value) -> str:
        """Render a value tree as text.

        Args:
            value: Tree to render.

        Returns:
            str: Encoded document.
        """

    def __repr__(self) -> str:
        """Return a short debug representation.

        Returns:
            str: Representation naming the format.
        """
        return f"<{type(self).__name__} {self.name}>"
