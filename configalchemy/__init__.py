# -*- coding: utf-8 -*-
"""Location: ./configalchemy/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

ConfigAlchemy - convert configuration text between JSON, YAML, TOML and Lua.
"""

__copyright__ = "Copyright 2025"
__license__ = "Apache 2.0"
__version__ = "0.1.0"
__description__ = "Stateless HTTP service converting configuration text between JSON, YAML, TOML and Lua"
__packages__ = ["configalchemy"]
