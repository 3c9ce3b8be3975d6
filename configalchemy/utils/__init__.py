# -*- coding: utf-8 -*-
"""Location: ./configalchemy/utils/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Utility helpers: error classification, JSON responses, caller identity.
"""
