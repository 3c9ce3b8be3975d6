# -*- coding: utf-8 -*-
"""Location: ./configalchemy/routers/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

API routers.
"""
