# -*- coding: utf-8 -*-
"""Location: ./configalchemy/services/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Services: request validation, conversion pipeline and logging.
"""
