#!/usr/bin/env python3
# terminal/config/__init__.py
from __future__ import annotations
"""
Layered configuration: defaults, working-directory files, environment.
"""

from .config import AppConfig, DEFAULTS, ENV_PREFIX, load_config

__all__ = ["AppConfig", "DEFAULTS", "ENV_PREFIX", "load_config"]
