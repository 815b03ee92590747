# topmark:header:start
#
#   project      : AlignBy
#   file         : __init__.py
#   file_relpath : src/alignby/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for AlignBy.

- `alignby.config.logging`: logger class, TRACE level and colored formatter.
- `alignby.config.io`: TOML loading (tomlkit) and checked value getters.
- `alignby.config.model`: the frozen `Config` snapshot and its `MutableConfig` builder.

This package module stays import-light: the engine imports `alignby.config.logging`
and must not pull in the configuration model.
"""

from __future__ import annotations
