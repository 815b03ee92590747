# topmark:header:start
#
#   project      : AlignBy
#   file         : __init__.py
#   file_relpath : src/alignby/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared by the engine, pipeline and CLI layers."""
