# topmark:header:start
#
#   project      : AlignBy
#   file         : __init__.py
#   file_relpath : src/alignby/pipeline/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Class-based pipeline steps.

Each step reads what earlier steps recorded on the `ProcessingContext` and
writes only to the status axes it declares.
"""

from __future__ import annotations
