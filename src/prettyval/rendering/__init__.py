# topmark:header:start
#
#   project      : PrettyVal
#   file         : __init__.py
#   file_relpath : src/prettyval/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers for PrettyVal.

This package turns documents into text (layout, indentation, colors). It is
kept import-light so the document model can depend on its color primitives.

Public modules:
    - prettyval.rendering.renderer
    - prettyval.rendering.colored_enum
"""

from __future__ import annotations
