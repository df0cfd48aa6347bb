"""Cross-cutting infrastructure shared by telebind and its entry points.

This package must NEVER import from ``telebind/``.
"""

from core.logger import TelebindLogger

__all__ = [
    "TelebindLogger",
]
