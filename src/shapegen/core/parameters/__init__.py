from __future__ import annotations

from .meta import ParamMeta

__all__ = ["ParamMeta"]
