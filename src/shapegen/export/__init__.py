from __future__ import annotations

from .svg import SvgLayer, export_svg, path_to_d

__all__ = ["SvgLayer", "export_svg", "path_to_d"]
