"""Backends rendering a VariableGraph as CSS, SCSS, JSON tokens or TypeScript."""

from .css import export_css
from .json_tokens import export_json
from .scss import export_scss
from .typescript import export_typescript

__all__ = ["export_css", "export_json", "export_scss", "export_typescript"]
