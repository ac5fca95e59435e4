"""src/urlsplit/render/__init__.py

Output strategies for Urlsplit.

Every renderer exposes ``render(variables, sink)`` and writes to a text
stream: shell export statements, the value of a single variable, or a
rendered Jinja2 template.
"""

from .export import ExportRenderer, format_export, print_variables
from .lookup import KeyRenderer, lookup
from .modes import Mode, make_renderer, render, select_mode
from .template import DEFAULT_HELPERS, TemplateRenderer, trim_path

__all__ = [
    "ExportRenderer",
    "KeyRenderer",
    "TemplateRenderer",
    "Mode",
    "DEFAULT_HELPERS",
    "format_export",
    "lookup",
    "make_renderer",
    "print_variables",
    "render",
    "select_mode",
    "trim_path",
]
