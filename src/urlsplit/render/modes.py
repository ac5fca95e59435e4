"""src/urlsplit/render/modes.py

Output mode selection and dispatch.
"""

import logging
from enum import Enum
from typing import Mapping, Optional, TextIO, Union

from urlsplit.exceptions import ConflictingModes, NoModeSelected
from urlsplit.render.export import ExportRenderer
from urlsplit.render.lookup import KeyRenderer
from urlsplit.render.template import Helper, TemplateRenderer
from urlsplit.variables import VariableSet

__all__ = ["Mode", "Renderer", "select_mode", "make_renderer", "render"]

logger = logging.getLogger(__name__)

Renderer = Union[ExportRenderer, KeyRenderer, TemplateRenderer]


class Mode(Enum):
    """Output modes, listed in flag order."""

    EXPORT = "export"
    KEY = "key"
    TEMPLATE = "template"


def select_mode(
    export: bool = False, key: Optional[str] = None, template: Optional[str] = None
) -> Mode:
    """
    Return the single requested output mode.

    Args:
        export: Whether export mode was requested.
        key: Requested key name, None when key-lookup mode is off.
        template: Template source, None when template mode is off.

    Raises:
        NoModeSelected: If no mode was requested.
        ConflictingModes: If more than one mode was requested.
    """
    requested = []
    if export:
        requested.append(Mode.EXPORT)
    if key is not None:
        requested.append(Mode.KEY)
    if template is not None:
        requested.append(Mode.TEMPLATE)

    if not requested:
        raise NoModeSelected()
    if len(requested) > 1:
        names = ", ".join(mode.value for mode in requested)
        raise ConflictingModes(f"Only one output mode may be used, got: {names}")
    return requested[0]


def make_renderer(
    mode: Mode,
    argument: Optional[str] = None,
    helpers: Optional[Mapping[str, Helper]] = None,
) -> Renderer:
    """
    Build the renderer for a mode.

    Args:
        mode: Selected output mode.
        argument: Key name for KEY, template source for TEMPLATE.
        helpers: Template helpers, TEMPLATE only.

    Raises:
        ValueError: If KEY or TEMPLATE is missing its argument.
        TemplateSyntaxError: If the template cannot be compiled.
    """
    if mode is Mode.EXPORT:
        return ExportRenderer()

    if argument is None:
        raise ValueError(f"{mode.value} mode requires an argument")

    if mode is Mode.KEY:
        return KeyRenderer(argument)
    return TemplateRenderer(argument, helpers)


def render(
    variables: VariableSet,
    mode: Mode,
    sink: TextIO,
    argument: Optional[str] = None,
    helpers: Optional[Mapping[str, Helper]] = None,
) -> int:
    """
    Render variables to the sink in the given mode.

    Returns:
        Number of characters written.
    """
    logger.debug("Rendering %d variables in %s mode", len(variables), mode.value)
    return make_renderer(mode, argument, helpers).render(variables, sink)
