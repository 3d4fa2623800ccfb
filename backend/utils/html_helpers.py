"""
HTML helpers for rendering option lists as <select> drop-downs.
"""
from enum import Enum
from html import escape
from typing import Any, Iterable, Optional, Type

from utils.enum_options import EnumOption, build_enum_options


def _attr(name: str, value: Any) -> str:
    return f'{name}="{escape(str(value), quote=True)}"'


def render_select(
    name: str,
    options: Iterable[EnumOption],
    *,
    css_class: Optional[str] = None,
    placeholder: Optional[str] = None,
    html_id: Optional[str] = None,
) -> str:
    """
    Render an option list as a <select> element.

    Args:
        name: Form field name
        options: Options in display order
        css_class: Optional class attribute for the <select>
        placeholder: Optional label for a leading empty option
        html_id: Element id (defaults to name)

    Returns:
        str: The <select> markup, with every value and label HTML-escaped
    """
    attrs = [_attr("name", name), _attr("id", html_id or name)]
    if css_class:
        attrs.append(_attr("class", css_class))

    lines = [f"<select {' '.join(attrs)}>"]
    if placeholder is not None:
        lines.append(f'<option value="">{escape(placeholder)}</option>')
    for option in options:
        selected = " selected" if option.selected else ""
        lines.append(
            f"<option {_attr('value', option.value)}{selected}>{escape(option.label)}</option>"
        )
    lines.append("</select>")
    return "\n".join(lines)


def enum_dropdown(
    name: str,
    enum_type: Type[Enum],
    selected_value: Any = None,
    **kwargs: Any,
) -> str:
    """Build the options for enum_type and render them as a <select> named `name`."""
    return render_select(name, build_enum_options(enum_type, selected_value), **kwargs)
