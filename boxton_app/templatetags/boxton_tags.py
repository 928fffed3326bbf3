"""
Template filters for the Boxton layout.

These are the helpers the layout template leans on: attribute flattening,
class joining, fragment rendering and the shared presence check.
"""

from collections.abc import Mapping

from django import template
from django.forms.utils import flatatt
from django.utils.safestring import mark_safe

from boxton_app.layout import is_present as _is_present

register = template.Library()


@register.filter
def is_present(value):
    """
    True when a layout input should be rendered.
    Usage: {% if content.header|is_present %}
    """
    return _is_present(value)


@register.filter
def join_classes(classes):
    """
    Join CSS class names with single spaces.
    Usage: class="{{ classes|join_classes }}"

    A bare string counts as one class. Empty entries (None, "") are skipped.
    Output is escaped by the template.
    """
    if not classes:
        return ''
    if isinstance(classes, str):
        return classes
    return ' '.join(str(name) for name in classes if name)


@register.filter
def flatten_attributes(attributes):
    """
    Flatten an attribute mapping into ' key="value"' pairs.
    Usage: <div{{ attributes|flatten_attributes }}>

    Example:
        Input:  {'id': 'main', 'class': ['a', 'b'], 'hidden': True}
        Output: ' class="a b" id="main" hidden'

    List values are space-joined. True renders the bare name, False and None
    drop the attribute. Values are HTML-escaped.

    Pairs come out sorted by attribute name with bare attributes last, not in
    the mapping's insertion order.
    """
    if not attributes:
        return ''
    normalized = {}
    for name, value in attributes.items():
        if isinstance(value, (list, tuple)):
            value = ' '.join(str(item) for item in value)
        normalized[name] = value
    return flatatt(normalized)


def _weight(value):
    if isinstance(value, Mapping):
        return value.get('#weight', 0)
    return 0


def _render(value):
    if value is None:
        return ''
    if hasattr(value, '__html__'):
        return value.__html__()
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ''.join(_render(item) for item in value)
    if isinstance(value, Mapping):
        if value.get('#access', True) is False:
            return ''
        children = [
            child for key, child in value.items()
            if not str(key).startswith('#')
        ]
        # sorted() is stable, so equal weights keep insertion order
        children = sorted(children, key=_weight)
        return _render(value.get('#markup')) + ''.join(_render(child) for child in children)
    return str(value)


@register.filter
def render_fragment(value):
    """
    Render a fragment (string, safe string, list or render mapping) as markup.
    Usage: {{ title_prefix|render_fragment }}

    Strings are treated as already-rendered markup and are not escaped.
    """
    return mark_safe(_render(value))
