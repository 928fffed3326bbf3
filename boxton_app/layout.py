"""
Boxton Layout
=============
Renders the Boxton page layout: header, top region, title/messages/tabs,
main content, bottom region, footer.

RENDER CONTRACT:
- Pure function of its inputs, no state between calls
- Optional regions (header, top, bottom, footer) and messages/title/tabs
  are suppressed when empty (None, missing, "" or a fragment that
  renders to nothing)
- content['content'] and action_links are ALWAYS emitted, even when empty
- Missing inputs are never errors
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Sequence

from django.conf import settings
from django.template.loader import render_to_string

_logger = logging.getLogger(__name__)

LAYOUT_NAME = 'boxton'
DEFAULT_TEMPLATE = 'boxton_app/layout--boxton.html'

# Regions in layout order, with their human-readable labels
BOXTON_REGIONS = (
    ('header', 'Header'),
    ('top', 'Top'),
    ('content', 'Content'),
    ('bottom', 'Bottom'),
    ('footer', 'Footer'),
)
REGION_NAMES = tuple(name for name, _label in BOXTON_REGIONS)


def is_present(value: Any) -> bool:
    """
    Shared "should this render" check.

    None, empty strings and fragments that render to nothing mean suppress:
    lists whose items are all empty, render mappings with '#access' False or
    with no non-empty '#markup' or children. Anything else, including
    whitespace-only strings, renders.
    """
    if value is None:
        return False
    if isinstance(value, (str, bytes)):
        return len(value) > 0
    if hasattr(value, '__html__'):
        return len(value.__html__()) > 0
    if isinstance(value, (list, tuple)):
        return any(is_present(item) for item in value)
    if isinstance(value, Mapping):
        if value.get('#access', True) is False:
            return False
        return any(
            is_present(child) for key, child in value.items()
            if key == '#markup' or not str(key).startswith('#')
        )
    if isinstance(value, (set, frozenset)):
        return len(value) > 0
    return True


def layout_classes(extra: Optional[Sequence[str]] = None) -> List[str]:
    """Conventional wrapper classes for this layout, followed by any extras."""
    classes = ['layout', f'layout--{LAYOUT_NAME}']
    if isinstance(extra, str):
        extra = [extra]
    if extra:
        classes.extend(extra)
    return classes


@dataclass
class LayoutInputs:
    """
    Everything the layout template consumes.

    Fragments (title_prefix, messages, tabs, action_links, region values) may
    be strings of markup, safe strings, lists of fragments or render mappings.
    """
    title: Optional[str] = None
    title_prefix: Any = None
    title_suffix: Any = None
    messages: Any = None
    tabs: Any = None
    action_links: Any = None
    classes: Sequence[str] = ()
    attributes: Mapping = field(default_factory=dict)
    wrap_attributes: Mapping = field(default_factory=dict)
    content: Mapping = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> 'LayoutInputs':
        """
        Build inputs from an untyped mapping.

        Unknown keys and unknown region names are ignored (logged at DEBUG).
        None values fall back to the field defaults.

        Raises:
            TypeError: mapping (or its content, attributes or wrap_attributes
                       entry) is not a mapping
        """
        if not isinstance(mapping, Mapping):
            raise TypeError(f"Layout inputs must be a mapping, got {type(mapping).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in mapping if key not in known)
        if unknown:
            _logger.debug(f"Ignoring unknown layout inputs: {unknown}")

        values = {key: value for key, value in mapping.items() if key in known and value is not None}

        content = values.get('content', {})
        if not isinstance(content, Mapping):
            raise TypeError(f"Layout content must be a mapping of regions, got {type(content).__name__}")
        unknown_regions = sorted(str(key) for key in content if key not in REGION_NAMES)
        if unknown_regions:
            _logger.debug(f"Ignoring regions not in the {LAYOUT_NAME} layout: {unknown_regions}")
        values['content'] = {name: content[name] for name in REGION_NAMES if name in content}

        for name in ('attributes', 'wrap_attributes'):
            if not isinstance(values.get(name, {}), Mapping):
                raise TypeError(f"Layout {name} must be a mapping, got {type(values[name]).__name__}")

        classes = values.get('classes', ())
        if isinstance(classes, str):
            classes = [classes]
        values['classes'] = tuple(classes)

        return cls(**values)

    def to_context(self) -> Dict[str, Any]:
        """Template context; every region key is present (None when absent)."""
        return {
            'title': self.title,
            'title_prefix': self.title_prefix,
            'title_suffix': self.title_suffix,
            'messages': self.messages,
            'tabs': self.tabs,
            'action_links': self.action_links,
            'classes': list(self.classes or ()),
            'attributes': dict(self.attributes or {}),
            'wrap_attributes': dict(self.wrap_attributes or {}),
            'content': {name: (self.content or {}).get(name) for name in REGION_NAMES},
        }


def render_layout(inputs) -> str:
    """
    Render the Boxton layout fragment.

    Args:
        inputs: LayoutInputs, or a plain mapping accepted by
                LayoutInputs.from_mapping()

    Returns:
        Safe HTML fragment (no <html>/<body>)
    """
    if not isinstance(inputs, LayoutInputs):
        inputs = LayoutInputs.from_mapping(inputs)

    context = inputs.to_context()
    template_name = getattr(settings, 'BOXTON_TEMPLATE', DEFAULT_TEMPLATE)

    rendered_regions = [name for name in REGION_NAMES if is_present(context['content'][name])]
    _logger.debug(f"Rendering {template_name} with regions {rendered_regions}")

    return render_to_string(template_name, context)
