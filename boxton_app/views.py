"""
Boxton Preview Views
====================
Renders the Boxton layout inside a full HTML page with demonstration
content, so the layout can be checked in a browser.

The layout fragment itself comes from boxton_app.layout.render_layout().
"""

from django.shortcuts import render
from django.utils.html import format_html
from django.views.decorators.http import require_GET

from .layout import LayoutInputs, REGION_NAMES, layout_classes, render_layout

# Optional regions that the preview fills when asked for them
PREVIEW_REGIONS = tuple(name for name in REGION_NAMES if name != 'content')

DEFAULT_PREVIEW_TITLE = 'Boxton layout preview'


def _demo_region(name):
    return format_html('<p class="demo-region demo-region--{}">{} region</p>', name, name.title())


def build_preview_inputs(title=DEFAULT_PREVIEW_TITLE, regions=PREVIEW_REGIONS):
    """
    Demonstration inputs for the preview page.

    Args:
        title: Page title ("" renders the layout without a title block)
        regions: Optional regions to fill; unknown names are ignored
    """
    content = {
        'content': format_html('<p>{}</p>', 'Main content goes here.'),
    }
    for name in regions:
        if name in PREVIEW_REGIONS:
            content[name] = _demo_region(name)

    return LayoutInputs(
        title=title,
        messages=format_html('<div class="messages status">{}</div>', 'Preview rendered.'),
        tabs=format_html('<ul class="tabs primary"><li class="active"><a href="{}">{}</a></li></ul>', '#', 'View'),
        action_links=format_html('<ul class="action-links"><li><a href="{}">{}</a></li></ul>', '#', 'Add content'),
        classes=layout_classes(['layout--preview']),
        attributes={'data-layout': 'boxton'},
        wrap_attributes={'class': ['l-wrapper']},
        content=content,
    )


@require_GET
def preview_view(request):
    """
    Layout preview page.

    Query parameters:
    - title: overrides the page title
    - regions: comma-separated optional regions to fill (default: all)
    """
    title = request.GET.get('title', DEFAULT_PREVIEW_TITLE).strip()

    regions = PREVIEW_REGIONS
    if 'regions' in request.GET:
        regions = tuple(
            name.strip() for name in request.GET.get('regions', '').split(',')
            if name.strip()
        )

    layout = render_layout(build_preview_inputs(title=title, regions=regions))

    return render(request, 'boxton_app/page.html', {
        'page_title': title or DEFAULT_PREVIEW_TITLE,
        'layout': layout,
    })
