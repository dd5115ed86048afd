"""Widget template renderer for mount points and standalone pages with Jinja2"""

import os
import html
import uuid
from typing import Dict, Any, Optional

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, Template
from markupsafe import Markup

from .models import WidgetDescriptor, Size, css_size
from ..utils.logging import get_logger


BOOTSTRAP_CSS = "https://cdn.jsdelivr.net/npm/bootstrap@3.4.1/dist/css/bootstrap.min.css"

CONTAINER_TEMPLATE = "container.html"
FRAGMENT_TEMPLATE = "fragment.html"
PAGE_TEMPLATE = "page.html"

BUILTIN_TEMPLATES = {
    CONTAINER_TEMPLATE: """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<link rel="stylesheet" href="{{ bootstrap_css }}">
</head>
<body>
<div id="{{ element_id }}"{% if css_class %} class="{{ css_class }}"{% endif %}{% if style %} style="{{ style }}"{% endif %}></div>
</body>
</html>
""",
    FRAGMENT_TEMPLATE: """<div id="{{ element_id }}" class="{{ widget.name }} html-widget"{% if style %} style="{{ style }}"{% endif %}>{{ content }}</div>
<script type="application/json" data-for="{{ element_id }}">{{ data|tojson }}</script>
""",
    PAGE_TEMPLATE: """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<link rel="stylesheet" href="{{ bootstrap_css }}">
</head>
<body>
{{ fragment }}</body>
</html>
""",
}


def new_element_id() -> str:
    """Random DOM id for a widget mount point"""
    return f"htmlwidget-{uuid.uuid4().hex[:20]}"


def container_style(width: Size, height: Size) -> str:
    """CSS declarations sizing the mount point"""
    parts = []
    width = css_size(width)
    height = css_size(height)
    if width:
        parts.append(f"width:{width};")
    if height:
        parts.append(f"height:{height};")
    return "".join(parts)


class WidgetTemplateRenderer:
    """Renders formattable widget markup from Jinja2 templates

    Built-in templates cover the empty mount point, the inline fragment used
    for notebook display and a standalone page. A template directory may be
    given to render additional templates or override the built-ins.

    Example:
        renderer = WidgetTemplateRenderer()
        page = renderer.render_page(as_htmlwidget(table))

        renderer = WidgetTemplateRenderer(template_dir="widgets")
        html = renderer.render("report.html", {"widget": descriptor})
    """

    def __init__(self, template_dir: Optional[str] = None, bootstrap_css: str = BOOTSTRAP_CSS):
        """Initialize widget renderer

        Args:
            template_dir: Directory with Jinja2 templates (optional)
            bootstrap_css: Stylesheet providing the text-* alignment classes
        """
        self.template_dir = template_dir
        self.bootstrap_css = bootstrap_css
        self.logger = get_logger('widgets.renderer')

        loaders = []
        if template_dir and os.path.exists(template_dir):
            loaders.append(FileSystemLoader(template_dir))
        elif template_dir:
            self.logger.warning(f"Template directory '{template_dir}' not found, using built-in templates only")
        loaders.append(DictLoader(BUILTIN_TEMPLATES))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=True  # Auto-escape HTML for security
        )

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a named template

        Raises:
            TemplateNotFound: If no loader knows the template
        """
        template = self.env.get_template(template_name)
        context = {'bootstrap_css': self.bootstrap_css, **context}
        return template.render(**context)

    def render_inline(self, html_string: str, context: Dict[str, Any]) -> str:
        """Render widget HTML from an inline Jinja2 string"""
        template = Template(html_string, autoescape=True)
        return template.render(**context)

    def render_container(self,
                         element_id: str,
                         style: Optional[str] = None,
                         css_class: Optional[str] = None) -> str:
        """Empty styled mount point inside a Bootstrap page

        The client-side widget script fills the div; nothing else is emitted.
        """
        return self.render(CONTAINER_TEMPLATE, {
            'element_id': element_id,
            'style': style,
            'css_class': css_class,
        })

    def render_fragment(self, widget: WidgetDescriptor, element_id: Optional[str] = None) -> str:
        """Mount point with the widget html inlined plus its JSON data"""
        element_id = element_id or widget.element_id or new_element_id()
        return self.render(FRAGMENT_TEMPLATE, {
            'widget': widget,
            'element_id': element_id,
            'style': container_style(widget.width, widget.height),
            'content': Markup(widget.html),
            'data': widget.to_dict(),
        })

    def render_page(self, widget: WidgetDescriptor, element_id: Optional[str] = None) -> str:
        """Standalone HTML document showing the widget"""
        fragment = self.render_fragment(widget, element_id=element_id)
        return self.render(PAGE_TEMPLATE, {'fragment': Markup(fragment)})

    @staticmethod
    def escape_data(data: Any) -> str:
        """Escape data for safe inclusion in HTML attributes"""
        return html.escape(str(data), quote=True)


def render_container(element_id: str, style: Optional[str] = None, css_class: Optional[str] = None) -> str:
    """Module-level shortcut for WidgetTemplateRenderer().render_container"""
    return WidgetTemplateRenderer().render_container(element_id, style=style, css_class=css_class)
