"""Views: lazily loaded HTML templates with ``{dotted.key}`` placeholders."""

from home.templating.views import TemplateCache, TemplateEntry, render_template

__all__ = ["TemplateCache", "TemplateEntry", "render_template"]
