"""
Template access to views attached to content nodes.

    {% load pageviews_tags %}
    {% get_view page "Featured" per_page=5 as featured %}
    {% if featured %}
      {% view_results featured as items %}
      {% for item in items %}{{ item.title }}{% endfor %}
    {% endif %}
"""
from django import template

from ..services import ViewResolver
from ..settings import get_pageviews_setting

register = template.Library()


@register.simple_tag
def get_view(host, name, per_page=0, param=None, traverse=True):
    """Resolve the view ``name`` for ``host``; empty when nothing resolves"""
    if host is None:
        return None
    param = param or get_pageviews_setting('DEFAULT_PAGINATION_PARAM')
    return ViewResolver().get_view(host, name, per_page, param, traverse)


@register.simple_tag
def has_view(host, name, traverse=True):
    if host is None:
        return False
    return ViewResolver().has_view(host, name, traverse=traverse)


@register.simple_tag
def has_view_with_results(host, name, traverse=True):
    if host is None:
        return False
    return ViewResolver().has_view_with_results(host, name, traverse=traverse)


@register.simple_tag
def has_view_with_translated_results(host, name, traverse=True):
    if host is None:
        return False
    return ViewResolver().has_view_with_translated_results(host, name, traverse=traverse)


@register.simple_tag(takes_context=True)
def view_results(context, view, translated=False):
    """Results of a resolved view, paginated against the current request"""
    if view is None:
        return []
    return view.paginate(context.get('request'), translated=translated)


@register.filter
def views(host):
    """All views attached directly to ``host``"""
    if host is None:
        return None
    return ViewResolver().views(host)
