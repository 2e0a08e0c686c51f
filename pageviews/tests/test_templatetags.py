"""
Tests for the page views template tags.
"""
from django.template import Context, Template
from django.test import RequestFactory

from .base import PageTreeTestCase


class PageViewsTagsTestCase(PageTreeTestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.home = self.create_page('Home')
        self.news = self.create_page('News', parent=self.home)
        self.first = self.create_page('First', parent=self.news, sort_order=1)
        self.second = self.create_page('Second', parent=self.news, sort_order=2)
        self.add_view(self.home, 'LatestNews', root_page=self.news)

    def render(self, source, **context):
        template = Template('{% load pageviews_tags %}' + source)
        return template.render(Context(context))

    def test_get_view_with_pagination(self):
        output = self.render(
            '{% get_view page "LatestNews" per_page=1 as v %}'
            '{{ v.name }}|{{ v.results_per_page }}|{{ v.pagination_param }}|'
            '{% view_results v as items %}{% for item in items %}{{ item.title }}{% endfor %}',
            page=self.first,
            request=self.factory.get('/', {'start': '1'}),
        )
        self.assertEqual(output, 'LatestNews|1|start|Second')

    def test_get_view_missing_renders_empty(self):
        output = self.render(
            '{% get_view page "Missing" as v %}{% if v %}found{% else %}none{% endif %}'
            '{% view_results v as items %}{{ items|length }}',
            page=self.first,
        )
        self.assertEqual(output, 'none0')

    def test_has_view_tags(self):
        output = self.render(
            '{% has_view page "LatestNews" as a %}'
            '{% has_view page "LatestNews" traverse=False as b %}'
            '{% has_view_with_results page "LatestNews" as c %}'
            '{% has_view_with_translated_results page "LatestNews" as d %}'
            '{{ a }} {{ b }} {{ c }} {{ d }}',
            page=self.first,
        )
        self.assertEqual(output, 'True False True True')

    def test_views_filter(self):
        self.add_view(self.home, 'Sections', sort_order=1)
        output = self.render(
            '{% for v in page|views %}{{ v.name }},{% endfor %}',
            page=self.home,
        )
        self.assertEqual(output, 'LatestNews,Sections,')

    def test_tags_accept_missing_host(self):
        output = self.render(
            '{% get_view page "LatestNews" as v %}{% has_view page "LatestNews" as h %}{{ v }} {{ h }}',
            page=None,
        )
        self.assertEqual(output, 'None False')
