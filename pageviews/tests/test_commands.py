"""
Tests for the page views management commands.
"""
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError

from pages.models import Page
from pageviews.models import ViewDefinition
from .base import PageTreeTestCase


class LoadSampleViewsTestCase(PageTreeTestCase):
    def test_load_is_idempotent(self):
        call_command('load_sample_views', stdout=StringIO())
        pages, views = Page.objects.count(), ViewDefinition.objects.count()
        self.assertGreater(pages, 0)
        self.assertEqual(views, 4)

        call_command('load_sample_views', stdout=StringIO())
        self.assertEqual(Page.objects.count(), pages)
        self.assertEqual(ViewDefinition.objects.count(), views)

    def test_sample_tree_resolves(self):
        call_command('load_sample_views', stdout=StringIO())
        team = Page.objects.get(title='Team')
        about = Page.objects.get(title='About')
        starttag = Page.objects.get(title='Starttag')

        self.assertEqual(team.get_view('Sections').collection_id, about.view_collection_id)
        self.assertTrue(starttag.has_view_with_results('LatestNews'))


class ResolveViewCommandTestCase(PageTreeTestCase):
    def setUp(self):
        self.home = self.create_page('Home')
        self.child = self.create_page('Child', parent=self.home)
        self.add_view(self.home, 'Everything', order_by='title')

    def test_prints_results(self):
        out = StringIO()
        call_command('resolve_view', self.child.pk, 'Everything', stdout=out)
        output = out.getvalue()
        self.assertIn("View 'Everything'", output)
        self.assertIn('Child (en)', output)
        self.assertIn('Home (en)', output)

    def test_no_traverse(self):
        with self.assertRaises(CommandError):
            call_command('resolve_view', self.child.pk, 'Everything', '--no-traverse', stdout=StringIO())

    def test_missing_page(self):
        with self.assertRaises(CommandError):
            call_command('resolve_view', 999999, 'Everything', stdout=StringIO())
