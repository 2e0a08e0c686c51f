from django.test import TestCase

from pages.models import Page
from pageviews.models import ViewDefinition


class PageTreeTestCase(TestCase):
    """Shared helpers for building page trees with views."""

    def create_page(self, title, parent=None, locale='en', translation_of=None, **kwargs):
        return Page.objects.create(
            title=title,
            slug=title.lower().replace(' ', '-'),
            parent=parent,
            locale=locale,
            translation_of=translation_of,
            **kwargs
        )

    def add_view(self, host, name, **kwargs):
        return ViewDefinition.objects.create(collection=host.view_collection, name=name, **kwargs)
