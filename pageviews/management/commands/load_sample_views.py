"""
Management command to load a sample page tree with views
"""
from django.core.management.base import BaseCommand
from django.utils.text import slugify

from pages.models import Page, SiteConfig
from pageviews.models import ViewDefinition


class Command(BaseCommand):
    help = 'Load a sample multilingual page tree with view definitions for testing'

    def _page(self, title, parent=None, locale='en', translation_of=None, sort_order=0):
        page, created = Page.objects.get_or_create(
            title=title,
            locale=locale,
            defaults={
                'slug': slugify(title),
                'parent': parent,
                'translation_of': translation_of,
                'sort_order': sort_order,
            }
        )
        if created:
            self.stdout.write(f'Created page: {page}')
        return page

    def _view(self, host, name, **query):
        view, created = ViewDefinition.objects.get_or_create(
            collection=host.view_collection,
            name=name,
            defaults=query
        )
        if created:
            self.stdout.write(f'Created view "{name}" on {host}')
        return view

    def handle(self, *args, **options):
        self.stdout.write(
            self.style.SUCCESS('Loading sample page views data...')
        )

        home = self._page('Home')
        news = self._page('News', parent=home, sort_order=1)
        about = self._page('About', parent=home, sort_order=2)
        for index, title in enumerate(['Launch Day', 'Summer Update', 'Year in Review'], start=1):
            self._page(title, parent=news, sort_order=index)
        team = self._page('Team', parent=about, sort_order=1)

        home_de = self._page('Startseite', locale='de', translation_of=home)
        news_de = self._page('Neuigkeiten', parent=home_de, locale='de', translation_of=news, sort_order=1)
        launch = Page.objects.get(title='Launch Day', locale='en')
        self._page('Starttag', parent=news_de, locale='de', translation_of=launch, sort_order=1)

        site_config, _ = SiteConfig.objects.get_or_create(locale='en', defaults={'title': 'Sample Site'})

        # Defined at the top so every page inherits them
        self._view(home, 'LatestNews', root_page=news, order_by='-created_at', limit=10)
        self._view(home, 'Sections', root_page=home, order_by='sort_order')
        # Overrides the inherited definition below About
        self._view(about, 'Sections', root_page=about, order_by='title')
        self._view(site_config, 'Everything', include_descendants=False, order_by='title')

        self.stdout.write(
            self.style.SUCCESS(
                f'Sample data ready: {Page.objects.count()} pages, '
                f'{ViewDefinition.objects.count()} views (try: resolve_view {team.pk} LatestNews)'
            )
        )
