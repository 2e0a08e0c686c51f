"""
Management command to show where a view resolves from for a page
"""
from django.core.management.base import BaseCommand, CommandError

from pages.models import Page
from pageviews.services import ViewResolver


class Command(BaseCommand):
    help = 'Resolve a named view for a page and print the results it would render'

    def add_arguments(self, parser):
        parser.add_argument('page_id', type=int, help='Page to start the lookup from')
        parser.add_argument('name', help='Exact view name')
        parser.add_argument('--no-traverse', action='store_true', help='Only look at the page itself')
        parser.add_argument('--per-page', type=int, default=0, help='Results per page (0 for all)')
        parser.add_argument('--translated', action='store_true', help='Show results in the page locale')

    def handle(self, *args, **options):
        try:
            page = Page.objects.get(pk=options['page_id'])
        except Page.DoesNotExist:
            raise CommandError(f"Page {options['page_id']} does not exist")

        resolver = ViewResolver()
        view = resolver.get_view(
            page,
            options['name'],
            results_per_page=options['per_page'],
            traverse=not options['no_traverse'],
        )
        if view is None:
            raise CommandError(f"No view named '{options['name']}' resolves for {page}")

        owner = view.collection.get_owner()
        self.stdout.write(self.style.SUCCESS(f"View '{view.name}' (#{view.pk}) defined on {owner}"))

        if options['translated']:
            results = view.translated_results(page.locale)
        else:
            results = view.results()
        if view.results_per_page:
            results = results[:view.results_per_page]

        for result in results:
            self.stdout.write(f'  - {result}')
