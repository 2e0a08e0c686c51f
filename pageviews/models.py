from django.apps import apps
from django.core.paginator import Paginator
from django.db import models
from django.utils import translation

from .services.resolver import ViewResolver
from .settings import get_default_locale, get_pageviews_setting


ORDER_BY_CHOICES = [
    ('sort_order', 'Menu order'),
    ('title', 'Title (A-Z)'),
    ('-title', 'Title (Z-A)'),
    ('created_at', 'Oldest first'),
    ('-created_at', 'Newest first'),
]


def get_view_host_models():
    """All installed concrete models that can own views"""
    return [
        model for model in apps.get_models()
        if issubclass(model, ViewHostModel) and not model._meta.abstract
    ]


class ViewCollection(models.Model):
    """
    Container for the views of a single host node.

    Hosts point at their collection through a one-to-one field so any model
    can become a view host without the views knowing about it.
    """
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "View Collection"
        verbose_name_plural = "View Collections"

    def __str__(self):
        return f"View collection #{self.pk}"

    def get_views(self):
        """Ordered views belonging to this collection"""
        return self.views.all()

    def get_owner(self):
        """The host node this collection belongs to, if any"""
        for model in get_view_host_models():
            owner = model.objects.filter(view_collection=self).first()
            if owner is not None:
                return owner
        return None


class ViewDefinition(models.Model):
    """A named, reusable query over the page tree that templates can render"""
    collection = models.ForeignKey(ViewCollection, on_delete=models.CASCADE, related_name='views')
    name = models.CharField(max_length=100, help_text="Name templates use to look up this view (case-sensitive)")
    description = models.TextField(blank=True)
    sort_order = models.PositiveIntegerField(default=0)

    # Query definition
    root_page = models.ForeignKey(
        'pages.Page', on_delete=models.CASCADE, null=True, blank=True, related_name='+',
        help_text="Only include pages below this page (all pages when empty). Deleting the page deletes the view."
    )
    include_descendants = models.BooleanField(
        default=False, help_text="Include every descendant of the root page, not only its children"
    )
    published_only = models.BooleanField(default=True)
    order_by = models.CharField(max_length=20, choices=ORDER_BY_CHOICES, default='sort_order')
    limit = models.PositiveIntegerField(default=0, help_text="Maximum number of results (0 for unlimited)")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Set per lookup by set_transient_pagination, never persisted
    results_per_page = 0
    pagination_param = 'start'

    class Meta:
        ordering = ['sort_order', 'id']
        constraints = [
            models.UniqueConstraint(fields=['collection', 'name'], name='pageviews_unique_view_name'),
        ]
        verbose_name = "View Definition"
        verbose_name_plural = "View Definitions"

    def __str__(self):
        return self.name

    def set_transient_pagination(self, results_per_page=0, pagination_param=None):
        """Attach request-scoped pagination settings and return the view"""
        self.results_per_page = max(int(results_per_page or 0), 0)
        self.pagination_param = pagination_param or get_pageviews_setting('DEFAULT_PAGINATION_PARAM')
        return self

    def _base_queryset(self, locale):
        Page = apps.get_model('pages', 'Page')
        queryset = Page.objects.filter(locale=locale)
        if self.published_only:
            queryset = queryset.filter(is_published=True)
        return queryset

    def results(self):
        """Pages in the default locale matching this view's query"""
        default_locale = get_default_locale()
        queryset = self._base_queryset(default_locale)

        if self.root_page_id:
            root = self.root_page.get_translation(default_locale) or self.root_page
            if self.include_descendants:
                queryset = queryset.filter(pk__in=root.get_descendant_ids())
            else:
                queryset = queryset.filter(parent_id=root.pk)

        queryset = queryset.order_by(self.order_by, 'id')
        if self.limit:
            queryset = queryset[:self.limit]
        return queryset

    def translated_results(self, locale=None):
        """Translations of results() in ``locale`` (the active language by default)"""
        default_locale = get_default_locale()
        locale = locale or translation.get_language() or default_locale
        if locale == default_locale:
            return self.results()

        master_ids = list(self.results().values_list('pk', flat=True))
        return self._base_queryset(locale).filter(
            translation_of_id__in=master_ids
        ).order_by(self.order_by, 'id')

    def paginate(self, request=None, translated=False):
        """
        Page through the results using the transient pagination settings.

        The request's ``pagination_param`` value is an item offset. Without a
        page size the full result list is returned.
        """
        queryset = self.translated_results() if translated else self.results()
        if self.results_per_page <= 0:
            return list(queryset)

        offset = 0
        if request is not None:
            try:
                offset = max(int(request.GET.get(self.pagination_param, 0)), 0)
            except (TypeError, ValueError):
                offset = 0

        paginator = Paginator(queryset, self.results_per_page)
        return paginator.get_page(offset // self.results_per_page + 1)


class ViewHostModel(models.Model):
    """
    Abstract base for content nodes that own views.

    Subclasses override supports_translation, get_translation and
    get_view_parent to take part in hierarchical view lookup.
    """
    view_collection = models.OneToOneField(
        ViewCollection, on_delete=models.SET_NULL, null=True, blank=True,
        editable=False, related_name='+'
    )

    class Meta:
        abstract = True

    def get_views(self):
        """Views attached to this node, or None when it has no collection"""
        if not self.view_collection_id:
            return None
        return self.view_collection.get_views()

    def get_own_view(self, name):
        """Find a view by exact name on this node only"""
        views = self.get_views()
        if views is None:
            return None
        # Compare in Python as well since some backends match case-insensitively
        for view in views.filter(name=name):
            if view.name == name:
                return view
        return None

    def supports_translation(self):
        return False

    def get_translation(self, locale):
        return None

    def get_view_parent(self):
        return None

    def get_view(self, name, results_per_page=0, pagination_param='start', traverse=True):
        return ViewResolver().get_view(self, name, results_per_page, pagination_param, traverse)

    def has_view(self, name, traverse=True):
        return ViewResolver().has_view(self, name, traverse=traverse)

    def has_view_with_results(self, name, traverse=True):
        return ViewResolver().has_view_with_results(self, name, traverse=traverse)

    def has_view_with_translated_results(self, name, traverse=True):
        return ViewResolver().has_view_with_translated_results(self, name, traverse=traverse)
