from django.conf import settings
from django.db import models

from pageviews.models import ViewHostModel


class TranslatableModel(models.Model):
    """
    Abstract base for content that exists once per locale.

    Translations point at the default-locale master through translation_of;
    the master itself has no translation_of.
    """
    locale = models.CharField(
        max_length=10, choices=settings.LANGUAGES, default=settings.LANGUAGE_CODE, db_index=True
    )
    translation_of = models.ForeignKey(
        'self', on_delete=models.CASCADE, null=True, blank=True, related_name='translations',
        help_text="Default-locale record this is a translation of"
    )

    class Meta:
        abstract = True

    def supports_translation(self):
        return True

    def get_master(self):
        return self.translation_of if self.translation_of_id else self

    def get_translation(self, locale):
        """Return the record of this translation group in ``locale``, or None"""
        if self.locale == locale:
            return self
        master = self.get_master()
        if master.locale == locale:
            return master
        return master.translations.filter(locale=locale).first()


class Page(TranslatableModel, ViewHostModel):
    """A node in the site's content tree"""
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255)
    parent = models.ForeignKey(
        'self', on_delete=models.CASCADE, null=True, blank=True, related_name='children'
    )
    sort_order = models.PositiveIntegerField(default=0)
    is_published = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['sort_order', 'title']
        indexes = [
            models.Index(fields=['parent', 'locale'], name='pages_page_parent_locale_idx'),
        ]
        verbose_name = "Page"
        verbose_name_plural = "Pages"

    def __str__(self):
        return f"{self.title} ({self.locale})"

    def get_view_parent(self):
        return self.parent if self.parent_id else None

    def get_descendant_ids(self):
        """Primary keys of all pages below this one"""
        seen = {self.pk}
        found = []
        frontier = [self.pk]
        while frontier:
            child_ids = list(
                Page.objects.filter(parent_id__in=frontier).values_list('pk', flat=True)
            )
            frontier = [pk for pk in child_ids if pk not in seen]
            seen.update(frontier)
            found.extend(frontier)
        return found


class SiteConfig(TranslatableModel, ViewHostModel):
    """Site-wide settings, one record per locale"""
    title = models.CharField(max_length=255, default='Site')

    class Meta:
        verbose_name = "Site Config"
        verbose_name_plural = "Site Configs"

    def __str__(self):
        return f"{self.title} ({self.locale})"

    @classmethod
    def for_locale(cls, locale):
        return cls.objects.filter(locale=locale).first()
