from django.test import TestCase

from .models import Page, SiteConfig


class PageTranslationTests(TestCase):
    def setUp(self):
        self.master = Page.objects.create(title='About', slug='about', locale='en')
        self.german = Page.objects.create(title='Ueber', slug='ueber', locale='de', translation_of=self.master)
        self.french = Page.objects.create(title='A propos', slug='a-propos', locale='fr', translation_of=self.master)

    def test_get_translation_from_master(self):
        self.assertEqual(self.master.get_translation('de'), self.german)
        self.assertEqual(self.master.get_translation('en'), self.master)

    def test_get_translation_between_translations(self):
        self.assertEqual(self.german.get_translation('en'), self.master)
        self.assertEqual(self.german.get_translation('fr'), self.french)

    def test_missing_translation(self):
        lone = Page.objects.create(title='Lone', slug='lone', locale='de')
        self.assertIsNone(lone.get_translation('en'))
        self.assertTrue(lone.supports_translation())


class PageTreeTests(TestCase):
    def test_view_parent(self):
        root = Page.objects.create(title='Root', slug='root')
        child = Page.objects.create(title='Child', slug='child', parent=root)
        self.assertEqual(child.get_view_parent(), root)
        self.assertIsNone(root.get_view_parent())

    def test_descendant_ids(self):
        root = Page.objects.create(title='Root', slug='root')
        child = Page.objects.create(title='Child', slug='child', parent=root)
        grandchild = Page.objects.create(title='Grandchild', slug='grandchild', parent=child)
        Page.objects.create(title='Elsewhere', slug='elsewhere')

        self.assertEqual(sorted(root.get_descendant_ids()), sorted([child.pk, grandchild.pk]))
        self.assertEqual(grandchild.get_descendant_ids(), [])


class SiteConfigTests(TestCase):
    def test_for_locale(self):
        english = SiteConfig.objects.create(locale='en', title='Site')
        self.assertEqual(SiteConfig.for_locale('en'), english)
        self.assertIsNone(SiteConfig.for_locale('de'))
        self.assertIsNone(english.get_view_parent())
