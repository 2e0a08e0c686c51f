"""
Page views configuration with project-level overrides
"""
from django.conf import settings

# Defaults, overridden key by key through settings.PAGEVIEWS_SETTINGS
DEFAULT_PAGEVIEWS_SETTINGS = {
    'DEFAULT_LOCALE': None,  # None means settings.LANGUAGE_CODE
    'DEFAULT_PAGINATION_PARAM': 'start',
    'MAX_TRAVERSAL_DEPTH': 64,
    'SITE_CONFIG_FALLBACK': False,
    'SITE_CONFIG_MODEL': 'pages.SiteConfig',
    'MAX_RESULTS_PER_PAGE': 100,
}


def get_pageviews_setting(key: str, default=None):
    """Get a page views setting with fallback to the module default"""
    overrides = getattr(settings, 'PAGEVIEWS_SETTINGS', {})
    if key in overrides:
        return overrides[key]
    return DEFAULT_PAGEVIEWS_SETTINGS.get(key, default)


def get_default_locale() -> str:
    """Locale that translations fall back to during view traversal"""
    return get_pageviews_setting('DEFAULT_LOCALE') or settings.LANGUAGE_CODE
