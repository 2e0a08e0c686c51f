"""
Hierarchical view resolution over the content tree
"""
import logging
from typing import TYPE_CHECKING, Optional

from django.apps import apps

from .base import BaseService
from ..protocols import ViewHost
from ..settings import get_default_locale

if TYPE_CHECKING:
    from ..models import ViewDefinition


logger = logging.getLogger(__name__)


class ViewResolver(BaseService):
    """
    Finds the nearest view with a given name for a host node.

    Lookup order at every level: the node's own views, then the views of
    its default-locale translation, then the parent node. Not finding a
    view is a normal outcome and yields None.
    """

    def __init__(self):
        self.max_depth = self.get_setting('MAX_TRAVERSAL_DEPTH', 64)
        self.site_config_fallback = self.get_setting('SITE_CONFIG_FALLBACK', False)
        self.site_config_model = self.get_setting('SITE_CONFIG_MODEL', 'pages.SiteConfig')

    def views(self, host: ViewHost):
        """All views owned by ``host``, or None without a collection"""
        return host.get_views()

    def get_view(
        self,
        host: ViewHost,
        name: str,
        results_per_page: int = 0,
        pagination_param: str = 'start',
        traverse: bool = True
    ) -> Optional['ViewDefinition']:
        """
        Resolve a view by name, applying pagination settings to the result.

        Args:
            host: Node to start the lookup from
            name: Exact view name
            results_per_page: Page size, 0 for unlimited
            pagination_param: Query string key holding the result offset
            traverse: Also search translations and ancestors

        Returns:
            The view with its transient pagination set, or None
        """
        view = host.get_own_view(name)

        if view is None and traverse:
            view = self._traverse(host, name)

        if view is None:
            logger.debug(f"View '{name}' not found for {host!r}")
            return None

        logger.debug(f"Resolved view '{name}' for {host!r} to view #{view.pk}")
        return view.set_transient_pagination(results_per_page, pagination_param)

    def has_view(self, host: ViewHost, name: str, traverse: bool = True) -> bool:
        return self.get_view(host, name, traverse=traverse) is not None

    def has_view_with_results(self, host: ViewHost, name: str, traverse: bool = True) -> bool:
        view = self.get_view(host, name, traverse=traverse)
        if view is None:
            return False
        return view.results().count() > 0

    def has_view_with_translated_results(self, host: ViewHost, name: str, traverse: bool = True) -> bool:
        view = self.get_view(host, name, traverse=traverse)
        if view is None:
            return False
        return view.translated_results(self._host_locale(host)).count() > 0

    def _traverse(self, host: ViewHost, name: str) -> Optional['ViewDefinition']:
        default_locale = get_default_locale()
        visited = {self._host_key(host)}
        node = host
        depth = 0

        while True:
            view = self._find_on_translation(node, name, default_locale)
            if view is not None:
                return view

            parent = node.get_view_parent()
            if parent is None or not isinstance(parent, ViewHost):
                break

            key = self._host_key(parent)
            if key in visited:
                logger.warning(f"Cycle in parent chain of {host!r} at {parent!r}; stopping lookup of '{name}'")
                return None

            depth += 1
            if depth > self.max_depth:
                logger.warning(
                    f"Parent chain of {host!r} exceeds {self.max_depth} levels; stopping lookup of '{name}'"
                )
                return None

            visited.add(key)
            node = parent
            view = node.get_own_view(name)
            if view is not None:
                return view

        if self.site_config_fallback:
            return self._find_on_site_config(host, name, default_locale)
        return None

    def _find_on_translation(self, node: ViewHost, name: str, default_locale: str) -> Optional['ViewDefinition']:
        """Check the default-locale translation of ``node`` without recursing"""
        locale = self._host_locale(node)
        if locale is None or locale == default_locale:
            return None

        master = node.get_translation(default_locale)
        if master is None or not isinstance(master, ViewHost):
            return None
        return master.get_own_view(name)

    def _find_on_site_config(self, host: ViewHost, name: str, default_locale: str) -> Optional['ViewDefinition']:
        site_config_model = apps.get_model(self.site_config_model)
        locale = self._host_locale(host) or default_locale

        config = site_config_model.for_locale(locale)
        if config is None and locale != default_locale:
            config = site_config_model.for_locale(default_locale)
        if config is None:
            return None

        view = config.get_own_view(name)
        if view is None:
            view = self._find_on_translation(config, name, default_locale)
        return view

    @staticmethod
    def _host_locale(host: ViewHost) -> Optional[str]:
        """Locale of a translatable host, None for hosts without translations"""
        if not host.supports_translation():
            return None
        return host.locale

    @staticmethod
    def _host_key(host: ViewHost):
        meta = getattr(host, '_meta', None)
        label = meta.label if meta is not None else type(host).__qualname__
        return (label, host.pk)
