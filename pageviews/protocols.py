"""Protocols describing the objects that can own view definitions."""

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from .models import ViewDefinition


@runtime_checkable
class ViewHost(Protocol):
    """Protocol for content nodes that own a collection of views."""

    pk: Any

    def get_views(self) -> Optional['QuerySet']:
        """Return the node's own views, or None when it has no collection."""
        ...

    def get_own_view(self, name: str) -> Optional['ViewDefinition']:
        """Return the node's own view called ``name`` without traversal."""
        ...

    def supports_translation(self) -> bool:
        """Whether the node takes part in locale translations (and has a ``locale``)."""
        ...

    def get_translation(self, locale: str) -> Optional['ViewHost']:
        """Return the node's translation in ``locale``, if one exists."""
        ...

    def get_view_parent(self) -> Optional['ViewHost']:
        """Return the parent node to continue view traversal on."""
        ...
