"""
Django REST Framework serializers for pages and their views
"""
from rest_framework import serializers

from pages.models import Page
from .models import ViewDefinition


class PageSummarySerializer(serializers.ModelSerializer):
    """Compact page representation used in view results"""

    class Meta:
        model = Page
        fields = ['id', 'title', 'slug', 'locale', 'parent', 'sort_order', 'is_published']


class PageSerializer(PageSummarySerializer):
    """Serializer for Page model"""
    views_count = serializers.IntegerField(read_only=True)

    class Meta(PageSummarySerializer.Meta):
        fields = PageSummarySerializer.Meta.fields + [
            'translation_of', 'views_count', 'created_at', 'updated_at'
        ]


class ViewDefinitionSerializer(serializers.ModelSerializer):
    """Serializer for ViewDefinition model"""

    class Meta:
        model = ViewDefinition
        fields = [
            'id', 'name', 'description', 'collection', 'sort_order',
            'root_page', 'include_descendants', 'published_only', 'order_by', 'limit',
            'created_at', 'updated_at'
        ]
