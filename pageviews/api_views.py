"""
API views for pages and the views attached to them
"""
from rest_framework import viewsets, permissions
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.filters import SearchFilter, OrderingFilter
from rest_framework.response import Response
from django.db.models import Count
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from pages.models import Page
from .models import ViewDefinition
from .serializers import PageSerializer, PageSummarySerializer, ViewDefinitionSerializer
from .services import ViewResolver
from .settings import get_pageviews_setting

TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off')


def _parse_bool(value, field_name, default=True):
    if value is None or value == '':
        return default
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValidationError({field_name: 'Must be a boolean (true or false).'})


def _parse_non_negative_int(value, field_name, default=0):
    if value is None or value == '':
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError({field_name: 'Must be an integer.'})
    if number < 0:
        raise ValidationError({field_name: 'Must not be negative.'})
    return number


@extend_schema_view(
    list=extend_schema(
        description="List pages of the content tree",
        tags=['Pages']
    ),
    retrieve=extend_schema(
        description="Retrieve a single page",
        tags=['Pages']
    )
)
class PageViewSet(viewsets.ReadOnlyModelViewSet):
    """API viewset for Page model - nodes that views are attached to"""
    queryset = Page.objects.select_related('view_collection').annotate(
        views_count=Count('view_collection__views')
    )
    serializer_class = PageSerializer
    permission_classes = [permissions.AllowAny]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ['locale', 'parent', 'is_published']
    search_fields = ['title', 'slug']
    ordering_fields = ['sort_order', 'title', 'created_at']
    ordering = ['sort_order', 'title']

    @extend_schema(
        description="Views attached directly to this page, without traversal",
        responses=ViewDefinitionSerializer(many=True),
        tags=['Views']
    )
    @action(detail=True, methods=['get'])
    def views(self, request, pk=None):
        page = self.get_object()
        views = page.get_views()
        if views is None:
            return Response([])
        return Response(ViewDefinitionSerializer(views, many=True).data)

    @extend_schema(
        description="Resolve a view by name through the page's translations and ancestors, "
                    "returning one page of its results",
        parameters=[
            OpenApiParameter(name='name', type=OpenApiTypes.STR, location=OpenApiParameter.QUERY,
                             required=True, description='Exact view name'),
            OpenApiParameter(name='per_page', type=OpenApiTypes.INT, location=OpenApiParameter.QUERY,
                             description='Results per page (default and maximum MAX_RESULTS_PER_PAGE)'),
            OpenApiParameter(name='param', type=OpenApiTypes.STR, location=OpenApiParameter.QUERY,
                             description='Query key holding the result offset (default start)'),
            OpenApiParameter(name='traverse', type=OpenApiTypes.BOOL, location=OpenApiParameter.QUERY,
                             description='Search translations and ancestors (default true)'),
            OpenApiParameter(name='translated', type=OpenApiTypes.BOOL, location=OpenApiParameter.QUERY,
                             description='Return results in the active language (default false)'),
        ],
        responses=OpenApiTypes.OBJECT,
        tags=['Views']
    )
    @action(detail=True, methods=['get'])
    def resolve(self, request, pk=None):
        page = self.get_object()
        params = request.query_params

        name = params.get('name')
        if not name:
            raise ValidationError({'name': 'This query parameter is required.'})

        max_per_page = get_pageviews_setting('MAX_RESULTS_PER_PAGE')
        per_page = _parse_non_negative_int(params.get('per_page'), 'per_page')
        if per_page == 0 or per_page > max_per_page:
            per_page = max_per_page

        pagination_param = params.get('param') or get_pageviews_setting('DEFAULT_PAGINATION_PARAM')
        traverse = _parse_bool(params.get('traverse'), 'traverse', default=True)
        translated = _parse_bool(params.get('translated'), 'translated', default=False)

        resolver = ViewResolver()
        view, elapsed = resolver.measure_execution_time(
            resolver.get_view, page, name, per_page, pagination_param, traverse
        )
        resolver.log_performance('resolve_view', elapsed, view_name=name, page_id=page.pk)

        if view is None:
            raise NotFound(f"No view named '{name}' is available on page {page.pk}.")

        page_obj = view.paginate(request, translated=translated)
        offset = (page_obj.number - 1) * view.results_per_page
        owner = view.collection.get_owner()

        return Response({
            'view': ViewDefinitionSerializer(view).data,
            'found_on': {
                'type': owner._meta.label_lower,
                'id': owner.pk,
            } if owner is not None else None,
            'results': PageSummarySerializer(page_obj.object_list, many=True).data,
            'pagination': {
                'results_per_page': view.results_per_page,
                'pagination_param': view.pagination_param,
                'offset': offset,
                'total_count': page_obj.paginator.count,
                'current_page': page_obj.number,
                'total_pages': page_obj.paginator.num_pages,
                'next_offset': offset + view.results_per_page if page_obj.has_next() else None,
                'previous_offset': max(offset - view.results_per_page, 0) if page_obj.has_previous() else None,
            },
        })


@extend_schema_view(
    list=extend_schema(
        description="List view definitions across all collections",
        tags=['Views']
    ),
    retrieve=extend_schema(
        description="Retrieve a single view definition",
        tags=['Views']
    )
)
class ViewDefinitionViewSet(viewsets.ReadOnlyModelViewSet):
    """API viewset for ViewDefinition model"""
    queryset = ViewDefinition.objects.select_related('collection', 'root_page')
    serializer_class = ViewDefinitionSerializer
    permission_classes = [permissions.AllowAny]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ['collection', 'name', 'order_by']
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'sort_order', 'created_at']
    ordering = ['collection', 'sort_order', 'id']
