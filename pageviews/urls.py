"""
URL configuration for the page views API
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .api_views import PageViewSet, ViewDefinitionViewSet

app_name = 'pageviews'

# Create router and register viewsets
router = DefaultRouter()
router.register(r'pages', PageViewSet)
router.register(r'view-definitions', ViewDefinitionViewSet)

urlpatterns = [
    path('api/', include(router.urls)),
]
