from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.converter.api.v1.views import ConverterViewSet

router = DefaultRouter()
router.register(r'rates', ConverterViewSet, basename='converter')

urlpatterns = [
    path('', include(router.urls)),
]
