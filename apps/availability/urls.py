"""URL routing for availability windows."""

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import HostAvailabilityViewSet

router = DefaultRouter()
router.register(r'', HostAvailabilityViewSet, basename='availability')

urlpatterns = [path('', include(router.urls))]
