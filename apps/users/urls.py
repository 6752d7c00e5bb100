"""URL declarations for the users app."""

from __future__ import annotations

from django.urls import path, include  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import HostViewSet, UserViewSet

router = DefaultRouter()
# Registered before the empty prefix so ``hosts/`` is not read as a user id
router.register(r'hosts', HostViewSet, basename='host')
router.register(r'', UserViewSet, basename='user')

urlpatterns = [
    path('', include(router.urls)),
]
