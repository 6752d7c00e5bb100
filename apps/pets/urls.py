"""URL routing for pets."""

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import PetViewSet

router = DefaultRouter()
router.register(r'', PetViewSet, basename='pet')

urlpatterns = [path('', include(router.urls))]
