"""URL routing for coupons."""

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import CouponViewSet

router = DefaultRouter()
router.register(r'', CouponViewSet, basename='coupon')

urlpatterns = [path('', include(router.urls))]
