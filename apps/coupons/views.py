"""API views for coupons."""

from __future__ import annotations

from rest_framework import mixins, permissions, viewsets  # type: ignore

from .models import Coupon
from .serializers import CouponSerializer


class CouponViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Coupons earned by the authenticated host."""

    serializer_class = CouponSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):  # type: ignore
        return Coupon.objects.filter(host=self.request.user).select_related('booking')
