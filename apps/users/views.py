"""User API views."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from django.db.models import Avg, Count, F  # type: ignore
from rest_framework import mixins, permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .filters import HostFilterSet
from .serializers import HostSerializer, PublicUserSerializer, UserSerializer

User = get_user_model()


class UserViewSet(mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Public profiles plus ``me`` for reading and editing the own profile."""

    serializer_class = PublicUserSerializer
    queryset = User.objects.filter(is_active=True)
    permission_classes = [permissions.IsAuthenticated]

    @action(detail=False, methods=["get", "patch"])
    def me(self, request):
        if request.method == "PATCH":
            serializer = UserSerializer(request.user, data=request.data, partial=True)
            serializer.is_valid(raise_exception=True)
            serializer.save()
            return Response(serializer.data)
        return Response(UserSerializer(request.user).data)


class HostViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Directory of active hosts other than the requesting user."""

    serializer_class = HostSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = HostFilterSet

    def get_queryset(self):  # type: ignore
        return (
            User.objects.filter(
                is_active=True,
                role__in=[User.RoleChoices.HOST, User.RoleChoices.BOTH],
            )
            .exclude(pk=self.request.user.pk)
            .annotate(
                average_rating=Avg("reviews_received__rating"),
                review_count=Count("reviews_received"),
            )
            .order_by(F("average_rating").desc(nulls_last=True), "id")
        )
