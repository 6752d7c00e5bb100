"""API views for pets."""

from __future__ import annotations

from rest_framework import permissions, viewsets  # type: ignore

from .models import Pet
from .serializers import PetSerializer


class PetViewSet(viewsets.ModelViewSet):
    """Owners manage only their own pets."""

    serializer_class = PetSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):  # type: ignore
        return Pet.objects.filter(owner=self.request.user)

    def perform_create(self, serializer):  # type: ignore
        serializer.save(owner=self.request.user)
