"""API views for managing reviews."""

from __future__ import annotations

from django.db import models  # type: ignore
from rest_framework import mixins, permissions, serializers, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from . import services
from .filters import ReviewFilterSet
from .models import Review
from .serializers import ReviewCreateSerializer, ReviewSerializer


class ReviewViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    """Viewset for submitting and browsing reviews.

    Lists reviews the user wrote or received; ``?user=<id>`` shows the
    reviews a given user received instead.
    """

    queryset = Review.objects.select_related('booking', 'reviewer', 'reviewee').all()
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = ReviewFilterSet

    def get_serializer_class(self):  # type: ignore
        if self.action == 'create':
            return ReviewCreateSerializer
        return ReviewSerializer

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        # ``user`` is parsed and applied by ReviewFilterSet
        if self.request.query_params.get('user'):
            return qs
        user = self.request.user
        return qs.filter(models.Q(reviewer=user) | models.Q(reviewee=user))

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        review = services.submit_review(
            data['booking'],
            request.user.pk,
            data['rating'],
            data['review_text'],
            pet_behavior_feedback=data['pet_behavior_feedback'],
            host_experience_feedback=data['host_experience_feedback'],
        )
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'])
    def eligibility(self, request):  # type: ignore
        booking_id = request.query_params.get('booking')
        if not booking_id:
            raise serializers.ValidationError({'booking': 'This query parameter is required.'})
        return Response({
            'booking': booking_id,
            'can_review': services.can_review(booking_id, request.user.pk),
        })

    @action(detail=False, methods=['get'])
    def summary(self, request):  # type: ignore
        user_id = request.query_params.get('user') or request.user.pk
        try:
            user_id = int(user_id)
        except (TypeError, ValueError):
            raise serializers.ValidationError({'user': 'Must be a user id.'})
        return Response(services.rating_summary(user_id))
