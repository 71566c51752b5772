from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.generics import get_object_or_404
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.accounts.policy import Action, PolicyPermission, can_access
from . import windows
from .models import Checkin
from .serializers import (
    CheckinCommentSerializer,
    CheckinInputSerializer,
    CheckinSerializer,
    CheckinWindowSerializer,
)
from .services import (
    CheckinValidationError,
    add_comment,
    delete_comment,
    create_checkin,
    current_checkin_for_startup,
    update_checkin,
)


class CheckinViewSet(mixins.ListModelMixin,
                     mixins.RetrieveModelMixin,
                     viewsets.GenericViewSet):
    """
    Weekly checkins of the current user's startup.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Checkins of the user's startup, newest first
    create: Start this week's checkin
    retrieve: Get a checkin
    partial_update: Fill in more of a checkin
    window: Current checkin window state
    current: The checkin for the current cycle
    comments: List or add comments
    remove_comment: Delete one of your comments
    """

    serializer_class = CheckinSerializer
    permission_classes = [IsAuthenticated, PolicyPermission]
    policy_actions = {
        'retrieve': Action.SHOW,
        'partial_update': Action.UPDATE,
        'comments': Action.SHOW,
        'remove_comment': Action.SHOW,
    }

    def get_queryset(self):
        """Staff see every checkin, everyone else only their startup's."""
        queryset = Checkin.objects.select_related('startup', 'user').ordered()
        user = self.request.user
        if user.is_admin:
            return queryset
        return queryset.filter(startup_id=user.startup_id)

    def _startup_or_error(self, request):
        if request.user.startup_id is None:
            return None, Response(
                {'error': 'You need to be part of a startup to check in'},
                status=status.HTTP_400_BAD_REQUEST
            )
        return request.user.startup, None

    @extend_schema(request=CheckinInputSerializer, responses={201: CheckinSerializer})
    def create(self, request, *args, **kwargs):
        """Create a checkin for the user's startup."""
        startup, error = self._startup_or_error(request)
        if error:
            return error

        serializer = CheckinInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            checkin = create_checkin(
                startup=startup,
                user=request.user,
                data=serializer.validated_data,
            )
        except CheckinValidationError as e:
            return Response(e.errors, status=status.HTTP_400_BAD_REQUEST)

        return Response(CheckinSerializer(checkin).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=CheckinInputSerializer, responses={200: CheckinSerializer})
    def partial_update(self, request, *args, **kwargs):
        """Update fields of a checkin."""
        checkin = self.get_object()

        serializer = CheckinInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            checkin = update_checkin(checkin=checkin, data=serializer.validated_data)
        except CheckinValidationError as e:
            return Response(e.errors, status=status.HTTP_400_BAD_REQUEST)

        return Response(CheckinSerializer(checkin).data)

    @extend_schema(responses={200: CheckinWindowSerializer})
    @action(detail=False, methods=['get'])
    def window(self, request):
        """Which checkin is due next and whether a window is open."""
        now = timezone.now()
        next_checkin = windows.next_checkin_type_and_time(now)
        data = {
            'next_checkin_type': next_checkin.type,
            'next_checkin_time': next_checkin.time,
            'in_before_window': windows.in_before_window(now),
            'in_after_window': windows.in_after_window(now),
            'week_label': windows.week_for_time(now),
        }
        return Response(CheckinWindowSerializer(data).data)

    @extend_schema(responses={200: CheckinSerializer})
    @action(detail=False, methods=['get'])
    def current(self, request):
        """The startup's checkin for the current cycle."""
        startup, error = self._startup_or_error(request)
        if error:
            return error

        checkin = current_checkin_for_startup(startup)
        if checkin is None:
            return Response({'error': 'No checkin yet this week'}, status=status.HTTP_404_NOT_FOUND)
        return Response(CheckinSerializer(checkin).data)

    @extend_schema(request=CheckinCommentSerializer, responses={200: CheckinCommentSerializer(many=True)})
    @action(detail=True, methods=['get', 'post'])
    def comments(self, request, pk=None):
        """List comments, or add one."""
        checkin = self.get_object()

        if request.method == 'GET':
            serializer = CheckinCommentSerializer(
                checkin.comments.select_related('user'), many=True
            )
            return Response(serializer.data)

        serializer = CheckinCommentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        comment = add_comment(
            checkin=checkin,
            user=request.user,
            content=serializer.validated_data['content'],
        )
        return Response(CheckinCommentSerializer(comment).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=None, responses={204: None})
    @action(detail=True, methods=['delete'], url_path=r'comments/(?P<comment_id>[^/.]+)')
    def remove_comment(self, request, pk=None, comment_id=None):
        """Delete a comment; only its author (or an admin) may."""
        checkin = self.get_object()
        comment = get_object_or_404(checkin.comments.all(), pk=comment_id)
        if not can_access(request.user, comment, Action.DELETE):
            raise PermissionDenied()

        delete_comment(comment=comment)
        return Response(status=status.HTTP_204_NO_CONTENT)
