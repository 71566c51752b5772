from rest_framework import serializers

from apps.accounts.serializers import UserPublicSerializer
from .models import Checkin, CheckinComment
from .windows import CheckinType


class CheckinSerializer(serializers.ModelSerializer):
    """Full checkin representation."""

    user = UserPublicSerializer(read_only=True)
    startup_name = serializers.CharField(source='startup.name', read_only=True)
    time_label = serializers.CharField(read_only=True)
    submitted = serializers.BooleanField(read_only=True)
    completed = serializers.BooleanField(read_only=True)

    class Meta:
        model = Checkin
        fields = [
            'id',
            'startup',
            'startup_name',
            'user',
            'start_focus',
            'start_why',
            'start_video_url',
            'start_comments',
            'end_video_url',
            'end_comments',
            'comment_count',
            'time_label',
            'submitted',
            'completed',
            'submitted_at',
            'completed_at',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class CheckinInputSerializer(serializers.Serializer):
    """
    Fields a startup fills in.

    Only lengths are checked here. Required fields and video URLs depend on
    the open checkin window and are validated by the service.
    """

    start_focus = serializers.CharField(required=False, allow_blank=True)
    start_why = serializers.CharField(required=False, allow_blank=True)
    start_video_url = serializers.CharField(required=False, allow_blank=True, max_length=255)
    start_comments = serializers.CharField(required=False, allow_blank=True)
    end_video_url = serializers.CharField(required=False, allow_blank=True, max_length=255)
    end_comments = serializers.CharField(required=False, allow_blank=True)


class CheckinCommentSerializer(serializers.ModelSerializer):
    user = UserPublicSerializer(read_only=True)

    class Meta:
        model = CheckinComment
        fields = ['id', 'user', 'content', 'created_at']
        read_only_fields = ['id', 'user', 'created_at']


class CheckinWindowSerializer(serializers.Serializer):
    """Where we are in the weekly checkin cycle."""

    next_checkin_type = serializers.ChoiceField(choices=CheckinType.choices)
    next_checkin_time = serializers.DateTimeField()
    in_before_window = serializers.BooleanField()
    in_after_window = serializers.BooleanField()
    week_label = serializers.CharField()
