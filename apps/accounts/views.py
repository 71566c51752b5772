from uuid import UUID

from django.conf import settings
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse
from drf_spectacular.utils import extend_schema
from rest_framework import serializers, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .decorators import record_user_action
from .flags import SELECTABLE_ROLES
from .models import User
from .policy import Action, can_access
from .serializers import (
    AccountTypeSerializer,
    ChatAccountSerializer,
    ProfileSerializer,
    UserProfileUpdateSerializer,
    UserSerializer,
)
from .services import (
    ChatProvisioningError,
    InvalidRoleError,
    complete_welcome,
    generate_chat_account,
    get_profile_context,
    reset_chat_account,
    update_account_type,
)


# Response serializers for API documentation
class RedirectResponseSerializer(serializers.Serializer):
    message = serializers.CharField(required=False)
    alert = serializers.CharField(required=False)
    redirect_to = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def load_user(request, user_id=None):
    """Resolve a user id from the URL; a missing id or 'me' means the current user."""
    if not user_id or user_id == 'me':
        return request.user
    try:
        pk = UUID(str(user_id))
    except ValueError:
        pk = None
    return get_object_or_404(User, pk=pk, is_active=True)


def authorize(request, resource, action):
    if not can_access(request.user, resource, action):
        raise PermissionDenied()


def profile_url(user):
    return reverse('users:show', kwargs={'user_id': user.pk})


def chat_url(user):
    return reverse('users:chat', kwargs={'user_id': user.pk})


@extend_schema(exclude=True)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
@record_user_action
def index(request):
    """There is no user directory; send people home."""
    return redirect('/')


@extend_schema(
    responses={200: ProfileSerializer, 403: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Show a profile. Own profile includes the pending invite; "
                "a mentor's profile tells whether you may invite them.",
    tags=['users'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
@record_user_action
def show(request, user_id='me'):
    """Show a user's profile."""
    user = load_user(request, user_id)
    authorize(request, user, Action.SHOW)

    context = get_profile_context(user=user, viewer=request.user)
    return Response(ProfileSerializer({'user': user, **context}).data)


@extend_schema(
    request=AccountTypeSerializer,
    responses={200: RedirectResponseSerializer, 400: ErrorResponseSerializer},
    description="Pick an account type. 'reset' drops the spectator role and reopens the step.",
    tags=['users'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
@record_user_action
def account_type(request):
    """Show or save the current user's account type."""
    user = request.user

    if request.method == 'GET':
        return Response({
            'roles': user.roles.to_list(),
            'setup': user.setup.to_list(),
            'choices': [role.value for role in SELECTABLE_ROLES],
        })

    serializer = AccountTypeSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        update_account_type(
            user=user,
            reset=serializer.validated_data['reset'],
            role=serializer.validated_data.get('roles', ''),
        )
    except InvalidRoleError as e:
        return Response({'roles': [str(e)]}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'message': 'Account type saved', 'redirect_to': '/'})


@extend_schema(
    responses={200: UserSerializer},
    description="Profile edit form data with completeness information.",
    tags=['users'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
@record_user_action
def edit(request, user_id='me'):
    """Profile edit form."""
    user = load_user(request, user_id)
    authorize(request, user, Action.EDIT)

    return Response({
        'user': UserSerializer(user).data,
        'profile_elements': user.profile_elements(),
        'profile_completeness_percent': round(user.profile_completeness() * 100),
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Data for the 'complete your account' form shown after signup.",
    tags=['users'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
@record_user_action
def complete_account(request):
    """Complete-account form."""
    return Response({
        'user': UserSerializer(request.user).data,
        'form': 'complete_account',
    })


@extend_schema(
    request=UserProfileUpdateSerializer,
    responses={200: RedirectResponseSerializer, 400: ErrorResponseSerializer},
    description="Update profile fields. On validation failure the response names the form "
                "to re-render: 'complete_account' when complete_account=true was sent, else 'edit'.",
    tags=['users'],
)
@api_view(['POST', 'PATCH'])
@permission_classes([IsAuthenticated])
@record_user_action
def update_profile(request, user_id='me'):
    """Update user profile."""
    user = load_user(request, user_id)
    authorize(request, user, Action.UPDATE)

    serializer = UserProfileUpdateSerializer(user, data=request.data, partial=True)
    if serializer.is_valid():
        serializer.save()
        return Response({
            'message': 'Your account has been updated!',
            'redirect_to': profile_url(user),
            'user': serializer.data,
        })

    complete = str(request.data.get('complete_account', '')).lower() == 'true'
    return Response({
        'errors': serializer.errors,
        'form': 'complete_account' if complete else 'edit',
    }, status=status.HTTP_400_BAD_REQUEST)


@extend_schema(
    responses={200: ChatAccountSerializer, 503: ErrorResponseSerializer},
    description="Chat login details; the account is created on first visit.",
    tags=['users'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
@record_user_action
def chat(request, user_id='me'):
    """Chat account page."""
    user = load_user(request, user_id)
    authorize(request, user, Action.CHAT)

    if not user.has_chat_account:
        try:
            generate_chat_account(user=user)
        except ChatProvisioningError:
            return Response({
                'error': f'Chat is unavailable right now. Please contact {settings.SUPPORT_EMAIL}'
            }, status=status.HTTP_503_SERVICE_UNAVAILABLE)

    return Response(ChatAccountSerializer(user).data)


@extend_schema(
    request=None,
    responses={200: RedirectResponseSerializer},
    description="Recreate the chat account. Always points back to the chat page.",
    tags=['users'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def reset_chat(request, user_id='me'):
    """Reset chat account."""
    user = load_user(request, user_id)
    authorize(request, user, Action.RESET_CHAT)

    if reset_chat_account(user=user):
        body = {'message': 'Your chat account has been reset, please try logging in again.'}
    else:
        body = {
            'alert': 'Sorry but your chat account could not be reset. '
                     f'Please contact {settings.SUPPORT_EMAIL}'
        }
    body['redirect_to'] = chat_url(user)
    return Response(body)


@extend_schema(
    request=None,
    responses={200: RedirectResponseSerializer},
    description="Welcome page; posting to it finishes onboarding.",
    tags=['users'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
@record_user_action
def welcome(request):
    """Onboarding welcome page."""
    if request.method == 'POST':
        complete_welcome(user=request.user)
        return Response({'message': 'Welcome aboard!', 'redirect_to': '/'})

    return Response({'user': UserSerializer(request.user).data})
