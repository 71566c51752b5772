"""
Chat account provisioning.

Every community member gets a HipChat login. The provisioner that talks to
the chat service is chosen by ``settings.CHAT_PROVISIONER`` so development
and tests can run without the external service.
"""

from dataclasses import dataclass
import logging
import secrets

from django.conf import settings
from django.utils.module_loading import import_string
import requests

from .services.exceptions import ChatProvisioningError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatCredentials:
    username: str
    password: str


def _generate_password():
    return secrets.token_urlsafe(12)


class ChatProvisioner:
    """Interface for chat-service account management."""

    def create_account(self, user) -> ChatCredentials:
        raise NotImplementedError

    def delete_account(self, user) -> None:
        raise NotImplementedError


class LocalChatProvisioner(ChatProvisioner):
    """Generates credentials without calling any external service."""

    def create_account(self, user) -> ChatCredentials:
        return ChatCredentials(
            username=f"{user.email.split('@')[0]}-{secrets.token_hex(3)}",
            password=_generate_password(),
        )

    def delete_account(self, user) -> None:
        return None


class HipChatProvisioner(ChatProvisioner):
    """Manages accounts through the HipChat admin API."""

    def __init__(self, api_url=None, auth_token=None, timeout=None):
        self.api_url = (api_url or settings.HIPCHAT_API_URL).rstrip('/')
        self.auth_token = auth_token or settings.HIPCHAT_AUTH_TOKEN
        self.timeout = timeout or settings.HIPCHAT_TIMEOUT

    def _post(self, endpoint, data):
        try:
            response = requests.post(
                f"{self.api_url}/{endpoint}",
                params={'auth_token': self.auth_token, 'format': 'json'},
                data=data,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise ChatProvisioningError(f"HipChat {endpoint} failed: {e}") from e
        return response.json()

    def create_account(self, user) -> ChatCredentials:
        password = _generate_password()
        data = self._post('users/create', {
            'email': user.email,
            'name': user.get_display_name(),
            'password': password,
        })
        try:
            username = data['user']['email']
        except (KeyError, TypeError) as e:
            raise ChatProvisioningError("Unexpected HipChat response") from e
        return ChatCredentials(username=username, password=password)

    def delete_account(self, user) -> None:
        self._post('users/delete', {'user_id': user.hipchat_username or user.email})


def get_chat_provisioner() -> ChatProvisioner:
    return import_string(settings.CHAT_PROVISIONER)()
