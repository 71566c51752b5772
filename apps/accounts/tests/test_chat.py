from unittest.mock import MagicMock, patch

import pytest
import requests

from apps.accounts.chat import HipChatProvisioner
from apps.accounts.services import ChatProvisioningError


@pytest.mark.django_db
class TestHipChatProvisioner:
    """Tests for the HipChat HTTP client."""

    def _provisioner(self):
        return HipChatProvisioner(api_url='https://chat.example.com/v1/', auth_token='token', timeout=5)

    def test_create_account_posts_user(self, user):
        response = MagicMock()
        response.json.return_value = {'user': {'email': user.email}}

        with patch('apps.accounts.chat.requests.post', return_value=response) as mock_post:
            credentials = self._provisioner().create_account(user)

        assert credentials.username == user.email
        assert credentials.password
        url = mock_post.call_args.args[0]
        assert url == 'https://chat.example.com/v1/users/create'
        assert mock_post.call_args.kwargs['data']['email'] == user.email
        assert mock_post.call_args.kwargs['timeout'] == 5

    def test_http_error_becomes_provisioning_error(self, user):
        with patch('apps.accounts.chat.requests.post', side_effect=requests.ConnectionError('down')):
            with pytest.raises(ChatProvisioningError):
                self._provisioner().create_account(user)

    def test_unexpected_payload_becomes_provisioning_error(self, user):
        response = MagicMock()
        response.json.return_value = {'error': 'nope'}

        with patch('apps.accounts.chat.requests.post', return_value=response):
            with pytest.raises(ChatProvisioningError):
                self._provisioner().create_account(user)
