import json

import pytest
from django.test import RequestFactory
from django.urls import reverse

from config.views import error_404, error_500


@pytest.mark.django_db
class TestHealthCheck:

    def test_ok(self, client):
        response = client.get(reverse('health-check'))

        assert response.status_code == 200
        assert response.json()['database'] is True

    def test_plain_http_is_not_redirected(self, client, settings):
        response = client.get(reverse('health-check'), secure=False)

        assert settings.SECURE_SSL_REDIRECT is False
        assert response.status_code == 200


class TestErrorHandlers:

    def test_404_includes_path(self):
        request = RequestFactory().get('/api/nowhere/')

        response = error_404(request, Exception())

        assert response.status_code == 404
        assert json.loads(response.content)['path'] == '/api/nowhere/'

    def test_500_points_to_support(self, settings):
        settings.SUPPORT_EMAIL = 'help@example.com'
        request = RequestFactory().get('/')

        response = error_500(request)

        assert response.status_code == 500
        assert 'help@example.com' in json.loads(response.content)['error']
