import pytest

from apps.checkins.video import is_valid_url, video_id


class TestVideoId:

    @pytest.mark.parametrize('url', [
        'https://www.youtube.com/watch?v=dQw4w9WgXcQ',
        'http://youtube.com/watch?v=dQw4w9WgXcQ&t=42s',
        'https://m.youtube.com/watch?v=dQw4w9WgXcQ',
        'https://www.youtube.com/embed/dQw4w9WgXcQ',
        'https://www.youtube.com/v/dQw4w9WgXcQ',
        'https://www.youtube.com/shorts/dQw4w9WgXcQ',
        'https://youtu.be/dQw4w9WgXcQ',
        '  https://youtu.be/dQw4w9WgXcQ  ',
    ])
    def test_accepts_youtube_links(self, url):
        assert video_id(url) == 'dQw4w9WgXcQ'
        assert is_valid_url(url)

    @pytest.mark.parametrize('url', [
        '',
        None,
        'not a url',
        'https://vimeo.com/123456789',
        'https://www.youtube.com/watch?v=short',
        'https://www.youtube.com/channel/UC1234567890',
        'ftp://youtu.be/dQw4w9WgXcQ',
        'https://evil.example.com/watch?v=dQw4w9WgXcQ',
    ])
    def test_rejects_everything_else(self, url):
        assert video_id(url) is None
        assert not is_valid_url(url)
