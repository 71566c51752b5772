"""YouTube URL checks for checkin videos."""

import re
from urllib.parse import parse_qs, urlparse

VIDEO_ID = re.compile(r'^[A-Za-z0-9_-]{11}$')

WATCH_HOSTS = {'youtube.com', 'www.youtube.com', 'm.youtube.com'}
SHORT_HOSTS = {'youtu.be', 'www.youtu.be'}


def video_id(url):
    """
    Extract the video id from a YouTube URL.

    Accepts watch URLs (``/watch?v=``), embed and shorts paths and
    ``youtu.be`` short links. Returns None for anything else.
    """
    if not url:
        return None
    parsed = urlparse(url.strip())
    if parsed.scheme not in ('http', 'https'):
        return None
    host = (parsed.hostname or '').lower()
    path = parsed.path.rstrip('/')

    candidate = None
    if host in SHORT_HOSTS:
        candidate = path.lstrip('/')
    elif host in WATCH_HOSTS:
        if path == '/watch':
            candidate = parse_qs(parsed.query).get('v', [None])[0]
        else:
            for prefix in ('/embed/', '/v/', '/shorts/'):
                if path.startswith(prefix):
                    candidate = path[len(prefix):]
                    break

    if candidate and VIDEO_ID.match(candidate):
        return candidate
    return None


def is_valid_url(url):
    return video_id(url) is not None
