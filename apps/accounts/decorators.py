import functools
import logging
import time

logger = logging.getLogger('apps.user_actions')


def record_user_action(view_func):
    """
    Log who did what for a view, with the resulting status code.

    Apply below ``@api_view`` so ``request.user`` is already authenticated.
    """

    @functools.wraps(view_func)
    def wrapper(request, *args, **kwargs):
        started = time.monotonic()
        response = view_func(request, *args, **kwargs)
        user = getattr(request, 'user', None)
        logger.info(
            "user=%s action=%s method=%s status=%s elapsed_ms=%d",
            getattr(user, 'pk', None),
            view_func.__name__,
            request.method,
            getattr(response, 'status_code', None),
            (time.monotonic() - started) * 1000,
        )
        return response

    return wrapper
