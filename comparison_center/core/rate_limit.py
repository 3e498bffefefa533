"""
Shared slowapi limiter. main.py stores it on app.state; routes decorate with it.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request


def get_rate_limit_key(request: Request) -> str:
    """
    Extract the rate limit key: the client address.

    Request headers are not used; without authentication they are whatever
    the client chooses to send.
    """
    return get_remote_address(request)


limiter = Limiter(key_func=get_rate_limit_key)
