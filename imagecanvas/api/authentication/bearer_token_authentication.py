"""Bearer-token authentication for DRF.

Validates the ``Authorization: Bearer <token>`` request header against the
value stored in ``settings.AUTH_TOKEN``.  Uses :func:`hmac.compare_digest`
for constant-time comparison to prevent timing-based attacks.

When the header is **absent** the authenticator returns ``None``; combined with
``IsAuthenticated`` this produces a 401 carrying a ``WWW-Authenticate: Bearer``
challenge.  When a token is **present but wrong**, a
:class:`~rest_framework.exceptions.PermissionDenied` (403) is raised.
"""

from __future__ import annotations

import hmac
from typing import TYPE_CHECKING

from django.conf import settings
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed, PermissionDenied

if TYPE_CHECKING:
    from rest_framework.request import Request

_KEYWORD = "Bearer"


class _TokenUser:
    """Lightweight sentinel that satisfies DRF's ``request.user`` contract."""

    is_authenticated: bool = True

    def __str__(self) -> str:  # pragma: no cover - cosmetic
        return "TokenUser"


_TOKEN_USER = _TokenUser()


class BearerTokenAuthentication(BaseAuthentication):
    """Authenticate requests bearing the shared service token.

    Behaviour
    ---------
    * Header missing or not a Bearer header -> return ``None``.
    * Bearer header without a token -> raise ``AuthenticationFailed`` (401).
    * ``settings.AUTH_TOKEN`` empty/unset -> raise ``AuthenticationFailed``
      (fail-secure).
    * Token valid -> return ``(_TokenUser(), "bearer")``.
    * Token invalid -> raise ``PermissionDenied`` (403).
    """

    def authenticate(self, request: Request) -> tuple[_TokenUser, str] | None:
        parts = get_authorization_header(request).split()

        if not parts or parts[0].lower() != _KEYWORD.lower().encode():
            return None

        if len(parts) != 2:
            raise AuthenticationFailed("Access token required. Please provide Bearer token in Authorization header.")

        try:
            token = parts[1].decode()
        except UnicodeDecodeError as e:
            raise AuthenticationFailed("Invalid token header.") from e

        configured_token: str = getattr(settings, "AUTH_TOKEN", "")
        if not configured_token:
            raise AuthenticationFailed("Token authentication is not configured on the server.")

        if not hmac.compare_digest(token.encode(), configured_token.encode()):
            raise PermissionDenied("Invalid access token.")

        return _TOKEN_USER, "bearer"

    def authenticate_header(self, request: Request) -> str:
        return _KEYWORD
