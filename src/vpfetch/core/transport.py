"""Session selection for the standard and self-signed trust modes.

The certificate bypass lives here and nowhere else: the request path only
ever sees the session this module hands back.
"""

import ssl
from dataclasses import dataclass

import httpx

from ..config import FetchSettings, settings as default_settings


@dataclass(frozen=True)
class TransportPolicy:
    """Whether to accept any server certificate (self-signed mode)."""

    trust_any_certificate: bool = False


def trust_any_certificate_context() -> ssl.SSLContext:
    """Build an SSL context that accepts every certificate chain."""
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    # check_hostname must be off before verification can be disabled
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def select_session(
    policy: TransportPolicy,
    default_session: httpx.AsyncClient | None,
    settings: FetchSettings | None = None,
) -> httpx.AsyncClient:
    """Return the session a single fetch should use.

    With the policy off this is `default_session` itself, which must then
    be set. With it on, a new client bound to a permissive trust context is
    returned (`default_session` may be None); the caller owns it and must
    close it when the fetch is done. The default session is never
    reconfigured.
    """
    if not policy.trust_any_certificate:
        return default_session

    settings = settings or default_settings
    return httpx.AsyncClient(
        verify=trust_any_certificate_context(),
        timeout=httpx.Timeout(settings.timeout),
        headers={"User-Agent": settings.user_agent},
        follow_redirects=settings.follow_redirects,
    )
