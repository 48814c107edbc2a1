"""Token resolution for private repositories."""

import os
import re
from typing import Optional

import httpx

from gitresource.exceptions import TokenResolutionError

_TOKEN_REFERENCE = re.compile(r"^(?:\{\{\s*)?env:([A-Za-z_][A-Za-z0-9_]*)(?:\s*\}\})?$")


class EnvTokenProvider:
    """Resolves ``env:<VARIABLE>`` token references from the process environment.

    The reference may also be written as ``{{env:<VARIABLE>}}``. The resolved
    token is attached as a bearer Authorization header on a new client.
    """

    def __init__(self, timeout: float = 30.0, environ: Optional[dict[str, str]] = None):
        self.timeout = timeout
        self._environ = environ if environ is not None else os.environ

    def resolve_token(self, token_info: str) -> str:
        """Return the token referenced by token_info.

        Raises:
            TokenResolutionError: If the reference is malformed or the variable is unset
        """
        match = _TOKEN_REFERENCE.match(token_info.strip())
        if not match:
            raise TokenResolutionError(
                f"Token info {token_info!r} is not in the format 'env:<VARIABLE>'"
            )

        variable = match.group(1)
        token = self._environ.get(variable, "").strip()
        if not token:
            raise TokenResolutionError(f"Environment variable {variable} is not set")
        return token

    def get_oauth_client(self, token_info: str) -> httpx.Client:
        """Return an HTTP client authorized with the referenced token."""
        token = self.resolve_token(token_info)
        return httpx.Client(
            timeout=self.timeout,
            headers={"Authorization": f"Bearer {token}"},
        )
