"""Port for proving ownership of a custom domain."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IDomainVerifier(Protocol):
    """Checks that a domain owner published the verification token."""

    async def verify(self, domain: str, token: str) -> bool:
        """Check whether ``token`` is published for ``domain``.

        Implementations must not raise for lookup failures; an unreachable
        resolver means "not verified".

        Args:
            domain: The custom domain being verified
            token: The expected verification token

        Returns:
            True if the token was found
        """
        ...
