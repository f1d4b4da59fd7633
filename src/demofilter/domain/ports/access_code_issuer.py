"""Access code issuer port (interface)."""

from __future__ import annotations

from typing import Protocol


class AccessCodeIssuerPort(Protocol):
    """Issues an access code to one candidate.

    Each call is independent: no batching, no transaction across calls.
    """

    def issue(self, candidate_id: str) -> str:
        """Create and assign an access code.

        Args:
            candidate_id: Candidate record id

        Returns:
            The assigned code

        Raises:
            Exception: Any failure from the backing service
        """
        ...
