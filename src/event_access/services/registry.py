"""Access code registry."""

from collections.abc import Mapping
from types import MappingProxyType

from event_access.domain.guests import GuestRecord


def normalize_code(code: str) -> str:
    """Trim surrounding whitespace and uppercase an access code."""
    return code.strip().upper()


class CodeRegistry:
    """Read-only mapping from access code to guest identity."""

    def __init__(self, codes: Mapping[str, GuestRecord]) -> None:
        self._codes = MappingProxyType(
            {normalize_code(code): guest for code, guest in codes.items()}
        )

    def lookup(self, code: str) -> GuestRecord | None:
        """Return the guest for a code, ignoring case and surrounding spaces."""
        return self._codes.get(normalize_code(code))

    def __len__(self) -> int:
        return len(self._codes)
