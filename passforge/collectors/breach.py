"""
Breach Lookup Collector
========================

k-anonymity breach check against the Pwned Passwords range API. Only the
first five hex characters of the password's SHA-1 digest leave the
process; the remaining 35-character suffix is matched locally against
the ``SUFFIX:COUNT`` lines returned by the service.

The lookup is isolated behind :class:`BreachLookup` so the rest of the
package never sees network faults: :class:`BreachChecker` turns every
failure into :attr:`BreachStatus.UNREACHABLE`, which callers must read as
"unknown" rather than "not breached".

References:
    - Hunt, T. (2018). I've Just Launched "Pwned Passwords" V2 With Half
      a Billion Passwords for Download. https://www.troyhunt.com/
    - Pwned Passwords API. https://haveibeenpwned.com/API/v3#PwnedPasswords
"""

from __future__ import annotations

import hashlib
import logging
import re
from typing import Optional, Protocol

import httpx

from shared.config import BreachConfig
from shared.network import ForgeHTTP, ForgeHTTPError

from passforge.core.exceptions import BreachLookupUnavailable, EmptyInput, InvalidConfiguration
from passforge.core.models import BreachResult, BreachStatus

logger = logging.getLogger("passforge.collectors.breach")

PREFIX_LENGTH = 5
_PREFIX_RE = re.compile(r"[0-9A-Fa-f]{5}")


class BreachLookup(Protocol):
    """Remote range query: hash prefix in, ``{suffix: count}`` out."""

    async def query(self, hash_prefix: str) -> dict[str, int]:
        """Return suffix counts for *hash_prefix*.

        Raises:
            BreachLookupUnavailable: If the service cannot be reached.
        """
        ...


def parse_range_response(body: str) -> dict[str, int]:
    """Parse ``SUFFIX:COUNT`` lines; malformed lines are skipped."""
    counts: dict[str, int] = {}
    for line in body.splitlines():
        suffix, sep, count = line.strip().partition(":")
        if not sep:
            continue
        try:
            counts[suffix.upper()] = int(count)
        except ValueError:
            logger.debug("Skipping malformed range line")
    return counts


def sha1_split(password: str) -> tuple[str, str]:
    """Uppercase SHA-1 hex digest split into (5-char prefix, suffix)."""
    digest = hashlib.sha1(password.encode("utf-8")).hexdigest().upper()
    return digest[:PREFIX_LENGTH], digest[PREFIX_LENGTH:]


class PwnedRangeClient:
    """:class:`BreachLookup` backed by the Pwned Passwords range endpoint.

    One attempt per query with a short fixed timeout; no retry.

    Args:
        config: Breach settings (API URL, timeout, user agent).
        transport: Optional httpx transport, used by tests.
    """

    def __init__(
        self,
        config: Optional[BreachConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or BreachConfig()
        self._transport = transport

    async def query(self, hash_prefix: str) -> dict[str, int]:
        if not _PREFIX_RE.fullmatch(hash_prefix or ""):
            raise InvalidConfiguration(
                f"hash prefix must be {PREFIX_LENGTH} hex characters"
            )
        url = f"{self.config.api_url}{hash_prefix.upper()}"
        try:
            async with ForgeHTTP(
                timeout=self.config.timeout,
                user_agent=self.config.user_agent,
                transport=self._transport,
            ) as http:
                body = await http.fetch_text(url)
        except ForgeHTTPError as exc:
            raise BreachLookupUnavailable(str(exc)) from exc
        return parse_range_response(body)


class BreachChecker:
    """Checks passwords against a :class:`BreachLookup`.

    Usage::

        checker = BreachChecker(PwnedRangeClient())
        result = await checker.check("password123")
        if result.breached:
            print(f"seen {result.count} times")
    """

    def __init__(self, lookup: Optional[BreachLookup] = None) -> None:
        self.lookup: BreachLookup = lookup or PwnedRangeClient()

    async def check(self, password: Optional[str]) -> BreachResult:
        """Look up *password* without sending it or its full hash.

        Raises:
            EmptyInput: If *password* is empty or ``None``.
        """
        if not password:
            raise EmptyInput("password cannot be empty")

        prefix, suffix = sha1_split(password)
        try:
            counts = await self.lookup.query(prefix)
        except BreachLookupUnavailable as exc:
            logger.warning("Breach lookup unavailable: %s", exc)
            return BreachResult(status=BreachStatus.UNREACHABLE, error=str(exc))

        count = counts.get(suffix, 0)
        if count > 0:
            return BreachResult(status=BreachStatus.FOUND, count=count)
        return BreachResult(status=BreachStatus.NOT_FOUND)
