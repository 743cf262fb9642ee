"""Deterministic derivation of two catch-up instants per year.

The same two identifiers and year always produce the same two instants:
no entropy, no stored state, only a cryptographic digest used as a seed.

Algorithm for one year:

1. ``seed_a = id_a + id_b + year`` and ``seed_b = id_b + id_a + year``.
   The swapped order makes the two instants independent while both
   identifiers still influence each of them.
2. Digest each seed's UTF-8 bytes (SHA-256 by default).
3. Read the first 4 bytes of each digest as an unsigned big-endian int.
4. Reduce modulo the number of hours in the year.
5. Offset midnight UTC on January 1 by that many hours.
6. Sort the two instants ascending.
"""

from __future__ import annotations

import asyncio
import hashlib
import logging

from catchup.domain.calendar import check_year, hour_to_timestamp, hours_in_year
from catchup.domain.errors import HashingUnavailableError, InvalidInputError
from catchup.domain.models import YearlyEventPair

logger = logging.getLogger(__name__)

DEFAULT_DIGEST = "sha256"
MIN_DIGEST_BYTES = 32
SEED_BYTES = 4


def seed_strings(id_a: str, id_b: str, year: int) -> tuple[str, str]:
    """Build the two asymmetric seed strings for *year*."""
    return (f"{id_a}{id_b}{year}", f"{id_b}{id_a}{year}")


def check_digest(algorithm: str = DEFAULT_DIGEST) -> str:
    """Ensure *algorithm* is available on this host with a 256-bit or larger digest."""
    _new_hasher(algorithm)
    return algorithm


def _new_hasher(algorithm: str) -> hashlib._Hash:
    try:
        hasher = hashlib.new(algorithm)
    except (ValueError, TypeError) as exc:
        raise HashingUnavailableError(
            f"Digest algorithm {algorithm!r} is not available on this host",
            algorithm=algorithm,
        ) from exc
    if hasher.digest_size < MIN_DIGEST_BYTES:
        raise HashingUnavailableError(
            f"Digest algorithm {algorithm!r} is too short "
            f"({hasher.digest_size * 8} bits, need {MIN_DIGEST_BYTES * 8})",
            algorithm=algorithm,
        )
    return hasher


def digest_seed(seed: str, algorithm: str = DEFAULT_DIGEST) -> bytes:
    """Digest the UTF-8 encoding of *seed*."""
    try:
        data = seed.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidInputError(
            "Participant identifiers must be UTF-8 encodable", reason=str(exc)
        ) from exc
    hasher = _new_hasher(algorithm)
    hasher.update(data)
    return hasher.digest()


def hash_to_number(digest: bytes) -> int:
    """Interpret the first 4 bytes (8 hex chars) of *digest* as an unsigned int."""
    return int.from_bytes(digest[:SEED_BYTES], "big")


def hour_of_year(number: int, year: int) -> int:
    return number % hours_in_year(year)


def assemble(year: int, digest_a: bytes, digest_b: bytes) -> YearlyEventPair:
    """Turn a year's two digests into its ordered event pair.

    Equal hours yield equal instants; the pair is kept as-is.
    """
    hour_a = hour_of_year(hash_to_number(digest_a), year)
    hour_b = hour_of_year(hash_to_number(digest_b), year)
    first, second = sorted((hour_to_timestamp(hour_a, year), hour_to_timestamp(hour_b, year)))
    logger.debug("derived year=%s hours=%s,%s", year, hour_a, hour_b)
    return YearlyEventPair(year=year, first=first, second=second)


def derive(id_a: str, id_b: str, year: int, *, algorithm: str = DEFAULT_DIGEST) -> YearlyEventPair:
    """Derive the event pair for *year* synchronously."""
    check_year(year)
    seed_a, seed_b = seed_strings(id_a, id_b, year)
    return assemble(year, digest_seed(seed_a, algorithm), digest_seed(seed_b, algorithm))


async def derive_async(
    id_a: str, id_b: str, year: int, *, algorithm: str = DEFAULT_DIGEST
) -> YearlyEventPair:
    """Derive the event pair for *year*, hashing both seeds concurrently.

    Produces exactly the same result as :func:`derive`.
    """
    check_year(year)
    seed_a, seed_b = seed_strings(id_a, id_b, year)
    digest_a, digest_b = await asyncio.gather(
        asyncio.to_thread(digest_seed, seed_a, algorithm),
        asyncio.to_thread(digest_seed, seed_b, algorithm),
    )
    return assemble(year, digest_a, digest_b)
