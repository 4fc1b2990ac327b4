"""The decoder ring — database ID obfuscation between URLs and storage.

Every label (an alias for the column holding the ID) gets its own
Hashids instance, salted with the label and the configured secret, and
its own tag: the first four bytes of sha256(label:secret). A token holds
the pair [tag, id]. Decoding requires the tag of the label asked for, so
a token made under "user" fails under "order" instead of turning into
some other integer.

The ring is built once at startup and shared across requests read-only.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Iterable

from hashids import Hashids

from chaski.errors import ValidationError

logger = logging.getLogger("chaski.decoder")


def _label_tag(label: str, secret: str) -> int:
    digest = hashlib.sha256(f"{label}:{secret}".encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big")


class DecoderRing:
    """Label-scoped, bidirectional mapping between integers and tokens."""

    def __init__(self, secret: str, labels: Iterable[str], min_length: int = 8):
        self._hashers = {
            label: (
                Hashids(salt=f"{label}:{secret}", min_length=min_length),
                _label_tag(label, secret),
            )
            for label in labels
        }
        if not secret:
            logger.warning("Decoder ring has no secret; tokens are guessable")

    @property
    def labels(self) -> frozenset[str]:
        return frozenset(self._hashers)

    def knows(self, label: str) -> bool:
        return label in self._hashers

    def _hasher(self, label: str) -> tuple[Hashids, int]:
        try:
            return self._hashers[label]
        except KeyError:
            raise ValidationError(f"Unknown ID label '{label}'") from None

    def encode(self, label: str, value: int) -> str:
        """Map a database ID to the token shown in URLs."""
        hasher, tag = self._hasher(label)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValidationError(
                f"Cannot obfuscate {value!r} under label '{label}': "
                "IDs must be non-negative integers"
            )
        return hasher.encode(tag, value)

    def decode(self, label: str, token: str) -> int:
        """Map a URL token back to the database ID.

        Raises ValidationError when the token is corrupt or was made
        under a different label.
        """
        hasher, tag = self._hasher(label)
        numbers = hasher.decode(token)
        if len(numbers) != 2 or numbers[0] != tag:
            raise ValidationError(f"Cannot decode '{token}' under label '{label}'")
        return numbers[1]
