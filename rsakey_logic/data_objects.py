# SPDX-FileCopyrightText: Copyright 2024 Siemens AG
#
# SPDX-License-Identifier: Apache-2.0

"""Dataclass objects passed between the structural decoders and the key normalizer."""

from dataclasses import dataclass
from typing import Optional

from rsakey_logic.exceptions import InvalidKeyData
from rsakey_logic.keyenums import KeyAlgorithm
from rsakey_logic.typingutils import GenericKey


@dataclass(frozen=True)
class DecodedKey:
    """A key produced by a structural decoder, tagged with its algorithm.

    Attributes:
        algorithm: The algorithm of the key.
        key: The `cryptography` key object.
        is_private: Whether the decoded structure is a private key.
        multi_prime: Whether the private key has more than two primes. Such a key cannot
        be built as a `cryptography` private key, so `key` holds only its public key.

    """

    algorithm: KeyAlgorithm
    key: GenericKey
    is_private: bool
    multi_prime: bool = False


@dataclass(frozen=True)
class DecodeResult:
    """The outcome of a single decoder attempt.

    Either `decoded` is set (the data matched the format) or `error` is set
    (the data did not match and the next format should be tried).

    Attributes:
        decoder_name: The name of the format that was tried.
        decoded: The decoded key on success.
        error: The reason why the data did not match the format.

    """

    decoder_name: str
    decoded: Optional[DecodedKey] = None
    error: Optional[InvalidKeyData] = None

    @property
    def ok(self) -> bool:
        """Return `True` if the decoder matched the data."""
        return self.decoded is not None

    @classmethod
    def success(cls, decoder_name: str, decoded: DecodedKey) -> "DecodeResult":
        """Create a successful result."""
        return cls(decoder_name=decoder_name, decoded=decoded)

    @classmethod
    def failure(cls, decoder_name: str, error: InvalidKeyData) -> "DecodeResult":
        """Create a result which tells the cascade to try the next format."""
        return cls(decoder_name=decoder_name, error=error)
