# SPDX-FileCopyrightText: Copyright 2024 Siemens AG
#
# SPDX-License-Identifier: Apache-2.0

"""Narrow a decoded key to the RSA key type requested by the loader."""

from cryptography.hazmat.primitives.asymmetric import rsa
from robot.api.deco import not_keyword

from rsakey_logic.data_objects import DecodedKey
from rsakey_logic.exceptions import UnsupportedKeyType
from rsakey_logic.keyenums import KeyAlgorithm


@not_keyword
def narrow_to_rsa_private_key(decoded: DecodedKey) -> rsa.RSAPrivateKey:
    """Return the RSA private key or reject the decoded key.

    :param decoded: The key produced by the format cascade.
    :return: The RSA private key.
    :raises UnsupportedKeyType: If the key is not an RSA private key, or has more than two primes.
    """
    if decoded.algorithm is KeyAlgorithm.RSA:
        if decoded.multi_prime:
            raise UnsupportedKeyType(decoded.algorithm, "multi-prime private key")
        if decoded.is_private:
            return decoded.key  # type: ignore
        raise UnsupportedKeyType(decoded.algorithm, "public key")

    raise UnsupportedKeyType(decoded.algorithm)


@not_keyword
def narrow_to_rsa_public_key(decoded: DecodedKey) -> rsa.RSAPublicKey:
    """Return the RSA public key, or the public part of an RSA private key.

    :param decoded: The key produced by the format cascade.
    :return: The RSA public key.
    :raises UnsupportedKeyType: If the key is not an RSA key.
    """
    if decoded.algorithm is KeyAlgorithm.RSA:
        if decoded.is_private and not decoded.multi_prime:
            return decoded.key.public_key()  # type: ignore
        return decoded.key  # type: ignore

    raise UnsupportedKeyType(decoded.algorithm)
