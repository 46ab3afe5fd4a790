# SPDX-FileCopyrightText: Copyright 2024 Siemens AG
#
# SPDX-License-Identifier: Apache-2.0

"""Load RSA keys from PEM-encoded data or files.

The loaders accept the encodings written by different tools and key ages:
PKCS#1, PKCS#8, `SubjectPublicKeyInfo`, the bare legacy structures, and blocks
encrypted with the legacy OpenSSL PEM encryption or as PKCS#8 `EncryptedPrivateKeyInfo`.
Keys of another algorithm than RSA are rejected.
"""

from typing import Union

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey
from robot.api.deco import keyword

from rsakey_logic import key_normalizer, utils
from rsakey_logic.data_objects import DecodedKey
from rsakey_logic.key_cascade import PRIVATE_KEY_CASCADE, PUBLIC_KEY_CASCADE, KeyCascade
from rsakey_logic.pemutils import decode_pem_block, decrypt_pem_block
from rsakey_logic.typingutils import Password


def _decode_key(pem_bytes: Union[bytes, str], password: Password, cascade: KeyCascade) -> DecodedKey:
    """Decode the PEM envelope, decrypt the block and run it through the cascade."""
    block = decode_pem_block(pem_bytes)
    block = decrypt_pem_block(block, password)
    return cascade.resolve(block)


@keyword(name="Load RSA Private Key")
def load_rsa_private_key(  # noqa: D417 for RF docs
    pem_bytes: Union[bytes, str], password: Password = None
) -> RSAPrivateKey:
    """Load an RSA private key from PEM-encoded data.

    Accepted PEM labels are "PRIVATE KEY", "ENCRYPTED PRIVATE KEY" and "RSA PRIVATE KEY".
    The data is decoded as PKCS#1 `RSAPrivateKey`, then as PKCS#8 `PrivateKeyInfo`,
    and last as the bare legacy `RSAPrivateKey` structure.

    Arguments:
    ---------
        - `pem_bytes`: The PEM-encoded key.
        - `password`: The passphrase of an encrypted key. Defaults to `None`.

    Returns:
    -------
        - The loaded `RSAPrivateKey`.

    Raises:
    ------
        - `InvalidPEMData`: If no PEM block is found.
        - `PEMDecryptionError`: If the block cannot be decrypted.
        - `UnsupportedPEMBlockType`: If the PEM label is not accepted.
        - `InvalidKeyData`: If the data matches none of the formats (error of the last format).
        - `UnsupportedKeyType`: If the key is not an RSA key.

    Examples:
    --------
    | ${key}= | Load RSA Private Key | ${pem_data} |
    | ${key}= | Load RSA Private Key | ${pem_data} | password=11111 |

    """
    decoded = _decode_key(pem_bytes, password, PRIVATE_KEY_CASCADE)
    return key_normalizer.narrow_to_rsa_private_key(decoded)


@keyword(name="Load RSA Private Key From File")
def load_rsa_private_key_from_file(  # noqa: D417 for RF docs
    filepath: str, password: Password = None
) -> RSAPrivateKey:
    """Load an RSA private key from a PEM file.

    Arguments:
    ---------
        - `filepath`: The path to the file containing the PEM-encoded key.
        - `password`: The passphrase of an encrypted key. Defaults to `None`.

    Returns:
    -------
        - The loaded `RSAPrivateKey`.

    Raises:
    ------
        - `OSError`: If the file cannot be read, e.g. `FileNotFoundError`.
        - The errors of `Load RSA Private Key`.

    Examples:
    --------
    | ${key}= | Load RSA Private Key From File | data/keys/private-key-rsa-pkcs1.pem |
    | ${key}= | Load RSA Private Key From File | data/keys/private-key-rsa-legacy-enc.pem | password=11111 |

    """
    return load_rsa_private_key(utils.load_pem_file(filepath), password)


@keyword(name="Load RSA Public Key")
def load_rsa_public_key(  # noqa: D417 for RF docs
    pem_bytes: Union[bytes, str], password: Password = None
) -> RSAPublicKey:
    """Load an RSA public key from PEM-encoded data.

    Accepted PEM labels are "PUBLIC KEY", "PRIVATE KEY", "ENCRYPTED PRIVATE KEY",
    "RSA PUBLIC KEY" and "RSA PRIVATE KEY". The data is decoded as `SubjectPublicKeyInfo`,
    then as PKCS#1 `RSAPrivateKey`, then as PKCS#8 `PrivateKeyInfo`, and last as the
    bare `RSAPublicKey` structure. For a private key, its public key is returned.

    Arguments:
    ---------
        - `pem_bytes`: The PEM-encoded key.
        - `password`: The passphrase of an encrypted key. Defaults to `None`.

    Returns:
    -------
        - The loaded `RSAPublicKey`.

    Raises:
    ------
        - `InvalidPEMData`: If no PEM block is found.
        - `PEMDecryptionError`: If the block cannot be decrypted.
        - `UnsupportedPEMBlockType`: If the PEM label is not accepted.
        - `InvalidKeyData`: If the data matches none of the formats (error of the last format).
        - `UnsupportedKeyType`: If the key is not an RSA key.

    Examples:
    --------
    | ${public_key}= | Load RSA Public Key | ${pem_data} |

    """
    decoded = _decode_key(pem_bytes, password, PUBLIC_KEY_CASCADE)
    return key_normalizer.narrow_to_rsa_public_key(decoded)


@keyword(name="Load RSA Public Key From File")
def load_rsa_public_key_from_file(  # noqa: D417 for RF docs
    filepath: str, password: Password = None
) -> RSAPublicKey:
    """Load an RSA public key from a PEM file.

    Arguments:
    ---------
        - `filepath`: The path to the file containing the PEM-encoded key.
        - `password`: The passphrase of an encrypted key. Defaults to `None`.

    Returns:
    -------
        - The loaded `RSAPublicKey`.

    Raises:
    ------
        - `OSError`: If the file cannot be read, e.g. `FileNotFoundError`.
        - The errors of `Load RSA Public Key`.

    Examples:
    --------
    | ${public_key}= | Load RSA Public Key From File | data/keys/public-key-rsa-spki.pem |

    """
    return load_rsa_public_key(utils.load_pem_file(filepath), password)
