# SPDX-FileCopyrightText: Copyright 2024 Siemens AG
#
# SPDX-License-Identifier: Apache-2.0

"""Contains the custom exceptions raised while loading RSA keys."""

from typing import List, Optional, Union

from rsakey_logic.keyenums import KeyAlgorithm


class KeyLoadingError(Exception):
    """Base class for all key loading errors."""

    error_details: List[str]

    def __init__(self, message: str, error_details: Optional[Union[List[str], str]] = None):
        """Initialize the exception with the message.

        :param message: The message to display.
        :param error_details: Additional details about the error.
        """
        self.message = message
        self.error_details = []
        if isinstance(error_details, str):
            self.error_details = [error_details]
        elif error_details is not None:
            self.error_details = list(error_details)
        super().__init__(message)

    def get_error_details(self) -> List[str]:
        """Return the error details."""
        return self.error_details


class InvalidPEMData(KeyLoadingError):
    """Raised when no decodable PEM block is found in the input."""


class PEMDecryptionError(KeyLoadingError):
    """Raised when an encrypted PEM block cannot be decrypted.

    Covers a missing or wrong password, corrupted ciphertext and unsupported ciphers.
    """

    def __init__(self, cause: Union[Exception, str]):
        """Initialize the exception with the underlying cause.

        :param cause: The error raised by the decryption backend.
        """
        self.cause = cause
        super().__init__(f"Error decrypting PEM block: {cause}")


class UnsupportedPEMBlockType(KeyLoadingError):
    """Raised when the PEM label is not accepted for the requested key type."""

    def __init__(self, block_type: str):
        """Initialize the exception with the offending label.

        :param block_type: The PEM block label, e.g. "CERTIFICATE".
        """
        self.block_type = block_type
        super().__init__(f"Unsupported PEM block type {block_type!r}")


class InvalidKeyData(KeyLoadingError):
    """Raised when the key bytes do not match the structure of a decoder."""


class UnsupportedKeyType(KeyLoadingError):
    """Raised when a structurally valid key is not an RSA key."""

    def __init__(self, algorithm: KeyAlgorithm, extra_info: str = ""):
        """Initialize the exception with the algorithm that was found.

        :param algorithm: The algorithm of the decoded key.
        :param extra_info: Additional information about the rejected key.
        """
        self.algorithm = algorithm
        message = f"Unsupported key type: {algorithm.value}"
        if extra_info:
            message += f" ({extra_info})"
        super().__init__(message)
