# SPDX-FileCopyrightText: Copyright 2024 Siemens AG
#
# SPDX-License-Identifier: Apache-2.0

"""Small helpers shared by the key loading modules."""

from typing import Union

from robot.api.deco import keyword, not_keyword


@not_keyword
def str_to_bytes(value: Union[str, bytes]) -> bytes:
    """Convert a given string or byte input to bytes.

    :param value: The value to convert. Bytes are returned unchanged, strings are UTF-8 encoded.
    :return: The converted bytes object.
    :raises ValueError: If the input is neither a string nor bytes.
    """
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, bytes):
        return value
    raise ValueError(f"Input must be of type 'str' or 'bytes'. Received: {type(value)}")


@keyword(name="Load PEM File")
def load_pem_file(filepath: str) -> bytes:  # noqa: D417 for RF docs
    """Read a PEM file fully into memory and trim the surrounding whitespace.

    Arguments:
    ---------
        - `filepath`: The path to the file.

    Returns:
    -------
        - The content of the file as bytes.

    Raises:
    ------
        - `OSError`: If the file cannot be read, e.g. `FileNotFoundError`.

    Examples:
    --------
    | ${pem_data}= | Load PEM File | data/keys/private-key-rsa-pkcs1.pem |

    """
    with open(filepath, "rb") as pem_file:
        return pem_file.read().strip()
