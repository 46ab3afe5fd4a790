# SPDX-FileCopyrightText: Copyright 2024 Siemens AG
#
# SPDX-License-Identifier: Apache-2.0

"""Helpers to decode DER-encoded key structures with `pyasn1`."""

from typing import Any, Tuple

import pyasn1.error
from pyasn1.codec.der import decoder
from pyasn1.type import base

from rsakey_logic.exceptions import InvalidKeyData


def try_decode_pyasn1(data: bytes, asn1_spec: base.Asn1Item) -> Tuple[Any, bytes]:
    """Decode the DER data into the given structure.

    :param data: The DER-encoded data.
    :param asn1_spec: The `pyasn1` structure to decode into.
    :return: The decoded structure and the remaining undecoded bytes.
    :raises InvalidKeyData: If the data does not match the structure.
    """
    name = type(asn1_spec).__name__
    try:
        return decoder.decode(data, asn1Spec=asn1_spec)
    except (pyasn1.error.PyAsn1Error, ValueError, TypeError) as err:
        raise InvalidKeyData(f"The `{name}` structure could not be decoded: {err}") from err


def decode_exact(data: bytes, asn1_spec: base.Asn1Item) -> Any:
    """Decode the DER data into the given structure and reject trailing data.

    :param data: The DER-encoded data.
    :param asn1_spec: The `pyasn1` structure to decode into.
    :return: The decoded structure.
    :raises InvalidKeyData: If the data does not match the structure or has a remainder.
    """
    decoded, rest = try_decode_pyasn1(data, asn1_spec)
    if rest:
        name = type(asn1_spec).__name__
        raise InvalidKeyData(f"The `{name}` structure had a remainder: {rest.hex()}.")
    return decoded
