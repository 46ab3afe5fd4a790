# SPDX-FileCopyrightText: Copyright 2024 Siemens AG
#
# SPDX-License-Identifier: Apache-2.0

"""Mappings from key algorithm OIDs to the `KeyAlgorithm` tags."""

from typing import Dict, Optional

from pyasn1.type import univ
from pyasn1_alt_modules import rfc6664, rfc9481

from rsakey_logic.keyenums import KeyAlgorithm

# RFC 3279 section 2.3.2 and 2.3.3.
id_dsa = univ.ObjectIdentifier("1.2.840.10040.4.1")
dhpublicnumber = univ.ObjectIdentifier("1.2.840.10046.2.1")

KEY_OID_2_ALGORITHM: Dict[univ.ObjectIdentifier, KeyAlgorithm] = {
    rfc9481.rsaEncryption: KeyAlgorithm.RSA,
    rfc6664.id_ecPublicKey: KeyAlgorithm.EC,
    id_dsa: KeyAlgorithm.DSA,
    dhpublicnumber: KeyAlgorithm.DH,
    rfc9481.id_Ed25519: KeyAlgorithm.ED25519,
    rfc9481.id_Ed448: KeyAlgorithm.ED448,
    rfc9481.id_X25519: KeyAlgorithm.X25519,
    rfc9481.id_X448: KeyAlgorithm.X448,
}


def may_return_key_algorithm(oid: univ.ObjectIdentifier) -> Optional[KeyAlgorithm]:
    """Return the `KeyAlgorithm` for a key algorithm OID, or `None` if the OID is unknown.

    :param oid: The algorithm OID of a `SubjectPublicKeyInfo` or `PrivateKeyInfo` structure.
    :return: The matching `KeyAlgorithm` or `None`.
    """
    return KEY_OID_2_ALGORITHM.get(oid)
