# SPDX-FileCopyrightText: Copyright 2024 Siemens AG
#
# SPDX-License-Identifier: Apache-2.0
# pylint: disable=too-few-public-methods
"""ASN.1 structures for RSA key encodings not covered by `pyasn1_alt_modules`."""

from pyasn1.type import namedtype, univ
from pyasn1_alt_modules import rfc3279


class LegacyRSACRTValue(univ.Sequence):
    """ASN.1 Definition of the `LegacyRSACRTValue` structure.

    LegacyRSACRTValue ::= SEQUENCE {
        exp INTEGER,
        coeff INTEGER,
        r INTEGER
    }
    """

    componentType = namedtype.NamedTypes(
        namedtype.NamedType("exp", univ.Integer()),
        namedtype.NamedType("coeff", univ.Integer()),
        namedtype.NamedType("r", univ.Integer()),
    )


class LegacyRSAPrecomputedValues(univ.Sequence):
    """ASN.1 Definition of the `LegacyRSAPrecomputedValues` structure.

    LegacyRSAPrecomputedValues ::= SEQUENCE {
        dp INTEGER,
        dq INTEGER,
        qinv INTEGER,
        crtValues SEQUENCE OF LegacyRSACRTValue
    }
    """

    componentType = namedtype.NamedTypes(
        namedtype.NamedType("dp", univ.Integer()),
        namedtype.NamedType("dq", univ.Integer()),
        namedtype.NamedType("qinv", univ.Integer()),
        namedtype.NamedType("crtValues", univ.SequenceOf(componentType=LegacyRSACRTValue())),
    )


class LegacyRSAPrivateKey(univ.Sequence):
    """ASN.1 Definition of the `LegacyRSAPrivateKey` structure.

    The bare private key layout written by old tools, without a version field
    and without an outer container. The CRT values are recomputed when loading.

    LegacyRSAPrivateKey ::= SEQUENCE {
        publicKey RSAPublicKey,
        privateExponent INTEGER,
        primes SEQUENCE OF INTEGER,
        precomputed LegacyRSAPrecomputedValues OPTIONAL
    }
    """

    componentType = namedtype.NamedTypes(
        namedtype.NamedType("publicKey", rfc3279.RSAPublicKey()),
        namedtype.NamedType("privateExponent", univ.Integer()),
        namedtype.NamedType("primes", univ.SequenceOf(componentType=univ.Integer())),
        namedtype.OptionalNamedType("precomputed", LegacyRSAPrecomputedValues()),
    )
