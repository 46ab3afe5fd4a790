# SPDX-FileCopyrightText: Copyright 2024 Siemens AG
#
# SPDX-License-Identifier: Apache-2.0

"""Enums used to tag the keys produced by the structural decoders."""

import enum


class KeyAlgorithm(enum.Enum):
    """Key algorithms the structural decoders can recognise.

    Only `RSA` is accepted by the loaders, the other members exist so that
    a decoded key of another algorithm is rejected by name.
    """

    RSA = "RSA"
    EC = "EC"
    DSA = "DSA"
    DH = "DH"
    ED25519 = "Ed25519"
    ED448 = "Ed448"
    X25519 = "X25519"
    X448 = "X448"
