"""
Python library that serves as an API for the elliptic curve primitives
used to implement Chaumian ecash (blind signature) protocols.

This module gives users direct access to the individual modules: the
curve-independent contract in :obj:`~chaumian.algebra` and the
implementation of that contract for the secp256k1 curve in
:obj:`~chaumian.secp256k1`.
"""
from chaumian import algebra
from chaumian import secp256k1
