"""
.. module:: algebra

algebra module
==============

This module exports the abstract classes :obj:`~chaumian.algebra.field`,
:obj:`~chaumian.algebra.point`, and :obj:`~chaumian.algebra.scalar`. Together
they describe the capabilities that every curve-specific module in this
library provides (constructing points and scalars from their hexadecimal
representations, adding points, multiplying points by scalars, testing group
membership, and hashing arbitrary bytes to a point).

Protocol code that is written against these classes does not depend on any
particular curve or backend. The :obj:`~chaumian.secp256k1` module supplies
concrete subclasses for the secp256k1 curve.

>>> from chaumian import secp256k1
>>> isinstance(secp256k1.field(), field)
True
>>> isinstance(secp256k1.point(), point)
True
>>> isinstance(secp256k1.scalar(), scalar)
True
"""
from __future__ import annotations
from typing import Optional
import abc
import binascii
import doctest

def unhex(s: str) -> bytes:
    """
    Decode a hexadecimal string. Unlike :obj:`bytes.fromhex`, whitespace is
    not tolerated; any malformed input raises an exception instead of being
    skipped or truncated.

    >>> unhex('00ff').hex()
    '00ff'
    >>> unhex('abc')
    Traceback (most recent call last):
      ...
    ValueError: malformed hexadecimal string
    >>> unhex('ab cd')
    Traceback (most recent call last):
      ...
    ValueError: malformed hexadecimal string
    """
    if not isinstance(s, str):
        raise TypeError('hexadecimal representation must be a string')

    try:
        return binascii.unhexlify(s)
    except (binascii.Error, ValueError) as exc:
        raise ValueError('malformed hexadecimal string') from exc

class field(abc.ABC):
    """
    Algebraic context that binds the points and scalars of one group.
    Instances are stateless and may be shared freely.
    """
    @abc.abstractmethod
    def hash_to_field(self: field, bs: bytes) -> Optional[point]:
        """
        Deterministically map a bytes-like object to a point of the group,
        returning ``None`` if no point could be found.
        """

    @abc.abstractmethod
    def hex_to_point(self: field, s: str) -> point:
        """
        Decode a point from its hexadecimal representation without
        checking that it is a member of the group.
        """

    @abc.abstractmethod
    def hex_to_scalar(self: field, s: str) -> scalar:
        """
        Decode a scalar from its hexadecimal representation without
        checking that it is a valid scalar.
        """

    @abc.abstractmethod
    def generator(self: field) -> point:
        """
        Return the standard base point of the group.
        """

    def is_valid_point(self: field, s: str) -> bool:
        """
        Return whether the hexadecimal string represents a member of the group.
        """
        return self.hex_to_point(s).is_member()

    def is_valid_scalar(self: field, s: str) -> bool:
        """
        Return whether the hexadecimal string represents a valid scalar.
        """
        return self.hex_to_scalar(s).is_member()

class point(abc.ABC):
    """
    Element of the group.
    """
    @abc.abstractmethod
    def get_field(self: point) -> field:
        """Return the field that created this point."""

    @abc.abstractmethod
    def add(self: point, other: point) -> point:
        """Return the sum of this point and another point."""

    @abc.abstractmethod
    def mul(self: point, other: scalar) -> point:
        """Return this point multiplied by a scalar."""

    @abc.abstractmethod
    def equals(self: point, other: point) -> bool:
        """Compare the encodings of two points."""

    @abc.abstractmethod
    def is_member(self: point) -> bool:
        """Return whether this point is a member of the group."""

    @abc.abstractmethod
    def to_hex(self: point) -> str:
        """Return the hexadecimal representation of this point."""

class scalar(abc.ABC):
    """
    Element of the scalar field of the group.
    """
    @abc.abstractmethod
    def get_field(self: scalar) -> field:
        """Return the field that created this scalar."""

    @abc.abstractmethod
    def to_point(self: scalar) -> point:
        """Return the base point multiplied by this scalar."""

    @abc.abstractmethod
    def is_member(self: scalar) -> bool:
        """Return whether this scalar is a valid (non-zero, reduced) scalar."""

    @abc.abstractmethod
    def sign(self: scalar, other: point) -> point:
        """Return the supplied point multiplied by this scalar."""

    @abc.abstractmethod
    def to_hex(self: scalar) -> str:
        """Return the hexadecimal representation of this scalar."""

if __name__ == '__main__':
    doctest.testmod() # pragma: no cover
