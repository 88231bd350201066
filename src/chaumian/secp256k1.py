"""
.. module:: secp256k1

secp256k1 module
================

This module exports the classes :obj:`~chaumian.secp256k1.field`,
:obj:`~chaumian.secp256k1.point`, and :obj:`~chaumian.secp256k1.scalar` for
working with the secp256k1 group. It also exports the two wrapper
classes/namespaces :obj:`~chaumian.secp256k1.python` and
:obj:`~chaumian.secp256k1.libsecp256k1` that encapsulate pure-Python and
shared/dynamic library variants of the above (respectively) and also include
low-level operations that correspond more directly to the functions found in
the underlying libraries.

* Under all conditions, the wrapper class :obj:`~chaumian.secp256k1.python`
  is defined and encapsulates a pure-Python variant of every class exported
  by this module as a whole. Its low-level operations are built on the curve
  arithmetic provided by the `ecdsa <https://pypi.org/project/ecdsa>`__
  package.

* If the optional `coincurve <https://pypi.org/project/coincurve>`__ package
  (which includes a bundled copy of the
  `libsecp256k1 <https://github.com/bitcoin-core/secp256k1>`__ library) is
  installed, then the wrapper class :obj:`~chaumian.secp256k1.libsecp256k1`
  is defined. Otherwise, the exported variable ``libsecp256k1`` is assigned
  ``None``.

* If :obj:`~chaumian.secp256k1.libsecp256k1` is defined, all classes
  exported by this module correspond to the variants defined within it.
  Otherwise, they correspond to the variants defined within
  :obj:`~chaumian.secp256k1.python`.

Points are represented using the 33-byte compressed encoding (a parity prefix
followed by the big-endian *x*-coordinate) and scalars are represented using
their 32-byte big-endian encoding. Both backends emit identical byte vectors,
so objects created by one backend can be supplied to the other.

>>> f = field()
>>> p = f.hash_to_field(bytes(32))
>>> p.to_hex()
'024cce997d3b518f739663b757deaec95bcd9473c30a14ac2fd04023a739d1a725'
>>> p.is_member()
True
>>> s = f.hex_to_scalar(
...     '0000000000000000000000000000000000000000000000000000000000000002'
... )
>>> s.to_point() == f.generator() + f.generator()
True

Neither points nor scalars are checked for validity when they are decoded.
Use :obj:`point.is_member` and :obj:`scalar.is_member` (or the
:obj:`field.is_valid_point` and :obj:`field.is_valid_scalar` helpers) before
relying on a value received from another party.

>>> f.is_valid_point('00' * 33)
False
>>> f.is_valid_scalar('ff' * 32)
False
"""
from __future__ import annotations
from typing import Any, NoReturn, Union, Optional
import doctest
import logging
import hashlib
import secrets
from ecdsa import SECP256k1, VerifyingKey
from ecdsa.ellipticcurve import INFINITY
from ecdsa.errors import MalformedPointError

from chaumian import algebra

logger = logging.getLogger(__name__)

DOMAIN_SEPARATOR = b'Secp256k1_HashToCurve_Cashu_'
"""
Prefix mixed into every message before it is hashed to a point.
"""

ORDER = SECP256k1.order
"""
Order of the secp256k1 group (*i.e.*, modulus of the scalar field).
"""

PRIME = SECP256k1.curve.p()
"""
Prime modulus of the field over which the secp256k1 curve is defined.
"""

POINT_LEN = 33
SCALAR_LEN = 32

_GENERATOR = bytes.fromhex(
    '0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'
)

def _same_field(a: Union[algebra.point, algebra.scalar], b: Union[algebra.point, algebra.scalar]):
    if a.get_field() != b.get_field():
        raise ValueError('operands belong to different fields')

#
# Pure-Python implementations of primitives (using the curve arithmetic
# found in the ecdsa package).
#

def _scalar_to_int(s: bytes) -> int:
    """
    Return the integer represented by a valid scalar; raise an exception
    if the scalar is not valid.
    """
    i = int.from_bytes(s, 'big')
    if len(s) != SCALAR_LEN or not 0 < i < ORDER:
        raise ValueError('invalid scalar')
    return i

def _point_decode(p: bytes):
    """
    Decode a compressed point; raise an exception if the encoding does not
    correspond to a point on the curve.
    """
    if (
        len(p) != POINT_LEN or p[0] not in (2, 3) or
        int.from_bytes(p[1:], 'big') >= PRIME
    ):
        raise ValueError('invalid point')

    try:
        return VerifyingKey.from_string(bytes(p), curve=SECP256k1).pubkey.point
    except MalformedPointError as exc:
        raise ValueError('invalid point') from exc

def _point_encode(q) -> bytes:
    """
    Return the compressed encoding of a point.
    """
    if q == INFINITY:
        raise ValueError('point at infinity has no compressed encoding')

    # Negated Jacobian points may carry an unreduced y-coordinate.
    (x, y) = (q.x() % PRIME, q.y() % PRIME)
    return bytes([2 + (y & 1)]) + x.to_bytes(32, 'big')

class python:
    """
    Wrapper class for pure-Python implementations of primitive operations.

    This class encapsulates pure-Python variants of all low-level operations
    and of all classes exported by this module:
    :obj:`python.rnd <rnd>`, :obj:`python.scl <scl>`,
    :obj:`python.inv <inv>`, :obj:`python.smu <smu>`,
    :obj:`python.sad <sad>`, :obj:`python.pnt <pnt>`,
    :obj:`python.bas <bas>`, :obj:`python.mul <mul>`,
    :obj:`python.add <add>`, :obj:`python.sub <sub>`,
    :obj:`python.neg <neg>`,
    :obj:`python.point <chaumian.secp256k1.python.point>`,
    :obj:`python.scalar <chaumian.secp256k1.python.scalar>`, and
    :obj:`python.field <chaumian.secp256k1.python.field>`.
    For example, you can perform addition of points using
    the pure-Python point addition implementation.

    >>> p = python.pnt()
    >>> q = python.pnt()
    >>> python.add(p, q) == python.add(q, p)
    True

    Pure-Python variants of the :obj:`python.point <point>` and
    :obj:`python.scalar <scalar>` classes always employ pure-Python
    implementations of operations when their methods are invoked.

    >>> p = python.point()
    >>> q = python.point()
    >>> p + q == q + p
    True

    Nevertheless, all bytes-like objects, :obj:`point` objects, and
    :obj:`scalar` objects accepted and emitted by the various operations and
    class methods in :obj:`python` are compatible with those accepted and
    emitted by the operations and class methods in :obj:`libsecp256k1`.
    """
    @staticmethod
    def rnd() -> bytes:
        """
        Return random non-zero scalar.

        >>> len(python.rnd())
        32
        """
        return (secrets.randbelow(ORDER - 1) + 1).to_bytes(SCALAR_LEN, 'big')

    @classmethod
    def scl(cls, s: Optional[bytes] = None) -> Optional[bytes]:
        """
        Return supplied byte vector if it is a valid scalar; otherwise, return
        ``None``. If no byte vector is supplied, return a random scalar.

        >>> s = python.scl()
        >>> t = python.scl(s)
        >>> s == t
        True
        >>> python.scl(bytes([255] * 32)) is None
        True
        >>> python.scl(bytes(32)) is None
        True
        """
        if s is None:
            return cls.rnd()

        try:
            _scalar_to_int(s)
        except ValueError:
            return None

        return bytes(s)

    @staticmethod
    def inv(s: bytes) -> bytes:
        """
        Return the inverse of a scalar (modulo the group order).

        >>> s = python.scl()
        >>> python.smu(python.inv(s), s) == (1).to_bytes(32, 'big')
        True
        """
        return pow(_scalar_to_int(s), -1, ORDER).to_bytes(SCALAR_LEN, 'big')

    @staticmethod
    def smu(s: bytes, t: bytes) -> bytes:
        """
        Return the product of two scalars.

        >>> s = python.scl()
        >>> t = python.scl()
        >>> python.smu(s, t) == python.smu(t, s)
        True
        """
        return (
            (_scalar_to_int(s) * _scalar_to_int(t)) % ORDER
        ).to_bytes(SCALAR_LEN, 'big')

    @staticmethod
    def sad(s: bytes, t: bytes) -> bytes:
        """
        Return the sum of two scalars.

        >>> one = (1).to_bytes(32, 'big')
        >>> python.sad(one, one).hex()[-2:]
        '02'
        """
        r = (_scalar_to_int(s) + _scalar_to_int(t)) % ORDER
        if r == 0:
            raise ValueError('sum of scalars is zero')
        return r.to_bytes(SCALAR_LEN, 'big')

    @staticmethod
    def pnt(p: Optional[bytes] = None) -> Optional[bytes]:
        """
        Return supplied byte vector if it is the compressed encoding of a
        point on the curve; otherwise, return ``None``. If no byte vector is
        supplied, return a random point.

        >>> g = bytes.fromhex(
        ...     '0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'
        ... )
        >>> python.pnt(g) == g
        True
        >>> python.pnt(bytes(33)) is None
        True
        >>> len(python.pnt())
        33
        """
        if p is None:
            return python.bas(python.rnd())

        try:
            _point_decode(p)
        except ValueError:
            return None

        return bytes(p)

    @staticmethod
    def bas(s: bytes) -> bytes:
        """
        Return base point multiplied by supplied scalar.

        >>> python.bas((1).to_bytes(32, 'big')).hex()
        '0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'
        """
        return _point_encode(SECP256k1.generator * _scalar_to_int(s))

    @staticmethod
    def mul(s: bytes, p: bytes) -> bytes:
        """
        Multiply the point by the supplied scalar and return the result.

        >>> g = python.bas((1).to_bytes(32, 'big'))
        >>> python.mul((2).to_bytes(32, 'big'), g).hex()
        '02c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5'
        """
        return _point_encode(_point_decode(p) * _scalar_to_int(s))

    @staticmethod
    def add(p: bytes, q: bytes) -> bytes:
        """
        Return sum of the supplied points.

        >>> g = python.bas((1).to_bytes(32, 'big'))
        >>> python.add(g, python.add(g, g)).hex()
        '02f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9'
        """
        return _point_encode(_point_decode(p) + _point_decode(q))

    @staticmethod
    def sub(p: bytes, q: bytes) -> bytes:
        """
        Return result of subtracting second point from first point.

        >>> g = python.bas((1).to_bytes(32, 'big'))
        >>> python.sub(python.add(g, g), g) == g
        True
        """
        return python.add(p, python.neg(q))

    @staticmethod
    def neg(p: bytes) -> bytes:
        """
        Return the additive inverse of a point.

        >>> g = python.bas((1).to_bytes(32, 'big'))
        >>> python.neg(g).hex()
        '0379be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'
        """
        return _point_encode(-_point_decode(p))

#
# Attempt to load primitives from libsecp256k1 via coincurve, if it is
# present; otherwise, silently assign ``None`` to ``libsecp256k1``.
#

try:
    from coincurve import PrivateKey, PublicKey

    def _private_key(s: bytes) -> PrivateKey:
        if len(s) != SCALAR_LEN:
            raise ValueError('invalid scalar')
        try:
            return PrivateKey(bytes(s))
        except ValueError as exc:
            raise ValueError('invalid scalar') from exc

    def _public_key(p: bytes) -> PublicKey:
        if len(p) != POINT_LEN or p[0] not in (2, 3):
            raise ValueError('invalid point')
        try:
            return PublicKey(bytes(p))
        except ValueError as exc:
            raise ValueError('invalid point') from exc

    # Exported symbol.
    class libsecp256k1:
        """
        Wrapper class for binary implementations of primitive operations.

        When this module is imported, it attempts to import the
        `coincurve <https://pypi.org/project/coincurve>`__ package, which
        bundles a compiled copy of
        `libsecp256k1 <https://github.com/bitcoin-core/secp256k1>`__. If the
        import fails, then :obj:`libsecp256k1` is assigned the value ``None``
        and all classes exported by this module default to their pure-Python
        variants (*i.e.*, those encapsulated within :obj:`python`). To confirm
        that the library *has been found* when this module is imported,
        evaluate the expression ``libsecp256k1 is not None``.

        If the library has been loaded successfully, this class encapsulates
        shared/dynamic library variants of all classes exported by this module
        and of all the underlying low-level operations:
        :obj:`libsecp256k1.rnd <rnd>`, :obj:`libsecp256k1.scl <scl>`,
        :obj:`libsecp256k1.inv <inv>`, :obj:`libsecp256k1.smu <smu>`,
        :obj:`libsecp256k1.sad <sad>`, :obj:`libsecp256k1.pnt <pnt>`,
        :obj:`libsecp256k1.bas <bas>`, :obj:`libsecp256k1.mul <mul>`,
        :obj:`libsecp256k1.add <add>`, :obj:`libsecp256k1.sub <sub>`,
        :obj:`libsecp256k1.neg <neg>`,
        :obj:`libsecp256k1.point <chaumian.secp256k1.libsecp256k1.point>`,
        :obj:`libsecp256k1.scalar <chaumian.secp256k1.libsecp256k1.scalar>`,
        and :obj:`libsecp256k1.field <chaumian.secp256k1.libsecp256k1.field>`.

        >>> p = libsecp256k1.pnt()
        >>> q = libsecp256k1.pnt()
        >>> libsecp256k1.add(p, q) == libsecp256k1.add(q, p)
        True

        Nevertheless, all bytes-like objects, :obj:`point` objects, and
        :obj:`scalar` objects accepted and emitted by the various operations
        and class methods in :obj:`libsecp256k1` are compatible with those
        accepted and emitted by the operations and class methods in
        :obj:`python`.

        >>> s = libsecp256k1.rnd()
        >>> libsecp256k1.bas(s) == python.bas(s)
        True
        """
        @staticmethod
        def rnd() -> bytes:
            """
            Return random non-zero scalar.

            >>> len(libsecp256k1.rnd())
            32
            """
            return PrivateKey().secret

        @classmethod
        def scl(cls, s: Optional[bytes] = None) -> Optional[bytes]:
            """
            Return supplied byte vector if it is a valid scalar; otherwise,
            return ``None``. If no byte vector is supplied, return a random
            scalar.

            >>> s = libsecp256k1.scl()
            >>> t = libsecp256k1.scl(s)
            >>> s == t
            True
            >>> libsecp256k1.scl(bytes([255] * 32)) is None
            True
            """
            if s is None:
                return cls.rnd()

            try:
                _private_key(s)
            except ValueError:
                return None

            return bytes(s)

        @staticmethod
        def inv(s: bytes) -> bytes:
            """
            Return the inverse of a scalar (modulo the group order). The
            library offers no scalar inversion, so the pure-Python variant
            is used.

            >>> s = libsecp256k1.scl()
            >>> libsecp256k1.smu(libsecp256k1.inv(s), s) == (1).to_bytes(32, 'big')
            True
            """
            return python.inv(_private_key(s).secret)

        @staticmethod
        def smu(s: bytes, t: bytes) -> bytes:
            """
            Return the product of two scalars.

            >>> s = libsecp256k1.scl()
            >>> t = libsecp256k1.scl()
            >>> libsecp256k1.smu(s, t) == libsecp256k1.smu(t, s)
            True
            """
            return _private_key(s).multiply(_private_key(t).secret).secret

        @staticmethod
        def sad(s: bytes, t: bytes) -> bytes:
            """
            Return the sum of two scalars.

            >>> s = libsecp256k1.scl()
            >>> t = libsecp256k1.scl()
            >>> libsecp256k1.sad(s, t) == python.sad(s, t)
            True
            """
            try:
                return _private_key(s).add(_private_key(t).secret).secret
            except ValueError as exc:
                raise ValueError('sum of scalars is zero') from exc

        @staticmethod
        def pnt(p: Optional[bytes] = None) -> Optional[bytes]:
            """
            Return supplied byte vector if it is the compressed encoding of a
            point on the curve; otherwise, return ``None``. If no byte vector
            is supplied, return a random point.

            >>> libsecp256k1.pnt(bytes(33)) is None
            True
            >>> len(libsecp256k1.pnt())
            33
            """
            if p is None:
                return PrivateKey().public_key.format()

            try:
                _public_key(p)
            except ValueError:
                return None

            return bytes(p)

        @staticmethod
        def bas(s: bytes) -> bytes:
            """
            Return base point multiplied by supplied scalar.

            >>> libsecp256k1.bas((1).to_bytes(32, 'big')).hex()
            '0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'
            """
            return _private_key(s).public_key.format()

        @staticmethod
        def mul(s: bytes, p: bytes) -> bytes:
            """
            Multiply the point by the supplied scalar and return the result.

            >>> g = libsecp256k1.bas((1).to_bytes(32, 'big'))
            >>> libsecp256k1.mul((2).to_bytes(32, 'big'), g).hex()
            '02c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5'
            """
            return _public_key(p).multiply(_private_key(s).secret).format()

        @staticmethod
        def add(p: bytes, q: bytes) -> bytes:
            """
            Return sum of the supplied points.

            >>> g = libsecp256k1.bas((1).to_bytes(32, 'big'))
            >>> libsecp256k1.add(g, libsecp256k1.add(g, g)).hex()
            '02f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9'
            """
            (p_key, q_key) = (_public_key(p), _public_key(q))
            try:
                return PublicKey.combine_keys([p_key, q_key]).format()
            except ValueError as exc:
                raise ValueError('point at infinity has no compressed encoding') from exc

        @staticmethod
        def sub(p: bytes, q: bytes) -> bytes:
            """
            Return result of subtracting second point from first point.

            >>> g = libsecp256k1.bas((1).to_bytes(32, 'big'))
            >>> libsecp256k1.sub(libsecp256k1.add(g, g), g) == g
            True
            """
            return libsecp256k1.add(p, libsecp256k1.neg(q))

        @staticmethod
        def neg(p: bytes) -> bytes:
            """
            Return the additive inverse of a point.

            >>> g = libsecp256k1.bas((1).to_bytes(32, 'big'))
            >>> libsecp256k1.neg(g).hex()
            '0379be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'
            """
            # Negation only changes the parity of the y-coordinate.
            q = _public_key(p).format()
            return bytes([q[0] ^ 1]) + q[1:]

    logger.debug('using libsecp256k1 (via coincurve) for secp256k1 primitives')

except ImportError: # pragma: no cover
    # Exported symbol.
    libsecp256k1 = None
    logger.debug('coincurve not found; using pure-Python secp256k1 primitives')

#
# Dedicated point, scalar, and field data structures derived from `bytes`.
#

for _implementation in [python] + ([libsecp256k1] if libsecp256k1 is not None else []):
    # pylint: disable=cell-var-from-loop
    class point(bytes, algebra.point): # pylint: disable=E0102
        """
        Class for representing a point. Because this class is derived from
        :obj:`bytes`, it inherits methods such as :obj:`bytes.hex` and
        :obj:`bytes.fromhex`.

        >>> len(point.random())
        33
        >>> p = point.hash(bytes(32))
        >>> p.hex()
        '024cce997d3b518f739663b757deaec95bcd9473c30a14ac2fd04023a739d1a725'
        >>> point.fromhex(p.hex()) == p
        True
        """
        _implementation = _implementation

        @classmethod
        def random(cls) -> point:
            """
            Return random point object.

            >>> point.random().is_member()
            True
            """
            return cls(cls._implementation.pnt())

        @classmethod
        def bytes(cls, bs: bytes) -> Optional[point]:
            """
            Return point object corresponding to the supplied bytes-like
            object if it is the encoding of a point on the curve; otherwise,
            return ``None``.

            >>> point.bytes(bytes(33)) is None
            True
            >>> p = point()
            >>> point.bytes(p) == p
            True
            """
            p = cls._implementation.pnt(bs)
            return cls(p) if p is not None else None

        @classmethod
        def hash(cls, bs: bytes) -> Optional[point]:
            """
            Return point object by hashing supplied bytes-like object.

            >>> point.hash(bytes(31) + bytes([1])).hex()
            '022e7158e11c9506f1aa4248bf531298daa7febd6194f003edcd9b93ade6253acf'
            """
            return cls._implementation.context.hash_to_field(bs)

        @classmethod
        def base(cls, s: scalar) -> point:
            """
            Return base point multiplied by supplied scalar.

            >>> point.base(scalar.from_int(1)) == field().generator()
            True
            """
            return cls(cls._implementation.bas(s))

        def __new__(
                cls,
                bs: Optional[bytes] = None,
                field: Optional[algebra.field] = None # pylint: disable=W0621
            ) -> point:
            """
            If a bytes-like object is supplied, return a point object
            corresponding to the supplied bytes-like object (no checking
            is performed to confirm that the bytes-like object is a valid
            point). If no argument is supplied, return a random point
            object. The optional field becomes the owner of the point.

            >>> point(bytes(33)).hex() == '00' * 33
            True
            >>> len(point())
            33
            """
            p = bytes.__new__(cls, bs if bs is not None else cls._implementation.pnt())
            p._field = field if field is not None else cls._implementation.context
            return p

        def get_field(self: point) -> algebra.field:
            """
            Return the field that owns this point.

            >>> point().get_field() == field()
            True
            """
            return self._field

        def is_member(self: point) -> bool:
            """
            Return whether this instance is the encoding of a point on the curve.

            >>> point().is_member()
            True
            >>> point(bytes(33)).is_member()
            False
            """
            return self._implementation.pnt(self) is not None

        def add(self: point, other: point) -> point:
            """
            Return the sum of this instance and another point.

            >>> g = field().generator()
            >>> g.add(g).add(g).hex()
            '02f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9'

            Both operands must be members of the group.

            >>> g.add(point(bytes(33)))
            Traceback (most recent call last):
              ...
            ValueError: invalid point
            """
            if not isinstance(other, algebra.point):
                raise TypeError('point can only be added to a point')
            _same_field(self, other)
            return self._implementation.point(
                self._implementation.add(self, other),
                self._field
            )

        def mul(self: point, other: scalar) -> point:
            """
            Return this instance multiplied by the supplied scalar.

            >>> g = field().generator()
            >>> g.mul(scalar.from_int(2)).hex()
            '02c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5'
            """
            if not isinstance(other, algebra.scalar):
                raise TypeError('point can only be multiplied by a scalar')
            _same_field(self, other)
            return self._implementation.point(
                self._implementation.mul(other, self),
                self._field
            )

        def equals(self: point, other: point) -> bool:
            """
            Return whether the encodings of this instance and another point
            are identical.

            >>> p = point()
            >>> p.equals(point(p.to_bytes()))
            True
            >>> p.equals(-p)
            False
            """
            return isinstance(other, algebra.point) and bytes(self) == bytes(other)

        def to_hex(self: point) -> str:
            """
            Return the hexadecimal representation of this instance.

            >>> field().generator().to_hex()
            '0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'
            """
            return self.hex()

        def to_bytes(self: point) -> bytes:
            """
            Return the bytes-like object that represents this instance.

            >>> p = point()
            >>> p.to_bytes() == p
            True
            """
            return bytes(self)

        def __add__(self: point, other: point) -> point:
            """
            Return the sum of this instance and another point.

            >>> p = point.hash('123'.encode())
            >>> q = point.hash('456'.encode())
            >>> p + q == q + p
            True
            """
            return self.add(other)

        def __sub__(self: point, other: point) -> point:
            """
            Return the result of subtracting another point from this instance.

            >>> p = point.hash('123'.encode())
            >>> q = point.hash('456'.encode())
            >>> (p - q) + q == p
            True
            """
            if not isinstance(other, algebra.point):
                raise TypeError('point can only be subtracted from a point')
            _same_field(self, other)
            return self._implementation.point(
                self._implementation.sub(self, other),
                self._field
            )

        def __neg__(self: point) -> point:
            """
            Return the negation of this instance.

            >>> p = point.hash('123'.encode())
            >>> q = point.hash('456'.encode())
            >>> ((p + q) + (-q)) == p
            True
            """
            return self._implementation.point(self._implementation.neg(self), self._field)

        def __mul__(self: point, other: Any) -> NoReturn:
            """
            A point cannot be a left-hand argument for a multiplication operation.

            >>> point() * scalar()
            Traceback (most recent call last):
              ...
            TypeError: point must be on right-hand side of multiplication operator
            """
            raise TypeError('point must be on right-hand side of multiplication operator')

        def __rmul__(self: point, other: Any) -> NoReturn:
            """
            This functionality is implemented exclusively in the method
            :obj:`scalar.__mul__`, as that method pre-empts this method
            when the second argument has the correct type (*i.e.*, it is
            a :obj:`scalar` instance). This method is included so that an
            exception can be raised if an incorrect argument is supplied.

            >>> p = point.hash('123'.encode())
            >>> 2 * p
            Traceback (most recent call last):
              ...
            TypeError: point can only be multiplied by a scalar
            """
            raise TypeError('point can only be multiplied by a scalar')

    class scalar(bytes, algebra.scalar):
        """
        Class for representing a scalar. Because this class is derived from
        :obj:`bytes`, it inherits methods such as :obj:`bytes.hex` and
        :obj:`bytes.fromhex`.

        >>> len(scalar.random())
        32
        >>> s = scalar.hash('123'.encode())
        >>> s.hex()
        'a665a45920422f9d417e4867efdc4fb8a04a1f3fff1fa07e998e86f7f7a27a03'
        >>> scalar.fromhex(s.hex()) == s
        True
        """
        _implementation = _implementation

        @classmethod
        def random(cls) -> scalar:
            """
            Return random non-zero scalar object.

            >>> scalar.random().is_member()
            True
            """
            return cls(cls._implementation.rnd())

        @classmethod
        def bytes(cls, bs: bytes) -> Optional[scalar]:
            """
            Return scalar object corresponding to the supplied bytes-like
            object if it is a valid scalar; otherwise, return ``None``.

            >>> s = python.scl()
            >>> scalar.bytes(s) == s
            True
            >>> scalar.bytes(bytes([255] * 32)) is None
            True
            """
            s = cls._implementation.scl(bs)
            return cls(s) if s is not None else None

        @classmethod
        def hash(cls, bs: bytes) -> scalar:
            """
            Return scalar object by hashing supplied bytes-like object.

            >>> scalar.hash('123'.encode()).hex()
            'a665a45920422f9d417e4867efdc4fb8a04a1f3fff1fa07e998e86f7f7a27a03'
            """
            h = hashlib.sha256(bs).digest()
            s = cls._implementation.scl(h)
            while s is None:
                h = hashlib.sha256(h).digest()
                s = cls._implementation.scl(h)
            return cls(s)

        @classmethod
        def from_int(cls, i: int) -> scalar:
            """
            Construct an instance from its integer (*i.e.*, residue) representation.

            >>> p = point()
            >>> scalar.from_int(1) * p == p
            True
            >>> scalar.from_int(2) * p == p + p
            True

            Negative integers are supported (and automatically converted into their
            corresponding least nonnegative residues).

            >>> scalar.from_int(-1) * p == -p
            True

            The scalar corresponding to the zero residue can be constructed, but it
            is not a member of the scalar field.

            >>> scalar.from_int(0).is_member()
            False
            """
            return cls((i % ORDER).to_bytes(SCALAR_LEN, 'big'))

        def __new__(
                cls,
                bs: Optional[bytes] = None,
                field: Optional[algebra.field] = None # pylint: disable=W0621
            ) -> scalar:
            """
            If a bytes-like object is supplied, return a scalar object
            corresponding to the supplied bytes-like object (no checking
            is performed to confirm that the bytes-like object is a valid
            scalar). If no argument is supplied, return a random scalar
            object. The optional field becomes the owner of the scalar.

            >>> s = python.scl()
            >>> t = scalar(s)
            >>> s.hex() == t.hex()
            True
            >>> len(scalar())
            32
            """
            s = bytes.__new__(cls, bs if bs is not None else cls._implementation.rnd())
            s._field = field if field is not None else cls._implementation.context
            return s

        def get_field(self: scalar) -> algebra.field:
            """
            Return the field that owns this scalar.

            >>> scalar().get_field() == field()
            True
            """
            return self._field

        def is_member(self: scalar) -> bool:
            """
            Return whether this instance is a valid scalar (*i.e.*, whether it
            can be used to derive a point from the base point).

            >>> scalar().is_member()
            True
            >>> scalar(bytes([255] * 32)).is_member()
            False
            """
            return self._implementation.scl(self) is not None

        def to_point(self: scalar) -> point:
            """
            Return the base point multiplied by this instance.

            >>> scalar.from_int(1).to_point() == field().generator()
            True
            """
            return self._implementation.point(self._implementation.bas(self), self._field)

        def sign(self: scalar, other: point) -> point:
            """
            Return the supplied point multiplied by this instance (*e.g.*, to
            sign a blinded message).

            >>> s = scalar()
            >>> p = point.hash('123'.encode())
            >>> s.sign(p) == p.mul(s)
            True
            """
            if not isinstance(other, algebra.point):
                raise TypeError('only a point can be signed')
            return other.mul(self)

        def to_hex(self: scalar) -> str:
            """
            Return the hexadecimal representation of this instance.

            >>> scalar.from_int(1).to_hex()[-4:]
            '0001'
            """
            return self.hex()

        def to_bytes(self: scalar) -> bytes:
            """
            Return the bytes-like object that represents this instance.

            >>> s = scalar()
            >>> s.to_bytes() == s
            True
            """
            return bytes(self)

        def inverse(self: scalar) -> scalar:
            """
            Return the inverse of this instance (modulo the group order).

            >>> s = scalar()
            >>> p = point()
            >>> s.inverse() * (s * p) == p
            True
            """
            return self._implementation.scalar(self._implementation.inv(self), self._field)

        def __invert__(self: scalar) -> scalar:
            """
            Return the inverse of this instance (modulo the group order).

            >>> s = scalar()
            >>> p = point()
            >>> ((~s) * (s * p)) == p
            True

            The scalar corresponding to the zero residue cannot be inverted.

            >>> ~scalar.from_int(0)
            Traceback (most recent call last):
              ...
            ValueError: invalid scalar
            """
            return self.inverse()

        def __add__(self: scalar, other: scalar) -> scalar:
            """
            Return the sum of this instance and another scalar.

            >>> s = scalar()
            >>> t = scalar()
            >>> (s + t) * point.hash(bytes(32)) == (
            ...     (s * point.hash(bytes(32))) + (t * point.hash(bytes(32)))
            ... )
            True
            """
            if not isinstance(other, algebra.scalar):
                raise TypeError('scalar can only be added to a scalar')
            _same_field(self, other)
            return self._implementation.scalar(
                self._implementation.sad(self, other),
                self._field
            )

        def __mul__(self: scalar, other: Union[scalar, point]) -> Union[scalar, point]:
            """
            Multiply the supplied scalar or point by this instance.

            >>> g = field().generator()
            >>> (scalar.from_int(2) * g).hex()
            '02c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5'
            >>> isinstance(scalar() * scalar(), scalar)
            True
            >>> isinstance(scalar() * g, point)
            True

            Any attempt to multiply a value or object of an incompatible type by this
            instance raises an exception.

            >>> scalar() * 2
            Traceback (most recent call last):
              ...
            TypeError: multiplication by a scalar is defined only for scalars and points
            """
            if isinstance(other, algebra.scalar):
                _same_field(self, other)
                return self._implementation.scalar(
                    self._implementation.smu(self, other),
                    self._field
                )

            if isinstance(other, algebra.point):
                return other.mul(self)

            raise TypeError(
                'multiplication by a scalar is defined only for scalars and points'
            )

        def __rmul__(self: scalar, other: Any) -> NoReturn:
            """
            A scalar cannot be on the right-hand side of a non-scalar.

            >>> 2 * scalar()
            Traceback (most recent call last):
              ...
            TypeError: scalar must be on left-hand side of multiplication operator
            """
            raise TypeError(
                'scalar must be on left-hand side of multiplication operator'
            )

        def __int__(self: scalar) -> int:
            """
            Return the integer (*i.e.*, least nonnegative residue) representation
            of this instance.

            >>> s = scalar()
            >>> int(s * (~s))
            1
            """
            return int.from_bytes(self, 'big')

        def to_int(self: scalar) -> int:
            """
            Return the integer (*i.e.*, least nonnegative residue) representation
            of this instance.

            >>> s = scalar()
            >>> (s * (~s)).to_int()
            1
            """
            return int(self)

    class field(algebra.field):
        """
        The secp256k1 group together with the hash-to-curve map that uses
        :obj:`DOMAIN_SEPARATOR`. Instances hold no state; any two instances
        compare equal.

        >>> field() == field()
        True
        >>> f = field()
        >>> f.hex_to_point(f.generator().to_hex()) == f.generator()
        True
        """
        _implementation = _implementation

        curve = 'secp256k1'
        domain = DOMAIN_SEPARATOR

        attempts = 0xffffffff
        """
        Maximum number of candidates examined by :obj:`hash_to_field`.
        """

        def hash_to_field(self: field, bs: bytes) -> Optional[point]:
            """
            Deterministically map the supplied bytes-like object to a point.
            The message (prefixed with :obj:`DOMAIN_SEPARATOR`) is hashed
            once with SHA-256; the digest is then hashed together with a
            4-byte little-endian counter to obtain candidate *x*-coordinates
            for an even-*y* compressed point. The first candidate that lies
            on the curve is returned. If every one of the :obj:`attempts`
            candidates is rejected, ``None`` is returned.

            >>> f = field()
            >>> f.hash_to_field(bytes(32)).hex()
            '024cce997d3b518f739663b757deaec95bcd9473c30a14ac2fd04023a739d1a725'
            >>> f.hash_to_field(bytes(31) + bytes([2])).hex()
            '026cdbe15362df59cd1dd3c9c11de8aedac2106eca69236ecd9fbe117af897be4f'
            """
            msg_hash = hashlib.sha256(self.domain + bs).digest()
            for counter in range(self.attempts):
                h = hashlib.sha256(msg_hash + counter.to_bytes(4, 'little')).digest()
                p = self._implementation.point(bytes([2]) + h, self)
                if p.is_member():
                    if counter > 0:
                        logger.debug('hash to curve succeeded at counter %d', counter)
                    return p

            logger.warning('hash to curve exhausted %d candidates', self.attempts)
            return None

        def hex_to_point(self: field, s: str) -> point:
            """
            Decode a point from its hexadecimal representation. No check is
            performed to confirm that the result is a point on the curve.

            >>> field().hex_to_point('00' * 33).is_member()
            False
            >>> field().hex_to_point('0g')
            Traceback (most recent call last):
              ...
            ValueError: malformed hexadecimal string
            """
            return self._implementation.point(algebra.unhex(s), self)

        def hex_to_scalar(self: field, s: str) -> scalar:
            """
            Decode a scalar from its hexadecimal representation. No check is
            performed to confirm that the result is a valid scalar.

            >>> field().hex_to_scalar('ff' * 32).is_member()
            False
            """
            return self._implementation.scalar(algebra.unhex(s), self)

        def generator(self: field) -> point:
            """
            Return the standard base point of the secp256k1 group.

            >>> field().generator().hex()
            '0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'
            """
            return self._implementation.point(_GENERATOR, self)

        def random_scalar(self: field) -> scalar:
            """
            Return a random non-zero scalar owned by this instance.

            >>> field().random_scalar().is_member()
            True
            """
            return self._implementation.scalar(self._implementation.rnd(), self)

        def random_point(self: field) -> point:
            """
            Return a random point owned by this instance.

            >>> field().random_point().is_member()
            True
            """
            return self._implementation.point(self._implementation.pnt(), self)

        def __eq__(self: field, other: Any) -> bool:
            return (
                isinstance(other, algebra.field) and
                getattr(other, 'curve', None) == self.curve and
                getattr(other, 'domain', None) == self.domain
            )

        def __hash__(self: field) -> int:
            return hash((self.curve, self.domain))

        def __repr__(self: field) -> str:
            return 'field(' + repr(self.curve) + ')'

    # Encapsulate classes for this implementation, regardless of which are
    # exported as the unqualified symbols.
    _implementation.point = point
    _implementation.scalar = scalar
    _implementation.field = field
    _implementation.context = field()

# Redefine top-level wrapper classes to ensure that they appear at the end of
# the auto-generated documentation.
python = python # pylint: disable=self-assigning-variable
libsecp256k1 = libsecp256k1 # pylint: disable=self-assigning-variable

if __name__ == '__main__':
    doctest.testmod() # pragma: no cover
