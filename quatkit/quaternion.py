# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module defines the :class:`Quaternion` value type along with the variadic :func:`quaternion_sum` and
:func:`quaternion_product` functions.
"""

from dataclasses import dataclass

from typing import Self, cast

import numpy as np

from quatkit.core.conversions import (quaternion_to_euler, euler_to_quaternion, quaternion_to_rotmat,
                                      axis_angle_to_quaternion)
from quatkit.core.quaternion_math import (quaternion_conjugate, quaternion_negate, quaternion_norm_squared,
                                          quaternion_norm, quaternion_addition, quaternion_multiplication,
                                          quaternion_unit, quaternion_inverse, rotate_vector)
from quatkit.comparison import DEFAULT_COMPARISON, ToleranceComparison
from quatkit.frames import two_vector_quaternion
from quatkit.vector import Vec3

from quatkit._typing import ARRAY_LIKE, DOUBLE_ARRAY


__all__ = ['Quaternion', 'quaternion_sum', 'quaternion_product']


def _vector_data(vector: Vec3 | ARRAY_LIKE) -> ARRAY_LIKE:

    if isinstance(vector, Vec3):
        return vector.as_array()

    return vector


@dataclass(frozen=True)
class Quaternion:
    r"""
    An immutable quaternion :math:`w + xi + yj + zk`.

    The :class:`Quaternion` is a plain value.  Every operation returns a new instance and no invariant is enforced on
    the components, so for instance whether a quaternion has unit norm is only known from how it was produced.  The
    operations themselves are implemented by the array routines in :mod:`quatkit.core`, which should be used directly
    when working with many quaternions at once.

    Arithmetic operators are provided as aliases of the named operations::

        >>> from quatkit import Quaternion
        >>> i, j = Quaternion.pure(1, 0, 0), Quaternion.pure(0, 1, 0)
        >>> i * j
        Quaternion(w=0.0, x=0.0, y=0.0, z=1.0)
        >>> j * i
        Quaternion(w=0.0, x=0.0, y=0.0, z=-1.0)

    Equality using ``==`` is exact, component by component.  Use :meth:`isclose` to compare with a tolerance.
    """

    w: float = 0.0
    """
    The scalar component
    """

    x: float = 0.0
    """
    The :math:`i` component
    """

    y: float = 0.0
    """
    The :math:`j` component
    """

    z: float = 0.0
    """
    The :math:`k` component
    """

    def __post_init__(self):

        for name in ('w', 'x', 'y', 'z'):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def scalar(cls, w: float) -> Self:
        """
        Create a quaternion with no imaginary part, ``(w, 0, 0, 0)``, embedding a real number.
        """

        return cls(w, 0.0, 0.0, 0.0)

    @classmethod
    def pure(cls, x: float, y: float, z: float) -> Self:
        """
        Create a quaternion with no scalar part, ``(0, x, y, z)``, embedding a vector.
        """

        return cls(0.0, x, y, z)

    @classmethod
    def from_vec3(cls, vector: Vec3) -> Self:
        """
        Create the pure quaternion embedding ``vector``.
        """

        return cls.pure(vector.x, vector.y, vector.z)

    @classmethod
    def identity(cls) -> Self:
        """
        Create the multiplicative identity ``(1, 0, 0, 0)``, which is also the rotation that does nothing.
        """

        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, data: ARRAY_LIKE) -> Self:
        """
        Create a quaternion from a length 4 sequence or array ordered as ``[w, x, y, z]``.

        :param data: The quaternion components
        :return: The quaternion
        :raises ValueError: If ``data`` does not contain exactly 4 values
        """

        data = np.asanyarray(data, dtype=np.float64).ravel()

        if data.size != 4:
            raise ValueError('A quaternion must have exactly 4 components')

        return cls(*data)

    @classmethod
    def from_euler(cls, phi: float, theta: float, psi: float) -> Self:
        """
        Create the rotation quaternion for the euler angles phi, theta, psi (in radians).

        See :func:`.euler_to_quaternion` for the convention.
        """

        return cls.from_array(euler_to_quaternion(phi, theta, psi))

    @classmethod
    def from_axis_angle(cls, axis: Vec3 | ARRAY_LIKE, angle: float) -> Self:
        """
        Create the rotation quaternion for a rotation of ``angle`` radians about ``axis``.

        :raises ValueError: If the axis has zero length
        """

        return cls.from_array(axis_angle_to_quaternion(_vector_data(axis), angle))

    @classmethod
    def from_two_vectors(cls, start_vector: Vec3 | ARRAY_LIKE, end_vector: Vec3 | ARRAY_LIKE) -> Self:
        """
        Create the unit quaternion of the shortest arc rotation carrying ``start_vector`` onto ``end_vector``.

        See :func:`.two_vector_quaternion` for how parallel and antiparallel vectors are handled.
        """

        return cls.from_array(two_vector_quaternion(_vector_data(start_vector), _vector_data(end_vector)))

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns the quaternion as a new length 4 numpy array ``[w, x, y, z]``.
        """

        return np.array([self.w, self.x, self.y, self.z])

    def vector_part(self) -> Vec3:
        """
        Returns the imaginary part of the quaternion as a vector.
        """

        return Vec3(self.x, self.y, self.z)

    def conj(self) -> 'Quaternion':
        """
        Returns the conjugate ``(w, -x, -y, -z)``.
        """

        return Quaternion.from_array(quaternion_conjugate(self.as_array()))

    def neg(self) -> 'Quaternion':
        """
        Returns the additive inverse ``(-w, -x, -y, -z)``.
        """

        return Quaternion.from_array(quaternion_negate(self.as_array()))

    def norm_squared(self) -> float:
        """
        Returns the squared norm, the sum of the squares of the components.
        """

        return float(quaternion_norm_squared(self.as_array()))

    def norm(self) -> float:
        """
        Returns the norm, the square root of :meth:`norm_squared`.
        """

        return float(quaternion_norm(self.as_array()))

    def unit(self, strict: bool = False) -> 'Quaternion':
        """
        Returns this quaternion scaled to unit norm.

        For the zero quaternion the components are NaN unless ``strict`` is ``True``, in which case a ``ValueError`` is
        raised.  See :func:`.quaternion_unit`.
        """

        return Quaternion.from_array(quaternion_unit(self.as_array(), strict=strict))

    def inv(self, strict: bool = False) -> 'Quaternion':
        """
        Returns the multiplicative inverse, the conjugate divided by the squared norm.

        For the zero quaternion the components are not finite unless ``strict`` is ``True``, in which case a
        ``ValueError`` is raised.  See :func:`.quaternion_inverse`.
        """

        return Quaternion.from_array(quaternion_inverse(self.as_array(), strict=strict))

    def euler(self) -> tuple[float, float, float]:
        """
        Returns the euler angles ``(phi, theta, psi)`` in radians of this quaternion after normalizing it.

        See :func:`.quaternion_to_euler` for the convention.
        """

        return cast(tuple[float, float, float], tuple(float(angle) for angle in quaternion_to_euler(self.as_array())))

    def rot_mat(self) -> DOUBLE_ARRAY:
        """
        Returns the 3x3 rotation matrix of this quaternion after normalizing it.

        See :func:`.quaternion_to_rotmat`.
        """

        return quaternion_to_rotmat(self.as_array())

    def rotate_vec3(self, vector: Vec3) -> Vec3:
        """
        Returns ``vector`` rotated by this quaternion using the sandwich product.

        This quaternion is not normalized first, so unless it has unit norm the result is also scaled by
        :meth:`norm_squared`.  :meth:`.Vec3.rotate` is the same operation with the vector as the receiver.
        """

        return Vec3.from_array(rotate_vector(self.as_array(), vector.as_array()))

    def isclose(self, other: 'Quaternion', comparison: ToleranceComparison | None = None) -> bool:
        """
        Checks whether ``other`` is equal to this quaternion within a tolerance.

        :param other: The quaternion to compare against
        :param comparison: The configured comparison to use.  If ``None`` :data:`.DEFAULT_COMPARISON` is used
        :return: ``True`` if every component is within tolerance
        """

        if comparison is None:
            comparison = DEFAULT_COMPARISON

        return comparison(self, other)

    def __neg__(self) -> 'Quaternion':
        return self.neg()

    def __add__(self, other: 'Quaternion') -> 'Quaternion':

        if isinstance(other, Quaternion):
            return quaternion_sum(self, other)

        return NotImplemented

    def __mul__(self, other: 'Quaternion') -> 'Quaternion':

        if isinstance(other, Quaternion):
            return quaternion_product(self, other)

        return NotImplemented


def quaternion_sum(*quaternions: Quaternion) -> Quaternion:
    """
    Returns the component wise sum of any number of quaternions.

    With no arguments the zero quaternion is returned.  See :func:`.quaternion_addition`.
    """

    return Quaternion.from_array(quaternion_addition(*(quaternion.as_array() for quaternion in quaternions)))


def quaternion_product(*quaternions: Quaternion) -> Quaternion:
    """
    Returns the Hamilton product of any number of quaternions, applied left to right.

    The product is not commutative.  With no arguments the identity quaternion is returned.  See
    :func:`.quaternion_multiplication`.
    """

    return Quaternion.from_array(quaternion_multiplication(*(quaternion.as_array() for quaternion in quaternions)))
