# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module defines the :class:`Vec3` value type used for rotating vectors and for building rotations from pairs of
vectors.
"""

from dataclasses import dataclass

from typing import TYPE_CHECKING, Self

import numpy as np

from quatkit.core.vector_math import vector_cross, vector_dot, vector_length, vector_normalize
from quatkit.comparison import DEFAULT_COMPARISON, ToleranceComparison

from quatkit._typing import ARRAY_LIKE, DOUBLE_ARRAY

if TYPE_CHECKING:
    from quatkit.quaternion import Quaternion


@dataclass(frozen=True)
class Vec3:
    """
    An immutable 3 element vector.

    Equality using ``==`` is exact.  Use :meth:`isclose` to compare with a tolerance.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):

        for name in ('x', 'y', 'z'):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def from_array(cls, data: ARRAY_LIKE) -> Self:
        """
        Create a vector from a length 3 sequence or array.

        :param data: The ``[x, y, z]`` components
        :return: The vector
        :raises ValueError: If ``data`` does not contain exactly 3 values
        """

        data = np.asanyarray(data, dtype=np.float64).ravel()

        if data.size != 3:
            raise ValueError('A vector must have exactly 3 components')

        return cls(*data)

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns the vector as a new length 3 numpy array ``[x, y, z]``.
        """

        return np.array([self.x, self.y, self.z])

    def length(self) -> float:
        """
        Returns the euclidean length of the vector.
        """

        return float(vector_length(self.as_array()))

    def dot(self, other: 'Vec3') -> float:
        """
        Returns the dot product of this vector with ``other``.
        """

        return float(vector_dot(self.as_array(), other.as_array()))

    def cross(self, other: 'Vec3') -> 'Vec3':
        """
        Returns the right handed cross product of this vector with ``other``.
        """

        return Vec3.from_array(vector_cross(self.as_array(), other.as_array()))

    def normalize(self, strict: bool = False) -> 'Vec3':
        """
        Returns this vector scaled to unit length.

        See :func:`.vector_normalize` for how zero length vectors are handled.

        :param strict: Raise a ``ValueError`` for a zero length vector instead of returning NaN components
        :return: The unit vector
        """

        return Vec3.from_array(vector_normalize(self.as_array(), strict=strict))

    def rotate(self, quaternion: 'Quaternion') -> 'Vec3':
        """
        Returns this vector rotated by ``quaternion``.

        This is an alias of :meth:`.Quaternion.rotate_vec3` for when the vector is the natural receiver.

        :param quaternion: The rotation quaternion
        :return: The rotated vector
        """

        return quaternion.rotate_vec3(self)

    def isclose(self, other: 'Vec3', comparison: ToleranceComparison | None = None) -> bool:
        """
        Checks whether ``other`` is equal to this vector within a tolerance.

        :param other: The vector to compare against
        :param comparison: The configured comparison to use.  If ``None`` :data:`.DEFAULT_COMPARISON` is used
        :return: ``True`` if every component is within tolerance
        """

        if comparison is None:
            comparison = DEFAULT_COMPARISON

        return comparison(self, other)

    def __neg__(self) -> 'Vec3':
        return Vec3(-self.x, -self.y, -self.z)
