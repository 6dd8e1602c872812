# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the construction of rotations from a pair of vectors.
"""

import logging

import numpy as np

from quatkit.core._helpers import _check_vector_array_and_shape
from quatkit.core.conversions import axis_angle_to_quaternion
from quatkit.core.quaternion_math import quaternion_unit
from quatkit.core.vector_math import vector_cross, vector_dot, vector_length, vector_normalize

from quatkit._typing import ARRAY_LIKE, DOUBLE_ARRAY


__all__ = ['two_vector_quaternion', 'PARALLEL_THRESHOLD', 'AXIS_LENGTH_THRESHOLD']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting which branch was used to form a rotation.
"""


PARALLEL_THRESHOLD: float = 0.999999
"""
The magnitude of the cosine between the vectors beyond which they are treated as parallel or antiparallel.
"""

AXIS_LENGTH_THRESHOLD: float = 1e-6
"""
The length below which a candidate axis for the antiparallel case is rejected.
"""


def two_vector_quaternion(start_vector: ARRAY_LIKE, end_vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Compute the unit quaternion of the shortest arc rotation that carries ``start_vector`` onto ``end_vector``.

    Both vectors are first normalized.  In general the rotation is formed from their dot and cross products as

    .. math::
        \mathbf{q} = \frac{\left[\begin{array}{c} 1 + \hat{\mathbf{v}}_1^T\hat{\mathbf{v}}_2 \\
        \hat{\mathbf{v}}_1\times\hat{\mathbf{v}}_2\end{array}\right]}{\left\|\bullet\right\|}

    which loses precision as the vectors become parallel or antiparallel.  Therefore:

    * if the cosine between the vectors is greater than :data:`PARALLEL_THRESHOLD` the identity quaternion is returned.
    * if the cosine is less than ``-PARALLEL_THRESHOLD`` any axis perpendicular to the start vector gives a valid
      rotation.  The axis is taken as :math:`\hat{\mathbf{x}}\times\hat{\mathbf{v}}_1` unless that is shorter than
      :data:`AXIS_LENGTH_THRESHOLD` (the start vector is along x), in which case
      :math:`\hat{\mathbf{y}}\times\hat{\mathbf{v}}_1` is used.  The result is a rotation of :math:`\pi` about that axis.

    This function is not vectorized.

    :param start_vector: The vector to rotate from
    :param end_vector: The vector to rotate to
    :return: The rotation quaternion as a length 4 array ``[w, x, y, z]``
    """

    start = vector_normalize(_check_vector_array_and_shape(start_vector).ravel())
    end = vector_normalize(_check_vector_array_and_shape(end_vector).ravel())

    cos_angle = vector_dot(start, end)

    if cos_angle < -PARALLEL_THRESHOLD:

        axis = vector_cross([1.0, 0.0, 0.0], start)

        if vector_length(axis) < AXIS_LENGTH_THRESHOLD:
            _LOGGER.debug('Antiparallel vectors along x.  Rotating about y cross the start vector')
            axis = vector_cross([0.0, 1.0, 0.0], start)

        else:
            _LOGGER.debug('Antiparallel vectors.  Rotating about x cross the start vector')

        quaternion = axis_angle_to_quaternion(vector_normalize(axis), np.pi)

    elif cos_angle > PARALLEL_THRESHOLD:
        _LOGGER.debug('Parallel vectors.  Returning the identity rotation')

        return np.array([1.0, 0.0, 0.0, 0.0])

    else:
        quaternion = np.concatenate([[1 + cos_angle], vector_cross(start, end)])

    return quaternion_unit(quaternion)
