# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Basic 3 vector routines used when rotating vectors and when building rotations from pairs of vectors.

All routines accept a single 3 element vector or a 3xn array of vectors stored as columns.
"""

import logging

import numpy as np

from quatkit._typing import ARRAY_LIKE, DOUBLE_ARRAY, F_SCALAR_OR_ARRAY

from quatkit.core._helpers import _check_vector_array_and_shape


__all__ = ["vector_normalize", "vector_dot", "vector_cross", "vector_length"]


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting degenerate vector operations.
"""


def vector_length(vector: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    r"""
    This function computes the euclidean length of the vector(s):

    .. math::
        \left\|\mathbf{v}\right\| = \sqrt{v_x^2+v_y^2+v_z^2}

    :param vector: The vector(s) to compute the length of
    :return: The length of each vector
    """

    vector = _check_vector_array_and_shape(vector)

    return np.sqrt((vector * vector).sum(axis=0))


def vector_dot(vector_1: ARRAY_LIKE, vector_2: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    This function computes the dot product of two vectors (or of corresponding columns of two 3xn arrays).

    :param vector_1: The first vector(s)
    :param vector_2: The second vector(s)
    :return: The dot product(s)
    """

    vector_1 = _check_vector_array_and_shape(vector_1)
    vector_2 = _check_vector_array_and_shape(vector_2)

    return vector_1[0] * vector_2[0] + vector_1[1] * vector_2[1] + vector_1[2] * vector_2[2]


def vector_cross(vector_1: ARRAY_LIKE, vector_2: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function computes the right handed cross product :math:`\mathbf{v}_1\times\mathbf{v}_2`.

    :param vector_1: The first vector(s)
    :param vector_2: The second vector(s)
    :return: The cross product(s) with the same shape as the inputs
    """

    vector_1 = _check_vector_array_and_shape(vector_1)
    vector_2 = _check_vector_array_and_shape(vector_2)

    return np.cross(vector_1, vector_2, axis=0)


def vector_normalize(vector: ARRAY_LIKE, strict: bool = False) -> DOUBLE_ARRAY:
    """
    This function scales the vector(s) to unit length.

    A zero length vector cannot be normalized.  By default the division is still performed and the result contains
    NaN values without any error being raised.  If ``strict`` is ``True`` a ``ValueError`` is raised instead.

    :param vector: The vector(s) to normalize
    :param strict: Raise on zero length vectors instead of propagating non-finite values
    :return: The unit vector(s)
    :raises ValueError: If ``strict`` is ``True`` and any of the vectors has zero length
    """

    vector = _check_vector_array_and_shape(vector)

    length = vector_length(vector)

    if np.any(length == 0):
        if strict:
            raise ValueError('Cannot normalize a zero length vector')

        _LOGGER.debug('Normalizing a zero length vector.  The result will not be finite')

    with np.errstate(divide='ignore', invalid='ignore'):
        return vector / length
