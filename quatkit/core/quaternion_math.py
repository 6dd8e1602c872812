# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core quaternion algebra implemented on numpy arrays.

Quaternions are stored as arrays whose first axis has length 4 and is ordered as ``[w, x, y, z]`` where ``w`` is the
scalar component and ``x``, ``y``, ``z`` are the components along the imaginary units :math:`i`, :math:`j`, and
:math:`k`.  Every routine in this module is vectorized, so a 4xn array may be given to operate on n quaternions stored
as columns.  Inputs that are given together must broadcast against each other component by component.
"""

import logging

import numpy as np

from quatkit._typing import ARRAY_LIKE, DOUBLE_ARRAY, F_SCALAR_OR_ARRAY

from quatkit.core._helpers import _check_quaternion_array_and_shape, _check_vector_array_and_shape


__all__ = ["quaternion_conjugate", "quaternion_negate", "quaternion_norm_squared", "quaternion_norm",
           "quaternion_addition", "quaternion_multiplication", "quaternion_unit", "quaternion_inverse",
           "rotate_vector"]


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting degenerate quaternion operations.
"""


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function returns the conjugate of the quaternion(s), which negates the imaginary part:

    .. math::
        \mathbf{q}^* = \left[\begin{array}{cccc} w & -x & -y & -z\end{array}\right]^T

    The conjugate is its own inverse so that ``quaternion_conjugate(quaternion_conjugate(q))`` is ``q``.

    :param quaternion: The quaternion(s) to conjugate
    :return: The conjugate quaternion(s) as a new array
    """

    # ensure the value is an array and break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    quaternion[1:] *= -1

    return quaternion


def quaternion_negate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function returns the additive inverse of the quaternion(s), negating all 4 components.

    :param quaternion: The quaternion(s) to negate
    :return: The negated quaternion(s)
    """

    return -_check_quaternion_array_and_shape(quaternion)


def quaternion_norm_squared(quaternion: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    r"""
    This function returns the squared norm of the quaternion(s):

    .. math::
        \left\|\mathbf{q}\right\|^2 = w^2+x^2+y^2+z^2

    :param quaternion: The quaternion(s) to compute the squared norm of
    :return: The squared norm of each quaternion
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    return (quaternion[0] * quaternion[0] + quaternion[1] * quaternion[1] +
            quaternion[2] * quaternion[2] + quaternion[3] * quaternion[3])


def quaternion_norm(quaternion: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    This function returns the norm of the quaternion(s), which is the square root of
    :func:`quaternion_norm_squared`.  The norm is only zero for the zero quaternion.

    :param quaternion: The quaternion(s) to compute the norm of
    :return: The norm of each quaternion
    """

    return np.sqrt(quaternion_norm_squared(quaternion))


def quaternion_addition(*quaternions: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function returns the component wise sum of any number of quaternions.

    The sum is accumulated left to right starting from the zero quaternion, so calling this function without any
    arguments returns ``[0, 0, 0, 0]``.

    :param quaternions: The quaternions to add together
    :return: The sum of the quaternions
    """

    qout = np.zeros(4)

    for quaternion in quaternions:
        quaternion = _check_quaternion_array_and_shape(quaternion)

        qout = np.array([qout[0] + quaternion[0],
                         qout[1] + quaternion[1],
                         qout[2] + quaternion[2],
                         qout[3] + quaternion[3]])

    return qout


def quaternion_multiplication(*quaternions: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the Hamilton product of any number of quaternions.

    The product is not commutative.  It is applied left to right such that
    ``quaternion_multiplication(q1, q2, q3)`` is :math:`(\mathbf{q}_1\otimes\mathbf{q}_2)\otimes\mathbf{q}_3`, starting
    from the identity quaternion ``[1, 0, 0, 0]`` (which is therefore the result when no quaternions are given).  For
    a pair of quaternions :math:`\mathbf{a}` and :math:`\mathbf{b}` the product is

    .. math::
        \mathbf{a}\otimes\mathbf{b}=\left[\begin{array}{c}
        a_wb_w - a_xb_x - a_yb_y - a_zb_z \\
        a_wb_x + a_xb_w + a_yb_z - a_zb_y \\
        a_wb_y + a_yb_w + a_zb_x - a_xb_z \\
        a_wb_z + a_zb_w + a_xb_y - a_yb_x \end{array}\right]

    This function is vectorized, therefore you can input multiple quaternions as 4xn arrays where each column is an
    independent quaternion.

    :param quaternions: The quaternions to multiply, in order
    :return: The Hamilton product of the quaternions
    """

    qout = np.array([1.0, 0.0, 0.0, 0.0])

    for quaternion in quaternions:
        q = _check_quaternion_array_and_shape(quaternion)

        # the terms are kept in this order so results match the closed form exactly
        w = qout[0] * q[0] - qout[1] * q[1] - qout[2] * q[2] - qout[3] * q[3]
        x = qout[0] * q[1] + qout[1] * q[0] + qout[2] * q[3] - qout[3] * q[2]
        y = qout[0] * q[2] + qout[2] * q[0] + qout[3] * q[1] - qout[1] * q[3]
        z = qout[0] * q[3] + qout[3] * q[0] + qout[1] * q[2] - qout[2] * q[1]

        qout = np.array([w, x, y, z])

    return qout


def quaternion_unit(quaternion: ARRAY_LIKE, strict: bool = False) -> DOUBLE_ARRAY:
    """
    This function rescales the quaternion(s) to unit norm by dividing each component by :func:`quaternion_norm`.

    Unlike a rotation normalization, the sign of the scalar component is left alone.

    The zero quaternion has no unit direction.  By default the division is performed anyway and the result is
    non-finite (NaN) without any error being raised, leaving it to the caller to guard against zero input.  Setting
    ``strict`` to ``True`` raises a ``ValueError`` instead.

    :param quaternion: The quaternion(s) to normalize
    :param strict: Raise on zero quaternions instead of propagating non-finite values
    :return: The unit quaternion(s)
    :raises ValueError: If ``strict`` is ``True`` and any quaternion is zero
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    norm = quaternion_norm(quaternion)

    if np.any(norm == 0):
        if strict:
            raise ValueError('Cannot normalize the zero quaternion')

        _LOGGER.debug('Normalizing a zero quaternion.  The result will not be finite')

    with np.errstate(divide='ignore', invalid='ignore'):
        return quaternion / norm


def quaternion_inverse(quaternion: ARRAY_LIKE, strict: bool = False) -> DOUBLE_ARRAY:
    r"""
    This function provides the multiplicative inverse of the quaternion(s).

    The inverse is defined such that :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\left[\begin{array}{cccc}1&0&0&0
    \end{array}\right]^T` and is computed as the conjugate divided by the squared norm:

    .. math::
        \mathbf{q}^{-1}=\frac{\mathbf{q}^*}{\left\|\mathbf{q}\right\|^2}

    For unit quaternions this is the same as the conjugate.  The zero quaternion has no inverse and is handled the same
    way as in :func:`quaternion_unit`.

    :param quaternion: The quaternion(s) to invert
    :param strict: Raise on zero quaternions instead of propagating non-finite values
    :return: The inverse quaternion(s)
    :raises ValueError: If ``strict`` is ``True`` and any quaternion is zero
    """

    norm_squared = quaternion_norm_squared(quaternion)

    if np.any(norm_squared == 0):
        if strict:
            raise ValueError('The zero quaternion does not have an inverse')

        _LOGGER.debug('Inverting a zero quaternion.  The result will not be finite')

    with np.errstate(divide='ignore', invalid='ignore'):
        return quaternion_conjugate(quaternion) / norm_squared


def rotate_vector(quaternion: ARRAY_LIKE, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function rotates the vector(s) by the quaternion(s) using the sandwich product

    .. math::
        \left[\begin{array}{c} 0 \\ \mathbf{v}'\end{array}\right] = \mathbf{q}\otimes
        \left[\begin{array}{c} 0 \\ \mathbf{v}\end{array}\right]\otimes\mathbf{q}^*

    The quaternion is not normalized first.  The result is only a pure rotation of the vector when the quaternion has
    unit norm; otherwise the rotated vector is additionally scaled by the squared norm of the quaternion.

    :param quaternion: The rotation quaternion(s)
    :param vector: The vector(s) to rotate
    :return: The rotated vector(s)
    """

    vector = _check_vector_array_and_shape(vector)

    pure = np.concatenate([np.zeros_like(vector[:1]), vector], axis=0)

    return quaternion_multiplication(quaternion, pure, quaternion_conjugate(quaternion))[1:]
