# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines between quaternions and other rotation representations

This module contains routines for converting quaternions to and from euler angles, for forming rotation matrices from
quaternions, and for forming quaternions from an axis and angle.  All routines are implemented purely on numpy arrays
(or array like objects) using the ``[w, x, y, z]`` ordering described in :mod:`.quaternion_math`.

The euler angles used here are the roll (:math:`\\phi`), pitch (:math:`\\theta`), yaw (:math:`\\psi`) angles of a
3-2-1 rotation sequence.  Pitch is restricted to :math:`[-\\pi/2, \\pi/2]` so the conversion is only invertible away
from :math:`\\theta=\\pm\\pi/2` where roll and yaw are no longer unique (gimbal lock).
"""

import numpy as np

from quatkit._typing import ARRAY_LIKE, DOUBLE_ARRAY, F_SCALAR_OR_ARRAY, SCALAR_OR_ARRAY

from quatkit.core._helpers import _check_vector_array_and_shape
from quatkit.core.quaternion_math import quaternion_unit
from quatkit.core.vector_math import vector_normalize


__all__ = ['quaternion_to_euler', 'euler_to_quaternion', 'quaternion_to_rotmat', 'axis_angle_to_quaternion']


def quaternion_to_euler(quaternion: ARRAY_LIKE) -> tuple[F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY]:
    r"""
    This function converts a quaternion into the euler angles :math:`(\phi, \theta, \psi)`.

    The quaternion is first normalized using :func:`.quaternion_unit` and then the angles are found as

    .. math::
        \phi = \text{atan2}(2(wx+yz), 1-2(x^2+y^2)) \\
        \theta = \text{sin}^{-1}(2(wy-zx)) \\
        \psi = \text{atan2}(2(xy+wz), 1-2(y^2+z^2))

    Rounding can push the argument of the arcsine slightly outside of :math:`[-1, 1]` for quaternions near gimbal lock,
    so it is clipped to that domain before the arcsine is taken.

    This function is vectorized so multiple quaternions can be converted simultaneously by specifying them as columns.

    :param quaternion: The quaternion(s) to be converted to euler angles
    :return: The angles phi, theta, and psi in radians
    """

    w, x, y, z = quaternion_unit(quaternion)

    phi = np.arctan2(2 * (w * x + y * z), 1 - 2 * (x * x + y * y))
    theta = np.arcsin(np.clip(2 * (w * y - z * x), -1, 1))
    psi = np.arctan2(2 * (x * y + w * z), 1 - 2 * (y * y + z * z))

    return phi, theta, psi


def euler_to_quaternion(phi: SCALAR_OR_ARRAY, theta: SCALAR_OR_ARRAY, psi: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function converts the euler angles :math:`(\phi, \theta, \psi)` into a unit quaternion.

    The quaternion is formed from the half angles as

    .. math::
        w = c_{\phi}c_{\theta}c_{\psi} + s_{\phi}s_{\theta}s_{\psi} \\
        x = s_{\phi}c_{\theta}c_{\psi} - c_{\phi}s_{\theta}s_{\psi} \\
        y = c_{\phi}s_{\theta}c_{\psi} + s_{\phi}c_{\theta}s_{\psi} \\
        z = c_{\phi}c_{\theta}s_{\psi} - s_{\phi}s_{\theta}c_{\psi}

    where :math:`c_{\bullet}` and :math:`s_{\bullet}` are the cosine and sine of half of the angle.  This is an
    approximate inverse of :func:`quaternion_to_euler` for pitch angles away from :math:`\pm\pi/2`.

    If the angles are given as arrays the quaternions are returned as columns of a 4xn array.

    :param phi: The roll angle(s) in radians
    :param theta: The pitch angle(s) in radians
    :param psi: The yaw angle(s) in radians
    :return: The quaternion(s) corresponding to the euler angles
    """

    half_phi = np.asanyarray(phi, dtype=np.float64) / 2
    half_theta = np.asanyarray(theta, dtype=np.float64) / 2
    half_psi = np.asanyarray(psi, dtype=np.float64) / 2

    cphi, sphi = np.cos(half_phi), np.sin(half_phi)
    ctheta, stheta = np.cos(half_theta), np.sin(half_theta)
    cpsi, spsi = np.cos(half_psi), np.sin(half_psi)

    return np.array([cphi * ctheta * cpsi + sphi * stheta * spsi,
                     sphi * ctheta * cpsi - cphi * stheta * spsi,
                     cphi * stheta * cpsi + sphi * ctheta * spsi,
                     cphi * ctheta * spsi - sphi * stheta * cpsi])


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a quaternion into its equivalent rotation (direction cosine) matrix.

    The quaternion is first normalized using :func:`.quaternion_unit` and the matrix is then formed as

    .. math::
        \mathbf{T} = \left[\begin{array}{ccc}
        1-2(y^2+z^2) & 2(xy-wz) & 2(wy+xz) \\
        2(wz+yx) & 1-2(z^2+x^2) & 2(yz-wx) \\
        2(zx-wy) & 2(wx+zy) & 1-2(x^2+y^2) \end{array}\right]

    so that :math:`\mathbf{T}\mathbf{v}` is the same as rotating :math:`\mathbf{v}` with :func:`.rotate_vector`.

    This function is vectorized.  When converting multiple quaternions (given as the columns of a 4xn array) each
    rotation matrix is stacked along the first axis of the output so that the result is nx3x3.

    There is no inverse of this conversion in this package.

    :param quaternion: The quaternion(s) to be converted to rotation matrix(ces)
    :return: The rotation matrix(ces) corresponding to the quaternion(s)
    """

    w, x, y, z = quaternion_unit(quaternion)

    matrix = np.array([[1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (w * y + x * z)],
                       [2 * (w * z + y * x), 1 - 2 * (z * z + x * x), 2 * (y * z - w * x)],
                       [2 * (z * x - w * y), 2 * (w * x + z * y), 1 - 2 * (x * x + y * y)]])

    if matrix.ndim > 2:
        # move the stacking axis to the front
        return np.moveaxis(matrix, -1, 0)

    return matrix


def axis_angle_to_quaternion(axis: ARRAY_LIKE, angle: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function forms the rotation quaternion that rotates by ``angle`` radians about ``axis``:

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{cos}(\frac{\theta}{2}) \\
        \text{sin}(\frac{\theta}{2})\hat{\mathbf{a}}\end{array}\right]

    where :math:`\hat{\mathbf{a}}` is the axis normalized to unit length.  The axis may be a 3xn array in which case
    angle should be a scalar or length n.

    :param axis: The axis (or axes) of rotation.  They do not need to be unit length
    :param angle: The angle(s) to rotate by in radians
    :return: The rotation quaternion(s)
    :raises ValueError: If the axis has zero length
    """

    axis = vector_normalize(_check_vector_array_and_shape(axis), strict=True)

    half_angle = np.asanyarray(angle, dtype=np.float64) / 2

    # broadcast the scalar part to the shape of a single axis component
    scalar = np.cos(half_angle) * np.ones_like(axis[:1])

    return np.concatenate([scalar, np.sin(half_angle) * axis], axis=0)
