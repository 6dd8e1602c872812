# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Quaternion arithmetic for rotations.

Quaternions are represented in this package with the scalar component first, :math:`w + xi + yj + zk`, ordered as
``[w, x, y, z]`` whenever they are stored in an array.

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element quaternion.  Rotation quaternions have unit norm and are of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c}\text{cos}(\frac{\theta}{2}) \\
                   \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is the unit axis of rotation and :math:`\theta` is the angle to rotate
                   about it.  The rotation represented by :math:`\mathbf{q}` is the same as the one represented by
                   :math:`-\mathbf{q}`.
rotation matrix    A :math:`3\times 3` orthonormal matrix :math:`\mathbf{T}` such that :math:`\mathbf{T}\mathbf{v}` is
                   the vector :math:`\mathbf{v}` rotated by the quaternion.  Only the quaternion to matrix direction
                   is provided.
euler angles       The roll, pitch, and yaw angles :math:`(\phi, \theta, \psi)` of a 3-2-1 rotation sequence.
=================  =====================================================================================================

The :class:`.Quaternion` and :class:`.Vec3` value types are the primary tools that will be used by users.  They are
immutable, and each operation on them returns a new value.  The array routines in :mod:`quatkit.core` implement the
same operations on numpy arrays and are vectorized over columns.
"""

import quatkit.core

from quatkit.core import *
from quatkit.comparison import ToleranceComparison, ToleranceOptions
from quatkit.frames import two_vector_quaternion
from quatkit.quaternion import Quaternion, quaternion_sum, quaternion_product
from quatkit.vector import Vec3

__version__ = '1.0.0'

__all__ = ['Quaternion', 'Vec3', 'quaternion_sum', 'quaternion_product',
           'ToleranceComparison', 'ToleranceOptions', 'two_vector_quaternion',
           'quaternion_to_euler', 'euler_to_quaternion', 'quaternion_to_rotmat', 'axis_angle_to_quaternion',
           'quaternion_conjugate', 'quaternion_negate', 'quaternion_norm_squared', 'quaternion_norm',
           'quaternion_addition', 'quaternion_multiplication', 'quaternion_unit', 'quaternion_inverse',
           'rotate_vector',
           'vector_normalize', 'vector_dot', 'vector_cross', 'vector_length']
