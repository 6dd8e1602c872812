# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module contains the fundamental array based quaternion and vector routines.

It has no dependencies on the value types in :mod:`quatkit.quaternion` and :mod:`quatkit.vector` to avoid circular
imports.  All functions here are pure mathematical operations on numpy arrays that can be used as building blocks for
the higher level types, or directly when working with many quaternions at once.
"""

import quatkit.core.conversions
import quatkit.core.quaternion_math
import quatkit.core.vector_math

from quatkit.core.conversions import (quaternion_to_euler, euler_to_quaternion, quaternion_to_rotmat,
                                      axis_angle_to_quaternion)

from quatkit.core.quaternion_math import (quaternion_conjugate, quaternion_negate, quaternion_norm_squared,
                                          quaternion_norm, quaternion_addition, quaternion_multiplication,
                                          quaternion_unit, quaternion_inverse, rotate_vector)

from quatkit.core.vector_math import vector_normalize, vector_dot, vector_cross, vector_length

__all__ = ['quaternion_to_euler', 'euler_to_quaternion', 'quaternion_to_rotmat', 'axis_angle_to_quaternion',
           'quaternion_conjugate', 'quaternion_negate', 'quaternion_norm_squared', 'quaternion_norm',
           'quaternion_addition', 'quaternion_multiplication', 'quaternion_unit', 'quaternion_inverse',
           'rotate_vector',
           'vector_normalize', 'vector_dot', 'vector_cross', 'vector_length']
