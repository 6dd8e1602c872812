# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import numpy as np

from quatkit._typing import ARRAY_LIKE, DOUBLE_ARRAY


def _check_array_and_shape(input: ARRAY_LIKE,
                           return_copy: bool = False,
                           first_axis_length: int | None = None) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if first_axis_length is not None and in_shape[0] != first_axis_length:
        raise ValueError(f'The length of the first axis must be {first_axis_length}')

    if return_copy:
        # np.array always copies, breaking mutability with the caller's data
        return np.array(input, dtype=np.float64)

    return np.asanyarray(input, dtype=np.float64)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, return_copy, first_axis_length=4)


def _check_vector_array_and_shape(vector: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, return_copy, first_axis_length=3)
