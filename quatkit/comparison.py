# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides tolerance based comparison of quaternions and vectors.

Equality of :class:`.Quaternion` and :class:`.Vec3` objects using ``==`` is exact, component by component.  Code that
performs iterative numeric work should instead compare with a tolerance, which is what :class:`ToleranceComparison`
provides.  The tolerances are configured through :class:`ToleranceOptions`::

    >>> from quatkit import Quaternion
    >>> from quatkit.comparison import ToleranceComparison, ToleranceOptions
    >>> loose = ToleranceComparison(options=ToleranceOptions(atol=1e-6))
    >>> loose(Quaternion(1, 0, 0, 0), Quaternion(1, 1e-7, 0, 0))
    True
"""

from dataclasses import dataclass

from typing import Any

import numpy as np

from quatkit.utilities.options import UserOptions
from quatkit.utilities.mixin_classes.user_option_configured import UserOptionConfigured


__all__ = ['ToleranceOptions', 'ToleranceComparison', 'DEFAULT_COMPARISON']


@dataclass
class ToleranceOptions(UserOptions):
    """
    Options for :class:`ToleranceComparison`.
    """

    rtol: float = 1e-9
    """
    The relative tolerance, scaled by the magnitude of the second operand
    """

    atol: float = 1e-12
    """
    The absolute tolerance
    """


class ToleranceComparison(UserOptionConfigured[ToleranceOptions], ToleranceOptions):
    """
    A callable that compares two quaternions, two vectors, or two arrays using :func:`numpy.allclose` semantics.

    Operands are converted to arrays using their ``as_array`` method if they have one.  Operands whose shapes do not
    match are never close.
    """

    def __init__(self, options: ToleranceOptions | None = None):
        """
        :param options: The tolerances to use.  If ``None`` the defaults of :class:`ToleranceOptions` are used
        """

        super().__init__(ToleranceOptions, options=options)

    @staticmethod
    def _to_array(value: Any) -> np.ndarray:

        as_array = getattr(value, 'as_array', None)

        if as_array is not None:
            return as_array()

        return np.asanyarray(value, dtype=np.float64)

    def __call__(self, first: Any, second: Any) -> bool:
        """
        Check whether ``first`` and ``second`` are equal within the configured tolerances.

        :param first: The first quaternion, vector, or array
        :param second: The second quaternion, vector, or array
        :return: ``True`` if every component is within tolerance
        """

        first_array = self._to_array(first)
        second_array = self._to_array(second)

        if first_array.shape != second_array.shape:
            return False

        return bool(np.allclose(first_array, second_array, rtol=self.rtol, atol=self.atol))


DEFAULT_COMPARISON: ToleranceComparison = ToleranceComparison()
"""
The comparison used by :meth:`.Quaternion.isclose` and :meth:`.Vec3.isclose` when one is not provided.
"""
