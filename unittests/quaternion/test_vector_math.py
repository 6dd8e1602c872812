import warnings

from unittest import TestCase

import numpy as np

from quatkit import core as qc


class TestVectorLength(TestCase):

    def test_vector_length(self):

        self.assertEqual(qc.vector_length([2, 3, 6]), 7)
        self.assertEqual(qc.vector_length([0, 0, 0]), 0)

        np.testing.assert_array_equal(qc.vector_length([[2, 0], [3, 4], [6, 3]]), [7, 5])

    def test_bad_shape(self):

        with self.assertRaises(ValueError):
            qc.vector_length([1, 2, 3, 4])


class TestVectorDot(TestCase):

    def test_vector_dot(self):

        self.assertEqual(qc.vector_dot([1, 2, 3], [4, -5, 6]), 12)
        self.assertEqual(qc.vector_dot([1, 0, 0], [0, 1, 0]), 0)

        np.testing.assert_array_equal(qc.vector_dot([[1, 1], [2, 0], [3, 0]], [[4, 2], [-5, 9], [6, 9]]), [12, 2])


class TestVectorCross(TestCase):

    def test_vector_cross(self):

        np.testing.assert_array_equal(qc.vector_cross([1, 0, 0], [0, 1, 0]), [0, 0, 1])
        np.testing.assert_array_equal(qc.vector_cross([0, 1, 0], [1, 0, 0]), [0, 0, -1])
        np.testing.assert_array_equal(qc.vector_cross([0, 0, 1], [0, -1, 0]), [1, 0, 0])
        np.testing.assert_array_equal(qc.vector_cross([1, 2, 3], [2, 4, 6]), [0, 0, 0])

    def test_vectorized(self):

        crossed = qc.vector_cross([[1, 0], [0, 1], [0, 0]], [[0, 0], [1, 0], [0, 1]])

        np.testing.assert_array_equal(crossed.T, [[0, 0, 1], [1, 0, 0]])


class TestVectorNormalize(TestCase):

    def test_vector_normalize(self):

        np.testing.assert_allclose(qc.vector_normalize([2, 3, 6]), [2 / 7, 3 / 7, 6 / 7])

        np.testing.assert_allclose(qc.vector_normalize([[2, 0], [3, 4], [6, 3]]).T, [[2 / 7, 3 / 7, 6 / 7],
                                                                                    [0, 0.8, 0.6]])

    def test_zero(self):

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            normalized = qc.vector_normalize([0, 0, 0])

        self.assertTrue(np.isnan(normalized).all())

    def test_zero_strict(self):

        with self.assertRaises(ValueError):
            qc.vector_normalize([0, 0, 0], strict=True)

        with self.assertRaises(ValueError):
            qc.vector_normalize([[1, 0], [0, 0], [0, 0]], strict=True)

    def test_zero_logs(self):

        with self.assertLogs('quatkit.core.vector_math', level='DEBUG'):
            qc.vector_normalize([0, 0, 0])
