import dataclasses
import math

from unittest import TestCase

import numpy as np

from quatkit import Quaternion, Vec3, quaternion_sum, quaternion_product


Q1 = Quaternion(1, -1, -1, 1)
Q2 = Quaternion(-1, 1, 1, -1)
Q3 = Quaternion(-1, -1, -1, 1)
Q4 = Quaternion(4, -4, -4, 4)
Q10 = Quaternion(0.707106781186548, 0.707106781186547, 0, 0)


class TestQuaternion(TestCase):

    def check_quaternion(self, quaternion, expected, places=7):

        self.assertIsInstance(quaternion, Quaternion)
        np.testing.assert_array_almost_equal(quaternion.as_array(), expected, decimal=places)

    def test_init(self):

        quat = Quaternion(1, 2, 3, 4)

        self.assertEqual((quat.w, quat.x, quat.y, quat.z), (1, 2, 3, 4))
        self.assertIsInstance(quat.w, float)
        self.assertIsInstance(Quaternion(np.float64(2), 0, 0, 0).w, float)

        self.assertEqual(Quaternion(), Quaternion(0, 0, 0, 0))

    def test_scalar(self):

        self.assertEqual(Quaternion.scalar(11), Quaternion(11, 0, 0, 0))

    def test_pure(self):

        self.assertEqual(Quaternion.pure(1, 2, 3), Quaternion(0, 1, 2, 3))
        self.assertEqual(Quaternion.from_vec3(Vec3(1, 2, 3)), Quaternion(0, 1, 2, 3))
        self.assertEqual(Quaternion(4, 1, 2, 3).vector_part(), Vec3(1, 2, 3))

    def test_identity(self):

        self.assertEqual(Quaternion.identity(), Quaternion(1, 0, 0, 0))

    def test_immutable(self):

        quat = Quaternion(1, 2, 3, 4)

        with self.assertRaises(dataclasses.FrozenInstanceError):
            quat.w = 5

        self.assertEqual(hash(quat), hash(Quaternion(1, 2, 3, 4)))

    def test_exact_equality(self):

        self.assertEqual(Quaternion(1, 2, 3, 4), Quaternion(1.0, 2.0, 3.0, 4.0))
        self.assertNotEqual(Quaternion(1, 2, 3, 4), Quaternion(1, 2, 3, 4 + 1e-15))

    def test_array_round_trip(self):

        np.testing.assert_array_equal(Quaternion(1, 2, 3, 4).as_array(), [1, 2, 3, 4])

        self.assertEqual(Quaternion.from_array([1, 2, 3, 4]), Quaternion(1, 2, 3, 4))
        self.assertEqual(Quaternion.from_array([[1], [2], [3], [4]]), Quaternion(1, 2, 3, 4))

        with self.assertRaises(ValueError):
            Quaternion.from_array([1, 2, 3])

    def test_conj(self):

        self.assertEqual(Quaternion(1, 0, 0, 0).conj(), Quaternion(1, 0, 0, 0))
        self.assertEqual(Quaternion(0, 2, 1, 2).conj(), Quaternion(0, -2, -1, -2))
        self.assertEqual(Q2.conj(), Q3)

        for quat in [Q1, Q2, Q10, Quaternion(0.3, -1.2, 4.5, 0.25)]:
            self.assertEqual(quat.conj().conj(), quat)

    def test_neg(self):

        self.assertEqual(Q1.neg(), Q2)
        self.assertEqual(-Q1, Q2)

    def test_norm(self):

        self.assertEqual(Q4.norm_squared(), 64)
        self.assertEqual(Q4.norm(), 8)
        self.assertEqual(Quaternion.scalar(110).norm(), 110)
        self.assertEqual(Quaternion(0, 2, 1, 2).norm(), 3)
        self.assertIsInstance(Q4.norm(), float)

    def test_unit(self):

        self.assertEqual(Q4.unit(), Quaternion(0.5, -0.5, -0.5, 0.5))

        self.assertTrue(all(math.isnan(component) for component in Quaternion().unit().as_array()))

        with self.assertRaises(ValueError):
            Quaternion().unit(strict=True)

    def test_inv(self):

        self.assertEqual(Q4.inv(), Quaternion(0.0625, 0.0625, 0.0625, -0.0625))

        self.check_quaternion(Q4 * Q4.inv(), [1, 0, 0, 0])

        self.assertFalse(np.isfinite(Quaternion().inv().as_array()).any())

        with self.assertRaises(ValueError):
            Quaternion().inv(strict=True)

    def test_sum(self):

        self.assertEqual(quaternion_sum(Quaternion(1, 0, 0, 0), Quaternion(10, 0, 0, 0)), Quaternion.scalar(11))
        self.assertEqual(quaternion_sum(Quaternion.pure(1, 0, 0), Quaternion.pure(0, 1, 1), Quaternion.pure(1, 0, 1)),
                         Quaternion.pure(2, 1, 2))
        self.assertEqual(quaternion_sum(Q1, Q2), Quaternion())
        self.assertEqual(quaternion_sum(), Quaternion())
        self.assertEqual(quaternion_sum(Q10), Q10)

        self.assertEqual(Q1 + Q3, quaternion_sum(Q1, Q3))

    def test_sum_commutative(self):

        quat_1 = Quaternion(0.5, -1.25, 3.0, 2.0)
        quat_2 = Quaternion(1.5, 0.25, -2.0, 7.0)

        self.assertEqual(quaternion_sum(quat_1, quat_2), quaternion_sum(quat_2, quat_1))
        self.assertEqual(quat_1 + quat_2, quat_2 + quat_1)

    def test_prod(self):

        self.assertEqual(quaternion_product(Quaternion(1, 0, 0, 0), Quaternion(10, 0, 0, 0), Quaternion.scalar(11)),
                         Quaternion.scalar(110))
        self.assertEqual(quaternion_product(Quaternion.pure(1, 0, 0), Quaternion.pure(0, 1, 1),
                                            Quaternion.pure(1, 0, 1)),
                         Quaternion(-1, -1, 1, 1))
        self.assertEqual(quaternion_product(Q1, Q2, Q3), Q4)
        self.assertEqual(quaternion_product(), Quaternion.identity())
        self.assertEqual(quaternion_product(Q10), Q10)

        self.assertEqual(Q1 * Q2 * Q3, Q4)

    def test_prod_not_commutative(self):

        i = Quaternion.pure(1, 0, 0)
        j = Quaternion.pure(0, 1, 0)

        self.assertEqual(i * j, Quaternion.pure(0, 0, 1))
        self.assertEqual(j * i, Quaternion.pure(0, 0, -1))

        quat = Quaternion(0, 0, 1, 1)

        self.assertNotEqual(Q1 * quat, quat * Q1)

        # scalar quaternions commute with everything
        self.assertEqual(Q1 * Quaternion.scalar(3), Quaternion.scalar(3) * Q1)

    def test_operators_reject_other_types(self):

        with self.assertRaises(TypeError):
            _ = Q1 * 2

        with self.assertRaises(TypeError):
            _ = Q1 + [1, 0, 0, 0]

        with self.assertRaises(TypeError):
            _ = [1, 0, 0, 0] * Q1

    def test_euler(self):

        quat = Quaternion(0.24765262787484427, 0.2940044459739585, 0.3943046179925829, 0.8347175749221727)

        phi, theta, psi = quat.euler()

        self.assertIsInstance(phi, float)
        np.testing.assert_allclose([phi, theta, psi], [1.0, -0.3, 2.4], atol=1e-6)

    def test_from_euler(self):

        self.check_quaternion(Quaternion.from_euler(-1.2, 0.4, 5.5),
                              [-0.7904669075670613, 0.44891659738265544, -0.3627631346111533, 0.205033813803568],
                              places=6)

        for angles in [(0.1, 0.2, 0.3), (-2.0, 1.2, 3.0), (0.0, -0.5, -1.5)]:
            np.testing.assert_allclose(Quaternion.from_euler(*angles).euler(), angles, atol=1e-6)

    def test_rot_mat(self):

        quat = Quaternion(math.cos(math.pi / 2), math.sin(math.pi / 2) / math.sqrt(3),
                          math.sin(math.pi / 2) / math.sqrt(3), -math.sin(math.pi / 2) / math.sqrt(3))

        matrix = quat.rot_mat()

        self.assertEqual(matrix.shape, (3, 3))
        np.testing.assert_allclose(matrix, [[-0.333333333, 0.666666667, -0.666666667],
                                            [0.666666667, -0.333333333, -0.666666667],
                                            [-0.666666667, -0.666666667, -0.333333333]], atol=1e-6)

        np.testing.assert_allclose(matrix.T, np.linalg.inv(matrix), atol=1e-12)

    def test_rotate_vec3(self):

        rotated = Q10.rotate_vec3(Vec3(0, 0, 1))

        self.assertIsInstance(rotated, Vec3)
        np.testing.assert_allclose(rotated.as_array(), [0, -1, 0], atol=1e-6)

        self.assertEqual(Vec3(0, 0, 1).rotate(Q10), rotated)

    def test_from_axis_angle(self):

        self.check_quaternion(Quaternion.from_axis_angle(Vec3(0, 0, 2), math.pi / 2),
                              [math.cos(math.pi / 4), 0, 0, math.sin(math.pi / 4)])

        self.check_quaternion(Quaternion.from_axis_angle([1, 0, 0], math.pi / 2), Q10.as_array(), places=6)

        with self.assertRaises(ValueError):
            Quaternion.from_axis_angle(Vec3(), 1)

    def test_from_two_vectors(self):

        v1 = Vec3(0, 0, 1)
        v2 = Vec3(0, -1, 0)

        quat = Quaternion.from_two_vectors(v1, v2)

        self.check_quaternion(quat, Q10.as_array(), places=6)
        self.assertTrue(quat.rotate_vec3(v1).isclose(v2))

        self.assertEqual(Quaternion.from_two_vectors(v1, v1), Quaternion.identity())
        self.assertEqual(Quaternion.from_two_vectors(v1, Vec3(0, 0, 3)), Quaternion.identity())

        half_turn = Quaternion.from_two_vectors(v1, -v1)

        self.assertAlmostEqual(half_turn.w, 0)
        self.assertAlmostEqual(half_turn.norm(), 1)
        self.assertAlmostEqual(half_turn.vector_part().dot(v1), 0)
        np.testing.assert_allclose(half_turn.rotate_vec3(v1).as_array(), [0, 0, -1], atol=1e-12)

        self.assertEqual(Quaternion.from_two_vectors([0, 0, 1], [0, -1, 0]), quat)

    def test_isclose(self):

        self.assertTrue(Q10.isclose(Quaternion(math.sqrt(0.5), math.sqrt(0.5), 0, 0)))
        self.assertFalse(Q10.isclose(Quaternion(math.sqrt(0.5), -math.sqrt(0.5), 0, 0)))
