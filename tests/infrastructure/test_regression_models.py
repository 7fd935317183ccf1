import unittest

import numpy as np

from gradopt.domain._errors import DimensionMismatchError, UntrainedModelError
from gradopt.infrastructure.models import LinearRegressor, LogisticRegressor
from gradopt.infrastructure.optimizers import GradientDesc, StochasticGD


def _finite_diff_grad(model, params, x, t, eps: float = 1e-6) -> np.ndarray:
    """
    Central difference gradient of the model cost wrt params.
    """
    params = np.asarray(params, dtype=np.float64)
    grad = np.zeros_like(params)
    for i in range(params.size):
        hi = params.copy()
        lo = params.copy()
        hi[i] += eps
        lo[i] -= eps
        grad[i] = (model.compute_grad(hi, x, t)[0] - model.compute_grad(lo, x, t)[0]) / (
            2.0 * eps
        )
    return grad


class TestLinearRegressor(unittest.TestCase):
    def setUp(self):
        self.x = np.array([[0.0], [1.0], [2.0], [3.0]])
        self.y = np.array([1.0, 3.0, 5.0, 7.0])

    def test_compute_grad_matches_finite_differences(self):
        model = LinearRegressor()
        design = np.array([[1.0, 0.5], [1.0, -1.0], [1.0, 2.0]])
        t = np.array([0.3, -0.7, 2.2])
        params = np.array([0.4, -1.3])

        cost, grad = model.compute_grad(params, design, t)
        outputs = design @ params
        self.assertAlmostEqual(cost, np.sum((outputs - t) ** 2) / 6.0)
        np.testing.assert_allclose(
            grad, _finite_diff_grad(model, params, design, t), rtol=1e-6, atol=1e-8
        )

    def test_compute_grad_does_not_mutate_inputs(self):
        model = LinearRegressor()
        params = np.array([1.0, 2.0])
        design = np.array([[1.0, 1.0], [1.0, 2.0]])
        t = np.array([1.0, 2.0])
        snapshot = (params.copy(), design.copy(), t.copy())
        model.compute_grad(params, design, t)
        for before, after in zip(snapshot, (params, design, t)):
            np.testing.assert_array_equal(before, after)

    def test_compute_grad_rejects_wrong_param_count(self):
        with self.assertRaises(DimensionMismatchError):
            LinearRegressor().compute_grad([0.0], np.zeros((2, 2)), np.zeros(2))

    def test_compute_grad_rejects_one_dimensional_inputs(self):
        with self.assertRaises(ValueError):
            LinearRegressor().compute_grad([0.0], np.zeros(3), np.zeros(3))

    def test_train_with_gradient_descent(self):
        model = LinearRegressor(GradientDesc(alpha=0.1, iters=2000))
        model.train(self.x, self.y)
        np.testing.assert_allclose(model.parameters, [1.0, 2.0], atol=1e-4)
        np.testing.assert_allclose(
            model.predict(np.array([[4.0], [-1.0]])), [9.0, -1.0], atol=1e-3
        )

    def test_train_with_stochastic_gd(self):
        model = LinearRegressor(StochasticGD(alpha=0.1, mu=0.3, iters=1000))
        model.train(self.x, self.y)
        np.testing.assert_allclose(model.parameters, [1.0, 2.0], atol=1e-2)

    def test_default_algorithm_is_gradient_descent(self):
        self.assertEqual(LinearRegressor().alg, GradientDesc())

    def test_predict_before_train_raises(self):
        model = LinearRegressor()
        with self.assertRaises(UntrainedModelError):
            model.predict(self.x)
        with self.assertRaises(UntrainedModelError):
            _ = model.parameters


class TestLogisticRegressor(unittest.TestCase):
    def setUp(self):
        self.x = np.array([[-3.0], [-2.0], [-1.0], [1.0], [2.0], [3.0]])
        self.y = np.array([0.0, 0.0, 1.0, 0.0, 1.0, 1.0])

    def test_compute_grad_matches_finite_differences(self):
        model = LogisticRegressor()
        design = np.hstack([np.ones((6, 1)), self.x])
        params = np.array([0.2, -0.4])
        _, grad = model.compute_grad(params, design, self.y)
        np.testing.assert_allclose(
            grad, _finite_diff_grad(model, params, design, self.y), rtol=1e-5, atol=1e-8
        )

    def test_cost_at_zero_params_is_log_two(self):
        design = np.hstack([np.ones((6, 1)), self.x])
        cost, _ = LogisticRegressor().compute_grad(np.zeros(2), design, self.y)
        self.assertAlmostEqual(cost, np.log(2.0), places=12)

    def test_training_reduces_cost_and_orders_predictions(self):
        model = LogisticRegressor(GradientDesc(alpha=0.3, iters=500))
        model.train(self.x, self.y)

        design = np.hstack([np.ones((6, 1)), self.x])
        trained_cost, _ = model.compute_grad(model.parameters, design, self.y)
        self.assertLess(trained_cost, np.log(2.0))

        probs = model.predict(np.array([[-3.0], [0.0], [3.0]]))
        self.assertTrue(np.all((probs > 0.0) & (probs < 1.0)))
        self.assertLess(probs[0], 0.5)
        self.assertGreater(probs[2], 0.5)
        self.assertLess(probs[0], probs[1])
        self.assertLess(probs[1], probs[2])

    def test_predict_before_train_raises(self):
        with self.assertRaises(UntrainedModelError):
            LogisticRegressor().predict(self.x)


class TestLogisticRegressorSaturation(unittest.TestCase):
    def test_cost_stays_finite_on_well_separated_data(self):
        x = np.array([[-50.0], [50.0], [-60.0], [60.0]])
        y = np.array([0.0, 1.0, 0.0, 1.0])
        model = LogisticRegressor(GradientDesc(alpha=1.0, iters=50))

        with np.errstate(divide="raise", invalid="raise", over="raise"):
            model.train(x, y)
            design = np.hstack([np.ones((4, 1)), x])
            cost, grad = model.compute_grad(model.parameters, design, y)

        self.assertTrue(np.isfinite(cost))
        self.assertLess(cost, 1e-6)
        self.assertTrue(np.all(np.isfinite(grad)))
        np.testing.assert_allclose(model.predict(x), y, atol=1e-6)

    def test_saturated_logits_give_exact_misclassification_cost(self):
        design = np.array([[1.0, 800.0]])
        # sigmoid(800) rounds to 1.0; the target is 0, so the cost is ~800
        cost, _ = LogisticRegressor().compute_grad([0.0, 1.0], design, [0.0])
        self.assertAlmostEqual(cost, 800.0, places=6)


if __name__ == "__main__":
    unittest.main()
