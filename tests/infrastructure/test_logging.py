import unittest

import numpy as np
from loguru import logger

import gradopt
from gradopt.infrastructure.optimizers import GradientDesc, StochasticGD


class _Quadratic:
    def compute_grad(self, params, data, targets):
        p = np.asarray(params, dtype=np.float64)
        return float(p @ p), 2.0 * p


class TestLogging(unittest.TestCase):
    def setUp(self):
        self.records = []
        self.sink_id = logger.add(
            lambda msg: self.records.append(msg.record["message"]), level="DEBUG"
        )

    def tearDown(self):
        logger.remove(self.sink_id)
        logger.disable("gradopt")

    def test_disabled_by_default(self):
        self.assertIsNotNone(gradopt.__version__)
        GradientDesc(alpha=0.1, iters=2).optimize(
            _Quadratic(), [1.0], np.zeros((2, 1)), np.zeros(2)
        )
        self.assertEqual(self.records, [])

    def test_enabled_emits_debug_records(self):
        logger.enable("gradopt")
        StochasticGD(iters=2).optimize(
            _Quadratic(), [1.0], np.zeros((3, 1)), np.zeros(3)
        )
        self.assertTrue(any("StochasticGD: 2 passes" in m for m in self.records))
        self.assertTrue(any("5 gradient evaluations" in m for m in self.records))


if __name__ == "__main__":
    unittest.main()
