import unittest

import numpy as np

import nnfold.functions as F
from nnfold import DomainWarning, using_config

INF = np.inf

# every kernel that can hit a floating point error, with an input that does
ERROR_CASES = {
    "sigmoid": lambda: F.sigmoid(-1000.0),
    "prelu": lambda: F.prelu(np.float64(-1e308), 10.0),
    "elu": lambda: F.elu(0.0, INF),
    "glu": lambda: F.glu(-1000.0),
    "swish": lambda: F.swish(-1000.0),
    "softplus": lambda: F.softplus(1.0, 0.0),
    "mish": lambda: F.mish(1000.0),
    "softmax": lambda: F.softmax([1000.0, 0.0]),
    "softmax_stable": lambda: F.softmax_stable([INF, 0.0]),
    "l1": lambda: F.l1([INF], [INF]),
    "l2": lambda: F.l2([INF], [INF]),
    "huber": lambda: F.huber([INF], [INF], 1.0),
    "bce": lambda: F.bce([1.0], [0.0]),
    "ce": lambda: F.ce([1.0], [0.0]),
    "kl": lambda: F.kl([0.5], [0.0]),
    "hinge": lambda: F.hinge([INF], [0.0]),
    "contrastive": lambda: F.contrastive(True, [INF], [INF], 1.0),
    "triplet_ranking": lambda: F.triplet_ranking([INF], [INF], [0.0], 1.0),
}


class TestKernelErrorPolicy(unittest.TestCase):
    def test_raise(self):
        for name, call in ERROR_CASES.items():
            with self.subTest(kernel=name):
                with using_config("numeric_errors", "raise"):
                    with self.assertRaises(FloatingPointError):
                        call()

    def test_warn(self):
        for name, call in ERROR_CASES.items():
            with self.subTest(kernel=name):
                with self.assertWarns(DomainWarning):
                    call()

    def test_ignore(self):
        for name, call in ERROR_CASES.items():
            with self.subTest(kernel=name):
                with using_config("numeric_errors", "ignore"):
                    call()

    def test_prelu_overflow(self):
        with self.assertWarns(DomainWarning):
            self.assertEqual(F.prelu(np.float64(-1e308), 10.0), -INF)

    def test_finite_result_can_still_warn(self):
        with self.assertWarns(DomainWarning):
            self.assertEqual(F.sigmoid(-800.0), 0.0)
