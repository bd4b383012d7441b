import unittest

import numpy as np

from aldsat.calibration import fit_saturation_curve, beta0_from_t0
from aldsat.presets import ALDinitialize
from aldsat.errors import DomainError, SingularityError


class TestFit(unittest.TestCase):

    def test_exact_curve(self):
        t = np.linspace(0, 3, 30)
        cov = 1 - np.exp(-t/0.5)
        t0, t0_std = fit_saturation_curve(t, cov)
        self.assertAlmostEqual(t0, 0.5, places=6)
        self.assertLess(t0_std, 1e-6)

    def test_noisy_curve(self):
        rng = np.random.default_rng(1)
        t = np.linspace(0, 10, 50)
        cov = 1 - np.exp(-t/2.0) + 0.01*rng.normal(size=t.size)
        t0, t0_std = fit_saturation_curve(t, cov)
        self.assertLess(abs(t0 - 2.0), 0.2)
        self.assertGreater(t0_std, 0)

    def test_model_curve(self):
        model = ALDinitialize()
        t0, _ = fit_saturation_curve(*model.saturation_curve())
        self.assertAlmostEqual(t0/model.t0(), 1, places=6)

    def test_invalid(self):
        self.assertRaises(DomainError, fit_saturation_curve, [0, 1], [0])
        self.assertRaises(DomainError, fit_saturation_curve, [1], [0.5])
        self.assertRaises(DomainError, fit_saturation_curve, [-1, 1], [0, 0.5])
        self.assertRaises(SingularityError, fit_saturation_curve, [0, 0], [0, 0])


class TestBeta0(unittest.TestCase):

    def test_recover_beta0(self):
        model = ALDinitialize('Al2O3-200C')
        beta0 = beta0_from_t0(model.chem, model.t0(), model.T, model.p)
        self.assertAlmostEqual(beta0/model.chem.beta0, 1, places=10)

    def test_invalid(self):
        model = ALDinitialize()
        self.assertRaises(DomainError, beta0_from_t0, model.chem, 0, 500, 10)
        self.assertRaises(SingularityError, beta0_from_t0, model.chem, 1, 500, 0)


if __name__ == '__main__':
    unittest.main()
