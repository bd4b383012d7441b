import unittest

import numpy as np

from aldsat.precursor import Precursor
from aldsat.kinetics import ALDideal
from aldsat.dose import DoseModel, ZeroD, dose_models
from aldsat.constants import kb
from aldsat.errors import DomainError, SingularityError

T = 500
p = 13.157894736842104


def tma_model(beta0=1e-3, T=T, p=p):
    chem = ALDideal(Precursor('TMA', 144.17), 1e19, beta0, f=1, dm=1)
    return ZeroD(chem, T, p)


class TestDoseModel(unittest.TestCase):

    def test_registry(self):
        self.assertIs(dose_models['zeroD'], ZeroD)
        self.assertRaises(TypeError, DoseModel,
                          ALDideal(Precursor('TMA'), 1e19, 1e-3), T, p)

    def test_cached_vth(self):
        model = tma_model()
        self.assertEqual(model.vth, model.chem.vth(T))
        model.T = 300
        self.assertEqual(model.vth, model.chem.vth(300))
        self.assertEqual(model.T, 300)

    def test_invalid_conditions(self):
        self.assertRaises(DomainError, tma_model, T=-1)
        self.assertRaises(DomainError, tma_model, p=-1)
        self.assertRaises(DomainError, tma_model, p=float('nan'))
        self.assertRaises(DomainError, tma_model, T=float('nan'))

    def test_site_area_passthrough(self):
        model = tma_model()
        self.assertEqual(model.site_area, model.chem.site_area)
        model.site_area = 2e-19
        self.assertEqual(model.chem.site_area, 2e-19)
        self.assertAlmostEqual(model.chem.nsites/5e18, 1, places=12)
        self.assertEqual(model.mass, 144.17)

    def test_rate_constant(self):
        model = tma_model()
        nu = 0.25*model.site_area*model.vth*p/(kb*T)*1e-3
        self.assertAlmostEqual(model.nu/nu, 1, places=10)
        self.assertAlmostEqual(model.t0()*nu, 1, places=10)
        self.assertEqual(model.t0(), model.chem.t0(T, p))

    def test_saturation_curve(self):
        model = tma_model()
        t0 = model.t0()
        t, cov = model.saturation_curve()
        self.assertEqual(len(t), 501)
        self.assertAlmostEqual(t[1]/(0.01*t0), 1, places=10)
        self.assertEqual(cov[0], 0)
        self.assertAlmostEqual(t[-1], 5*t0)
        self.assertTrue(np.all(np.diff(cov) >= 0))
        self.assertGreaterEqual(cov[-1], 0.99)
        i0 = np.argmin(np.abs(t - t0))
        self.assertAlmostEqual(cov[i0], 1 - np.exp(-1), places=6)

    def test_same_physics_as_kinetics(self):
        model = tma_model()
        tk, ck = model.chem.saturation_curve(T, p)
        td, cd = model.saturation_curve()
        np.testing.assert_allclose(td[::5], tk, rtol=1e-12)
        np.testing.assert_allclose(cd[::5], ck, rtol=1e-12, atol=1e-15)

    def test_idempotent(self):
        model = tma_model()
        t1, c1 = model.saturation_curve()
        t2, c2 = model.saturation_curve()
        np.testing.assert_array_equal(t1, t2)
        np.testing.assert_array_equal(c1, c2)

    def test_degenerate(self):
        self.assertRaises(SingularityError, tma_model(beta0=0).saturation_curve)
        self.assertRaises(SingularityError, tma_model(p=0).saturation_curve)
        self.assertRaises(SingularityError, tma_model(T=0).saturation_curve)
        model = tma_model()
        with self.assertRaises(SingularityError):
            model.site_area = 0


class TestEndToEnd(unittest.TestCase):

    def test_tma_saturation(self):
        model = tma_model()
        t0 = model.t0()
        self.assertTrue(np.isfinite(t0))
        self.assertGreater(t0, 0)
        for t, cov in [model.saturation_curve(),
                       model.chem.saturation_curve(T, p)]:
            saturated = t[cov >= 0.99]
            self.assertGreater(saturated.size, 0)
            self.assertGreaterEqual(saturated[0], 4.5*t0)
            self.assertTrue(np.all(cov[t < 4*t0] < 0.99))


if __name__ == '__main__':
    unittest.main()
