"""
Unit tests for extinction.py

Tests the layer air masses and line-of-sight extinction.
"""

import math
import unittest

from skyglow.api.brightness.coefficients import compute_band_coefficients
from skyglow.api.brightness.extinction import aerosol_air_mass, compute_extinction, gas_air_mass, ozone_air_mass
from skyglow.api.brightness.models import AngularBrightnessData, FixedBrightnessData
from skyglow.api.core.enums import ALL_BANDS_MASK, Band
from skyglow.api.core.exceptions import BandNotComputedError


FIXED = FixedBrightnessData(
    moon_zenith_angle=math.pi / 2,
    sun_zenith_angle=2.0,
    moon_elongation=0.0,
    height_above_sea_level=0.0,
    latitude=0.7,
    temperature=15.0,
    relative_humidity=50.0,
    year=2000,
    month=6,
)


class TestLayerAirMasses(unittest.TestCase):
    """Test suite for the gas, aerosol and ozone air masses"""

    def test_ozone_at_zenith(self):
        """Test that the ozone air mass is exactly 1 straight up"""
        self.assertEqual(ozone_air_mass(0.0), 1.0)

    def test_close_to_one_at_zenith(self):
        """Test that all layer air masses are about 1 straight up"""
        self.assertAlmostEqual(gas_air_mass(0.0), 1.0, places=5)
        self.assertAlmostEqual(aerosol_air_mass(0.0), 1.0, places=5)

    def test_close_to_secant_at_moderate_angles(self):
        """Test the plane-parallel limit at 45 degrees"""
        z = math.radians(45)
        self.assertAlmostEqual(gas_air_mass(z), math.sqrt(2.0), places=3)
        self.assertAlmostEqual(aerosol_air_mass(z), math.sqrt(2.0), places=3)

    def test_ozone_shell_is_flatter(self):
        """Test that the high ozone layer has a smaller air mass near the horizon"""
        z = math.radians(85)
        self.assertLess(ozone_air_mass(z), gas_air_mass(z))

    def test_ozone_finite_at_horizon(self):
        """Test that the ozone shell keeps the air mass finite at the horizon"""
        self.assertTrue(math.isfinite(ozone_air_mass(math.pi / 2)))

    def test_saturate_below_horizon(self):
        """Test that points below the horizon take the horizon air mass of each layer"""
        for elevation in (-0.5, -2.0, -3.0, -10.0):
            z = math.radians(90 - elevation)
            for func in (gas_air_mass, aerosol_air_mass, ozone_air_mass):
                with self.subTest(elevation=elevation, func=func.__name__):
                    self.assertGreater(func(z), 0.0)
                    self.assertAlmostEqual(func(z), func(math.pi / 2), places=9)

    def test_increase_towards_horizon(self):
        """Test that every layer air mass grows with zenith angle"""
        for func in (gas_air_mass, aerosol_air_mass, ozone_air_mass):
            values = [func(math.radians(z)) for z in (0, 20, 40, 60, 80)]
            with self.subTest(func=func.__name__):
                self.assertEqual(values, sorted(values))


class TestComputeExtinction(unittest.TestCase):
    """Test suite for compute_extinction"""

    def setUp(self):
        """Set up test fixtures"""
        self.coefficients = compute_band_coefficients(FIXED)

    def test_closed_form_at_zenith(self):
        """Test the V-band extinction straight up against its components"""
        angular = AngularBrightnessData(0.0, math.pi / 2, 2.0)
        result = compute_extinction(self.coefficients, angular, ALL_BANDS_MASK)
        c = self.coefficients
        v = Band.V
        expected = (c.kr[v] + c.kw[v]) * gas_air_mass(0.0) + c.ka[v] * aerosol_air_mass(0.0) + c.ko[v]
        self.assertAlmostEqual(result.get(v), expected, places=12)
        self.assertAlmostEqual(result.get(v), 0.5106, delta=1e-3)

    def test_extinction_close_to_k_at_zenith(self):
        """Test that extinction per air mass equals k at the zenith"""
        angular = AngularBrightnessData(0.0, math.pi / 2, 2.0)
        result = compute_extinction(self.coefficients, angular, ALL_BANDS_MASK)
        for band in Band:
            with self.subTest(band=band.name):
                self.assertAlmostEqual(result.get(band), self.coefficients.k[band], places=4)

    def test_increases_towards_horizon(self):
        """Test that extinction grows with zenith angle"""
        high = compute_extinction(self.coefficients, AngularBrightnessData(0.2, 1.0, 1.0), ALL_BANDS_MASK)
        low = compute_extinction(self.coefficients, AngularBrightnessData(1.4, 1.0, 1.0), ALL_BANDS_MASK)
        for band in Band:
            self.assertGreater(low.get(band), high.get(band))

    def test_below_horizon_is_finite_and_non_negative(self):
        """Test that extinction below the horizon stays at its horizon value"""
        horizon = compute_extinction(self.coefficients, AngularBrightnessData(math.pi / 2, 1.0, 1.0), ALL_BANDS_MASK)
        above = compute_extinction(
            self.coefficients, AngularBrightnessData(math.radians(89.5), 1.0, 1.0), ALL_BANDS_MASK
        )
        for elevation in (-0.5, -2.0, -3.0, -10.0):
            angular = AngularBrightnessData(math.radians(90 - elevation), 1.0, 1.0)
            result = compute_extinction(self.coefficients, angular, ALL_BANDS_MASK)
            for band in Band:
                with self.subTest(elevation=elevation, band=band.name):
                    value = result.get(band)
                    self.assertTrue(math.isfinite(value))
                    self.assertGreater(value, above.get(band))
                    self.assertAlmostEqual(value, horizon.get(band), places=6)

    def test_air_masses_reported(self):
        """Test that the layer air masses are returned with the result"""
        angular = AngularBrightnessData(math.radians(60), 1.0, 1.0)
        result = compute_extinction(self.coefficients, angular, Band.V.mask)
        self.assertAlmostEqual(result.air_mass_gas, gas_air_mass(angular.zenith_angle), places=15)
        self.assertAlmostEqual(result.air_mass_aerosol, aerosol_air_mass(angular.zenith_angle), places=15)
        self.assertAlmostEqual(result.air_mass_ozone, ozone_air_mass(angular.zenith_angle), places=15)

    def test_unselected_bands_are_empty(self):
        """Test that only selected bands are computed"""
        mask = Band.B.mask | Band.R.mask
        result = compute_extinction(self.coefficients, AngularBrightnessData(0.0, 1.0, 1.0), mask)
        self.assertEqual(result.bands, (Band.B, Band.R))
        self.assertEqual(set(result.as_dict()), {"B", "R"})
        with self.assertRaises(BandNotComputedError):
            result.get(Band.V)


if __name__ == "__main__":
    unittest.main()
