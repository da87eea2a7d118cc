"""
Unit tests for coefficients.py

Tests the per-band extinction coefficients and band-independent terms.
"""

import math
import unittest
from dataclasses import replace

from skyglow.api.brightness.coefficients import (
    aerosol_coefficient,
    compute_band_coefficients,
    lunar_magnitude,
    ozone_coefficient,
    rayleigh_coefficient,
    solar_cycle_term,
    water_vapor_coefficient,
)
from skyglow.api.brightness.models import FixedBrightnessData
from skyglow.api.core.constants import BANDS
from skyglow.api.core.enums import Band


def make_fixed(**overrides):
    """Dark sky at sea level, latitude 0.7 rad, June 2000."""
    values = {
        "moon_zenith_angle": math.pi / 2,
        "sun_zenith_angle": 2.0,
        "moon_elongation": 0.0,
        "height_above_sea_level": 0.0,
        "latitude": 0.7,
        "temperature": 15.0,
        "relative_humidity": 50.0,
        "year": 2000,
        "month": 6,
    }
    values.update(overrides)
    return FixedBrightnessData(**values)


class TestComponentCoefficients(unittest.TestCase):
    """Test suite for the V-band component coefficients"""

    def test_rayleigh_at_sea_level(self):
        """Test Rayleigh extinction at sea level"""
        self.assertAlmostEqual(rayleigh_coefficient(0.0), 0.1066, places=12)

    def test_rayleigh_at_scale_height(self):
        """Test Rayleigh extinction falls by e over 8200 m"""
        self.assertAlmostEqual(rayleigh_coefficient(8200.0), 0.1066 / math.e, places=12)

    def test_aerosol_closed_form(self):
        """Test aerosol extinction at 50% humidity in June, northern hemisphere"""
        self.assertAlmostEqual(aerosol_coefficient(0.0, 50.0, 0.7, math.pi / 2), 0.33134, delta=1e-4)

    def test_aerosol_dry_air(self):
        """Test that zero humidity skips the humidity factor"""
        self.assertAlmostEqual(aerosol_coefficient(0.0, 0.0, 0.7, 0.0), 0.1, places=12)

    def test_aerosol_saturated_is_finite(self):
        """Test that 100% humidity is pinned instead of dividing by log(1)"""
        saturated = aerosol_coefficient(0.0, 100.0, 0.7, 0.0)
        self.assertTrue(math.isfinite(saturated))
        self.assertGreater(saturated, aerosol_coefficient(0.0, 99.0, 0.7, 0.0))

    def test_aerosol_seasons_reversed_by_hemisphere(self):
        """Test that the seasonal term has opposite sign south of the equator"""
        north = aerosol_coefficient(0.0, 50.0, 0.7, math.pi / 2)
        south = aerosol_coefficient(0.0, 50.0, -0.7, math.pi / 2)
        self.assertGreater(north, 0.0)
        self.assertAlmostEqual(south, 0.0, places=12)

    def test_aerosol_equinox_same_in_both_hemispheres(self):
        """Test that in March both hemispheres get the same aerosol extinction"""
        self.assertAlmostEqual(
            aerosol_coefficient(0.0, 50.0, 0.7, 0.0), aerosol_coefficient(0.0, 50.0, -0.7, 0.0), places=12
        )

    def test_ozone_closed_form(self):
        """Test the ozone scale with latitude in radians"""
        expected = (3.0 + 0.4 * (0.7 * math.cos(math.pi / 2) - math.cos(2.1))) / 3.0
        self.assertAlmostEqual(ozone_coefficient(0.7, math.pi / 2), expected, places=12)
        self.assertAlmostEqual(ozone_coefficient(0.7, math.pi / 2), 1.06731, delta=1e-5)

    def test_water_vapor_closed_form(self):
        """Test the water vapor scale"""
        self.assertAlmostEqual(water_vapor_coefficient(0.0, 50.0, 15.0), 0.47 * math.e, places=12)

    def test_water_vapor_dry_air(self):
        """Test that dry air has no water vapor extinction"""
        self.assertEqual(water_vapor_coefficient(0.0, 0.0, 15.0), 0.0)


class TestBandIndependentTerms(unittest.TestCase):
    """Test suite for the solar cycle and lunar magnitude terms"""

    def test_solar_cycle_maximum(self):
        """Test the airglow maximum at the cycle epoch"""
        self.assertAlmostEqual(solar_cycle_term(1992), 1.3, places=12)
        self.assertAlmostEqual(solar_cycle_term(2003), 1.3, places=12)

    def test_solar_cycle_year_2000(self):
        """Test the airglow term in 2000"""
        self.assertAlmostEqual(solar_cycle_term(2000), 0.9573, delta=1e-4)

    def test_solar_cycle_bounds(self):
        """Test that the modulation stays within +/-30%"""
        for year in range(1990, 2030):
            with self.subTest(year=year):
                self.assertTrue(0.7 <= solar_cycle_term(year) <= 1.3)

    def test_lunar_magnitude_zero_elongation(self):
        """Test the lunar magnitude polynomial at zero elongation"""
        self.assertAlmostEqual(lunar_magnitude(0.0), -12.73, places=12)

    def test_lunar_magnitude_grows_with_elongation(self):
        """Test that the polynomial increases with elongation"""
        values = [lunar_magnitude(math.radians(d)) for d in (0, 45, 90, 135, 180)]
        self.assertEqual(values, sorted(values))
        self.assertAlmostEqual(lunar_magnitude(math.pi), -12.73 + 180.0 * (0.026 + 4.0e-9 * 180.0**3), places=9)


class TestComputeBandCoefficients(unittest.TestCase):
    """Test suite for compute_band_coefficients"""

    def setUp(self):
        """Set up test fixtures"""
        self.fixed = make_fixed()
        self.coefficients = compute_band_coefficients(self.fixed)

    def test_all_bands_positive(self):
        """Test that the total extinction is positive in every band"""
        self.assertEqual(len(self.coefficients.k), BANDS)
        for band in Band:
            with self.subTest(band=band.name):
                self.assertGreater(self.coefficients.k[band], 0.0)

    def test_total_is_sum_of_components(self):
        """Test that k is the sum of its four components"""
        c = self.coefficients
        for i in range(BANDS):
            self.assertAlmostEqual(c.k[i], c.kr[i] + c.ka[i] + c.ko[i] + c.kw[i], places=15)

    def test_v_band_total(self):
        """Test the V-band extinction coefficient"""
        self.assertAlmostEqual(self.coefficients.k[Band.V], 0.5106, delta=1e-3)
        self.assertAlmostEqual(self.coefficients.kr[Band.V], 0.1066, places=12)

    def test_rayleigh_decreases_with_wavelength(self):
        """Test that blue light is scattered more than red"""
        kr = self.coefficients.kr
        self.assertEqual(list(kr), sorted(kr, reverse=True))

    def test_ozone_only_in_v_and_r(self):
        """Test that ozone absorption only affects V and R"""
        ko = self.coefficients.ko
        self.assertEqual(ko[Band.U], 0.0)
        self.assertEqual(ko[Band.B], 0.0)
        self.assertEqual(ko[Band.I], 0.0)
        self.assertGreater(ko[Band.V], ko[Band.R])

    def test_height_decreases_rayleigh_and_aerosol(self):
        """Test that a higher site has less Rayleigh and aerosol extinction"""
        previous = self.coefficients
        for height in (500.0, 1500.0, 3000.0, 4200.0):
            current = compute_band_coefficients(replace(self.fixed, height_above_sea_level=height))
            for i in range(BANDS):
                with self.subTest(height=height, band=i):
                    self.assertLess(current.kr[i], previous.kr[i])
                    self.assertLess(current.ka[i], previous.ka[i])
            previous = current

    def test_humidity_increases_aerosol_only(self):
        """Test that raising humidity from 50% to 99% adds haze but not gas or ozone extinction"""
        humid = compute_band_coefficients(replace(self.fixed, relative_humidity=99.0))
        for i in range(BANDS):
            with self.subTest(band=i):
                self.assertGreater(humid.ka[i], self.coefficients.ka[i])
                self.assertEqual(humid.kr[i], self.coefficients.kr[i])
                self.assertEqual(humid.ko[i], self.coefficients.ko[i])

    def test_saturated_humidity(self):
        """Test that 100% humidity gives finite coefficients"""
        saturated = compute_band_coefficients(replace(self.fixed, relative_humidity=100.0))
        for value in saturated.k:
            self.assertTrue(math.isfinite(value))

    def test_band_independent_terms(self):
        """Test air masses, year term and lunar magnitude"""
        c = self.coefficients
        self.assertAlmostEqual(c.air_mass_moon, 40.0, places=9)
        self.assertEqual(c.air_mass_sun, 40.0)
        self.assertAlmostEqual(c.year_term, solar_cycle_term(2000), places=15)
        self.assertAlmostEqual(c.lunar_mag, -12.73, places=12)
        self.assertIs(c.fixed, self.fixed)

    def test_path_transmission(self):
        """Test the transmission along the path to the Moon and Sun"""
        c = self.coefficients
        for i in range(BANDS):
            self.assertAlmostEqual(c.c4[i], 10.0 ** (-0.4 * c.k[i] * 40.0), places=15)
            self.assertTrue(0.0 < c.c3[i] < 1.0)


if __name__ == "__main__":
    unittest.main()
