"""
Unit tests for the command-line interface.

Runs the Typer application against a temporary configuration directory.
"""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

import click
import typer
from typer.testing import CliRunner

from skyglow.api.brightness.models import LuminaryPosition
from skyglow.api.brightness.visual_limit import clear_model_cache
from skyglow.api.location.observer import clear_observer_site, get_config_path
from skyglow.cli.commands import site
from skyglow.cli.main import app
from skyglow.cli.utils.groups import SortedCommandsGroup


DARK_SKY = ["--alt", "45", "--az", "180", "--sun-alt", "-40", "--moon-alt", "-20", "--date", "2000-06-15"]


class CliTestCase(unittest.TestCase):
    """Runs each command against an empty configuration directory"""

    def setUp(self):
        """Set up the runner and configuration directory"""
        self.runner = CliRunner()
        self.temp_dir = tempfile.TemporaryDirectory()
        self.env_patch = patch.dict(os.environ, {"SKYGLOW_CONFIG_DIR": self.temp_dir.name})
        self.env_patch.start()
        clear_observer_site()
        clear_model_cache()

    def tearDown(self):
        """Restore the environment"""
        clear_observer_site()
        self.env_patch.stop()
        self.temp_dir.cleanup()


class TestSkyCommands(CliTestCase):
    """Test suite for limit, brightness, extinction and visible"""

    def test_limit(self):
        """Test the limiting magnitude command"""
        result = self.runner.invoke(app, ["limit", *DARK_SKY])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Limiting magnitude", result.output)

    def test_limit_json(self):
        """Test JSON output of the limiting magnitude"""
        result = self.runner.invoke(app, ["limit", *DARK_SKY, "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.output)
        self.assertTrue(5.0 < data["limiting_magnitude"] < 7.5)
        self.assertEqual(data["point"], {"azimuth": 180.0, "altitude": 45.0})

    def test_site_overrides(self):
        """Test that command-line weather overrides the saved site"""
        result = self.runner.invoke(app, ["limit", *DARK_SKY, "--humidity", "90", "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        humid = json.loads(result.output)
        clear_model_cache()
        result = self.runner.invoke(app, ["limit", *DARK_SKY, "--humidity", "20", "--json"])
        dry = json.loads(result.output)
        self.assertEqual(humid["site"]["relative_humidity"], 90.0)
        self.assertLess(humid["limiting_magnitude"], dry["limiting_magnitude"])

    def test_invalid_latitude(self):
        """Test that an impossible latitude is rejected"""
        result = self.runner.invoke(app, ["limit", *DARK_SKY, "--lat", "95"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Latitude", result.output)

    def test_invalid_humidity(self):
        """Test that out-of-range humidity is reported as an error"""
        result = self.runner.invoke(app, ["limit", *DARK_SKY, "--humidity", "120"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("relative_humidity", result.output)

    def test_point_on_the_sun(self):
        """Test that evaluating the position of the Sun fails cleanly"""
        result = self.runner.invoke(app, ["limit", "--alt", "90", "--sun-alt", "90"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Failed to compute limiting magnitude", result.output)

    def test_brightness(self):
        """Test the sky brightness table"""
        result = self.runner.invoke(app, ["brightness", *DARK_SKY])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Sky Brightness", result.output)

    def test_brightness_json(self):
        """Test JSON output of the sky brightness"""
        result = self.runner.invoke(app, ["brightness", *DARK_SKY, "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.output)
        self.assertEqual(set(data["brightness_nl"]), {"U", "B", "V", "R", "I"})

    def test_extinction_json(self):
        """Test JSON output of the extinction table"""
        result = self.runner.invoke(app, ["extinction", *DARK_SKY, "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.output)
        self.assertEqual([row["band"] for row in data["bands"]], ["U", "B", "V", "R", "I"])
        for row in data["bands"]:
            self.assertGreater(row["extinction"], row["k"])

    def test_extinction_table(self):
        """Test the extinction table"""
        result = self.runner.invoke(app, ["extinction", *DARK_SKY])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Atmospheric Extinction", result.output)

    def test_visible(self):
        """Test naked-eye visibility of a bright and a faint object"""
        bright = self.runner.invoke(app, ["visible", "1.0", *DARK_SKY, "--json"])
        faint = self.runner.invoke(app, ["visible", "9.0", *DARK_SKY, "--json"])
        self.assertEqual(bright.exit_code, 0, bright.output)
        self.assertTrue(json.loads(bright.output)["visible"])
        self.assertFalse(json.loads(faint.output)["visible"])

    def test_not_visible_below_horizon(self):
        """Test that nothing is visible a few degrees below the horizon"""
        for altitude in ("-0.5", "-2", "-3", "-10"):
            args = ["visible", "50", "--alt", altitude, "--sun-alt", "-40", "--moon-alt", "-20", "--json"]
            result = self.runner.invoke(app, args)
            with self.subTest(altitude=altitude):
                self.assertEqual(result.exit_code, 0, result.output)
                self.assertFalse(json.loads(result.output)["visible"])

    @patch("skyglow.api.ephemeris.sun_moon.get_sun_moon_positions")
    def test_now_uses_ephemeris(self, mock_positions):
        """Test that --now takes the Sun and Moon from the ephemeris"""
        mock_positions.return_value = (
            LuminaryPosition.from_degrees(0.0, -50.0),
            LuminaryPosition.from_degrees(90.0, -10.0, 60.0),
        )
        result = self.runner.invoke(app, ["limit", "--now", "--alt", "60", "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        mock_positions.assert_called_once()
        data = json.loads(result.output)
        self.assertAlmostEqual(data["sun"]["altitude"], -50.0)
        self.assertAlmostEqual(data["moon"]["elongation"], 60.0)


class TestSiteCommands(CliTestCase):
    """Test suite for the site command group"""

    def test_show_default(self):
        """Test showing the default site"""
        result = self.runner.invoke(app, ["site", "show", "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.output)
        self.assertEqual(data["latitude"], 51.4769)

    def test_set_and_show(self):
        """Test saving a site and reading it back"""
        result = self.runner.invoke(
            app, ["site", "set", "--lat", "19.82", "--lon", "-155.47", "--elev", "4205", "--name", "Mauna Kea"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(get_config_path().exists())

        clear_observer_site()
        result = self.runner.invoke(app, ["site", "show"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Mauna Kea", result.output)

    def test_set_invalid_humidity(self):
        """Test that an impossible humidity is rejected"""
        result = self.runner.invoke(app, ["site", "set", "--lat", "0", "--lon", "0", "--humidity", "101"])
        self.assertEqual(result.exit_code, 1)
        self.assertFalse(get_config_path().exists())

    def test_observer_on_the_moon(self):
        """Test that sky commands refuse observers away from Earth"""
        self.runner.invoke(app, ["site", "set", "--lat", "0", "--lon", "0", "--body", "moon"])
        result = self.runner.invoke(app, ["limit", *DARK_SKY])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Earth", result.output)

    def test_clear(self):
        """Test removing the saved site"""
        self.runner.invoke(app, ["site", "set", "--lat", "10", "--lon", "10"])
        result = self.runner.invoke(app, ["site", "clear"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("removed", result.output)
        self.assertFalse(get_config_path().exists())

        result = self.runner.invoke(app, ["site", "clear"])
        self.assertIn("No saved site", result.output)


class TestCommandGroups(unittest.TestCase):
    """Test suite for command listing"""

    def test_commands_sorted(self):
        """Test that the main app and the site group list commands alphabetically"""
        for typer_app, expected in (
            (app, ["brightness", "extinction", "limit", "site", "version", "visible"]),
            (site.app, ["clear", "set", "show"]),
        ):
            group = typer.main.get_command(typer_app)
            with self.subTest(expected=expected):
                self.assertIsInstance(group, SortedCommandsGroup)
                self.assertEqual(group.list_commands(click.Context(group)), expected)


class TestVersion(CliTestCase):
    """Test suite for the version command"""

    def test_version(self):
        """Test that the version is printed"""
        result = self.runner.invoke(app, ["version"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("0.1.0", result.output)


if __name__ == "__main__":
    unittest.main()
