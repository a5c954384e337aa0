import unittest
import os
import yaml
from unittest.mock import patch, mock_open
from pydantic import ValidationError
from carematch.config_loader import load_config, AppConfig, ComponentWeights, ScorerConfig, EligibilityConfig


class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "log_level": "DEBUG",
            "web": {"host": "127.0.0.1", "port": 9000},
            "matching": {
                "eligibility": {"distance_tolerance": 1.2, "pets_are_eliminatory": False},
                "scorer": {
                    "weights": {
                        "age_range": 20, "modality": 10, "activities": 10, "regime": 10,
                        "availability": 15, "children_count": 10, "seal": 10, "reviews": 10,
                        "distance_bonus": 3, "budget_bonus": 2
                    },
                    "reviews_full_confidence_count": 20
                },
                "result_policy": {"min_score": 40, "top_k": 5}
            }
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def test_load_config_default(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy_path.yaml")
                self.assertIsInstance(config, AppConfig)
                self.assertEqual(config.log_level, "DEBUG")
                self.assertEqual(config.matching.scorer.weights.age_range, 20)
                self.assertEqual(config.matching.scorer.reviews_full_confidence_count, 20)
                self.assertEqual(config.matching.eligibility.distance_tolerance, 1.2)
                self.assertFalse(config.matching.eligibility.pets_are_eliminatory)
                self.assertEqual(config.matching.result_policy.top_k, 5)

    def test_missing_file_uses_defaults(self):
        with patch("os.path.exists", return_value=False):
            config = load_config("does_not_exist.yaml")
            self.assertEqual(config.matching.scorer.weights.age_range, 15)
            self.assertEqual(config.matching.scorer.reviews_neutral_fraction, 0.5)
            self.assertEqual(config.matching.result_policy.top_k, 20)
            self.assertEqual(config.web.port, 8080)

    def test_env_var_override_web(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"WEB_HOST": "0.0.0.0", "WEB_PORT": "8181"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.web.host, "0.0.0.0")
                    self.assertEqual(config.web.port, 8181)

    def test_env_var_override_log_level(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"CAREMATCH_LOG_LEVEL": "warning"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.log_level, "WARNING")

    def test_weights_must_sum_to_100(self):
        bad = dict(self.sample_config)
        bad["matching"] = {"scorer": {"weights": {"age_range": 50}}}
        with patch("builtins.open", mock_open(read_data=yaml.dump(bad))):
            with patch("os.path.exists", return_value=True):
                with self.assertRaises(ValidationError):
                    load_config("dummy_path.yaml")

    def test_default_weights_sum_to_100(self):
        weights = ComponentWeights()
        self.assertEqual(sum(weights.model_dump().values()), 100)

    def test_invalid_values_rejected(self):
        with self.assertRaises(ValidationError):
            ScorerConfig(reviews_neutral_fraction=-0.1)
        with self.assertRaises(ValidationError):
            ScorerConfig(budget_adjacent_fraction=1.5)
        with self.assertRaises(ValidationError):
            EligibilityConfig(distance_tolerance=0.5)


if __name__ == "__main__":
    unittest.main()
