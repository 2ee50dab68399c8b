"""Tests for config module."""

import pytest
from circlens.config import DEFAULT_CONFIG, load_config, params_from_config
from circlens.types import DetectionParams


class TestConfig:
    """Test configuration module."""

    def test_default_config_exists(self):
        """Test that default config exists."""
        assert DEFAULT_CONFIG is not None
        assert isinstance(DEFAULT_CONFIG, dict)

    def test_detection_config(self):
        """Test detection configuration."""
        assert 'detection' in DEFAULT_CONFIG
        detect = DEFAULT_CONFIG['detection']

        assert detect['r_min'] == 20
        assert detect['r_max'] == 180
        assert detect['edge_thresh'] == 45
        assert detect['acc_thresh'] == 55
        assert detect['proc_width'] == 320

    def test_tracking_config(self):
        assert DEFAULT_CONFIG['tracking']['alpha'] == 0.5

    def test_config_values_valid(self):
        detect = DEFAULT_CONFIG['detection']
        assert 1 <= detect['r_min'] < detect['r_max']
        assert 0 <= detect['edge_thresh'] <= 255
        assert 0 <= detect['acc_thresh'] <= 100

    def test_load_without_path_returns_copy(self):
        config = load_config()
        config['detection']['r_min'] = 99
        assert DEFAULT_CONFIG['detection']['r_min'] == 20

    def test_load_yaml_merges_over_defaults(self, tmp_path):
        path = tmp_path / "circlens.yaml"
        path.write_text("detection:\n  r_max: 90\n  acc_thresh: 40\ntracking:\n  alpha: 0.25\n")

        config = load_config(path)
        assert config['detection']['r_max'] == 90
        assert config['detection']['acc_thresh'] == 40
        assert config['detection']['r_min'] == 20
        assert config['tracking']['alpha'] == 0.25
        assert config['logging']['level'] == 'INFO'

    def test_load_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == DEFAULT_CONFIG

    def test_load_non_mapping_yaml(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_params_from_config(self):
        params = params_from_config({'detection': {'r_min': 10, 'edge_thresh': 60}})
        assert params == DetectionParams(r_min=10, r_max=180, edge_thresh=60,
                                         acc_thresh=55, proc_width=320)

    def test_params_from_default_config(self):
        assert params_from_config() == DetectionParams()


class TestDetectionParams:
    """Test parameter clamping."""

    def test_clamped_limits(self):
        params = DetectionParams(edge_thresh=400, acc_thresh=-5, proc_width=0).clamped()
        assert params.edge_thresh == 255
        assert params.acc_thresh == 0
        assert params.proc_width == 3

    def test_clamped_keeps_valid_values(self):
        params = DetectionParams()
        assert params.clamped() == params
