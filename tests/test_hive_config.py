from pathlib import Path

import pytest

from hive.config import HiveConfig, check_config, config_from_dict, load_config
from hive.perception.hive_regions import BLACK, YELLOW

REPO = Path(__file__).resolve().parents[1]


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "absent.yaml")
    assert cfg == HiveConfig()
    assert cfg.yellow == YELLOW and cfg.black == BLACK
    assert cfg.display == "none"


def test_repo_config_matches_builtin_bands():
    cfg = load_config(REPO / "configs/perception/hive.yaml")
    assert cfg.yellow == YELLOW
    assert cfg.black == BLACK
    assert cfg.placement_date == "2024-04-29"


def test_yaml_overrides(tmp_path):
    p = tmp_path / "hive.yaml"
    p.write_text(
        "db_path: x.sqlite\n"
        "placement_date: 2025-01-02\n"
        "display: file\n"
        "out_path: out/a.png\n"
        "bands:\n"
        "  yellow: {lo: [15, 90, 90], hi: [35, 255, 255]}\n"
    )
    cfg = load_config(p)
    assert str(cfg.db_path) == "x.sqlite"
    assert cfg.placement_date == "2025-01-02"
    assert cfg.yellow.lo == (15, 90, 90)
    assert cfg.black == BLACK
    assert cfg.out_path.name == "a.png"


def test_bad_values_rejected():
    with pytest.raises(ValueError):
        config_from_dict({"display": "popup"})
    with pytest.raises(ValueError):
        config_from_dict({"bands": {"black": {"lo": [0, 0]}}})


def test_file_display_needs_out_path():
    with pytest.raises(ValueError):
        config_from_dict({"display": "file"})
    cfg = config_from_dict({"display": "file", "out_path": "out/a.png"})
    cfg.out_path = None
    with pytest.raises(ValueError):
        check_config(cfg)


@pytest.mark.parametrize("bound", [[0, 0, 300], [-1, 0, 0]])
def test_band_values_must_fit_a_byte(bound):
    with pytest.raises(ValueError):
        config_from_dict({"bands": {"yellow": {"lo": bound}}})


def test_shipped_config_runs_headless():
    cfg = load_config(REPO / "configs/perception/hive.yaml")
    assert cfg.display in ("none", "file")
