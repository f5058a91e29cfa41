"""
Tests for the YAML equipment config loader.

Each test isolates HOME and $PLATE_MATH_CONFIG so a real user override
never leaks in.
"""

import pytest

from plate_math.core.config import DEFAULT_BARS, DEFAULT_DENOMINATIONS, DEFAULT_HANDLE_KG, DEFAULT_PLATES
from plate_math.core.config_loader import (
    _deep_merge,
    get_user_yaml_path,
    load_bundled_config,
    load_inventory_config,
    load_raw_config,
    parse_inventory_config,
)
from plate_math.core.models import Bar, Plate
from plate_math.io.serializers import ValidationError


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("PLATE_MATH_CONFIG", raising=False)
    return tmp_path


class TestDeepMerge:
    def test_nested_dicts_merge(self):
        base = {"a": {"x": 1, "y": 2}, "b": 1}
        assert _deep_merge(base, {"a": {"y": 3}}) == {"a": {"x": 1, "y": 3}, "b": 1}

    def test_lists_replace(self):
        assert _deep_merge({"plates": [1, 2]}, {"plates": [3]}) == {"plates": [3]}

    def test_base_untouched(self):
        base = {"a": {"x": 1}}
        _deep_merge(base, {"a": {"x": 2}})
        assert base == {"a": {"x": 1}}


class TestBundledConfig:
    def test_bundled_file_loaded(self):
        raw = load_bundled_config()
        assert raw["handle"] == 20
        assert "Olympic barbell" in raw["bars"]

    def test_bundled_file_missing(self, monkeypatch):
        monkeypatch.setattr("plate_math.core.config_loader.BUNDLED_CONFIG_NAME", "missing.yaml")
        assert load_bundled_config() == {}
        assert load_raw_config() == {}

    def test_bundled_matches_python_defaults(self):
        cfg = load_inventory_config()
        assert cfg.handle == DEFAULT_HANDLE_KG
        assert cfg.plates == list(DEFAULT_PLATES)
        assert cfg.denominations == list(DEFAULT_DENOMINATIONS)
        assert cfg.bars == list(DEFAULT_BARS)

    def test_no_user_file(self):
        assert get_user_yaml_path() is None


class TestUserOverride:
    def test_home_override_merged(self, isolated_home):
        cfg_dir = isolated_home / ".plate-math"
        cfg_dir.mkdir()
        (cfg_dir / "plates.yaml").write_text("handle: 15\n", encoding="utf-8")

        cfg = load_inventory_config()
        assert cfg.handle == 15.0
        # Sections not overridden come from the bundled file
        assert cfg.plates == list(DEFAULT_PLATES)

    def test_env_override_takes_precedence(self, isolated_home, monkeypatch):
        cfg_dir = isolated_home / ".plate-math"
        cfg_dir.mkdir()
        (cfg_dir / "plates.yaml").write_text("handle: 15\n", encoding="utf-8")
        env_file = isolated_home / "gym.yaml"
        env_file.write_text("handle: 10\ndenominations: [5, 2.5]\n", encoding="utf-8")
        monkeypatch.setenv("PLATE_MATH_CONFIG", str(env_file))

        cfg = load_inventory_config()
        assert cfg.handle == 10.0
        assert cfg.denominations == [2.5, 5.0]

    def test_env_pointing_to_missing_file(self, isolated_home, monkeypatch):
        monkeypatch.setenv("PLATE_MATH_CONFIG", str(isolated_home / "missing.yaml"))
        assert get_user_yaml_path() is None

    def test_unparsable_override_ignored(self, isolated_home, monkeypatch, caplog):
        bad = isolated_home / "bad.yaml"
        bad.write_text("handle: [15\n", encoding="utf-8")
        monkeypatch.setenv("PLATE_MATH_CONFIG", str(bad))

        raw = load_raw_config()
        assert raw["handle"] == 20
        assert "Ignoring config override" in caplog.text

    def test_bar_override_merges_into_one_bar(self, isolated_home):
        cfg_dir = isolated_home / ".plate-math"
        cfg_dir.mkdir()
        (cfg_dir / "plates.yaml").write_text(
            "bars:\n  EZ curl bar:\n    max_load: 80\n",
            encoding="utf-8",
        )

        bars = {b.name: b for b in load_inventory_config().bars}
        assert bars["EZ curl bar"].weight == 10.0
        assert bars["EZ curl bar"].max_load == 80.0
        assert bars["Olympic barbell"] == DEFAULT_BARS[0]
        assert len(bars) == len(DEFAULT_BARS)

    def test_bar_override_adds_bar(self, isolated_home):
        cfg_dir = isolated_home / ".plate-math"
        cfg_dir.mkdir()
        (cfg_dir / "plates.yaml").write_text(
            "bars:\n  Trap bar: {weight: 25}\n",
            encoding="utf-8",
        )

        cfg = load_inventory_config()
        assert cfg.bars[:len(DEFAULT_BARS)] == list(DEFAULT_BARS)
        assert cfg.bars[-1] == Bar(name="Trap bar", weight=25.0)

    def test_nan_handle_rejected(self, isolated_home, monkeypatch):
        gym = isolated_home / "gym.yaml"
        gym.write_text("handle: .nan\n", encoding="utf-8")
        monkeypatch.setenv("PLATE_MATH_CONFIG", str(gym))

        with pytest.raises(ValidationError, match="finite"):
            load_inventory_config()


class TestParseInventoryConfig:
    def test_empty_gives_defaults(self):
        cfg = parse_inventory_config({})
        assert cfg.handle == DEFAULT_HANDLE_KG
        assert cfg.plates == list(DEFAULT_PLATES)

    def test_sections_parsed_and_sorted(self):
        cfg = parse_inventory_config({
            "handle": 15,
            "plates": [{"weight": 10, "count": 2}, {"weight": 5, "count": 1}],
            "denominations": [10, 5],
            "bars": [{"name": "Trap bar", "weight": 25}],
        })
        assert cfg.handle == 15.0
        assert cfg.plates == [Plate(weight=5.0, count=1), Plate(weight=10.0, count=2)]
        assert cfg.denominations == [5.0, 10.0]
        assert cfg.bars == [Bar(name="Trap bar", weight=25.0, bar_type="barbell")]

    def test_bars_mapping(self):
        cfg = parse_inventory_config({
            "bars": {
                "Trap bar": {"weight": 25},
                "Dumbbell handle": {"weight": 2.5, "type": "dumbbell", "plate_limits": {5: 2}},
            },
        })
        assert cfg.bars == [
            Bar(name="Trap bar", weight=25.0),
            Bar(name="Dumbbell handle", weight=2.5, bar_type="dumbbell", plate_limits={5.0: 2}),
        ]

    @pytest.mark.parametrize(
        "raw",
        [
            {"handle": "heavy"},
            {"handle": -5},
            {"plates": [{"weight": 10}]},
            {"plates": "10x2"},
            {"denominations": 5},
            {"denominations": [5, "ten"]},
            {"denominations": [5, 0]},
            {"bars": [{"name": "no weight"}]},
            {"handle": float("nan")},
            {"handle": float("inf")},
            {"denominations": [5, float("inf")]},
            {"denominations": [float("nan")]},
            {"plates": [{"weight": float("nan"), "count": 2}]},
            {"bars": {"Trap bar": 25}},
            {"bars": {"Trap bar": {"weight": float("nan")}}},
            {"bars": {"Trap bar": {"weight": 25, "max_load": -1}}},
        ],
    )
    def test_malformed_section_raises(self, raw):
        with pytest.raises(ValidationError):
            parse_inventory_config(raw)
