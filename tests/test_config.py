import json
import logging

import pytest

import config


def test_defaults_are_valid():
    cfg = config.default_config()
    assert config.validate_config(cfg) is cfg


def test_missing_file_gives_defaults(tmp_path):
    assert config.load_config(tmp_path / "nope.json") == config.default_config()


def test_partial_file_merges_defaults(tmp_path):
    p = tmp_path / "s.json"
    p.write_text(json.dumps({"world": {"width": 50}, "brush_radius": 7}))
    cfg = config.load_config(p)
    assert cfg["world"] == {"width": 50, "height": 120}
    assert cfg["brush_radius"] == 7
    assert cfg["target_fps"] == 200


def test_bad_json_gives_defaults(tmp_path):
    p = tmp_path / "s.json"
    p.write_text("{not json")
    assert config.load_config(p) == config.default_config()


def test_save_then_load(tmp_path):
    cfg = config.default_config()
    cfg["allow_overwrite"] = True
    p = config.save_config(cfg, tmp_path / "sub" / "s.json")
    assert config.load_config(p)["allow_overwrite"] is True


def test_default_path_sanitizes_name(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "CONFIG_DIR", tmp_path)
    assert config.get_config_path("my cfg!") == tmp_path / "my_cfg.json"


@pytest.mark.parametrize("mutate", [
    lambda c: c["world"].update(width=0),
    lambda c: c["world"].update(height=-3),
    lambda c: c.update(pixel_scale=0),
    lambda c: c.update(steps_per_frame=1.5),
    lambda c: c.update(materials=[]),
    lambda c: c["materials"][0].pop("weight"),
    lambda c: c["materials"][0].update(horizontal_spread=-1),
    lambda c: c["materials"][0].update(color=[0, 0]),
    lambda c: c.update(brush_min=5, brush_max=2),
    lambda c: c.update(brush_max="16"),
    lambda c: c["materials"][0].update(horizontal_spread="2"),
    lambda c: c["materials"][0].update(color=5),
    lambda c: c["materials"][0].update(color=[0, 0, "9"]),
    lambda c: c["materials"][0].update(weight="heavy"),
    lambda c: c["materials"][0].update(weight=True),
    lambda c: c["materials"][0].update(vertical_bias=None),
    lambda c: c.update(materials={"name": "Sand"}),
    lambda c: c.update(log_level="basic_format"),
    lambda c: c.update(log_level=None),
])
def test_invalid_settings_raise(mutate):
    cfg = config.default_config()
    mutate(cfg)
    with pytest.raises(config.ConfigError):
        config.validate_config(cfg)


def test_registry_from_config():
    reg = config.registry_from_config(config.default_config())
    assert reg.id_of("Sand") == 1
    assert reg.by_id(2).horizontal_spread == 5
    assert reg.by_id(3).is_static


def test_malformed_material_rejected_before_registry_is_built(monkeypatch):
    cfg = config.default_config()
    cfg["materials"][1]["weight"] = "2"
    built = []
    monkeypatch.setattr(config, "new_registry", built.append)
    with pytest.raises(config.ConfigError, match=r"materials\[1\]\.weight"):
        config.validate_config(cfg)
    assert built == []


def test_log_level_is_numeric():
    cfg = config.default_config()
    cfg["log_level"] = "debug"
    config.validate_config(cfg)
    assert config.log_level(cfg) == logging.DEBUG
    assert config.log_level(config.default_config()) == logging.INFO
