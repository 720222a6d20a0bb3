import pytest

from spatial_types import (
    ConfigProvider,
    ConfigRepository,
    SpatialSettings,
    get_config,
    reset_config,
    resolve_default_srid,
    set_config,
)
from spatial_types.exceptions import SpatialConfigError, SpatialFileExists


def test_config_get_and_set():
    config = ConfigRepository()
    assert config.get("spatial.default_srid") is None
    assert config.get("spatial.default_srid", 7) == 7
    assert not config.has("spatial.default_srid")

    config.set("spatial.default_srid", 4326)
    assert config.get("spatial.default_srid") == 4326
    assert config.get("spatial") == {"default_srid": 4326}
    assert config.has("spatial.default_srid")
    assert config.get("spatial.default_srid.nested") is None


def test_config_has_key_with_none_value():
    config = ConfigRepository({"spatial": {"default_srid": None}})
    assert config.has("spatial.default_srid")
    assert config.get("spatial.default_srid", 1) is None


def test_config_set_replaces_scalar_section():
    config = ConfigRepository({"spatial": 1})
    config.set("spatial.default_srid", 4326)
    assert config.all() == {"spatial": {"default_srid": 4326}}


def test_config_forget():
    config = ConfigRepository({"spatial": {"default_srid": 4326}})
    assert config.forget("spatial.default_srid")
    assert not config.has("spatial.default_srid")
    assert not config.forget("spatial.default_srid")
    assert not config.forget("missing.key")


def test_config_merge():
    config = ConfigRepository({"spatial": {"default_srid": None, "other": 1}})
    config.merge({"spatial": {"default_srid": 4326}, "app": {"name": "test"}})
    assert config.all() == {
        "spatial": {"default_srid": 4326, "other": 1},
        "app": {"name": "test"},
    }


def test_config_copies_input():
    items = {"spatial": {"default_srid": 4326}}
    config = ConfigRepository(items)
    items["spatial"]["default_srid"] = 1
    config.all()["spatial"]["default_srid"] = 2
    assert config.get("spatial.default_srid") == 4326


def test_config_is_provider():
    assert isinstance(ConfigRepository(), ConfigProvider)
    assert isinstance({"spatial.default_srid": 4326}, ConfigProvider)


def test_config_json(tmp_path):
    config = ConfigRepository({"spatial": {"default_srid": 4326}})
    filename = tmp_path / "settings" / "spatial.json"
    config.to_json(filename)
    assert filename.exists()

    with pytest.raises(SpatialFileExists):
        config.to_json(filename)

    config.set("spatial.default_srid", 3857)
    config.to_json(str(filename), overwrite=True, indent=2)

    config2 = ConfigRepository.from_json(filename)
    assert config2.all() == config.all()


def test_config_from_json_keeps_defaults(tmp_path):
    filename = tmp_path / "config.json"
    filename.write_text('{"app": {"name": "test"}}', encoding="utf-8")
    config = ConfigRepository.from_json(filename)
    assert config.has("spatial.default_srid")
    assert config.get("app.name") == "test"

    filename.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(SpatialConfigError):
        ConfigRepository.from_json(filename)


def test_global_config():
    original = get_config()
    assert get_config().get("spatial.default_srid") is None

    config = ConfigRepository({"spatial": {"default_srid": 4326}})
    set_config(config)
    assert get_config() is config
    assert resolve_default_srid() == 4326

    reset_config()
    assert get_config() is not original
    assert get_config().all() == {"spatial": {"default_srid": None}}
    assert resolve_default_srid() == 0


@pytest.mark.parametrize("value", [-1, "4326", 4326.0, True])
def test_resolve_default_srid_rejects_invalid_values(value):
    config = ConfigRepository({"spatial": {"default_srid": value}})
    with pytest.raises(SpatialConfigError):
        resolve_default_srid(config)


def test_resolve_default_srid_with_provider():
    assert resolve_default_srid(ConfigRepository()) == 0
    assert resolve_default_srid({"spatial.default_srid": 2154}) == 2154


def test_spatial_settings():
    settings = SpatialSettings.from_config()
    assert settings.default_srid is None

    get_config().set("spatial.default_srid", 4326)
    get_config().set("spatial.unrelated", "ignored")
    assert SpatialSettings.from_config().default_srid == 4326

    settings = SpatialSettings.from_config(ConfigRepository())
    assert settings.default_srid is None


def test_spatial_settings_invalid():
    with pytest.raises(SpatialConfigError):
        SpatialSettings.from_config(ConfigRepository({"spatial": {"default_srid": -5}}))
    with pytest.raises(SpatialConfigError):
        SpatialSettings.from_config(ConfigRepository({"spatial": 5}))


@pytest.mark.parametrize(
    ("value", "valid"),
    [
        (None, True),
        (0, True),
        (4326, True),
        (-1, False),
        ("4326", False),
        (4326.0, False),
        (True, False),
    ],
)
def test_settings_and_default_srid_agree(value, valid):
    config = ConfigRepository({"spatial": {"default_srid": value}})
    if valid:
        assert SpatialSettings.from_config(config).default_srid == value
        assert resolve_default_srid(config) == (value or 0)
    else:
        with pytest.raises(SpatialConfigError):
            SpatialSettings.from_config(config)
        with pytest.raises(SpatialConfigError):
            resolve_default_srid(config)
