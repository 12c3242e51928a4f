import pytest

from pearl_params.keys import (
    CONFIG_KEYS,
    DEFAULT_REGISTRY,
    KEY_GROUPS,
    KeyRegistry,
    is_key,
    load_extra_keys,
)


def test_contains_key():
    assert is_key("rec_prefix")
    assert not is_key("no_key")


def test_exact_match_only():
    assert not is_key("Rec_Prefix")
    assert not is_key(" rec_prefix")
    assert not is_key("rec_prefix ")
    assert not is_key("")
    assert not is_key("=")


def test_duplicate_entries_collapse_in_registry():
    assert CONFIG_KEYS.count("unicast_address") == 3
    assert len(DEFAULT_REGISTRY) == len(set(CONFIG_KEYS))
    assert "unicast_address" in DEFAULT_REGISTRY


def test_every_group_key_is_registered():
    for keys in KEY_GROUPS.values():
        for key in keys:
            assert DEFAULT_REGISTRY.is_key(key)


def test_group_of():
    assert DEFAULT_REGISTRY.group_of("framesize") == "encoder"
    assert DEFAULT_REGISTRY.group_of("unicast_address") == "publish_rtp"
    assert DEFAULT_REGISTRY.group_of("no_key") is None


def test_keys_for_publish_type():
    assert DEFAULT_REGISTRY.keys_for_publish_type("2") == (
        "rtsp_url",
        "rtsp_transport",
        "rtsp_username",
        "rtsp_password",
    )
    assert DEFAULT_REGISTRY.keys_for_publish_type("6") == DEFAULT_REGISTRY.keys_for_publish_type("7")
    mpegts = DEFAULT_REGISTRY.keys_for_publish_type("4")
    assert mpegts.count("unicast_address") == 1
    assert "sap_channel_no" in mpegts
    assert DEFAULT_REGISTRY.keys_for_publish_type("99") == ()


def test_extra_keys_extend_default_vocabulary():
    registry = KeyRegistry(["custom_key"])

    assert registry.is_key("custom_key")
    assert registry.is_key("rec_prefix")
    assert registry.group_of("custom_key") is None
    assert not DEFAULT_REGISTRY.is_key("custom_key")


def test_load_extra_keys(tmp_path):
    sample = tmp_path / "extra_keys.json"
    sample.write_text('["  custom_key ", "other_key"]', encoding="utf-8")

    assert load_extra_keys(sample) == ("custom_key", "other_key")


def test_load_extra_keys_rejects_bad_payload(tmp_path):
    sample = tmp_path / "extra_keys.json"
    sample.write_text('{"keys": ["custom_key"]}', encoding="utf-8")

    with pytest.raises(ValueError, match="extra keys validation failed"):
        load_extra_keys(sample)


def test_load_extra_keys_rejects_non_string_entries(tmp_path):
    sample = tmp_path / "extra_keys.json"
    sample.write_text('["ok_key", 5, "two words"]', encoding="utf-8")

    with pytest.raises(ValueError) as excinfo:
        load_extra_keys(sample)

    assert "5 is not of type 'string'" in str(excinfo.value)
