from bpedit.services.settings_service import SettingsService


def test_settings_roundtrip_geometry(settings_service: SettingsService):
    blob = b"\x01\x02\x03"
    settings_service.set_geometry(blob)
    got = settings_service.get_geometry()
    assert isinstance(got, (bytes, bytearray))
    assert bytes(got) == blob


def test_settings_geometry_default(settings_service: SettingsService):
    assert settings_service.get_geometry() is None


def test_settings_recents(settings_service: SettingsService):
    assert settings_service.get_recent() == []  # default
    r = ["a.json", "b.json"]
    settings_service.set_recent(r)
    assert settings_service.get_recent() == r


def test_settings_single_recent_survives_reload(qsettings, tmp_settings_path):
    from PyQt6.QtCore import QSettings

    SettingsService(qsettings).set_recent(["only.json"])
    reopened = SettingsService(QSettings(str(tmp_settings_path), QSettings.Format.IniFormat))
    assert reopened.get_recent() == ["only.json"]
