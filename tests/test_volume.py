from slstatus.volume import SOUND_DEVICE_NAMES, vol_perc


def test_missing_device_is_none(tmp_path):
    assert vol_perc(str(tmp_path / "mixer")) is None


def test_regular_file_is_not_a_mixer(tmp_path):
    path = tmp_path / "mixer"
    path.write_bytes(b"\0" * 16)
    assert vol_perc(str(path)) is None


def test_null_device_is_not_a_mixer():
    assert vol_perc("/dev/null") is None


def test_vol_is_first_device_name():
    assert SOUND_DEVICE_NAMES.index("vol") == 0