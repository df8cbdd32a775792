import pytest

from slstatus.temperature import temp


@pytest.fixture
def sensor(tmp_path):
    def write(content):
        path = tmp_path / "temp"
        path.write_text(content)
        return path

    return write


def test_millidegrees_become_degrees(sensor):
    assert temp(sensor("45000\n")) == "45"


def test_fraction_is_truncated(sensor):
    assert temp(sensor("45999\n")) == "45"


def test_accepts_str_path(sensor):
    assert temp(str(sensor("30000"))) == "30"


def test_missing_file_is_none(tmp_path):
    assert temp(tmp_path / "absent") is None


def test_non_numeric_content_is_none(sensor):
    assert temp(sensor("hot\n")) is None


def test_empty_file_is_none(sensor):
    assert temp(sensor("")) is None