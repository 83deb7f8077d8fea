from barstatus.components.temperature import temp


def test_millidegrees_to_degrees(tmp_path):
    sensor = tmp_path / "temp"
    sensor.write_text("45000\n")
    assert temp(str(sensor)) == "45"


def test_fraction_is_truncated(tmp_path):
    low = tmp_path / "low"
    high = tmp_path / "high"
    low.write_text("45000\n")
    high.write_text("45999\n")
    assert temp(str(high)) == temp(str(low))


def test_missing_file(tmp_path):
    assert temp(str(tmp_path / "absent")) is None


def test_garbage_content(tmp_path):
    sensor = tmp_path / "temp"
    sensor.write_text("hot\n")
    assert temp(str(sensor)) is None