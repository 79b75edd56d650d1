from tourguide.config import Settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    s = Settings()
    assert s.proximity_buffer_miles == 10.0
    assert s.attraction_proximity_range_miles == 200.0
    assert s.tracking_pool_floor == 100
    assert s.nearby_attractions_limit == 5
    assert s.test_mode is True


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TOURGUIDE_PROXIMITY_BUFFER_MILES", "25.5")
    monkeypatch.setenv("TOURGUIDE_TEST_MODE", "false")
    s = Settings()
    assert s.proximity_buffer_miles == 25.5
    assert s.test_mode is False


def test_env_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("TOURGUIDE_INTERNAL_USER_COUNT=7\nUNRELATED=1\n")
    assert Settings().internal_user_count == 7
