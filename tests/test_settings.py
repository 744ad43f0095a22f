from boggle.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_defaults():
    cfg = _fresh_settings()
    assert cfg.MIN_WORD_LENGTH == 3
    assert cfg.MAX_RESULTS == 0
    assert cfg.PRESORTED_WORDS is True


def test_fields():
    assert set(Settings.__dataclass_fields__) == {
        "MIN_WORD_LENGTH", "MAX_RESULTS", "PRESORTED_WORDS", "MAX_BOARD_CELLS", "LOG_LEVEL", "DEBUG",
    }


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["MIN_WORD_LENGTH"] == cfg.MIN_WORD_LENGTH
    assert result["MAX_RESULTS"] == cfg.MAX_RESULTS


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MIN_WORD_LENGTH", "4")
    monkeypatch.setenv("PRESORTED_WORDS", "no")
    monkeypatch.setenv("DEBUG", "YES")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    cfg = _fresh_settings()
    assert cfg.MIN_WORD_LENGTH == 4
    assert cfg.PRESORTED_WORDS is False
    assert cfg.DEBUG is True
    assert cfg.LOG_LEVEL == "DEBUG"


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MIN_WORD_LENGTH=4)
    assert errors == {}
    assert cfg.MIN_WORD_LENGTH == 4


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS="25")
    assert errors == {}
    assert cfg.MAX_RESULTS == 25


def test_update_int_rejects_garbage():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS="lots", MIN_WORD_LENGTH=2.5)
    assert set(errors) == {"MAX_RESULTS", "MIN_WORD_LENGTH"}
    assert cfg.MAX_RESULTS == 0
    assert cfg.MIN_WORD_LENGTH == 3


def test_update_rejects_out_of_range():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MIN_WORD_LENGTH=0, MAX_RESULTS=-1)
    assert set(errors) == {"MIN_WORD_LENGTH", "MAX_RESULTS"}
    assert cfg.MIN_WORD_LENGTH == 3


def test_update_bool_from_json_true():
    """JSON sends true/false as Python bool, not string."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG=True)
    assert errors == {}
    assert cfg.DEBUG is True


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, PRESORTED_WORDS="false")
    assert errors == {}
    assert cfg.PRESORTED_WORDS is False

    errors = update_settings(cfg, PRESORTED_WORDS="true")
    assert errors == {}
    assert cfg.PRESORTED_WORDS is True


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=10, MIN_WORD_LENGTH=4, DEBUG=True)
    assert errors == {}
    assert cfg.MAX_RESULTS == 10
    assert cfg.MIN_WORD_LENGTH == 4
    assert cfg.DEBUG is True


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    original = cfg.LOG_LEVEL
    errors = update_settings(cfg, LOG_LEVEL="WARNING")
    assert "LOG_LEVEL" in errors
    assert cfg.LOG_LEVEL == original


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_RESULTS == 25
