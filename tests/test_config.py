import pytest

from enctools import log
from enctools.config import Config, ConfigGroup


class _Capture(log.Logger):
    def __init__(self):
        self.errors = []

    def debug(self, tag, msg):
        pass

    def warn(self, tag, msg):
        pass

    def error(self, tag, msg):
        self.errors.append((tag, msg))


@pytest.fixture
def captured():
    capture = _Capture()
    previous = log.set_logger(capture)
    yield capture
    log.set_logger(previous)


def test_group_name_is_simplified():
    assert ConfigGroup("  my   group ").name == "my group"


def test_set_and_get_value_simplified():
    grp = ConfigGroup("g")
    grp.set_value("key", "  a   b  ")
    assert grp.get_value("key") == "a b"
    assert grp.has_key("key")
    assert not grp.is_empty()


def test_missing_key_returns_default_and_logs(captured):
    grp = ConfigGroup("g")
    assert grp.get_value("nope", "fallback") == "fallback"
    assert captured.errors == [("Config", "no such key: nope")]


def test_int_roundtrip():
    grp = ConfigGroup("g")
    grp.set_value("n", -42)
    assert grp.get_value("n") == "-42"
    assert grp.get_int("n") == -42


def test_invalid_int_returns_default(captured):
    grp = ConfigGroup("g")
    grp.set_value("n", "abc")
    assert grp.get_int("n", 7) == 7
    assert captured.errors == [("Config", "invalid INT entry: n=abc")]


def test_uint_rejects_negative(captured):
    grp = ConfigGroup("g")
    grp.set_value("n", -1)
    assert grp.get_uint("n", 5) == 5
    assert len(captured.errors) == 1


def test_float_roundtrip():
    grp = ConfigGroup("g")
    grp.set_value("f", 1.5)
    assert grp.get_float("f") == 1.5


def test_from_string_and_to_string_roundtrip():
    grp = ConfigGroup.from_string("grp:a=1:b=two")
    assert grp.name == "grp"
    assert grp.get_value("a") == "1"
    assert grp.get_value("b") == "two"
    assert grp.to_string() == "grp:a=1:b=two"


def test_from_string_custom_separator():
    grp = ConfigGroup.from_string("grp;x=1;y=2", ";")
    assert grp.to_string(";") == "grp;x=1;y=2"


def test_from_string_without_separator():
    grp = ConfigGroup.from_string("lonely")
    assert grp.name == "lonely"
    assert grp.is_empty()


def test_from_string_stops_at_field_without_equal():
    grp = ConfigGroup.from_string("g:a=1:junk:b=2")
    assert grp.has_key("a")
    assert not grp.has_key("b")


def test_write_format():
    import io

    grp = ConfigGroup("grp")
    grp.set_value("k", "v")
    out = io.StringIO()
    grp.write(out)
    assert out.getvalue() == "[grp]\r\nk=v\r\n"


def test_save_and_open_roundtrip(tmp_path):
    path = tmp_path / "app.ini"
    cfg = Config()
    cfg.filename = path
    cfg.set_group("one")
    cfg.set_value("a", "alpha")
    cfg.set_group("two")
    cfg.set_value("n", 12)
    assert cfg.save()

    loaded = Config(path)
    assert [g.name for g in loaded] == ["one", "two"]
    loaded.set_group("one")
    assert loaded.get_value("a") == "alpha"
    loaded.set_group("two")
    assert loaded.get_int("n") == 12


def test_open_ignores_comments_and_bad_lines(tmp_path):
    path = tmp_path / "c.ini"
    path.write_text("orphan=1\n[g]\n# c=3\nnoequal\nk = v v \n", encoding="utf-8")
    cfg = Config(path)
    cfg.set_group("g")
    assert cfg.get_value("k") == "v v"
    assert not cfg.has_group("orphan")
    assert cfg.to_string() == "g:k=v v"


def test_open_missing_file(tmp_path, captured):
    cfg = Config()
    assert cfg.open(tmp_path / "missing.ini") is False
    assert cfg.is_null()
    assert len(captured.errors) == 1


def test_context_manager_saves_dirty(tmp_path):
    path = tmp_path / "ctx.ini"
    path.write_text("[g]\n", encoding="utf-8")
    with Config(path) as cfg:
        cfg.set_group("g")
        cfg.set_value("x", "y")
    assert path.read_bytes() == b"[g]\r\nx=y\r\n"


def test_remove_group_clears_current(captured):
    cfg = Config()
    cfg.set_group("g")
    cfg.set_value("a", "b")
    cfg.remove_group("g")
    assert not cfg.has_group("g")
    assert cfg.get_value("a", "dflt") == "dflt"
    assert cfg.to_string() == ""


def test_remove_missing_group_logs(captured):
    cfg = Config()
    cfg.remove_group("none")
    assert captured.errors == [("Config", "group not exists: none")]


def test_set_value_without_group_is_ignored(captured):
    cfg = Config()
    cfg.set_value("a", "b")
    assert cfg.is_null()
    assert cfg.get_int("a", 3) == 3


def test_set_group_reuses_existing():
    cfg = Config()
    cfg.set_group("g")
    cfg.set_group("h")
    cfg.set_group("g")
    assert [g.name for g in cfg] == ["g", "h"]