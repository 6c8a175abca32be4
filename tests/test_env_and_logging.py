import pytest

from tsquery.config.env import EnvLoader
from tsquery.handlers.error_handler import ErrorHandler
from tsquery.managers.error_manager import ErrorManager
from tsquery.managers.log_manager import LogManager
from tsquery.query.errors import UnsafeValueError
from tsquery.query.query_builder import QueryBuilder


def test_env_defaults():
    info = EnvLoader.debug_info()
    assert info["loaded"] is True
    assert info["strict"] is False
    assert info["debug"] is False


def test_env_bool_parsing(monkeypatch):
    monkeypatch.setenv("QUERY_STRICT", "Yes")
    assert EnvLoader.strict_queries() is True
    monkeypatch.setenv("QUERY_STRICT", "0")
    assert EnvLoader.strict_queries() is False


def test_pass_through_by_default():
    qb = QueryBuilder("cpu").add_tag("ho\"st", "it's").before("x'y")
    assert qb.build() == "SELECT * FROM cpu WHERE \"ho\"st\"='it's' AND time < 'x'y'"


def test_strict_mode_rejects_quotes():
    qb = QueryBuilder("cpu", strict=True)
    with pytest.raises(UnsafeValueError):
        qb.add_tag("host", "it's")
    with pytest.raises(UnsafeValueError):
        qb.add_tag("ho\"st", "a")
    with pytest.raises(UnsafeValueError):
        qb.add_tags(host=["ok", "no'pe"])
    with pytest.raises(UnsafeValueError) as exc:
        qb.after("2020'")
    assert exc.value.quote == "'"
    assert qb.build() == "SELECT * FROM cpu"


def test_strict_mode_from_env(monkeypatch):
    monkeypatch.setenv("QUERY_STRICT", "true")
    assert QueryBuilder("cpu").strict is True
    assert QueryBuilder("cpu", strict=False).strict is False


def test_build_is_written_to_log_file(isolated_env):
    query = QueryBuilder("cpu").with_limit(3).build()
    text = isolated_env.read_text(encoding="utf-8")
    assert "[INFO]" in text
    assert query in text
    assert LogManager.read("INFO", last_only=True) == ("INFO", f"[QueryBuilder] build -> {query}")


def test_log_manager_delete():
    LogManager.info("a")
    LogManager.warning("b")
    LogManager.delete(0)
    assert LogManager.read() == [("WARNING", "b")]
    LogManager.delete()
    assert LogManager.read() == []


def test_error_manager_prints_in_dev_mode(capsys):
    ErrorManager.initialize(dev_mode=True)
    try:
        raise KeyError("x")
    except KeyError as e:
        ErrorManager.create(e)
    out = capsys.readouterr().out
    assert "[ERROR]: KeyError" in out
    assert ErrorManager.read(last_only=False)[0].args == ("x",)


def test_error_handler_traceback_outside_except():
    try:
        raise ValueError("bad")
    except ValueError as e:
        err = e
    assert ErrorHandler.format_error(err) == "ValueError: bad"
    assert "ValueError: bad" in ErrorHandler.get_traceback(err)


def test_unencodable_query_text_still_builds(isolated_env):
    query = QueryBuilder("cpu").add_tag("host", "srv\udcff").build()
    assert query == "SELECT * FROM cpu WHERE \"host\"='srv\udcff'"
    assert "srv\\udcff" in isolated_env.read_text(encoding="utf-8")


def test_in_memory_log_is_bounded(monkeypatch):
    monkeypatch.setenv("LOG_MEMORY_LIMIT", "5")
    LogManager.initialize()
    ErrorManager.initialize(dev_mode=False)
    qb = QueryBuilder("cpu")
    for n in range(1, 21):
        qb.with_limit(n).build()
    entries = LogManager.read()
    assert len(entries) == 5
    assert entries[-1] == ("INFO", "[QueryBuilder] build -> SELECT * FROM cpu LIMIT 20")

    for _ in range(8):
        ErrorManager.create(RuntimeError("x"))
    assert len(ErrorManager.read(last_only=False)) == 5


def test_memory_limit_falls_back_on_bad_value(monkeypatch):
    monkeypatch.setenv("LOG_MEMORY_LIMIT", "lots")
    assert EnvLoader.log_memory_limit() == 1000
    monkeypatch.setenv("LOG_MEMORY_LIMIT", "0")
    assert EnvLoader.log_memory_limit() == 1
