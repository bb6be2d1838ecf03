"""
Tests for seeding variables from .env files.
"""

import os

from envconfig.sources import SeedResult, seed


def test_seeds_parsed_keys(write_env):
    path = write_env("MONGO_HOST=localhost", "MONGO_PORT=27017")
    env = {}
    result = seed(path, env)
    assert env == {"MONGO_HOST": "localhost", "MONGO_PORT": "27017"}
    assert result.found
    assert result.applied == ("MONGO_HOST", "MONGO_PORT")
    assert result.skipped == ()


def test_existing_values_win(write_env):
    path = write_env("DEBUG_MODE=true", "MONGO_USER=file-user")
    env = {"DEBUG_MODE": "false"}
    result = seed(path, env)
    assert env == {"DEBUG_MODE": "false", "MONGO_USER": "file-user"}
    assert result.skipped == ("DEBUG_MODE",)
    assert result.applied == ("MONGO_USER",)


def test_empty_existing_value_counts_as_unset(write_env):
    path = write_env("MONGO_HOST=from-file")
    env = {"MONGO_HOST": ""}
    seed(path, env)
    assert env["MONGO_HOST"] == "from-file"


def test_blank_comment_and_malformed_lines_ignored(write_env):
    path = write_env(
        "# a comment",
        "",
        "   ",
        "NO_EQUALS_SIGN",
        "   # indented comment",
        "VALID=yes",
    )
    env = {}
    seed(path, env)
    assert env == {"VALID": "yes"}


def test_whitespace_trimmed_and_first_equals_splits(write_env):
    path = write_env("  MONGO_HOST  =  db.local  ", "DSN=mongodb://u:p@h/db?a=b&c=d")
    env = {}
    seed(path, env)
    assert env["MONGO_HOST"] == "db.local"
    assert env["DSN"] == "mongodb://u:p@h/db?a=b&c=d"


def test_quoted_values_and_export_prefix(write_env):
    path = write_env('GREETING="hello world"', "export MONGO_USER='admin'")
    env = {}
    seed(path, env)
    assert env == {"GREETING": "hello world", "MONGO_USER": "admin"}


def test_values_are_not_interpolated(write_env):
    path = write_env("BASE=/srv", "DATA=${BASE}/data")
    env = {}
    seed(path, env)
    assert env["DATA"] == "${BASE}/data"


def test_seeding_twice_is_idempotent(write_env):
    path = write_env("A=1", "B=2", "EMPTY=")
    env = {"B": "external"}
    seed(path, env)
    once = dict(env)
    seed(path, env)
    assert env == once


def test_missing_file_is_not_fatal(tmp_path, caplog):
    env = {"KEEP": "me"}
    result = seed(tmp_path / "missing.env", env)
    assert isinstance(result, SeedResult)
    assert not result.found
    assert result.error
    assert env == {"KEEP": "me"}
    assert "No env file loaded" in caplog.text


def test_directory_path_is_not_fatal(tmp_path):
    result = seed(tmp_path, {})
    assert not result.found


def test_defaults_to_process_environment(write_env, monkeypatch):
    monkeypatch.setenv("ENVCONFIG_TEST_SEEDED", "")
    path = write_env("ENVCONFIG_TEST_SEEDED=from-file")
    seed(path)
    assert os.environ["ENVCONFIG_TEST_SEEDED"] == "from-file"


def test_unterminated_quote_does_not_swallow_following_lines(write_env):
    path = write_env("MONGO_PASSWORD='s3cret", "MONGO_PORT=27017", "NOTE=don't")
    env = {}
    seed(path, env)
    assert env == {"MONGO_PASSWORD": "'s3cret", "MONGO_PORT": "27017", "NOTE": "don't"}


def test_key_with_space_split_on_first_equals(write_env):
    path = write_env("MY KEY=1", "NEXT=2")
    env = {}
    seed(path, env)
    assert env == {"MY KEY": "1", "NEXT": "2"}


def test_value_rejected_by_environment_is_skipped(write_env, monkeypatch, caplog):
    monkeypatch.setenv("ENVCONFIG_TEST_NUL", "")
    monkeypatch.setenv("ENVCONFIG_TEST_AFTER", "")
    path = write_env("ENVCONFIG_TEST_NUL=a\x00b", "ENVCONFIG_TEST_AFTER=ok")
    result = seed(path)
    assert result.found
    assert "ENVCONFIG_TEST_NUL" in result.skipped
    assert result.applied == ("ENVCONFIG_TEST_AFTER",)
    assert os.environ["ENVCONFIG_TEST_NUL"] == ""
    assert os.environ["ENVCONFIG_TEST_AFTER"] == "ok"
    assert "Failed to set env var ENVCONFIG_TEST_NUL" in caplog.text
