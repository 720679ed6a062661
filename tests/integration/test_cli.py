"""
Integration tests for the command line interface
"""

import json

import pytest

from file_system_cache import FileSystemCache
from file_system_cache.ui.cli import main, parse_value


@pytest.mark.integration
class TestCli:
    """End-to-end CLI runs against a temporary cache directory"""

    def _run(self, capsys, base_path, *args):
        code = main(["--base-path", str(base_path), *args])
        out, err = capsys.readouterr()
        return code, out.splitlines(), err

    def test_set_then_get(self, capsys, base_path):
        code, lines, _ = self._run(capsys, base_path, "set", "greeting", '{"hello": "world"}')
        assert code == 0
        assert lines == [str(FileSystemCache(base_path=base_path).path("greeting"))]

        code, lines, _ = self._run(capsys, base_path, "get", "greeting")
        assert code == 0
        assert json.loads(lines[0]) == {"hello": "world"}

    def test_get_default(self, capsys, base_path):
        code, lines, _ = self._run(capsys, base_path, "get", "missing", "--default", "42")
        assert code == 0
        assert lines == ["42"]

    def test_path_with_namespace(self, capsys, base_path):
        code, lines, _ = self._run(capsys, base_path, "--ns", "a", "b", "--extension", "json", "path", "key")
        expected = FileSystemCache(base_path=base_path, ns=["a", "b"], extension="json").path("key")
        assert code == 0
        assert lines == [str(expected)]

    def test_list_remove_clear(self, capsys, base_path):
        self._run(capsys, base_path, "set", "one", "1")
        self._run(capsys, base_path, "set", "two", "plain text")

        _, lines, _ = self._run(capsys, base_path, "list")
        assert sorted(json.loads(line)["value"] for line in lines) == [1, "plain text"]

        self._run(capsys, base_path, "remove", "one")
        _, lines, _ = self._run(capsys, base_path, "list")
        assert [json.loads(line)["value"] for line in lines] == ["plain text"]

        self._run(capsys, base_path, "clear")
        _, lines, _ = self._run(capsys, base_path, "list")
        assert lines == []

    def test_cache_error_exit_code(self, capsys, base_path):
        code, _, err = self._run(capsys, base_path, "--hash", "404-no-exist", "path", "key")
        assert code == 1
        assert "Hash does not exist" in err

    def test_os_error_exit_code(self, capsys, base_path, monkeypatch):
        def denied(path):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr("file_system_cache.adapters.storage.cache.remove_file", denied)
        code, lines, err = self._run(capsys, base_path, "remove", "key")
        assert code == 1
        assert lines == []
        assert err.startswith("error:")
        assert "Permission denied" in err


@pytest.mark.unit
class TestParseValue:
    """Test suite for CLI value parsing"""

    def test_json_values(self):
        assert parse_value("1") == 1
        assert parse_value('{"a": [1]}') == {"a": [1]}
        assert parse_value("null") is None

    def test_plain_strings(self):
        assert parse_value("plain text") == "plain text"
