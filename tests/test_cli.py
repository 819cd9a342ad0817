"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest

from manifest_json.cli import main


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    """Directory holding a small manifest."""
    (tmp_path / "manifest.json").write_text(
        json.dumps(
            {
                "src/app.js": "src/app.1.js",
                "src/vendor.js": "src/vendor.2.js",
                "dist/app.css": "dist/app.3.css",
            }
        ),
        encoding="utf-8",
    )
    return tmp_path


def run(argv: list[str], capsys: pytest.CaptureFixture[str]) -> tuple[int, str, str]:
    """Run the CLI and return (exit_code, stdout, stderr)."""
    try:
        main(argv)
        code = 0
    except SystemExit as e:
        code = e.code if isinstance(e.code, int) else 1
    captured = capsys.readouterr()
    return code, captured.out, captured.err


class TestQueries:
    """Test each query flag."""

    def test_dumps_whole_manifest(self, build_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the default output."""
        code, out, err = run(["--path", str(build_dir)], capsys)

        assert code == 0
        assert len(json.loads(out)) == 3
        assert "Loaded 3 entries" in err

    def test_get(self, build_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test resolving a single key."""
        code, out, _ = run(["--path", str(build_dir), "--get", "src/app.js"], capsys)

        assert code == 0
        assert json.loads(out) == "src/app.1.js"

    def test_get_missing_key_fails(self, build_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a missing key exits with an error."""
        code, out, err = run(["--path", str(build_dir), "--get", "nope.js"], capsys)

        assert code == 1
        assert out == ""
        assert 'Manifest key "nope.js" does not exist.' in err

    def test_has(self, build_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the existence check and its exit status."""
        code, out, _ = run(["--path", str(build_dir), "--has", "src/app.js"], capsys)
        assert code == 0
        assert json.loads(out) is True

        code, out, _ = run(["--path", str(build_dir), "--has", "nope.js"], capsys)
        assert code == 1
        assert json.loads(out) is False

    def test_single_type(self, build_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test filtering by one extension."""
        _, out, _ = run(["--path", str(build_dir), "--type", "css"], capsys)
        assert json.loads(out) == {"dist/app.css": "dist/app.3.css"}

    def test_multiple_types(self, build_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test grouping by several extensions."""
        _, out, _ = run(["--path", str(build_dir), "--type", "js", "css"], capsys)
        result = json.loads(out)

        assert list(result) == ["js", "css"]
        assert len(result["js"]) == 2

    def test_key_pattern(self, build_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test glob filtering on full keys."""
        _, out, _ = run(["--path", str(build_dir), "--key", "src/*"], capsys)
        assert set(json.loads(out)) == {"src/app.js", "src/vendor.js"}

    def test_basename_pattern(self, build_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test glob filtering on basenames."""
        _, out, _ = run(["--path", str(build_dir), "--basename", "app.*"], capsys)
        assert set(json.loads(out)) == {"src/app.js", "dist/app.css"}

    def test_custom_file_name(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test reading a manifest with another name."""
        (tmp_path / "assets.json").write_text('{"a.js": "a.1.js"}', encoding="utf-8")
        code, out, _ = run(["--path", str(tmp_path), "--file-name", "assets.json"], capsys)

        assert code == 0
        assert json.loads(out) == {"a.js": "a.1.js"}


class TestErrors:
    """Test failure reporting."""

    def test_missing_manifest(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a directory without a manifest."""
        code, out, err = run(["--path", str(tmp_path)], capsys)

        assert code == 1
        assert out == ""
        assert err.startswith("Error: Failed to load manifest:")

    def test_invalid_manifest(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a manifest with a non-string value."""
        (tmp_path / "manifest.json").write_text('{"a.js": 1}', encoding="utf-8")
        code, _, err = run(["--path", str(tmp_path)], capsys)

        assert code == 1
        assert "Validation error at a.js" in err

    def test_query_flags_are_exclusive(self, build_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that argparse rejects two queries at once."""
        code, _, err = run(
            ["--path", str(build_dir), "--get", "a.js", "--has", "a.js"], capsys
        )

        assert code == 2
        assert "not allowed with" in err
