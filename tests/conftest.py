"""Shared test fixtures for md-to-pdf-lite."""

import stat
from pathlib import Path

import pytest

from md_to_pdf_lite.config.models import BrowserConfig, MdToPdfConfig

# Writes the staged HTML into the "PDF" so tests can inspect what was printed,
# and appends the source URL to a log next to the script.
FAKE_BROWSER = """\
#!/bin/sh
out=""
src=""
for arg in "$@"; do
  case "$arg" in
    --print-to-pdf=*) out="${arg#--print-to-pdf=}" ;;
    file://*) src="$arg" ;;
  esac
done
echo "$src" >> "$(dirname "$0")/calls.log"
printf '%%PDF-1.4\\n' > "$out"
cat "${src#file://}" >> "$out"
echo "[0101/000000.000:WARNING:headless] harmless warning" >&2
exit 0
"""

FAILING_BROWSER = """\
#!/bin/sh
for arg in "$@"; do
  case "$arg" in
    file://*) echo "$arg" >> "$(dirname "$0")/calls.log" ;;
  esac
done
echo "GPU process crashed" >&2
exit 2
"""

SILENT_BROWSER = """\
#!/bin/sh
exit 0
"""


def _write_script(path: Path, body: str) -> Path:
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path, monkeypatch):
    """Keep host config files and browser overrides out of every test."""
    monkeypatch.delenv("MD_TO_PDF_BROWSER", raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def bin_dir(tmp_path):
    d = tmp_path / "bin"
    d.mkdir()
    return d


@pytest.fixture
def fake_browser(bin_dir):
    return _write_script(bin_dir / "fake-chrome", FAKE_BROWSER)


@pytest.fixture
def failing_browser(bin_dir):
    return _write_script(bin_dir / "crashing-chrome", FAILING_BROWSER)


@pytest.fixture
def silent_browser(bin_dir):
    return _write_script(bin_dir / "silent-chrome", SILENT_BROWSER)


@pytest.fixture
def browser_calls(bin_dir):
    """Source URLs the shell-script browsers were asked to print, in order."""

    def _read() -> list[str]:
        log = bin_dir / "calls.log"
        if not log.exists():
            return []
        return log.read_text().splitlines()

    return _read


@pytest.fixture
def config_for():
    def _make(browser: Path, **browser_kwargs) -> MdToPdfConfig:
        return MdToPdfConfig(
            browser=BrowserConfig(executable=str(browser), **browser_kwargs)
        )

    return _make


@pytest.fixture
def sample_doc(tmp_path):
    """doc.md with a heading and a sibling image, the minimal end-to-end case."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "img.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    doc = docs / "doc.md"
    doc.write_text("# Title\n\n![alt](img.png)", encoding="utf-8")
    return doc


@pytest.fixture
def sample_config():
    return MdToPdfConfig()
