"""
Pytest configuration and shared fixtures for wordcount tests.

This module provides:
- Sample text fixtures (plain, CRLF, multi-byte, malformed)
- Temporary directory fixtures
- An isolated configuration directory for every test
"""

from pathlib import Path

import pytest

from wordcount import config as wc_config


# ============================================================================
# Session-scoped fixtures (created once per test session)
# ============================================================================

@pytest.fixture(scope="session")
def sample_text_content() -> str:
    """Small multi-line text with repeated words and lines."""
    return """\
the cat sat on the mat
the dog sat
the cat sat on the mat
"""


@pytest.fixture(scope="session")
def invalid_utf8_bytes() -> bytes:
    """Truncated 4-byte sequence followed by a valid 3-byte one."""
    return bytes([ord("a"), 0xF0, 0x90, 0x80, 0xE3, 0x81, 0x82])


# ============================================================================
# Function-scoped fixtures (created per test)
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch) -> Path:
    """Point the config file at a per-test directory and clear the cache."""
    config_dir = tmp_path / ".wordcount"
    monkeypatch.setattr(wc_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(wc_config, "CONFIG_FILE", config_dir / "config.yaml")
    wc_config.reset_config()
    yield config_dir
    wc_config.reset_config()


@pytest.fixture
def tmp_output_dir(tmp_path) -> Path:
    """Provide a temporary directory for test outputs."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def sample_text_file(tmp_path, sample_text_content) -> Path:
    """Write the sample text to a UTF-8 file."""
    path = tmp_path / "sample.txt"
    path.write_bytes(sample_text_content.encode("utf-8"))
    return path


@pytest.fixture
def invalid_text_file(tmp_path, invalid_utf8_bytes) -> Path:
    """File whose second line is not valid UTF-8."""
    path = tmp_path / "invalid.txt"
    path.write_bytes(b"fine line\n" + invalid_utf8_bytes + b"\n")
    return path
