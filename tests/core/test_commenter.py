"""
Tests for the HeaderCommenter (in-place rewriting with backups).
"""

import pytest
from pathlib import Path

from doxegenate.config import RuntimeConfig
from doxegenate.core.commenter import HeaderCommenter


def test_comment_writes_file_and_backup(header_file, sample_header):
  commenter = HeaderCommenter(RuntimeConfig())

  result = commenter.comment(header_file)

  backup = header_file.with_name("PrimerDesignWizard.h.old")
  assert backup.read_text(encoding="utf-8") == sample_header
  assert header_file.read_text(encoding="utf-8") == result.text
  assert "/// @param parent QWidget * (Defaults to 0.)" in result.text


def test_existing_backup_is_replaced(header_file, sample_header):
  backup = header_file.with_name("PrimerDesignWizard.h.old")
  backup.write_text("stale backup", encoding="utf-8")

  HeaderCommenter(RuntimeConfig()).comment(header_file)

  assert backup.read_text(encoding="utf-8") == sample_header


def test_custom_backup_suffix(header_file):
  HeaderCommenter(RuntimeConfig(backup_suffix=".bak")).comment(header_file)

  assert header_file.with_name("PrimerDesignWizard.h.bak").exists()
  assert not header_file.with_name("PrimerDesignWizard.h.old").exists()


def test_dry_run_leaves_disk_untouched(header_file, sample_header):
  result = HeaderCommenter(RuntimeConfig(dry_run=True)).comment(header_file)

  assert result.changed
  assert header_file.read_text(encoding="utf-8") == sample_header
  assert not header_file.with_name("PrimerDesignWizard.h.old").exists()


def test_unchanged_file_still_rewritten_by_default(tmp_path):
  path = tmp_path / "plain.h"
  path.write_text("int x;\n", encoding="utf-8")

  result = HeaderCommenter(RuntimeConfig()).comment(path)

  assert not result.changed
  assert path.with_name("plain.h.old").exists()


def test_skip_unchanged(tmp_path):
  path = tmp_path / "plain.h"
  path.write_text("int x;\n", encoding="utf-8")

  HeaderCommenter(RuntimeConfig(skip_unchanged=True)).comment(path)

  assert not path.with_name("plain.h.old").exists()
  assert path.read_text(encoding="utf-8") == "int x;\n"


def test_crlf_file_round_trip(tmp_path):
  path = tmp_path / "win.h"
  path.write_bytes(b"class W\r\n{\r\n    int w();\r\n};\r\n")

  HeaderCommenter(RuntimeConfig()).comment(path)

  assert path.read_bytes() == b"class W\r\n{\r\n    /// @return int\r\n    int w();\r\n};\r\n"


def test_missing_file_raises(tmp_path):
  with pytest.raises(OSError):
    HeaderCommenter(RuntimeConfig()).comment(tmp_path / "missing.h")


def test_backup_path():
  commenter = HeaderCommenter(RuntimeConfig(backup_suffix=".orig"))

  assert commenter.backup_path(Path("/a/b/Foo.h")) == Path("/a/b/Foo.h.orig")
