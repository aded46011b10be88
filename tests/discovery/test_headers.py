"""
Tests for Header Discovery.

Verifies:
1. qmake HEADERS parsing (continuations, comments, =, += and -=).
2. Glob expansion relative to the project root.
3. Merging and de-duplication of all sources.
"""

import pytest

from doxegenate.config import RuntimeConfig
from doxegenate.discovery import collect_headers, expand_globs, parse_pro_headers


@pytest.fixture
def project(tmp_path):
  """Creates a small qmake project tree."""
  (tmp_path / "widgets").mkdir()
  (tmp_path / "PrimerDesign").mkdir()
  for rel in ("MainWindow.h", "widgets/SequenceTextView.h", "PrimerDesign/Wizard.h", "PrimerDesign/Input.h"):
    (tmp_path / rel).write_text("class X;\n", encoding="utf-8")
  (tmp_path / "PrimerDesign" / "Wizard.cpp").write_text("", encoding="utf-8")

  pro = tmp_path / "AlignShop.pro"
  pro.write_text(
    "QT += core gui\n"
    "# HEADERS += Ignored.h\n"
    "HEADERS += MainWindow.h \\\n"
    "    widgets/SequenceTextView.h \\\n"
    "    forms/ui_main.ui\n"
    "SOURCES += main.cpp\n"
    "HEADERS = PrimerDesign/Wizard.h  # trailing comment\n",
    encoding="utf-8",
  )
  return tmp_path


def test_parse_pro_headers(project):
  headers = parse_pro_headers(project / "AlignShop.pro")

  assert headers == [
    (project / "MainWindow.h").resolve(),
    (project / "widgets" / "SequenceTextView.h").resolve(),
    (project / "PrimerDesign" / "Wizard.h").resolve(),
  ]


def test_parse_pro_headers_removal(tmp_path):
  pro = tmp_path / "App.pro"
  pro.write_text("HEADERS += A.h B.h C.h\nHEADERS -= B.h Missing.h\nHEADERS += D.h\n", encoding="utf-8")

  headers = parse_pro_headers(pro)

  assert headers == [(tmp_path / name).resolve() for name in ("A.h", "C.h", "D.h")]


def test_parse_pro_headers_missing_file(tmp_path):
  with pytest.raises(OSError):
    parse_pro_headers(tmp_path / "missing.pro")


def test_expand_globs(project):
  found = expand_globs(project, ["PrimerDesign/*.h", "nothing/*.h"])

  assert found == [
    (project / "PrimerDesign" / "Input.h").resolve(),
    (project / "PrimerDesign" / "Wizard.h").resolve(),
  ]


def test_expand_globs_recursive(project):
  found = expand_globs(project, ["**/*.h"])

  assert len(found) == 4


def test_collect_headers_merges_and_deduplicates(project):
  config = RuntimeConfig(
    project_root=project,
    header_globs=["PrimerDesign/*.h"],
    project_file=project / "AlignShop.pro",
  )

  headers = collect_headers(config, [project / "widgets" / "SequenceTextView.h"])

  assert headers[0] == (project / "widgets" / "SequenceTextView.h").resolve()
  assert len(headers) == len(set(headers)) == 4


def test_collect_headers_directory_argument(project):
  config = RuntimeConfig(project_root=project)

  headers = collect_headers(config, [project / "PrimerDesign"])

  assert [h.name for h in headers] == ["Input.h", "Wizard.h"]


def test_collect_headers_nothing_configured(tmp_path):
  assert collect_headers(RuntimeConfig(project_root=tmp_path)) == []
