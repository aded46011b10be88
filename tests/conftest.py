"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console reset so captured output never leaks between tests.
- Sample header text shared by engine and CLI tests.
"""

import sys
import pytest
from pathlib import Path

# Add src to path so we can import 'doxegenate' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from doxegenate.utils.console import reset_console  # noqa: E402

SAMPLE_HEADER = """\
#ifndef PRIMERDESIGNWIZARD_H
#define PRIMERDESIGNWIZARD_H

class DnaSequence;

class PrimerDesignWizard : public QWizard
{
    Q_OBJECT

public:
    explicit PrimerDesignWizard(QWidget *parent = 0);
    PrimerDesignWizard(QWidget *parent, DnaSequence *sequence, int index, const PrimerDesignInput *params);
    ~PrimerDesignWizard();

    static inline int maximumPrimers();
    void setText(const QString &value);
    QString *buffer();

private:
    struct Range
    {
        int begin(int offset);
    };

    void refresh()
    {
        update(0);
    }
};

int freeFunction(int x);

#endif
"""


@pytest.fixture(autouse=True)
def fresh_console():
  """Gives every test a fresh stdout console (captured by capsys)."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def sample_header() -> str:
  """Returns a small Qt-style header."""
  return SAMPLE_HEADER


@pytest.fixture
def header_file(tmp_path, sample_header) -> Path:
  """Writes the sample header to disk."""
  path = tmp_path / "PrimerDesignWizard.h"
  path.write_text(sample_header, encoding="utf-8")
  return path
