"""Pytest configuration and fixtures."""

import random
from pathlib import Path

import pytest

PDF_RECORD = """<?xml version="1.0" encoding="utf-8"?>
<mime-type xmlns="http://www.freedesktop.org/standards/shared-mime-info" type="application/pdf">
  <comment>PDF document</comment>
  <generic-icon name="x-office-document"/>
  <glob pattern="*.pdf"/>
  <glob pattern="*.PDF"/>
</mime-type>
"""

OCTET_STREAM_RECORD = """<?xml version="1.0" encoding="utf-8"?>
<mime-type xmlns="http://www.freedesktop.org/standards/shared-mime-info" type="application/octet-stream">
  <comment>unknown</comment>
</mime-type>
"""

ZIP_RECORD = """<?xml version="1.0" encoding="utf-8"?>
<mime-type xmlns="http://www.freedesktop.org/standards/shared-mime-info" type="application/zip">
  <comment>Zip archive</comment>
  <glob pattern="*.zip"/>
</mime-type>
"""


class StubOracle:
    """SignatureOracle answering from a file name to MIME type mapping."""

    def __init__(self, mimes=None):
        self.mimes = mimes or {}
        self.calls = []

    def sniff(self, path):
        self.calls.append(path)
        return self.mimes.get(Path(path).name)


class StubInspector:
    """DeepInspector returning a fixed answer or raising a fixed error."""

    def __init__(self, answer="", error=None):
        self.answer = answer
        self.error = error
        self.calls = []

    def inspect(self, path):
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return self.answer


class FirstChoiceRandom(random.Random):
    """Random source whose ``choice`` always picks the first element."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def mime_db(tmp_path):
    """Create a small shared-mime-info glob database."""
    root = tmp_path / "mime"
    (root / "application").mkdir(parents=True)
    (root / "application" / "pdf.xml").write_text(PDF_RECORD, encoding="utf-8")
    (root / "application" / "octet-stream.xml").write_text(OCTET_STREAM_RECORD, encoding="utf-8")
    (root / "application" / "zip.xml").write_text(ZIP_RECORD, encoding="utf-8")
    return root


@pytest.fixture
def make_oracle():
    """Factory for StubOracle instances."""
    return StubOracle


@pytest.fixture
def make_inspector():
    """Factory for StubInspector instances."""
    return StubInspector


@pytest.fixture
def seeded_rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def first_choice_rng():
    """Random source producing the same name every time."""
    return FirstChoiceRandom()


@pytest.fixture
def link_tree(tmp_path):
    """
    Create a tree with directories, a regular file and symlinks.

    Layout::

        tree/
            link -> /etc/passwd
            notes.txt
            sub/
                nested -> ../notes.txt
                empty/
    """
    root = tmp_path / "tree"
    (root / "sub" / "empty").mkdir(parents=True)
    (root / "notes.txt").write_text("plain file\n")
    (root / "link").symlink_to("/etc/passwd")
    (root / "sub" / "nested").symlink_to("../notes.txt")
    return root
