"""Integration tests for the scan, backup and restore runs."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from classifiles.__main__ import main
from classifiles.classification import Classifier, ExtensionDatabase, FiletypeOracle
from classifiles.config import ClassifierConfig
from classifiles.exceptions import PreconditionError
from classifiles.filesystem import OutputPlacer
from classifiles.pipeline import RunParams, run_backup, run_restore, run_scan

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
PDF_BYTES = b"%PDF-1.7\n" + b"\x00" * 64


@pytest.fixture
def photo_tree(tmp_path):
    """Create an input tree with a few typed files."""
    root = tmp_path / "input"
    (root / "docs").mkdir(parents=True)
    (root / "pics" / "2023").mkdir(parents=True)
    (root / "docs" / "report").write_bytes(PDF_BYTES)
    (root / "docs" / "paper.pdf").write_bytes(PDF_BYTES)
    (root / "pics" / "2023" / "photo.png").write_bytes(PNG_BYTES)
    (root / "notes").write_text("nothing to sniff here\n")
    (root / "shortcut").symlink_to(root / "notes")
    return root


def _classifier(mime_db):
    return Classifier(ExtensionDatabase(mime_db), oracle=FiletypeOracle())


class TestRunScan:
    """End-to-end classification runs."""

    def test_scan_directory(self, photo_tree, mime_db, tmp_path, seeded_rng):
        """Files are linked under their MIME type, mirroring subdirectories."""
        output = tmp_path / "output"
        output.mkdir()

        stats = run_scan(
            ClassifierConfig(),
            RunParams(photo_tree, output),
            classifier=_classifier(mime_db),
            placer=OutputPlacer(seeded_rng),
            show_progress=False,
        )

        report = output / "application" / "pdf" / "docs" / "report.pdf"
        paper = output / "application" / "pdf" / "docs" / "paper.pdf"
        photo = output / "image" / "png" / "pics" / "2023" / "photo.png"
        notes = output / "unknown" / "notes"

        for link in (report, paper, photo, notes):
            assert link.is_symlink()
        assert os.readlink(report) == str(photo_tree / "docs" / "report")
        assert os.readlink(notes) == str(photo_tree / "notes")
        assert stats.total == 4
        assert stats.unknown == 1
        assert stats.by_category["application/pdf"] == 2

    def test_symlinks_in_input_are_not_classified(self, photo_tree, mime_db, tmp_path, seeded_rng):
        """Only regular files are processed."""
        output = tmp_path / "output"
        output.mkdir()

        run_scan(
            ClassifierConfig(),
            RunParams(photo_tree, output),
            classifier=_classifier(mime_db),
            placer=OutputPlacer(seeded_rng),
            show_progress=False,
        )

        assert not (output / "unknown" / "shortcut").exists()

    def test_scan_single_file(self, photo_tree, mime_db, tmp_path, seeded_rng):
        """A single input file is linked directly under its type."""
        output = tmp_path / "output"
        output.mkdir()
        source = photo_tree / "docs" / "report"

        stats = run_scan(
            ClassifierConfig(),
            RunParams(source, output),
            classifier=_classifier(mime_db),
            placer=OutputPlacer(seeded_rng),
            show_progress=False,
        )

        assert (output / "application" / "pdf" / "report.pdf").is_symlink()
        assert stats.total == 1

    def test_rescan_does_not_overwrite(self, photo_tree, mime_db, tmp_path, seeded_rng):
        """Scanning twice into the same output creates fresh names."""
        output = tmp_path / "output"
        output.mkdir()
        for _ in range(2):
            run_scan(
                ClassifierConfig(),
                RunParams(photo_tree, output),
                classifier=_classifier(mime_db),
                placer=OutputPlacer(seeded_rng),
                show_progress=False,
            )

        links = list((output / "image" / "png" / "pics" / "2023").iterdir())
        assert len(links) == 2

    def test_output_must_be_directory(self, photo_tree, tmp_path):
        """The precondition fails before any work is done."""
        classifier = _classifier(None)
        with patch.object(classifier, "resolve") as mock_resolve:
            with pytest.raises(PreconditionError):
                run_scan(
                    ClassifierConfig(),
                    RunParams(photo_tree, tmp_path / "missing"),
                    classifier=classifier,
                    show_progress=False,
                )
        mock_resolve.assert_not_called()

    def test_missing_input_fails(self, tmp_path):
        output = tmp_path / "output"
        output.mkdir()
        with pytest.raises(FileNotFoundError):
            run_scan(
                ClassifierConfig(),
                RunParams(tmp_path / "missing", output),
                classifier=_classifier(None),
                show_progress=False,
            )


class TestBackupRestore:
    """Round trips through the .lns codec."""

    def test_round_trip(self, link_tree, tmp_path):
        """Directories and link targets survive backup and restore."""
        backup = tmp_path / "backup"
        restored = tmp_path / "restored"
        backup.mkdir()
        restored.mkdir()

        run_backup(RunParams(link_tree, backup), show_progress=False)
        run_restore(RunParams(backup, restored), show_progress=False)

        assert (restored / "sub").is_dir()
        assert (restored / "sub" / "empty").is_dir()
        assert os.readlink(os.fsencode(restored / "link")) == b"/etc/passwd"
        assert os.readlink(restored / "sub" / "nested") == "../notes.txt"
        assert not (restored / "notes.txt").exists()

    def test_round_trip_non_utf8_target(self, tmp_path):
        """Targets that are not valid text are restored byte for byte."""
        source = tmp_path / "source"
        source.mkdir()
        raw_target = b"/srv/\xc3\x28broken\xff"
        os.symlink(raw_target, os.fsencode(source / "odd"))
        backup = tmp_path / "backup"
        restored = tmp_path / "restored"
        backup.mkdir()
        restored.mkdir()

        run_backup(RunParams(source, backup), show_progress=False)
        run_restore(RunParams(backup, restored), show_progress=False)

        assert os.readlink(os.fsencode(restored / "odd")) == raw_target

    def test_backup_output_must_be_directory(self, link_tree, tmp_path):
        with pytest.raises(PreconditionError):
            run_backup(RunParams(link_tree, tmp_path / "missing"), show_progress=False)

    def test_restore_stops_on_existing_link(self, tmp_path):
        """A filesystem error aborts the run; earlier entries stay."""
        backup = tmp_path / "backup"
        backup.mkdir()
        (backup / "a.lns").write_bytes(b"/a\n")
        (backup / "b.lns").write_bytes(b"/b\n")
        restored = tmp_path / "restored"
        restored.mkdir()
        (restored / "b").write_text("in the way")

        with pytest.raises(FileExistsError):
            run_restore(RunParams(backup, restored), show_progress=False)

        assert os.readlink(restored / "a") == "/a"


class TestMainRoundTrip:
    """Backup and restore through the command line entry point."""

    def test_backup_and_restore(self, link_tree, tmp_path):
        backup = tmp_path / "backup"
        restored = tmp_path / "restored"
        backup.mkdir()
        restored.mkdir()

        with patch("classifiles.__main__.setup_logging"):
            assert main(["--no-progress", "backup", str(link_tree), str(backup)]) == 0
            assert main(["--no-progress", "restore", str(backup), str(restored)]) == 0

        assert os.readlink(restored / "link") == "/etc/passwd"
        assert (restored / "sub").is_dir()
