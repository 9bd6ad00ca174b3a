"""Tests for the .lns symlink codec."""

import os
from pathlib import Path

import pytest

from classifiles.exceptions import ClassifilesError
from classifiles.filesystem.discovery import Entry, EntryKind
from classifiles.filesystem.symlinks import (
    BackupCodec,
    RestoreCodec,
    decode_link,
    encode_link,
    is_link_file,
)


class TestEncodeLink:
    """Tests for encode_link function."""

    def test_writes_target_and_newline(self, tmp_path):
        """The .lns file holds the raw target plus one newline."""
        link = tmp_path / "link"
        link.symlink_to("/etc/passwd")
        destination = tmp_path / "link.lns"

        target = encode_link(link, destination)

        assert target == b"/etc/passwd"
        assert destination.read_bytes() == b"/etc/passwd\n"

    def test_non_utf8_target(self, tmp_path):
        """Targets that are not valid text are stored byte for byte."""
        raw = b"/data/caf\xe9-\xff\xfe"
        link = tmp_path / "weird"
        os.symlink(raw, os.fsencode(link))
        destination = tmp_path / "weird.lns"

        encode_link(link, destination)

        assert destination.read_bytes() == raw + b"\n"


class TestDecodeLink:
    """Tests for decode_link function."""

    def test_creates_symlink(self, tmp_path):
        """Recreates the link without the trailing newline."""
        link_file = tmp_path / "link.lns"
        link_file.write_bytes(b"../target\n")

        decode_link(link_file, tmp_path / "link")

        assert os.readlink(tmp_path / "link") == "../target"

    def test_strips_only_one_newline(self, tmp_path):
        """Only a single trailing newline is removed."""
        link_file = tmp_path / "link.lns"
        link_file.write_bytes(b"name\n\n")

        target = decode_link(link_file, tmp_path / "link")

        assert target == b"name\n"
        assert os.readlink(os.fsencode(tmp_path / "link")) == b"name\n"

    def test_without_trailing_newline(self, tmp_path):
        """Content without a newline is used as is."""
        link_file = tmp_path / "link.lns"
        link_file.write_bytes(b"/opt/thing")

        decode_link(link_file, tmp_path / "link")

        assert os.readlink(tmp_path / "link") == "/opt/thing"


class TestIsLinkFile:
    """Tests for is_link_file function."""

    @pytest.mark.parametrize("name, expected", [
        ("link.lns", True),
        ("archive.tar.lns", True),
        ("link.LNS", False),
        ("link.lns.bak", False),
        (".lns", False),
        ("plain", False),
    ])
    def test_suffix(self, name, expected):
        assert is_link_file(Path(name)) is expected


class TestBackupCodec:
    """Tests for BackupCodec."""

    def test_backup_tree(self, link_tree, tmp_path):
        """Directories are mirrored and links encoded."""
        output = tmp_path / "backup"
        output.mkdir()

        stats = BackupCodec().run(link_tree, output)

        assert (output / "sub").is_dir()
        assert (output / "sub" / "empty").is_dir()
        assert (output / "link.lns").read_bytes() == b"/etc/passwd\n"
        assert (output / "sub" / "nested.lns").read_bytes() == b"../notes.txt\n"
        assert stats.links == 2
        assert stats.directories == 3

    def test_regular_files_skipped(self, link_tree, tmp_path):
        """Plain files leave no trace in the backup."""
        output = tmp_path / "backup"
        output.mkdir()

        stats = BackupCodec().run(link_tree, output)

        assert not (output / "notes.txt").exists()
        assert not (output / "notes.txt.lns").exists()
        assert stats.skipped == 1
        names = sorted(p.name for p in output.rglob("*"))
        assert names == ["empty", "link.lns", "nested.lns", "sub"]

    def test_output_contains_no_symlinks(self, link_tree, tmp_path):
        """A backup tree is made of directories and plain files only."""
        output = tmp_path / "backup"
        output.mkdir()

        BackupCodec().run(link_tree, output)

        assert not any(p.is_symlink() for p in output.rglob("*"))

    def test_entry_outside_root_fails(self, tmp_path):
        """Entries not under the input root abort the run."""
        codec = BackupCodec()
        entry = Entry(tmp_path / "elsewhere", EntryKind.DIRECTORY)

        with pytest.raises(ClassifilesError):
            codec.process(entry, tmp_path / "root", tmp_path / "out")


class TestRestoreCodec:
    """Tests for RestoreCodec."""

    def test_restores_links_and_directories(self, tmp_path):
        """Directories and .lns files become directories and symlinks."""
        backup = tmp_path / "backup"
        (backup / "sub").mkdir(parents=True)
        (backup / "link.lns").write_bytes(b"/etc/passwd\n")
        (backup / "sub" / "nested.lns").write_bytes(b"../x\n")
        output = tmp_path / "restored"
        output.mkdir()

        stats = RestoreCodec().run(backup, output)

        assert (output / "sub").is_dir()
        assert os.readlink(output / "link") == "/etc/passwd"
        assert os.readlink(output / "sub" / "nested") == "../x"
        assert stats.links == 2

    def test_other_files_ignored(self, tmp_path):
        """Files without the .lns suffix are not turned into links."""
        backup = tmp_path / "backup"
        backup.mkdir()
        (backup / "readme.txt").write_text("/etc/passwd\n")
        output = tmp_path / "restored"
        output.mkdir()

        stats = RestoreCodec().run(backup, output)

        assert list(output.iterdir()) == []
        assert stats.skipped == 1
        assert stats.links == 0
