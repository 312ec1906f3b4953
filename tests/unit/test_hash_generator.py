"""Tests for building the precomputed hashes file."""

import hashlib
import pytest
from unittest.mock import patch
from decipher.infrastructure.passwords_table import load_passwords_table
from decipher.services.hash_generator import (
    md5_hex,
    find_wordlists,
    generate_precomputed_hashes,
)


def read_output(path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


class TestMd5Hex:
    """Tests for md5_hex()."""
    
    def test_known_digest(self):
        """Test against a well-known MD5 value."""
        assert md5_hex("hello") == "5d41402abc4b2a76b9719d911017c592"
    
    def test_utf8_encoding(self):
        """Test that non-ASCII passwords are hashed as UTF-8."""
        assert md5_hex("pässwörd") == hashlib.md5("pässwörd".encode("utf-8")).hexdigest()


class TestFindWordlists:
    """Tests for find_wordlists()."""
    
    def test_only_txt_files_excluding_output(self, tmp_path):
        """Test that output file and non-txt files are skipped."""
        (tmp_path / "b.txt").write_text("x")
        (tmp_path / "a.txt").write_text("x")
        (tmp_path / "notes.md").write_text("x")
        (tmp_path / "out.txt").write_text("x")
        (tmp_path / "precomputed_hashes.txt").write_text("x")
        (tmp_path / "sub.txt").mkdir()
        
        found = find_wordlists(tmp_path, tmp_path / "out.txt")
        
        assert [p.name for p in found] == ["a.txt", "b.txt"]


class TestGeneratePrecomputedHashes:
    """Tests for generate_precomputed_hashes()."""
    
    def test_generates_hash_lines(self, tmp_path):
        """Test that each password becomes a hash:password line."""
        (tmp_path / "common.txt").write_text("hello\nworld\n", encoding="utf-8")
        output = tmp_path / "precomputed_hashes.txt"
        
        written = generate_precomputed_hashes(tmp_path, output)
        
        assert written == 2
        assert read_output(output) == [
            f"{md5_hex('hello')}:hello",
            f"{md5_hex('world')}:world",
        ]
    
    def test_skips_empty_lines(self, tmp_path):
        """Test that blank lines are not hashed."""
        (tmp_path / "list.txt").write_text("hello\n\n\nworld", encoding="utf-8")
        output = tmp_path / "out" / "hashes.txt"
        
        assert generate_precomputed_hashes(tmp_path, output) == 2
    
    def test_first_seen_wins_across_files(self, tmp_path):
        """Test that colliding hashes keep the first password, by file name order."""
        (tmp_path / "a.txt").write_text("Hello\n", encoding="utf-8")
        (tmp_path / "b.txt").write_text("hello\nextra\n", encoding="utf-8")
        output = tmp_path / "precomputed_hashes.txt"
        
        # case-folding "hash" so that Hello and hello collide
        with patch("decipher.services.hash_generator.md5_hex", side_effect=str.lower):
            written = generate_precomputed_hashes(tmp_path, output)
        
        assert written == 2
        assert read_output(output) == ["hello:Hello", "extra:extra"]
    
    def test_duplicate_passwords_written_once(self, tmp_path):
        """Test that the same password in several files is written once."""
        (tmp_path / "a.txt").write_text("hello\n", encoding="utf-8")
        (tmp_path / "b.txt").write_text("hello\n", encoding="utf-8")
        output = tmp_path / "precomputed_hashes.txt"
        
        assert generate_precomputed_hashes(tmp_path, output) == 1
        assert read_output(output) == [f"{md5_hex('hello')}:hello"]
    
    def test_crlf_wordlist(self, tmp_path):
        """Test that \\r\\n line endings are not part of passwords."""
        (tmp_path / "win.txt").write_bytes(b"hello\r\nworld\r\n")
        output = tmp_path / "precomputed_hashes.txt"
        
        generate_precomputed_hashes(tmp_path, output)
        
        assert f"{md5_hex('hello')}:hello" in read_output(output)
    
    @pytest.mark.parametrize("num_threads,batch_size", [(1, 1), (4, 2), (2, 10000)])
    def test_batching_does_not_change_output(self, tmp_path, num_threads, batch_size):
        """Test that thread and batch settings give identical files."""
        passwords = [f"pw{i}" for i in range(25)]
        (tmp_path / "list.txt").write_text("\n".join(passwords), encoding="utf-8")
        output = tmp_path / "precomputed_hashes.txt"
        
        written = generate_precomputed_hashes(
            tmp_path, output, num_threads=num_threads, batch_size=batch_size
        )
        
        assert written == 25
        assert read_output(output) == [f"{md5_hex(p)}:{p}" for p in passwords]
    
    def test_output_file_not_reread(self, tmp_path):
        """Test that an existing output in the directory is not treated as a wordlist."""
        (tmp_path / "list.txt").write_text("hello\n", encoding="utf-8")
        output = tmp_path / "precomputed_hashes.txt"
        
        generate_precomputed_hashes(tmp_path, output)
        assert generate_precomputed_hashes(tmp_path, output) == 1
    
    def test_empty_directory(self, tmp_path):
        """Test that no wordlists writes an empty file."""
        output = tmp_path / "precomputed_hashes.txt"
        
        assert generate_precomputed_hashes(tmp_path, output) == 0
        assert output.read_text() == ""
    
    def test_missing_directory(self, tmp_path):
        """Test that a missing wordlist directory raises."""
        with pytest.raises(FileNotFoundError):
            generate_precomputed_hashes(tmp_path / "missing", tmp_path / "out.txt")
    
    def test_output_loads_back(self, tmp_path):
        """Test that the generated file is readable by the loader."""
        (tmp_path / "list.txt").write_text("hello\nwith:colon\n", encoding="utf-8")
        output = tmp_path / "precomputed_hashes.txt"
        
        generate_precomputed_hashes(tmp_path, output)
        table = load_passwords_table(output)
        
        assert table.count == 2
        assert table.get(md5_hex("with:colon")) == "with:colon"
