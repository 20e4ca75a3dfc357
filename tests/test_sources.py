"""Unit tests for source-file discovery and loading.

RULES:
- All file I/O tests use tmp_path fixtures for isolation.
"""

import json

import pytest

from transcript_aligner.core.sources import (
    SourceFiles,
    file_stem,
    load_json,
    load_text,
    resolve_companion_files,
)


class TestCompanionFileDiscovery:

    def test_finds_alignment_and_asr(self, tmp_path):
        transcript = tmp_path / "interview.txt"
        transcript.touch()
        alignment = tmp_path / "interview-alignment.json"
        alignment.write_text("[]", encoding="utf-8")
        asr = tmp_path / "interview-asr.json"
        asr.write_text("{}", encoding="utf-8")

        result = resolve_companion_files(transcript)
        assert result.alignment_path == alignment
        assert result.asr_path == asr

    def test_finds_nothing_when_no_companions(self, tmp_path):
        transcript = tmp_path / "interview.txt"
        transcript.touch()
        assert resolve_companion_files(transcript) == SourceFiles()

    def test_strips_all_extensions(self, tmp_path):
        transcript = tmp_path / "interview.v2.txt"
        transcript.touch()
        alignment = tmp_path / "interview-alignment.json"
        alignment.write_text("[]", encoding="utf-8")
        assert resolve_companion_files(transcript).alignment_path == alignment

    def test_directories_are_ignored(self, tmp_path):
        transcript = tmp_path / "talk.txt"
        transcript.touch()
        (tmp_path / "talk-asr.json").mkdir()
        assert resolve_companion_files(transcript).asr_path is None


class TestFileStem:

    @pytest.mark.parametrize("name,stem", [
        ("talk.txt", "talk"),
        ("talk.v2.txt", "talk"),
        ("talk", "talk"),
        ("/a/b/talk.json", "talk"),
    ])
    def test_stem(self, name, stem):
        assert file_stem(name) == stem


class TestLoading:

    def test_load_text(self, tmp_path):
        path = tmp_path / "t.txt"
        path.write_text("smörgås bord", encoding="utf-8")
        assert load_text(path) == "smörgås bord"

    def test_load_json(self, tmp_path):
        path = tmp_path / "a.json"
        path.write_text(json.dumps({"words": []}), encoding="utf-8")
        assert load_json(path) == {"words": []}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_text(tmp_path / "missing.txt")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_json(path)
