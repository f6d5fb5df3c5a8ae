"""Tests for ArchiveConfig defaults and environment overrides."""

import tarfile

import pytest

from engine.contracts.archive_config import GZIP_LEVEL_ENV, ArchiveConfig


def test_defaults():
    cfg = ArchiveConfig()
    assert cfg.compresslevel == 6
    assert cfg.tar_format == tarfile.PAX_FORMAT
    assert cfg.gzip_mtime == 0


def test_from_env_without_variable(monkeypatch):
    monkeypatch.delenv(GZIP_LEVEL_ENV, raising=False)
    assert ArchiveConfig.from_env() == ArchiveConfig()


def test_from_env_reads_level(monkeypatch):
    monkeypatch.setenv(GZIP_LEVEL_ENV, "9")
    assert ArchiveConfig.from_env().compresslevel == 9


@pytest.mark.parametrize("raw", ["fast", "10", "-1"])
def test_from_env_rejects_bad_levels(monkeypatch, raw):
    monkeypatch.setenv(GZIP_LEVEL_ENV, raw)
    with pytest.raises(ValueError):
        ArchiveConfig.from_env()


def test_chunk_size_must_be_positive():
    with pytest.raises(ValueError):
        ArchiveConfig(chunk_size=0)
