"""
Unit tests for resolver.py - tile file naming and lookup.
"""

import pytest

from terrain_path.coordinates import LatLon, TileId
from terrain_path.error_handling import ErrorCode, TileFileNotFoundError
from terrain_path.resolver import extended_file_name, hgt_file_name, resolve_tile_file


class TestFileNames:
    """Test both tile naming conventions."""

    def test_short_name(self):
        """Floored (48, -124) resolves to N48W124.HGT."""
        tile = TileId.from_latlon(LatLon(48.424236, -123.383191))
        assert hgt_file_name(tile) == "N48W124.HGT"

    def test_custom_extension(self):
        """The extension is configurable per call."""
        assert hgt_file_name(TileId(48, -124), ".hgt") == "N48W124.hgt"

    def test_extended_name(self):
        """The fallback inserts a zero after the latitude hemisphere letter."""
        assert extended_file_name("N48W124.HGT") == "N048W124.HGT"
        assert extended_file_name("S05E007.HGT") == "S005E007.HGT"


class TestResolveTileFile:
    """Test resolution against a directory of tiles."""

    def test_short_name_found(self, tile_dir):
        """An existing 7-character file is returned."""
        (tile_dir / "N48W124.HGT").write_bytes(b"")
        assert resolve_tile_file(TileId(48, -124), tile_dir) == tile_dir / "N48W124.HGT"

    def test_short_name_preferred(self, tile_dir):
        """When both conventions exist the short name wins."""
        (tile_dir / "N48W124.HGT").write_bytes(b"")
        (tile_dir / "N048W124.HGT").write_bytes(b"")
        assert resolve_tile_file(TileId(48, -124), tile_dir).name == "N48W124.HGT"

    def test_fallback_to_extended_name(self, tile_dir):
        """A 3-digit latitude tile set is found through the fallback."""
        (tile_dir / "N048W124.HGT").write_bytes(b"")
        assert resolve_tile_file(TileId(48, -124), tile_dir) == tile_dir / "N048W124.HGT"

    def test_lowercase_extension_on_disk(self, tile_dir):
        """Extension matching ignores case."""
        (tile_dir / "N48W124.hgt").write_bytes(b"")
        assert resolve_tile_file(TileId(48, -124), tile_dir).name == "N48W124.hgt"

    def test_lowercase_configured_extension(self, tile_dir):
        """A lowercase configured extension still finds uppercase files."""
        (tile_dir / "N048W124.HGT").write_bytes(b"")
        path = resolve_tile_file(TileId(48, -124), tile_dir, extension=".hgt")
        assert path.name == "N048W124.HGT"

    def test_directory_is_not_a_tile(self, tile_dir):
        """A directory with a tile name is ignored."""
        (tile_dir / "N48W124.HGT").mkdir()
        with pytest.raises(TileFileNotFoundError):
            resolve_tile_file(TileId(48, -124), tile_dir)

    def test_not_found_names_both_candidates(self, tile_dir):
        """The error names both attempted files and the directory searched."""
        with pytest.raises(TileFileNotFoundError) as exc_info:
            resolve_tile_file(TileId(48, -124), tile_dir)

        err = exc_info.value
        assert err.error_code == ErrorCode.TILE_FILE_NOT_FOUND
        assert err.attempted == ("N48W124.HGT", "N048W124.HGT")
        assert "N48W124.HGT" in str(err)
        assert "N048W124.HGT" in str(err)
        assert str(tile_dir.resolve()) in str(err)

    def test_default_directory_is_cwd(self, tile_dir, monkeypatch):
        """Without a directory argument the working directory is searched."""
        (tile_dir / "S34E151.HGT").write_bytes(b"")
        monkeypatch.chdir(tile_dir)
        assert resolve_tile_file(TileId(-34, 151)).name == "S34E151.HGT"

    def test_default_directory_from_environment(self, tile_dir, tmp_path, monkeypatch):
        """HGT_DATA_DIR overrides the working directory."""
        (tile_dir / "S34E151.HGT").write_bytes(b"")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HGT_DATA_DIR", str(tile_dir))
        assert resolve_tile_file(TileId(-34, 151)) == tile_dir / "S34E151.HGT"
