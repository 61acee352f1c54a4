"""Verify package imports work correctly."""


def test_import_streamreplace() -> None:
    """Test that streamreplace can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import streamreplace

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert streamreplace.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from streamreplace import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exported() -> None:
    import streamreplace

    for name in streamreplace.__all__:
        assert hasattr(streamreplace, name), name
