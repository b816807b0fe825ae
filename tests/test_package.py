"""Basic tests for env_cmd package."""

from pathlib import Path


def test_import_env_cmd():
    """Test that env_cmd can be imported."""
    import env_cmd

    assert hasattr(env_cmd, "__version__")
    assert env_cmd.__version__ == "1.0.0"


def test_version_format():
    """Test that version follows semver format."""
    import env_cmd

    parts = env_cmd.__version__.split(".")
    assert len(parts) == 3
    assert all(p.isdigit() for p in parts)


def test_public_api_exports():
    """Test that the names in __all__ resolve."""
    import env_cmd

    for name in env_cmd.__all__:
        assert hasattr(env_cmd, name), name


def test_readme_is_package_description():
    """pyproject points the long description at README.md."""
    root = Path(__file__).parent.parent

    assert (root / "README.md").is_file()
    assert 'readme = "README.md"' in (root / "pyproject.toml").read_text()
