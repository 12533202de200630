"""Tests to verify the layered package structure."""

from pathlib import Path

import pytest

# Compute project root relative to this test file
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def src_path() -> Path:
    """Return the src directory path."""
    return PROJECT_ROOT / "src"


def test_main_layers_exist(src_path: Path) -> None:
    """Verify all layer packages exist."""
    for layer in ["domain", "application", "infrastructure", "config", "bootstrap"]:
        assert (src_path / layer / "__init__.py").is_file(), f"Missing layer: {layer}"


def test_domain_subpackages_exist(src_path: Path) -> None:
    """Verify domain layer has its models, errors and services packages."""
    for subdir in ["models", "errors", "services"]:
        assert (src_path / "domain" / subdir / "__init__.py").is_file(), (
            f"Missing domain subpackage: {subdir}"
        )


def test_application_subpackages_exist(src_path: Path) -> None:
    for subdir in ["ports", "dtos", "services"]:
        assert (src_path / "application" / subdir / "__init__.py").is_file(), (
            f"Missing application subpackage: {subdir}"
        )


def test_domain_has_only_stdlib_imports(src_path: Path) -> None:
    """Domain code depends on nothing but the standard library and itself."""
    third_party = ["import pydantic", "from pydantic", "import structlog", "from structlog"]
    for py_file in (src_path / "domain").rglob("*.py"):
        content = py_file.read_text(encoding="utf-8")
        for statement in third_party:
            assert statement not in content, f"{py_file} contains: {statement}"


def test_affiliation_error_exists() -> None:
    """Verify base exception class is defined."""
    from src.domain.exceptions import AffiliationError

    assert issubclass(AffiliationError, Exception)


def test_affiliation_error_importable_from_domain() -> None:
    from src.domain import AffiliationError

    assert issubclass(AffiliationError, Exception)


def test_affiliation_error_accepts_message() -> None:
    from src.domain.exceptions import AffiliationError

    assert str(AffiliationError("test message")) == "test message"
    assert str(AffiliationError()) == ""


def test_all_domain_errors_share_the_base() -> None:
    """Every exported domain error derives from AffiliationError."""
    import src.domain.errors as errors
    from src.domain.exceptions import AffiliationError

    for name in errors.__all__:
        assert issubclass(getattr(errors, name), AffiliationError), name
