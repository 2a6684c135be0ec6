"""Tests for package metadata constants."""

from pathlib import Path

from pywikirest import meta
from pywikirest.meta import NAME, OPEN_TEXT_OPTIONS, USER_AGENT, VERSION

__all__ = ()


def test_user_agent_identifies_package() -> None:
    """The User-Agent names the package, its version and a contact."""
    assert USER_AGENT.startswith(f"{NAME}/{VERSION} (")
    assert "@" in USER_AGENT


def test_meta_exports_plain_constants() -> None:
    """The metadata module exports constants only, no validated models."""
    assert set(meta.__all__) == {
        "AUTHORS",
        "NAME",
        "VERSION",
        "LOGGER",
        "DEFAULT_BASE_URL",
        "OPEN_TEXT_OPTIONS",
        "USER_AGENT",
    }


def test_open_text_options_are_open_keywords(tmp_path: Path) -> None:
    """`OPEN_TEXT_OPTIONS` can be passed straight to `open`."""
    target = tmp_path / "out.txt"
    with open(target, "w", **OPEN_TEXT_OPTIONS) as file:
        file.write("ünïcode\n")
    assert target.read_text(encoding="utf-8") == "ünïcode\n"
