"""Unit tests for the navigation bar link rules and menu toggle."""

from unittest.mock import MagicMock, patch

import pytest

from tubebrief.ui.navigation import MenuToggle, NavLink, nav_links


def test_signed_out_sees_pricing_only():
    assert nav_links(is_signed_in=False) == [NavLink("Pricing", "pricing")]


def test_signed_in_sees_dashboard_first():
    assert nav_links(is_signed_in=True) == [
        NavLink("Dashboard", "dashboard"),
        NavLink("Pricing", "pricing"),
    ]


def test_compact_menu_labels_dashboard_as_product():
    labels = [link.label for link in nav_links(is_signed_in=True, compact=True)]

    assert labels == ["Product", "Pricing"]


@pytest.fixture
def fake_st():
    """Patch streamlit in the navigation module with a dict-backed session."""
    mock_st = MagicMock()
    mock_st.session_state = {}
    with patch("tubebrief.ui.navigation.st", mock_st):
        yield mock_st


class TestMenuToggle:
    def test_closed_by_default(self, fake_st):
        menu = MenuToggle.from_session()

        assert menu.is_open is False
        assert menu.icon == "☰"

    def test_toggle_flips_and_persists(self, fake_st):
        menu = MenuToggle.from_session()

        assert menu.toggle() is True
        assert fake_st.session_state["nav_menu_open"] is True
        assert MenuToggle.from_session().is_open is True
        assert menu.icon == "✕"

    def test_toggle_twice_closes(self, fake_st):
        menu = MenuToggle.from_session()
        menu.toggle()

        assert menu.toggle() is False
        assert fake_st.session_state["nav_menu_open"] is False
