"""
Navigation bar — brand link, page links and sign-in / sign-out controls.

The only state is the compact menu's open/closed flag, kept in
``st.session_state`` under ``MenuToggle.state_key``.
"""

from dataclasses import dataclass

import streamlit as st

# Paths are relative to the entry script, tubebrief/ui/app.py.
PAGE_PATHS = {
    "home": "pages/home.py",
    "dashboard": "pages/dashboard.py",
    "pricing": "pages/pricing.py",
}


@dataclass(frozen=True)
class NavLink:
    label: str
    target: str  # key into the page registry built by app.py


def nav_links(is_signed_in: bool, compact: bool = False) -> list[NavLink]:
    """Links shown next to the brand; the dashboard link needs a session."""
    links = []
    if is_signed_in:
        links.append(NavLink("Product" if compact else "Dashboard", "dashboard"))
    links.append(NavLink("Pricing", "pricing"))
    return links


@dataclass
class MenuToggle:
    """Open/closed flag for the compact menu."""

    is_open: bool = False
    state_key: str = "nav_menu_open"

    @classmethod
    def from_session(cls) -> "MenuToggle":
        return cls(is_open=bool(st.session_state.get(cls.state_key, False)))

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        st.session_state[self.state_key] = self.is_open
        return self.is_open

    @property
    def icon(self) -> str:
        return "✕" if self.is_open else "☰"


def _render_auth_button(is_signed_in: bool, key: str) -> None:
    if is_signed_in:
        st.button("Sign out", key=f"{key}_sign_out", on_click=st.logout)
    else:
        st.button("Sign in", key=f"{key}_sign_in", type="primary", on_click=st.login)


def render_navbar(pages: dict, app_name: str, is_signed_in: bool) -> None:
    """Render the top navigation bar.

    Args:
        pages: ``{"home": st.Page, "dashboard": st.Page, "pricing": st.Page}``;
            the dashboard entry may be absent for anonymous visitors.
        app_name: Brand label linking to the home page.
        is_signed_in: Whether the auth provider reports an active session.
    """
    menu = MenuToggle.from_session()
    links = [link for link in nav_links(is_signed_in) if link.target in pages]

    cols = st.columns([3] + [1] * len(links) + [1, 1])
    with cols[0]:
        st.page_link(pages["home"], label=f"**{app_name}**")
    for col, link in zip(cols[1:], links):
        with col:
            st.page_link(pages[link.target], label=link.label)
    with cols[-2]:
        _render_auth_button(is_signed_in, key="nav")
    with cols[-1]:
        st.button(menu.icon, key="nav_toggle", help="Toggle Menu", on_click=menu.toggle)

    if menu.is_open:
        with st.container(border=True):
            for link in nav_links(is_signed_in, compact=True):
                if link.target in pages:
                    st.page_link(pages[link.target], label=link.label)
            _render_auth_button(is_signed_in, key="menu")
    st.divider()
