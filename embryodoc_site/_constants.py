"""Common literal values shared by the layout, renderer, and tests.

Keeping anchors and spacing values here stops the navigation bar and the page
bodies that link into it from drifting apart.

Examples
--------
>>> from embryodoc_site import _constants
>>> _constants.HOME_ANCHOR
'home'
>>> [anchor for _label, anchor in _constants.NAV_SECTIONS][-1]
'contact'
"""

HOME_ANCHOR = "home"
BRAND_LABEL = "EmbryoDoc"

NAV_SECTIONS: tuple[tuple[str, str], ...] = (
    ("Эмбриологам", "embryologists"),
    ("Репродуктологам", "doctors"),
    ("Администраторам", "administrators"),
    ("Клиентам", "clients"),
    ("Контакты", "contact"),
)

NAV_LINK_MARGIN = 15
NAV_PADDING_VERTICAL = 20
NAV_PADDING_HORIZONTAL = 40

FOOTER_TEXT = "Created with Python using"
FOOTER_LINK_LABEL = "Jinja"
FOOTER_LINK_TARGET = "https://jinja.palletsprojects.com"

BOOTSTRAP_ICONS_CSS = (
    "https://cdn.jsdelivr.net/npm/bootstrap-icons@1.11.3/font/bootstrap-icons.min.css"
)
