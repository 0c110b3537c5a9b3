from __future__ import annotations

import pytest

from kbdwrap.services.kbd_styles import (
    DEFAULT_STYLE,
    STYLES,
    KbdStyleService,
    coerce_style,
    style_ids,
)


def test_catalog_ids_and_label_keys():
    assert style_ids() == ["default", "github", "stackoverflow"]
    assert [s.label_key for s in STYLES] == [
        "style-default",
        "style-github",
        "style-stackoverflow",
    ]
    assert all(s.css.lstrip().startswith("kbd") for s in STYLES)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("github", "github"),
        (" StackOverflow ", "stackoverflow"),
        ("", DEFAULT_STYLE),
        (None, DEFAULT_STYLE),
        ("fancy", DEFAULT_STYLE),
    ],
)
def test_coerce_style(raw, expected):
    assert coerce_style(raw) == expected


def test_service_starts_with_coerced_style():
    assert KbdStyleService("bogus").active == "default"
    assert KbdStyleService("github").active == "github"


def test_set_active_is_idempotent_and_notifies_on_change():
    svc = KbdStyleService()
    seen: list[str] = []
    svc.subscribe(seen.append)

    assert svc.set_active("github") is True
    assert svc.set_active("github") is False
    assert svc.set_active("unknown") is True  # back to default
    assert seen == ["github", "default"]
    assert svc.active == "default"


def test_css_follows_active_style():
    svc = KbdStyleService("stackoverflow")
    assert "#e1e3e5" in svc.css()
    svc.set_active("github")
    assert "#f6f8fa" in svc.css()
