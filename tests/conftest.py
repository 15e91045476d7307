"""Shared pytest fixtures for gluestack-mcp tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from gluestack_mcp.core.config import CatalogConfig

BUTTON_INDEX = """\
import React from 'react';
import { createButton } from '@gluestack-ui/button';

const UIButton = createButton({ Root: Pressable, Text });

const Button = React.forwardRef((props, ref) => <UIButton ref={ref} {...props} />);
const ButtonText = React.forwardRef((props, ref) => <UIButton.Text ref={ref} {...props} />);
const ButtonGroup = React.forwardRef((props, ref) => <UIButton.Group ref={ref} {...props} />);

export { Button, ButtonText, ButtonGroup };
"""

ALERT_DIALOG_INDEX = """\
import { createAlertDialog } from '@gluestack-ui/alert-dialog';

const UIAlertDialog = createAlertDialog({ Root: View, Content: View });

const AlertDialog = UIAlertDialog;
const AlertDialogContent = UIAlertDialog.Content;

export { AlertDialog, AlertDialogContent };
"""

HSTACK_INDEX = """\
import { View } from 'react-native';

const HStack = (props) => <View {...props} />;

export { HStack };
"""


def listing_entry(name: str, type_: str = "dir") -> dict[str, str]:
    return {"name": name, "type": type_, "path": f"components/{name}"}


@pytest.fixture
def components_dir(tmp_path: Path) -> Path:
    """Create a local mirror with Button, AlertDialog and HStack."""
    root = tmp_path / "components"
    for directory, source in (
        ("button", BUTTON_INDEX),
        ("alert-dialog", ALERT_DIALOG_INDEX),
        ("hstack", HSTACK_INDEX),
    ):
        (root / directory).mkdir(parents=True)
        (root / directory / "index.tsx").write_text(source)
    return root


@pytest.fixture
def config(components_dir: Path) -> CatalogConfig:
    return CatalogConfig(components_dir=components_dir)


@pytest.fixture
def default_listing() -> list[dict[str, str]]:
    return [
        listing_entry("AlertDialog"),
        listing_entry("Button"),
        listing_entry("HStack"),
        listing_entry("hooks"),
        listing_entry("Tooltip"),  # upstream only, not mirrored
        listing_entry("README.md", "file"),
    ]


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    """Build a mock GitHub transport.

    The returned transport records each request in ``transport.requests``.
    """

    def factory(
        listing: list[dict[str, str]] | None = None,
        usage: dict[str, str] | None = None,
        listing_status: int = 200,
    ) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if request.url.host == "api.github.com":
                if listing_status != 200:
                    return httpx.Response(listing_status, json={"message": "nope"})
                return httpx.Response(200, json=listing or [])
            if request.url.host == "raw.githubusercontent.com":
                component = request.url.path.split("/")[-2]
                if usage and component in usage:
                    return httpx.Response(200, text=usage[component])
                return httpx.Response(404, text="404: Not Found")
            return httpx.Response(500)

        transport = httpx.MockTransport(handler)
        transport.requests = requests  # type: ignore[attr-defined]
        return transport

    return factory
