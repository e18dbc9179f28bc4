"""Pytest configuration and shared fixtures."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest


def write_files(root: Path, files: dict[str, str | bytes | dict | list]) -> None:
    """Write a mapping of relative path -> content under ``root``.

    dict/list contents are written as JSON.
    """
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, (dict, list)):
            path.write_text(json.dumps(content), encoding="utf-8")
        elif isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[[dict], Path]:
    """Return a factory that writes files into a fresh project root."""
    root = tmp_path / "project"
    root.mkdir()

    def _make(files: dict[str, str | bytes | dict | list]) -> Path:
        write_files(root, files)
        return root

    return _make


@pytest.fixture
def sample_project(make_project) -> Path:
    """A small mini-program with a main package and two sub-packages."""
    return make_project({
        "app.json": {
            "pages": ["pages/index/index"],
            "subPackages": [
                {"root": "pkgA/", "pages": ["pages/detail/detail"]},
                {"root": "pkgB", "pages": ["pages/list/list"]},
            ],
        },
        "pages/index/index.js": "import { fmt } from '../../utils/format';\nPage({});\n",
        "pages/index/index.json": {"usingComponents": {"card": "/components/card/card"}},
        "pages/index/index.wxml": '<import src="../../templates/item.wxml"/>\n<card/>\n',
        "pages/index/index.wxss": '@import "../../styles/base.wxss";\n',
        "utils/format.js": "export function fmt(v) { return String(v); }\n",
        "components/card/card.js": "const fmt = require('../../utils/format');\nComponent({});\n",
        "components/card/card.json": {"component": True},
        "components/card/card.wxml": "<view>card</view>\n",
        "templates/item.wxml": '<wxs module="m" src="../utils/math.wxs"></wxs>\n',
        "utils/math.wxs": "module.exports = { add: function (a, b) { return a + b; } };\n",
        "styles/base.wxss": "page { color: #333; }\n",
        "pkgA/pages/detail/detail.js": "import helper from '../../lib/helper';\nimport shared from '../../../utils/shared';\n",
        "pkgA/pages/detail/detail.json": {"usingComponents": {}},
        "pkgA/lib/helper.js": "export default 1;\n",
        "utils/shared.js": "export default 2;\n",
        "pkgB/pages/list/list.js": "Page({});\n",
        "unused/dead.js": "export default 3;\n",
    })
