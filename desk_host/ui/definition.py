"""desk_host/ui/definition.py
Window definition read from `window.json` under the base path.

Example:
    {"title": "Desk Host", "width": 800, "height": 600, "icon": "icon.png"}

Missing file -> defaults from config. Malformed file -> ValueError.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Optional

from desk_host import config


@dataclass(frozen=True)
class WindowDefinition:
    title: str = config.WINDOW_TITLE
    width: int = config.WINDOW_WIDTH
    height: int = config.WINDOW_HEIGHT
    topmost: bool = False
    icon_path: Optional[str] = None

    @property
    def geometry(self) -> str:
        return f"{self.width}x{self.height}"


def load_window_definition(base_path: str) -> WindowDefinition:
    path = os.path.join(base_path, config.WINDOW_FILE)
    if not os.path.exists(path):
        return WindowDefinition()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid window definition {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"invalid window definition {path}: expected an object")

    icon = data.get("icon")
    return WindowDefinition(
        title=str(data.get("title", config.WINDOW_TITLE)),
        width=int(data.get("width", config.WINDOW_WIDTH)),
        height=int(data.get("height", config.WINDOW_HEIGHT)),
        topmost=bool(data.get("topmost", False)),
        icon_path=os.path.join(base_path, icon) if icon else None,
    )
