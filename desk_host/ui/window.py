"""desk_host/ui/window.py
Tkinter window provider. Must be used from the UI context's thread: the Tk
root is bound to the thread that created it.
"""

from __future__ import annotations

import threading
import tkinter as tk
from typing import Callable, List, Optional

from PIL import Image, ImageTk

from desk_host import config
from desk_host.ui.definition import WindowDefinition, load_window_definition


class TkWindow:
    def __init__(self, definition: WindowDefinition) -> None:
        self.definition = definition
        self._closed_handlers: List[Callable[[], None]] = []
        self._closed = False

        self.root = tk.Tk()
        self.root.title(definition.title)
        self.root.geometry(definition.geometry)
        if definition.topmost:
            self.root.attributes("-topmost", True)

        self._icon_ref: Optional[ImageTk.PhotoImage] = None
        if definition.icon_path:
            self._load_icon(definition.icon_path)

        self.root.protocol("WM_DELETE_WINDOW", self.close)
        self.root.bind("<Escape>", lambda _event: self.close())

    def _load_icon(self, path: str) -> None:
        with Image.open(path) as img:
            self._icon_ref = ImageTk.PhotoImage(image=img.convert("RGBA"), master=self.root)
        self.root.iconphoto(True, self._icon_ref)

    def on_closed(self, handler: Callable[[], None]) -> None:
        self._closed_handlers.append(handler)

    def close(self) -> None:
        """User close: notify subscribers, then leave the main loop."""
        if self._closed:
            return
        self._closed = True
        for handler in self._closed_handlers:
            handler()
        self.root.quit()

    def show(self, stop_event: Optional[threading.Event] = None) -> None:
        """Block in the Tk main loop until closed or `stop_event` is set."""
        if stop_event is not None:
            self.root.after(config.WINDOW_STOP_CHECK_MS, self._watch_stop, stop_event)
        self.root.focus_force()
        try:
            self.root.mainloop()
        finally:
            self._icon_ref = None
            self.root.destroy()

    def _watch_stop(self, stop_event: threading.Event) -> None:
        if stop_event.is_set():
            self.root.quit()
            return
        self.root.after(config.WINDOW_STOP_CHECK_MS, self._watch_stop, stop_event)


class TkWindowProvider:
    def __init__(self, base_path: str) -> None:
        self.base_path = base_path

    def create(self) -> TkWindow:
        return TkWindow(load_window_definition(self.base_path))
