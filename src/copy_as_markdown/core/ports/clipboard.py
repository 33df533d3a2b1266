from typing import Protocol


class ClipboardPort(Protocol):
    def write_text(self, text: str) -> None: ...
