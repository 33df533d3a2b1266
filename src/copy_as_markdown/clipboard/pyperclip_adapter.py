import logging

import pyperclip

from copy_as_markdown.errors import ClipboardError

logger = logging.getLogger(__name__)


class PyperclipClipboard:
    """Write text to the system clipboard.

    Implements the ``ClipboardPort`` protocol.
    """

    def write_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(str(exc)) from exc
        logger.debug("Copied %d characters to the clipboard", len(text))
