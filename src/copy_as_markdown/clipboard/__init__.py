from copy_as_markdown.clipboard.pyperclip_adapter import PyperclipClipboard

__all__ = ["PyperclipClipboard"]
