class CopyAsMarkdownError(Exception):
    """Base class for errors reported to the user."""


class NoSelectionError(CopyAsMarkdownError):
    pass


class NoFilesSelectedError(CopyAsMarkdownError):
    pass


class ClipboardError(CopyAsMarkdownError):
    pass


class ConfigError(CopyAsMarkdownError):
    pass
