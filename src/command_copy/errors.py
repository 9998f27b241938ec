# src/command_copy/errors.py


class CommandCopyError(Exception):
    """Base class for every fatal command-copy error."""


class InputError(CommandCopyError):
    """The document file is missing or unreadable."""


class StructureError(CommandCopyError):
    """A quote block lacks the paragraph/text pair that carries its label."""


class EmptySelectionError(CommandCopyError):
    """The document holds no label/code pairs to choose from."""


class CancellationError(CommandCopyError):
    """The user aborted the selection. No output is produced."""


class SelectorError(CommandCopyError):
    """The external selector program could not be started."""


class ClipboardError(CommandCopyError):
    """Writing to the clipboard failed after all retries."""


class ConfigError(CommandCopyError):
    """The configuration file is unreadable or invalid."""
