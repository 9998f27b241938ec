__version__ = "0.1.0"

# Configuration
from .config import CommandCopyConfig, ConfigFile, load_config_file

# Documents
from .documents import (
    DocumentNode,
    DocumentParser,
    MarkdownParser,
    NodeKind,
    read_document,
)

# Errors
from .errors import (
    CancellationError,
    ClipboardError,
    CommandCopyError,
    ConfigError,
    EmptySelectionError,
    InputError,
    SelectorError,
    StructureError,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Pipeline
from .pipeline import CommandCopy

# Placeholders
from .placeholders import assign, materialize, scan_placeholders, substitute

# Resolvers
from .resolvers import (
    PopupValueResolver,
    TerminalValueResolver,
    ValueResolver,
    create_value_resolver,
)

# Selectors
from .selectors import ExternalSelector, Selector

# Sinks
from .sinks import ClipboardSink, EchoSink, OutputSink

# Snippets
from .snippets import extract_snippets

__all__ = [
    "__version__",
    # Configuration
    "CommandCopyConfig",
    "ConfigFile",
    "load_config_file",
    # Documents
    "DocumentNode",
    "DocumentParser",
    "MarkdownParser",
    "NodeKind",
    "read_document",
    # Errors
    "CancellationError",
    "ClipboardError",
    "CommandCopyError",
    "ConfigError",
    "EmptySelectionError",
    "InputError",
    "SelectorError",
    "StructureError",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Pipeline
    "CommandCopy",
    # Placeholders
    "assign",
    "materialize",
    "scan_placeholders",
    "substitute",
    # Resolvers
    "PopupValueResolver",
    "TerminalValueResolver",
    "ValueResolver",
    "create_value_resolver",
    # Selectors
    "ExternalSelector",
    "Selector",
    # Sinks
    "ClipboardSink",
    "EchoSink",
    "OutputSink",
    # Snippets
    "extract_snippets",
]
