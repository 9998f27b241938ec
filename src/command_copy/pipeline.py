# src/command_copy/pipeline.py

import logging
from collections.abc import Sequence
from time import monotonic

from .config import CommandCopyConfig
from .documents import DocumentParser, MarkdownParser, read_document
from .errors import CancellationError, ClipboardError, EmptySelectionError
from .observability import names
from .observability.base import MetricsHook, NoOpMetricsHook
from .placeholders import materialize, resolve_strategy, scan_placeholders
from .resolvers import ValueResolver, create_value_resolver
from .selectors import ExternalSelector, Selector
from .sinks import ClipboardSink, EchoSink, OutputSink
from .snippets import extract_snippets

logger = logging.getLogger(__name__)


class CommandCopy:
    """One run: document -> snippets -> choice -> values -> command.

    Every collaborator can be injected; the defaults are built from the
    config. Sinks are only written once the command is fully materialized.
    """

    def __init__(
        self,
        config: CommandCopyConfig,
        *,
        parser: DocumentParser | None = None,
        selector: Selector | None = None,
        resolver: ValueResolver | None = None,
        sinks: Sequence[OutputSink] | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.parser = parser if parser is not None else MarkdownParser()
        self.selector = (
            selector
            if selector is not None
            else ExternalSelector(
                program=config.selector,
                arguments=config.selector_args,
                timeout=config.timeout,
            )
        )
        self.resolver = (
            resolver if resolver is not None else create_value_resolver(config)
        )
        self.sinks = list(sinks) if sinks is not None else [ClipboardSink(), EchoSink()]
        self.metrics_hook = metrics_hook
        self.strategy = resolve_strategy(config.strategy)

    def load_snippets(self) -> dict[str, str]:
        text = read_document(self.config.path)
        root = self.parser.parse(text)
        snippets = extract_snippets(root, metrics_hook=self.metrics_hook)
        if not snippets:
            raise EmptySelectionError(f"No snippets found in {self.config.path}")
        return snippets

    def choose(self, snippets: dict[str, str]) -> str:
        start = monotonic()
        try:
            label = self.selector.select(list(snippets))
            if label not in snippets:
                raise CancellationError(f"No snippet labelled {label!r}")
        except CancellationError:
            self.metrics_hook.increment(names.SELECTIONS_CANCELLED)
            raise
        finally:
            elapsed_ms = 1000 * (monotonic() - start)
            self.metrics_hook.record_latency(names.SELECTION_DURATION, elapsed_ms)
        logger.info("Chose snippet: %s", label)
        return label

    def render(self, code: str) -> str:
        variables = scan_placeholders(code)
        self.metrics_hook.record_gauge(names.PLACEHOLDERS_FOUND, len(variables))
        logger.debug("Placeholders: %s", variables)

        values = self.resolver.resolve(variables) if variables else {}

        start = monotonic()
        # Follow the scan order, not whatever order the resolver filled in.
        ordered = {name: values.get(name, "") for name in variables}
        command = materialize(code, ordered, self.strategy)
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.MATERIALIZE_DURATION, elapsed_ms)
        return command

    def run(self) -> str:
        snippets = self.load_snippets()
        label = self.choose(snippets)
        command = self.render(snippets[label])
        for sink in self.sinks:
            try:
                sink.write(command)
            except ClipboardError as e:
                # A host without a clipboard still gets the echo.
                logger.warning("%s", e)
        return command
