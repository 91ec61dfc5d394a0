"""Assembly of a check's annotation report.

Sections are always appended in the same order, whatever their content:

1. ``additional_info`` -- the check output, with the current value and
   thresholds highlighted when the output reports them
2. one ``search`` section per labelled query, holding its result tables
3. ``graphs`` -- the check's own graph and a 24-hour comparison graph
"""

from __future__ import annotations

import html
import logging

from checkherald.check import (
    parse_check_output,
    parse_query_list,
    parse_target_url,
    resolve_time_window,
    unescape_text,
)
from checkherald.config import HeraldConfig
from checkherald.graphite import GraphiteGraph
from checkherald.rendering import render_result
from checkherald.search import ElasticsearchQuery, GraphRetriever, QueryOrchestrator
from checkherald.variables import VariableStore

from .sections import Report, ReportSection

logger = logging.getLogger(__name__)


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


def _image(path: str) -> str:
    # Attribute value, so quotes are escaped too
    return f'<img src="{html.escape(path)}" alt="graphite_graph" /><br><br>'


def _historical_caption(window: str) -> str:
    if window.endswith("h") and window[:-1].isdigit():
        return f"{window[:-1]}-hour View"
    return f"{window} View"


class ReportAssembler:
    """Builds the report for the check described by *variables*."""

    def __init__(
        self,
        variables: VariableStore,
        orchestrator: QueryOrchestrator,
        graphs: GraphRetriever,
        config: HeraldConfig | None = None,
    ):
        self.variables = variables
        self.orchestrator = orchestrator
        self.graphs = graphs
        self.config = config or HeraldConfig()

    @classmethod
    def from_config(cls, config: HeraldConfig, variables: VariableStore) -> ReportAssembler:
        """Wire the Elasticsearch and Graphite clients described by *config*."""
        es = config.elasticsearch
        search_client = ElasticsearchQuery(
            es.url,
            index=es.index,
            timestamp_field=es.timestamp_field,
            size=es.size,
            timeout=es.timeout,
        )
        orchestrator = QueryOrchestrator(
            search_client,
            es.query_dir,
            default_period=es.default_period,
            max_workers=config.max_workers,
        )
        graph_client = GraphiteGraph(
            config.graphite.sandbox_dir,
            historical_window=config.graphite.historical_window,
            timeout=config.graphite.timeout,
        )
        return cls(variables, orchestrator, GraphRetriever(graph_client), config)

    def assemble(self) -> Report:
        report = Report()
        url = parse_target_url(self.variables.get(self.config.variables.check_command))
        logger.debug("Check target URL: %s", url or "<none>")

        self._additional_info(report.add_section("additional_info", "Additional Info"))
        self._search_sections(report, url)
        self._graphs_section(report.add_section("graphs", "Graphs"), url)
        return report

    def _additional_info(self, section: ReportSection) -> None:
        output = self.variables.get(self.config.variables.output_variable())
        if not output:
            return

        section.add_text(f"Additional Info:\n {unescape_text(output)}\n\n")
        reading = parse_check_output(output)
        if reading:
            section.add_html(
                f"Current value: <b><font color='red'>{_escape(reading.current_value)}</font></b>, "
                f"warn threshold: <b>{_escape(reading.warn_threshold)}</b>, "
                f"crit threshold: <b><font color='red'>{_escape(reading.crit_threshold)}</font></b>"
                "<br><br>"
            )
        else:
            section.add_html(f"<b>Additional Info</b>:<br> {_escape(output)}<br><br>")

    def _search_sections(self, report: Report, url: str) -> None:
        specs = parse_query_list(self.variables.get(self.config.variables.queries))
        if not specs:
            return

        window = resolve_time_window(url)
        for outcome in self.orchestrator.run(specs, window):
            label = outcome.spec.label
            section = report.add_section("search", label)
            section.add_text(f"{label}\n")
            section.add_html(f"<b>{_escape(label)}</b><br>")
            section.add_html("<br>")
            if outcome.is_empty:
                continue
            try:
                table = render_result(outcome.result, self.config.render.max_depth)
            except Exception as e:
                logger.error(
                    "Exception encountered rendering search query '%s': %s", label, e, exc_info=True
                )
                continue
            section.add_html(table)

    def _graphs_section(self, section: ReportSection, url: str) -> None:
        window = resolve_time_window(url)
        graphs = self.graphs.fetch(url)

        section.add_html(f"<b>{_escape(window.graph_caption())}</b><br>")
        if graphs.primary:
            section.add_attachment(graphs.primary)
            section.add_html(_image(graphs.primary))

        section.add_html(f"<b>{_historical_caption(self.config.graphite.historical_window)}</b><br>")
        if graphs.historical:
            section.add_attachment(graphs.historical)
            section.add_html(_image(graphs.historical))
