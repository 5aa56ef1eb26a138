"""Reply handlers, one per classification variant.

Handlers never raise for outbound failures: transport and store errors are
logged and the message simply contributes no text to the reply.
"""

from __future__ import annotations

import logging
from typing import List

from core.classifier import (
    Classification,
    CommandGo,
    CommandGoDoc,
    CounterOp,
    DecorativeBox,
    UrlList,
)
from core.config import ReplyConfig
from core.errors import CounterStoreError, TransportError
from core.models import CounterRecord, record_or_zero
from core.ports import CodeRunnerPort, CounterStorePort, DocFetcherPort, TitleFetcherPort
from core.textbox import render_nested_box

LOGGER = logging.getLogger(__name__)


class ReplyHandlers:
    """Routes a classification to the handler that builds its reply text."""

    def __init__(
        self,
        counter_store: CounterStorePort,
        title_fetcher: TitleFetcherPort,
        doc_fetcher: DocFetcherPort,
        code_runner: CodeRunnerPort,
        config: ReplyConfig,
    ) -> None:
        self._counter_store = counter_store
        self._title_fetcher = title_fetcher
        self._doc_fetcher = doc_fetcher
        self._code_runner = code_runner
        self._config = config

    def reply(self, result: Classification) -> str:
        if isinstance(result, CommandGo):
            return self.run_code(result)
        if isinstance(result, CommandGoDoc):
            return self.lookup_doc(result)
        if isinstance(result, DecorativeBox):
            return self.decorate(result)
        if isinstance(result, UrlList):
            return self.url_titles(result)
        if isinstance(result, CounterOp):
            return self.adjust_counter(result)
        return ""

    def run_code(self, command: CommandGo) -> str:
        try:
            return self._code_runner.run(command.code)
        except TransportError as exc:
            LOGGER.warning("Code run failed: %s", exc)
            return ""

    def lookup_doc(self, command: CommandGoDoc) -> str:
        """Reply with the doc URL followed by its synopsis or a not-found line."""

        url = f"{self._config.godoc_url.rstrip('/')}/{command.package}"
        try:
            summary = self._doc_fetcher.fetch_summary(url)
        except TransportError as exc:
            LOGGER.warning("Doc fetch failed for %s: %s", url, exc)
            summary = ""
        if not summary:
            summary = self._config.not_found_text
        return f"{url}\n{summary}\n"

    def decorate(self, box: DecorativeBox) -> str:
        return render_nested_box(box.text, box.repeat)

    def url_titles(self, urls: UrlList) -> str:
        lines: List[str] = []
        for url in urls.urls:
            try:
                title = self._title_fetcher.fetch_title(url)
            except TransportError as exc:
                LOGGER.warning("Title fetch failed for %s: %s", url, exc)
                continue
            if title:
                lines.append(f"Title: {title}\n")
        return "".join(lines)

    def adjust_counter(self, op: CounterOp) -> str:
        """Apply the delta to the nickname's tally and report the new value.

        Read and write are not atomic; a concurrent update for the same
        nickname may be lost.
        """

        try:
            current = record_or_zero(self._counter_store.get(op.nickname))
            updated = CounterRecord(nickname=current.nickname, count=current.count + op.delta)
            self._counter_store.put(updated)
        except CounterStoreError as exc:
            LOGGER.error("Counter update failed for %s: %s", op.nickname, exc)
            return ""
        LOGGER.info("Counter %s is now %s", updated.nickname, updated.count)
        return f"{updated.nickname} ({updated.count})\n"
