"""Prompt mechanism: executes a question queue in a single pass.

:class:`Prompter` owns the walk over the queue (deferred expansion, relevance
checks, computed defaults) and leaves the actual question to :meth:`ask`.
:class:`RichPrompter` asks on the terminal with ``rich.prompt``.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Iterable, Mapping

from rich.console import Console
from rich.prompt import Confirm, Prompt

from docker_scaffold.utils import console as default_console

from .questions import DeferredQuestions, Question, QuestionKind, QueueItem

logger = logging.getLogger(__name__)


class Prompter:
    """Base prompt mechanism.

    Subclasses implement :meth:`ask` and :meth:`confirm`; everything about
    *which* questions get asked lives in :meth:`prompt`.
    """

    def prompt(
        self,
        questions: Iterable[QueueItem],
        explicit: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Ask every relevant question in order and return the answers.

        Args:
            questions: Ordered queue of questions and deferred placeholders.
            explicit: Explicit option values.  They take priority over
                answers when predicates and computed defaults read a value.

        Returns:
            Mapping of question name to answer.  Questions whose predicate
            was false are omitted.
        """
        explicit = dict(explicit or {})
        answers: dict[str, Any] = {}

        def lookup(name: str) -> Any:
            if name in explicit:
                return explicit[name]
            return answers.get(name)

        pending: deque[QueueItem] = deque(questions)
        while pending:
            item = pending.popleft()

            if isinstance(item, DeferredQuestions):
                expanded = item.expand(lookup)
                logger.debug(
                    "Expanded %s into %s", item.name, [q.name for q in expanded] or "nothing"
                )
                pending.extendleft(reversed(expanded))
                continue

            if item.name in answers:
                logger.debug("Skipping %s: already answered", item.name)
                continue
            if not item.is_relevant(lookup):
                logger.debug("Skipping %s: not relevant", item.name)
                continue

            answers[item.name] = self.ask(item, item.resolve_default(lookup))

        return answers

    def ask(self, question: Question, default: Any) -> Any:
        raise NotImplementedError

    def confirm(self, message: str, default: bool = False) -> bool:
        raise NotImplementedError


class RichPrompter(Prompter):
    """Asks questions on the terminal using ``rich.prompt``."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def ask(self, question: Question, default: Any) -> Any:
        if question.kind is QuestionKind.CONFIRM:
            return Confirm.ask(question.message, default=bool(default), console=self.console)

        if question.kind is QuestionKind.CHOICE:
            for value in question.choices:
                label = question.labels.get(value)
                if label:
                    self.console.print(f"  [cyan]{value}[/cyan]  {label}")
            return Prompt.ask(
                question.message,
                choices=question.choices,
                default=default,
                console=self.console,
            )

        return Prompt.ask(question.message, default=default, console=self.console)

    def confirm(self, message: str, default: bool = False) -> bool:
        return Confirm.ask(message, default=default, console=self.console)
