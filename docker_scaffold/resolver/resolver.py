"""Configuration resolver.

Merges explicit options, interactive answers and hardcoded defaults into one
total :class:`~docker_scaffold.config.ScaffoldConfig`, with the precedence
explicit > answers > defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from docker_scaffold.config import ScaffoldConfig

from .prompter import Prompter
from .questions import Question, QueueItem, build_question_queue

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the merged configuration fails validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Invalid configuration: " + "; ".join(errors))


class ConfigResolver:
    """Resolves a complete configuration from partial input.

    Attributes:
        prompter: Prompt mechanism used to ask the pending questions.
        cwd: Directory whose name seeds the project-name default.
    """

    def __init__(self, prompter: Prompter, cwd: str | Path | None = None) -> None:
        self.prompter = prompter
        self.cwd = cwd

    def pending_questions(self, explicit: Mapping[str, Any]) -> list[QueueItem]:
        """Return the initial question queue for *explicit* options."""
        queue = build_question_queue(explicit, self.cwd)
        logger.debug(
            "Queued questions: %s",
            [item.name for item in queue if isinstance(item, Question)],
        )
        return queue

    def resolve(self, explicit: Mapping[str, Any]) -> ScaffoldConfig:
        """Ask what is missing and return the merged configuration.

        Args:
            explicit: Option values supplied by the invoker.  ``None`` and empty
                string values are treated as not supplied.

        Raises:
            ConfigurationError: If the merged values do not validate.
        """
        explicit = {k: v for k, v in explicit.items() if v not in (None, "")}
        answers = self.prompter.prompt(self.pending_questions(explicit), explicit)
        return merge_config(explicit, answers)


def merge_config(
    explicit: Mapping[str, Any],
    answers: Mapping[str, Any],
) -> ScaffoldConfig:
    """Merge *explicit* over *answers* over model defaults."""
    merged = {**answers, **explicit}
    try:
        return ScaffoldConfig(**merged)
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        ]
        raise ConfigurationError(errors) from exc
