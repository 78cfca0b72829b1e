"""Interactive configuration resolution.

Quick usage::

    from docker_scaffold.resolver import ConfigResolver, RichPrompter

    resolver = ConfigResolver(RichPrompter())
    config = resolver.resolve({"project_name": "demo", "include_workflow": False})
"""

from docker_scaffold.resolver.prompter import Prompter, RichPrompter
from docker_scaffold.resolver.questions import (
    DeferredQuestions,
    Question,
    QuestionKind,
    base_questions,
    build_question_queue,
    target_questions,
)
from docker_scaffold.resolver.resolver import ConfigResolver, ConfigurationError, merge_config

__all__ = [
    "ConfigResolver",
    "ConfigurationError",
    "DeferredQuestions",
    "Prompter",
    "Question",
    "QuestionKind",
    "RichPrompter",
    "base_questions",
    "build_question_queue",
    "merge_config",
    "target_questions",
]
