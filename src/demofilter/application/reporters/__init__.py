"""Reporters: render applied filters and match outcomes."""

from demofilter.application.reporters._base import BaseReporter
from demofilter.application.reporters.console import ConsoleConfig, ConsoleReporter
from demofilter.application.reporters.json_reporter import JSONReporter
from demofilter.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
