"""Reporters: render validation errors as text, JSON or a rich table."""

from paramcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from paramcheck.application.reporters.grouping import group_by_field
from paramcheck.application.reporters.json import JsonReporter, errors_to_dict
from paramcheck.application.reporters.plain_text import PlainTextReporter
from paramcheck.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
    "ReporterProtocol",
    "errors_to_dict",
    "group_by_field",
]
