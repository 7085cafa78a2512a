# error_reporter.py
"""
Error types and source-aware error reporting for Crimson.

Errors are created through the reporter so that they carry the source line
they refer to, then raised by the caller:

    error = get_error_reporter().report_error(
        NoEntryError, "No main function found.", filename="prog.crm")
    raise error
"""
from rich.console import Console
from rich.markup import escape

_stderr_console = Console(stderr=True, highlight=False)


class CrimsonError(Exception):
    """Base class for every error the interpreter reports to the user."""

    def __init__(self, message, line=None, column=None, filename=None,
                 suggestion=None, source_line=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        self.suggestion = suggestion
        self.source_line = source_line

    def location(self):
        if self.line is None:
            return self.filename or ""
        loc = f"{self.filename or '<stdin>'}:{self.line}"
        if self.column is not None:
            loc += f":{self.column}"
        return loc

    def __str__(self):
        return self.message


class StructuralError(CrimsonError):
    """The program's shape prevents execution from starting."""


class NoEntryError(StructuralError):
    pass


class UnclosedEntryError(StructuralError):
    pass


class BuiltinOutsideEntryError(StructuralError):
    pass


class CrimsonRuntimeError(CrimsonError):
    """A fault raised while statements are executing; aborts the current run."""


class NumericConversionError(CrimsonRuntimeError):
    pass


class ErrorReporter:
    def __init__(self):
        self.sources = {}

    def register_source(self, filename, source_code):
        self.sources[filename] = source_code.split("\n")

    def get_source_line(self, filename, line):
        lines = self.sources.get(filename)
        if not lines or line is None or not 1 <= line <= len(lines):
            return None
        return lines[line - 1]

    def report_error(self, error_class, message, line=None, column=None,
                     filename=None, suggestion=None):
        return error_class(
            message,
            line=line,
            column=column,
            filename=filename,
            suggestion=suggestion,
            source_line=self.get_source_line(filename, line),
        )

    def clear(self):
        self.sources.clear()


def format_error(error):
    """Render an error as plain text: header, location, source excerpt, hint."""
    lines = [f"{type(error).__name__}: {error.message}"]
    if isinstance(error, CrimsonError):
        location = error.location()
        if location:
            lines.append(f"  --> {location}")
        if error.source_line is not None:
            lines.append(f"   | {error.source_line}")
            if error.column is not None:
                lines.append("   | " + " " * error.column + "^")
        if error.suggestion:
            lines.append(f"  hint: {error.suggestion}")
    return "\n".join(lines)


def print_error(error, console=None):
    console = console or _stderr_console
    text = format_error(error).split("\n")
    console.print(f"[bold red]{escape(text[0])}[/bold red]", soft_wrap=True)
    for line in text[1:]:
        console.print(escape(line), soft_wrap=True)


_reporter = ErrorReporter()


def get_error_reporter():
    return _reporter
