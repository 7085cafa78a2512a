# runner.py
"""
Crimson run pipeline.

1. The source file is checked for the ``.crm`` extension and read.
2. Inline file flags (``// @crimson: debug=true``) are applied for the length of the run.
3. The Lexer tokenizes the source line by line.
4. The entry block is located and validated.
5. The Executor walks the entry block, executing statements as it parses them.

Errors are reported on stderr and turned into a nonzero exit status.
"""
import logging
import os
from contextlib import contextmanager

from .config import config
from .entry import resolve_entry
from .error_reporter import CrimsonError, get_error_reporter, print_error
from .evaluator import Executor
from .lexer import tokenize
from .runtime import parse_file_flags

SOURCE_EXTENSION = ".crm"

EXIT_OK = 0
EXIT_ERROR = 1

logger = logging.getLogger("crimson.runner")


class SourceFileError(CrimsonError):
    """The source file cannot be used: wrong extension or unreadable."""


def has_source_extension(path):
    return os.path.splitext(path)[1] == SOURCE_EXTENSION


def read_source(path):
    if not has_source_extension(path):
        raise SourceFileError(f"File must have {SOURCE_EXTENSION} extension", filename=path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as exc:
        raise SourceFileError(f"Could not open file {path}: {exc.strerror}", filename=path) from exc
    except UnicodeDecodeError as exc:
        raise SourceFileError(
            f"Could not read file {path}: byte {exc.start} is not valid UTF-8",
            filename=path,
            suggestion="Save the file with UTF-8 encoding",
        ) from exc


def prepare(source, filename="<stdin>"):
    """Tokenize and resolve the entry block; returns ``(tokens, bounds)``."""
    get_error_reporter().register_source(filename, source)
    tokens = tokenize(source, filename)
    return tokens, resolve_entry(tokens, filename)


@contextmanager
def _file_flags(source, filename):
    flags = parse_file_flags(source)
    with config.scoped(flags):
        if flags:
            logger.debug("file flags for %s: %s", filename, flags)
        yield


def run_source(source, filename="<stdin>", env=None):
    """Tokenize and execute ``source``; returns a process exit status.

    Inline file flags apply to this run only.
    """
    with _file_flags(source, filename):
        try:
            tokens, bounds = prepare(source, filename)
            Executor(filename).execute(tokens, env=env, bounds=bounds)
        except CrimsonError as e:
            print_error(e)
            return EXIT_ERROR
    return EXIT_OK


def check_source(source, filename="<stdin>"):
    """Validate structure without executing anything; returns an exit status."""
    with _file_flags(source, filename):
        try:
            prepare(source, filename)
        except CrimsonError as e:
            print_error(e)
            return EXIT_ERROR
    return EXIT_OK


def run_file(path):
    try:
        source = read_source(path)
    except SourceFileError as e:
        print_error(e)
        return EXIT_ERROR
    return run_source(source, path)
