"""Entry block resolution and its three structural checks."""

import pytest

from crimson.lexer import tokenize
from crimson.entry import resolve_entry, EntryBounds
from crimson.error_reporter import (
	NoEntryError, UnclosedEntryError, BuiltinOutsideEntryError, StructuralError,
)


def test_bounds_cover_void_main():
	tokens = tokenize("void main() {\n  crym(\"x\");\n}")
	bounds = resolve_entry(tokens)
	assert tokens[bounds.start].text == "void"
	assert tokens[bounds.end].text == "}"
	assert bounds.end == len(tokens) - 2


def test_int_main_is_an_entry():
	tokens = tokenize("int main() { }")
	assert resolve_entry(tokens) == EntryBounds(0, 5)


def test_first_entry_wins():
	tokens = tokenize("int helper;\nvoid main() { }\nvoid main() { }")
	bounds = resolve_entry(tokens)
	assert tokens[bounds.start].line == 2
	assert tokens[bounds.end].line == 2


def test_nested_braces_do_not_close_entry():
	source = "void main() {\n if (1) { crym(\"a\"); }\n crym(\"b\");\n}"
	tokens = tokenize(source)
	bounds = resolve_entry(tokens)
	assert tokens[bounds.end].line == 4


def test_missing_entry():
	with pytest.raises(NoEntryError) as excinfo:
		resolve_entry(tokenize('void helper() { crym("x"); }'))
	assert "No main function found" in str(excinfo.value)


def test_float_main_is_not_an_entry():
	with pytest.raises(NoEntryError):
		resolve_entry(tokenize("float main() { }"))


def test_unclosed_entry():
	with pytest.raises(UnclosedEntryError) as excinfo:
		resolve_entry(tokenize("void main() {\n crym(\"x\");\n"), "prog.crm")
	assert excinfo.value.line == 1
	assert excinfo.value.filename == "prog.crm"


def test_entry_without_parenthesis_is_unclosed():
	with pytest.raises(UnclosedEntryError):
		resolve_entry(tokenize("void main { }"))


def test_builtin_before_entry_is_rejected():
	source = 'crym("early");\nvoid main() { }'
	with pytest.raises(BuiltinOutsideEntryError) as excinfo:
		resolve_entry(tokenize(source))
	assert excinfo.value.line == 1
	assert str(excinfo.value).startswith("Line 1:")


def test_builtin_after_entry_is_rejected():
	source = 'void main() { }\n\nSleep(1);'
	with pytest.raises(BuiltinOutsideEntryError) as excinfo:
		resolve_entry(tokenize(source))
	assert excinfo.value.line == 3


def test_non_builtin_identifiers_outside_entry_are_allowed():
	tokens = tokenize('foo();\nvoid main() { }\nbar();')
	resolve_entry(tokens)


def test_structural_errors_share_a_base():
	assert issubclass(NoEntryError, StructuralError)
	assert issubclass(UnclosedEntryError, StructuralError)
	assert issubclass(BuiltinOutsideEntryError, StructuralError)
