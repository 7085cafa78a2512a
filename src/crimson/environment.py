# environment.py
import logging

logger = logging.getLogger("crimson.environment")


class Environment:
    """The program's single flat namespace.

    Nested blocks share it: a declaration anywhere overwrites any earlier
    binding of the same name. Functions live in a separate table.
    """

    def __init__(self):
        self.store = {}
        self.functions = {}

    # ---- Mapping protocol helpers -------------------------------------------------

    def __contains__(self, name):
        return name in self.store

    def __iter__(self):
        return iter(self.store)

    def __len__(self):
        return len(self.store)

    # ---- Variables ----------------------------------------------------------------

    def get(self, name, default=None):
        return self.store.get(name, default)

    def set(self, name, value):
        if name in self.store:
            logger.debug("rebinding %s: %r -> %r", name, self.store[name], value)
        self.store[name] = value
        return value

    def resolve_text(self, name):
        """Text bound to ``name``, or the name itself when it is unbound."""
        value = self.store.get(name)
        return name if value is None else value.text

    # ---- Functions ----------------------------------------------------------------

    def define_function(self, entry):
        self.functions[entry.name] = entry
        return entry

    def get_function(self, name):
        return self.functions.get(name)

    def has_function(self, name):
        return name in self.functions
