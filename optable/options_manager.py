# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Manages option values across namespaces and hands out `OptionRef` handles.

Option callbacks receive an opaque bound context. For the standard helpers in
`optable.helpers` that context is an `OptionRef`: a small handle naming one
attribute of one `argparse.Namespace` held by an `OptionsManager`. Tables bind
refs at declaration time, and parsing fills the namespace in.

Each option is stored under a namespace key (e.g., "cli_args", "defaults") to
support several independent sets of values.

Typical Usage:
    options = OptionsManager()
    table = [
        opt_without_arg("debug", "d", set_bool, options.ref("debug", False),
                        "Enable debug output."),
    ]
    parser.register_table(table)
    parser.parse(sys.argv)
    if options.get("debug"):
        ...
"""
from __future__ import annotations

from argparse import Namespace
from collections import defaultdict
from typing import Any

from optable.logger import logger


class OptionRef:
    """Reference to one option value inside an `OptionsManager` namespace."""

    def __init__(
        self, manager: OptionsManager, option_name: str, namespace_name: str = "cli_args"
    ) -> None:
        self.manager = manager
        self.option_name = option_name
        self.namespace_name = namespace_name

    def get(self) -> Any:
        return self.manager.get(self.option_name, namespace_name=self.namespace_name)

    def set(self, value: Any) -> None:
        self.manager.set(self.option_name, value, namespace_name=self.namespace_name)

    def __repr__(self) -> str:
        return f"OptionRef({self.namespace_name}.{self.option_name}={self.get()!r})"


class OptionsManager:
    """
    Holds option values in named `argparse.Namespace` objects.

    Allows retrieval, setting and introspection of option values, and
    creates `OptionRef` handles to use as callback contexts.
    """

    def __init__(self, namespaces: list[tuple[str, Namespace]] | None = None) -> None:
        self.options: defaultdict = defaultdict(Namespace)
        if namespaces:
            for namespace_name, namespace in namespaces:
                self.from_namespace(namespace, namespace_name)

    def from_namespace(
        self, namespace: Namespace, namespace_name: str = "cli_args"
    ) -> None:
        self.options[namespace_name] = namespace

    def get(
        self, option_name: str, default: Any = None, namespace_name: str = "cli_args"
    ) -> Any:
        """Get the value of an option."""
        return getattr(self.options[namespace_name], option_name, default)

    def set(self, option_name: str, value: Any, namespace_name: str = "cli_args") -> None:
        """Set the value of an option."""
        setattr(self.options[namespace_name], option_name, value)
        logger.debug("Set '%s' in '%s' to %r", option_name, namespace_name, value)

    def has_option(self, option_name: str, namespace_name: str = "cli_args") -> bool:
        """Check if an option exists in the namespace."""
        return hasattr(self.options[namespace_name], option_name)

    def ref(
        self, option_name: str, default: Any = None, namespace_name: str = "cli_args"
    ) -> OptionRef:
        """
        Return a handle to an option value, initialising it to `default`.

        An existing value is kept, so refs can be created for the same option
        more than once.
        """
        if not self.has_option(option_name, namespace_name):
            setattr(self.options[namespace_name], option_name, default)
        return OptionRef(self, option_name, namespace_name)

    def get_namespace_dict(self, namespace_name: str = "cli_args") -> dict[str, Any]:
        """Return all options in a namespace as a dictionary."""
        if namespace_name not in self.options:
            raise ValueError(f"Namespace '{namespace_name}' not found.")
        return vars(self.options[namespace_name])
