"""Extension resolver package root.

The public API surface is the resolver, the condition predicates and the
schema types exposed in ``extension_resolver.schemas``.
"""

__version__ = "0.1.0"

from extension_resolver.conditions import (  # noqa: F401
    activate_conditional_dependencies,
    exists_by_name_only,
    satisfied,
)
from extension_resolver.descriptor_parser import parse_descriptor  # noqa: F401
from extension_resolver.locator import DescriptorLocator  # noqa: F401
from extension_resolver.resolver import ExtensionResolver  # noqa: F401
from extension_resolver.settings_loader import load_resolver_settings  # noqa: F401
from extension_resolver.schemas import *  # noqa: F401,F403
from extension_resolver.schemas import __all__ as SCHEMA_EXPORTS

__all__ = [
    "__version__",
    "ExtensionResolver",
    "DescriptorLocator",
    "parse_descriptor",
    "satisfied",
    "exists_by_name_only",
    "activate_conditional_dependencies",
    "load_resolver_settings",
] + SCHEMA_EXPORTS
