"""termpal commands.

Every module in this package that defines a module-level `command`
(a termpal.core.types.Command) is registered by termpal.registry.discover().
"""
