"""Sous-package CLI commands - re-exporte les commandes publiques."""

from medialinker.adapters.cli.commands.fix_names_command import fix_names
from medialinker.adapters.cli.commands.link_commands import Variant, link

__all__ = [
    "Variant",
    "link",
    "fix_names",
]
