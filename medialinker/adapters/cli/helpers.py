"""
Utilitaires partages pour les commandes CLI de MediaLinker.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container initialise
"""

from functools import wraps

from rich.console import Console

from medialinker.container import Container

console = Console()


def with_container():
    """
    Decorateur qui injecte un container initialise en premier argument.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator
