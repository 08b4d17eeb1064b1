"""
Utilitaires partages pour les commandes CLI de ShelfCheck.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container et fermant ses clients
- print_result : affichage Rich d'un verdict SearchResult
- mask_secret : masquage des cles API pour l'affichage
"""

from functools import wraps
from typing import Optional

from rich.console import Console

from shelfcheck.container import Container, close_clients
from shelfcheck.core.entities.library import SearchResult

console = Console()


def with_container(func):
    """
    Decorateur qui injecte un container en premier argument.

    Les clients HTTP du container sont fermes a la fin de la commande,
    y compris en cas d'erreur.

    Usage:
        @with_container
        async def my_command(container, ...):
            config = container.config()
    """

    @wraps(func)
    async def wrapper(*args, **kwargs):
        container = Container()
        try:
            return await func(container, *args, **kwargs)
        finally:
            await close_clients(container)

    return wrapper


def print_result(result: SearchResult) -> None:
    """Affiche le verdict d'une verification."""
    if not result.found:
        console.print("[red]Code-barres introuvable dans la base UPC.[/red]")
    elif result.in_collection:
        year = f" ({result.year})" if result.year else ""
        console.print(
            f"[green]Deja dans la collection:[/green] {result.match}{year} "
            f"[dim](recherche: {result.title})[/dim]"
        )
    else:
        console.print(f"[yellow]Absent de la collection:[/yellow] {result.title}")


def mask_secret(value: Optional[str]) -> str:
    """Masque une cle API en ne montrant que les 4 derniers caracteres."""
    if not value:
        return ""
    if len(value) <= 4:
        return "••••"
    return "••••" + value[-4:]
