"""
Point d'entrée CLI de ShelfCheck.

Configure le logging et fournit les commandes CLI (vérification ponctuelle
et lancement du serveur web).
"""

import asyncio
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.table import Table

from . import __version__
from .cli import console, mask_secret, print_result, with_container
from .config import Settings
from .core.errors import ShelfCheckError
from .logging_config import configure_logging

app = typer.Typer(
    name="shelfcheck",
    help="Vérifie si un film est déjà dans la vidéothèque Jellyfin",
)


@with_container
async def _check_title_async(container, title: str) -> None:
    """Implementation async de la commande check-title."""
    result = await container.search_orchestrator().search(title)
    print_result(result)


@with_container
async def _check_barcode_async(container, barcode: str) -> None:
    """Implementation async de la commande check-barcode."""
    result = await container.barcode_check_service().check(barcode)
    print_result(result)


@with_container
async def _search_collection_async(container, term: str) -> None:
    """Implementation async de la commande search-collection."""
    items = await container.collection_matcher().search(term.strip())
    if not items:
        console.print(f"[yellow]Aucun film pour '{term}'[/yellow]")
        return

    table = Table(title=f"Collection: '{term}'")
    table.add_column("Titre")
    table.add_column("Année", justify="right")
    table.add_column("ID", style="dim")
    for item in items:
        table.add_row(item.title, str(item.year or ""), item.id)
    console.print(table)


def _run(coro) -> None:
    """Execute une commande async ; une erreur bloquante termine avec le code 1."""
    try:
        asyncio.run(coro)
    except ShelfCheckError as e:
        logger.error(f"Echec ({e.kind.value}): {e}")
        console.print("[red]Erreur serveur, voir les logs pour le détail.[/red]")
        raise typer.Exit(code=1)


@app.command(name="check-title")
def check_title(
    title: Annotated[str, typer.Argument(help="Titre du film (non nettoyé)")],
) -> None:
    """Vérifie un titre saisi manuellement."""
    _run(_check_title_async(title))


@app.command(name="check-barcode")
def check_barcode(
    barcode: Annotated[str, typer.Argument(help="Code UPC/EAN du disque")],
) -> None:
    """Vérifie le film correspondant à un code-barres."""
    _run(_check_barcode_async(barcode))


@app.command(name="search-collection")
def search_collection(
    term: Annotated[str, typer.Argument(help="Terme recherché dans la vidéothèque")],
) -> None:
    """Liste les films de la vidéothèque correspondant au terme (sans TMDB)."""
    _run(_search_collection_async(term))


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    typer.echo(f"Jellyfin : {config.jellyfin_url}")
    typer.echo(f"Clé Jellyfin : {mask_secret(config.jellyfin_api_key) or 'absente'}")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"Langue TMDB : {config.tmdb_language}")
    typer.echo(f"Mots-clés parasites : {config.junk_keywords}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"ShelfCheck v{__version__}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web ShelfCheck."""
    import uvicorn

    config = Settings()
    host = host or config.host
    port = port or config.port
    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("shelfcheck.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = Settings()
    configure_logging(settings)
    logger.info("Démarrage de ShelfCheck", version=__version__)
    app()


if __name__ == "__main__":
    main()
