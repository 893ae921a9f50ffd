from __future__ import annotations

import json

import typer
from colorama import Fore, Style, just_fix_windows_console

from ytmusic_lyrics.config import load_config, save_config
from ytmusic_lyrics.logging_setup import setup_logging
from ytmusic_lyrics.sources.service import LyricsLookupService
from ytmusic_lyrics.sources.types import InternalError, LyricsResult, NotFound
from ytmusic_lyrics.sources.ytmusic import YTMusicProvider


app = typer.Typer(no_args_is_help=True, add_completion=False)


def build_service() -> LyricsLookupService:
    return LyricsLookupService(YTMusicProvider(load_config()))


@app.command()
def lookup(
    title: str,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Search YouTube Music for TITLE and print the lyrics of the first hit."""
    setup_logging(debug)
    result = build_service().lookup(title)

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif isinstance(result, LyricsResult):
        typer.echo(f"{Fore.CYAN}{Style.BRIGHT}{result.artist_name} - {result.track_name}{Style.RESET_ALL}")
        if result.artwork_url:
            typer.echo(f"{Style.DIM}{result.artwork_url}{Style.RESET_ALL}")
        typer.echo()
        typer.echo(result.lyrics)
    else:
        color = Fore.YELLOW if isinstance(result, NotFound) else Fore.RED
        typer.echo(f"{color}{result.response}: {result.message}{Style.RESET_ALL}", err=True)

    if isinstance(result, NotFound):
        raise typer.Exit(code=1)
    if isinstance(result, InternalError):
        raise typer.Exit(code=2)


@app.command()
def config(
    language: str | None = typer.Option(None, "--language", help="YouTube Music interface language (e.g. en, de)"),
    location: str | None = typer.Option(None, "--location", help="Country code for search results (e.g. US)"),
):
    """Save provider locale settings, or show the current ones."""
    if language is None and location is None:
        cfg = load_config()
        typer.echo(f"config_dir={cfg.config_dir}")
        typer.echo(f"language={cfg.language}")
        typer.echo(f"location={cfg.location or '-'}")
        typer.echo(f"search_limit={cfg.search_limit}")
        typer.echo(f"request_timeout_s={cfg.request_timeout_s}")
        return

    path = save_config(language=language, location=location)
    typer.echo(f"Config saved: {path}")


def main() -> None:
    just_fix_windows_console()
    app()


if __name__ == "__main__":
    main()
