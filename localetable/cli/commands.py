"""CLI commands for loading locale files and looking up keys."""

from pathlib import Path

import click
from dotenv import load_dotenv

from localetable.config import Settings
from localetable.detection import get_language_detector
from localetable.errors import LocaleError
from localetable.table import LocaleTable
from localetable.tracing.logger import setup_tracing


@click.group()
@click.pass_context
def main(ctx: click.Context):
    """Look up localized strings in XML or CFG locale files."""
    load_dotenv()
    settings = Settings()
    setup_tracing(settings.log_level, console=settings.tracing_enabled)
    ctx.obj = settings


@main.command()
@click.argument("key")
@click.option(
    "--file",
    "locale_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Locale file (.xml, .cfg or .ini); defaults to LOCALETABLE_LOCALE_FILE",
)
@click.option(
    "--lang",
    default=None,
    help="Language code; defaults to the detected user language",
)
@click.pass_obj
def lookup(settings: Settings, key: str, locale_file: Path | None, lang: str | None):
    """Print the translation of KEY."""
    path = locale_file or Path(settings.locale_file)
    table = LocaleTable(get_language_detector(settings))
    try:
        table.load(path)
        value = table.get_key_lang(key, lang) if lang else table.get_key(key)
    except LocaleError as e:
        raise click.ClickException(str(e))
    click.echo(value)


@main.command()
@click.pass_obj
def detect(settings: Settings):
    """Print the detected user language code."""
    click.echo(get_language_detector(settings).detect())


if __name__ == "__main__":
    main()
