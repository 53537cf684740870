import logging
from pathlib import Path

import typer

from textgen.config import settings
from textgen.services import Mode, generate_text, get_stats, train_model


app = typer.Typer(add_completion=False)


def _configure_logging():
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def generate(
    window_length: int = typer.Argument(..., min=1, help="Characters per context window."),
    seed_text: str = typer.Argument(..., help="Text to start from."),
    length: int = typer.Argument(..., min=0, help="Number of characters to generate."),
    mode: Mode = typer.Argument(..., help="fixed for a reproducible run, random otherwise."),
    corpus: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Training text file."),
    encoding: str = typer.Option(settings.encoding, help="Corpus file encoding."),
    dump: bool = typer.Option(False, "--dump", help="Write the trained table to stderr."),
    stats: bool = typer.Option(False, "--stats", help="Write model statistics to stderr."),
):
    """
    Train on CORPUS and print SEED_TEXT extended by LENGTH sampled characters.

    Put options first and separate the arguments with -- when SEED_TEXT starts
    with a dash, e.g. textgen --dump -- 3 -ab 20 fixed corpus.txt
    """
    _configure_logging()
    model = train_model(window_length, mode, corpus, encoding=encoding)
    if dump:
        typer.echo(model.dump(), err=True, nl=False)
    if stats:
        typer.echo(get_stats(model).model_dump_json(), err=True)
    typer.echo(generate_text(model, seed_text, length))


if __name__ == "__main__":
    app()
