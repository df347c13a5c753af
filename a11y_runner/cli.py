"""Typer CLI for running accessibility tests and writing reports."""
import asyncio

import typer
# loading variables from .env file as defaults
from dotenv import load_dotenv

from .config import DEFAULT_CONFIG_PATH
from .runner import run_tests

load_dotenv()

app = typer.Typer(add_completion=False)


@app.command()
def run(
    config: str = typer.Option(DEFAULT_CONFIG_PATH, "--config", "-c", help="path to config file to use (YAML, JSON, or a .py module defining get_config(); replaces a11y.config.js)"),
):
    """Audit every configured URL and write report.html and simplifiedList.csv."""
    asyncio.run(run_tests(config))


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
