#!filepath: timefixture/cli.py
from typing import Optional

import typer
from rich import print
from rich.console import Console
from rich.markup import escape

from timefixture import __version__
from timefixture.config.app_config import AppConfig
from timefixture.generator import FixtureGenerator
from timefixture.utils.errors import TimeFixtureError
from timefixture.utils.logger import init_logging
from timefixture.verify import verify_fixture

app = typer.Typer(help="Timestamp fixture generator", add_completion=False)
err_console = Console(stderr=True)


def _report(e: Exception) -> None:
    """诊断信息写 stderr，不打印 traceback"""
    err_console.print(f"[red]error:[/red] {escape(str(e))}", soft_wrap=True)


def _generate(config: Optional[str]) -> None:
    try:
        cfg = AppConfig.load(config)
        init_logging(cfg.log)

        result = FixtureGenerator(cfg.fixture).write()
    except TimeFixtureError as e:
        _report(e)
        raise typer.Exit(code=1)

    print(f"[green]Wrote {result.records} records → {escape(str(result.path))}[/green]")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """
    不带子命令时等同于 generate（默认参数生成 ./time.txt）
    """
    if ctx.invoked_subcommand is None:
        _generate(None)


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def generate(
        config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
):
    """
    生成 fixture 文件
    """
    _generate(config)


@app.command()
def verify(
        path: Optional[str] = typer.Argument(None, help="fixture file (default: configured output)"),
        config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
):
    """
    逐行校验 fixture 文件
    """
    try:
        cfg = AppConfig.load(config)
        init_logging(cfg.log)
        report = verify_fixture(path or cfg.fixture.output, step_seconds=cfg.fixture.step_seconds)
    except TimeFixtureError as e:
        _report(e)
        raise typer.Exit(code=1)

    last = report.last.formatted if report.last else "-"
    print(f"[green]{report.lines} lines ok[/green] (last: {last})")


if __name__ == "__main__":
    app()

# python -m timefixture.cli
