import typer
import uvicorn
from typing import Optional

from harness.runner.client import ApiClient
from harness.runner.orchestrator import FLOWS, FlowOrchestrator
from harness.runner.reporter import ConsoleSink, DisplayMode, ResultReporter
from harness.core import state_machine as sm
from harness.settings import settings

app = typer.Typer(help="Mock lifecycle API and its sequential flow runner")


@app.command()
def serve(
    host: str = typer.Option(settings.HOST, "--host", help="Interface to bind"),
    port: int = typer.Option(settings.PORT, "--port", help="Port to listen on"),
):
    """
    Starts the mock API (cadastro, login, alteracao, pedidos).
    """
    uvicorn.run("harness.main:app", host=host, port=port)


@app.command()
def run(
    flow: str = typer.Argument(..., help=f"One of: {', '.join(FLOWS)}"),
    mode: str = typer.Option(settings.HARNESS_MODE, "--mode", help="monitor (full detail) or client (redacted)"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Mock API address"),
):
    """
    Runs one flow against a live mock API and prints every record.
    Exit code is 0 when the flow completes, 1 when it aborts.
    """
    if flow not in FLOWS:
        typer.echo(f"unknown flow {flow!r}; expected one of: {', '.join(FLOWS)}", err=True)
        raise typer.Exit(code=2)

    display_mode = DisplayMode.from_param(mode)
    typer.echo(f"Modo {'Monitor' if display_mode == DisplayMode.MONITOR else 'Cliente'}")

    reporter = ResultReporter(display_mode, ConsoleSink(echo=typer.echo))
    with ApiClient(base_url) as client:
        state = FlowOrchestrator(client, reporter).run(flow)

    typer.echo("Concluído" if state.status == sm.COMPLETED else "Falha")
    raise typer.Exit(code=0 if state.status == sm.COMPLETED else 1)


def main():
    app()

if __name__ == "__main__":
    main()
