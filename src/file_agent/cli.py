import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(name="file-agent", help="Confined file operations for agent tool calling.")
console = Console()

TOOL_ICONS = {
    "createFile": "📄",
    "readFile": "👁 ",
    "editFile": "✏️ ",
    "deleteFile": "🗑 ",
}


def _setup_logging(verbose: bool) -> None:
    from file_agent.config import settings

    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(name)s | %(levelname)s | %(message)s")


def _build_service(base_dir: Path | None):
    from file_agent.config import get_base_dir, get_encoding
    from file_agent.services.local_service import LocalFileService

    return LocalFileService(base_dir=base_dir or get_base_dir(), encoding=get_encoding())


def _read_content(content: str | None, from_file: Path | None) -> str | None:
    if from_file is not None:
        if content is not None:
            console.print("[red]Use either --content or --from-file, not both.[/red]")
            raise typer.Exit(1)
        return from_file.read_text()
    return content


def _run(operation: str, file_name: str, content: str | None, base_dir: Path | None, verbose: bool) -> None:
    """Execute one operation through the tool table and print the metadata."""
    from file_agent.tools.file_tools import build_registry

    _setup_logging(verbose)
    registry = build_registry(_build_service(base_dir))

    args = {"fileName": file_name}
    if content is not None:
        args["fileContent"] = content
    result = registry.execute(operation, args)

    console.print_json(json.dumps(result))
    if result.get("error"):
        raise typer.Exit(1)


@app.command()
def create(
    file_name: str = typer.Argument(..., help="Name of the file to create"),
    content: str = typer.Option(None, "--content", "-c", help="File content"),
    from_file: Path = typer.Option(None, "--from-file", help="Read the content from a local file"),
    base_dir: Path = typer.Option(None, help="Base directory (default: working directory)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable detailed logging"),
) -> None:
    """Create a new file. Fails if it already exists."""
    _run("createFile", file_name, _read_content(content, from_file), base_dir, verbose)


@app.command()
def read(
    file_name: str = typer.Argument(..., help="Name of the file to read"),
    base_dir: Path = typer.Option(None, help="Base directory (default: working directory)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable detailed logging"),
) -> None:
    """Read the contents of a file."""
    _run("readFile", file_name, None, base_dir, verbose)


@app.command()
def edit(
    file_name: str = typer.Argument(..., help="Name of the file to overwrite"),
    content: str = typer.Option(None, "--content", "-c", help="New file content"),
    from_file: Path = typer.Option(None, "--from-file", help="Read the content from a local file"),
    base_dir: Path = typer.Option(None, help="Base directory (default: working directory)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable detailed logging"),
) -> None:
    """Overwrite an existing file."""
    _run("editFile", file_name, _read_content(content, from_file), base_dir, verbose)


@app.command()
def delete(
    file_name: str = typer.Argument(..., help="Name of the file to delete"),
    base_dir: Path = typer.Option(None, help="Base directory (default: working directory)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable detailed logging"),
) -> None:
    """Delete a file and print what was removed."""
    _run("deleteFile", file_name, None, base_dir, verbose)


@app.command()
def tools(
    base_dir: Path = typer.Option(None, help="Base directory (default: working directory)"),
) -> None:
    """Show the tool table exposed to agents."""
    from file_agent.tools.file_tools import build_registry

    service = _build_service(base_dir)
    registry = build_registry(service)

    table = Table(title="Available tools", border_style="dim", show_lines=False)
    table.add_column("Tool", style="bold cyan", no_wrap=True)
    table.add_column("Description", style="dim")
    for tool in registry.list_all():
        icon = TOOL_ICONS.get(tool.name, "🔧")
        params = tool.parameters.get("properties", {})
        param_names = ", ".join(params.keys()) if params else ""
        table.add_row(f"{icon} {tool.name}({param_names})", tool.description)
    console.print(table)
    console.print(f"[dim]Base directory: {service.base_dir}[/dim]")


@app.command()
def serve(
    host: str = typer.Option(None, help="Host to bind (default: from settings)"),
    port: int = typer.Option(None, help="Port to listen on (default: from settings)"),
    base_dir: Path = typer.Option(None, help="Base directory (default: working directory)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable detailed logging"),
) -> None:
    """Start the HTTP tool server."""
    import uvicorn

    from file_agent.config import settings
    from file_agent.server import create_app

    _setup_logging(verbose)
    fastapi_app = create_app(_build_service(base_dir))
    uvicorn.run(fastapi_app, host=host or settings.host, port=port or settings.port)


if __name__ == "__main__":
    app()
