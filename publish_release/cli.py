"""Command-line interface for the release tool.

    publish-release [VERSION] [--dest github|npm] [--no-commit] [--quiet] [--verbose]

VERSION is major, minor, patch, or X.Y.Z (default: patch). Without --dest
the release is published to both GitHub and npm.
"""

from pathlib import Path

import typer
from rich.markup import escape

from publish_release import __version__
from publish_release.config.loader import load_config
from publish_release.exceptions import ConfigurationError
from publish_release.models import PipelineResult, ReleaseRequest
from publish_release.utils.output import configure_logging, console, err_console
from publish_release.workflow import execute_release

app = typer.Typer(
    name="publish-release",
    help="Automatically bump and publish a release to npm and/or GitHub",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"publish-release version {__version__}")
        raise typer.Exit()


def report_failure(
    result: PipelineResult, verbose: bool = False, quiet: bool = False
) -> None:
    """Render a failed result.

    Verbose output wins over quiet: it shows the reason code, the
    captured command diagnostics and a fix hint when one is known.
    """
    if verbose:
        reason = result.reason.value if result.reason else "Error"
        err_console.print(f"[red]{reason}:[/red] {escape(result.message)}")
        if result.details:
            err_console.print(f"[dim]{escape(result.details)}[/dim]", highlight=False)
        if result.fix_hint:
            err_console.print(f"[yellow]Fix:[/yellow] {escape(result.fix_hint)}")
    elif not quiet:
        err_console.print(f"[red]Error:[/red] {escape(result.message)}")


@app.command()
def main(
    version: str | None = typer.Argument(  # noqa: B008
        None,
        help="major, minor, patch, or a specific version X.Y.Z (default: patch)",
        show_default=False,
    ),
    dest: str | None = typer.Option(  # noqa: B008
        None,
        "--dest",
        "-d",
        help="Either npm or github; omit for both",
    ),
    commit: bool = typer.Option(  # noqa: B008
        True,
        "--commit/--no-commit",
        help="Push a 'Bumping to version X.Y.Z' commit before publishing",
    ),
    quiet: bool = typer.Option(  # noqa: B008
        False,
        "--quiet",
        "-q",
        help="Output nothing (suppress STDOUT and STDERR)",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False,
        "--verbose",
        "-v",
        help="Show command diagnostics; errors are reported even with --quiet",
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to configuration file (defaults apply when none is found)",
    ),
    show_version: bool = typer.Option(  # noqa: B008
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Automatically bump and publish a release to npm and/or GitHub.

    VERSION can be:
    - A bump type: major, minor, patch
    - An explicit version: 1.2.3

    Examples:
        publish-release                  # 1.0.0 -> 1.0.1, npm and GitHub
        publish-release minor -d npm     # 1.0.0 -> 1.1.0, npm only
        publish-release 2.0.0 --no-commit
    """
    configure_logging(verbose=verbose, quiet=quiet)
    project_root = Path.cwd()

    try:
        cfg = load_config(config, project_root=project_root)
    except ConfigurationError as e:
        if verbose or not quiet:
            err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=e.exit_code) from None

    request = ReleaseRequest(
        version_token=version,
        destination=dest,
        auto_commit=commit,
        quiet=quiet,
        verbose=verbose,
    )
    result = execute_release(request, config=cfg, project_root=project_root)

    if not result.ok:
        report_failure(result, verbose=verbose, quiet=quiet)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
