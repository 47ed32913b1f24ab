"""ghstatus - read and write GitHub commit statuses for a PR or commit SHA.

Usage:
  ghstatus get    <pr_or_sha> -owner <owner> -repo <repo>
  ghstatus create <pr_or_sha> -owner <owner> -repo <repo>
                  -state {pending|success|error|failure}
                  -desc <text> -context <text> [-url <url>]
  ghstatus help

  <pr_or_sha> is a pull request number or a commit SHA. PR numbers are
  resolved by fetching refs/pull/<n>/head from the git remote, so run the
  tool inside a checkout of the repository. Anything that cannot be fetched
  is used as a SHA.

  Add --format json to get or create to print the API response as JSON.

Environment:
  GITHUB_STATUS_ACCESS_TOKEN  access token (required)
  GITHUB_STATUS_REPO_OWNER    default for -owner
  GITHUB_STATUS_REPO_NAME     default for -repo
  GITHUB_STATUS_USER_AGENT    User-Agent header (default: ghstatus)
  GITHUB_STATUS_API_URL       API root (default: https://api.github.com)
  GITHUB_STATUS_REMOTE        git remote for PR refs (default: origin)
  GITHUB_STATUS_TIMEOUT       git/HTTP timeout in seconds (default: 30)
  DEBUG                       set to log diagnostics to stderr

Examples:
  ghstatus get 1236 -owner acme -repo widget
  ghstatus create 1234 -owner acme -repo widget -state success \\
      -desc "Good Job" -context ci -url https://ci.example.com/1234

Exit status is 0 on success and 1 on any error.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum

import typer
from rich.console import Console
from rich.markup import escape

from ghstatus.config import Config
from ghstatus.errors import PreconditionError, StatusToolError, UsageError, ValidationError
from ghstatus.git.resolver import RefResolver
from ghstatus.github.client import StatusClient
from ghstatus.github.request import build_request
from ghstatus.log import setup_logging
from ghstatus.models import Command, CommandInvocation, FlagSet, StatusState
from ghstatus.render import (
    decode_body,
    parse_created_status,
    parse_status_report,
    render_created_status,
    render_json,
    render_status_report,
)

logger = logging.getLogger(__name__)

PROG_NAME = "ghstatus"
USAGE = __doc__

app = typer.Typer(
    help="Read and write GitHub commit statuses for a PR or commit SHA.",
    add_completion=False,
)
console = Console(highlight=False, emoji=False, soft_wrap=True)

# typer may bundle its own copy of click; its parse errors all derive from this.
CLI_ERRORS = tuple(
    cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "ClickException"
)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


def print_usage() -> None:
    """Print the usage text. Callers decide the exit code."""
    console.print(escape(USAGE.strip()))


@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        print_usage()
        raise typer.Exit(1)


@app.command("help")
def help_command() -> None:
    """Show usage and environment variables."""
    print_usage()


@app.command()
def get(
    ctx: typer.Context,
    identifier: str = typer.Argument(..., metavar="PR_OR_SHA", help="Pull request number or commit SHA"),
    owner: str = typer.Option(None, "-owner", "--owner", help="Repository owner"),
    repo: str = typer.Option(None, "-repo", "--repo", help="Repository name"),
    output_format: OutputFormat = typer.Option(OutputFormat.TEXT, "--format", "-f", help="Output format: text or json"),
) -> None:
    """Show the combined status of a PR head or commit."""
    config: Config = ctx.obj
    flags = FlagSet(owner=owner or config.owner, repo=repo or config.repo)
    _dispatch(CommandInvocation(Command.GET, identifier, flags), config, output_format)


@app.command()
def create(
    ctx: typer.Context,
    identifier: str = typer.Argument(..., metavar="PR_OR_SHA", help="Pull request number or commit SHA"),
    owner: str = typer.Option(None, "-owner", "--owner", help="Repository owner"),
    repo: str = typer.Option(None, "-repo", "--repo", help="Repository name"),
    state: StatusState = typer.Option(None, "-state", "--state", help="pending, success, error or failure"),
    description: str = typer.Option(None, "-desc", "--desc", "--description", help="Short status description"),
    context: str = typer.Option(None, "-context", "--context", help="Status context, e.g. ci/build"),
    target_url: str = typer.Option(None, "-url", "--url", "--target-url", help="Link shown with the status"),
    output_format: OutputFormat = typer.Option(OutputFormat.TEXT, "--format", "-f", help="Output format: text or json"),
) -> None:
    """Attach a status to a PR head or commit."""
    config: Config = ctx.obj
    flags = FlagSet(
        owner=owner or config.owner,
        repo=repo or config.repo,
        state=state,
        description=description or "",
        context=context or "",
        target_url=target_url,
    )
    _dispatch(CommandInvocation(Command.CREATE, identifier, flags), config, output_format)


def _dispatch(invocation: CommandInvocation, config: Config, output_format: OutputFormat) -> None:
    """Validate, resolve, send and print. Raises StatusToolError on failure."""
    if not invocation.identifier.strip():
        raise UsageError("A PR number or commit SHA is required")

    issues = invocation.flags.validate(invocation.command)
    if issues:
        raise ValidationError(issues)

    with RefResolver(remote=config.remote, timeout=config.timeout) as resolver:
        ref = resolver.resolve(invocation.identifier)
    logger.debug(f"Using sha {ref.sha} ({ref.source.value}) for {invocation.identifier}")

    request = build_request(invocation.command, invocation.flags, ref.sha, config)
    client = StatusClient(config)
    try:
        response = client.send(request)
    finally:
        client.close()

    payload = decode_body(response.body)
    if invocation.command is Command.GET:
        lines = render_status_report(invocation.identifier, parse_status_report(payload))
    else:
        lines = render_created_status(invocation.identifier, ref.sha, parse_created_status(payload))

    if output_format is OutputFormat.JSON:
        typer.echo(render_json(payload))
    else:
        for line in lines:
            typer.echo(line)


def check_credentials(config: Config) -> None:
    """Refuse to run without an access token."""
    issues = config.validate()
    if issues:
        raise PreconditionError("; ".join(issues))


def main(argv: list[str] | None = None) -> int:
    """Run one command and return the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    config = Config.load()
    setup_logging(config.debug)
    logger.debug(f"START {PROG_NAME} {' '.join(args)}")

    rc = 1
    try:
        check_credentials(config)
        result = app(args=args, prog_name=PROG_NAME, standalone_mode=False, obj=config)
        rc = result if isinstance(result, int) else 0
    except PreconditionError as e:
        logger.error(str(e))
        print_usage()
    except ValidationError as e:
        for issue in e.issues:
            logger.error(issue)
        logger.error(str(e))
    except StatusToolError as e:
        logger.error(str(e))
        rc = e.exit_code
    except CLI_ERRORS as e:
        logger.error(e.format_message())
    except typer.Abort:
        logger.error("Aborted")
    finally:
        logger.info(f"END {PROG_NAME} {' '.join(args)} rc={rc}")
    return rc


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
