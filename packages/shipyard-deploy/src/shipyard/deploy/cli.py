"""
shipyard-deploy command line.

    shipyard-deploy prepare --output gs://bucket/out --label team=web
    shipyard-deploy run --only-branch main --link "Docs=https://docs.example.com"
"""

from dataclasses import dataclass
from typing import NoReturn

from invoke import Collection, Context, Exit, Program, task
from rich.console import Console
from rich.table import Table

from . import __version__
from .branches import branch_in_branches, current_branch
from .config import DeployConfig, ShipyardConfig
from .delimited import Link, parse_links, parse_map
from .deployer import create_deployer
from .errors import DelimitedEntryError, DeployerError, UnrecoverableError
from .location import OutputPaths
from .tools import gcloud_in_path

console = Console()

_FLAG_HELP = {
    "output": "Output root, a local directory or a URI such as gs://bucket/path",
    "label": "Label to add to resources, as key=value (repeatable)",
    "annotation": "Annotation to add to resources, as key=value (repeatable)",
    "link": "Application link, as description=url (repeatable)",
    "branch": "Current branch (default: ask git)",
    "only-branch": "Only deploy from this branch (repeatable)",
}


def _exit(msg: str) -> NoReturn:
    raise SystemExit(msg)


@dataclass
class DeployPlan:
    """Everything derived from the command line before deploying."""

    paths: OutputPaths
    labels: dict[str, str]
    annotations: dict[str, str]
    links: list[Link]


def _branch_allowed(c: Context, branch: str | None, branches: list[str]) -> bool:
    if not branches:
        return True
    branch = branch or current_branch(c)
    if branch is not None and branch_in_branches(branch, branches):
        return True
    console.print(
        f"[dim]Branch '{branch or '<unknown>'}' is not one of: {', '.join(branches)}. Nothing to do.[/dim]"
    )
    return False


def _plan(
    c: Context,
    output: str | None,
    label: list[str] | None,
    annotation: list[str] | None,
    link: list[str] | None,
    branch: str | None,
    only_branch: list[str] | None,
) -> DeployPlan | None:
    cfg = DeployConfig.from_context(c)
    if not _branch_allowed(c, branch, list(only_branch or cfg.branches)):
        return None

    try:
        paths = OutputPaths.from_root(output or cfg.output)
    except UnrecoverableError as e:
        _exit(f"Error: {e}")

    try:
        plan = DeployPlan(
            paths=paths,
            labels=parse_map(label or []),
            annotations=parse_map(annotation or []),
            links=parse_links(link or []),
        )
    except DelimitedEntryError as e:
        raise Exit(f"Error: {e}", code=1) from e
    return plan


def _report(plan: DeployPlan) -> None:
    console.print(f"[bold]Suggested configs:[/bold] {plan.paths.suggested}")
    console.print(f"[bold]Expanded configs:[/bold]  {plan.paths.expanded}")

    if not (plan.labels or plan.annotations or plan.links):
        return
    table = Table("Kind", "Key", "Value")
    for k, v in plan.labels.items():
        table.add_row("label", k, v)
    for k, v in plan.annotations.items():
        table.add_row("annotation", k, v)
    for link in plan.links:
        table.add_row("link", link.description, link.url)
    console.print(table)


@task(
    iterable=["label", "annotation", "link", "only_branch"],
    help=dict(_FLAG_HELP),
)
def prepare(
    c,
    output=None,
    label=None,
    annotation=None,
    link=None,
    branch=None,
    only_branch=None,
):
    """Resolve output locations and deployment metadata."""
    plan = _plan(c, output, label, annotation, link, branch, only_branch)
    if plan is None:
        return
    _report(plan)


@task(
    iterable=["label", "annotation", "link", "only_branch"],
    help={
        **_FLAG_HELP,
        "gcloud": "Use gcloud for cluster credentials",
        "no-gcloud": "Do not use gcloud even if it is installed",
        "verbose": "Echo the commands being run",
    },
)
def run(
    c,
    output=None,
    label=None,
    annotation=None,
    link=None,
    branch=None,
    only_branch=None,
    gcloud=False,
    no_gcloud=False,
    verbose=False,
):
    """Prepare, then connect to the cluster the manifests will be applied to."""
    if gcloud and no_gcloud:
        raise Exit("Error: --gcloud and --no-gcloud are mutually exclusive", code=1)

    plan = _plan(c, output, label, annotation, link, branch, only_branch)
    if plan is None:
        return
    _report(plan)

    cfg = DeployConfig.from_context(c)
    if gcloud:
        use_gcloud = True
    elif no_gcloud:
        use_gcloud = False
    elif cfg.gcloud is not None:
        use_gcloud = cfg.gcloud
    else:
        use_gcloud = gcloud_in_path()

    try:
        deployer = create_deployer(c, use_gcloud, verbose or cfg.verbose)
    except DeployerError as e:
        raise Exit(f"Error: {e}", code=1) from e

    kubectl = deployer.clients.kubectl
    context = kubectl.current_context()
    server = kubectl.cluster_info().server
    console.print(f"[green]✅ Ready to deploy to context '{context}' ({server})[/green]")
    if deployer.clients.gcloud is not None:
        console.print(f"[blue]ℹ gcloud account: {deployer.clients.gcloud.account()}[/blue]")


namespace = Collection(prepare, run)

program = Program(
    name="shipyard-deploy",
    binary="shipyard-deploy",
    namespace=namespace,
    version=__version__,
    config_class=ShipyardConfig,
)
