"""
Clients for the command line tools a deployment talks to.
"""

from dataclasses import dataclass

from invoke import Context

from .errors import ClientsError
from .tools import in_path


@dataclass
class ClusterInfo:
    """Current cluster connection info."""

    server: str
    ca_data: str


class Kubectl:
    """Thin wrapper running kubectl through an invoke context."""

    binary = "kubectl"

    def __init__(self, c: Context, verbose: bool = False):
        self.c = c
        self.verbose = verbose

    def _output(self, args: str) -> str:
        result = self.c.run(f"{self.binary} {args}", hide=True, echo=self.verbose)
        assert result is not None
        return result.stdout.strip()

    def current_context(self) -> str:
        return self._output("config current-context")

    def _cluster_field(self, name: str, raw: bool = False) -> str:
        flags = "--minify --raw" if raw else "--minify"
        return self._output(f"config view {flags} -o jsonpath='{{.clusters[0].cluster.{name}}}'")

    def cluster_info(self) -> ClusterInfo:
        """Server URL and base64 CA data of the cluster in the current context."""
        return ClusterInfo(
            server=self._cluster_field("server"),
            ca_data=self._cluster_field("certificate-authority-data", raw=True),
        )


class Gcloud:
    """Thin wrapper running gcloud through an invoke context."""

    binary = "gcloud"

    def __init__(self, c: Context, verbose: bool = False):
        self.c = c
        self.verbose = verbose

    def account(self) -> str:
        result = self.c.run(
            f"{self.binary} config get-value account",
            hide=True,
            echo=self.verbose,
        )
        assert result is not None
        return result.stdout.strip()


@dataclass
class Clients:
    """Bundle of clients used by a Deployer."""

    kubectl: Kubectl
    gcloud: Gcloud | None = None


def new_clients(c: Context, use_gcloud: bool, verbose: bool = False) -> Clients:
    """Create the client bundle.

    Args:
        c: Invoke context
        use_gcloud: Also create a gcloud client
        verbose: Echo commands as they run

    Returns:
        Initialized Clients

    Raises:
        ClientsError: If a required binary is not on PATH
    """
    required = [Kubectl.binary]
    if use_gcloud:
        required.append(Gcloud.binary)
    missing = [b for b in required if not in_path(b)]
    if missing:
        raise ClientsError(f"required tools not found in PATH: {', '.join(missing)}")

    return Clients(
        kubectl=Kubectl(c, verbose),
        gcloud=Gcloud(c, verbose) if use_gcloud else None,
    )
