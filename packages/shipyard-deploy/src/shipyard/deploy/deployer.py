"""
Deployer construction.
"""

from dataclasses import dataclass
from typing import Callable

from invoke import Context

from .clients import Clients, new_clients
from .errors import ClientsError, DeployerError

ClientsFactory = Callable[[Context, bool, bool], Clients]


@dataclass
class Deployer:
    """Holds what is needed to apply manifests to a cluster."""

    clients: Clients
    use_gcloud: bool


def create_deployer(
    c: Context,
    use_gcloud: bool,
    verbose: bool,
    *,
    clients_factory: ClientsFactory = new_clients,
) -> Deployer:
    """Create a Deployer with initialized clients.

    Args:
        c: Invoke context
        use_gcloud: Use gcloud for cluster credentials
        verbose: Echo commands as they run
        clients_factory: Builds the client bundle

    Returns:
        The Deployer

    Raises:
        DeployerError: If the clients could not be initialized
    """
    try:
        clients = clients_factory(c, use_gcloud, verbose)
    except ClientsError as e:
        raise DeployerError(f"failed to initialize Clients: {e}") from e
    return Deployer(clients=clients, use_gcloud=use_gcloud)
