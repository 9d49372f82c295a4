"""
shipyard.deploy - Support utilities for rendering and applying Kubernetes manifests.

Submodules:
- shipyard.deploy.branches - Branch gating for conditional deployments
- shipyard.deploy.cli - The shipyard-deploy command line
- shipyard.deploy.clients - kubectl and gcloud clients
- shipyard.deploy.config - Layered configuration
- shipyard.deploy.delimited - "key=value" argument parsing
- shipyard.deploy.deployer - Deployer construction
- shipyard.deploy.errors - Exceptions
- shipyard.deploy.location - Output location resolution
- shipyard.deploy.tools - External tool detection
"""

__version__ = "0.1.0"
