"""
Configuration for the shipyard-deploy command line.

Settings live under the ``deploy`` key of invoke's layered config, so they
can come from ``shipyard.yaml`` files or ``SHIPYARD_DEPLOY_*`` environment
variables, and are overridden by command line flags.

Example shipyard.yaml:

    deploy:
      output: gs://my-bucket/manifests
      branches: [main, release]
"""

from dataclasses import dataclass, field
from typing import Any

from invoke import Config, Context
from invoke.config import merge_dicts

DEFAULT_OUTPUT = "./output"


@dataclass
class DeployConfig:
    """Settings shared by the deploy tasks."""

    output: str = DEFAULT_OUTPUT
    # Empty means every branch may deploy
    branches: list[str] = field(default_factory=list)
    # None means use gcloud if it is on PATH
    gcloud: bool | None = None
    verbose: bool = False

    @classmethod
    def from_context(cls, c: Context) -> "DeployConfig":
        data: Any = c.config.get("deploy", None) or {}
        defaults = cls()
        return cls(
            output=data.get("output", defaults.output) or defaults.output,
            branches=list(data.get("branches", None) or []),
            gcloud=_as_bool(data.get("gcloud", None)),
            verbose=bool(_as_bool(data.get("verbose", None))),
        )


def _as_bool(value: Any) -> bool | None:
    # Environment overrides of None defaults arrive as strings
    if value is None or isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "y", "on")


class ShipyardConfig(Config):
    """Invoke config with shipyard's file and env prefix and defaults."""

    prefix = "shipyard"

    @staticmethod
    def global_defaults() -> dict[str, Any]:
        return merge_dicts(
            Config.global_defaults(),
            {
                "deploy": {
                    "output": DEFAULT_OUTPUT,
                    "branches": [],
                    "gcloud": None,
                    "verbose": None,
                }
            },
        )
