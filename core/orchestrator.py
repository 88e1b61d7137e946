"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.policy_runtime import build_revision_config, load_effective_config, output_settings
from core.revision_runner import RevisionRunner
from status.config import RevisionConfig
from vcs.svn_backend import SvnBackend


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    revision_config: RevisionConfig
    output: dict[str, str]
    runner: RevisionRunner


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None) -> None:
        # Built-in defaults ship inside the package under config/.
        default_root = Path(__file__).resolve().parent
        self.root = (root or default_root).resolve()

    def build(
        self,
        user_config: Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> RuntimeBundle:
        overrides = overrides or {}
        config = load_effective_config(self.root, user_config)
        if overrides.get("format"):
            config["output"] = {**(config.get("output") or {}), "format": overrides["format"]}

        revision_config = build_revision_config(config, overrides.get("revision"))
        backend = SvnBackend(executable=self._svn_executable(config))
        output = output_settings(config)
        return RuntimeBundle(
            config=config,
            revision_config=revision_config,
            output=output,
            runner=RevisionRunner(
                backend=backend,
                config=revision_config,
                property_prefix=output["property_prefix"],
            ),
        )

    @staticmethod
    def _svn_executable(config: dict[str, Any]) -> str:
        backend_cfg = config.get("backend") or {}
        return str(backend_cfg.get("svn_executable", "svn"))
