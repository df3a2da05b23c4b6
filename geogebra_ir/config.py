"""Configuration helpers for workspaces and archive output."""

from __future__ import annotations

import copy
import zipfile
from dataclasses import dataclass


@dataclass
class WorkspaceConfig:
    label_prefix: str = "elem"
    compression: int = zipfile.ZIP_DEFLATED
    pretty_print: bool = False


_WORKSPACE_CONFIG = WorkspaceConfig()


def get_workspace_config() -> WorkspaceConfig:
    return copy.deepcopy(_WORKSPACE_CONFIG)


def set_workspace_config(config: WorkspaceConfig) -> None:
    global _WORKSPACE_CONFIG
    _WORKSPACE_CONFIG = copy.deepcopy(config)
