from __future__ import annotations
import os, yaml
from pathlib import Path
from typing import Dict, Any, List, Tuple

from loguru import logger

DEFAULT_POLICY_PATH = "config/guardrails.yaml"


class Policy:
    def __init__(self, config_path: str | None = None):
        self.config_path = config_path or os.getenv("FILEDOCK_POLICY", DEFAULT_POLICY_PATH)
        self.cfg: Dict[str, Any] = {}
        self.reload()

    def reload(self) -> None:
        path = Path(self.config_path)
        if not path.exists():
            logger.warning(f"policy file {path} not found; using built-in defaults")
            self.cfg = {}
            return
        with open(path, "r", encoding="utf-8") as f:
            self.cfg = yaml.safe_load(f) or {}

    # ---------- high level gates ----------
    def sandbox_guard(self, target_path: str) -> Tuple[bool, str]:
        sandboxes: List[str] = self.cfg.get("path_sandboxes") or []
        if not sandboxes:
            return True, ""
        path = Path(os.path.expandvars(target_path)).expanduser().resolve()
        for sb in sandboxes:
            root = Path(os.path.expandvars(sb)).expanduser().resolve()
            try:
                path.relative_to(root)
                return True, ""
            except ValueError:
                continue
        return False, f"Path outside sandbox not allowed: {path}"

    def is_command_blocked(self, command: str) -> bool:
        blocked = [c.lower() for c in (self.cfg.get("blocked_commands") or [])]
        return command.lower() in blocked

    # ---------- settings ----------
    def visibility_backend(self) -> str:
        return str((self.cfg.get("visibility") or {}).get("backend", "auto"))

    def defaults(self) -> Dict[str, Any]:
        return self.cfg.get("defaults") or {}


policy = Policy()
