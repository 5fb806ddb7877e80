from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import yaml

from ..core.board import MAX_BOARD_SIZE, MIN_BOARD_SIZE


@dataclass
class EngineConfig:
    BOARD_SIZE: int = 19
    STRICT: bool = False
    MAX_MOVES: Optional[int] = None
    LOG: Dict[str, Any] = field(default_factory=lambda: {"level": "INFO"})


def load_config(path: str) -> EngineConfig:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    unknown = set(cfg) - set(EngineConfig.__dataclass_fields__)
    if unknown:
        raise ValueError(f"{path}: unknown config keys {sorted(unknown)}")
    log = {"level": "INFO"}
    log.update(cfg.get("LOG") or {})  # 旧配置没有 LOG 段
    cfg["LOG"] = log
    out = EngineConfig(**cfg)
    if not (MIN_BOARD_SIZE <= int(out.BOARD_SIZE) <= MAX_BOARD_SIZE):
        raise ValueError(f"{path}: BOARD_SIZE must be in [{MIN_BOARD_SIZE}, {MAX_BOARD_SIZE}]")
    return out
