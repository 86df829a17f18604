import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

CONFIG_ENV = "DIRTREE_CONFIG"


@dataclass(frozen=True)
class ReportConfig:
    output_name: str
    follow_symlinks: bool
    log_level: str
    progress_every: int


DEFAULT_CONFIG = ReportConfig(
    output_name="directory-tree.html",
    follow_symlinks=True,
    log_level="INFO",
    progress_every=1000,
)


def _bool_setting(data: dict, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


def _int_setting(data: dict, key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


def load_config(path: Optional[Path]) -> ReportConfig:
    if path is None:
        env_path = os.environ.get(CONFIG_ENV, "").strip()
        path = Path(env_path) if env_path else None
    if path is None or not path.exists():
        return DEFAULT_CONFIG
    data = json.loads(path.read_text(encoding="utf-8"))
    output_name = str(data.get("output_name", DEFAULT_CONFIG.output_name))
    if not output_name or os.path.basename(output_name) != output_name:
        raise ValueError(f"output_name must be a plain file name, got {output_name!r}")
    return ReportConfig(
        output_name=output_name,
        follow_symlinks=_bool_setting(data, "follow_symlinks", DEFAULT_CONFIG.follow_symlinks),
        log_level=str(data.get("log_level", DEFAULT_CONFIG.log_level)).upper(),
        progress_every=max(1, _int_setting(data, "progress_every", DEFAULT_CONFIG.progress_every)),
    )


def with_output_name(config: ReportConfig, output_name: str) -> ReportConfig:
    if not output_name or os.path.basename(output_name) != output_name:
        raise ValueError(f"output_name must be a plain file name, got {output_name!r}")
    return replace(config, output_name=output_name)
