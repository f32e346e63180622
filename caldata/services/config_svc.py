# caldata/services/config_svc.py
import os

import yaml

from ..db import get_db_path
from .window_svc import WindowDefaults

DEFAULTS = {
    "db_path": "",   # 留空则使用 ~/Library/Calendars/Calendar.sqlitedb
    "window_days_before": "1",
    "window_weeks_after": "12",
    "log_level": "INFO",
    "export_dir": "exports",
}


def _to_int(x, default: str) -> int:
    try:
        return int(x)
    except (TypeError, ValueError):
        return int(default)


def read_config_yaml(path: str) -> dict:
    """读取 YAML 配置文件；文件不存在时返回空 dict。"""
    if not path or not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"config file {path} is not valid YAML: {e}") from e
    except OSError as e:
        raise ValueError(f"config file {path} cannot be read: {e}") from e
    if not isinstance(cfg, dict):
        raise ValueError(f"config file {path} must contain a mapping")
    return cfg


def get_config(path: str = "config.yaml") -> dict:
    cfg = read_config_yaml(path)

    # 转换为正确类型 & 默认兜底
    out = {
        "db_path": get_db_path(cfg.get("db_path") or DEFAULTS["db_path"]),
        "window_days_before": _to_int(cfg.get("window_days_before"), DEFAULTS["window_days_before"]),
        "window_weeks_after": _to_int(cfg.get("window_weeks_after"), DEFAULTS["window_weeks_after"]),
        "log_level": str(cfg.get("log_level") or DEFAULTS["log_level"]).upper(),
        "export_dir": str(cfg.get("export_dir") or DEFAULTS["export_dir"]),
    }
    return out


def window_defaults(cfg: dict) -> WindowDefaults:
    return WindowDefaults(days_before=cfg["window_days_before"], weeks_after=cfg["window_weeks_after"])
