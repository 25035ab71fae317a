"""Runtime settings, read once from the environment at startup."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

PRODUCTS_FILE = "products.json"
CUSTOMERS_FILE = "customers.json"
RECEIPTS_FILE = "receipts.json"


@dataclass(frozen=True)
class Settings:
    """Where data and logs live, and how verbose logging is.

    ``POS_DATA_DIR`` defaults to the current working directory, which is
    where the JSON documents have always been kept.
    """

    data_dir: Path
    log_dir: Path
    log_level: int = logging.INFO

    @property
    def products_path(self) -> Path:
        return self.data_dir / PRODUCTS_FILE

    @property
    def customers_path(self) -> Path:
        return self.data_dir / CUSTOMERS_FILE

    @property
    def receipts_path(self) -> Path:
        return self.data_dir / RECEIPTS_FILE

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        data_dir = Path(env.get("POS_DATA_DIR") or Path.cwd()).expanduser()
        log_dir = Path(env.get("POS_LOG_DIR") or data_dir / "logs").expanduser()
        return Settings(
            data_dir=data_dir,
            log_dir=log_dir,
            log_level=_parse_level(env.get("POS_LOG_LEVEL", "INFO")),
        )


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO
