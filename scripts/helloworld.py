#!/usr/bin/env python3
"""Print a greeting read from ``config.yaml``, creating the file on first run."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from pydantic import BaseModel

from graze import LoadError, load_or_write_default
from graze.formats import model_deserializer, model_serializer, yaml_deserializer, yaml_serializer


class Config(BaseModel):
    message: str = "Hello, world!"
    amount: int = 3


def load_config(path: str | Path) -> Config:
    return load_or_write_default(
        path,
        model_deserializer(Config, yaml_deserializer),
        Config,
        model_serializer(yaml_serializer()),
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", default="config.yaml", help="Path to the configuration file.")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except LoadError as exc:
        print("An error occurred while loading the configuration", file=sys.stderr)
        print(exc, file=sys.stderr)
        return 1

    for _ in range(config.amount):
        print(config.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
