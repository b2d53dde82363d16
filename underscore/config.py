"""Runtime settings.

Settings are merged from (later wins):
    - CONFIG_DEFAULT below
    - an optional dotenv file (path from UNDERSCORE_DOTENV, default .env.underscore)
    - the process environment
"""

import os
from dataclasses import dataclass
from typing import Any, Final

from dotenv import dotenv_values

CONFIG_DEFAULT: Final = dict(
    UNDERSCORE_DELIMITER=".",
    UNDERSCORE_WILDCARD="*",
    UNDERSCORE_JSON="orjson",
    UNDERSCORE_LOG="0",
)

DOTENV_PATH: Final = os.environ.get("UNDERSCORE_DOTENV", ".env.underscore")

# populate config with defaults if they aren't in the dotenv file or the environment
CONFIG = {**CONFIG_DEFAULT, **dotenv_values(DOTENV_PATH), **os.environ}  # type: ignore


def truthy(val: Any) -> bool:
    """Environment flags arrive as strings, so "0" and "false" must count as off."""
    if isinstance(val, str):
        return val.strip().lower() not in {"", "0", "false", "no", "off"}

    return bool(val)


@dataclass(slots=True, frozen=True)
class Settings:
    delimiter: str = "."
    wildcard: str = "*"
    json: str = "orjson"
    log: bool = False

    def __post_init__(self) -> None:
        assert self.delimiter, "Path delimiter can't be empty"
        assert self.wildcard != self.delimiter, "Wildcard can't be the delimiter"

    @classmethod
    def from_mapping(cls, config: dict[str, Any]) -> "Settings":
        return cls(
            delimiter=str(config.get("UNDERSCORE_DELIMITER") or "."),
            wildcard=str(config.get("UNDERSCORE_WILDCARD") or "*"),
            json=str(config.get("UNDERSCORE_JSON") or "orjson").strip().lower(),
            log=truthy(config.get("UNDERSCORE_LOG")),
        )


SETTINGS: Final = Settings.from_mapping(CONFIG)
