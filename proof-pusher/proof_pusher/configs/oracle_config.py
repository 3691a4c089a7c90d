from typing import List

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Annotated

from pull_sdk.common.types.types import PairIndex


class OracleConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    pair: str
    price_index: PairIndex
    resolution_ms: Annotated[int, Field(strict=True, gt=0)]

    @field_validator("pair", mode="before")
    def validate_pair(cls, value: str) -> str:
        if not isinstance(value, str) or "/" not in value:
            raise ValueError(f"Pair must look like BASE/QUOTE, got {value!r}")
        base, quote = value.replace(" ", "").upper().split("/", 1)
        if not base or not quote:
            raise ValueError(f"Pair must look like BASE/QUOTE, got {value!r}")
        return f"{base}/{quote}"


class PusherConfig(BaseModel):
    """
    Feeds kept up to date by the proof pusher.

    Example of YAML file:

    .. code-block:: yaml

        oracles:
          - pair: ETH/USDT
            price_index: 1
            resolution_ms: 60000
    """

    oracles: Annotated[List[OracleConfig], Field(min_length=1)]

    @field_validator("oracles")
    def validate_unique_indexes(cls, value: List[OracleConfig]) -> List[OracleConfig]:
        indexes = [oracle.price_index for oracle in value]
        duplicates = sorted({index for index in indexes if indexes.count(index) > 1})
        if duplicates:
            raise ValueError(f"Duplicated price indexes: {duplicates}")
        return value

    @classmethod
    def from_yaml(cls, path: str) -> "PusherConfig":
        with open(path, "r") as file:
            pusher_config = yaml.safe_load(file)
        return cls(**(pusher_config or {}))
