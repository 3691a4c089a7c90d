from enum import StrEnum, unique
from typing import Annotated

from pydantic import Field

MAX_PAIR_INDEX = 2**32 - 1

# Pair indexes are u32 on the oracle side.
PairIndex = Annotated[int, Field(strict=True, ge=0, le=MAX_PAIR_INDEX)]


@unique
class ChainType(StrEnum):
    EVM = "evm"
    APTOS = "aptos"
    RADIX = "radix"
    SUI = "sui"
    COSMWASM = "cosmwasm"

    def __repr__(self):
        return f"'{self.value}'"
