from typing import Annotated, Any, ClassVar, Dict, List, Type

from pydantic import BaseModel, BeforeValidator, ConfigDict

from pull_sdk.common.exceptions import DecodeError
from pull_sdk.common.types.types import ChainType, PairIndex
from pull_sdk.common.utils import bytes_to_hex, coerce_bytes

# Proofs are served either as an hexadecimal string or as a list of bytes.
ProofBytes = Annotated[bytes, BeforeValidator(coerce_bytes)]


class PullRequest(BaseModel):
    """
    Request sent to the ``/get_proof`` endpoint of the oracle service.

    :param pair_indexes: Indexes of the pairs we want a proof for. Can be empty,
                         in which case the oracle answers with an empty proof set.
    :param chain_type: Destination chain family, decides the shape of the response.
    """

    model_config = ConfigDict(frozen=True)

    pair_indexes: List[PairIndex]
    chain_type: ChainType

    def serialize(self) -> Dict[str, Any]:
        return {
            "pair_indexes": list(self.pair_indexes),
            "chain_type": self.chain_type.value,
        }


class PullResponse(BaseModel):
    """
    Base class of the proofs returned by the oracle service.
    There is one subclass per chain family, registered in ``RESPONSE_TYPES``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    chain_type: ClassVar[ChainType]

    pair_indexes: List[PairIndex]

    @classmethod
    def for_chain(cls, chain_type: ChainType | str) -> Type["PullResponse"]:
        """
        Return the response model used for the given chain type.

        :raises DecodeError: if no shape is known for this chain type
        """
        try:
            return RESPONSE_TYPES[ChainType(chain_type)]
        except (KeyError, ValueError) as e:
            raise DecodeError(
                f"No response shape registered for chain type {chain_type!r}"
            ) from e


class _BytesProofResponse(PullResponse):
    proof_bytes: ProofBytes

    @property
    def proof_hex(self) -> str:
        return bytes_to_hex(self.proof_bytes)

    def serialize(self) -> Dict[str, Any]:
        return {
            "pair_indexes": list(self.pair_indexes),
            "proof_bytes": self.proof_hex,
        }


class PullResponseEvm(_BytesProofResponse):
    chain_type: ClassVar[ChainType] = ChainType.EVM


class PullResponseAptos(_BytesProofResponse):
    chain_type: ClassVar[ChainType] = ChainType.APTOS


class PullResponseCosmWasm(_BytesProofResponse):
    chain_type: ClassVar[ChainType] = ChainType.COSMWASM


class PullResponseSui(_BytesProofResponse):
    """
    Sui proofs reference the on-chain objects needed by the verifier
    in addition to the proof itself.
    """

    chain_type: ClassVar[ChainType] = ChainType.SUI

    dkg_object: str
    oracle_holder_object: str
    merkle_root_object: str

    def serialize(self) -> Dict[str, Any]:
        return {
            **super().serialize(),
            "dkg_object": self.dkg_object,
            "oracle_holder_object": self.oracle_holder_object,
            "merkle_root_object": self.merkle_root_object,
        }


class PullResponseRadix(PullResponse):
    """
    Radix proofs are kept as the string served by the oracle.
    """

    chain_type: ClassVar[ChainType] = ChainType.RADIX

    proof_bytes: str

    def serialize(self) -> Dict[str, Any]:
        return {
            "pair_indexes": list(self.pair_indexes),
            "proof_bytes": self.proof_bytes,
        }


RESPONSE_TYPES: Dict[ChainType, Type[PullResponse]] = {
    ChainType.EVM: PullResponseEvm,
    ChainType.APTOS: PullResponseAptos,
    ChainType.SUI: PullResponseSui,
    ChainType.RADIX: PullResponseRadix,
    ChainType.COSMWASM: PullResponseCosmWasm,
}
