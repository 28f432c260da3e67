"""
Solana service for paying vault interest.

Signs a single topup_interest instruction with the payer keypair and submits
it with a fixed send policy: skip preflight, the configured commitment
(processed unless the operator asks for more), and no client-side retries.
"""

import logging

import httpx
from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment, Confirmed, Finalized, Processed
from solana.rpc.core import RPCException, UnconfirmedTxError
from solana.rpc.models import TxOpts
from solders.hash import Hash
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.message import Message
from solders.pubkey import Pubkey
from solders.transaction import Transaction

from interest_payer.blockchain.base import ChainReader
from interest_payer.core.constants import VAULTS_PROGRAM_ID
from interest_payer.core.errors import ConfigError, SubmitError
from interest_payer.models.vault import VaultRecord
from interest_payer.services.instructions import (
    build_topup_interest_ix,
    get_associated_token_address,
)

logger = logging.getLogger(__name__)

COMMITMENTS = {
    "processed": Processed,
    "confirmed": Confirmed,
    "finalized": Finalized,
}


def parse_commitment(name: str) -> Commitment:
    try:
        return COMMITMENTS[name.lower()]
    except KeyError:
        raise ConfigError(
            f"Unknown commitment {name!r}, use one of: {', '.join(COMMITMENTS)}"
        ) from None


class InterestPaymentService:
    """Builds, signs and submits topup_interest transactions for one vault."""

    def __init__(
        self,
        payer: Keypair,
        vault: Pubkey,
        commitment: Commitment = Processed,
        program_id: Pubkey = VAULTS_PROGRAM_ID,
    ):
        self._payer = payer
        self._vault = vault
        self._commitment = commitment
        self._program_id = program_id

    @property
    def payer_pubkey(self) -> Pubkey:
        return self._payer.pubkey()

    @property
    def vault(self) -> Pubkey:
        return self._vault

    @property
    def program_id(self) -> Pubkey:
        return self._program_id

    @property
    def commitment(self) -> Commitment:
        return self._commitment

    @property
    def send_options(self) -> TxOpts:
        """
        Skip preflight, no client retries.

        The node ignores preflight_commitment when preflight is skipped; it is
        set to the configured commitment so the request carries one commitment
        level throughout instead of solana-py's finalized default.
        """
        return TxOpts(skip_preflight=True, preflight_commitment=self._commitment)

    # --- On-chain reads ---

    async def get_vault(self, reader: ChainReader) -> VaultRecord:
        """Read and parse the Vault account. Never cached."""
        data = await reader.get_account(str(self._vault))
        record = VaultRecord.decode(data)
        logger.info(
            f"vault {self._vault}: token={record.token}, token_vault_ac={record.token_vault_ac}"
        )
        return record

    # --- Instruction ---

    def build_instruction(self, record: VaultRecord) -> Instruction:
        payer = self.payer_pubkey
        payer_token_account = get_associated_token_address(payer, record.token)
        return build_topup_interest_ix(
            payer=payer,
            vault=self._vault,
            record=record,
            payer_token_account=payer_token_account,
            program_id=self._program_id,
        )

    def sign(self, ix: Instruction, recent_blockhash: Hash) -> Transaction:
        msg = Message.new_with_blockhash([ix], self.payer_pubkey, recent_blockhash)
        tx = Transaction.new_unsigned(msg)
        tx.sign([self._payer], recent_blockhash)
        return tx

    # --- On-chain writes ---

    async def submit(self, client: AsyncClient, tx: Transaction) -> str:
        """
        Send a signed transaction and wait for it at the configured commitment.

        Returns the transaction signature. Raises SubmitError if the cluster
        rejects the transaction, it does not confirm in time, or it fails
        on-chain.
        """
        try:
            resp = await client.send_transaction(tx, opts=self.send_options)
        except (RPCException, SolanaRpcException, httpx.HTTPError, OSError) as e:
            raise SubmitError(str(e)) from e

        signature = resp.value
        sig = str(signature)
        logger.info(f"topup_interest tx sent: {sig}, awaiting {self._commitment} confirmation")

        try:
            status_resp = await client.confirm_transaction(
                signature, commitment=self._commitment
            )
        except (UnconfirmedTxError, RPCException, SolanaRpcException, httpx.HTTPError, OSError) as e:
            raise SubmitError(f"{sig}: {e}") from e

        status = status_resp.value[0] if status_resp.value else None
        if status is not None and status.err is not None:
            raise SubmitError(f"{sig}: {status.err}")

        logger.info(f"topup_interest tx confirmed: {sig}")
        return sig
