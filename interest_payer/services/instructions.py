"""
TopupInterest instruction construction.

Pure functions: no RPC, no signing. The account order and flags are fixed by
the vaults program and are validated on-chain, so they are spelled out here
one by one rather than derived.
"""

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from spl.token.instructions import get_associated_token_address as _spl_ata

from interest_payer.core.constants import (
    SYSTEM_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
    TOPUP_INTEREST_DISCRIMINATOR,
    VAULTS_PROGRAM_ID,
)
from interest_payer.models.vault import VaultRecord


def get_associated_token_address(wallet: Pubkey, mint: Pubkey) -> Pubkey:
    """Canonical SPL token account for ``wallet`` holding ``mint``."""
    return _spl_ata(wallet, mint)


def build_topup_interest_ix(
    payer: Pubkey,
    vault: Pubkey,
    record: VaultRecord,
    payer_token_account: Pubkey,
    program_id: Pubkey = VAULTS_PROGRAM_ID,
) -> Instruction:
    """Build the topup_interest instruction (no args, discriminator only)."""
    accounts = [
        # The program expects itself as a writable account
        AccountMeta(pubkey=program_id, is_signer=False, is_writable=True),
        AccountMeta(pubkey=payer, is_signer=True, is_writable=True),
        AccountMeta(pubkey=record.token, is_signer=False, is_writable=False),
        AccountMeta(pubkey=vault, is_signer=False, is_writable=True),
        AccountMeta(pubkey=payer_token_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=record.token_vault_ac, is_signer=False, is_writable=True),
        AccountMeta(pubkey=TOKEN_PROGRAM_ID, is_signer=False, is_writable=False),
        AccountMeta(pubkey=SYSTEM_PROGRAM_ID, is_signer=False, is_writable=False),
    ]

    return Instruction(program_id, TOPUP_INTEREST_DISCRIMINATOR, accounts)
