from solders.pubkey import Pubkey
from solders.system_program import ID as SYSTEM_PROGRAM_ID
from spl.token.constants import ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID

# Vaults program (must match the deployed program)
VAULTS_PROGRAM_ID = Pubkey.from_string("5j3KuMK2u7KFtoEwiLTexUeooHq5NPQX96rYp5dhuze9")

# Anchor account discriminator size
ANCHOR_DISCRIMINATOR_SIZE = 8

# Anchor discriminator for "topup_interest"
TOPUP_INTEREST_DISCRIMINATOR = bytes([196, 215, 224, 233, 237, 212, 2, 56])

MS_PER_DAY = 86_400 * 1_000

__all__ = [
    "ANCHOR_DISCRIMINATOR_SIZE",
    "ASSOCIATED_TOKEN_PROGRAM_ID",
    "MS_PER_DAY",
    "SYSTEM_PROGRAM_ID",
    "TOKEN_PROGRAM_ID",
    "TOPUP_INTEREST_DISCRIMINATOR",
    "VAULTS_PROGRAM_ID",
]
