from dataclasses import dataclass

from solders.pubkey import Pubkey

from interest_payer.core.constants import ANCHOR_DISCRIMINATOR_SIZE
from interest_payer.core.errors import DecodeError

PUBKEY_SIZE = 32

# Vault layout (after the 8-byte discriminator):
# - token: 32 bytes
# - token_vault_ac: 32 bytes
# - ... further fields, not consumed here
VAULT_MIN_SIZE = ANCHOR_DISCRIMINATOR_SIZE + 2 * PUBKEY_SIZE


@dataclass(frozen=True)
class VaultRecord:
    """The fields of an on-chain Vault account the interest payer needs."""
    token: Pubkey           # interest token mint
    token_vault_ac: Pubkey  # vault's token account for that mint

    @classmethod
    def decode(cls, data: bytes) -> "VaultRecord":
        if len(data) < VAULT_MIN_SIZE:
            raise DecodeError(
                f"Vault account is {len(data)} bytes, expected at least {VAULT_MIN_SIZE}"
            )

        # Skip 8-byte Anchor discriminator
        offset = ANCHOR_DISCRIMINATOR_SIZE
        token = Pubkey.from_bytes(bytes(data[offset : offset + PUBKEY_SIZE]))
        offset += PUBKEY_SIZE
        token_vault_ac = Pubkey.from_bytes(bytes(data[offset : offset + PUBKEY_SIZE]))

        return cls(token=token, token_vault_ac=token_vault_ac)

    def encode(self, discriminator: bytes = bytes(ANCHOR_DISCRIMINATOR_SIZE)) -> bytes:
        """Serialize the consumed fields behind ``discriminator``."""
        if len(discriminator) != ANCHOR_DISCRIMINATOR_SIZE:
            raise ValueError("discriminator must be 8 bytes")
        return discriminator + bytes(self.token) + bytes(self.token_vault_ac)
