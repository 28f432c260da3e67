from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    log_level: str = "INFO"

    # Solana Configuration
    # Left empty so the Solana CLI config (and then --url) decide
    rpc_url: str = ""
    # Seconds; None keeps the AsyncClient default
    rpc_timeout: Optional[float] = None
    commitment: str = "processed"
    vaults_program_id: str = "5j3KuMK2u7KFtoEwiLTexUeooHq5NPQX96rYp5dhuze9"

    # Payer keypair: a solana-keygen JSON file, or a Base58 encoded secret key
    keypair_path: str = ""
    private_key: str = ""

    # Path to the Solana CLI config.yml; empty means the OS default location
    cli_config_path: str = ""

    # Days between interest payments
    duration_days: int = 30

    @property
    def rpc_timeout_kwargs(self) -> dict:
        """Extra AsyncClient kwargs; empty when no timeout is configured."""
        if self.rpc_timeout is None:
            return {}
        return {"timeout": self.rpc_timeout}

    class Config:
        env_prefix = "INTEREST_PAYER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


settings = Settings()
