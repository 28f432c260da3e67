#!/usr/bin/env python3
"""
interest-payer: pay interest into a vault on a fixed cadence.

Calls the topup_interest instruction of the vaults program every DURATION
days, signed by the payer keypair. Runs until stopped.

Usage:
    interest-payer --vault VAULT [--url URL] [--duration DAYS] [KEYPAIR_PATH]

Examples:
    interest-payer -v 7xKX...q4Ns
    interest-payer -v 7xKX...q4Ns -u devnet -d 1 ~/.config/solana/payer.json
    interest-payer -v 7xKX...q4Ns -u http://my.node:8899 --commitment confirmed

Missing --url / KEYPAIR_PATH fall back to INTEREST_PAYER_* environment
settings, then to the Solana CLI config file.
"""

import argparse
import asyncio
import logging
import signal
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from solana.rpc.commitment import Commitment
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from interest_payer.core.cli_config import CliConfig, load_cli_config
from interest_payer.core.config import settings
from interest_payer.core.console import err, log, warn
from interest_payer.core.errors import ConfigError
from interest_payer.core.keypair import get_keypair_from_base58, get_keypair_from_path
from interest_payer.core.networks import resolve_network
from interest_payer.services.solana import COMMITMENTS, InterestPaymentService, parse_commitment
from interest_payer.workers.interest_loop import InterestPaymentLoop

logger = logging.getLogger(__name__)

U16_MAX = 65_535
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _pubkey_arg(value: str) -> Pubkey:
    try:
        return Pubkey.from_string(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid address: {value!r}") from None


def _u16_arg(value: str) -> int:
    try:
        days = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of days: {value!r}") from None
    if not 0 <= days <= U16_MAX:
        raise argparse.ArgumentTypeError(f"duration must be between 0 and {U16_MAX}")
    return days


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="interest-payer",
        description="Periodically pay interest into a vault",
    )
    parser.add_argument(
        "-u", "--url",
        help="RPC endpoint URL or cluster alias (devnet, mainnet, localnet)",
    )
    parser.add_argument(
        "-v", "--vault", required=True, type=_pubkey_arg,
        help="Vault account the interest is paid into",
    )
    parser.add_argument(
        "-d", "--duration", type=_u16_arg, default=settings.duration_days,
        help="Days between payments (default: %(default)s)",
    )
    parser.add_argument(
        "keypair_path", nargs="?",
        help="Payer keypair file (default: Solana CLI config keypair)",
    )
    parser.add_argument(
        "-c", "--commitment", choices=COMMITMENTS.keys(), default=settings.commitment,
        help="Commitment to wait for after sending (default: %(default)s)",
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="Solana CLI config file (default: ~/.config/solana/cli/config.yml)",
    )
    parser.add_argument(
        "--once", action="store_true",
        help="Make a single payment and exit",
    )
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    return parser


@dataclass
class RunConfig:
    """Startup values after CLI, environment and config file are merged."""
    payer: Keypair
    vault: Pubkey
    rpc_url: str
    duration_days: int
    commitment: Commitment
    program_id: Pubkey


def resolve_keypair(keypair_path: Optional[str], cli_config: CliConfig) -> Keypair:
    if keypair_path:
        return get_keypair_from_path(keypair_path)
    if settings.keypair_path:
        return get_keypair_from_path(settings.keypair_path)
    if settings.private_key:
        return get_keypair_from_base58(settings.private_key)
    return get_keypair_from_path(cli_config.keypair_path)


def resolve_config(args: argparse.Namespace) -> RunConfig:
    """Merge arguments with settings and the Solana CLI config. Raises ConfigError."""
    config_path = args.config
    if config_path is None and settings.cli_config_path:
        config_path = Path(settings.cli_config_path)
    cli_config = load_cli_config(config_path)

    payer = resolve_keypair(args.keypair_path, cli_config)
    rpc_url = resolve_network(args.url or settings.rpc_url or cli_config.json_rpc_url)
    commitment = parse_commitment(args.commitment)
    # -d is range checked by argparse, INTEREST_PAYER_DURATION_DAYS is not
    if not 0 <= args.duration <= U16_MAX:
        raise ConfigError(f"Invalid duration {args.duration}: must be between 0 and {U16_MAX} days")
    try:
        program_id = Pubkey.from_string(settings.vaults_program_id)
    except ValueError:
        raise ConfigError(f"Invalid vaults program id: {settings.vaults_program_id!r}") from None

    return RunConfig(
        payer=payer,
        vault=args.vault,
        rpc_url=rpc_url,
        duration_days=args.duration,
        commitment=commitment,
        program_id=program_id,
    )


async def serve(runner: InterestPaymentLoop, once: bool = False) -> None:
    """Run the payment loop; SIGTERM cancels it like Ctrl-C does."""
    task = asyncio.current_task()
    try:
        asyncio.get_running_loop().add_signal_handler(signal.SIGTERM, task.cancel)
    except (NotImplementedError, RuntimeError):
        # No signal handlers on Windows event loops
        pass

    await runner.run(max_ticks=1 if once else None)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check choices against an environment-supplied default
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level: {args.log_level!r}")

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
    except ConfigError as e:
        err(str(e))
        return 1

    print(f"Payer key: {config.payer.pubkey()}")
    print(f"Vault: {config.vault}")
    print(f"Runs every {config.duration_days} days")
    log(f"RPC: {config.rpc_url} (commitment: {config.commitment})")
    if config.duration_days == 0:
        warn("Duration is 0 days: payments will be retried back to back")

    service = InterestPaymentService(
        payer=config.payer,
        vault=config.vault,
        commitment=config.commitment,
        program_id=config.program_id,
    )
    runner = InterestPaymentLoop(
        service=service,
        rpc_url=config.rpc_url,
        duration_days=config.duration_days,
    )

    try:
        asyncio.run(serve(runner, once=args.once))
    except (KeyboardInterrupt, asyncio.CancelledError):
        logger.info("interest_payer: stopped")
        log("Stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
