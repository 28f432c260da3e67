"""
Interest payment worker.

Pays interest into one vault every ``duration_days`` days. Each tick opens a
fresh RPC connection, re-reads the vault, builds and signs a topup_interest
transaction, submits it and reports the outcome. The loop then sleeps for the
full interval whether the tick succeeded or not: a missed payment is retried
at the next scheduled tick, never sooner.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from interest_payer.blockchain.chains.solana import SolanaChainReader
from interest_payer.core.constants import MS_PER_DAY
from interest_payer.core.errors import InterestPayerError
from interest_payer.services.solana import InterestPaymentService

logger = logging.getLogger(__name__)


class TickState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    BUILDING = "building"
    SUBMITTING = "submitting"
    REPORTING = "reporting"
    SLEEPING = "sleeping"


@dataclass(frozen=True)
class TickOutcome:
    signature: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        if self.ok:
            return f"Transaction sig: {self.signature}"
        return f"Transaction failed. Error: {self.error}"


class InterestPaymentLoop:
    """Drives InterestPaymentService on a fixed cadence, forever by default."""

    def __init__(
        self,
        service: InterestPaymentService,
        rpc_url: str,
        duration_days: int,
        reader_factory: Callable[[str], SolanaChainReader] = SolanaChainReader,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._service = service
        self._rpc_url = rpc_url
        self._duration_days = duration_days
        self._reader_factory = reader_factory
        self._sleep = sleep
        self.state = TickState.IDLE
        self.ticks = 0

    @property
    def interval_ms(self) -> int:
        return self._duration_days * MS_PER_DAY

    def _enter(self, state: TickState) -> None:
        self.state = state
        logger.debug(f"interest_loop: tick {self.ticks} -> {state.value}")

    async def tick(self) -> TickOutcome:
        """Run one payment. Per-tick errors are returned, not raised."""
        try:
            async with self._reader_factory(self._rpc_url) as reader:
                self._enter(TickState.FETCHING)
                record = await self._service.get_vault(reader)

                self._enter(TickState.BUILDING)
                ix = self._service.build_instruction(record)
                recent_blockhash = await reader.get_latest_blockhash()
                tx = self._service.sign(ix, recent_blockhash)

                self._enter(TickState.SUBMITTING)
                sig = await self._service.submit(reader.client, tx)
        except InterestPayerError as e:
            logger.error(f"interest_loop: {type(e).__name__} during {self.state.value}: {e}")
            return TickOutcome(error=str(e))
        except Exception as e:
            logger.exception(f"interest_loop: unhandled error during {self.state.value}")
            return TickOutcome(error=str(e) or type(e).__name__)

        logger.info(f"interest_loop: interest paid, tx={sig}")
        return TickOutcome(signature=sig)

    async def run(self, max_ticks: Optional[int] = None) -> None:
        """Loop forever, or for ``max_ticks`` ticks. Cancellation stops it."""
        if self._duration_days == 0:
            logger.warning("interest_loop: duration is 0 days, ticks will run back to back")

        while max_ticks is None or self.ticks < max_ticks:
            self._enter(TickState.IDLE)
            outcome = await self.tick()

            self._enter(TickState.REPORTING)
            print(outcome.render(), flush=True)
            self.ticks += 1

            if max_ticks is not None and self.ticks >= max_ticks:
                break

            self._enter(TickState.SLEEPING)
            logger.info(f"interest_loop: next payment in {self.interval_ms} ms")
            await self._sleep(self.interval_ms / 1000)

        self._enter(TickState.IDLE)
