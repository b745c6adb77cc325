# ticker/poller.py
"""
Quote Poller
Delay-then-run loop: wait, quote every pair in order, print, repeat
"""

import logging
import time
from enum import Enum
from typing import Callable, List, Sequence

from ticker.pairs import Pair
from ticker.quote_engine import Quote, QuoteEngine

logger = logging.getLogger(__name__)

SEPARATOR = "-----------------------"
DEFAULT_DELAY_MS = 3_000


class PollerState(Enum):
    IDLE = "idle"          # waiting for the next cycle
    POLLING = "polling"    # iterating pairs


class QuotePoller:

    def __init__(
        self,
        engine: QuoteEngine,
        pairs: Sequence[Pair],
        delay_ms: int = DEFAULT_DELAY_MS,
        sleep: Callable[[float], None] = time.sleep,
        emit: Callable[[str], None] = print,
    ):
        self.engine = engine
        self.pairs = tuple(pairs)
        self.delay_ms = delay_ms
        self._sleep = sleep
        self._emit = emit
        self.state = PollerState.IDLE
        self.cycles = 0

    def run_cycle(self) -> List[Quote]:
        """
        Quote each pair sequentially; a failing pair is logged and skipped
        """
        self.state = PollerState.POLLING
        quotes = []

        try:
            for pair in self.pairs:
                try:
                    quote = self.engine.quote(pair)
                except Exception as e:
                    logger.error(f"Quote failed for {pair}: {e}")
                    continue

                quotes.append(quote)
                self._emit(quote.line())

            self._emit(SEPARATOR)
        finally:
            self.cycles += 1
            self.state = PollerState.IDLE

        logger.debug(f"Cycle {self.cycles}: {len(quotes)}/{len(self.pairs)} pairs quoted")
        return quotes

    def start(self):
        """
        Poll forever. The first cycle runs after the first delay, and each
        delay is measured from the end of the previous cycle.
        """
        logger.info(f"Polling {len(self.pairs)} pairs every {self.delay_ms}ms")

        while True:
            logger.debug(f"Sleeping for {self.delay_ms}ms")
            self._sleep(self.delay_ms / 1000)
            self.run_cycle()
