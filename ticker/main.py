# ticker/main.py
"""
Quote Ticker Main Loop

THIS IS THE ENTRY POINT - Run with: python -m ticker.main

Prints a USDT/USDC quote from the Uniswap V2 router every 3 seconds.
"""

import sys
import logging
import argparse
from datetime import datetime
from pathlib import Path

from web3 import Web3

from ticker.config import ConfigError, TickerConfig, load_config, mask_rpc_url
from ticker.poller import QuotePoller
from ticker.quote_engine import QuoteEngine
from ticker.rpc_health import RPCHealth

logger = logging.getLogger(__name__)

LOG_DIR = Path(__file__).parent.parent / "logs"

BANNER = [
    "  ####  #    #  ####  ##### ######",
    " #    # #    # #    #   #   #",
    " #    # #    # #    #   #   #####",
    " #  # # #    # #    #   #   #",
    "  ### #  ####   ####    #   ######",
    "",
    "Quote Ticker",
    "",
]


# =============================================================================
# LOGGING SETUP
# =============================================================================

def setup_logging(level: str = "INFO"):
    LOG_DIR.mkdir(exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s | %(levelname)-8s | %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(LOG_DIR / f"ticker_{datetime.now().strftime('%Y%m%d')}.log"),
        ],
    )


def show_banner():
    for line in BANNER:
        logger.info(line)


# =============================================================================
# WIRING
# =============================================================================

def build_poller(config: TickerConfig) -> QuotePoller:
    """Connect to the node and build the poller; raises RuntimeError if unreachable"""
    logger.info(f"Connecting to RPC: {mask_rpc_url(config.rpc_url)}")
    w3 = Web3(Web3.HTTPProvider(config.rpc_url))

    ok, status = RPCHealth(w3).check()
    if not ok:
        raise RuntimeError(f"RPC unhealthy: {status}")
    logger.info(f"✅ RPC healthy: {status}")

    engine = QuoteEngine.from_web3(w3, config.router)
    return QuotePoller(engine, config.pairs, delay_ms=config.delay_ms)


# =============================================================================
# ENTRY POINT
# =============================================================================

def main(argv=None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Uniswap V2 quote ticker")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single polling cycle immediately and exit",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to the .env file",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(dotenv_path=args.env_file)
    except ConfigError as e:
        setup_logging(args.log_level or "INFO")
        logger.error(f"❌ Configuration error: {e}")
        return 1

    setup_logging(args.log_level or config.log_level)
    show_banner()
    logger.info("Starting up..")
    logger.debug(f"Loaded {config!r}")

    try:
        poller = build_poller(config)
    except RuntimeError as e:
        logger.error(f"❌ {e}")
        return 1

    try:
        if args.once:
            poller.run_cycle()
        else:
            poller.start()
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")
    finally:
        logger.info("Ticker stopped.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
