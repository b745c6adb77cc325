# ticker/config.py
"""
Ticker Configuration
Environment is read once at startup into an immutable TickerConfig
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple
from urllib.parse import urlsplit, urlunsplit

from dotenv import load_dotenv

from ticker.pairs import DEFAULT_PAIRS, UNISWAP_V2, Pair, RouterEndpoint
from ticker.poller import DEFAULT_DELAY_MS

# -----------------------------
# Environment
# -----------------------------
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"

INFURA_KEY_VAR = "ETHEREUM_RPC_INFURA_KEY"
RPC_URL_VAR = "RPC_URL"
LOG_LEVEL_VAR = "LOG_LEVEL"

INFURA_URL_TEMPLATE = "https://mainnet.infura.io/v3/{key}"


class ConfigError(RuntimeError):
    """Missing or invalid startup configuration"""


@dataclass(frozen=True)
class TickerConfig:
    rpc_url: str
    router: RouterEndpoint = UNISWAP_V2
    pairs: Tuple[Pair, ...] = DEFAULT_PAIRS
    delay_ms: int = DEFAULT_DELAY_MS
    log_level: str = "INFO"

    def __repr__(self) -> str:
        # rpc_url carries the API key
        return (
            f"TickerConfig(rpc_url={mask_rpc_url(self.rpc_url)!r}, "
            f"router={self.router.address}, pairs={[str(p) for p in self.pairs]}, "
            f"delay_ms={self.delay_ms}, log_level={self.log_level!r})"
        )


def mask_rpc_url(url: str) -> str:
    """
    Hide the last path segment (where Infura puts the key), any query
    string and any userinfo; scheme, host and port stay readable
    """
    parts = urlsplit(url)

    netloc = parts.netloc
    if "@" in netloc:
        netloc = "***@" + netloc.rpartition("@")[2]

    segments = parts.path.rstrip("/").split("/")
    if segments[-1]:
        segments[-1] = f"{segments[-1][:4]}***"

    query = "***" if parts.query else ""
    return urlunsplit((parts.scheme, netloc, "/".join(segments), query, ""))


def load_config(
    env: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[Path] = None,
) -> TickerConfig:
    """
    Build the config from env (or os.environ after loading .env)
    Fails fast with ConfigError if no RPC credential is available
    """
    if env is None:
        load_dotenv(dotenv_path or ENV_PATH)
        env = os.environ

    rpc_url = (env.get(RPC_URL_VAR) or "").strip()
    if not rpc_url:
        key = (env.get(INFURA_KEY_VAR) or "").strip()
        if not key:
            raise ConfigError(f"{INFURA_KEY_VAR} not set (or set {RPC_URL_VAR})")
        rpc_url = INFURA_URL_TEMPLATE.format(key=key)

    if not rpc_url.startswith(("http://", "https://")):
        raise ConfigError(f"{RPC_URL_VAR} must be an http(s) URL")

    log_level = (env.get(LOG_LEVEL_VAR) or "INFO").strip().upper()

    return TickerConfig(rpc_url=rpc_url, log_level=log_level)
