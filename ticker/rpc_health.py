# ticker/rpc_health.py
"""
RPC Health Check
Verifies the node is reachable before the poller starts
"""

import time
from web3 import Web3

MAX_RPC_LATENCY = 2.0  # seconds


class RPCHealth:

    def __init__(self, w3: Web3):
        self.w3 = w3

    def check(self) -> tuple:
        """
        Check RPC health
        Returns (is_healthy: bool, status_message: str)
        """
        try:
            if not self.w3.is_connected():
                return False, "RPC not connected"

            start = time.time()
            latest = self.w3.eth.block_number
            latency = time.time() - start

            chain_id = self.w3.eth.chain_id

            if latency > MAX_RPC_LATENCY:
                return True, f"Slow (latency={latency:.2f}s, chain={chain_id}, block={latest})"

            return True, f"OK (latency={latency:.2f}s, chain={chain_id}, block={latest})"

        except Exception as e:
            return False, str(e)
