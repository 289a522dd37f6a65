"""
Seismic Token Bot - ERC20 Token Deployment and Transfer Tool

Deploys a fixed ERC20 token contract to the Seismic devnet and optionally
sends a batch of token transfers to freshly generated addresses.
"""

__version__ = "0.1.0"
