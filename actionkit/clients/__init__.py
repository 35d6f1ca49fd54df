"""Concrete collaborator implementations (JSON-RPC reads, HTTP transport)."""

from actionkit.clients.http import HttpxSender
from actionkit.clients.web3_reader import Web3ContractReader

__all__ = ["HttpxSender", "Web3ContractReader"]
