"""Web3Voice gateway: IPFS pinning, speech-to-text and NEAR NFT minting."""

__version__ = "0.1.0"
