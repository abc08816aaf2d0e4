#!/usr/bin/env python3
"""
Solidity ABI to TypeScript definitions generator

Reads a Solidity ABI (or a Hardhat/Truffle compilation output) and generates:
  1. A SolidityContract interface with one signature per function
  2. An interface for every struct used by those signatures

Usage:
    python generate_definitions.py Token.json
    python generate_definitions.py --abi artifacts/Token.json --output types/Token.d.ts
"""

import sys
from pathlib import Path

# Add parent directory to path so abigen package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from abigen.cli import main


if __name__ == "__main__":
    sys.exit(main())
