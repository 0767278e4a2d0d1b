"""Compile the marketplace contract with its deployment parameters applied."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from marketplace_config import MarketplaceConfig

logger = logging.getLogger(__name__)

CONTRACT_FILE = Path(__file__).resolve().parent / "marketplace.py"


def contract_parameters(config: MarketplaceConfig) -> list:
    """Parameters applied to the validator, in signature order."""
    return [config.to_params()]


def build_contract(config: MarketplaceConfig, out_dir: Path):
    # imported here so loading config does not pull in the compiler
    from opshin.builder import PlutusContract, build

    logger.info("compiling %s with %d authorizer(s)", CONTRACT_FILE.name, len(config.authorizers))
    script = build(str(CONTRACT_FILE), *contract_parameters(config))
    contract = PlutusContract(script, title="seatmint_marketplace")
    contract.dump(out_dir)
    logger.info("wrote contract artifacts to %s", out_dir)
    return contract


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Build the Seatmint marketplace listing contract")
    parser.add_argument("--config", help="JSON file with authorizers and fee_address (default: environment)")
    parser.add_argument("--out", default="build/marketplace", help="artifact directory")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = MarketplaceConfig.from_file(args.config) if args.config else MarketplaceConfig.from_env()
    build_contract(config, Path(args.out))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
