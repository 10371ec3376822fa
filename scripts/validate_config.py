#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mtdata.config.loader import ConfigLoader
from mtdata.config.validation import ConfigValidator, ValidationError


def configured_symbols(loader: ConfigLoader) -> List[str]:
    """Symbols that carry overrides in symbols.yaml."""
    symbols_file = loader.config_dir / "symbols.yaml"
    if not symbols_file.exists():
        return []
    with open(symbols_file) as f:
        data = yaml.safe_load(f) or {}
    return sorted((data.get("symbols") or {}).keys())


def validate_symbol_config(loader: ConfigLoader, symbol: str) -> List[ValidationError]:
    """Validate configuration for a specific symbol."""
    config = loader.merge_config(symbol)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("Validating mtdata configuration...")

    loader = ConfigLoader.create()

    # Defaults are checked through a symbol without overrides
    symbols = configured_symbols(loader) + ["UNKNOWN-SYMBOL"]

    all_valid = True
    for symbol in symbols:
        print(f"\nValidating {symbol}...")
        errors = validate_symbol_config(loader, symbol)

        if errors:
            print(f"Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  - {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"{symbol} configuration is valid")

    if all_valid:
        print("\nAll configuration validation passed")
        sys.exit(0)
    else:
        print("\nConfiguration validation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
