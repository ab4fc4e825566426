#!/usr/bin/env python3
"""
Demo: WSON text → Document → canonical WSON → JSON / YAML.

Shows the full workflow:
1. Parse a commented WSON document
2. Inspect the classified values
3. Re-emit canonical WSON and check it parses back to the same Document
4. Export to JSON and YAML
"""

import wson
from wson.convert import to_json, to_yaml
from wson.examples import EXAMPLE_TEXT


def main():
    print("=" * 80)
    print("WSON ROUND-TRIP DEMO")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Parse
    # =========================================================================
    print("\n1. PARSING WSON...")
    document = wson.loads(EXAMPLE_TEXT)
    print(f"   ✓ Top-level keys: {len(document)}")

    # =========================================================================
    # STEP 2: Inspect
    # =========================================================================
    print("\n2. CLASSIFIED VALUES...")
    for key, value in document.items():
        print(f"   {key:<12} {value.kind.value:<9} {value!r}")

    # =========================================================================
    # STEP 3: Canonical WSON
    # =========================================================================
    print("\n3. CANONICAL WSON...")
    text = wson.dumps(document)
    print(text)
    if wson.loads(text) == document:
        print("   ✓ Round-trip equal")
    else:
        print("   ✗ Round-trip mismatch: re-parsed document differs")

    # =========================================================================
    # STEP 4: Export
    # =========================================================================
    print("\n4. JSON EXPORT...")
    print(to_json(document))
    print("\n5. YAML EXPORT...")
    print(to_yaml(document))

    print("=" * 80)


if __name__ == "__main__":
    main()
