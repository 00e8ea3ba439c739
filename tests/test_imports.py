"""
Test script to validate the public imports of the rifc package
"""

import sys
import traceback


def test_rifc_imports():
    """Test RIFC module imports"""
    from rifc.constants import DEFAULT_SYMBOLS, DEFAULT_KEY, DEFAULT_EPSILON, DEMO_BITS
    assert len(DEMO_BITS) == 256
    assert DEFAULT_SYMBOLS == "0123456789ABCDEF"

    from rifc.roots import complex_root, find_branch
    from rifc.alphabet import Alphabet
    from rifc.codec import store, load, RIFCCodec

    # Quick functional test
    codec = RIFCCodec()
    assert codec.roundtrip("0110") == "0110"


def test_config_imports():
    """Test configuration module imports"""
    from rifc.config import load_config, parse_complex
    from rifc.factory import CodecFactory

    codec = CodecFactory.create_codec({'RIFC_KEY': '-0.75+0.09j'})
    assert codec.key == complex(-0.75, 0.09)


def test_package_exports():
    """Every name in __all__ resolves"""
    import rifc
    for name in rifc.__all__:
        assert hasattr(rifc, name), name


def main():
    """Run all import tests"""
    print("=" * 60)
    print("IMPORT TEST SUITE")
    print("=" * 60)

    tests = {
        "RIFC": test_rifc_imports,
        "Config": test_config_imports,
        "Exports": test_package_exports
    }

    results = {}
    for module, test in tests.items():
        try:
            test()
            results[module] = True
        except Exception:
            traceback.print_exc()
            results[module] = False

    for module, success in results.items():
        status = "PASS" if success else "FAIL"
        print(f"{module:20s}: {status}")

    all_passed = all(results.values())
    print("=" * 60)
    print("ALL TESTS PASSED" if all_passed else "SOME TESTS FAILED")
    print("=" * 60)

    return all_passed


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
