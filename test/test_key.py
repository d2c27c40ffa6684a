#!/usr/bin/env python3
# Copyright (c) 2026 The HWS developers
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

from hwslib.common import SignatureScheme
from hwslib.errors import BadArgumentError
from hwslib.key import (
    DEFAULT_DERIVATION_PATH,
    H_,
    PublicKey,
    check_derivation_path,
    get_derivation_path,
    is_standard_path,
    parse_path,
)

import unittest

ONES_ADDRESS = "0x6bf22d230bc6f17e2dc9bdce220e8696630a067ab5029fb66d91e6ecd74c7c54"

class TestDerivationPath(unittest.TestCase):
    def test_parse_path(self):
        self.assertEqual(parse_path("m/44'/784'/0'/0'/0'"), [H_(44), H_(784), H_(0), H_(0), H_(0)])
        self.assertEqual(parse_path("m/0/1h/2H"), [0, H_(1), H_(2)])
        self.assertEqual(parse_path(""), [])
        for bad in ["m/a", "m/1/-2", "m/2147483648", "m//1", "m/1''"]:
            with self.subTest(path=bad):
                self.assertRaises(ValueError, parse_path, bad)

    def test_check_derivation_path(self):
        self.assertEqual(check_derivation_path("m/44h/784h/0h/0h/0h"), DEFAULT_DERIVATION_PATH)
        self.assertEqual(check_derivation_path("m/44H/784'/1/2"), "m/44'/784'/1/2")
        for bad in ["", "m", "44'/784'", "m/44'/x", "m/4294967295'", None]:
            with self.subTest(path=bad):
                self.assertRaises(BadArgumentError, check_derivation_path, bad)

    def test_get_derivation_path(self):
        self.assertEqual(get_derivation_path(), DEFAULT_DERIVATION_PATH)
        self.assertEqual(get_derivation_path(3, 1, 7), "m/44'/784'/3'/1'/7'")
        self.assertRaises(BadArgumentError, get_derivation_path, -1)

    def test_is_standard_path(self):
        self.assertTrue(is_standard_path(DEFAULT_DERIVATION_PATH))
        self.assertTrue(is_standard_path("m/44h/784h/5h/0h/9h"))
        self.assertFalse(is_standard_path("m/44'/784'/0'/0/0"))
        self.assertFalse(is_standard_path("m/44'/0'/0'/0'/0'"))
        self.assertFalse(is_standard_path("m/44'/784'/0'"))
        self.assertFalse(is_standard_path("garbage"))

class TestPublicKey(unittest.TestCase):
    def test_address(self):
        key = PublicKey(b'\x01' * 32)
        self.assertEqual(key.scheme, SignatureScheme.ED25519)
        self.assertEqual(key.to_address(), ONES_ADDRESS)
        # Always recomputed, always the same
        self.assertEqual(PublicKey(key.to_bytes()).to_address(), key.to_address())
        self.assertNotEqual(PublicKey(b'\x02' * 32).to_address(), ONES_ADDRESS)

    def test_length(self):
        self.assertRaises(ValueError, PublicKey, b'\x01' * 31)
        self.assertRaises(ValueError, PublicKey, b'\x01' * 33)

    def test_base64(self):
        key = PublicKey(b'\x01' * 32)
        self.assertEqual(key.to_base64(), "AQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQE=")
        self.assertEqual(PublicKey.from_base64(key.to_base64()), key)
        self.assertRaises(ValueError, PublicKey.from_base64, "not base64!")

    def test_equality(self):
        self.assertEqual(PublicKey(b'\x01' * 32), PublicKey(bytearray(b'\x01' * 32)))
        self.assertEqual(len({PublicKey(b'\x01' * 32), PublicKey(b'\x01' * 32)}), 1)
        self.assertNotEqual(PublicKey(b'\x01' * 32), b'\x01' * 32)

    def test_printable_dict(self):
        d = PublicKey(b'\x01' * 32).get_printable_dict()
        self.assertEqual(d["scheme"], "ed25519")
        self.assertEqual(d["address"], ONES_ADDRESS)

if __name__ == "__main__":
    unittest.main()
