#! /usr/bin/env python3

import argparse
import sys
import unittest

from test_commands import TestCLI, TestCommands, TestHandleErrors
from test_connection import TestConnectionCache, TestDeviceConnection
from test_key import TestDerivationPath, TestPublicKey
from test_ledger import TestDeviceErrors, TestLedgerSigner, TestSignerBase
from test_signature import TestSerializedSignature

parser = argparse.ArgumentParser(description='Run automated tests')
parser.add_argument('--verbosity', '-v', help='Test runner verbosity', type=int, default=2)
args = parser.parse_args()

# Run tests
suite = unittest.TestSuite()
for case in [
    TestDerivationPath,
    TestPublicKey,
    TestSerializedSignature,
    TestConnectionCache,
    TestDeviceConnection,
    TestLedgerSigner,
    TestDeviceErrors,
    TestSignerBase,
    TestCommands,
    TestCLI,
    TestHandleErrors,
]:
    suite.addTests(unittest.defaultTestLoader.loadTestsFromTestCase(case))
success = unittest.TextTestRunner(stream=sys.stdout, verbosity=args.verbosity).run(suite).wasSuccessful()

sys.exit(not success)
