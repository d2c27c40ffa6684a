#! /usr/bin/env python3

from .commands import (
    get_signer,
    getaddress,
    getpublickey,
    signdata,
    verifysignature,
)
from .common import Network
from .errors import (
    BadArgumentError,
    handle_errors,
    BAD_ARGUMENT,
    HELP_TEXT,
    MISSING_ARGUMENTS,
    NO_CONNECTOR,
)
from .key import (
    DEFAULT_DERIVATION_PATH,
    get_derivation_path,
)
from .signer import Signer
from . import __version__

import argparse
import base64
import binascii
import logging
import json
import sys

from typing import (
    Any,
    Dict,
    IO,
    List,
    NoReturn,
    Optional,
)


def decode_payload(args: argparse.Namespace, data: str) -> bytes:
    try:
        if args.base64:
            return base64.b64decode(data, validate=True)
        if data.startswith('0x'):
            data = data[2:]
        return bytes.fromhex(data)
    except (binascii.Error, ValueError):
        raise BadArgumentError('Payload is not valid {}'.format('base64' if args.base64 else 'hex'))

def getaddress_handler(args: argparse.Namespace, signer: Signer) -> Dict[str, str]:
    return getaddress(signer)

def getpublickey_handler(args: argparse.Namespace, signer: Signer) -> Dict[str, str]:
    return getpublickey(signer)

def signdata_handler(args: argparse.Namespace, signer: Signer) -> Dict[str, str]:
    return signdata(signer, decode_payload(args, args.payload))

def verifysignature_handler(args: argparse.Namespace) -> Dict[str, Any]:
    return verifysignature(decode_payload(args, args.message), args.signature)

class HWSHelpFormatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawDescriptionHelpFormatter):
    pass

class HWSArgumentParser(argparse.ArgumentParser):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.formatter_class = HWSHelpFormatter

    def print_usage(self, file: Optional[IO[str]] = None) -> None:
        if file is None:
            file = sys.stderr
        super().print_usage(file)

    def print_help(self, file: Optional[IO[str]] = None) -> None:
        if file is None:
            file = sys.stderr
        super().print_help(file)
        error = {'error': 'Help text requested', 'code': HELP_TEXT}
        print(json.dumps(error))

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        args = {'prog': self.prog, 'message': message}
        error = {'error': '%(prog)s: error: %(message)s' % args, 'code': MISSING_ARGUMENTS}
        print(json.dumps(error))
        self.exit(2)

def get_parser() -> HWSArgumentParser:
    parser = HWSArgumentParser(description='Hardware Signer, version {}.\nSign with a key held on a hardware device. Responses are in JSON format.'.format(__version__))
    parser.add_argument('--connector', '-c', help='The connector that opens the device transport, given as ``package.module:callable``')
    path_group = parser.add_mutually_exclusive_group()
    path_group.add_argument('--path', help='The derivation path of the signing key. Defaults to {}'.format(DEFAULT_DERIVATION_PATH))
    path_group.add_argument('--account', help='Use the standard derivation path for this account number', type=int)
    parser.add_argument('--network', help='Select network to work with', type=Network.argparse, choices=list(Network), default=Network.MAINNET) # type: ignore
    parser.add_argument('--base64', help='Payloads and messages are base64 instead of hex', action='store_true')
    parser.add_argument('--debug', help='Print debug statements', action='store_true')
    parser.add_argument('--version', action='version', version='%(prog)s {}'.format(__version__))

    subparsers = parser.add_subparsers(description='Commands', dest='command')
    # work-around to make subparser required
    subparsers.required = True

    getaddress_parser = subparsers.add_parser('getaddress', help='Get the address of the signing key')
    getaddress_parser.set_defaults(func=getaddress_handler)

    getpublickey_parser = subparsers.add_parser('getpublickey', help='Get the public key of the signing key')
    getpublickey_parser.set_defaults(func=getpublickey_handler)

    signdata_parser = subparsers.add_parser('signdata', help='Sign a payload. The device may ask for confirmation')
    signdata_parser.add_argument('payload', help='The payload to sign')
    signdata_parser.set_defaults(func=signdata_handler)

    verify_parser = subparsers.add_parser('verifysignature', help='Verify a serialized signature. Does not need a device')
    verify_parser.add_argument('message', help='The message that was signed')
    verify_parser.add_argument('signature', help='The base64 serialized signature')
    verify_parser.set_defaults(func=verifysignature_handler)

    return parser

def process_commands(cli_args: List[str]) -> Any:
    parser = get_parser()
    args = parser.parse_args(cli_args)

    command = args.command
    result: Dict[str, Any] = {}

    # Setup debug logging
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    # Signature verification is done locally
    if command == 'verifysignature':
        with handle_errors(result=result, debug=args.debug):
            result = args.func(args)
        return result

    if not args.connector:
        return {'error': 'You must specify a connector for all commands except verifysignature', 'code': NO_CONNECTOR}

    path = args.path or DEFAULT_DERIVATION_PATH
    with handle_errors(result=result, code=BAD_ARGUMENT):
        if args.account is not None:
            path = get_derivation_path(args.account)
        signer = get_signer(args.connector, path, args.network)
    if 'error' in result:
        return result

    # Do the commands
    with handle_errors(result=result, debug=args.debug):
        result = args.func(args, signer)

    return result

def main() -> None:
    result = process_commands(sys.argv[1:])
    print(json.dumps(result))
