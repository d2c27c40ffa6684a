#!/usr/bin/env python3
# Copyright (c) 2026 The HWS developers
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

"""Stub device connections backed by an in-memory Ed25519 key"""

import threading
import time

from ecdsa import SigningKey
from ecdsa.curves import Ed25519

from hwslib.connection import DeviceConnection
from hwslib.errors import DeviceConnectionError

DEFAULT_SEED = bytes(range(32))


class StubConnection(DeviceConnection):
    def __init__(self, seed=DEFAULT_SEED, public_key=None, signature=None, delay=0):
        self.signing_key = SigningKey.from_string(seed, curve=Ed25519)
        if public_key is None:
            public_key = self.signing_key.verifying_key.to_string()
        self.public_key = public_key
        self.signature = signature
        self.delay = delay
        self.requests = []
        self.in_flight = 0
        self.max_in_flight = 0
        self._lock = threading.Lock()

    def _enter(self, request):
        with self._lock:
            self.requests.append(request)
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        if self.delay:
            time.sleep(self.delay)

    def _leave(self):
        with self._lock:
            self.in_flight -= 1

    def fetch_public_key(self, path):
        self._enter(('fetch_public_key', path))
        try:
            return {'public_key': self.public_key}
        finally:
            self._leave()

    def sign(self, path, payload):
        self._enter(('sign', path, payload))
        try:
            if self.signature is not None:
                return {'signature': self.signature}
            return {'signature': self.signing_key.sign(payload)}
        finally:
            self._leave()


class StubConnector(object):
    """Counts connector invocations. Fails with ``failure`` for the first ``failures`` calls."""

    def __init__(self, connection=None, failures=0, failure=None, delay=0):
        self.connection = connection if connection is not None else StubConnection()
        self.failures = failures
        self.failure = failure if failure is not None else DeviceConnectionError('device not found')
        self.delay = delay
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self):
        with self._lock:
            self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        if self.failures > 0:
            self.failures -= 1
            raise self.failure
        return self.connection


class StatusWordError(Exception):
    def __init__(self, sw):
        super().__init__('Status word 0x{:04x}'.format(sw))
        self.sw = sw


def connect():
    return StubConnection()


def connect_ones():
    return StubConnection(public_key=b'\x01' * 32)


def connect_missing():
    raise OSError('No device found')
