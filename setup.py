# -*- coding: utf-8 -*-
from setuptools import setup

packages = \
['hwslib',
 'hwslib.devices']

modules = \
['hws']
install_requires = \
['ecdsa>=0.18,<1',
 'typing-extensions>=4.4,<5.0']

entry_points = \
{'console_scripts': ['hws = hwslib._cli:main']}

setup_kwargs = {
    'name': 'hws',
    'version': '0.1.0',
    'description': 'A library for signing with keys held on hardware devices',
    'long_description': "# Hardware Signer\n\nThe Hardware Signer is a Python library and command line tool for signing with Ed25519 keys held on a hardware device, such as the Sui application on a Ledger.\nThe private key never leaves the device. Python software can use the provided library (`hwslib`). Software in other languages can execute the `hws` tool.\n\nThe transport to the device is not part of this library. A connector, a callable returning a device connection, is supplied by the caller.\n\n## Usage\n\n```\n./hws.py --connector mypackage.transport:connect getaddress\n./hws.py --connector mypackage.transport:connect --account 1 signdata 0xdeadbeef\n./hws.py verifysignature 0xdeadbeef <base64 signature>\n```\n\nAll output will be in JSON form and sent to `stdout`.\n\n## Tests\n\n```\ncd test\n./run_tests.py\n```\n\n## License\n\nThis project is available under the MIT License.\n",
    'long_description_content_type': 'text/markdown',
    'author': 'The HWS developers',
    'packages': packages,
    'py_modules': modules,
    'install_requires': install_requires,
    'entry_points': entry_points,
    'python_requires': '>=3.8',
}


setup(**setup_kwargs)
