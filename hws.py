#! /usr/bin/env python3

# Hardware signer interaction script

if __name__ == '__main__':
    from hwslib._cli import main
    main()
else:
    raise ImportError('hws is not importable. Import hwslib instead')
