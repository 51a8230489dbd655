#!/usr/bin/env python3

import logging
import argparse
import sys

from bignum.bigrat import BigRat
from bignum.errors import BigNumError


def run_power(base, exponent):
    logging.info('computing (%s) ** (%s)', base, exponent)
    result = base ** exponent
    print(result)
    if not result.is_integer():
        print('numer:', result.numer)
        print('denom:', result.denom)
    return result


if __name__ == "__main__":
    argparser = argparse.ArgumentParser(formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    argparser.add_argument('base', type=str, help='rational base, e.g., "-2/3"')
    argparser.add_argument('exponent', type=str, help='integer exponent, e.g., "64"')
    argparser.add_argument('--verbose', '-v', action='count', default=0, help='loglevel (0=warning, 1=info, 2=debug)')
    args = argparser.parse_args()

    if args.verbose == 1:
        loglevel = logging.INFO
    elif args.verbose >= 2:
        loglevel = logging.DEBUG
    else:
        loglevel = logging.WARNING
    logging.basicConfig(
        level=loglevel,
        format='%(asctime)s:%(levelname)s:%(name)s:%(message)s',
    )
    logging.info('args: %s', args)  # call after loglevel is set!

    try:
        run_power(BigRat.parse(args.base), BigRat.parse(args.exponent))
    except BigNumError as exc:
        logging.error('%s: %s', type(exc).__name__, exc)
        sys.exit(1)
    except ValueError as exc:
        argparser.error(str(exc))
