import argparse, logging

from braket import spin


def main(args):
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    u, d = spin.up(), spin.down()
    l, r = spin.left(), spin.right()
    i, o = spin.in_(), spin.out()

    print('\nUp spin state vector:', u)
    print('\nDown spin state vector:', d)
    print('\nLeft spin state vector:', l)
    print('\nRight spin state vector:', r)
    print('\nIn spin state vector:', i)
    print('\nOut spin state vector:', o)

    print('\n<o|u><u|o>:', (o.to_bra() * u) * (u.to_bra() * o))

    sigma_z, sigma_x, sigma_y = spin.sigma_z(), spin.sigma_x(), spin.sigma_y()

    print('\nSpin operator (z):', sigma_z)
    print('\nSpin operator (x):', sigma_x)
    print('\nSpin operator (y):', sigma_y)

    print('\nSz|u>:', sigma_z * u)
    print('\nSz|d>:', sigma_z * d)
    print('\nSz|r>:', sigma_z * r)

    if args.normalize:
        for name, ket in [('l', l), ('r', r), ('i', i), ('o', o)]:
            ket.normalize()
            print(f'\nnormalized |{name}>:', ket)


def build_cli_parser():
    parser = argparse.ArgumentParser()

    parser.add_argument('-n', '--normalize', help='also print the normalized superposition states', action='store_true')
    parser.add_argument('-v', '--verbose', help='log debug messages', action='store_true')

    return parser


if __name__ == '__main__':
    parser = build_cli_parser()
    main(parser.parse_args())
