from eupoly import main, ParseError
import argparse

parser = argparse.ArgumentParser(prog='eupoly',
        description="Evaluate, differentiate and integrate a polynomial of one variable.",
        epilog='Put "--" before an expression which starts with a minus sign.')
parser.add_argument('expression',
        metavar='EXPRESSION',
        help='polynomial of the form "ax^n + bx^m + ... + z"')
parser.add_argument('--variable', type=str, default='x',
        help="name of the variable, a single letter (default: x)")
parser.add_argument('-e', '--eval', type=float, action='append', default=[],
        dest='values', metavar='VALUE',
        help="evaluate the polynomial at this value, may be repeated")
parser.add_argument('-d', '--derivative', type=int, default=None,
        metavar='ORDER',
        help="print the derivative of this order")
parser.add_argument('--integral', action='store_true',
        help="print the antiderivative and the definite integral over the interval")
parser.add_argument('--interval', type=float, nargs=2, default=[0.0, 1.0],
        metavar=('A', 'B'),
        help="interval for --integral and --plot (default: 0 1)")
parser.add_argument('--player', type=str, default=None,
        help="print the polynomial as an expected utility for this player")
parser.add_argument('--strategy', type=str, default=None,
        help="strategy label for --player (default: the variable's index)")
parser.add_argument('--plot', action='store_true',
        help="plot the polynomial over the interval")
parser.add_argument('-v', '--verbose', action='store_true',
        help="")
args = parser.parse_args()

if args.strategy is not None and args.player is None:
    parser.error('Argument --strategy requires --player.')
if args.derivative is not None and args.derivative < 0:
    parser.error('Argument --derivative must be non-negative.')
try:
    main(args.expression, args.variable, args.values, args.derivative, args.integral,
            args.interval, args.player, args.strategy, show_plot=args.plot, verbose=args.verbose)
except ParseError as error:
    parser.error(str(error))
