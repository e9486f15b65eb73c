"""主程序入口 - 解析表达式并求值"""
import argparse
import logging
import sys

from config.config import PARSER_CONFIG, SAMPLING_CONFIG, validate_config
from core import EquationError
from solver import PostfixParser
from utils import sample, find_roots

# 设置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main(args):
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    validate_config()

    try:
        solver = PostfixParser(args.expression, args.variable).parse()
    except (EquationError, ValueError) as e:
        logger.error(f"Cannot parse '{args.expression}': {e}")
        return 1

    if args.show_postfix:
        print(solver)

    values = args.value or []
    if not values and not args.range:
        print(solver.calculate())
    for value in values:
        print(f"{args.variable}={value}: {solver.calculate_for(value)}")

    if args.range:
        start, stop, num = args.range
        result = sample(solver, start, stop, int(num), solver.variable_symbol)
        logger.info(f"Sampled {len(result)} points on [{start}, {stop}]")
        if args.save_results:
            logger.info(f"Saving sampled values to {args.save_results}")
            result.to_csv(args.save_results, header=['value'])
        else:
            print(result.to_string())

    if args.roots:
        start, stop, num = args.range or (
            SAMPLING_CONFIG['start'], SAMPLING_CONFIG['stop'], SAMPLING_CONFIG['num'])
        for root in find_roots(solver, start, stop, int(num), variable_symbol=solver.variable_symbol):
            print(f"root: {root}")

    return 0


def build_arg_parser():
    parser = argparse.ArgumentParser(description="Single-variable equation solver")

    parser.add_argument(
        "expression",
        type=str,
        help="Expression to evaluate, e.g. 'sqrt(x)+1'"
    )
    parser.add_argument(
        "--value",
        type=float,
        action="append",
        help="Variable value to evaluate for (repeatable)"
    )
    parser.add_argument(
        "--variable",
        type=str,
        default=PARSER_CONFIG['variable_symbol'],
        help="Variable symbol (default: x)"
    )
    parser.add_argument(
        "--range",
        type=float,
        nargs=3,
        metavar=("START", "STOP", "NUM"),
        help="Sample the expression on NUM evenly spaced points"
    )
    parser.add_argument(
        "--roots",
        action="store_true",
        help="Search for roots on the sampling range"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Print the expression in Reverse Polish Notation"
    )
    parser.add_argument(
        "--save_results",
        type=str,
        default=None,
        help="Save the sampled range to a CSV file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


if __name__ == "__main__":
    args = build_arg_parser().parse_args()
    sys.exit(main(args))
