#!/usr/bin/env python3
"""
Takuzu 命令行入口

读取谜题文件，打印解析结果，校验并求解：
    python -m takuzu puzzle.txt
    python -m takuzu puzzle.txt --check-only

Puzzle files hold one row per line: '0', '1' and '-' for unknown cells,
separated by optional spaces.
"""

import argparse
import logging
import sys

from takuzu.src.errors import GridError
from takuzu.src.solver import Solver
from takuzu.src.validity_checker import ValidityChecker
from takuzu.utils.load_grid import load_grid

logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="takuzu", description="Validate and solve a Takuzu (binary) puzzle")
    parser.add_argument('path', help='谜题文件路径')
    parser.add_argument('--check-only', action='store_true', help='只校验，不求解')
    parser.add_argument('--all-violations', action='store_true', help='列出所有违规而不是第一个')
    parser.add_argument('--max-steps', type=int, default=None, help='求解步数上限')
    parser.add_argument('--log-level', type=str.upper, default='WARNING', choices=LOG_LEVELS, help='日志级别')
    return parser


def run(args) -> int:
    grid = load_grid(args.path)
    print(grid)
    print()

    checker = ValidityChecker(grid)
    if args.all_violations:
        violations = checker.violations()
        for violation in violations:
            print(f"Error: {violation}", file=sys.stderr)
        if violations:
            return 1
    else:
        checker.check()

    if args.check_only:
        print("Grid is valid")
        return 0

    solver = Solver(grid, max_steps=args.max_steps)
    solver.solve()
    print(grid)
    logger.info(f"Solved with {solver.assignments} assignments, {solver.backtracks} backtracks")
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        code = run(args)
    except GridError as e:
        print(f"Error: {e}", file=sys.stderr)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
