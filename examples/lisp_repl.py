import argparse
import logging

from miniparc.Combinators import trace
from miniparc.Driver import MainParser
from miniparc.Lisp import expression


def main():
    arg_parser = argparse.ArgumentParser(description="Parse single lisp lines read from stdin.")
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="trace the parser at DEBUG level")
    args = arg_parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    root = expression()
    if args.verbose:
        root = trace("expression", root)

    while True:
        print("Please enter a single lisp line to parse it:")
        try:
            line = input()
        except EOFError:
            break
        if line == "exit":
            break

        result, diagnostic = MainParser(line, root).parse()
        if diagnostic is not None:
            print(diagnostic)
        else:
            print(result)


if __name__ == "__main__":
    main()
