import argparse
import logging

from dotenv import find_dotenv, load_dotenv

from calculator.arithmetic import Arithmetic
from calculator.logging import setup_logging

logger = logging.getLogger(__name__)

parser = argparse.ArgumentParser(prog="calculator", description="Calculator CLI. Prints a sample addition.")


def main(argv: list[str] | None = None) -> int:
    parser.parse_args(argv)
    # .env in the working directory may set CALCULATOR_LOG_LEVEL
    load_dotenv(find_dotenv(usecwd=True))
    setup_logging()

    x = 5
    y = 3
    result = Arithmetic.add(x, y)
    logger.debug("Sample addition %s + %s -> %s", x, y, result)

    print(f"Adding {x} + {y} = {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
