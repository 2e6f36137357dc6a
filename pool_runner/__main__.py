import sys

from pool_runner.cli.run import main

if __name__ == "__main__":
    sys.exit(main())
