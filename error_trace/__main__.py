from dotenv import find_dotenv, load_dotenv
from setproctitle import setproctitle

from error_trace.cli import main as cli_main


def main() -> None:
    setproctitle("error-trace")
    load_dotenv(find_dotenv(usecwd=True))

    raise SystemExit(cli_main())


if __name__ == "__main__":
    main()
