"""Run the relay with uvicorn: ``python -m mailrelay``."""

import uvicorn

from .core import HOST, PORT


def main() -> None:
    uvicorn.run("mailrelay.app:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
