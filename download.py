#!/usr/bin/env python3
import logging

from downloadcheck.config import DownloadConfig
from downloadcheck.downloader import Downloader


def main() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(threadName)s %(message)s",
    )
    Downloader(DownloadConfig()).run()


if __name__ == "__main__":
    main()
