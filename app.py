#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import config
from ui.main_window import MainWindow


def main():
    config.configure_logging()

    app = MainWindow()
    app.run()


if __name__ == "__main__":
    main()
