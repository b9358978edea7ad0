"""Allow ``python -m touch_dictionary``."""

from touch_dictionary.presentation.cli.app import run

if __name__ == "__main__":
    run()
