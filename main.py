try:
    from cli.app import main as _cli_main
except ModuleNotFoundError:
    # Fallback: ensure project root is on sys.path when invoked via console_script
    import os
    import sys

    sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
    from cli.app import main as _cli_main


def main():
    """Entry point for the fp CLI. Delegates to cli.app:main."""
    _cli_main()


if __name__ == "__main__":
    main()
