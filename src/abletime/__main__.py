"""Entry point: python -m abletime"""

from .cli import app


if __name__ == "__main__":
    app(prog_name="abletime")
